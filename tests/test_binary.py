"""Tests for personuuid.codec.binary -- person UUID bit layout."""

from __future__ import annotations

import logging
import uuid

import pytest
from hypothesis import given
from hypothesis import strategies as st

from personuuid.codec.binary import (
    decode,
    encode,
    from_uuid,
    is_conformant,
    is_person_uuid,
    to_uuid,
)
from personuuid.core.errors import (
    ChecksumMismatchError,
    NonConformantBinaryError,
    UnclassifiableNumberError,
)
from personuuid.core.luhn import luhn
from personuuid.core.result import Err, Ok, unwrap
from personuuid.core.types import IdType
from personuuid.identity.record import IdentityNumber
from personuuid.infra.config import (
    REVISION_TYPED,
    REVISION_UNTYPED,
    SchemeRevision,
)


def _with_check(prefix: int) -> int:
    return prefix * 10 + luhn(prefix % 10**9)


def _halves(text: str) -> tuple[int, int]:
    n = uuid.UUID(text).int
    return n >> 64, n & 0xFFFF_FFFF_FFFF_FFFF


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

_serials = st.integers(min_value=0, max_value=999)


@st.composite
def orgnr_numbers(draw: st.DrawFn) -> int:
    first = draw(st.integers(min_value=1, max_value=9))
    second = draw(st.integers(min_value=0, max_value=9))
    group = draw(st.integers(min_value=20, max_value=99))
    rest = draw(st.integers(min_value=0, max_value=99_999))
    payload = int(f"{first}{second}{group:02d}{rest:05d}")
    prefix = draw(st.sampled_from([0, 16 * 10**9]))
    return _with_check(prefix + payload)


@st.composite
def persnr_numbers(draw: st.DrawFn) -> int:
    from datetime import date

    d = draw(st.dates(min_value=date(1800, 1, 1), max_value=date(2099, 12, 31)))
    seq = draw(st.integers(min_value=0, max_value=999))
    return _with_check(int(f"{d.year:04d}{d.month:02d}{d.day:02d}{seq:03d}"))


@st.composite
def samnr_numbers(draw: st.DrawFn) -> int:
    from datetime import date

    d = draw(st.dates(max_value=date(2099, 12, 31)))
    seq = draw(st.integers(min_value=0, max_value=999))
    return _with_check(int(f"{d.year:04d}{d.month:02d}{d.day + 60:02d}{seq:03d}"))


@st.composite
def gdnr_numbers(draw: st.DrawFn) -> int:
    rest = draw(st.integers(min_value=0, max_value=999_999))
    return _with_check(302 * 10**6 + rest)


@st.composite
def identity_numbers(draw: st.DrawFn) -> IdentityNumber:
    number = draw(st.one_of(
        orgnr_numbers().filter(lambda n: n // 10**7 != 302),
        persnr_numbers(),
        samnr_numbers(),
        gdnr_numbers(),
    ))
    return unwrap(IdentityNumber.from_number(number, draw(_serials)))


_revisions = st.sampled_from([REVISION_TYPED, REVISION_UNTYPED])


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


class TestEncode:
    def test_orgnr(self, orgnr: IdentityNumber) -> None:
        assert str(to_uuid(orgnr)) == "00556809-9963-1000-9000-d59a20d06c1a"

    def test_persnr_serial_is_bcd(self, persnr: IdentityNumber) -> None:
        assert str(to_uuid(persnr)) == "19410617-7753-1099-9001-d59a20d06c1a"

    def test_samnr(self, samnr: IdentityNumber) -> None:
        assert str(to_uuid(samnr)) == "19701063-2391-1999-9002-d59a20d06c1a"

    def test_gdnr(self, gdnr: IdentityNumber) -> None:
        assert str(to_uuid(gdnr)) == "00302000-2568-1003-9003-d59a20d06c1a"

    def test_halves(self, orgnr: IdentityNumber) -> None:
        assert encode(orgnr) == (0x0055_6809_9963_1000, 0x9000_D59A_20D0_6C1A)

    def test_untyped_revision_leaves_type_out(self, persnr: IdentityNumber) -> None:
        text = str(to_uuid(persnr, REVISION_UNTYPED))
        assert text == "19410617-7753-1099-9000-d49a20d06c1a"

    def test_version_and_variant_are_rfc_shaped(self, samnr: IdentityNumber) -> None:
        u = to_uuid(samnr)
        assert u.version == 1
        assert u.variant == uuid.RFC_4122

    @given(rec=identity_numbers(), revision=_revisions)
    def test_halves_are_64_bit(self, rec: IdentityNumber, revision: SchemeRevision) -> None:
        high, low = encode(rec, revision)
        assert 0 <= high < 1 << 64
        assert 0 <= low < 1 << 64

    @given(rec=identity_numbers())
    def test_hex_text_reads_as_number(self, rec: IdentityNumber) -> None:
        text = str(to_uuid(rec))
        assert text[:8] + text[9:13] == f"{rec.number:012d}"
        assert text[15:18] == f"{rec.serial:03d}"


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class TestDecode:
    @pytest.mark.parametrize(
        ("text", "number", "id_type"),
        [
            ("00556809-9963-1000-9000-d59a20d06c1a", 5568099963, IdType.ORGNR),
            ("19410617-7753-1000-9001-d59a20d06c1a", 194106177753, IdType.PERSNR),
            ("19701063-2391-1000-9002-d59a20d06c1a", 197010632391, IdType.SAMNR),
            ("00302000-2568-1000-9003-d59a20d06c1a", 3020002568, IdType.GDNR),
        ],
    )
    def test_typed(self, text: str, number: int, id_type: IdType) -> None:
        assert decode(*_halves(text)) == Ok(IdentityNumber(number, 0, id_type))

    def test_serial(self) -> None:
        rec = unwrap(decode(*_halves("19410617-7753-1099-9001-d59a20d06c1a")))
        assert rec.serial == 99

    def test_typed_revision_trusts_type_code(self) -> None:
        rec = unwrap(decode(*_halves("19410617-7753-1000-9000-d59a20d06c1a")))
        assert rec.id_type is IdType.ORGNR

    def test_untyped_revision_derives_type(self) -> None:
        halves = _halves("19701063-2391-1000-9000-d49a20d06c1a")
        rec = unwrap(decode(*halves, revision=REVISION_UNTYPED))
        assert rec.id_type is IdType.SAMNR

    def test_untyped_revision_rejects_type_nybble(self) -> None:
        halves = _halves("19701063-2391-1000-9002-d49a20d06c1a")
        assert not is_conformant(*halves, revision=REVISION_UNTYPED)

    def test_untyped_revision_unclassifiable_number(self) -> None:
        # 17500101-1237: check digit holds, century 17 matches no type
        number = _with_check(17500101123)
        text = f"{number:012d}"
        halves = _halves(f"{text[:8]}-{text[8:]}-1000-9000-d49a20d06c1a")
        result = decode(*halves, revision=REVISION_UNTYPED)
        assert isinstance(result, Err)
        assert isinstance(result.error, UnclassifiableNumberError)

    def test_dates_are_not_revalidated(self) -> None:
        rec = unwrap(decode(*_halves("19990230-1234-1000-9001-d59a20d06c1a")))
        assert rec.number == 199902301234

    def test_check_digit_mismatch(self) -> None:
        result = decode(*_halves("00556809-9964-1000-9000-d59a20d06c1a"))
        assert isinstance(result, Err)
        assert isinstance(result.error, ChecksumMismatchError)

    @pytest.mark.parametrize(
        ("text", "reason"),
        [
            ("00302000-2568-1000-9003-d49a20d06c1a", "node id"),
            ("00302000-2568-1000-9003-d59a20d06c1b", "node id"),
            ("00302000-2568-2000-9003-d59a20d06c1a", "version"),
            ("00302000-2568-1000-8003-d59a20d06c1a", "variant"),
            ("00302000-2568-1000-9103-d59a20d06c1a", "reserved"),
            ("00302000-2568-1000-9013-d59a20d06c1a", "reserved"),
            ("00302000-2568-1000-9004-d59a20d06c1a", "type code"),
            ("0a302000-2568-1000-9003-d59a20d06c1a", "identity number"),
            ("00302000-2568-100a-9003-d59a20d06c1a", "serial"),
            ("b5097d86-e118-11e7-80c1-9a214cf093ae", "variant"),
            ("5bd4bb5a-d57d-4612-9b8f-f0ad3154cfbd", "version"),
            ("00000000-0000-0000-0000-000000000000", "version"),
        ],
    )
    def test_non_conformant(self, text: str, reason: str) -> None:
        result = decode(*_halves(text))
        match result:
            case Err(NonConformantBinaryError() as e):
                assert reason in e.reason
            case _:
                pytest.fail(f"Expected NonConformantBinaryError, got {result}")

    @pytest.mark.parametrize(
        ("high", "low"),
        [(-1, 0x9000_D59A_20D0_6C1A), (1 << 64, 0x9000_D59A_20D0_6C1A), (0x0055_6809_9963_1000, -1)],
    )
    def test_rejects_words_outside_64_bits(self, high: int, low: int) -> None:
        assert not is_conformant(high, low)


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

# version nybble of high; variant, reserved and node bits of low
_FIXED_HIGH_BITS = tuple(range(12, 16))
_FIXED_LOW_BITS = tuple(range(0, 48)) + tuple(range(52, 64))


class TestProperties:
    @given(rec=identity_numbers())
    def test_round_trip_typed(self, rec: IdentityNumber) -> None:
        assert decode(*encode(rec)) == Ok(rec)

    @given(rec=identity_numbers())
    def test_round_trip_untyped_rederives_type(self, rec: IdentityNumber) -> None:
        assert decode(*encode(rec, REVISION_UNTYPED), revision=REVISION_UNTYPED) == Ok(rec)

    @given(rec=identity_numbers())
    def test_uuid_round_trip(self, rec: IdentityNumber) -> None:
        assert from_uuid(to_uuid(rec)) == Ok(rec)

    @given(rec=identity_numbers(), bit=st.sampled_from(_FIXED_HIGH_BITS), revision=_revisions)
    def test_flipping_version_bit_breaks_conformance(
        self, rec: IdentityNumber, bit: int, revision: SchemeRevision,
    ) -> None:
        high, low = encode(rec, revision)
        assert not is_conformant(high ^ (1 << bit), low, revision)

    @given(rec=identity_numbers(), bit=st.sampled_from(_FIXED_LOW_BITS), revision=_revisions)
    def test_flipping_fixed_low_bit_breaks_conformance(
        self, rec: IdentityNumber, bit: int, revision: SchemeRevision,
    ) -> None:
        high, low = encode(rec, revision)
        assert not is_conformant(high, low ^ (1 << bit), revision)

    @given(rec=identity_numbers())
    def test_revisions_do_not_accept_each_other(self, rec: IdentityNumber) -> None:
        assert not is_person_uuid(to_uuid(rec, REVISION_TYPED), REVISION_UNTYPED)
        assert not is_person_uuid(to_uuid(rec, REVISION_UNTYPED), REVISION_TYPED)

    @given(value=st.uuids(version=4))
    def test_random_uuid4_is_never_a_person_uuid(self, value: uuid.UUID) -> None:
        assert not is_person_uuid(value)

    @given(high=st.integers(0, 2**64 - 1), low=st.integers(0, 2**64 - 1))
    def test_is_conformant_matches_decode(self, high: int, low: int) -> None:
        assert is_conformant(high, low) == isinstance(decode(high, low), Ok)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


class TestRejectionLogging:
    @pytest.mark.parametrize(
        ("text", "revision", "code"),
        [
            ("00556809-9963-2000-9000-d59a20d06c1a", REVISION_TYPED, "NON_CONFORMANT_BINARY"),
            ("00556809-9964-1000-9000-d59a20d06c1a", REVISION_TYPED, "CHECKSUM_MISMATCH"),
            ("17500101-1237-1000-9000-d49a20d06c1a", REVISION_UNTYPED, "UNCLASSIFIABLE_NUMBER"),
        ],
    )
    def test_every_rejection_is_logged(
        self,
        caplog: pytest.LogCaptureFixture,
        text: str,
        revision: SchemeRevision,
        code: str,
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="personuuid.codec.binary"):
            result = decode(*_halves(text), revision=revision)
        assert isinstance(result, Err)
        assert result.error.code == code
        assert code in caplog.text

    def test_success_is_not_logged(
        self, caplog: pytest.LogCaptureFixture, orgnr: IdentityNumber,
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="personuuid.codec.binary"):
            decode(*encode(orgnr))
        assert caplog.records == []
