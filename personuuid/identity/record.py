"""IdentityNumber: the validated, immutable identity record.

A record exists only if its number and serial fit their BCD fields and
the check digit holds. Fresh construction from a raw number also
classifies it and validates the embedded birth date; a record decoded
from a person UUID keeps the type it was encoded with.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from functools import total_ordering
from typing import assert_never, final

from personuuid.core.calendar import is_valid_date
from personuuid.core.errors import (
    ChecksumMismatchError,
    IdentityError,
    MalformedNumberError,
    UnclassifiableNumberError,
)
from personuuid.core.luhn import check_digit_of
from personuuid.core.result import Err, Ok
from personuuid.core.types import IdType
from personuuid.identity.classifier import (
    SAMNR_DAY_OFFSET,
    classify,
    day_of,
    month_of,
    year_of,
)
from personuuid.infra.config import MAX_NUMBER, MAX_SERIAL


def _is_int(value: object) -> bool:
    # bool is a subclass of int
    return isinstance(value, int) and not isinstance(value, bool)


def _check_structure(
    number: object, serial: object, source: str,
) -> Ok[None] | Err[IdentityError]:
    """Range and check digit validation shared by every factory."""
    if not _is_int(number) or not 0 <= number <= MAX_NUMBER:  # type: ignore[operator]
        return Err(MalformedNumberError(
            message=f"Identity number must be an int in 0..{MAX_NUMBER}, got {number!r}",
            code="MALFORMED_NUMBER",
            source=source,
            field="number",
            actual_value=repr(number),
        ))
    if not _is_int(serial) or not 0 <= serial <= MAX_SERIAL:  # type: ignore[operator]
        return Err(MalformedNumberError(
            message=f"Identity serial must be an int in 0..{MAX_SERIAL}, got {serial!r}",
            code="MALFORMED_NUMBER",
            source=source,
            field="serial",
            actual_value=repr(serial),
        ))
    assert isinstance(number, int)
    expected = check_digit_of(number)
    if number % 10 != expected:
        return Err(ChecksumMismatchError(
            message=f"Check digit mismatch in identity {number}, expected {expected}",
            code="CHECKSUM_MISMATCH",
            source=source,
            number=number,
            expected=expected,
            actual=number % 10,
        ))
    return Ok(None)


@final
@total_ordering
@dataclass(frozen=True, slots=True)
class IdentityNumber:
    """A Swedish identity number with business serial and category.

    Ordered by type code, then number, then serial.

    Direct construction checks ranges, the check digit and that id_type
    is an IdType, but does not derive id_type from the digits. Use
    from_number or create for fresh input; from_encoded trusts the type
    stored in a person UUID.
    """

    number: int
    serial: int
    id_type: IdType

    def __post_init__(self) -> None:
        match _check_structure(self.number, self.serial, "identity.record.IdentityNumber"):
            case Err(e):
                raise TypeError(e.message)
            case Ok(_):
                pass
        if not isinstance(self.id_type, IdType):
            raise TypeError(
                f"IdentityNumber.id_type must be IdType, got {type(self.id_type).__name__}"
            )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IdentityNumber):
            return NotImplemented
        return (self.id_type, self.number, self.serial) < (
            other.id_type, other.number, other.serial,
        )

    # --- factories ---

    @staticmethod
    def from_number(number: int, serial: int = 0) -> Ok[IdentityNumber] | Err[IdentityError]:
        """Validate a raw number and derive its type from the digits."""
        return (
            _check_structure(number, serial, "identity.record.IdentityNumber.from_number")
            .bind(lambda _: classify(number))
            .map(lambda id_type: IdentityNumber(number=number, serial=serial, id_type=id_type))
        )

    @staticmethod
    def create(
        number: int, serial: int, id_type: IdType,
    ) -> Ok[IdentityNumber] | Err[IdentityError]:
        """Validate a raw number against an explicitly claimed type."""
        if not isinstance(id_type, IdType):
            return Err(MalformedNumberError(
                message=f"Identity type must be IdType, got {id_type!r}",
                code="MALFORMED_NUMBER",
                source="identity.record.IdentityNumber.create",
                field="id_type",
                actual_value=repr(id_type),
            ))
        match IdentityNumber.from_number(number, serial):
            case Err() as e:
                return e
            case Ok(record) if record.id_type != id_type:
                return Err(UnclassifiableNumberError(
                    message=(
                        f"Identity number {number} is {record.id_type.name}, "
                        f"not {id_type.name}"
                    ),
                    code="UNCLASSIFIABLE_NUMBER",
                    source="identity.record.IdentityNumber.create",
                    number=number,
                ))
            case Ok(record):
                return Ok(record)

    @staticmethod
    def from_encoded(
        number: int, serial: int, id_type: IdType,
    ) -> Ok[IdentityNumber] | Err[IdentityError]:
        """Rebuild a record from decoded fields; the type is trusted."""
        return _check_structure(
            number, serial, "identity.record.IdentityNumber.from_encoded",
        ).map(lambda _: IdentityNumber(number=number, serial=serial, id_type=id_type))

    # --- digit groups ---

    @property
    def year(self) -> int:
        """Century and year digits; 0 for 10-digit numbers."""
        return year_of(self.number)

    @property
    def month(self) -> int:
        return month_of(self.number)

    @property
    def day(self) -> int:
        """Day digits as written, i.e. still offset by 60 for SAMNR."""
        return day_of(self.number)

    @property
    def check_digit(self) -> int:
        return self.number % 10

    @property
    def birth_date(self) -> date | None:
        """Embedded birth date for PERSNR and SAMNR, else None."""
        match self.id_type:
            case IdType.ORGNR | IdType.GDNR:
                return None
            case IdType.PERSNR:
                day = self.day
            case IdType.SAMNR:
                day = self.day - SAMNR_DAY_OFFSET
            case _ as unreachable:  # pragma: no cover
                assert_never(unreachable)
        if self.year < 1 or not is_valid_date(self.year, self.month, day):
            return None
        return date(self.year, self.month, day)

    @property
    def formatted(self) -> str:
        """Human form: NNNNNN-NNNN, or YYYYMMDD-NNNN with a century."""
        if self.number < 10**10:
            digits = f"{self.number:010d}"
            return f"{digits[:6]}-{digits[6:]}"
        digits = f"{self.number:012d}"
        return f"{digits[:8]}-{digits[8:]}"
