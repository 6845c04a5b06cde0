"""Binary codec: IdentityNumber <-> the two 64-bit halves of a person UUID.

    iiiiiiii-iiii-1nnn-9xxt-dddddddddddd

    i  identity number, one decimal digit per nybble (time_low, time_mid)
    1  version nybble
    n  serial number, one decimal digit per nybble (time_hi)
    9  variant 10x with the lsb of N forced to 1
    x  reserved, must be zero
    t  type code (typed revision only, else zero)
    d  fixed node id of the revision

encode(record) -> (high, low): total.
decode(high, low) -> Result[IdentityNumber, IdentityError].
is_conformant(high, low) -> bool.
"""

from __future__ import annotations

import logging
import uuid

from personuuid.core.bcd import decode_digits, encode_digits
from personuuid.core.errors import IdentityError, NonConformantBinaryError
from personuuid.core.result import Err, Ok
from personuuid.core.types import IdType
from personuuid.identity.classifier import classify
from personuuid.identity.record import IdentityNumber
from personuuid.infra.config import (
    CLOCK_SEQ_RESERVED,
    DEFAULT_REVISION,
    HIGH_MASK,
    HIGH_RESERVED,
    NODE_MASK,
    NUMBER_DIGITS,
    NUMBER_SHIFT,
    SERIAL_DIGITS,
    SERIAL_MASK,
    TYPE_MASK,
    TYPE_SHIFT,
    WORD_MASK,
    SchemeRevision,
)

logger = logging.getLogger(__name__)

_CLOCK_SEQ_HI_MASK: int = 0xF << 60
_CLOCK_SEQ_RESERVED_MASK: int = 0xFF << 52


def encode(
    record: IdentityNumber, revision: SchemeRevision = DEFAULT_REVISION,
) -> tuple[int, int]:
    """Assemble (high, low) for a validated record."""
    high = (
        (encode_digits(record.number, NUMBER_DIGITS) << NUMBER_SHIFT)
        | HIGH_RESERVED
        | encode_digits(record.serial, SERIAL_DIGITS)
    )
    low = revision.low_reserved
    if revision.carries_type:
        low |= int(record.id_type) << TYPE_SHIFT
    return high, low


def _reject(high: int, low: int, reason: str) -> Err[NonConformantBinaryError]:
    return Err(NonConformantBinaryError(
        message=f"Not a person UUID: {reason}",
        code="NON_CONFORMANT_BINARY",
        source="codec.binary.decode",
        high=high,
        low=low,
        reason=reason,
    ))


def _check_layout(high: int, low: int, revision: SchemeRevision) -> str | None:
    """Return why (high, low) breaks the fixed bits, or None if it does not."""
    if not 0 <= high <= WORD_MASK or not 0 <= low <= WORD_MASK:
        return "halves must be unsigned 64-bit words"
    if high & HIGH_MASK != HIGH_RESERVED:
        return f"version nybble is {(high & HIGH_MASK) >> 12:#x}, expected 0x1"
    if low & _CLOCK_SEQ_HI_MASK != CLOCK_SEQ_RESERVED:
        return f"variant nybble is {low >> 60:#x}, expected 0x9"
    if low & _CLOCK_SEQ_RESERVED_MASK:
        return "reserved clock_seq bits are not zero"
    if low & NODE_MASK != revision.node_id:
        return (
            f"node id {low & NODE_MASK:012x} does not match "
            f"{revision.name} revision {revision.node_id:012x}"
        )
    if not revision.carries_type and low & TYPE_MASK:
        return f"type nybble must be zero in the {revision.name} revision"
    return None


def _digit_field(word: int, digit_count: int, name: str) -> Ok[int] | Err[str]:
    return decode_digits(word, digit_count).map_err(lambda e: f"{name}: {e}")


def _decode(
    high: int, low: int, revision: SchemeRevision,
) -> Ok[IdentityNumber] | Err[IdentityError]:
    reason = _check_layout(high, low, revision)
    if reason is not None:
        return _reject(high, low, reason)

    fields = _digit_field(high >> NUMBER_SHIFT, NUMBER_DIGITS, "identity number").bind(
        lambda number: _digit_field(high & SERIAL_MASK, SERIAL_DIGITS, "serial").map(
            lambda serial: (number, serial)
        )
    )
    match fields:
        case Err(reason):
            return _reject(high, low, reason)
        case Ok((number, serial)):
            pass

    if revision.carries_type:
        code = (low & TYPE_MASK) >> TYPE_SHIFT
        if code > max(IdType):
            return _reject(high, low, f"type code {code} is not 0..{int(max(IdType))}")
        id_type = IdType(code)
    else:
        match classify(number, check_dates=False):
            case Err() as e:
                return e
            case Ok(derived):
                id_type = derived

    return IdentityNumber.from_encoded(number, serial, id_type)


def decode(
    high: int, low: int, revision: SchemeRevision = DEFAULT_REVISION,
) -> Ok[IdentityNumber] | Err[IdentityError]:
    """Validate the layout of (high, low) and extract the identity record.

    Birth dates are not re-validated: an identity accepted when it was
    encoded stays decodable. Every rejection is logged at DEBUG.
    """
    result = _decode(high, low, revision)
    if isinstance(result, Err):
        logger.debug(
            "Rejected person UUID %016x%016x (%s): %s",
            high, low, result.error.code, result.error.message,
        )
    return result


def is_conformant(
    high: int, low: int, revision: SchemeRevision = DEFAULT_REVISION,
) -> bool:
    return isinstance(decode(high, low, revision), Ok)


# ---------------------------------------------------------------------------
# uuid.UUID adapters
# ---------------------------------------------------------------------------


def to_uuid(
    record: IdentityNumber, revision: SchemeRevision = DEFAULT_REVISION,
) -> uuid.UUID:
    high, low = encode(record, revision)
    return uuid.UUID(int=(high << 64) | low)


def from_uuid(
    value: uuid.UUID, revision: SchemeRevision = DEFAULT_REVISION,
) -> Ok[IdentityNumber] | Err[IdentityError]:
    return decode(value.int >> 64, value.int & WORD_MASK, revision)


def is_person_uuid(
    value: uuid.UUID, revision: SchemeRevision = DEFAULT_REVISION,
) -> bool:
    """True if value is a person UUID of the given revision."""
    return is_conformant(value.int >> 64, value.int & WORD_MASK, revision)
