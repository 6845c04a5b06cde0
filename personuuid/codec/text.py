"""Text parser: human-entered identity numbers and person UUID strings.

parse is the single entry point for textual input. Accepted shapes:

    NNNNNNNNNN / YYYYNNNNNNNN     10 or 12 digits
    NNNNNN-NNNN / YYYYMMDD-NNNN   6+4 or 8+4 digits
    xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx   person UUID

Raw numbers go through full validation (classification, check digit,
birth date). UUID strings go through the binary codec.
"""

from __future__ import annotations

import logging
import re
import uuid
from collections.abc import Iterable

from personuuid.codec.binary import from_uuid, to_uuid
from personuuid.core.errors import IdentityError, UnparsableTextError
from personuuid.core.result import Err, Ok, sequence
from personuuid.identity.record import IdentityNumber
from personuuid.infra.config import DEFAULT_REVISION, SchemeRevision

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"\d{10}|\d{12}", re.ASCII)
_SEPARATED_RE = re.compile(r"(\d{6}|\d{8})-(\d{4})", re.ASCII)
_UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def _unparsable(text: str) -> Err[UnparsableTextError]:
    return Err(UnparsableTextError(
        message=f"Not an identity number or person UUID: {text!r}",
        code="UNPARSABLE_TEXT",
        source="codec.text.parse",
        text=text,
    ))


def _parse(
    text: str, revision: SchemeRevision,
) -> Ok[IdentityNumber] | Err[IdentityError]:
    if not isinstance(text, str):
        return _unparsable(repr(text))

    if _DIGITS_RE.fullmatch(text):
        return IdentityNumber.from_number(int(text))

    m = _SEPARATED_RE.fullmatch(text)
    if m is not None:
        return IdentityNumber.from_number(int(m.group(1) + m.group(2)))

    if _UUID_RE.fullmatch(text):
        return from_uuid(uuid.UUID(text), revision)

    return _unparsable(text)


def parse(
    text: str, revision: SchemeRevision = DEFAULT_REVISION,
) -> Ok[IdentityNumber] | Err[IdentityError]:
    """Parse an identity number or person UUID string.

    Total: always returns Ok or Err, never raises on bad input.
    """
    result = _parse(text, revision)
    if isinstance(result, Err):
        logger.debug("Rejected identity text %r (%s)", text, result.error.code)
    return result


def parse_many(
    texts: Iterable[str], revision: SchemeRevision = DEFAULT_REVISION,
) -> Ok[list[IdentityNumber]] | Err[IdentityError]:
    """Parse every text, stopping at the first one that fails.

    The error message is prefixed with the position of the failing text.
    """
    return sequence(
        parse(t, revision).map_err(lambda e: e.with_context(f"item {i}"))
        for i, t in enumerate(texts)
    )


def format_uuid(
    record: IdentityNumber, revision: SchemeRevision = DEFAULT_REVISION,
) -> str:
    """Canonical person UUID text: lowercase hex, 8-4-4-4-12."""
    return str(to_uuid(record, revision))
