"""Error value hierarchy: no codec function raises for bad input.

Every error is a frozen dataclass value that can be pattern-matched,
serialized, and compared. Base class IdentityError, six @final
subclasses, one per way an identity number or person UUID is rejected.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import final


@dataclass(frozen=True, slots=True)
class IdentityError:
    """Base error value. NOT @final, has subclasses."""

    message: str
    code: str
    source: str  # "module.function" that produced this error

    def with_context(self, context: str) -> IdentityError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class MalformedNumberError(IdentityError):
    """Number, serial or type is outside its representable range."""

    field: str  # "number", "serial" or "id_type"
    actual_value: str

    def to_dict(self) -> dict[str, object]:
        return {
            **IdentityError.to_dict(self),
            "field": self.field,
            "actual_value": self.actual_value,
        }


@final
@dataclass(frozen=True, slots=True)
class ChecksumMismatchError(IdentityError):
    """Last digit is not the Luhn check digit of the nine before it."""

    number: int
    expected: int
    actual: int

    def to_dict(self) -> dict[str, object]:
        return {
            **IdentityError.to_dict(self),
            "number": self.number,
            "expected": self.expected,
            "actual": self.actual,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidDateError(IdentityError):
    """Embedded birth date is not a Gregorian calendar date."""

    number: int
    year: int
    month: int
    day: int

    def to_dict(self) -> dict[str, object]:
        return {
            **IdentityError.to_dict(self),
            "number": self.number,
            "date": f"{self.year:04d}-{self.month:02d}-{self.day:02d}",
        }


@final
@dataclass(frozen=True, slots=True)
class UnclassifiableNumberError(IdentityError):
    """Digit pattern matches none of the identity categories."""

    number: int

    def to_dict(self) -> dict[str, object]:
        return {**IdentityError.to_dict(self), "number": self.number}


@final
@dataclass(frozen=True, slots=True)
class NonConformantBinaryError(IdentityError):
    """128-bit value does not follow the person UUID layout."""

    high: int
    low: int
    reason: str

    def to_dict(self) -> dict[str, object]:
        return {
            **IdentityError.to_dict(self),
            "high": f"{self.high:016x}",
            "low": f"{self.low:016x}",
            "reason": self.reason,
        }


@final
@dataclass(frozen=True, slots=True)
class UnparsableTextError(IdentityError):
    """Text matches none of the accepted identity or UUID shapes."""

    text: str

    def to_dict(self) -> dict[str, object]:
        return {**IdentityError.to_dict(self), "text": self.text}
