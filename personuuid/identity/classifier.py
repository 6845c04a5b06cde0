"""Identity category derivation from the digit structure of a number.

The number is read as a left-padded 12-digit value CCYYMMDDNNNK:

    year  = number // 10**8        (century and year, CCYY)
    month = (number // 10**6) % 100
    day   = (number // 10**4) % 100

Rules, first match wins:

  GDNR    leading digits "302" (number // 10**7 == 302)
  ORGNR   century 00 or 16 and "month" >= 20
  PERSNR  century >= 18, month 1-12, day 1-31, real date
  SAMNR   month 1-12, day 61-91, day - 60 a real date
"""

from __future__ import annotations

from personuuid.core.calendar import is_valid_date
from personuuid.core.errors import (
    IdentityError,
    InvalidDateError,
    UnclassifiableNumberError,
)
from personuuid.core.result import Err, Ok
from personuuid.core.types import IdType

GDNR_PREFIX: int = 302
ORGNR_CENTURIES: frozenset[int] = frozenset({0, 16})
ORGNR_MIN_MONTH: int = 20
PERSNR_MIN_CENTURY: int = 18
SAMNR_DAY_OFFSET: int = 60


def year_of(number: int) -> int:
    return number // 10**8


def month_of(number: int) -> int:
    return (number // 10**6) % 100


def day_of(number: int) -> int:
    return (number // 10**4) % 100


def _invalid_date(number: int, year: int, month: int, day: int) -> Err[InvalidDateError]:
    return Err(InvalidDateError(
        message=f"Invalid date in identity {number}: {year:04d}-{month:02d}-{day:02d}",
        code="INVALID_DATE",
        source="identity.classifier.classify",
        number=number,
        year=year,
        month=month,
        day=day,
    ))


def classify(
    number: int, *, check_dates: bool = True,
) -> Ok[IdType] | Err[IdentityError]:
    """Derive the IdType of number.

    With check_dates=False the PERSNR/SAMNR date checks are skipped; the
    binary codec uses this to re-derive the type of an identity that was
    validated when it was first encoded.
    """
    if number // 10**7 == GDNR_PREFIX:
        return Ok(IdType.GDNR)

    year = year_of(number)
    month = month_of(number)
    day = day_of(number)
    century = year // 100

    if century in ORGNR_CENTURIES and month >= ORGNR_MIN_MONTH:
        return Ok(IdType.ORGNR)

    if century >= PERSNR_MIN_CENTURY and 1 <= month <= 12 and 1 <= day <= 31:
        if check_dates and not is_valid_date(year, month, day):
            return _invalid_date(number, year, month, day)
        return Ok(IdType.PERSNR)

    if 1 <= month <= 12 and SAMNR_DAY_OFFSET + 1 <= day <= SAMNR_DAY_OFFSET + 31:
        real_day = day - SAMNR_DAY_OFFSET
        if check_dates and not is_valid_date(year, month, real_day):
            return _invalid_date(number, year, month, real_day)
        return Ok(IdType.SAMNR)

    return Err(UnclassifiableNumberError(
        message=f"Identity number {number} matches no known identity type",
        code="UNCLASSIFIABLE_NUMBER",
        source="identity.classifier.classify",
        number=number,
    ))
