"""Calendar date validation for birth dates embedded in identity numbers.

Works on bare (year, month, day) integers rather than datetime.date so
that year 0 and out-of-range components are answered with False instead
of an exception.
"""

from __future__ import annotations

import calendar as _cal

# Index 0 unused so month numbers index directly.
_DAYS_IN_MONTH: tuple[int, ...] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian rule: every 4th year, except centuries not divisible by 400."""
    return _cal.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Length of month in year. Precondition: 1 <= month <= 12."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def is_valid_date(year: int, month: int, day: int) -> bool:
    if year < 0 or not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)
