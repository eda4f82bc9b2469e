"""Pure calendar calculations, no UI dependencies.

Both calendars are converted through a single integer timeline, the *fixed
day*: 1 January of year 1 (proleptic Gregorian) is day 1, so for Gregorian
dates the fixed day equals ``date.toordinal()``.  The Hijri epoch
(1 Muharram 1 AH) falls on fixed day 227015.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date

from month_names import DEFAULT_LANG, HIJRI_MONTHS, lookup

HIJRI_EPOCH = 227015


class InvalidDateError(ValueError):
    """Raised when a calendar date has a field outside its valid range."""

    def __init__(self, field: str, value: int, detail: str) -> None:
        super().__init__(f"invalid {field} {value!r}: {detail}")
        self.field = field
        self.value = value


# ------------------------------------------------------------------
# Gregorian
# ------------------------------------------------------------------
def is_gregorian_leap(year: int) -> bool:
    """Divisible by 4 and not by 100, unless also divisible by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def gregorian_month_length(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_gregorian_leap(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def validate_gregorian(year: int, month: int, day: int) -> None:
    """Raise InvalidDateError for a month or day outside its range."""
    if not 1 <= month <= 12:
        raise InvalidDateError("month", month, "expected 1-12")
    length = gregorian_month_length(year, month)
    if not 1 <= day <= length:
        raise InvalidDateError("day", day, f"expected 1-{length} for {year}-{month:02d}")


def gregorian_to_fixed(year: int, month: int, day: int, correction: int = 0) -> int:
    """Return the fixed day of a Gregorian date, shifted by ``correction`` days."""
    validate_gregorian(year, month, day)
    if month <= 2:
        s = 0
    elif is_gregorian_leap(year):
        s = -1
    else:
        s = -2
    prior = year - 1
    return (
        365 * prior
        + prior // 4
        - prior // 100
        + prior // 400
        + (367 * month - 362) // 12
        + s
        + day
        + correction
    )


def fixed_to_gregorian(fixed_day: int) -> date:
    """Return the Gregorian ``date`` for a fixed day (year 1–9999 only)."""
    return date.fromordinal(fixed_day)


# ------------------------------------------------------------------
# Hijri
# ------------------------------------------------------------------
def is_hijri_leap(year: int) -> bool:
    """11 of every 30 years have 355 days instead of 354."""
    return (11 * year + 14) % 30 < 11


def hijri_month_length(year: int, month: int) -> int:
    """Odd months have 30 days, even months 29; Dhu al-Hijjah gains a day in leap years."""
    if month == 12 and is_hijri_leap(year):
        return 30
    return 30 if month % 2 == 1 else 29


def hijri_to_fixed(year: int, month: int, day: int) -> int:
    """Return the fixed day of a Hijri date.

    Total over all integers: out-of-range fields are not rejected, they
    simply carry over into neighbouring months.
    """
    return (
        day
        + math.ceil(29.5 * (month - 1))
        + 354 * (year - 1)
        + (11 * year + 3) // 30
        + HIJRI_EPOCH
        - 1
    )


def fixed_to_hijri(fixed_day: int) -> "HijriDate":
    """Return the Hijri date of a fixed day.

    Month lengths alternate, so there is no closed-form inverse.  The year
    comes from the mean year length (354 11/30 days) and the month from the
    mean month length (29.5 days); both land in the right place, and the day
    is then measured exactly from the start of that month.
    """
    year = (30 * (fixed_day - HIJRI_EPOCH) + 10646) // 10631
    year_start = hijri_to_fixed(year, 1, 1)
    month = min(math.ceil((fixed_day - 29 - year_start) / 29.5) + 1, 12)
    day = fixed_day - hijri_to_fixed(year, month, 1) + 1
    return HijriDate(year, month, day)


@dataclass(frozen=True)
class HijriDate:
    year: int
    month: int
    day: int

    def to_fixed_day(self) -> int:
        return hijri_to_fixed(self.year, self.month, self.day)

    def to_gregorian(self) -> date:
        return fixed_to_gregorian(self.to_fixed_day())

    def month_name(
        self, lang: str = DEFAULT_LANG, table: dict[str, list[str]] = HIJRI_MONTHS,
    ) -> str:
        return lookup(table, lang, self.month - 1)

    def format(
        self, table: dict[str, list[str]] = HIJRI_MONTHS, lang: str = DEFAULT_LANG,
    ) -> str:
        """Return ``"<day> <month name> <year>"``; unknown languages use the default table."""
        return f"{self.day} {self.month_name(lang, table)} {self.year}"

    def __str__(self) -> str:
        return self.format()


def hijri_to_gregorian(year: int, month: int, day: int) -> date:
    return fixed_to_gregorian(hijri_to_fixed(year, month, day))
