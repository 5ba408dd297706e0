"""Proleptic Gregorian calendar rules and the year limits of both date tiers."""

from __future__ import annotations

from typing import Final

from .enums import Month

COMPACT_YEAR_MAX: Final[int] = 65_535
COMPACT_YEAR_SPAN: Final[int] = COMPACT_YEAR_MAX + 1
ROLLOVER_MAX: Final[int] = 65_535
TRUE_YEAR_MAX: Final[int] = ROLLOVER_MAX * COMPACT_YEAR_SPAN + COMPACT_YEAR_MAX

# Upper bound for the parser's cheap day pre-check.
MAX_DAYS_IN_ANY_MONTH: Final[int] = 31

_THIRTY_DAY_MONTHS: Final[frozenset[Month]] = frozenset(
    {Month.APRIL, Month.JUNE, Month.SEPTEMBER, Month.NOVEMBER}
)


def is_leap_year(year: int) -> bool:
    """Divisible by 4, except centuries that are not divisible by 400."""

    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: Month) -> int:
    if month is Month.FEBRUARY:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def split_true_year(year: int) -> tuple[int, int]:
    """Return ``(rollover, reduced_year)`` for a full-width year."""

    return divmod(year, COMPACT_YEAR_SPAN)


def join_true_year(rollover: int, reduced_year: int) -> int:
    return rollover * COMPACT_YEAR_SPAN + reduced_year


def sum_digits(*numbers: int) -> int:
    """Sum every decimal digit of the given non-negative numbers."""

    return sum(int(digit) for number in numbers for digit in str(number))


__all__ = [
    "COMPACT_YEAR_MAX",
    "COMPACT_YEAR_SPAN",
    "MAX_DAYS_IN_ANY_MONTH",
    "ROLLOVER_MAX",
    "TRUE_YEAR_MAX",
    "days_in_month",
    "is_leap_year",
    "join_true_year",
    "split_true_year",
    "sum_digits",
]
