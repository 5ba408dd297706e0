"""Compact calendar date covering years 0 through 65,535."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import total_ordering

from .calendar import COMPACT_YEAR_MAX, days_in_month, is_leap_year, sum_digits
from .enums import DateComparison, Month
from .errors import (
    CompactOverflowError,
    DateUnderflowError,
    DayOutOfRangeError,
    DayTooBigError,
    MonthOutOfRangeError,
    MonthTooBigError,
    YearOutOfRangeError,
)


def validate_month(month: int) -> Month:
    if month > Month.DECEMBER:
        raise MonthTooBigError(f"Month {month} is greater than 12")
    if month < Month.JANUARY:
        raise MonthOutOfRangeError(f"Month {month} is less than 1")
    return Month(month)


def validate_day(year: int, month: Month, day: int) -> int:
    last_day = days_in_month(year, month)
    if day > last_day:
        raise DayTooBigError(f"Day {day} exceeds the {last_day} days of month {int(month)}")
    if day < 1:
        raise DayOutOfRangeError(f"Day {day} is less than 1")
    return day


@total_ordering
@dataclass(slots=True)
class CompactDate:
    """A (year, month, day) triple with a year no larger than 65,535.

    The dataclass constructor stores its arguments as given; use :meth:`from_ints`
    for validated construction. Increment and decrement mutate the instance in place.
    """

    year: int
    month: Month
    day: int

    @classmethod
    def from_ints(cls, year: int, month: int, day: int) -> CompactDate:
        checked_month = validate_month(month)
        if not 0 <= year <= COMPACT_YEAR_MAX:
            raise YearOutOfRangeError(f"Year {year} is outside 0..{COMPACT_YEAR_MAX}")
        return cls(year, checked_month, validate_day(year, checked_month, day))

    @classmethod
    def minimum(cls) -> CompactDate:
        return cls(0, Month.JANUARY, 1)

    @classmethod
    def maximum(cls) -> CompactDate:
        return cls(COMPACT_YEAR_MAX, Month.DECEMBER, 31)

    def is_min(self) -> bool:
        return self.year == 0 and self.month == Month.JANUARY and self.day == 1

    def is_max(self) -> bool:
        return self.year == COMPACT_YEAR_MAX and self.month == Month.DECEMBER and self.day == 31

    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def days_in_month(self) -> int:
        return days_in_month(self.year, Month(self.month))

    def increment(self) -> None:
        """Advance by one day, turning over months and years."""

        if self.is_max():
            raise CompactOverflowError(f"{self} is the last compact date")
        if self.month == Month.DECEMBER and self.day == 31:
            self.year += 1
            self.month = Month.JANUARY
            self.day = 1
        elif self.day >= self.days_in_month():
            self.month = Month(self.month + 1)
            self.day = 1
        else:
            self.day += 1

    def decrement(self) -> None:
        """Step back one day, turning over months and years."""

        if self.is_min():
            raise DateUnderflowError(f"{self} is the first representable date")
        if self.day > 1:
            self.day -= 1
        elif self.month == Month.JANUARY:
            self.year -= 1
            self.month = Month.DECEMBER
            self.day = 31
        else:
            self.month = Month(self.month - 1)
            self.day = self.days_in_month()

    def compare(self, other: CompactDate) -> DateComparison:
        return DateComparison.of(self._key(), other._key())

    def sum_digits(self) -> int:
        return sum_digits(int(self.month), self.day, self.year)

    def copy(self) -> CompactDate:
        return replace(self)

    def _key(self) -> tuple[int, int, int]:
        return (self.year, int(self.month), self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CompactDate):
            return NotImplemented
        return self.compare(other) is DateComparison.BEFORE

    def __str__(self) -> str:
        return f"{int(self.month):02d}/{self.day:02d}/{self.year}"


__all__ = ["CompactDate", "validate_day", "validate_month"]
