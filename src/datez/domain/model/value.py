"""Tier-independent date value.

``DateValue`` wraps either a :class:`CompactDate` or an :class:`ExtendedDate` and
moves between the two as arithmetic crosses year 65,536:

* incrementing the last compact date (65535-12-31) re-tags the value as an
  extended date with rollover 0 and retries, which lands on January 1 of true
  year 65,536;
* decrementing an extended date back to rollover 0 at 65535-12-31 collapses it
  to a compact date again.

Comparisons are defined on the true year, so a compact date and an extended
date with rollover 0 holding the same inner date are equal.
"""

from __future__ import annotations

from functools import total_ordering
from typing import TYPE_CHECKING, TypeAlias

from datez.domain.clock import epoch_day_of, position_from_epoch_day, utcnow

from .calendar import COMPACT_YEAR_SPAN, TRUE_YEAR_MAX, split_true_year, sum_digits
from .compact import CompactDate, validate_day, validate_month
from .enums import DateComparison, Month
from .errors import CompactOverflowError, YearOutOfRangeError
from .extended import ExtendedDate

if TYPE_CHECKING:
    from datez.domain.clock import Clock

DateTier: TypeAlias = CompactDate | ExtendedDate


@total_ordering
class DateValue:
    """A calendar date of any supported magnitude, mutated in place by arithmetic."""

    __slots__ = ("_tier",)

    def __init__(self, tier: DateTier) -> None:
        self._tier: DateTier = tier

    @classmethod
    def from_ints(cls, year: int, month: int, day: int) -> DateValue:
        """Build a value, choosing the compact tier when ``year < 65536``.

        The day is validated against the reduced (``year % 65536``) year, so
        year 65,536 follows the leap rule of year 0.
        """

        checked_month = validate_month(month)
        if not 0 <= year <= TRUE_YEAR_MAX:
            raise YearOutOfRangeError(f"Year {year} is outside 0..{TRUE_YEAR_MAX}")
        rollover, reduced_year = split_true_year(year)
        checked_day = validate_day(reduced_year, checked_month, day)
        inner = CompactDate(reduced_year, checked_month, checked_day)
        if year < COMPACT_YEAR_SPAN:
            return cls(inner)
        return cls(ExtendedDate(inner, rollover))

    @classmethod
    def today(cls, clock: Clock | None = None) -> DateValue:
        """Return the current date as reported by ``clock`` (UTC wall clock by default).

        The epoch-day conversion reports a zero-based day of month, one day
        behind today; a single increment lands on the current date.
        """

        instant = (clock or utcnow)()
        position = position_from_epoch_day(epoch_day_of(instant))
        if not 0 <= position.year < COMPACT_YEAR_SPAN:
            raise YearOutOfRangeError(f"Clock year {position.year} is not a compact year")
        value = cls(CompactDate(position.year, Month(position.month), position.day_index))
        value.increment()
        return value

    @property
    def is_extended(self) -> bool:
        return isinstance(self._tier, ExtendedDate)

    @property
    def tier(self) -> DateTier:
        return self._tier

    @property
    def compact(self) -> CompactDate:
        """The compact date carrying month, day and reduced year."""

        if isinstance(self._tier, ExtendedDate):
            return self._tier.inner
        return self._tier

    @property
    def rollover(self) -> int:
        if isinstance(self._tier, ExtendedDate):
            return self._tier.rollover
        return 0

    @property
    def year(self) -> int:
        """The true year."""

        if isinstance(self._tier, ExtendedDate):
            return self._tier.true_year
        return self._tier.year

    @property
    def month(self) -> Month:
        return self.compact.month

    @property
    def day(self) -> int:
        return self.compact.day

    def is_leap_year(self) -> bool:
        return self.compact.is_leap_year()

    def sum_digits(self) -> int:
        return sum_digits(int(self.month), self.day, self.year)

    def increment(self) -> None:
        if isinstance(self._tier, ExtendedDate):
            self._tier.increment()
            return
        try:
            self._tier.increment()
        except CompactOverflowError:
            self._tier = ExtendedDate(self._tier, 0)
            self._tier.increment()

    def decrement(self) -> None:
        if isinstance(self._tier, CompactDate):
            self._tier.decrement()
            return
        self._tier.decrement()
        if self._tier.rollover == 0 and self._tier.inner.is_max():
            self._tier = self._tier.inner

    def increment_n_times(self, n: int) -> None:
        """Apply :meth:`increment` ``n`` times.

        A failing step propagates with the value left at the last successful step.
        """

        for _ in _steps(n):
            self.increment()

    def decrement_n_times(self, n: int) -> None:
        """Apply :meth:`decrement` ``n`` times, stopping at the first failure."""

        for _ in _steps(n):
            self.decrement()

    def compare(self, other: DateValue) -> DateComparison:
        mine, theirs = self._tier, other._tier
        if isinstance(mine, CompactDate):
            if isinstance(theirs, CompactDate):
                return mine.compare(theirs)
            return _compare_compact_to_extended(mine, theirs)
        if isinstance(theirs, ExtendedDate):
            return mine.compare(theirs)
        return _reverse(_compare_compact_to_extended(theirs, mine))

    def copy(self) -> DateValue:
        return DateValue(self._tier.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateValue):
            return NotImplemented
        return self.compare(other) is DateComparison.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateValue):
            return NotImplemented
        return self.compare(other) is DateComparison.BEFORE

    def __str__(self) -> str:
        return str(self._tier)

    def __repr__(self) -> str:
        return f"DateValue({self._tier!r})"


def _steps(n: int) -> range:
    if n < 0:
        raise ValueError(f"Step count must be non-negative, got {n}")
    return range(n)


def _compare_compact_to_extended(compact: CompactDate, extended: ExtendedDate) -> DateComparison:
    if extended.rollover != 0:
        return DateComparison.BEFORE
    return compact.compare(extended.inner)


def _reverse(result: DateComparison) -> DateComparison:
    return DateComparison(-result.value)


__all__ = ["DateTier", "DateValue"]
