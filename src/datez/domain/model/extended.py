"""Wide calendar date: a compact date plus a count of exhausted compact year ranges."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from .calendar import ROLLOVER_MAX, join_true_year
from .compact import CompactDate
from .enums import DateComparison
from .errors import CeilingOverflowError, DateUnderflowError


@total_ordering
@dataclass(slots=True)
class ExtendedDate:
    """Date whose true year is ``rollover * 65536 + inner.year``.

    ``rollover`` is bounded by ``ROLLOVER_MAX`` so the largest true year is
    4,294,967,295.
    """

    inner: CompactDate
    rollover: int = 0

    @property
    def true_year(self) -> int:
        return join_true_year(self.rollover, self.inner.year)

    def increment(self) -> None:
        if not self.inner.is_max():
            self.inner.increment()
            return
        if self.rollover >= ROLLOVER_MAX:
            raise CeilingOverflowError(f"{self} is the last representable date")
        self.inner = CompactDate.minimum()
        self.rollover += 1

    def decrement(self) -> None:
        if not self.inner.is_min():
            self.inner.decrement()
            return
        if self.rollover == 0:
            raise DateUnderflowError(f"{self} is the first representable date")
        self.inner = CompactDate.maximum()
        self.rollover -= 1

    def compare(self, other: ExtendedDate) -> DateComparison:
        if self.rollover != other.rollover:
            return DateComparison.of((self.rollover,), (other.rollover,))
        return self.inner.compare(other.inner)

    def copy(self) -> ExtendedDate:
        return ExtendedDate(self.inner.copy(), self.rollover)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ExtendedDate):
            return NotImplemented
        return self.compare(other) is DateComparison.BEFORE

    def __str__(self) -> str:
        return f"{int(self.inner.month):02d}/{self.inner.day:02d}/{self.true_year}"


__all__ = ["ExtendedDate"]
