"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import Enum, IntEnum


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class DateComparison(Enum):
    """Three-way result of comparing two dates."""

    BEFORE = -1
    EQUAL = 0
    AFTER = 1

    @classmethod
    def of(cls, left: tuple[int, ...], right: tuple[int, ...]) -> DateComparison:
        """Compare two keys lexicographically."""

        if left < right:
            return cls.BEFORE
        if left > right:
            return cls.AFTER
        return cls.EQUAL
