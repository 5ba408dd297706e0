"""Error taxonomy shared by the date model and the parser."""

from __future__ import annotations


class DateError(ValueError):
    """Base class for every date validation or arithmetic failure."""


class InvalidDateFormatError(DateError):
    """Raised when text does not split into exactly three digit fields."""


class MonthOutOfRangeError(DateError):
    """Raised when a month lies outside 1..12."""


class MonthTooBigError(MonthOutOfRangeError):
    """Raised when a month is greater than 12."""


class DayOutOfRangeError(DateError):
    """Raised when a day lies outside the days of its month."""


class DayTooBigError(DayOutOfRangeError):
    """Raised when a day exceeds the number of days in its month."""


class YearOutOfRangeError(DateError):
    """Raised when a year cannot be represented by the target type."""


class DateOverflowError(DateError):
    """Raised when incrementing past the largest representable date."""


class CompactOverflowError(DateOverflowError):
    """Raised by a compact date already at 65535-12-31."""


class CeilingOverflowError(DateOverflowError):
    """Raised when the absolute ceiling (year 4,294,967,295, Dec 31) is reached."""


class DateUnderflowError(DateError):
    """Raised when decrementing past year 0, January 1."""


__all__ = [
    "CeilingOverflowError",
    "CompactOverflowError",
    "DateError",
    "DateOverflowError",
    "DateUnderflowError",
    "DayOutOfRangeError",
    "DayTooBigError",
    "InvalidDateFormatError",
    "MonthOutOfRangeError",
    "MonthTooBigError",
    "YearOutOfRangeError",
]
