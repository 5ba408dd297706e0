"""Public date model surface."""

from __future__ import annotations

from datez.domain.model.calendar import (
    COMPACT_YEAR_MAX,
    COMPACT_YEAR_SPAN,
    ROLLOVER_MAX,
    TRUE_YEAR_MAX,
    days_in_month,
    is_leap_year,
)
from datez.domain.model.compact import CompactDate
from datez.domain.model.enums import DateComparison, Month
from datez.domain.model.errors import (
    CeilingOverflowError,
    CompactOverflowError,
    DateError,
    DateOverflowError,
    DateUnderflowError,
    DayOutOfRangeError,
    DayTooBigError,
    InvalidDateFormatError,
    MonthOutOfRangeError,
    MonthTooBigError,
    YearOutOfRangeError,
)
from datez.domain.model.extended import ExtendedDate
from datez.domain.model.value import DateTier, DateValue

__all__ = [  # noqa: RUF022
    # limits
    "COMPACT_YEAR_MAX",
    "COMPACT_YEAR_SPAN",
    "ROLLOVER_MAX",
    "TRUE_YEAR_MAX",
    # calendar rules
    "days_in_month",
    "is_leap_year",
    # enums
    "DateComparison",
    "Month",
    # tiers
    "CompactDate",
    "ExtendedDate",
    "DateTier",
    "DateValue",
    # errors
    "DateError",
    "InvalidDateFormatError",
    "MonthOutOfRangeError",
    "MonthTooBigError",
    "DayOutOfRangeError",
    "DayTooBigError",
    "YearOutOfRangeError",
    "DateOverflowError",
    "CompactOverflowError",
    "CeilingOverflowError",
    "DateUnderflowError",
]
