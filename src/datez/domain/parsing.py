"""Lenient ``month/day/year`` parsing.

Field widths are free: ``1/7/2023``, ``01/07/2023`` and ``001/7/2023`` all name
the same date, and two-digit years are taken literally (``96`` is year 96).
Only the field order matters.
"""

from __future__ import annotations

import re
from logging import getLogger

from datez.domain.model.calendar import MAX_DAYS_IN_ANY_MONTH, TRUE_YEAR_MAX
from datez.domain.model.compact import validate_month
from datez.domain.model.errors import (
    DayTooBigError,
    InvalidDateFormatError,
    MonthTooBigError,
    YearOutOfRangeError,
)
from datez.domain.model.value import DateValue

FIELD_SEPARATOR = "/"
_FIELD_RE = re.compile(r"[0-9]+")
_MONTH_DIGITS = 2
_DAY_DIGITS = 2
_YEAR_DIGITS = len(str(TRUE_YEAR_MAX))

log = getLogger(__name__)


def parse_date(text: str) -> DateValue:
    """Parse ``month/day/year`` text into a :class:`DateValue`.

    Cheap range checks run on the raw fields first; the precise day check
    against the resolved year happens in :meth:`DateValue.from_ints`.
    """

    fields = text.split(FIELD_SEPARATOR)
    if len(fields) != 3:
        raise InvalidDateFormatError(
            f"Expected month/day/year, got {len(fields)} field(s) in {text!r}"
        )
    for field in fields:
        if not _FIELD_RE.fullmatch(field):
            raise InvalidDateFormatError(f"Date fields must be decimal digits: {text!r}")

    # Length checks keep oversized fields away from int()'s digit limit.
    month_digits, day_digits, year_digits = (field.lstrip("0") or "0" for field in fields)
    if len(month_digits) > _MONTH_DIGITS:
        raise MonthTooBigError("Month is greater than 12")
    month = validate_month(int(month_digits))
    if len(day_digits) > _DAY_DIGITS or int(day_digits) > MAX_DAYS_IN_ANY_MONTH:
        raise DayTooBigError(f"Day is greater than {MAX_DAYS_IN_ANY_MONTH}")
    if len(year_digits) > _YEAR_DIGITS or int(year_digits) > TRUE_YEAR_MAX:
        raise YearOutOfRangeError(f"Year exceeds the maximum year {TRUE_YEAR_MAX}")
    day, year = int(day_digits), int(year_digits)

    value = DateValue.from_ints(year, month, day)
    log.debug("Parsed %r as %s (extended=%s)", text, value, value.is_extended)
    return value


__all__ = ["FIELD_SEPARATOR", "parse_date"]
