from __future__ import annotations

import pytest

from datez.domain.model import (
    DateError,
    DateValue,
    DayOutOfRangeError,
    DayTooBigError,
    InvalidDateFormatError,
    MonthOutOfRangeError,
    MonthTooBigError,
    YearOutOfRangeError,
)
from datez.domain.parsing import parse_date


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("10/7/2023", (2023, 10, 7)),
        ("10/07/2023", (2023, 10, 7)),
        ("1/7/2023", (2023, 1, 7)),
        ("1/07/2023", (2023, 1, 7)),
        ("01/07/2023", (2023, 1, 7)),
        ("0001/0007/02023", (2023, 1, 7)),
    ],
)
def test_parse_date_ignores_field_width(text: str, expected: tuple[int, int, int]) -> None:
    assert parse_date(text) == DateValue.from_ints(*expected)


def test_parse_date_takes_short_years_literally() -> None:
    value = parse_date("1/1/96")

    assert value.year == 96
    assert str(value) == "01/01/96"


def test_parse_date_accepts_leap_day_in_leap_year() -> None:
    assert str(parse_date("02/29/2020")) == "02/29/2020"


@pytest.mark.parametrize(
    ("text", "error"),
    [
        ("02/29/2025", DayTooBigError),
        ("04/31/2025", DayTooBigError),
        ("01/32/2025", DayTooBigError),
        ("13/12/2025", MonthTooBigError),
        ("13/32/99999999999", MonthTooBigError),
        ("00/10/2025", MonthOutOfRangeError),
        ("01/00/2025", DayOutOfRangeError),
        ("01/01/4294967296", YearOutOfRangeError),
        ("1/1/" + "9" * 5000, YearOutOfRangeError),
        ("9" * 5000 + "/1/2025", MonthTooBigError),
        ("1/" + "9" * 5000 + "/2025", DayTooBigError),
        ("0/40/2025", MonthOutOfRangeError),
    ],
)
def test_parse_date_validation_errors(text: str, error: type[DateError]) -> None:
    with pytest.raises(error):
        parse_date(text)


@pytest.mark.parametrize(
    "text",
    [
        "01/17",
        "1/2/3/4",
        "01//2025",
        "/01/2025",
        "01/01/",
        "",
        "a/1/2025",
        "1/-1/2025",
        " 1/1/2025",
        "1/1/2025 ",
        "01-07-2023",
    ],
)
def test_parse_date_rejects_malformed_text(text: str) -> None:
    with pytest.raises(InvalidDateFormatError):
        parse_date(text)


def test_parse_date_selects_extended_tier_for_large_years() -> None:
    value = parse_date("01/01/65536")

    assert value.is_extended
    assert value.rollover == 1
    assert value.compact.year == 0


def test_parse_date_accepts_absolute_maximum() -> None:
    value = parse_date("12/31/4294967295")

    assert value.is_extended
    assert value.year == 4_294_967_295


def test_parse_date_checks_day_against_reduced_year() -> None:
    with pytest.raises(DayTooBigError):
        parse_date("02/29/65636")


def test_parse_date_ignores_leading_zeros_in_long_fields() -> None:
    value = parse_date("0" * 5000 + "1/" + "0" * 5000 + "7/" + "0" * 5000 + "2023")

    assert str(value) == "01/07/2023"


def test_parse_date_checks_month_zero_before_day() -> None:
    with pytest.raises(MonthOutOfRangeError) as exc:
        parse_date("0/40/2025")

    assert not isinstance(exc.value, DayTooBigError)
