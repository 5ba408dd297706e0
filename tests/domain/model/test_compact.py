from __future__ import annotations

import pytest

from datez.domain.model import (
    CompactDate,
    CompactOverflowError,
    DateComparison,
    DateUnderflowError,
    DayOutOfRangeError,
    DayTooBigError,
    Month,
    MonthOutOfRangeError,
    MonthTooBigError,
    YearOutOfRangeError,
)


def _date(year: int, month: int, day: int) -> CompactDate:
    return CompactDate.from_ints(year, month, day)


def test_from_ints_builds_validated_date() -> None:
    date = _date(2024, 2, 29)

    assert date.year == 2024
    assert date.month is Month.FEBRUARY
    assert date.day == 29


def test_from_ints_rejects_month_above_twelve() -> None:
    with pytest.raises(MonthTooBigError, match="greater than 12"):
        _date(2025, 13, 1)


def test_from_ints_rejects_month_zero_without_calling_it_too_big() -> None:
    with pytest.raises(MonthOutOfRangeError) as exc:
        _date(2025, 0, 1)

    assert not isinstance(exc.value, MonthTooBigError)


def test_from_ints_checks_month_before_day() -> None:
    with pytest.raises(MonthTooBigError):
        _date(2025, 13, 99)


@pytest.mark.parametrize(
    ("year", "month", "day"),
    [
        (2025, 4, 31),
        (2025, 2, 29),
        (1900, 2, 29),
        (2024, 2, 30),
        (2024, 1, 32),
    ],
)
def test_from_ints_rejects_day_past_month_end(year: int, month: int, day: int) -> None:
    with pytest.raises(DayTooBigError):
        _date(year, month, day)


def test_from_ints_rejects_day_zero() -> None:
    with pytest.raises(DayOutOfRangeError, match="less than 1"):
        _date(2025, 1, 0)


@pytest.mark.parametrize("year", [-1, 65_536])
def test_from_ints_rejects_years_outside_compact_range(year: int) -> None:
    with pytest.raises(YearOutOfRangeError):
        _date(year, 1, 1)


@pytest.mark.parametrize(
    ("start", "expected"),
    [
        ((1950, 11, 9), (1950, 11, 10)),
        ((1950, 11, 30), (1950, 12, 1)),
        ((1950, 8, 31), (1950, 9, 1)),
        ((1950, 2, 28), (1950, 3, 1)),
        ((2024, 2, 28), (2024, 2, 29)),
        ((2024, 2, 29), (2024, 3, 1)),
        ((1950, 12, 31), (1951, 1, 1)),
    ],
)
def test_increment_turns_over_months_and_years(
    start: tuple[int, int, int],
    expected: tuple[int, int, int],
) -> None:
    date = _date(*start)

    date.increment()

    assert date == _date(*expected)


def test_increment_at_maximum_raises_and_leaves_date_untouched() -> None:
    date = CompactDate.maximum()

    with pytest.raises(CompactOverflowError):
        date.increment()

    assert date == _date(65_535, 12, 31)


@pytest.mark.parametrize(
    ("start", "expected"),
    [
        ((2025, 5, 10), (2025, 5, 9)),
        ((2025, 5, 1), (2025, 4, 30)),
        ((2024, 3, 1), (2024, 2, 29)),
        ((2023, 3, 1), (2023, 2, 28)),
        ((2000, 1, 1), (1999, 12, 31)),
    ],
)
def test_decrement_turns_over_months_and_years(
    start: tuple[int, int, int],
    expected: tuple[int, int, int],
) -> None:
    date = _date(*start)

    date.decrement()

    assert date == _date(*expected)


def test_decrement_at_minimum_raises() -> None:
    date = CompactDate.minimum()

    with pytest.raises(DateUnderflowError):
        date.decrement()

    assert date.is_min()


def test_decrement_undoes_increment_across_two_years() -> None:
    date = _date(1999, 12, 25)
    for _ in range(800):
        before = date.copy()
        date.increment()
        after = date.copy()
        date.decrement()
        assert date == before
        date = after


def test_compare_orders_by_year_then_calendar_month_then_day() -> None:
    assert _date(2025, 2, 1).compare(_date(2025, 10, 1)) is DateComparison.BEFORE
    assert _date(2026, 1, 1).compare(_date(2025, 12, 31)) is DateComparison.AFTER
    assert _date(2025, 6, 2).compare(_date(2025, 6, 1)) is DateComparison.AFTER
    assert _date(2025, 6, 1).compare(_date(2025, 6, 1)) is DateComparison.EQUAL


def test_rich_comparisons_follow_compare() -> None:
    dates = [_date(2025, 10, 1), _date(2024, 12, 31), _date(2025, 2, 1)]

    assert sorted(dates) == [_date(2024, 12, 31), _date(2025, 2, 1), _date(2025, 10, 1)]
    assert _date(2025, 2, 1) <= _date(2025, 2, 1)
    assert _date(2025, 2, 2) > _date(2025, 2, 1)


def test_leap_year_and_month_length_helpers() -> None:
    assert _date(2024, 2, 1).is_leap_year()
    assert _date(2024, 2, 1).days_in_month() == 29
    assert not _date(2100, 2, 1).is_leap_year()


def test_sum_digits_adds_every_digit() -> None:
    assert _date(1950, 12, 31).sum_digits() == 22
    assert _date(1996, 8, 21).sum_digits() == 36


def test_str_pads_month_and_day_only() -> None:
    assert str(_date(2025, 4, 1)) == "04/01/2025"
    assert str(_date(5, 1, 2)) == "01/02/5"


def test_copy_is_independent() -> None:
    original = _date(2025, 1, 31)
    duplicate = original.copy()

    duplicate.increment()

    assert original == _date(2025, 1, 31)
    assert duplicate == _date(2025, 2, 1)
