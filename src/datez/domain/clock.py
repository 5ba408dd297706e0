"""Clock collaborator and the epoch-day to calendar conversion used by ``today``."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Final, Protocol

SECONDS_PER_DAY: Final[int] = 86_400

# Days from 0000-03-01, where the 400-year cycles below start, to 1970-01-01.
_DAYS_FROM_CYCLE_START_TO_EPOCH: Final[int] = 719_468
_DAYS_PER_ERA: Final[int] = 146_097


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class EpochDayPosition:
    """Calendar position of an epoch day with a zero-based day of month."""

    year: int
    month: int
    day_index: int


def epoch_day_of(instant: datetime) -> int:
    if instant.tzinfo is None:
        raise ValueError("Clock values must include timezone information")
    return int(instant.timestamp() // SECONDS_PER_DAY)


def position_from_epoch_day(epoch_day: int) -> EpochDayPosition:
    """Convert days since 1970-01-01 to (year, month, zero-based day).

    Uses the era/day-of-era decomposition over 400-year Gregorian cycles with
    years starting in March, so February's length only matters at the end of
    a computed year.
    """

    shifted = epoch_day + _DAYS_FROM_CYCLE_START_TO_EPOCH
    era = shifted // _DAYS_PER_ERA
    day_of_era = shifted - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // (_DAYS_PER_ERA - 1)
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    march_month = (5 * day_of_year + 2) // 153
    day_index = day_of_year - (153 * march_month + 2) // 5
    month = march_month + 3 if march_month < 10 else march_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return EpochDayPosition(year=year, month=month, day_index=day_index)


__all__ = [
    "SECONDS_PER_DAY",
    "Clock",
    "EpochDayPosition",
    "epoch_day_of",
    "position_from_epoch_day",
    "utcnow",
]
