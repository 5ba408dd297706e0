"""Application entry points shared by the command line interface."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Literal, TypeAlias

from datez.config import get_datez_config
from datez.domain.model import DateValue
from datez.domain.parsing import parse_date

if TYPE_CHECKING:
    from datez.config import DatezConfig
    from datez.domain.clock import Clock
    from datez.domain.model import DateComparison

Tier: TypeAlias = Literal["compact", "extended"]

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DateDescription:
    """Debug view of a date value and its internal representation."""

    text: str
    tier: Tier
    rollover: int
    inner: str
    true_year: int
    leap_year: bool
    digit_sum: int

    def as_lines(self) -> list[str]:
        return [
            f"date:       {self.text}",
            f"tier:       {self.tier}",
            f"rollover:   {self.rollover}",
            f"inner:      {self.inner}",
            f"true year:  {self.true_year}",
            f"leap year:  {'yes' if self.leap_year else 'no'}",
            f"digit sum:  {self.digit_sum}",
        ]


def describe_date(value: DateValue) -> DateDescription:
    return DateDescription(
        text=str(value),
        tier="extended" if value.is_extended else "compact",
        rollover=value.rollover,
        inner=str(value.compact),
        true_year=value.year,
        leap_year=value.is_leap_year(),
        digit_sum=value.sum_digits(),
    )


def shift_date(value: DateValue, days: int) -> DateValue:
    """Return a copy of ``value`` moved ``days`` days (backwards when negative).

    The input is left untouched even when the shift fails part way.
    """

    shifted = value.copy()
    log.debug("Shifting %s by %s day(s)", value, days)
    if days >= 0:
        shifted.increment_n_times(days)
    else:
        shifted.decrement_n_times(-days)
    return shifted


def compare_texts(left: str, right: str) -> DateComparison:
    return parse_date(left).compare(parse_date(right))


def current_date(
    *,
    config: DatezConfig | None = None,
    clock: Clock | None = None,
) -> DateValue:
    """Return today's date, honouring a pinned date from configuration."""

    effective_config = config or get_datez_config()
    if effective_config.fixed_today is not None:
        log.debug("Using pinned date %s", effective_config.fixed_today)
        return parse_date(effective_config.fixed_today)
    return DateValue.today(clock)


__all__ = [
    "DateDescription",
    "compare_texts",
    "current_date",
    "describe_date",
    "shift_date",
]
