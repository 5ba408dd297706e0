"""Runtime settings read from the environment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from datez.domain.model.errors import DateError
from datez.domain.parsing import parse_date

from .env import optional_env_var
from .errors import ConfigurationError
from .logging import DEFAULT_LOG_LEVEL, parse_log_level

ENV_LOG_LEVEL: Final[str] = "DATEZ_LOG_LEVEL"
ENV_FIXED_TODAY: Final[str] = "DATEZ_FIXED_TODAY"


@dataclass(frozen=True, slots=True)
class DatezConfig:
    log_level: int = DEFAULT_LOG_LEVEL
    # Canonical MM/DD/YYYY text that ``today`` reports instead of the clock.
    fixed_today: str | None = None


def get_datez_config() -> DatezConfig:
    log_level = DEFAULT_LOG_LEVEL
    level_name = optional_env_var(ENV_LOG_LEVEL)
    if level_name is not None:
        try:
            log_level = parse_log_level(level_name)
        except ValueError as exc:
            raise ConfigurationError(f"Invalid {ENV_LOG_LEVEL}: {level_name}") from exc

    fixed_today = optional_env_var(ENV_FIXED_TODAY)
    if fixed_today is not None:
        try:
            fixed_today = str(parse_date(fixed_today))
        except DateError as exc:
            raise ConfigurationError(f"Invalid {ENV_FIXED_TODAY}: {exc}") from exc

    return DatezConfig(log_level=log_level, fixed_today=fixed_today)
