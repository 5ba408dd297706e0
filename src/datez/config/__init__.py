"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .logging import DEFAULT_LOG_LEVEL, configure_logging, parse_log_level
from .settings import ENV_FIXED_TODAY, ENV_LOG_LEVEL, DatezConfig, get_datez_config

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "ENV_FIXED_TODAY",
    "ENV_LOG_LEVEL",
    "ConfigurationError",
    "DatezConfig",
    "configure_logging",
    "get_datez_config",
    "optional_env_var",
    "parse_log_level",
]
