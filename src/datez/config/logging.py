"""Shared logging helpers for datez."""

from __future__ import annotations

import logging

DEFAULT_LOG_LEVEL = logging.INFO


def configure_logging(*, level: int = DEFAULT_LOG_LEVEL, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: we default
    to INFO level and a terse format suitable for CLI output. Pass ``force=True`` to
    reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def parse_log_level(name: str) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""

    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        raise ValueError(f"Unknown log level: {name}")
    return level
