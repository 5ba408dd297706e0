from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from datez.config import ENV_FIXED_TODAY, ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from datez.domain.clock import Clock


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_FIXED_TODAY, raising=False)


@pytest.fixture
def make_clock() -> Callable[[datetime], Clock]:
    def factory(reference: datetime) -> Clock:
        def _clock() -> datetime:
            return reference

        return _clock

    return factory
