"""Shared pytest fixtures and configuration for the tracc test suite.

Guidelines
----------
* No test touches the real user data directory.
* Timestamps come from :class:`StepClock`, never from the wall clock.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

TZ = timezone(timedelta(hours=2))
T0 = datetime(2026, 10, 16, 9, 0, tzinfo=TZ)


class StepClock:
    """Deterministic clock advancing by *step* on every call."""

    def __init__(self, start: datetime = T0, step: timedelta = timedelta(hours=1)) -> None:
        self.current = start - step
        self.step = step

    def __call__(self) -> datetime:
        self.current += self.step
        return self.current


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture(autouse=True)
def isolated_data_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_DATA_HOME at a temporary directory for every test."""
    data_home = tmp_path / "xdg-data"
    monkeypatch.setenv("XDG_DATA_HOME", str(data_home))
    return data_home


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tracc_logger = logging.getLogger("tracc")
    tracc_level = tracc_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    tracc_logger.setLevel(tracc_level)
