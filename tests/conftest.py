"""Pytest configuration and fixtures"""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Iterator

import pytest

from fsentry.application.services import StoreService
from fsentry.core.config import Settings
from fsentry.infrastructure.filesystem import FileStorage


class TickingClock:
    """Deterministic clock that moves one second per call"""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        self.current = self.current + timedelta(seconds=1)
        return self.current


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore the environment of the test runner"""
    return Settings(
        _env_file=None,
        environment="development",
        pretty_json=False,
        log_level="DEBUG",
        log_format="console",
    )


@pytest.fixture
def storage() -> FileStorage:
    return FileStorage()


@pytest.fixture
def store_root(tmp_path: Path) -> Path:
    return tmp_path / "store"


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock(datetime(2024, 1, 1, tzinfo=timezone.utc))


@pytest.fixture
def store(
    store_root: Path, settings: Settings, clock: Callable[[], datetime]
) -> Iterator[StoreService]:
    """Initialized store rooted in a temporary directory"""
    with StoreService(store_root, settings=settings, clock=clock) as service:
        yield service
