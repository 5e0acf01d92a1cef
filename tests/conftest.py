# tests/conftest.py

from __future__ import annotations

from datetime import date, timezone
from pathlib import Path

import pytest

from daytodo.domain.todo import TaskStore
from daytodo.infrastructure.storage import DayFileRepository

from .helpers import DAY, TZ


@pytest.fixture()
def day() -> date:
    return DAY


@pytest.fixture()
def tz() -> timezone:
    return TZ


@pytest.fixture()
def store() -> TaskStore:
    """Empty store without a header line."""
    return TaskStore(DAY, TZ)


@pytest.fixture()
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point the settings directory at a temp dir so tests never touch ~/.daytodo.
    """
    home = tmp_path / "home"
    monkeypatch.setenv("DAYTODO_HOME", str(home))
    monkeypatch.delenv("DAYTODO_DIR", raising=False)
    return home


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "todos"


@pytest.fixture()
def repository(data_dir: Path) -> DayFileRepository:
    return DayFileRepository(data_dir)
