import itertools
import os
from pathlib import Path

import pytest

from epicboard.state.database import InMemoryDatabase
from epicboard.state.repository import JiraRepository


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch):
    """Keep config lookups away from the real home and working directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for key in list(os.environ):
        if key.startswith("EPICBOARD_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"id{next(counter)}"


@pytest.fixture
def mock_db() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def repo(mock_db: InMemoryDatabase, sequential_ids) -> JiraRepository:
    return JiraRepository(mock_db, id_generator=sequential_ids)
