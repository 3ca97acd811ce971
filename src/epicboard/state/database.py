"""Storage backends holding the aggregate state."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from .models import DBState
from .persistence import Persistence


class Database(ABC):
    """Loads and persists the full :class:`DBState`."""

    @abstractmethod
    def read_db(self) -> DBState:
        """Load the persisted state."""

    @abstractmethod
    def write_db(self, db_state: DBState) -> None:
        """Replace the persisted state."""


class JSONFileDatabase(Database):
    """State stored as a single pretty-printed JSON document."""

    def __init__(self, file_path: Union[str, Path]) -> None:
        self.file_path = Path(file_path).expanduser()

    def read_db(self) -> DBState:
        return DBState.from_dict(Persistence.load_json(self.file_path))

    def write_db(self, db_state: DBState) -> None:
        Persistence.save_json(self.file_path, db_state.to_dict())

    def initialize(self) -> bool:
        """Write an empty state if the file is missing. Returns True if created."""
        if self.file_path.exists():
            return False
        self.write_db(DBState())
        return True


class InMemoryDatabase(Database):
    """Keeps the last written state in memory; used by tests and embedding."""

    def __init__(self, state: Optional[DBState] = None) -> None:
        self.last_written_state = copy.deepcopy(state) if state is not None else DBState()

    def read_db(self) -> DBState:
        return copy.deepcopy(self.last_written_state)

    def write_db(self, db_state: DBState) -> None:
        self.last_written_state = copy.deepcopy(db_state)
