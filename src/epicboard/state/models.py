"""Epic, story and aggregate state definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from ..errors import StorageFormatError


class Status(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"

    @property
    def label(self) -> str:
        """Display label used in page tables."""
        return STATUS_LABELS[self]

    def __str__(self) -> str:
        return self.label


STATUS_LABELS = {
    Status.OPEN: "OPEN",
    Status.IN_PROGRESS: "IN PROGRESS",
    Status.RESOLVED: "RESOLVED",
    Status.CLOSED: "CLOSED",
}


def _require(data: Any, key: str, kind: type, where: str) -> Any:
    if not isinstance(data, dict):
        raise StorageFormatError(f"{where}: expected an object, got {type(data).__name__}")
    if key not in data:
        raise StorageFormatError(f"{where}: missing field '{key}'")
    value = data[key]
    if not isinstance(value, kind):
        raise StorageFormatError(f"{where}: field '{key}' must be {kind.__name__}")
    return value


def _parse_status(value: str, where: str) -> Status:
    try:
        return Status(value)
    except ValueError as exc:
        raise StorageFormatError(f"{where}: unknown status '{value}'") from exc


@dataclass
class Story:
    """Leaf work item owned by exactly one epic."""

    name: str
    description: str
    status: Status = Status.OPEN

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any], where: str = "story") -> "Story":
        return Story(
            name=_require(data, "name", str, where),
            description=_require(data, "description", str, where),
            status=_parse_status(_require(data, "status", str, where), where),
        )


@dataclass
class Epic:
    """Top-level work item; ``stories`` holds story ids, never story data."""

    name: str
    description: str
    status: Status = Status.OPEN
    stories: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "stories": list(self.stories),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any], where: str = "epic") -> "Epic":
        stories = _require(data, "stories", list, where)
        if not all(isinstance(story_id, str) for story_id in stories):
            raise StorageFormatError(f"{where}: story ids must be strings")
        return Epic(
            name=_require(data, "name", str, where),
            description=_require(data, "description", str, where),
            status=_parse_status(_require(data, "status", str, where), where),
            stories=list(stories),
        )


@dataclass
class DBState:
    """Full snapshot of epics, stories and the last touched id."""

    epics: Dict[str, Epic] = field(default_factory=dict)
    stories: Dict[str, Story] = field(default_factory=dict)
    last_item_id: str = "0"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "last_item_id": self.last_item_id,
            "epics": {epic_id: epic.to_dict() for epic_id, epic in self.epics.items()},
            "stories": {story_id: story.to_dict() for story_id, story in self.stories.items()},
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "DBState":
        epics = _require(data, "epics", dict, "state")
        stories = _require(data, "stories", dict, "state")
        return DBState(
            epics={epic_id: Epic.from_dict(entry, f"epic {epic_id}") for epic_id, entry in epics.items()},
            stories={story_id: Story.from_dict(entry, f"story {story_id}") for story_id, entry in stories.items()},
            last_item_id=_require(data, "last_item_id", str, "state"),
        )
