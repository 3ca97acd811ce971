"""Actions returned by pages for the navigator to execute."""

from __future__ import annotations

from dataclasses import dataclass


class Action:
    """Base class for page actions."""


@dataclass(frozen=True)
class NavigateToEpicDetail(Action):
    epic_id: str


@dataclass(frozen=True)
class NavigateToStoryDetail(Action):
    epic_id: str
    story_id: str


@dataclass(frozen=True)
class NavigateToPreviousPage(Action):
    pass


@dataclass(frozen=True)
class CreateEpic(Action):
    pass


@dataclass(frozen=True)
class UpdateEpicStatus(Action):
    epic_id: str


@dataclass(frozen=True)
class DeleteEpic(Action):
    epic_id: str


@dataclass(frozen=True)
class CreateStory(Action):
    epic_id: str


@dataclass(frozen=True)
class UpdateStoryStatus(Action):
    story_id: str


@dataclass(frozen=True)
class DeleteStory(Action):
    epic_id: str
    story_id: str


@dataclass(frozen=True)
class Exit(Action):
    pass
