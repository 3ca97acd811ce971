"""Page stack and action execution."""

from __future__ import annotations

from typing import List, Optional

from ..state.repository import JiraRepository
from .actions import (
    Action,
    CreateEpic,
    CreateStory,
    DeleteEpic,
    DeleteStory,
    Exit,
    NavigateToEpicDetail,
    NavigateToPreviousPage,
    NavigateToStoryDetail,
    UpdateEpicStatus,
    UpdateStoryStatus,
)
from .pages import EpicDetail, HomePage, Page, StoryDetail
from .prompts import Prompts


class Navigator:
    """Executes actions against the repository and tracks the active page."""

    def __init__(self, db: JiraRepository, prompts: Optional[Prompts] = None) -> None:
        self.db = db
        self.prompts = prompts or Prompts()
        self.pages: List[Page] = [HomePage(db)]

    def get_current_page(self) -> Optional[Page]:
        return self.pages[-1] if self.pages else None

    def get_page_count(self) -> int:
        return len(self.pages)

    def handle_action(self, action: Action) -> None:
        """Run ``action``; repository errors propagate to the caller."""
        if isinstance(action, NavigateToEpicDetail):
            self.pages.append(EpicDetail(action.epic_id, self.db))
        elif isinstance(action, NavigateToStoryDetail):
            self.pages.append(StoryDetail(action.epic_id, action.story_id, self.db))
        elif isinstance(action, NavigateToPreviousPage):
            if self.pages:
                self.pages.pop()
        elif isinstance(action, CreateEpic):
            epic = self.prompts.create_epic()
            self.db.create_epic(epic.name, epic.description)
        elif isinstance(action, UpdateEpicStatus):
            status = self.prompts.update_status()
            if status is not None:
                self.db.update_epic_status(action.epic_id, status)
        elif isinstance(action, DeleteEpic):
            if self.prompts.delete_epic():
                self.db.delete_epic(action.epic_id)
                if self.pages:
                    self.pages.pop()
        elif isinstance(action, CreateStory):
            story = self.prompts.create_story()
            self.db.create_story(story.name, story.description, action.epic_id)
        elif isinstance(action, UpdateStoryStatus):
            status = self.prompts.update_status()
            if status is not None:
                self.db.update_story_status(action.story_id, status)
        elif isinstance(action, DeleteStory):
            if self.prompts.delete_story():
                self.db.delete_story(action.epic_id, action.story_id)
                if self.pages:
                    self.pages.pop()
        elif isinstance(action, Exit):
            self.pages.clear()
        else:
            raise TypeError(f"Unsupported action: {action!r}")
