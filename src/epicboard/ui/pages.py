"""Console pages: render the board and classify user input into actions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import click

from ..errors import IntegrityError, NotFoundError
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
from .helpers import get_column_string


def _header(text: str) -> str:
    return click.style(text, fg="bright_green", bold=True)


def _menu(text: str) -> str:
    return click.style(text, fg="bright_cyan")


class Page(ABC):
    """A view over the repository. Pages never write state."""

    def __init__(self, db: JiraRepository) -> None:
        self.db = db

    @abstractmethod
    def draw_page(self) -> None:
        """Print the page to the terminal."""

    @abstractmethod
    def handle_input(self, input: str) -> Optional[Action]:
        """Translate a line of user input into an action, if any."""


class HomePage(Page):
    """Lists every epic."""

    def draw_page(self) -> None:
        db_state = self.db.read_db()

        click.echo(_header("----------------------------- EPICS -----------------------------"))
        click.echo("     id     |               name               |      status      ")
        for epic_id, epic in db_state.epics.items():
            click.echo(
                f" {get_column_string(epic_id, 10)} | "
                f"{get_column_string(epic.name, 32)} | "
                f"{get_column_string(epic.status.label, 16)} "
            )

        click.echo()
        click.echo()
        click.echo(_menu("[q] quit | [c] create epic | [:id:] navigate to epic"))

    def handle_input(self, input: str) -> Optional[Action]:
        if input == "q":
            return Exit()
        if input == "c":
            return CreateEpic()
        if input in self.db.read_db().epics:
            return NavigateToEpicDetail(epic_id=input)
        return None


class EpicDetail(Page):
    """Shows one epic and the stories it lists."""

    def __init__(self, epic_id: str, db: JiraRepository) -> None:
        super().__init__(db)
        self.epic_id = epic_id

    def draw_page(self) -> None:
        db_state = self.db.read_db()
        epic = db_state.epics.get(self.epic_id)
        if epic is None:
            raise NotFoundError(f"Epic with id {self.epic_id} does not exist.")

        click.echo(_header("------------------------------ EPIC ------------------------------"))
        click.echo("  id  |     name     |         description         |    status    ")
        click.echo(
            f" {get_column_string(self.epic_id, 5)} | "
            f"{get_column_string(epic.name, 12)} | "
            f"{get_column_string(epic.description, 27)} | "
            f"{get_column_string(epic.status.label, 13)}"
        )
        click.echo()

        click.echo(_header("---------------------------- STORIES ----------------------------"))
        click.echo("     id     |               name               |      status      ")
        for story_id in epic.stories:
            story = db_state.stories.get(story_id)
            if story is None:
                raise IntegrityError(f"Epic {self.epic_id} references missing story {story_id}.")
            click.echo(
                f" {get_column_string(story_id, 10)} | "
                f"{get_column_string(story.name, 32)} | "
                f"{get_column_string(story.status.label, 16)} "
            )

        click.echo()
        click.echo()
        click.echo(
            _menu("[p] previous | [u] update epic | [d] delete epic | [c] create story | [:id:] navigate to story")
        )

    def handle_input(self, input: str) -> Optional[Action]:
        if input == "p":
            return NavigateToPreviousPage()
        if input == "u":
            return UpdateEpicStatus(epic_id=self.epic_id)
        if input == "d":
            return DeleteEpic(epic_id=self.epic_id)
        if input == "c":
            return CreateStory(epic_id=self.epic_id)
        if input in self.db.get_epic(self.epic_id).stories:
            return NavigateToStoryDetail(epic_id=self.epic_id, story_id=input)
        return None


class StoryDetail(Page):
    """Shows a single story."""

    def __init__(self, epic_id: str, story_id: str, db: JiraRepository) -> None:
        super().__init__(db)
        self.epic_id = epic_id
        self.story_id = story_id

    def draw_page(self) -> None:
        story = self.db.get_epic_story(self.epic_id, self.story_id)

        click.echo(_header("------------------------------ STORY ------------------------------"))
        click.echo("  id  |     name     |         description         |    status    ")
        click.echo(
            f" {get_column_string(self.story_id, 5)} | "
            f"{get_column_string(story.name, 12)} | "
            f"{get_column_string(story.description, 27)} | "
            f"{get_column_string(story.status.label, 13)}"
        )

        click.echo()
        click.echo()
        click.echo(_menu("[p] previous | [u] update story | [d] delete story"))

    def handle_input(self, input: str) -> Optional[Action]:
        if input == "p":
            return NavigateToPreviousPage()
        if input == "u":
            return UpdateStoryStatus(story_id=self.story_id)
        if input == "d":
            return DeleteStory(epic_id=self.epic_id, story_id=self.story_id)
        return None
