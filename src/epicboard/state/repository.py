"""Epic and story operations with referential integrity."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Optional

from ..errors import IntegrityError, NotFoundError
from .database import Database
from .ids import IdGenerator, generate_id
from .models import DBState, Epic, Status, Story

if TYPE_CHECKING:
    from ..utils.logger import EventLogger


class JiraRepository:
    """Owns every read and write of the board state.

    Each call loads the full state from the backend, and each mutating call
    writes it back in full. Nothing is cached between calls, so sequential
    calls always observe each other's effects.
    """

    def __init__(
        self,
        database: Database,
        id_generator: IdGenerator = generate_id,
        logger: Optional["EventLogger"] = None,
    ) -> None:
        self.database = database
        self.id_generator = id_generator
        self.logger = logger

    def read_db(self) -> DBState:
        """Load the current state."""
        return self.database.read_db()

    # ------------------------------------------------------------------ #
    # Mutations
    # ------------------------------------------------------------------ #
    def create_epic(self, name: str, description: str) -> str:
        """Create an open epic with no stories and return its id."""
        db_state = self.read_db()
        epic_id = self.id_generator()
        db_state.epics[epic_id] = Epic(name=name, description=description)
        db_state.last_item_id = epic_id
        self.database.write_db(db_state)

        if self.logger:
            self.logger.log_epic_created(epic_id, name)
        return epic_id

    def create_story(self, name: str, description: str, epic_id: str) -> str:
        """Create an open story under ``epic_id`` and return its id."""
        db_state = self.read_db()
        epic = self._epic(db_state, epic_id)

        story_id = self.id_generator()
        db_state.stories[story_id] = Story(name=name, description=description)
        epic.stories.append(story_id)
        db_state.last_item_id = story_id
        self.database.write_db(db_state)

        if self.logger:
            self.logger.log_story_created(epic_id, story_id, name)
        return story_id

    def delete_epic(self, epic_id: str) -> None:
        """Delete an epic together with every story it references."""
        db_state = self.read_db()
        epic = self._epic(db_state, epic_id)

        for story_id in epic.stories:
            db_state.stories.pop(story_id, None)
        del db_state.epics[epic_id]
        db_state.last_item_id = epic_id
        self.database.write_db(db_state)

        if self.logger:
            self.logger.log_epic_deleted(epic_id, list(epic.stories))

    def delete_story(self, epic_id: str, story_id: str) -> None:
        """Delete a story and drop it from the epic's story list.

        The story must exist globally and the epic must exist. A story that
        is not in this epic's list is still deleted globally; the list is
        simply left as it is.
        """
        db_state = self.read_db()
        if story_id not in db_state.stories:
            raise NotFoundError(f"Story with id {story_id} does not exist.")
        epic = self._epic(db_state, epic_id)

        epic.stories = [sid for sid in epic.stories if sid != story_id]
        del db_state.stories[story_id]
        db_state.last_item_id = story_id
        self.database.write_db(db_state)

        if self.logger:
            self.logger.log_story_deleted(epic_id, story_id)

    def update_epic_status(self, epic_id: str, status: Status) -> None:
        """Set the status of an epic."""
        db_state = self.read_db()
        self._epic(db_state, epic_id).status = status
        self.database.write_db(db_state)

        if self.logger:
            self.logger.log_epic_status(epic_id, status)

    def update_story_status(self, story_id: str, status: Status) -> None:
        """Set the status of a story."""
        db_state = self.read_db()
        story = db_state.stories.get(story_id)
        if story is None:
            raise NotFoundError(f"Story with id {story_id} does not exist.")
        story.status = status
        self.database.write_db(db_state)

        if self.logger:
            self.logger.log_story_status(story_id, status)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    def get_epic(self, epic_id: str) -> Epic:
        """Return a copy of the epic."""
        return copy.deepcopy(self._epic(self.read_db(), epic_id))

    def get_epic_story(self, epic_id: str, story_id: str) -> Story:
        """Return a copy of a story, which must be listed by ``epic_id``."""
        db_state = self.read_db()
        epic = self._epic(db_state, epic_id)
        if story_id not in epic.stories:
            raise NotFoundError(f"Story with id {story_id} does not exist in epic {epic_id}.")

        story = db_state.stories.get(story_id)
        if story is None:
            raise IntegrityError(f"Epic {epic_id} references missing story {story_id}.")
        return copy.deepcopy(story)

    @staticmethod
    def _epic(db_state: DBState, epic_id: str) -> Epic:
        epic = db_state.epics.get(epic_id)
        if epic is None:
            raise NotFoundError(f"Epic with id {epic_id} does not exist.")
        return epic
