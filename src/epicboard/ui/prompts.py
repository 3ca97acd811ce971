"""Interactive prompts used by the navigator."""

from __future__ import annotations

from typing import Optional

import click

from ..state.models import Epic, Status, Story

STATUS_CHOICES = {
    "1": Status.OPEN,
    "2": Status.IN_PROGRESS,
    "3": Status.RESOLVED,
    "4": Status.CLOSED,
}


class Prompts:
    """Collects input for create, update and delete actions."""

    def create_epic(self) -> Epic:
        click.echo("----------------------------")
        name = click.prompt("Epic Name", default="", show_default=False).strip()
        description = click.prompt("Epic Description", default="", show_default=False).strip()
        return Epic(name=name, description=description)

    def create_story(self) -> Story:
        click.echo("----------------------------")
        name = click.prompt("Story Name", default="", show_default=False).strip()
        description = click.prompt("Story Description", default="", show_default=False).strip()
        return Story(name=name, description=description)

    def delete_epic(self) -> bool:
        click.echo("----------------------------")
        return click.confirm(
            "Are you sure you want to delete this epic? All stories in this epic will also be deleted",
            default=False,
        )

    def delete_story(self) -> bool:
        click.echo("----------------------------")
        return click.confirm("Are you sure you want to delete this story?", default=False)

    def update_status(self) -> Optional[Status]:
        """Ask for a new status; anything outside 1-4 cancels."""
        click.echo("----------------------------")
        choice = click.prompt(
            "New Status (1 - OPEN, 2 - IN PROGRESS, 3 - RESOLVED, 4 - CLOSED)",
            default="",
            show_default=False,
        )
        return STATUS_CHOICES.get(choice.strip())
