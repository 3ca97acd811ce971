"""Plain console mode: draw the current page, read a line, run the action."""

from __future__ import annotations

from typing import Optional

import click

from .config import Config
from .errors import EpicboardError
from .state.database import JSONFileDatabase
from .state.ids import id_generator
from .state.repository import JiraRepository
from .ui.navigator import Navigator
from .utils.logger import EventLogger


class ConsoleApp:
    """Sequential console loop driving the navigator."""

    def __init__(self, navigator: Navigator, logger: Optional[EventLogger] = None, clear_screen: bool = True) -> None:
        self.navigator = navigator
        self.logger = logger
        self.clear_screen = clear_screen

    def run(self) -> None:
        """Loop until the page stack is empty or the user interrupts."""
        try:
            while self.step():
                pass
        except (KeyboardInterrupt, EOFError, click.Abort):
            click.echo("\nExiting epicboard.")

    def step(self) -> bool:
        """Run one draw/read/handle cycle. Returns False once no page is left."""
        page = self.navigator.get_current_page()
        if page is None:
            return False

        if self.clear_screen:
            click.clear()

        try:
            page.draw_page()
        except EpicboardError as exc:
            self._report("draw", f"Error rendering page: {exc}")

        user_input = input().strip()

        try:
            action = page.handle_input(user_input)
        except EpicboardError as exc:
            self._report("input", f"Error getting user input: {exc}")
            return True

        if action is not None:
            try:
                self.navigator.handle_action(action)
            except EpicboardError as exc:
                self._report("action", f"Error handling processing user input: {exc}")

        return self.navigator.get_current_page() is not None

    def _report(self, stage: str, message: str) -> None:
        if self.logger:
            self.logger.log_error(stage, message)
        click.echo(click.style(message, fg="bright_yellow"))
        click.pause("Press any key to continue...")


def build_repository(config: Config) -> JiraRepository:
    """Wire a file-backed repository from configuration."""
    database = JSONFileDatabase(config.db_path)
    database.initialize()
    log_file = config.log_file
    logger = EventLogger(log_file) if log_file else None
    return JiraRepository(database, id_generator=id_generator(config.id_length), logger=logger)


def run_console(config: Config) -> None:
    """Start the console session."""
    db = build_repository(config)
    ConsoleApp(Navigator(db), logger=db.logger).run()
