"""epicboard CLI entry point."""

from __future__ import annotations

from typing import Optional

import click

from . import __version__
from .config import Config
from .errors import EpicboardError


def _load_config(db_path: Optional[str]) -> Config:
    config = Config()
    if db_path:
        config.set("storage.db_path", db_path)
    return config


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option("--db", "db_path", default=None, help="Path to the JSON database (overrides storage.db_path)")
@click.pass_context
def main(ctx: click.Context, db_path: Optional[str]) -> None:
    """epicboard - terminal epic and story tracker."""
    ctx.obj = _load_config(db_path)
    if ctx.invoked_subcommand is None:
        from .console import run_console

        try:
            run_console(ctx.obj)
        except EpicboardError as exc:
            click.echo(f"Unable to start console mode: {exc}", err=True)
            ctx.exit(1)


@main.command()
@click.pass_obj
def init(config: Config) -> None:
    """Create an empty database file if none exists."""
    from .state.database import JSONFileDatabase

    database = JSONFileDatabase(config.db_path)
    try:
        created = database.initialize()
    except EpicboardError as exc:
        raise click.ClickException(str(exc)) from exc
    if created:
        click.echo(f"Created {database.file_path}")
    else:
        click.echo(f"{database.file_path} already exists")


@main.command()
@click.pass_obj
def epics(config: Config) -> None:
    """Print the epic listing and exit."""
    from .state.database import JSONFileDatabase
    from .state.repository import JiraRepository
    from .ui.pages import HomePage

    page = HomePage(JiraRepository(JSONFileDatabase(config.db_path)))
    try:
        page.draw_page()
    except EpicboardError as exc:
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    main()
