"""Taskboard CLI entry point."""

from __future__ import annotations

from typing import Tuple

import click

from . import __version__
from .config import Config
from .errors import ConfigError
from .state.board import TaskBoard
from .utils.logger import Logger


def _load_config(members: Tuple[str, ...]) -> Config:
    config = Config()
    if members:
        config.set("board.team_members", list(members))
    return config


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option("--member", "members", multiple=True, help="Team member name (repeatable; overrides the configured roster)")
@click.option("--no-seed", is_flag=True, help="Start with an empty task list")
@click.pass_context
def main(ctx: click.Context, members: Tuple[str, ...], no_seed: bool) -> None:
    """Taskboard - single-view terminal task manager."""
    ctx.ensure_object(dict)
    ctx.obj["members"] = members
    ctx.obj["no_seed"] = no_seed
    if ctx.invoked_subcommand is None:
        _start_tui(members, no_seed)


def _start_tui(members: Tuple[str, ...], no_seed: bool) -> None:
    """Helper to launch the Textual TUI."""
    try:
        config = _load_config(members)
        logger = Logger(config.log_dir())
        board = TaskBoard.from_config(config, seed=not no_seed, logger=logger)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    from .interactive import TaskBoardApp

    app = TaskBoardApp(board, board_title=config.get("board.title", "Task List"))
    app.run()


@main.command()
@click.pass_context
def tui(ctx: click.Context) -> None:
    """Start Textual TUI."""
    _start_tui(ctx.obj["members"], ctx.obj["no_seed"])


@main.command()
@click.pass_context
def roster(ctx: click.Context) -> None:
    """Print the team members available for assignment."""
    try:
        members = _load_config(ctx.obj["members"]).team_members()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    if not members:
        click.echo("No team members configured.")
        return
    for member in members:
        click.echo(member)


if __name__ == "__main__":
    main()
