"""StudyBook commands: run one command, start a shell, or show the lists.

Behavior
- Command feedback and errors go to **stderr** via the message helpers;
  tables go to **stdout**.
- The data file is loaded once per invocation and saved after every
  state-changing command.

Failure modes
- Invalid input or a rejected command in ``run`` -> ``ClickException``
  (exit code 1) carrying the user-facing message.
- In ``shell`` the same errors are printed and the loop continues.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
import click_extra as clickx
from rich.console import Console

from studybook import config
from studybook.bootstrap import AppContainer, bootstrap
from studybook.parser import ParseError
from studybook.service_layer.errors import CommandError
from studybook.service_layer.results import CommandResult, Listing

from .display import modules_table, persons_table, render, tasks_table
from .helpers import error, success, warn

logger = logging.getLogger(__name__)

PROMPT = "studybook"  # pragma: no mutate
WELCOME = "Welcome to StudyBook! Type 'help' to see the available commands."
INPUT_CLOSED = "Input closed; leaving StudyBook."


def _data_path(ctx: click.Context) -> Path:
    obj = ctx.find_object(dict) or {}
    return obj.get("data_path") or config.get_data_path()


def _console(ctx: click.Context) -> Console:
    return Console(color_system=None if ctx.color is False else "auto")


def _app(ctx: click.Context) -> AppContainer:
    return bootstrap(data_path=_data_path(ctx))


def _present(result: CommandResult, app: AppContainer, console: Console) -> None:
    if result.show_help:
        click.echo(result.feedback_to_user)
        return
    success(result.feedback_to_user)
    if result.listing is not None:
        render(console, app.logic, result.listing)


@click.command()
@click.argument("command_text", nargs=-1, required=True)
@clickx.pass_context
def run(ctx: click.Context, command_text: tuple[str, ...]) -> None:
    """Run a single StudyBook command, e.g. ``studybook run mark 1``."""
    app = _app(ctx)
    user_input = " ".join(command_text)
    try:
        result = app.logic.execute(user_input)
    except (ParseError, CommandError) as e:
        raise click.ClickException(e.message) from e
    _present(result, app, _console(ctx))


@click.command()
@clickx.pass_context
def shell(ctx: click.Context) -> None:
    """Start an interactive session; type ``exit`` to leave."""
    app = _app(ctx)
    console = _console(ctx)
    click.echo(WELCOME)

    while True:
        try:
            user_input = click.prompt(
                PROMPT, prompt_suffix="> ", default="", show_default=False
            )
        except click.Abort:
            click.echo()
            warn(INPUT_CLOSED)
            break
        if not user_input.strip():
            continue

        try:
            result = app.logic.execute(user_input)
        except (ParseError, CommandError) as e:
            error(e.message)
            continue

        _present(result, app, console)
        if result.exit:
            break
    logger.debug("Shell session ended")


@click.command()
@click.argument(
    "listing",
    type=click.Choice([listing.value for listing in Listing], case_sensitive=False),
    required=False,
)
@clickx.pass_context
def show(ctx: click.Context, listing: str | None) -> None:
    """Show the stored persons, modules and/or tasks as tables."""
    app = _app(ctx)
    console = _console(ctx)
    model = app.model
    selected = {Listing(listing.lower())} if listing else set(Listing)

    if Listing.PERSONS in selected:
        console.print(persons_table(model.filtered_persons))
    if Listing.MODULES in selected:
        console.print(modules_table(model.filtered_modules))
    if Listing.TASKS in selected:
        console.print(tasks_table(model.filtered_tasks))
