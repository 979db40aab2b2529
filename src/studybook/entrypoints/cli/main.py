"""StudyBook CLI entry point.

Defines the top-level ``studybook`` command (via Click-Extra), configures
logging for every invocation and registers the subcommands.

Available commands
- ``studybook run COMMAND...``: run one command against the data file.
- ``studybook shell``: interactive session until ``exit``.
- ``studybook show [persons|modules|tasks]``: print the stored lists.

Notes
- The CLI version is sourced from `studybook.__version__` and displayed
  automatically by Click-Extra (``--version``).

Examples
    $ studybook run add-module m/CS2103T n/Software Engineering c/4
    $ studybook run add-task m/CS2103T d/Finish UG pr/HIGH
    $ studybook show tasks
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from studybook import __version__, config
from studybook.logging import (
    DEFAULT_FLIGHT_RECORDER_CAPACITY,
    configure_logging,
    effective_level,
    log_startup,
)

from .book import run, shell, show
from .helpers import parse_log_level

logger = logging.getLogger(__name__)


HELP = """StudyBook command-line interface.

    StudyBook keeps your contacts, the modules you are taking and the tasks
    due for each module in one place. Commands are typed in a short prefix
    syntax, e.g. ``add-task m/CS2103T d/Finish UG dl/31-10-2024``.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--data-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="JSON file holding the address book (created on first save).",
    default=None,
    envvar=config.DATA_PATH_ENV_VAR,
    show_envvar=True,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir(config.APP_NAME, appauthor=False)) / "latest.log",
    envvar="STUDYBOOK_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=DEFAULT_FLIGHT_RECORDER_CAPACITY,
    hidden=True,
    envvar="STUDYBOOK_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via STUDYBOOK_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "(unaffected by -v/-q) and writes them to --log-path when a WARNING/ERROR "
        "occurs, or on clean exit if --force-flush is set."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR."
    ),
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight-recorder. Repeatable (e.g. -L studybook.parser=DEBUG) "
        "or via STUDYBOOK_LOGGER_LEVELS (comma/space list)."
    ),
    envvar="STUDYBOOK_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def studybook(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    data_path: Path | None,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """StudyBook command-line interface."""

    level = effective_level(verbose_count, quiet_count)
    handlers = configure_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,  # None or True => allow color
        flight_recorder_path=log_path if flight_recorder else None,
        flight_recorder_capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.ensure_object(dict)
    ctx.obj["data_path"] = data_path or config.get_data_path()

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        data_path=ctx.obj["data_path"],
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


studybook.add_command(run)
studybook.add_command(shell)
studybook.add_command(show)
