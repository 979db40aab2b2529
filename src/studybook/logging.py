"""Logging helpers used by the StudyBook CLI and application.

Console output goes through Rich on stderr so that stdout stays free for
the tables the CLI prints. An optional in-memory "flight recorder" keeps recent
records at DEBUG granularity and writes them to a file once something goes
wrong. `configure_logging` puts the pieces together for the CLI.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "studybook"
DEFAULT_LEVEL = logging.WARNING
LEVEL_STEP = 10  # pragma: no mutate
DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000  # pragma: no mutate

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FILE_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with the library's top-level name.

    Records from ``studybook.*`` loggers get an empty ``prefix``; anything
    else gets e.g. ``"[click_extra]"``. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def effective_level(verbose_count: int = 0, quiet_count: int = 0) -> int:
    """Console level after applying ``-v``/``-q`` repetitions to WARNING.

    Each ``-v`` lowers the threshold by one standard level, each ``-q`` raises
    it; the result is clamped to DEBUG..CRITICAL.
    """
    level = DEFAULT_LEVEL - LEVEL_STEP * verbose_count + LEVEL_STEP * quiet_count
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, show timestamps, logger names and source paths.
        color: Enable color output when True. Mirrors click-extra's
            ``--color/--no-color``.

    Returns:
        RichHandler: Handler writing to stderr.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(fmt=DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = DEFAULT_FLIGHT_RECORDER_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    Up to *capacity* records are buffered and written to *path* when a record
    at *flush_level* or above arrives, or on close if *flush_on_close*.

    Args:
        path: Destination file for flushed records. Its directory is created
            if missing.
        capacity: Number of records to buffer in memory.
        flush_level: Level at or above which the buffer is flushed.
        flush_on_close: If True, flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory-backed handler with a FileHandler target.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int,
    debug_mode: bool = False,
    color: bool = True,
    flight_recorder_path: Path | None = None,
    flight_recorder_capacity: int = DEFAULT_FLIGHT_RECORDER_CAPACITY,
    force_flush: bool = False,
    logger_levels: dict[str, int] | None = None,
) -> list[logging.Handler]:
    """Install the console handler (and flight recorder) on the root logger.

    The root logger is set to DEBUG so each handler applies its own threshold.
    Any existing root configuration is replaced.

    Returns:
        The handlers that were installed.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if flight_recorder_path is not None:
        handlers.append(
            config_flight_recorder(
                path=flight_recorder_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(lvl)
    return handlers


def _distribution_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    data_path: Path,
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary and DEBUG-level diagnostics.

    The diagnostics cover interpreter and platform, process id, working
    directory, the versions of the console libraries, the data file, active
    handlers, flight-recorder settings and per-logger overrides.
    """
    logger.info(
        "StudyBook %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("click-extra: %s", _distribution_version("click-extra"))
    logger.debug("rich: %s", _distribution_version("rich"))
    logger.debug("Data file: %s", data_path)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            str(log_path) if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
    else:
        logger.debug("Per-logger overrides: <none>")
