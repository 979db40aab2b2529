"""Click callback for ``-L/--logger-level NAME=LEVEL`` options.

Values may be repeated or packed into one comma/space separated string (as
they arrive from the ``STUDYBOOK_LOGGER_LEVELS`` environment variable).
"""

import logging
import re

import click

# Libraries that are chatty at DEBUG unless told otherwise
DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING, "markdown_it": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten *value* into non-empty ``NAME=LEVEL`` items."""
    if value is None:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Parse NAME=LEVEL pairs into a logger-name -> numeric-level mapping.

    Starts from `DEFAULT_LIB_LEVELS`; later items override earlier ones.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL, NAME is empty or
            LEVEL is not a standard logging level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
