"""Terminal message helpers for the StudyBook CLI.

Each helper prints one styled line to stderr, prefixed with a glyph. Emoji
glyphs fall back to ASCII when stderr cannot encode them.
"""

import click

CAUTION_GLYPHS = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS_GLYPHS = ("✅", "[OK]")  # pragma: no mutate
ERROR_GLYPHS = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(glyphs: tuple[str, str]) -> str:
    """Return the emoji of an ``(emoji, fallback)`` pair if stderr supports it.

    Example:
        ``glyph(SUCCESS_GLYPHS)`` is ``"✅"`` on a UTF-8 terminal and
        ``"[OK]"`` on an ASCII one.
    """
    emoji, fallback = glyphs
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  Stored data could not be loaded; starting empty.``
    """
    click.secho(f"{glyph(CAUTION_GLYPHS)}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Command feedback goes to stderr so that tables printed on stdout can be
    piped on their own.

    Example:
        ``✅  Marked Task: CS2103T; Description: Finish UG``
    """
    click.secho(f"{glyph(SUCCESS_GLYPHS)}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  The task index provided is invalid``
    """
    click.secho(f"{glyph(ERROR_GLYPHS)}  {msg}", fg="red", bold=True, err=True)
