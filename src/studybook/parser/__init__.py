"""Turns raw command text into validated value objects and commands."""

from .command_parser import parse, parse_command
from .errors import ParseError

__all__ = ["ParseError", "parse", "parse_command"]
