"""CLI helpers for StudyBook.

Message emitters that write to stderr with emoji→ASCII fallbacks, and the
click callback that parses ``-L NAME=LEVEL`` options.
"""

from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["error", "parse_log_level", "success", "warn"]
