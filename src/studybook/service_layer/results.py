"""Outcome of executing a command."""

import enum
from dataclasses import dataclass


class Listing(enum.Enum):
    """Which displayed list a command changed, so a frontend can redraw it."""

    PERSONS = "persons"
    MODULES = "modules"
    TASKS = "tasks"


@dataclass(frozen=True)
class CommandResult:
    """Feedback returned to the user after a command succeeds.

    Attributes:
        feedback_to_user: Message shown to the user.
        show_help: Whether the frontend should show the help text.
        exit: Whether the frontend should end the session.
        listing: The displayed list the command changed, if any.
    """

    feedback_to_user: str
    show_help: bool = False
    exit: bool = False
    listing: Listing | None = None

    def __post_init__(self) -> None:
        if self.feedback_to_user is None:
            raise TypeError("feedback_to_user must not be None")
