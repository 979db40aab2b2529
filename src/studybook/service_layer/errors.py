"""Errors raised by command handlers."""


class CommandError(Exception):
    """Raised when a command cannot be applied to the current model state.

    Covers invalid displayed indices, duplicate entities and missing
    prerequisites. The model is left exactly as it was before the command.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
