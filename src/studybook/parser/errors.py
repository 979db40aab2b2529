"""Errors raised while parsing user input."""


class ParseError(Exception):
    """Raised when user input does not match the expected format.

    The message is meant to be shown to the user as-is.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
