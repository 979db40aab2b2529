"""Message bus routing commands to their handlers."""

import logging
from collections.abc import Callable

from studybook.model import ModelManager

from .commands import Command
from .errors import CommandError
from .results import CommandResult

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """A simple message bus for handling commands.

    The message bus routes each command to the handler registered for its
    exact type, and takes care of logging around the dispatch. The model the
    handlers operate on is also available here for convenience.

    Args:
        model: The model the handlers operate on. It should still have been
            injected into the command handlers; it is just also available here.
        command_handlers: A mapping of command types to their handlers.
            Handlers should be callables that accept a single command argument
            and return a `CommandResult`. Additional dependencies (i.e. the
            model) should be injected via closures or other means.

    Raises:
        TypeError: If *model* is None.
    """

    def __init__(
        self,
        model: ModelManager,
        command_handlers: dict[type[Command], Callable[..., CommandResult]],
    ) -> None:
        if model is None:
            raise TypeError("model must not be None")
        self.model = model
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> CommandResult:
        """Handle a command by dispatching it to the appropriate handler.

        Args:
            cmd: The command to handle.

        Returns:
            The handler's result.

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            CommandError: If the command cannot be carried out for a reason
                the user can fix.
            Exception: If the handler raises any other exception.
        """

        if handler := self._command_handlers.get(type(cmd)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling command %s with handler %s", cmd, handler_name)
            try:
                return handler(cmd)
            except CommandError as exc:
                logger.info("Command %s rejected: %s", cmd, exc.message)
                raise
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling command %s with handler %s", cmd, handler_name
                )
                raise
        else:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

    @staticmethod
    def _get_handler_name(fn: Callable[..., CommandResult]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
