"""Entry point frontends use to run user input against the model."""

import logging
from collections.abc import Sequence

from studybook.domain.module import Module
from studybook.domain.person import Person
from studybook.domain.task import Task
from studybook.interfaces.storage import AddressBookStorage, StorageError
from studybook.model import ModelManager
from studybook.parser import ParseError, parse_command

from . import messages as msg
from .errors import CommandError
from .messagebus import MessageBus
from .results import CommandResult

logger = logging.getLogger(__name__)


class Logic:
    """Parses user input, dispatches it and persists the outcome.

    After a state-changing command succeeds, the address book contents are
    handed to *storage*. A failed parse or command never reaches storage.

    Args:
        bus: Message bus with handlers already bound to the model.
        storage: Where to save the contents after a state-changing command.
    """

    def __init__(self, bus: MessageBus, storage: AddressBookStorage) -> None:
        self._bus = bus
        self._storage = storage

    @property
    def model(self) -> ModelManager:
        """The model the bus operates on."""
        return self._bus.model

    def execute(self, user_input: str) -> CommandResult:
        """Run one line of user input.

        Raises:
            ParseError: If the input is not a valid command.
            CommandError: If the command cannot be carried out, or its
                outcome could not be saved. In the latter case the change
                stays applied to the model; only the file is out of date.
        """
        logger.info("----------------[USER COMMAND][%s]", user_input)
        try:
            command = parse_command(user_input)
        except ParseError as e:
            logger.info("Could not parse %r: %s", user_input, e.message)
            raise
        result = self._bus.handle(command)

        if command.MUTATES:
            try:
                self._storage.save(self.model.address_book.to_snapshot())
            except StorageError as e:
                logger.warning("Saving after %s failed: %s", command, e)
                raise CommandError(msg.MESSAGE_SAVE_FAILED.format(e)) from e
        return result

    # --- Displayed lists ---

    @property
    def filtered_persons(self) -> Sequence[Person]:
        """Persons currently on display."""
        return self.model.filtered_persons

    @property
    def filtered_modules(self) -> Sequence[Module]:
        """Modules currently on display."""
        return self.model.filtered_modules

    @property
    def filtered_tasks(self) -> Sequence[Task]:
        """Tasks currently on display."""
        return self.model.filtered_tasks
