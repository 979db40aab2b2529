"""Bootstrap the message bus with handlers and the model."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING

from studybook import config
from studybook.adapters.json_storage import JsonFileStorage
from studybook.domain.errors import DuplicateEntityError
from studybook.interfaces.storage import AddressBookStorage, DataLoadingError
from studybook.model import AddressBook, ModelManager
from studybook.service_layer.handlers import COMMAND_HANDLERS
from studybook.service_layer.logic import Logic
from studybook.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from studybook.service_layer.commands import Command
    from studybook.service_layer.results import CommandResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus
    logic: Logic
    storage: AddressBookStorage

    @property
    def model(self) -> ModelManager:
        """The model shared by the bus and the logic facade."""
        return self.message_bus.model


def build_model(storage: AddressBookStorage) -> ModelManager:
    """Build a model holding the contents of *storage*.

    Starts with an empty address book when nothing has been stored yet, or
    when the stored data cannot be used; the latter is logged as a warning.
    """
    try:
        snapshot = storage.load()
    except DataLoadingError as e:
        logger.warning("Stored data could not be loaded (%s); starting empty", e)
        return ModelManager()

    if snapshot is None:
        logger.info("No stored data found; starting empty")
        return ModelManager()

    try:
        address_book = AddressBook(snapshot)
    except DuplicateEntityError as e:
        logger.warning("Stored data is inconsistent (%s); starting empty", e)
        return ModelManager()
    return ModelManager(address_book)


def build_message_bus(
    model: ModelManager,
    command_handlers: dict[type[Command], Callable[..., CommandResult]],
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"model": model}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        model,
        command_handlers=injected_command_handlers,
    )


def bootstrap(
    data_path: Path | None = None, storage: AddressBookStorage | None = None
) -> AppContainer:
    """Bootstrap the message bus with handlers and the stored contents.

    Args:
        data_path: JSON data file to use; defaults to `config.get_data_path()`.
            Ignored when *storage* is given.
        storage: Storage to use instead of a JSON file.
    """
    if storage is None:
        storage = JsonFileStorage(data_path or config.get_data_path())
    model = build_model(storage)
    message_bus = build_message_bus(model, COMMAND_HANDLERS)

    return AppContainer(
        message_bus=message_bus,
        logic=Logic(message_bus, storage),
        storage=storage,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)
