"""In-memory model handed to every command handler."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from studybook.domain.module import Module
from studybook.domain.person import Person
from studybook.domain.task import Task
from studybook.domain.value_objects import ModuleCode

from .address_book import AddressBook, AddressBookSnapshot
from .unique_list import FilteredView, show_all

logger = logging.getLogger(__name__)


class ModelManager:
    """The address book plus the filtered lists currently on display.

    Commands resolve user-supplied indices against the ``filtered_*`` views,
    never against the full collections.
    """

    def __init__(self, address_book: AddressBook | None = None) -> None:
        self._address_book = address_book if address_book is not None else AddressBook()
        self._filtered_persons = FilteredView(self._address_book.persons)
        self._filtered_modules = FilteredView(self._address_book.modules)
        self._filtered_tasks = FilteredView(self._address_book.tasks)
        logger.debug("Initialised model with %r", self._address_book)

    @property
    def address_book(self) -> AddressBook:
        """The underlying address book."""
        return self._address_book

    def reset_data(self, snapshot: AddressBookSnapshot) -> None:
        """Replace the address book contents with *snapshot*."""
        self._address_book.reset_data(snapshot)

    # --- Displayed lists ---

    @property
    def filtered_persons(self) -> Sequence[Person]:
        """Persons currently on display."""
        return self._filtered_persons

    @property
    def filtered_modules(self) -> Sequence[Module]:
        """Modules currently on display."""
        return self._filtered_modules

    @property
    def filtered_tasks(self) -> Sequence[Task]:
        """Tasks currently on display."""
        return self._filtered_tasks

    def update_filtered_person_list(self, predicate: Callable[[Person], bool]) -> None:
        """Display only the persons matching *predicate*."""
        self._filtered_persons.set_predicate(predicate)

    def update_filtered_module_list(self, predicate: Callable[[Module], bool]) -> None:
        """Display only the modules matching *predicate*."""
        self._filtered_modules.set_predicate(predicate)

    def update_filtered_task_list(self, predicate: Callable[[Task], bool]) -> None:
        """Display only the tasks matching *predicate*."""
        self._filtered_tasks.set_predicate(predicate)

    # --- Persons ---

    def has_person(self, person: Person) -> bool:
        """Return True if a person with the same identity exists."""
        return self._address_book.has_person(person)

    def add_person(self, person: Person) -> None:
        """Add *person* and show the full person list."""
        self._address_book.add_person(person)
        self.update_filtered_person_list(show_all)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace *target* with *edited*."""
        self._address_book.set_person(target, edited)

    def delete_person(self, person: Person) -> None:
        """Remove *person*."""
        self._address_book.remove_person(person)

    # --- Modules ---

    def has_module(self, module: Module) -> bool:
        """Return True if a module with the same code exists."""
        return self._address_book.has_module(module)

    def find_module(self, module_code: ModuleCode) -> Module | None:
        """Return the module with *module_code*, or None."""
        return self._address_book.find_module(module_code)

    def add_module(self, module: Module) -> None:
        """Add *module* and show the full module list."""
        self._address_book.add_module(module)
        self.update_filtered_module_list(show_all)

    def delete_module(self, module: Module) -> tuple[Task, ...]:
        """Remove *module* and its tasks; return the removed tasks."""
        return self._address_book.remove_module(module)

    # --- Tasks ---

    def has_task(self, task: Task) -> bool:
        """Return True if a task with the same identity exists."""
        return self._address_book.has_task(task)

    def add_task(self, task: Task) -> None:
        """Add *task* and show the full task list."""
        self._address_book.add_task(task)
        self.update_filtered_task_list(show_all)

    def set_task(self, target: Task, edited: Task) -> None:
        """Replace *target* with *edited*."""
        self._address_book.set_task(target, edited)

    def delete_task(self, task: Task) -> None:
        """Remove *task*."""
        self._address_book.remove_task(task)

    # --- Plumbing ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._address_book == other._address_book
            and list(self._filtered_persons) == list(other._filtered_persons)
            and list(self._filtered_modules) == list(other._filtered_modules)
            and list(self._filtered_tasks) == list(other._filtered_tasks)
        )

    __hash__ = None  # type: ignore[assignment]
