"""Aggregate owning the person, module and task lists."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from studybook.domain.module import Module
from studybook.domain.person import Person
from studybook.domain.task import Task
from studybook.domain.value_objects import ModuleCode

from .unique_list import DistinctModuleList, DistinctTaskList, UniquePersonList


@dataclass(frozen=True, slots=True)
class AddressBookSnapshot:
    """Immutable copy of the address book contents.

    This is the type exchanged with storage: loaded once at start-up and
    handed back after every successful state-changing command.
    """

    persons: tuple[Person, ...] = ()
    modules: tuple[Module, ...] = ()
    tasks: tuple[Task, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "persons", tuple(self.persons))
        object.__setattr__(self, "modules", tuple(self.modules))
        object.__setattr__(self, "tasks", tuple(self.tasks))


class AddressBook:
    """Wraps all data at the address-book level.

    Persons are unique by name, modules by module code and tasks by
    (module code, description).
    """

    def __init__(self, snapshot: AddressBookSnapshot | None = None) -> None:
        self._persons = UniquePersonList()
        self._modules = DistinctModuleList()
        self._tasks = DistinctTaskList()
        if snapshot is not None:
            self.reset_data(snapshot)

    # --- Read-only projections ---

    @property
    def persons(self) -> Sequence[Person]:
        """Live read-only view of the persons."""
        return self._persons.as_read_only()

    @property
    def modules(self) -> Sequence[Module]:
        """Live read-only view of the modules."""
        return self._modules.as_read_only()

    @property
    def tasks(self) -> Sequence[Task]:
        """Live read-only view of the tasks."""
        return self._tasks.as_read_only()

    # --- Bulk operations ---

    def reset_data(self, snapshot: AddressBookSnapshot) -> None:
        """Replace all contents with those of *snapshot*.

        Raises:
            DuplicateEntityError: If any of the snapshot's sequences contains
                duplicates. Nothing is replaced in that case.
        """
        if snapshot is None:
            raise TypeError("snapshot must not be None")
        # validate all three before touching anything
        persons = UniquePersonList(snapshot.persons)
        modules = DistinctModuleList(snapshot.modules)
        tasks = DistinctTaskList(snapshot.tasks)
        self._persons.set_all(persons)
        self._modules.set_all(modules)
        self._tasks.set_all(tasks)

    def to_snapshot(self) -> AddressBookSnapshot:
        """Return an immutable copy of the current contents."""
        return AddressBookSnapshot(
            persons=tuple(self._persons),
            modules=tuple(self._modules),
            tasks=tuple(self._tasks),
        )

    # --- Person-level operations ---

    def has_person(self, person: Person) -> bool:
        """Return True if a person with the same identity exists."""
        return self._persons.contains(person)

    def add_person(self, person: Person) -> None:
        """Add *person*; it must not already exist."""
        self._persons.add(person)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace *target* with *edited*; see `UniqueList.set_item`."""
        self._persons.set_item(target, edited)

    def remove_person(self, person: Person) -> None:
        """Remove *person*; it must exist."""
        self._persons.remove(person)

    # --- Module-level operations ---

    def has_module(self, module: Module) -> bool:
        """Return True if a module with the same code exists."""
        return self._modules.contains(module)

    def find_module(self, module_code: ModuleCode) -> Module | None:
        """Return the module with *module_code*, or None."""
        for module in self._modules:
            if module.module_code == module_code:
                return module
        return None

    def add_module(self, module: Module) -> None:
        """Add *module*; its code must not already be in use."""
        self._modules.add(module)

    def remove_module(self, module: Module) -> tuple[Task, ...]:
        """Remove *module* along with every task filed under it.

        Returns:
            The tasks that were removed.
        """
        self._modules.remove(module)
        orphaned = self.tasks_for_module(module)
        self._tasks.set_all(t for t in self._tasks if t not in orphaned)
        return orphaned

    # --- Task-level operations ---

    def tasks_for_module(self, module: Module) -> tuple[Task, ...]:
        """Return the tasks filed under *module*, in list order."""
        return tuple(t for t in self._tasks if t.module.is_same_module(module))

    def has_task(self, task: Task) -> bool:
        """Return True if a task with the same identity exists."""
        return self._tasks.contains(task)

    def add_task(self, task: Task) -> None:
        """Add *task*; it must not already exist."""
        self._tasks.add(task)

    def set_task(self, target: Task, edited: Task) -> None:
        """Replace *target* with *edited*; see `UniqueList.set_item`."""
        self._tasks.set_item(target, edited)

    def remove_task(self, task: Task) -> None:
        """Remove *task*; it must exist."""
        self._tasks.remove(task)

    # --- Plumbing ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self.to_snapshot() == other.to_snapshot()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"AddressBook({len(self._persons)} persons, "
            f"{len(self._modules)} modules, {len(self._tasks)} tasks)"
        )
