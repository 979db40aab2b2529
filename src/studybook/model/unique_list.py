"""Ordered collections that reject duplicates under an identity predicate."""

from __future__ import annotations

import abc
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import ClassVar, Generic, TypeVar, overload

from studybook.domain import errors
from studybook.domain.module import Module
from studybook.domain.person import Person
from studybook.domain.task import Task

T = TypeVar("T")

# pylint: disable=consider-using-assignment-expr


# ============================================================================
#                               Views
# ============================================================================


class ReadOnlyView(Sequence[T]):
    """Live, read-only window onto a backing list."""

    def __init__(self, backing: list[T]) -> None:
        self._backing = backing

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._backing[index])
        return self._backing[index]

    def __len__(self) -> int:
        return len(self._backing)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._backing!r})"


class FilteredView(Sequence[T]):
    """Live, read-only projection of a sequence through a predicate.

    Changing the predicate only changes what the view exposes; the source
    sequence is never modified.
    """

    def __init__(
        self, source: Sequence[T], predicate: Callable[[T], bool] | None = None
    ) -> None:
        self._source = source
        self._predicate = predicate or show_all

    @property
    def predicate(self) -> Callable[[T], bool]:
        """The predicate currently applied."""
        return self._predicate

    def set_predicate(self, predicate: Callable[[T], bool]) -> None:
        """Replace the predicate."""
        if predicate is None:
            raise TypeError("predicate must not be None")
        self._predicate = predicate

    def _visible(self) -> list[T]:
        return [item for item in self._source if self._predicate(item)]

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._visible()[index])
        return self._visible()[index]

    def __len__(self) -> int:
        return len(self._visible())

    def __iter__(self) -> Iterator[T]:
        return iter(self._visible())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._visible()!r})"


def show_all(_item: object) -> bool:
    """Predicate that accepts every item."""
    return True


# ============================================================================
#                           Unique list base
# ============================================================================


class UniqueList(abc.ABC, Generic[T]):
    """Ordered list in which no two items share an identity.

    Identity is decided by `is_same`, which subclasses implement with the
    entity's identity predicate. Targets of `set_item` and `remove` are located
    by full equality. Insertion order is kept, and `set_item` replaces in place
    so displayed positions stay stable.
    """

    KIND: ClassVar[str]
    DUPLICATE_ERROR: ClassVar[type[errors.DuplicateEntityError]]
    NOT_FOUND_ERROR: ClassVar[type[errors.EntityNotFoundError]]

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        self._view = ReadOnlyView(self._items)
        self.set_all(items)

    @abc.abstractmethod
    def is_same(self, first: T, second: T) -> bool:
        """Return True if *first* and *second* share an identity."""

    # --- Queries ---

    def contains(self, item: T) -> bool:
        """Return True if an item with the same identity as *item* is present."""
        self._require(item)
        return any(self.is_same(existing, item) for existing in self._items)

    def as_read_only(self) -> Sequence[T]:
        """Return a live read-only view of the items."""
        return self._view

    # --- Mutations ---

    def add(self, item: T) -> None:
        """Append *item*.

        Raises:
            DuplicateEntityError: If an item with the same identity exists.
        """
        if self.contains(item):
            raise self.DUPLICATE_ERROR(str(item))
        self._items.append(item)

    def set_item(self, target: T, edited: T) -> None:
        """Replace *target* with *edited* at the same position.

        Raises:
            EntityNotFoundError: If *target* is not in the list.
            DuplicateEntityError: If *edited* shares an identity with any item
                other than *target*.
        """
        self._require(edited)
        position = self._position_of(target)
        for i, existing in enumerate(self._items):
            if i != position and self.is_same(existing, edited):
                raise self.DUPLICATE_ERROR(str(edited))
        self._items[position] = edited

    def remove(self, item: T) -> None:
        """Remove *item*.

        Raises:
            EntityNotFoundError: If *item* is not in the list.
        """
        del self._items[self._position_of(item)]

    def set_all(self, items: Iterable[T]) -> None:
        """Replace every item at once.

        Raises:
            DuplicateEntityError: If *items* contains two items with the same
                identity. The list is left unchanged in that case.
        """
        if items is None:
            raise TypeError("items must not be None")
        incoming = list(items)
        for i, first in enumerate(incoming):
            self._require(first)
            for second in incoming[i + 1 :]:
                if self.is_same(first, second):
                    raise self.DUPLICATE_ERROR(str(second))
        # slice assignment keeps views bound to the same list object
        self._items[:] = incoming

    # --- Helpers ---

    def _position_of(self, target: T) -> int:
        self._require(target)
        for i, existing in enumerate(self._items):
            if existing == target:
                return i
        raise self.NOT_FOUND_ERROR(str(target))

    def _require(self, item: T) -> None:
        if item is None:
            raise TypeError(f"{self.KIND} must not be None")

    # --- Plumbing ---

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueList) or type(other) is not type(self):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


# ============================================================================
#                           Concrete lists
# ============================================================================


class UniquePersonList(UniqueList[Person]):
    """Person list; duplicates are persons with the same name."""

    KIND = "person"
    DUPLICATE_ERROR = errors.DuplicatePersonError
    NOT_FOUND_ERROR = errors.PersonNotFoundError

    def is_same(self, first: Person, second: Person) -> bool:
        return first.is_same_person(second)


class DistinctModuleList(UniqueList[Module]):
    """Module list; duplicates are modules with the same module code."""

    KIND = "module"
    DUPLICATE_ERROR = errors.DuplicateModuleError
    NOT_FOUND_ERROR = errors.UnknownModuleError

    def is_same(self, first: Module, second: Module) -> bool:
        return first.is_same_module(second)


class DistinctTaskList(UniqueList[Task]):
    """Task list; duplicates are tasks with the same module and description."""

    KIND = "task"
    DUPLICATE_ERROR = errors.DuplicateTaskError
    NOT_FOUND_ERROR = errors.TaskNotFoundError

    def is_same(self, first: Task, second: Task) -> bool:
        return first.is_same_task(second)
