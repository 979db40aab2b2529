"""The Task entity and its edit patch."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from .errors import DeadlineTagAlreadyExistsError, PriorityTagAlreadyExistsError
from .module import Module
from .unsettable import UNSET, Unsettable, is_set, resolve
from .value_objects import DeadlineTag, PriorityTag, TaskDescription, TaskStatus


@dataclass(frozen=True, slots=True)
class Task:
    """A piece of work belonging to a module.

    Equality compares every field. Identity (`is_same_task`) only compares the
    module code and the description, so completion status and tags never make
    two tasks distinct for duplicate detection.

    A task carries at most one priority tag and one deadline tag. Every
    mutator returns a new task.
    """

    module: Module
    description: TaskDescription
    status: TaskStatus = TaskStatus.INCOMPLETE
    priority_tag: PriorityTag | None = None
    deadline_tag: DeadlineTag | None = None

    def __post_init__(self) -> None:
        if self.module is None or self.description is None or self.status is None:
            raise TypeError("Task module, description and status must not be None")

    # --- Identity ---

    def is_same_task(self, other: Task | None) -> bool:
        """Return True if *other* has the same module and description."""
        if other is self:
            return True
        return (
            other is not None
            and other.module.is_same_module(self.module)
            and other.description == self.description
        )

    # --- Queries ---

    def is_complete(self) -> bool:
        """Return True if the task is marked complete."""
        return self.status.is_complete()

    def has_priority_tag(self) -> bool:
        """Return True if a priority tag is attached."""
        return self.priority_tag is not None

    def has_deadline_tag(self) -> bool:
        """Return True if a deadline tag is attached."""
        return self.deadline_tag is not None

    # --- Transformations ---

    def mark(self) -> Task:
        """Return this task marked as complete."""
        return replace(self, status=TaskStatus.COMPLETE)

    def unmark(self) -> Task:
        """Return this task marked as incomplete."""
        return replace(self, status=TaskStatus.INCOMPLETE)

    def set_priority_tag(self, tag: PriorityTag) -> Task:
        """Return this task with *tag* attached.

        Raises:
            PriorityTagAlreadyExistsError: If a priority tag is already attached.
        """
        if tag is None:
            raise TypeError("tag must not be None")
        if self.has_priority_tag():
            raise PriorityTagAlreadyExistsError(str(self))
        return replace(self, priority_tag=tag)

    def set_deadline_tag(self, tag: DeadlineTag) -> Task:
        """Return this task with *tag* attached.

        Raises:
            DeadlineTagAlreadyExistsError: If a deadline tag is already attached.
        """
        if tag is None:
            raise TypeError("tag must not be None")
        if self.has_deadline_tag():
            raise DeadlineTagAlreadyExistsError(str(self))
        return replace(self, deadline_tag=tag)

    def edit(self, patch: TaskPatch) -> Task:
        """Return this task with *patch* applied; status and tags carry over."""
        if patch is None:
            raise TypeError("patch must not be None")
        return replace(
            self,
            module=resolve(patch.module, self.module),
            description=resolve(patch.description, self.description),
        )

    def __str__(self) -> str:
        return f"{self.module}; Description: {self.description}"


@dataclass(frozen=True, slots=True)
class TaskPatch:
    """Sparse edit of a task's module and description."""

    module: Unsettable[Module] = UNSET
    description: Unsettable[TaskDescription] = UNSET

    def is_any_field_edited(self) -> bool:
        """Return True if at least one field carries a value."""
        return any(is_set(getattr(self, field.name)) for field in fields(self))
