"""Unit tests for the Module and Task entities."""

from datetime import date

import pytest

from studybook.domain.errors import (
    DeadlineTagAlreadyExistsError,
    PriorityTagAlreadyExistsError,
)
from studybook.domain.module import Module
from studybook.domain.task import Task, TaskPatch
from studybook.domain.value_objects import (
    DeadlineTag,
    ModuleCode,
    ModuleCredit,
    ModuleName,
    PriorityTag,
    TaskDescription,
    TaskStatus,
)
from tests.fixtures.entities import make_module, make_task


class TestModule:
    """Tests for Module identity."""

    @staticmethod
    def test_same_module_is_by_code() -> None:
        """Modules sharing a code are the same module."""
        module = make_module()
        renamed = make_module(name="Software Engineering Project", credit=2)
        assert module.is_same_module(renamed)
        assert module != renamed

    @staticmethod
    def test_code_case_does_not_matter() -> None:
        """Codes are canonicalised, so input case does not affect identity."""
        assert make_module("cs2103t").is_same_module(make_module("CS2103T"))

    @staticmethod
    def test_different_code() -> None:
        """A different code makes a different module."""
        assert not make_module().is_same_module(make_module("CS2101"))
        assert not make_module().is_same_module(None)

    @staticmethod
    def test_module_code_type_is_checked() -> None:
        """The code must be a ModuleCode."""
        with pytest.raises(TypeError):
            Module("CS2103T", ModuleName("SE"), ModuleCredit(4))  # type: ignore[arg-type]

    @staticmethod
    def test_str_is_code() -> None:
        """A module renders as its code."""
        assert str(Module(ModuleCode("cs2101"), ModuleName("EC"), ModuleCredit(4))) == "CS2101"


class TestTaskIdentity:
    """Tests for Task identity and equality."""

    @staticmethod
    def test_same_task_ignores_status_and_tags() -> None:
        """Status and tags never make two tasks distinct."""
        plain = make_task()
        decorated = make_task(
            status=TaskStatus.COMPLETE, priority="LOW", deadline=date(2024, 1, 1)
        )
        assert plain.is_same_task(decorated)
        assert plain != decorated

    @staticmethod
    def test_same_task_needs_same_module_and_description() -> None:
        """Both the module and the description must match."""
        task = make_task()
        assert not task.is_same_task(make_task(description="Other"))
        assert not task.is_same_task(make_task(make_module("CS2101")))
        assert not task.is_same_task(None)

    @staticmethod
    def test_same_task_compares_module_by_code() -> None:
        """A renamed module still identifies the same task."""
        renamed = make_module(name="Renamed", credit=2)
        assert make_task().is_same_task(make_task(renamed))

    @staticmethod
    def test_str() -> None:
        """A task renders as module and description."""
        assert str(make_task()) == "CS2103T; Description: Finish UG"

    @staticmethod
    def test_required_fields() -> None:
        """Module and description are required."""
        with pytest.raises(TypeError):
            Task(None, TaskDescription("x"))  # type: ignore[arg-type]


class TestTaskTransformations:
    """Tests for the mutators, which all return new tasks."""

    @staticmethod
    def test_mark_then_unmark_round_trips() -> None:
        """Marking then unmarking yields an equal task."""
        task = make_task()
        marked = task.mark()
        assert marked.is_complete()
        assert not task.is_complete()
        assert marked.unmark() == task

    @staticmethod
    def test_mark_is_idempotent() -> None:
        """Marking a complete task keeps it complete."""
        marked = make_task().mark()
        assert marked.mark() == marked

    @staticmethod
    def test_set_priority_tag_once() -> None:
        """A priority tag can be attached once."""
        tagged = make_task().set_priority_tag(PriorityTag.of("HIGH"))
        assert tagged.has_priority_tag()
        assert str(tagged.priority_tag) == "HIGH"

    @staticmethod
    def test_second_priority_tag_fails() -> None:
        """Attaching a second priority tag is refused."""
        tagged = make_task(priority="HIGH")
        with pytest.raises(PriorityTagAlreadyExistsError):
            tagged.set_priority_tag(PriorityTag.of("LOW"))

    @staticmethod
    def test_second_deadline_tag_fails() -> None:
        """Attaching a second deadline tag is refused."""
        tagged = make_task().set_deadline_tag(DeadlineTag(date(2024, 5, 1)))
        assert tagged.has_deadline_tag()
        with pytest.raises(DeadlineTagAlreadyExistsError):
            tagged.set_deadline_tag(DeadlineTag(date(2024, 6, 1)))

    @staticmethod
    def test_tags_are_independent() -> None:
        """A deadline can be added to a task with a priority and vice versa."""
        task = make_task(priority="MEDIUM").set_deadline_tag(DeadlineTag(date(2024, 5, 1)))
        assert task.has_priority_tag() and task.has_deadline_tag()

    @staticmethod
    def test_none_tag_is_rejected() -> None:
        """None is not a tag."""
        with pytest.raises(TypeError):
            make_task().set_priority_tag(None)  # type: ignore[arg-type]


class TestTaskPatch:
    """Tests for TaskPatch and Task.edit."""

    @staticmethod
    def test_empty_patch() -> None:
        """An empty patch edits nothing."""
        task = make_task(priority="HIGH")
        assert not TaskPatch().is_any_field_edited()
        assert task.edit(TaskPatch()) == task

    @staticmethod
    def test_edit_keeps_status_and_tags() -> None:
        """Editing the description keeps completion and tags."""
        task = make_task(priority="HIGH", deadline=date(2024, 2, 2)).mark()
        edited = task.edit(TaskPatch(description=TaskDescription("Revise")))
        assert edited.description == TaskDescription("Revise")
        assert edited.is_complete()
        assert edited.priority_tag == task.priority_tag
        assert edited.deadline_tag == task.deadline_tag

    @staticmethod
    def test_edit_module() -> None:
        """The module can be moved."""
        cs2101 = make_module("CS2101", "Effective Communication")
        edited = make_task().edit(TaskPatch(module=cs2101))
        assert edited.module == cs2101
        assert TaskPatch(module=cs2101).is_any_field_edited()

    @staticmethod
    def test_none_patch() -> None:
        """A patch is required."""
        with pytest.raises(TypeError):
            make_task().edit(None)  # type: ignore[arg-type]
