"""Unit tests for the module handlers."""

from studybook.model.predicates import TaskBelongsToModule
from studybook.domain.value_objects import ModuleCode
from studybook.service_layer import commands
from studybook.service_layer import messages as msg
from studybook.service_layer.results import Listing
from studybook.utils.index import Index
from tests.fixtures.entities import make_module

from .base import HandlerTestBase

FIRST = Index.from_one_based(1)
SECOND = Index.from_one_based(2)


class TestAddModule(HandlerTestBase):
    """Tests for the add_module handler via the message bus."""

    def test_adds_module(self):
        """A new module is appended and reported by code."""
        module = make_module("MA1521", "Calculus for Computing", 4)
        result = self.handle(commands.AddModule(module))
        assert result.feedback_to_user == "New module added: MA1521"
        assert result.listing is Listing.MODULES
        assert self.model.address_book.modules[-1] == module

    def test_rejects_existing_code(self):
        """A module whose code is in use is refused, whatever its name."""
        self.assert_rejected(
            commands.AddModule(make_module(name="Other", credit=2)),
            msg.MESSAGE_DUPLICATE_MODULE,
        )


class TestDeleteModule(HandlerTestBase):
    """Tests for the delete_module handler via the message bus."""

    def test_deletes_module_and_its_tasks(self):
        """Deleting a module cascades to its tasks and reports how many."""
        result = self.handle(commands.DeleteModule(FIRST))
        assert result.feedback_to_user == "Deleted Module: CS2103T (2 tasks removed)"
        assert [str(m) for m in self.model.address_book.modules] == ["CS2101"]
        assert [str(t.description) for t in self.model.address_book.tasks] == [
            "Draft report"
        ]

    def test_module_without_tasks(self):
        """No count is reported when nothing was filed under the module."""
        self.handle(commands.AddModule(make_module("MA1521", "Calculus", 4)))
        result = self.handle(commands.DeleteModule(Index.from_one_based(3)))
        assert result.feedback_to_user == "Deleted Module: MA1521"

    def test_out_of_range(self):
        """An index past the end is refused."""
        self.assert_rejected(
            commands.DeleteModule(Index.from_one_based(3)),
            msg.MESSAGE_INVALID_MODULE_DISPLAYED_INDEX,
        )

    def test_filtered_task_list_follows(self):
        """Removed tasks disappear from a filtered task list too."""
        self.model.update_filtered_task_list(TaskBelongsToModule(ModuleCode("CS2103T")))
        self.handle(commands.DeleteModule(FIRST))
        assert not self.model.filtered_tasks


class TestListModules(HandlerTestBase):
    """Tests for the list_modules handler via the message bus."""

    def test_lists_modules(self):
        """Every module is shown."""
        self.model.update_filtered_module_list(lambda module: False)
        result = self.handle(commands.ListModules())
        assert result.feedback_to_user == msg.MESSAGE_LIST_MODULES_SUCCESS
        assert len(self.model.filtered_modules) == 2
