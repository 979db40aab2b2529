"""Module defining Commands.

Commands are frozen dataclasses: two commands are equal exactly when they are
the same kind and carry equal arguments. The set of commands is closed; see
`AnyCommand` and `ALL_COMMANDS`.
"""

from dataclasses import dataclass
from typing import ClassVar

from studybook.domain.module import Module
from studybook.domain.person import Person
from studybook.domain.unsettable import UNSET, Unsettable
from studybook.domain.value_objects import (
    Address,
    DeadlineTag,
    Email,
    ModuleCode,
    Name,
    Phone,
    PriorityTag,
    Remark,
    Tag,
    TaskDescription,
)
from studybook.utils.index import Index

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""

    COMMAND_WORD: ClassVar[str]
    USAGE: ClassVar[str]
    MUTATES: ClassVar[bool] = False


# ============================================================================
#                               Person commands
# ============================================================================


@dataclass(frozen=True)
class AddPerson(Command):
    """Add a person to the address book."""

    COMMAND_WORD: ClassVar[str] = "add"
    USAGE: ClassVar[str] = (
        "add: Adds a person to the address book.\n"
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [t/TAG]...\n"
        "Example: add n/John Doe p/98765432 e/johnd@example.com "
        "a/311, Clementi Ave 2, #02-25 t/friends t/owesMoney"
    )
    MUTATES: ClassVar[bool] = True

    person: Person


@dataclass(frozen=True)
class EditPerson(Command):
    """Edit the fields of the person at a displayed index."""

    COMMAND_WORD: ClassVar[str] = "edit"
    USAGE: ClassVar[str] = (
        "edit: Edits the details of the person identified by the index number "
        "used in the displayed person list. Existing values will be overwritten "
        "by the input values.\n"
        "Parameters: INDEX (must be a positive integer) "
        "[n/NAME] [p/PHONE] [e/EMAIL] [a/ADDRESS] [t/TAG]...\n"
        "Example: edit 1 p/91234567 e/johndoe@example.com"
    )
    MUTATES: ClassVar[bool] = True

    index: Index
    name: Unsettable[Name] = UNSET
    phone: Unsettable[Phone] = UNSET
    email: Unsettable[Email] = UNSET
    address: Unsettable[Address] = UNSET
    tags: Unsettable[frozenset[Tag]] = UNSET


@dataclass(frozen=True)
class DeletePerson(Command):
    """Delete the person at a displayed index."""

    COMMAND_WORD: ClassVar[str] = "delete"
    USAGE: ClassVar[str] = (
        "delete: Deletes the person identified by the index number used in the "
        "displayed person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )
    MUTATES: ClassVar[bool] = True

    index: Index


@dataclass(frozen=True)
class RemarkPerson(Command):
    """Replace the remark of the person at a displayed index."""

    COMMAND_WORD: ClassVar[str] = "remark"
    USAGE: ClassVar[str] = (
        "remark: Edits the remark of the person identified by the index number "
        "used in the displayed person list. Existing remark will be overwritten "
        "by the input; an empty remark removes it.\n"
        "Parameters: INDEX (must be a positive integer) r/[REMARK]\n"
        "Example: remark 1 r/Likes to swim."
    )
    MUTATES: ClassVar[bool] = True

    index: Index
    remark: Remark


@dataclass(frozen=True)
class ListPersons(Command):
    """Show every person."""

    COMMAND_WORD: ClassVar[str] = "list"
    USAGE: ClassVar[str] = "list: Lists all persons.\nExample: list"


@dataclass(frozen=True)
class FindPersons(Command):
    """Show the persons whose name contains any of the keywords."""

    COMMAND_WORD: ClassVar[str] = "find"
    USAGE: ClassVar[str] = (
        "find: Finds all persons whose names contain any of the specified "
        "keywords (case-insensitive) and displays them as a list with index "
        "numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find alice bob charlie"
    )

    keywords: tuple[str, ...]


# ============================================================================
#                               Module commands
# ============================================================================


@dataclass(frozen=True)
class AddModule(Command):
    """Add a module."""

    COMMAND_WORD: ClassVar[str] = "add-module"
    USAGE: ClassVar[str] = (
        "add-module: Adds a module to the module list.\n"
        "Parameters: m/MODULE_CODE n/MODULE_NAME c/MODULE_CREDIT\n"
        "Example: add-module m/CS2103T n/Software Engineering c/4"
    )
    MUTATES: ClassVar[bool] = True

    module: Module


@dataclass(frozen=True)
class DeleteModule(Command):
    """Delete the module at a displayed index along with its tasks."""

    COMMAND_WORD: ClassVar[str] = "delete-module"
    USAGE: ClassVar[str] = (
        "delete-module: Deletes the module identified by the index number used "
        "in the displayed module list, together with all of its tasks.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete-module 1"
    )
    MUTATES: ClassVar[bool] = True

    index: Index


@dataclass(frozen=True)
class ListModules(Command):
    """Show every module."""

    COMMAND_WORD: ClassVar[str] = "list-modules"
    USAGE: ClassVar[str] = "list-modules: Lists all modules.\nExample: list-modules"


# ============================================================================
#                               Task commands
# ============================================================================


@dataclass(frozen=True)
class AddTask(Command):
    """Add a task under an existing module."""

    COMMAND_WORD: ClassVar[str] = "add-task"
    USAGE: ClassVar[str] = (
        "add-task: Adds a task to the task list.\n"
        "Parameters: m/MODULE_CODE d/DESCRIPTION [pr/PRIORITY] [dl/DEADLINE]\n"
        "Example: add-task m/CS2103T d/Finish UG pr/HIGH dl/31-10-2024"
    )
    MUTATES: ClassVar[bool] = True

    module_code: ModuleCode
    description: TaskDescription
    priority_tag: PriorityTag | None = None
    deadline_tag: DeadlineTag | None = None


@dataclass(frozen=True)
class EditTask(Command):
    """Edit the module and/or description of the task at a displayed index."""

    COMMAND_WORD: ClassVar[str] = "edit-task"
    USAGE: ClassVar[str] = (
        "edit-task: Edits the module or description of the task identified by "
        "the index number used in the displayed task list.\n"
        "Parameters: INDEX (must be a positive integer) [m/MODULE_CODE] "
        "[d/DESCRIPTION]\n"
        "Example: edit-task 1 d/Finish DG"
    )
    MUTATES: ClassVar[bool] = True

    index: Index
    module_code: Unsettable[ModuleCode] = UNSET
    description: Unsettable[TaskDescription] = UNSET


@dataclass(frozen=True)
class DeleteTask(Command):
    """Delete the task at a displayed index."""

    COMMAND_WORD: ClassVar[str] = "delete-task"
    USAGE: ClassVar[str] = (
        "delete-task: Deletes the task identified by the index number used in "
        "the displayed task list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete-task 1"
    )
    MUTATES: ClassVar[bool] = True

    index: Index


@dataclass(frozen=True)
class MarkTask(Command):
    """Mark the task at a displayed index as complete."""

    COMMAND_WORD: ClassVar[str] = "mark"
    USAGE: ClassVar[str] = (
        "mark: Marks the task identified by the index number used in the "
        "displayed task list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: mark 1"
    )
    MUTATES: ClassVar[bool] = True

    index: Index


@dataclass(frozen=True)
class UnmarkTask(Command):
    """Mark the task at a displayed index as incomplete."""

    COMMAND_WORD: ClassVar[str] = "unmark"
    USAGE: ClassVar[str] = (
        "unmark: Unmarks the task identified by the index number used in the "
        "displayed task list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: unmark 1"
    )
    MUTATES: ClassVar[bool] = True

    index: Index


@dataclass(frozen=True)
class TagTask(Command):
    """Attach a priority and/or deadline tag to the task at a displayed index."""

    COMMAND_WORD: ClassVar[str] = "tag"
    USAGE: ClassVar[str] = (
        "tag: Adds a priority tag and/or a deadline tag to the task identified "
        "by the index number used in the displayed task list. A task holds at "
        "most one tag of each kind.\n"
        "Parameters: INDEX (must be a positive integer) [pr/PRIORITY] "
        "[dl/DEADLINE]\n"
        "Example: tag 1 pr/HIGH dl/31-10-2024"
    )
    MUTATES: ClassVar[bool] = True

    index: Index
    priority_tag: PriorityTag | None = None
    deadline_tag: DeadlineTag | None = None


@dataclass(frozen=True)
class ListTasks(Command):
    """Show every task, or only those of one module."""

    COMMAND_WORD: ClassVar[str] = "list-tasks"
    USAGE: ClassVar[str] = (
        "list-tasks: Lists all tasks, or only the tasks of the given module.\n"
        "Parameters: [m/MODULE_CODE]\n"
        "Example: list-tasks m/CS2103T"
    )

    module_code: ModuleCode | None = None


@dataclass(frozen=True)
class FindTasks(Command):
    """Show the tasks whose description contains any of the keywords."""

    COMMAND_WORD: ClassVar[str] = "find-task"
    USAGE: ClassVar[str] = (
        "find-task: Finds all tasks whose descriptions contain any of the "
        "specified keywords (case-insensitive).\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find-task tutorial quiz"
    )

    keywords: tuple[str, ...]


# ============================================================================
#                               General commands
# ============================================================================


@dataclass(frozen=True)
class Clear(Command):
    """Remove every person, module and task."""

    COMMAND_WORD: ClassVar[str] = "clear"
    USAGE: ClassVar[str] = "clear: Clears all entries.\nExample: clear"
    MUTATES: ClassVar[bool] = True


@dataclass(frozen=True)
class Help(Command):
    """Show how to use every command."""

    COMMAND_WORD: ClassVar[str] = "help"
    USAGE: ClassVar[str] = "help: Shows program usage instructions.\nExample: help"


@dataclass(frozen=True)
class Exit(Command):
    """End the session."""

    COMMAND_WORD: ClassVar[str] = "exit"
    USAGE: ClassVar[str] = "exit: Exits the program.\nExample: exit"


type AnyCommand = (
    AddPerson
    | EditPerson
    | DeletePerson
    | RemarkPerson
    | ListPersons
    | FindPersons
    | AddModule
    | DeleteModule
    | ListModules
    | AddTask
    | EditTask
    | DeleteTask
    | MarkTask
    | UnmarkTask
    | TagTask
    | ListTasks
    | FindTasks
    | Clear
    | Help
    | Exit
)

ALL_COMMANDS: tuple[type[Command], ...] = AnyCommand.__value__.__args__
