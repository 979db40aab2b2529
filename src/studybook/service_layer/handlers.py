"""Service layer handlers.

Every handler has the signature ``handler(cmd, model) -> CommandResult``.
Indices are resolved against the displayed (filtered) lists of the model and
validated before anything is changed, so a handler that raises leaves the
model exactly as it found it.
"""

import logging
from collections.abc import Callable, Sequence

from studybook.domain.errors import (
    DeadlineTagAlreadyExistsError,
    DuplicateModuleError,
    DuplicatePersonError,
    DuplicateTaskError,
    PriorityTagAlreadyExistsError,
)
from studybook.domain.module import Module
from studybook.domain.person import PersonPatch
from studybook.domain.task import Task, TaskPatch
from studybook.domain.unsettable import UNSET, is_set
from studybook.domain.value_objects import ModuleCode
from studybook.model import AddressBookSnapshot, ModelManager
from studybook.model.predicates import (
    DescriptionContainsKeywords,
    NameContainsKeywords,
    TaskBelongsToModule,
    show_all,
)
from studybook.utils.index import Index

from . import commands
from . import messages as msg
from .errors import CommandError
from .results import CommandResult, Listing

# pylint: disable=consider-using-assignment-expr

logger = logging.getLogger(__name__)


def _resolve[T](index: Index, displayed: Sequence[T], message: str) -> T:
    """Return the item shown at *index*, or raise `CommandError(message)`."""
    if index.zero_based >= len(displayed):
        raise CommandError(message)
    return displayed[index.zero_based]


def _require_module(model: ModelManager, module_code: ModuleCode) -> Module:
    module = model.find_module(module_code)
    if module is None:
        raise CommandError(msg.MESSAGE_MODULE_NOT_FOUND.format(module_code))
    return module


# ============================================================================
#                               Person Handlers
# ============================================================================


def add_person(cmd: commands.AddPerson, model: ModelManager) -> CommandResult:
    """Add a new person unless someone with the same name exists."""
    if model.has_person(cmd.person):
        raise CommandError(msg.MESSAGE_DUPLICATE_PERSON)
    model.add_person(cmd.person)
    return CommandResult(
        msg.MESSAGE_ADD_PERSON_SUCCESS.format(cmd.person), listing=Listing.PERSONS
    )


def edit_person(cmd: commands.EditPerson, model: ModelManager) -> CommandResult:
    """Apply the edited fields to the displayed person at ``cmd.index``."""
    target = _resolve(
        cmd.index, model.filtered_persons, msg.MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
    )
    patch = PersonPatch(
        name=cmd.name,
        phone=cmd.phone,
        email=cmd.email,
        address=cmd.address,
        tags=cmd.tags,
    )
    edited = patch.apply_to(target)

    if not target.is_same_person(edited) and model.has_person(edited):
        raise CommandError(msg.MESSAGE_DUPLICATE_PERSON)
    try:
        model.set_person(target, edited)
    except DuplicatePersonError as exc:
        raise CommandError(msg.MESSAGE_DUPLICATE_PERSON) from exc

    model.update_filtered_person_list(show_all)
    return CommandResult(
        msg.MESSAGE_EDIT_PERSON_SUCCESS.format(edited), listing=Listing.PERSONS
    )


def delete_person(cmd: commands.DeletePerson, model: ModelManager) -> CommandResult:
    """Delete the displayed person at ``cmd.index``."""
    target = _resolve(
        cmd.index, model.filtered_persons, msg.MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
    )
    model.delete_person(target)
    return CommandResult(
        msg.MESSAGE_DELETE_PERSON_SUCCESS.format(target), listing=Listing.PERSONS
    )


def remark_person(cmd: commands.RemarkPerson, model: ModelManager) -> CommandResult:
    """Replace the remark of the displayed person at ``cmd.index``.

    An empty remark clears it and is reported as a removal.
    """
    target = _resolve(
        cmd.index, model.filtered_persons, msg.MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
    )
    edited = target.with_remark(cmd.remark)
    model.set_person(target, edited)
    model.update_filtered_person_list(show_all)

    template = (
        msg.MESSAGE_ADD_REMARK_SUCCESS
        if cmd.remark.value
        else msg.MESSAGE_DELETE_REMARK_SUCCESS
    )
    return CommandResult(template.format(edited), listing=Listing.PERSONS)


def list_persons(_cmd: commands.ListPersons, model: ModelManager) -> CommandResult:
    """Show every person."""
    model.update_filtered_person_list(show_all)
    return CommandResult(msg.MESSAGE_LIST_PERSONS_SUCCESS, listing=Listing.PERSONS)


def find_persons(cmd: commands.FindPersons, model: ModelManager) -> CommandResult:
    """Show the persons whose name contains one of the keywords."""
    model.update_filtered_person_list(NameContainsKeywords(cmd.keywords))
    return CommandResult(
        msg.MESSAGE_PERSONS_LISTED_OVERVIEW.format(len(model.filtered_persons)),
        listing=Listing.PERSONS,
    )


# ============================================================================
#                               Module Handlers
# ============================================================================


def add_module(cmd: commands.AddModule, model: ModelManager) -> CommandResult:
    """Add a module unless its code is already in use."""
    if model.has_module(cmd.module):
        raise CommandError(msg.MESSAGE_DUPLICATE_MODULE)
    try:
        model.add_module(cmd.module)
    except DuplicateModuleError as exc:
        raise CommandError(msg.MESSAGE_DUPLICATE_MODULE) from exc
    return CommandResult(
        msg.MESSAGE_ADD_MODULE_SUCCESS.format(cmd.module), listing=Listing.MODULES
    )


def delete_module(cmd: commands.DeleteModule, model: ModelManager) -> CommandResult:
    """Delete the displayed module at ``cmd.index`` and all of its tasks."""
    target = _resolve(
        cmd.index, model.filtered_modules, msg.MESSAGE_INVALID_MODULE_DISPLAYED_INDEX
    )
    removed = model.delete_module(target)
    logger.debug("Deleting module %s removed %d tasks", target, len(removed))

    feedback = msg.MESSAGE_DELETE_MODULE_SUCCESS.format(target)
    if removed:
        feedback += msg.MESSAGE_DELETE_MODULE_TASKS.format(len(removed))
    return CommandResult(feedback, listing=Listing.MODULES)


def list_modules(_cmd: commands.ListModules, model: ModelManager) -> CommandResult:
    """Show every module."""
    model.update_filtered_module_list(show_all)
    return CommandResult(msg.MESSAGE_LIST_MODULES_SUCCESS, listing=Listing.MODULES)


# ============================================================================
#                               Task Handlers
# ============================================================================


def add_task(cmd: commands.AddTask, model: ModelManager) -> CommandResult:
    """Add a task under an existing module."""
    module = _require_module(model, cmd.module_code)
    task = Task(
        module=module,
        description=cmd.description,
        priority_tag=cmd.priority_tag,
        deadline_tag=cmd.deadline_tag,
    )
    if model.has_task(task):
        raise CommandError(msg.MESSAGE_DUPLICATE_TASK)
    try:
        model.add_task(task)
    except DuplicateTaskError as exc:
        raise CommandError(msg.MESSAGE_DUPLICATE_TASK) from exc
    return CommandResult(msg.MESSAGE_ADD_TASK_SUCCESS.format(task), listing=Listing.TASKS)


def edit_task(cmd: commands.EditTask, model: ModelManager) -> CommandResult:
    """Move and/or re-describe the displayed task at ``cmd.index``."""
    target = _resolve(
        cmd.index, model.filtered_tasks, msg.MESSAGE_INVALID_TASK_DISPLAYED_INDEX
    )
    module = (
        _require_module(model, cmd.module_code) if is_set(cmd.module_code) else UNSET
    )
    edited = target.edit(TaskPatch(module=module, description=cmd.description))

    if not target.is_same_task(edited) and model.has_task(edited):
        raise CommandError(msg.MESSAGE_DUPLICATE_TASK)
    try:
        model.set_task(target, edited)
    except DuplicateTaskError as exc:
        raise CommandError(msg.MESSAGE_DUPLICATE_TASK) from exc

    model.update_filtered_task_list(show_all)
    return CommandResult(
        msg.MESSAGE_EDIT_TASK_SUCCESS.format(edited), listing=Listing.TASKS
    )


def delete_task(cmd: commands.DeleteTask, model: ModelManager) -> CommandResult:
    """Delete the displayed task at ``cmd.index``."""
    target = _resolve(
        cmd.index, model.filtered_tasks, msg.MESSAGE_INVALID_TASK_DISPLAYED_INDEX
    )
    model.delete_task(target)
    return CommandResult(
        msg.MESSAGE_DELETE_TASK_SUCCESS.format(target), listing=Listing.TASKS
    )


def mark_task(cmd: commands.MarkTask, model: ModelManager) -> CommandResult:
    """Mark the displayed task at ``cmd.index`` as complete."""
    target = _resolve(
        cmd.index, model.filtered_tasks, msg.MESSAGE_INVALID_TASK_DISPLAYED_INDEX
    )
    marked = target.mark()
    model.set_task(target, marked)
    return CommandResult(
        msg.MESSAGE_MARK_TASK_SUCCESS.format(marked), listing=Listing.TASKS
    )


def unmark_task(cmd: commands.UnmarkTask, model: ModelManager) -> CommandResult:
    """Mark the displayed task at ``cmd.index`` as incomplete."""
    target = _resolve(
        cmd.index, model.filtered_tasks, msg.MESSAGE_INVALID_TASK_DISPLAYED_INDEX
    )
    unmarked = target.unmark()
    model.set_task(target, unmarked)
    return CommandResult(
        msg.MESSAGE_UNMARK_TASK_SUCCESS.format(unmarked), listing=Listing.TASKS
    )


def tag_task(cmd: commands.TagTask, model: ModelManager) -> CommandResult:
    """Attach the given priority and/or deadline tag to a displayed task.

    Both tags are checked before the task is replaced, so a request carrying
    a fresh deadline and an already-present priority changes nothing.
    """
    target = _resolve(
        cmd.index, model.filtered_tasks, msg.MESSAGE_INVALID_TASK_DISPLAYED_INDEX
    )
    tagged = target
    try:
        if cmd.priority_tag is not None:
            tagged = tagged.set_priority_tag(cmd.priority_tag)
        if cmd.deadline_tag is not None:
            tagged = tagged.set_deadline_tag(cmd.deadline_tag)
    except PriorityTagAlreadyExistsError as exc:
        raise CommandError(msg.MESSAGE_PRIORITY_TAG_EXISTS) from exc
    except DeadlineTagAlreadyExistsError as exc:
        raise CommandError(msg.MESSAGE_DEADLINE_TAG_EXISTS) from exc

    model.set_task(target, tagged)
    return CommandResult(msg.MESSAGE_TAG_TASK_SUCCESS.format(tagged), listing=Listing.TASKS)


def list_tasks(cmd: commands.ListTasks, model: ModelManager) -> CommandResult:
    """Show every task, or only the tasks of ``cmd.module_code``."""
    if cmd.module_code is None:
        model.update_filtered_task_list(show_all)
        return CommandResult(msg.MESSAGE_LIST_TASKS_SUCCESS, listing=Listing.TASKS)

    _require_module(model, cmd.module_code)
    model.update_filtered_task_list(TaskBelongsToModule(cmd.module_code))
    return CommandResult(
        msg.MESSAGE_LIST_MODULE_TASKS_SUCCESS.format(cmd.module_code),
        listing=Listing.TASKS,
    )


def find_tasks(cmd: commands.FindTasks, model: ModelManager) -> CommandResult:
    """Show the tasks whose description contains one of the keywords."""
    model.update_filtered_task_list(DescriptionContainsKeywords(cmd.keywords))
    return CommandResult(
        msg.MESSAGE_TASKS_LISTED_OVERVIEW.format(len(model.filtered_tasks)),
        listing=Listing.TASKS,
    )


# ============================================================================
#                               General Handlers
# ============================================================================


def clear(_cmd: commands.Clear, model: ModelManager) -> CommandResult:
    """Remove every person, module and task."""
    model.reset_data(AddressBookSnapshot())
    return CommandResult(msg.MESSAGE_CLEAR_SUCCESS)


def show_help(
    _cmd: commands.Help, model: ModelManager  # pylint: disable=unused-argument
) -> CommandResult:
    """Return the usage of every command."""
    return CommandResult(help_text(), show_help=True)


def exit_app(
    _cmd: commands.Exit, model: ModelManager  # pylint: disable=unused-argument
) -> CommandResult:
    """Ask the frontend to end the session."""
    return CommandResult(msg.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)


def help_text() -> str:
    """Usage of every command, separated by blank lines."""
    return "\n\n".join(command.USAGE for command in commands.ALL_COMMANDS)


COMMAND_HANDLERS: dict[type[commands.Command], Callable[..., CommandResult]] = {
    commands.AddPerson: add_person,
    commands.EditPerson: edit_person,
    commands.DeletePerson: delete_person,
    commands.RemarkPerson: remark_person,
    commands.ListPersons: list_persons,
    commands.FindPersons: find_persons,
    commands.AddModule: add_module,
    commands.DeleteModule: delete_module,
    commands.ListModules: list_modules,
    commands.AddTask: add_task,
    commands.EditTask: edit_task,
    commands.DeleteTask: delete_task,
    commands.MarkTask: mark_task,
    commands.UnmarkTask: unmark_task,
    commands.TagTask: tag_task,
    commands.ListTasks: list_tasks,
    commands.FindTasks: find_tasks,
    commands.Clear: clear,
    commands.Help: show_help,
    commands.Exit: exit_app,
}
