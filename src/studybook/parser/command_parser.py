"""Parses a line of user input into a `Command`.

The first whitespace-delimited word selects the command; the rest of the line
is handed to that command's argument parser. Field values are validated by
`field_parsers`, whose messages are passed through unchanged. Structural
problems (a missing mandatory prefix, stray text before the first prefix, a
malformed index) are reported with the command's usage instead.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from studybook.domain.module import Module
from studybook.domain.person import Person
from studybook.service_layer import commands
from studybook.service_layer.commands import Command
from studybook.utils.index import Index

from . import field_parsers as fp
from .errors import ParseError
from .tokenizer import (
    PREFIX_ADDRESS,
    PREFIX_DEADLINE,
    PREFIX_DESCRIPTION,
    PREFIX_EMAIL,
    PREFIX_MODULE_CODE,
    PREFIX_MODULE_CREDIT,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_PRIORITY,
    PREFIX_REMARK,
    PREFIX_TAG,
    ArgumentMultimap,
    Prefix,
    tokenize,
)

logger = logging.getLogger(__name__)

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
MESSAGE_NOT_TAGGED = "At least one of pr/PRIORITY or dl/DEADLINE must be provided."

_BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)

type ArgumentParser = Callable[[str], Command]


def _invalid_format(command_type: type[Command]) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(command_type.USAGE))


def _tokenize_strict(
    args: str,
    command_type: type[Command],
    *prefixes: Prefix,
    required: tuple[Prefix, ...] = (),
) -> ArgumentMultimap:
    """Tokenize *args*, requiring an empty preamble and every *required* prefix."""
    multimap = tokenize(args, *prefixes)
    if multimap.get_preamble() or not all(multimap.has(p) for p in required):
        raise _invalid_format(command_type)
    return multimap


def _parse_index_or_usage(text: str, command_type: type[Command]) -> Index:
    try:
        return fp.parse_index(text)
    except ParseError as exc:
        raise _invalid_format(command_type) from exc


def _parse_keywords(args: str, command_type: type[Command]) -> tuple[str, ...]:
    keywords = tuple(args.split())
    if not keywords:
        raise _invalid_format(command_type)
    return keywords


# ============================================================================
#                               Person commands
# ============================================================================


def _parse_add_person(args: str) -> commands.AddPerson:
    multimap = _tokenize_strict(
        args,
        commands.AddPerson,
        PREFIX_NAME,
        PREFIX_PHONE,
        PREFIX_EMAIL,
        PREFIX_ADDRESS,
        PREFIX_TAG,
        required=(PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS),
    )
    person = Person(
        name=fp.parse_name(multimap.get_value(PREFIX_NAME)),
        phone=fp.parse_phone(multimap.get_value(PREFIX_PHONE)),
        email=fp.parse_email(multimap.get_value(PREFIX_EMAIL)),
        address=fp.parse_address(multimap.get_value(PREFIX_ADDRESS)),
        tags=fp.parse_tags(multimap.get_all_values(PREFIX_TAG)),
    )
    return commands.AddPerson(person)


def _parse_tags_for_edit(values: list[str]) -> frozenset:
    """A lone empty ``t/`` clears every tag."""
    if len(values) == 1 and not values[0]:
        return frozenset()
    return fp.parse_tags(values)


def _parse_edit_person(args: str) -> commands.EditPerson:
    multimap = tokenize(
        args, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_TAG
    )
    index = _parse_index_or_usage(multimap.get_preamble(), commands.EditPerson)

    edits = {}
    if multimap.has(PREFIX_NAME):
        edits["name"] = fp.parse_name(multimap.get_value(PREFIX_NAME))
    if multimap.has(PREFIX_PHONE):
        edits["phone"] = fp.parse_phone(multimap.get_value(PREFIX_PHONE))
    if multimap.has(PREFIX_EMAIL):
        edits["email"] = fp.parse_email(multimap.get_value(PREFIX_EMAIL))
    if multimap.has(PREFIX_ADDRESS):
        edits["address"] = fp.parse_address(multimap.get_value(PREFIX_ADDRESS))
    if multimap.has(PREFIX_TAG):
        edits["tags"] = _parse_tags_for_edit(multimap.get_all_values(PREFIX_TAG))

    if not edits:
        raise ParseError(MESSAGE_NOT_EDITED)
    return commands.EditPerson(index, **edits)


def _parse_delete_person(args: str) -> commands.DeletePerson:
    return commands.DeletePerson(_parse_index_or_usage(args, commands.DeletePerson))


def _parse_remark_person(args: str) -> commands.RemarkPerson:
    multimap = tokenize(args, PREFIX_REMARK)
    index = _parse_index_or_usage(multimap.get_preamble(), commands.RemarkPerson)
    if not multimap.has(PREFIX_REMARK):
        raise _invalid_format(commands.RemarkPerson)
    return commands.RemarkPerson(index, fp.parse_remark(multimap.get_value(PREFIX_REMARK)))


def _parse_find_persons(args: str) -> commands.FindPersons:
    return commands.FindPersons(_parse_keywords(args, commands.FindPersons))


# ============================================================================
#                               Module commands
# ============================================================================


def _parse_add_module(args: str) -> commands.AddModule:
    multimap = _tokenize_strict(
        args,
        commands.AddModule,
        PREFIX_MODULE_CODE,
        PREFIX_NAME,
        PREFIX_MODULE_CREDIT,
        required=(PREFIX_MODULE_CODE, PREFIX_NAME, PREFIX_MODULE_CREDIT),
    )
    module = Module(
        module_code=fp.parse_module_code(multimap.get_value(PREFIX_MODULE_CODE)),
        module_name=fp.parse_module_name(multimap.get_value(PREFIX_NAME)),
        module_credit=fp.parse_module_credit(multimap.get_value(PREFIX_MODULE_CREDIT)),
    )
    return commands.AddModule(module)


def _parse_delete_module(args: str) -> commands.DeleteModule:
    return commands.DeleteModule(_parse_index_or_usage(args, commands.DeleteModule))


# ============================================================================
#                               Task commands
# ============================================================================


def _parse_add_task(args: str) -> commands.AddTask:
    multimap = _tokenize_strict(
        args,
        commands.AddTask,
        PREFIX_MODULE_CODE,
        PREFIX_DESCRIPTION,
        PREFIX_PRIORITY,
        PREFIX_DEADLINE,
        required=(PREFIX_MODULE_CODE, PREFIX_DESCRIPTION),
    )
    priority = multimap.get_value(PREFIX_PRIORITY)
    deadline = multimap.get_value(PREFIX_DEADLINE)
    return commands.AddTask(
        module_code=fp.parse_module_code(multimap.get_value(PREFIX_MODULE_CODE)),
        description=fp.parse_description(multimap.get_value(PREFIX_DESCRIPTION)),
        priority_tag=None if priority is None else fp.parse_priority_tag(priority),
        deadline_tag=None if deadline is None else fp.parse_deadline_tag(deadline),
    )


def _parse_edit_task(args: str) -> commands.EditTask:
    multimap = tokenize(args, PREFIX_MODULE_CODE, PREFIX_DESCRIPTION)
    index = _parse_index_or_usage(multimap.get_preamble(), commands.EditTask)

    edits = {}
    if multimap.has(PREFIX_MODULE_CODE):
        edits["module_code"] = fp.parse_module_code(multimap.get_value(PREFIX_MODULE_CODE))
    if multimap.has(PREFIX_DESCRIPTION):
        edits["description"] = fp.parse_description(
            multimap.get_value(PREFIX_DESCRIPTION)
        )

    if not edits:
        raise ParseError(MESSAGE_NOT_EDITED)
    return commands.EditTask(index, **edits)


def _parse_delete_task(args: str) -> commands.DeleteTask:
    return commands.DeleteTask(_parse_index_or_usage(args, commands.DeleteTask))


def _parse_mark_task(args: str) -> commands.MarkTask:
    return commands.MarkTask(_parse_index_or_usage(args, commands.MarkTask))


def _parse_unmark_task(args: str) -> commands.UnmarkTask:
    return commands.UnmarkTask(_parse_index_or_usage(args, commands.UnmarkTask))


def _parse_tag_task(args: str) -> commands.TagTask:
    multimap = tokenize(args, PREFIX_PRIORITY, PREFIX_DEADLINE)
    index = _parse_index_or_usage(multimap.get_preamble(), commands.TagTask)

    priority = multimap.get_value(PREFIX_PRIORITY)
    deadline = multimap.get_value(PREFIX_DEADLINE)
    if priority is None and deadline is None:
        raise ParseError(MESSAGE_NOT_TAGGED)
    return commands.TagTask(
        index,
        priority_tag=None if priority is None else fp.parse_priority_tag(priority),
        deadline_tag=None if deadline is None else fp.parse_deadline_tag(deadline),
    )


def _parse_list_tasks(args: str) -> commands.ListTasks:
    multimap = _tokenize_strict(args, commands.ListTasks, PREFIX_MODULE_CODE)
    module_code = multimap.get_value(PREFIX_MODULE_CODE)
    if module_code is None:
        return commands.ListTasks()
    return commands.ListTasks(fp.parse_module_code(module_code))


def _parse_find_tasks(args: str) -> commands.FindTasks:
    return commands.FindTasks(_parse_keywords(args, commands.FindTasks))


def _no_arguments(command_type: type[Command]) -> ArgumentParser:
    """Parser for a command that takes no arguments; extra text is ignored."""
    return lambda _args: command_type()


_ARGUMENT_PARSERS: dict[str, ArgumentParser] = {
    commands.AddPerson.COMMAND_WORD: _parse_add_person,
    commands.EditPerson.COMMAND_WORD: _parse_edit_person,
    commands.DeletePerson.COMMAND_WORD: _parse_delete_person,
    commands.RemarkPerson.COMMAND_WORD: _parse_remark_person,
    commands.ListPersons.COMMAND_WORD: _no_arguments(commands.ListPersons),
    commands.FindPersons.COMMAND_WORD: _parse_find_persons,
    commands.AddModule.COMMAND_WORD: _parse_add_module,
    commands.DeleteModule.COMMAND_WORD: _parse_delete_module,
    commands.ListModules.COMMAND_WORD: _no_arguments(commands.ListModules),
    commands.AddTask.COMMAND_WORD: _parse_add_task,
    commands.EditTask.COMMAND_WORD: _parse_edit_task,
    commands.DeleteTask.COMMAND_WORD: _parse_delete_task,
    commands.MarkTask.COMMAND_WORD: _parse_mark_task,
    commands.UnmarkTask.COMMAND_WORD: _parse_unmark_task,
    commands.TagTask.COMMAND_WORD: _parse_tag_task,
    commands.ListTasks.COMMAND_WORD: _parse_list_tasks,
    commands.FindTasks.COMMAND_WORD: _parse_find_tasks,
    commands.Clear.COMMAND_WORD: _no_arguments(commands.Clear),
    commands.Help.COMMAND_WORD: _no_arguments(commands.Help),
    commands.Exit.COMMAND_WORD: _no_arguments(commands.Exit),
}


def parse(command_word: str, arguments: str) -> Command:
    """Parse *arguments* for the command named *command_word*.

    Raises:
        ParseError: If the command word is unknown or the arguments are
            invalid for it.
    """
    argument_parser = _ARGUMENT_PARSERS.get(command_word)
    if argument_parser is None:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
    return argument_parser(arguments)


def parse_command(user_input: str) -> Command:
    """Parse a full line of user input such as ``"mark 1"``.

    Raises:
        ParseError: If the line is blank, the command word is unknown or the
            arguments are invalid.
    """
    match = _BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
    if match is None:
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(commands.Help.USAGE))
    command_word = match.group("command_word")
    logger.debug("Parsing command word %r", command_word)
    return parse(command_word, match.group("arguments"))
