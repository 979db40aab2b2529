"""Parsers turning single argument values into value objects.

Every parser strips leading and trailing whitespace, validates the result and
either returns the value object or raises `ParseError` carrying the fixed
constraint message of the field. Passing anything other than a string is a
programming error and raises `TypeError`.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from studybook.domain.value_objects import (
    DATE_FORMAT,
    Address,
    DeadlineTag,
    Email,
    ExamDate,
    ExamDescription,
    ModuleCode,
    ModuleCredit,
    ModuleName,
    Name,
    Phone,
    PriorityTag,
    Remark,
    Tag,
    TaskDescription,
    TaskStatus,
    parse_strict_date,
)
from studybook.utils.index import Index

from .errors import ParseError

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_DATE_FORMAT = (
    f"Dates should be written as {DATE_FORMAT} and denote a real calendar date, "
    "e.g. 31-12-2024."
)

MAX_INDEX = 2**31 - 1  # pragma: no mutate
_UNSIGNED_INTEGER = re.compile(r"[0-9]+")
_CREDIT = re.compile(r"[0-9]{1,2}")


def _trimmed(value: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected str, got {type(value).__name__}")
    return value.strip()


def parse_index(one_based_index: str) -> Index:
    """Parse a one-based index such as ``" 3 "``.

    Raises:
        ParseError: If the text is not a non-zero unsigned integer that fits
            in a 32-bit signed integer (``0``, ``-1``, ``+1`` and ``abc`` are
            all rejected with the same message).
    """
    trimmed = _trimmed(one_based_index)
    if not _UNSIGNED_INTEGER.fullmatch(trimmed):
        raise ParseError(MESSAGE_INVALID_INDEX)
    # int() refuses very long digit strings, so bound the length first
    digits = trimmed.lstrip("0") or "0"
    if len(digits) > len(str(MAX_INDEX)):
        raise ParseError(MESSAGE_INVALID_INDEX)
    value = int(digits)
    if not 0 < value <= MAX_INDEX:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(value)


# --- Person fields ---


def parse_name(name: str) -> Name:
    """Parse a person's name."""
    trimmed = _trimmed(name)
    if not Name.is_valid(trimmed):
        raise ParseError(Name.MESSAGE_CONSTRAINTS)
    return Name(trimmed)


def parse_phone(phone: str) -> Phone:
    """Parse a phone number."""
    trimmed = _trimmed(phone)
    if not Phone.is_valid(trimmed):
        raise ParseError(Phone.MESSAGE_CONSTRAINTS)
    return Phone(trimmed)


def parse_email(email: str) -> Email:
    """Parse an email address."""
    trimmed = _trimmed(email)
    if not Email.is_valid(trimmed):
        raise ParseError(Email.MESSAGE_CONSTRAINTS)
    return Email(trimmed)


def parse_address(address: str) -> Address:
    """Parse an address."""
    trimmed = _trimmed(address)
    if not Address.is_valid(trimmed):
        raise ParseError(Address.MESSAGE_CONSTRAINTS)
    return Address(trimmed)


def parse_tag(tag: str) -> Tag:
    """Parse a single tag name."""
    trimmed = _trimmed(tag)
    if not Tag.is_valid(trimmed):
        raise ParseError(Tag.MESSAGE_CONSTRAINTS)
    return Tag(trimmed)


def parse_tags(tags: Iterable[str]) -> frozenset[Tag]:
    """Parse every tag in *tags* into a set.

    Exact duplicates collapse. Parsing stops at the first invalid tag.
    """
    if tags is None or isinstance(tags, str):
        raise TypeError("tags must be an iterable of str")
    tag_set: set[Tag] = set()
    for tag in tags:
        tag_set.add(parse_tag(tag))
    return frozenset(tag_set)


def parse_remark(remark: str) -> Remark:
    """Parse a remark; an empty remark is allowed."""
    return Remark(_trimmed(remark))


# --- Module fields ---


def parse_module_code(module_code: str) -> ModuleCode:
    """Parse a module code into its canonical upper-case form."""
    trimmed = _trimmed(module_code)
    if not ModuleCode.is_valid(trimmed):
        raise ParseError(ModuleCode.MESSAGE_CONSTRAINTS)
    return ModuleCode(trimmed)


def parse_module_name(module_name: str) -> ModuleName:
    """Parse a module name."""
    trimmed = _trimmed(module_name)
    if not ModuleName.is_valid(trimmed):
        raise ParseError(ModuleName.MESSAGE_CONSTRAINTS)
    return ModuleName(trimmed)


def parse_module_credit(module_credit: str) -> ModuleCredit:
    """Parse a module credit count."""
    trimmed = _trimmed(module_credit)
    if not _CREDIT.fullmatch(trimmed) or not ModuleCredit.is_valid(int(trimmed)):
        raise ParseError(ModuleCredit.MESSAGE_CONSTRAINTS)
    return ModuleCredit(int(trimmed))


# --- Task fields ---


def parse_description(description: str) -> TaskDescription:
    """Parse a task description."""
    trimmed = _trimmed(description)
    if not TaskDescription.is_valid(trimmed):
        raise ParseError(TaskDescription.MESSAGE_CONSTRAINTS)
    return TaskDescription(trimmed)


def parse_status(status: str) -> TaskStatus:
    """Parse a task status (``complete`` / ``incomplete``, any case)."""
    trimmed = _trimmed(status)
    if not TaskStatus.is_valid(trimmed):
        raise ParseError(TaskStatus.MESSAGE_CONSTRAINTS)
    return TaskStatus.of(trimmed)


def parse_priority_tag(priority: str) -> PriorityTag:
    """Parse a priority level (``HIGH`` / ``MEDIUM`` / ``LOW``, any case)."""
    trimmed = _trimmed(priority)
    if not PriorityTag.is_valid(trimmed):
        raise ParseError(PriorityTag.MESSAGE_CONSTRAINTS)
    return PriorityTag.of(trimmed)


def parse_deadline_tag(deadline: str) -> DeadlineTag:
    """Parse a ``dd-MM-yyyy`` deadline.

    Raises:
        ParseError: With `MESSAGE_INVALID_DATE_FORMAT` when the text is not a
            real date in the strict grammar (``31-02-2024``, ``1-2-2024``);
            with ``DeadlineTag.MESSAGE_CONSTRAINTS`` when the date itself is
            rejected.
    """
    date = parse_strict_date(_trimmed(deadline))
    if date is None:
        raise ParseError(MESSAGE_INVALID_DATE_FORMAT)
    if not DeadlineTag.is_valid(date):
        raise ParseError(DeadlineTag.MESSAGE_CONSTRAINTS)
    return DeadlineTag(date)


# --- Exam fields (no command takes these yet) ---


def parse_exam_description(description: str) -> ExamDescription:
    """Parse an exam description."""
    trimmed = _trimmed(description)
    if not ExamDescription.is_valid(trimmed):
        raise ParseError(ExamDescription.MESSAGE_CONSTRAINTS)
    return ExamDescription(trimmed)


def parse_exam_date(exam_date: str) -> ExamDate:
    """Parse a ``dd-MM-yyyy`` exam date."""
    trimmed = _trimmed(exam_date)
    if not ExamDate.is_valid(trimmed):
        raise ParseError(ExamDate.MESSAGE_CONSTRAINTS)
    return ExamDate(trimmed)
