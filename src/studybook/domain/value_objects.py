"""Value objects used across the domain layer.

Every value object wraps a single primitive, exposes the rule it enforces as
``MESSAGE_CONSTRAINTS`` and an ``is_valid`` predicate, and refuses to be
constructed from a value that fails that predicate. Callers that turn user
text into value objects (the parser) are expected to check ``is_valid``
first so they can report ``MESSAGE_CONSTRAINTS`` to the user.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum, nonmember
from typing import ClassVar

# pylint: disable=too-few-public-methods

# ============================================================================
#                               Date helpers
# ============================================================================

DATE_FORMAT = "dd-MM-yyyy"  # pragma: no mutate
_STRICT_DATE = re.compile(r"([0-9]{2})-([0-9]{2})-([0-9]{4})")


def parse_strict_date(text: str) -> date | None:
    """Parse ``dd-MM-yyyy`` without rolling impossible dates over.

    Returns:
        The parsed date, or None when the text does not match the grammar or
        does not denote a real calendar date (e.g. ``31-02-2024``).
    """
    match = _STRICT_DATE.fullmatch(text)
    if match is None:
        return None
    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_date(value: date) -> str:
    """Format a date as ``dd-MM-yyyy`` (zero padded, four digit year)."""
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"


# ============================================================================
#                           String value objects
# ============================================================================


@dataclass(frozen=True, slots=True)
class StringValue:
    """Base class for value objects wrapping a validated string."""

    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""
    VALIDATION_REGEX: ClassVar[str] = r"(?s).*"

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Return True if *value* satisfies this type's constraints."""
        return (
            isinstance(value, str)
            and re.fullmatch(cls.VALIDATION_REGEX, value) is not None
        )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Name(StringValue):
    """A person's name."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[str] = r"[A-Za-z0-9][A-Za-z0-9 ]*"


@dataclass(frozen=True, slots=True)
class Phone(StringValue):
    """A person's phone number."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )
    VALIDATION_REGEX: ClassVar[str] = r"[0-9]{3,}"


_ALNUM = "A-Za-z0-9"
_LOCAL_PART = rf"[{_ALNUM}]+(?:[+_.\-][{_ALNUM}]+)*"
_DOMAIN_LABEL = rf"[{_ALNUM}](?:[{_ALNUM}\-]*[{_ALNUM}])?"
_DOMAIN_LAST_LABEL = rf"[{_ALNUM}][{_ALNUM}\-]*[{_ALNUM}]"


@dataclass(frozen=True, slots=True)
class Email(StringValue):
    """A person's email address."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these "
        "special characters, excluding the parentheses, (+_.-). The local-part may "
        "not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made "
        "up of domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated "
        "only by hyphens, if any."
    )
    VALIDATION_REGEX: ClassVar[str] = (
        rf"{_LOCAL_PART}@(?:{_DOMAIN_LABEL}\.)*{_DOMAIN_LAST_LABEL}"
    )


@dataclass(frozen=True, slots=True)
class Address(StringValue):
    """A person's address."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Addresses can take any values, and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[str] = r"(?s)\S.*"


@dataclass(frozen=True, slots=True)
class Tag(StringValue):
    """A free-form label attached to a person."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tags names should be alphanumeric"
    VALIDATION_REGEX: ClassVar[str] = r"[A-Za-z0-9]+"


@dataclass(frozen=True, slots=True)
class Remark(StringValue):
    """A note about a person. May be empty."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Remarks can take any value"


@dataclass(frozen=True, slots=True)
class ModuleCode(StringValue):
    """A university module code, canonically upper case (e.g. ``CS2103T``)."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Module codes should start with 2 or 3 letters, followed by 4 digits "
        "and an optional letter suffix, e.g. CS2103T"
    )
    VALIDATION_REGEX: ClassVar[str] = r"[A-Za-z]{2,3}[0-9]{4}[A-Za-z]?"

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", self.value.upper())


@dataclass(frozen=True, slots=True)
class ModuleName(StringValue):
    """The human-readable title of a module."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Module names can take any values, and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[str] = r"(?s)\S.*"


@dataclass(frozen=True, slots=True)
class TaskDescription(StringValue):
    """What a task is about."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Task descriptions can take any values, and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[str] = r"(?s)\S.*"


@dataclass(frozen=True, slots=True)
class ExamDescription(StringValue):
    """What an exam covers. No command or stored field uses exams yet."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Exam descriptions can take any values, and it should not be blank"
    )
    VALIDATION_REGEX: ClassVar[str] = r"(?s)\S.*"


@dataclass(frozen=True, slots=True)
class ExamDate(StringValue):
    """The date of an exam, kept in its ``dd-MM-yyyy`` textual form.

    Like `ExamDescription`, not yet reachable from any command.
    """

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        f"Exam dates should be real calendar dates in the format {DATE_FORMAT}, "
        "e.g. 25-11-2024"
    )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return isinstance(value, str) and parse_strict_date(value) is not None

    @property
    def as_date(self) -> date:
        """The exam date as a calendar date."""
        parsed = parse_strict_date(self.value)
        assert parsed is not None  # guaranteed by __post_init__
        return parsed


# ============================================================================
#                           Non-string value objects
# ============================================================================


@dataclass(frozen=True, slots=True)
class ModuleCredit:
    """The number of modular credits a module is worth."""

    value: int

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Module credits should be a whole number between 0 and 40"
    )
    MAX_CREDIT: ClassVar[int] = 40

    def __post_init__(self) -> None:
        if not self.is_valid(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, value: int) -> bool:
        """Return True if *value* is an integer credit count within range."""
        return (
            isinstance(value, int)
            and not isinstance(value, bool)
            and 0 <= value <= cls.MAX_CREDIT
        )

    def __str__(self) -> str:
        return str(self.value)


class TaskStatus(Enum):
    """Completion status of a task."""

    INCOMPLETE = "incomplete"
    COMPLETE = "complete"

    MESSAGE_CONSTRAINTS = nonmember(
        "Task status should be either 'complete' or 'incomplete'"
    )

    @classmethod
    def is_valid(cls, text: str) -> bool:
        """Return True if *text* names a status (case-insensitive)."""
        return isinstance(text, str) and text.lower() in {s.value for s in cls}

    @classmethod
    def of(cls, text: str) -> TaskStatus:
        """Return the status named by *text* (case-insensitive)."""
        return cls(text.lower())

    def is_complete(self) -> bool:
        """Return True for ``COMPLETE``."""
        return self is TaskStatus.COMPLETE

    def __str__(self) -> str:
        return self.name


class PriorityStatus(Enum):
    """Levels a priority tag can take."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


@dataclass(frozen=True, slots=True)
class PriorityTag:
    """Marks how urgent a task is."""

    status: PriorityStatus

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Priority should be one of HIGH, MEDIUM or LOW"
    )

    def __post_init__(self) -> None:
        if not isinstance(self.status, PriorityStatus):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(text: str) -> bool:
        """Return True if *text* names a priority level (case-insensitive)."""
        return isinstance(text, str) and text.upper() in PriorityStatus.__members__

    @classmethod
    def of(cls, text: str) -> PriorityTag:
        """Build a tag from the name of a priority level (case-insensitive)."""
        return cls(PriorityStatus[text.upper()])

    def __str__(self) -> str:
        return self.status.value


@dataclass(frozen=True, slots=True)
class DeadlineTag:
    """Marks the calendar date a task is due."""

    deadline: date

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        f"Deadlines should be real calendar dates in the format {DATE_FORMAT}, "
        "e.g. 31-12-2024"
    )

    def __post_init__(self) -> None:
        if not self.is_valid(self.deadline):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(value: date) -> bool:
        """Return True if *value* is a calendar date (not a datetime)."""
        return isinstance(value, date) and not isinstance(value, datetime)

    def __str__(self) -> str:
        return format_date(self.deadline)
