"""Predicates used to filter the displayed lists.

Predicates are frozen dataclasses so that commands and models holding them
compare by value.
"""

from __future__ import annotations

from dataclasses import dataclass

from studybook.domain.person import Person
from studybook.domain.task import Task
from studybook.domain.value_objects import ModuleCode

from .unique_list import show_all

__all__ = [
    "DescriptionContainsKeywords",
    "NameContainsKeywords",
    "TaskBelongsToModule",
    "show_all",
]


def _contains_word_ignore_case(sentence: str, word: str) -> bool:
    """Return True if *word* matches a whole word of *sentence*, ignoring case."""
    target = word.strip().lower()
    return bool(target) and target in sentence.lower().split()


@dataclass(frozen=True, slots=True)
class NameContainsKeywords:
    """Matches persons whose name contains any of the keywords as a whole word."""

    keywords: tuple[str, ...]

    def __call__(self, person: Person) -> bool:
        return any(
            _contains_word_ignore_case(person.name.value, keyword)
            for keyword in self.keywords
        )


@dataclass(frozen=True, slots=True)
class DescriptionContainsKeywords:
    """Matches tasks whose description contains any keyword as a whole word."""

    keywords: tuple[str, ...]

    def __call__(self, task: Task) -> bool:
        return any(
            _contains_word_ignore_case(task.description.value, keyword)
            for keyword in self.keywords
        )


@dataclass(frozen=True, slots=True)
class TaskBelongsToModule:
    """Matches tasks filed under the given module code."""

    module_code: ModuleCode

    def __call__(self, task: Task) -> bool:
        return task.module.module_code == self.module_code
