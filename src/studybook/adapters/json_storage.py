"""JSON file storage adapter.

The whole address book is kept in one JSON document::

    {
      "persons": [{"name": ..., "phone": ..., "email": ..., "address": ...,
                   "tags": [...], "remark": ...}],
      "modules": [{"module_code": ..., "module_name": ..., "module_credit": 4}],
      "tasks":   [{"module_code": ..., "description": ..., "status": ...,
                   "priority": "HIGH" | null, "deadline": "dd-MM-yyyy" | null}]
    }

Tasks refer to their module by code; on load every referenced code must name
a stored module.
"""

import json
import logging
import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Any

from studybook.domain.errors import DuplicateEntityError
from studybook.domain.module import Module
from studybook.domain.person import Person
from studybook.domain.task import Task
from studybook.domain.value_objects import (
    Address,
    DeadlineTag,
    Email,
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
    format_date,
    parse_strict_date,
)
from studybook.interfaces.storage import (
    AddressBookStorage,
    DataLoadingError,
    PathLike,
    StorageError,
)
from studybook.model.address_book import AddressBook, AddressBookSnapshot

logger = logging.getLogger(__name__)

JSON_INDENT = 2  # pragma: no mutate


class JsonFileStorage(AddressBookStorage):
    """AddressBookStorage implementation backed by a single JSON file."""

    def __init__(self, path: PathLike) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Location of the JSON file."""
        return self._path

    # --- Core Operations ---

    def load(self) -> AddressBookSnapshot | None:
        if not self._path.exists():
            logger.info("Data file %s not found", self._path)
            return None

        try:
            with self._path.open("r", encoding="utf-8") as fp:
                document = json.load(fp)
        except (OSError, ValueError) as e:  # includes UnicodeDecodeError
            raise DataLoadingError(f"Cannot read {self._path}: {e}") from e

        snapshot = snapshot_from_document(document)
        logger.debug(
            "Loaded %d persons, %d modules, %d tasks from %s",
            len(snapshot.persons),
            len(snapshot.modules),
            len(snapshot.tasks),
            self._path,
        )
        return snapshot

    def save(self, snapshot: AddressBookSnapshot) -> None:
        document = snapshot_to_document(snapshot)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(  # pragma: no mutate
                "w", encoding="utf-8", dir=self._path.parent, delete=False
            ) as tmp:
                tmp_path = Path(tmp.name)
                json.dump(document, tmp, indent=JSON_INDENT)
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise StorageError(f"Cannot write {self._path}: {e}") from e
        logger.debug("Saved address book to %s", self._path)


# ============================================================================
#                               Serialization
# ============================================================================


def snapshot_to_document(snapshot: AddressBookSnapshot) -> dict[str, Any]:
    """Convert *snapshot* to a JSON-compatible document."""
    return {
        "persons": [_person_to_dict(p) for p in snapshot.persons],
        "modules": [_module_to_dict(m) for m in snapshot.modules],
        "tasks": [_task_to_dict(t) for t in snapshot.tasks],
    }


def snapshot_from_document(document: Any) -> AddressBookSnapshot:
    """Rebuild a snapshot from a document produced by `snapshot_to_document`.

    Raises:
        DataLoadingError: If the document is malformed, holds an invalid
            field, a task refers to an unknown module, or any list holds
            duplicates.
    """
    if not isinstance(document, dict):
        raise DataLoadingError("Top-level JSON value must be an object")
    try:
        persons = tuple(_person_from_dict(d) for d in document.get("persons", []))
        modules = tuple(_module_from_dict(d) for d in document.get("modules", []))
        by_code = {m.module_code: m for m in modules}
        tasks = tuple(_task_from_dict(d, by_code) for d in document.get("tasks", []))
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise DataLoadingError(f"Invalid data: {e!r}") from e

    snapshot = AddressBookSnapshot(persons=persons, modules=modules, tasks=tasks)
    try:
        AddressBook(snapshot)
    except DuplicateEntityError as e:
        raise DataLoadingError(str(e)) from e
    return snapshot


def _person_to_dict(person: Person) -> dict[str, Any]:
    return {
        "name": person.name.value,
        "phone": person.phone.value,
        "email": person.email.value,
        "address": person.address.value,
        "tags": sorted(tag.value for tag in person.tags),
        "remark": person.remark.value,
    }


def _person_from_dict(data: dict[str, Any]) -> Person:
    return Person(
        name=Name(data["name"]),
        phone=Phone(data["phone"]),
        email=Email(data["email"]),
        address=Address(data["address"]),
        tags=frozenset(Tag(t) for t in data.get("tags", [])),
        remark=Remark(data.get("remark", "")),
    )


def _module_to_dict(module: Module) -> dict[str, Any]:
    return {
        "module_code": module.module_code.value,
        "module_name": module.module_name.value,
        "module_credit": module.module_credit.value,
    }


def _module_from_dict(data: dict[str, Any]) -> Module:
    return Module(
        module_code=ModuleCode(data["module_code"]),
        module_name=ModuleName(data["module_name"]),
        module_credit=ModuleCredit(data["module_credit"]),
    )


def _task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "module_code": task.module.module_code.value,
        "description": task.description.value,
        "status": task.status.value,
        "priority": None if task.priority_tag is None else str(task.priority_tag),
        "deadline": (
            None if task.deadline_tag is None else format_date(task.deadline_tag.deadline)
        ),
    }


def _task_from_dict(data: dict[str, Any], modules: dict[ModuleCode, Module]) -> Task:
    code = ModuleCode(data["module_code"])
    if code not in modules:
        raise ValueError(f"Task refers to unknown module {code}")

    priority = data.get("priority")
    deadline = data.get("deadline")
    return Task(
        module=modules[code],
        description=TaskDescription(data["description"]),
        status=TaskStatus.of(data.get("status", TaskStatus.INCOMPLETE.value)),
        priority_tag=None if priority is None else PriorityTag.of(priority),
        deadline_tag=None if deadline is None else DeadlineTag(_parse_date(deadline)),
    )


def _parse_date(text: str) -> date:
    parsed = parse_strict_date(text)
    if parsed is None:
        raise ValueError(f"Invalid date {text!r}")
    return parsed
