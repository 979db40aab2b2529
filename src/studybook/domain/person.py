"""The Person entity and its edit patch."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from .unsettable import UNSET, Unsettable, is_set, resolve
from .value_objects import Address, Email, Name, Phone, Remark, Tag

EMPTY_REMARK = Remark("")


@dataclass(frozen=True, slots=True)
class Person:
    """A contact in the address book.

    Two persons are *equal* when every field matches. Two persons are the
    *same person* (see `is_same_person`) when their names match; that weaker
    identity is what the person list uses to reject duplicates.
    """

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: frozenset[Tag] = frozenset()
    remark: Remark = EMPTY_REMARK

    def __post_init__(self) -> None:
        for field in fields(self):
            if getattr(self, field.name) is None:
                raise TypeError(f"Person.{field.name} must not be None")
        object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_person(self, other: Person | None) -> bool:
        """Return True if *other* has the same identity (name) as this person."""
        if other is self:
            return True
        return other is not None and other.name == self.name

    def with_remark(self, remark: Remark) -> Person:
        """Return a copy of this person with *remark* replacing the current one."""
        return replace(self, remark=remark)

    def __str__(self) -> str:
        tags = "".join(f"[{tag}]" for tag in sorted(self.tags, key=str))
        return (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; "
            f"Address: {self.address}; Remark: {self.remark}; Tags: {tags}"
        )


@dataclass(frozen=True, slots=True)
class PersonPatch:
    """Sparse edit of a person. Fields left as ``UNSET`` are not touched.

    An empty ``tags`` set is a real value: it clears the person's tags.
    """

    name: Unsettable[Name] = UNSET
    phone: Unsettable[Phone] = UNSET
    email: Unsettable[Email] = UNSET
    address: Unsettable[Address] = UNSET
    tags: Unsettable[frozenset[Tag]] = UNSET

    def is_any_field_edited(self) -> bool:
        """Return True if at least one field carries a value."""
        return any(is_set(getattr(self, field.name)) for field in fields(self))

    def apply_to(self, person: Person) -> Person:
        """Return a new person with this patch applied over *person*."""
        return Person(
            name=resolve(self.name, person.name),
            phone=resolve(self.phone, person.phone),
            email=resolve(self.email, person.email),
            address=resolve(self.address, person.address),
            tags=resolve(self.tags, person.tags),
            remark=person.remark,
        )
