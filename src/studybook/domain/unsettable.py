"""Tri-state handling for patch fields.

This module defines the ``UNSET`` sentinel, the `Unsettable` type alias,
and the `resolve` helper used when applying partial edits to entities.

A field of type ``Unsettable[T]`` is either:

* ``UNSET``: the field was not mentioned in the edit and keeps its value.
* a concrete ``T``: the field is replaced by that value. For collection
  valued fields an empty collection is a real value (it clears the field),
  which keeps "not specified" distinguishable from "cleared".
"""

from dataclasses import dataclass
from typing import TypeVar


def _get_unset() -> "_UnsetType":
    # Factory used by pickle to retrieve the one true instance.
    return UNSET


@dataclass(frozen=True)
class _UnsetType:
    """Sentinel marking a patch field that was left out of the edit."""

    def __bool__(self) -> bool:  # falsy to simplify conditionals
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_unset, ())


# Singleton instance
UNSET = _UnsetType()

T = TypeVar("T")
type Unsettable[T] = T | _UnsetType


def is_set(value: object) -> bool:
    """Return True if *value* is anything other than ``UNSET``."""
    return not isinstance(value, _UnsetType)


def resolve(value: "T | _UnsetType", current: T) -> T:
    """Resolve a patch value against the entity's current value.

    Args:
        value: The value carried by the patch (``UNSET`` or a concrete value).
        current: The entity's current value for the same field.

    Returns:
        ``current`` when ``value`` is ``UNSET``, otherwise ``value``.

    Raises:
        TypeError: If ``value`` is None; absent fields must use ``UNSET``.
    """
    if isinstance(value, _UnsetType):
        return current
    if value is None:
        raise TypeError("Patch fields must be UNSET or a concrete value, not None")
    return value
