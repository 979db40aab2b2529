"""The Module entity."""

from __future__ import annotations

from dataclasses import dataclass

from .value_objects import ModuleCode, ModuleCredit, ModuleName


@dataclass(frozen=True, slots=True)
class Module:
    """A university module that tasks are filed under.

    Identity is the module code alone (see `is_same_module`); equality covers
    every field.
    """

    module_code: ModuleCode
    module_name: ModuleName
    module_credit: ModuleCredit

    def __post_init__(self) -> None:
        if not isinstance(self.module_code, ModuleCode):
            raise TypeError("Module.module_code must be a ModuleCode")

    def is_same_module(self, other: Module | None) -> bool:
        """Return True if *other* has the same module code."""
        return other is not None and other.module_code == self.module_code

    def __str__(self) -> str:
        return str(self.module_code)
