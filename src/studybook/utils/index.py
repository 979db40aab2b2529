"""Positional index into a displayed list."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Index:
    """A position in a displayed list.

    Users count from one while lists count from zero; this type stores the
    zero-based form and converts on demand so the two can't be mixed up.
    """

    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            raise ValueError(f"Index must not be negative, got {self.zero_based}")

    @classmethod
    def from_zero_based(cls, zero_based: int) -> Index:
        """Build an index from a zero-based position."""
        return cls(zero_based)

    @classmethod
    def from_one_based(cls, one_based: int) -> Index:
        """Build an index from a one-based position."""
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        """The one-based position."""
        return self.zero_based + 1

    def __str__(self) -> str:
        return str(self.one_based)
