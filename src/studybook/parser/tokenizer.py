"""Splits command arguments of the form ``PREAMBLE p/VALUE q/VALUE ...``.

A prefix is only recognised at the start of the arguments or right after
whitespace, so ``a/Blk 30`` is read as an address but ``n/and/or`` is read as
a single name value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Prefix:
    """An argument prefix such as ``n/``."""

    text: str

    def __str__(self) -> str:
        return self.text


PREAMBLE = Prefix("")

PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_TAG = Prefix("t/")
PREFIX_REMARK = Prefix("r/")
PREFIX_MODULE_CODE = Prefix("m/")
PREFIX_MODULE_CREDIT = Prefix("c/")
PREFIX_DESCRIPTION = Prefix("d/")
PREFIX_PRIORITY = Prefix("pr/")
PREFIX_DEADLINE = Prefix("dl/")


class ArgumentMultimap:
    """Values collected for each prefix, in the order they appeared.

    Single-valued fields read the last occurrence (`get_value`); repeatable
    fields read every occurrence (`get_all_values`).
    """

    def __init__(self) -> None:
        self._values: dict[Prefix, list[str]] = {}

    def put(self, prefix: Prefix, value: str) -> None:
        """Record *value* under *prefix*."""
        self._values.setdefault(prefix, []).append(value)

    def has(self, prefix: Prefix) -> bool:
        """Return True if *prefix* occurred at least once."""
        return prefix in self._values

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value recorded under *prefix*, or None."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        """Return every value recorded under *prefix* (possibly empty)."""
        return list(self._values.get(prefix, []))

    def get_preamble(self) -> str:
        """Return the text before the first prefix (empty if none)."""
        return self.get_value(PREAMBLE) or ""


def tokenize(args_string: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Split *args_string* into values keyed by *prefixes*.

    Args:
        args_string: The arguments that followed the command word.
        prefixes: Prefixes to recognise. Text that looks like another prefix is
            kept as part of the surrounding value.

    Returns:
        The collected values; leading/trailing whitespace of each value and of
        the preamble is removed.
    """
    multimap = ArgumentMultimap()
    by_text = {p.text: p for p in prefixes if p.text}
    if not by_text:
        multimap.put(PREAMBLE, args_string.strip())
        return multimap

    # longest first so overlapping prefixes resolve to the longer one
    alternatives = "|".join(
        re.escape(text) for text in sorted(by_text, key=len, reverse=True)
    )
    pattern = re.compile(rf"(?<!\S)({alternatives})")
    matches = list(pattern.finditer(args_string))

    preamble_end = matches[0].start() if matches else len(args_string)
    multimap.put(PREAMBLE, args_string[:preamble_end].strip())

    for i, match in enumerate(matches):
        value_end = matches[i + 1].start() if i + 1 < len(matches) else len(args_string)
        multimap.put(by_text[match.group(1)], args_string[match.end() : value_end].strip())
    return multimap
