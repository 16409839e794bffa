"""Compartment identifiers.

Compartments are addressed as ``<letters><index>`` (``A1``, ``B3``, ``AA2``).
Sub-compartments add an inner section and space index: ``A1.0.2``. String
forms exist only at the serialization boundary; the engine works with the
typed ids below.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_COMPARTMENT_RE = re.compile(r"^([A-Z]+)(\d+)$")
_BASE_KEY_RE = re.compile(r"^([A-Z]+\d+)")


def to_letters(column: int) -> str:
    """Convert a 0-based column index to spreadsheet-style letters.

    Args:
        column: 0-based column index.

    Returns:
        Column letters ("A" for 0, "Z" for 25, "AA" for 26).

    Raises:
        ValueError: If the index is negative.
    """
    if column < 0:
        raise ValueError("Column index must be non-negative")
    n = column + 1
    letters = ""
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters


def from_letters(letters: str) -> int:
    """Convert spreadsheet-style column letters back to a 0-based index."""
    if not letters or not letters.isalpha() or not letters.isupper():
        raise ValueError(f"Invalid column letters: {letters!r}")
    n = 0
    for char in letters:
        n = n * 26 + (ord(char) - ord("A") + 1)
    return n - 1


def base_key(key: str) -> str:
    """Strip a trailing ``.section.space`` suffix from a compartment key.

    Keys without a recognizable compartment prefix are returned unchanged.
    """
    match = _BASE_KEY_RE.match(key)
    return match.group(1) if match else key


@dataclass(frozen=True, order=True)
class CompartmentId:
    """A compartment within a column.

    Attributes:
        column: 0-based column index.
        index: 1-based compartment number, bottom to top across both modules.
    """

    column: int
    index: int

    def __post_init__(self) -> None:
        if self.column < 0:
            raise ValueError("Column index must be non-negative")
        if self.index < 1:
            raise ValueError("Compartment index must be at least 1")

    @property
    def letters(self) -> str:
        return to_letters(self.column)

    @classmethod
    def parse(cls, key: str) -> CompartmentId | None:
        """Parse a key such as ``"B2"``; returns None when malformed."""
        match = _COMPARTMENT_RE.match(key)
        if not match:
            return None
        index = int(match.group(2))
        if index < 1:
            return None
        return cls(column=from_letters(match.group(1)), index=index)

    def __str__(self) -> str:
        return f"{self.letters}{self.index}"


@dataclass(frozen=True, order=True)
class SubCompartmentId:
    """An inner section/space inside a subdivided compartment.

    Attributes:
        base: The compartment being subdivided.
        section: 0-based inner vertical section, left to right.
        space: 0-based inner horizontal space, bottom to top.
    """

    base: CompartmentId
    section: int
    space: int

    def __post_init__(self) -> None:
        if self.section < 0 or self.space < 0:
            raise ValueError("Section and space indices must be non-negative")

    @classmethod
    def parse(cls, key: str) -> SubCompartmentId | None:
        """Parse a key such as ``"A1.0.2"``; returns None when malformed."""
        parts = key.split(".")
        if len(parts) != 3:
            return None
        base = CompartmentId.parse(parts[0])
        if base is None or not parts[1].isdigit() or not parts[2].isdigit():
            return None
        return cls(base=base, section=int(parts[1]), space=int(parts[2]))

    def __str__(self) -> str:
        return f"{self.base}.{self.section}.{self.space}"


def parse_compartment_ref(key: str) -> CompartmentId | SubCompartmentId | None:
    """Parse either a compartment key or a sub-compartment key."""
    if "." in key:
        return SubCompartmentId.parse(key)
    return CompartmentId.parse(key)
