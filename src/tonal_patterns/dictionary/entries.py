"""
Dictionary entries - what a trie path resolves to.

Entry is a closed union: scale dictionaries hold ScaleEntry values, chord
dictionaries hold ChordEntry values. The dictionary's builder decides which.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ScaleEntry:
    """
    A scale or mode name.

    Offset is the rotation of the family pattern this entry was registered
    from; a plain registration has offset 0 and no family.
    """

    name: str
    offset: int = 0
    family: str = ""


@dataclass(frozen=True)
class ChordEntry:
    """
    A chord name suffix plus the position of its root.

    Root index 0 is root position; anything higher is an inversion, and
    indexes into the recognizer's sorted input.
    """

    name: str
    root_index: int = 0


Entry = Union[ScaleEntry, ChordEntry]
