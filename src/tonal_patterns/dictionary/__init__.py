"""
Pattern dictionaries - interval pattern to name lookup.

This module provides:
- ScaleEntry, ChordEntry, Entry: What a pattern resolves to
- PatternDictionary: Trie-backed exact pattern lookup
- ScaleDictionary: Scales and rotation-expanded mode families
- ChordDictionary: Chords with their inversions
- Catalogs and builders for the built-in modes, scales and chords
"""

from tonal_patterns.dictionary.catalog import (
    CHORD_CATALOG,
    MODE_CATALOG,
    SCALE_CATALOG,
    build_mode_dictionary,
    build_scale_dictionary,
    create_chord_dictionary,
)
from tonal_patterns.dictionary.entries import ChordEntry, Entry, ScaleEntry
from tonal_patterns.dictionary.pattern_dictionary import (
    ChordDictionary,
    PatternDictionary,
    ScaleDictionary,
)

__all__ = [
    # Entries
    "Entry",
    "ScaleEntry",
    "ChordEntry",
    # Dictionaries
    "PatternDictionary",
    "ScaleDictionary",
    "ChordDictionary",
    # Builders
    "MODE_CATALOG",
    "SCALE_CATALOG",
    "CHORD_CATALOG",
    "build_mode_dictionary",
    "build_scale_dictionary",
    "create_chord_dictionary",
]
