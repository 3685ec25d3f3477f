"""
Core theory primitives - the Radix layer.

These are the numeric structures everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Pitch: A pitch class at a specific octave
- PitchNamer: Sharp or flat spelling of pitch classes
- Pattern: Cyclic sequence of half-step intervals
- RootedPattern: A pattern applied from a specific pitch
- Scale and mode patterns, chord patterns
- ChordFactory: Chords from scale degrees
- TrieNode: Fixed-radix trie keyed by interval sequences
"""

from tonal_patterns.core.chord import (
    ChordFactory,
    create_augmented_triad,
    create_diminished_seventh,
    create_diminished_triad,
    create_dominant_seventh,
    create_half_diminished_seventh,
    create_major_seventh,
    create_major_sixth,
    create_major_triad,
    create_minor_major_seventh,
    create_minor_seventh,
    create_minor_sixth,
    create_minor_triad,
    create_power_chord,
    create_suspended_second_triad,
    create_suspended_triad,
)
from tonal_patterns.core.pattern import Pattern, RootedPattern
from tonal_patterns.core.pitch import (
    Pitch,
    PitchClass,
    PitchNamer,
    a4,
    create_flat_pitch_namer,
    create_sharp_pitch_namer,
    middle_c,
)
from tonal_patterns.core.scale import (
    MODE_NAMES,
    create_aeolian_mode,
    create_chromatic_scale_pattern,
    create_dorian_mode,
    create_harmonic_minor_scale_pattern,
    create_ionian_mode,
    create_locrian_mode,
    create_lydian_mode,
    create_major_pentatonic_scale_pattern,
    create_major_scale,
    create_melodic_minor_ascending_scale_pattern,
    create_melodic_minor_descending_scale_pattern,
    create_minor_pentatonic_scale_pattern,
    create_minor_scale,
    create_mixolydian_mode,
    create_modes,
    create_phrygian_mode,
    create_symmetric_scale_pattern,
    scale_order_name,
)
from tonal_patterns.core.trie import TrieNode

__all__ = [
    # Pitch
    "PitchClass",
    "Pitch",
    "PitchNamer",
    "middle_c",
    "a4",
    "create_sharp_pitch_namer",
    "create_flat_pitch_namer",
    # Pattern
    "Pattern",
    "RootedPattern",
    # Scale
    "MODE_NAMES",
    "create_ionian_mode",
    "create_dorian_mode",
    "create_phrygian_mode",
    "create_lydian_mode",
    "create_mixolydian_mode",
    "create_aeolian_mode",
    "create_locrian_mode",
    "create_modes",
    "create_major_scale",
    "create_minor_scale",
    "create_harmonic_minor_scale_pattern",
    "create_melodic_minor_ascending_scale_pattern",
    "create_melodic_minor_descending_scale_pattern",
    "create_chromatic_scale_pattern",
    "create_symmetric_scale_pattern",
    "create_major_pentatonic_scale_pattern",
    "create_minor_pentatonic_scale_pattern",
    "scale_order_name",
    # Chord
    "ChordFactory",
    "create_power_chord",
    "create_major_triad",
    "create_minor_triad",
    "create_diminished_triad",
    "create_augmented_triad",
    "create_suspended_triad",
    "create_suspended_second_triad",
    "create_dominant_seventh",
    "create_major_seventh",
    "create_minor_seventh",
    "create_minor_major_seventh",
    "create_half_diminished_seventh",
    "create_diminished_seventh",
    "create_major_sixth",
    "create_minor_sixth",
    # Trie
    "TrieNode",
]
