"""
Built-in catalogs and dictionary builders.

Catalogs are declarative PatternDefinition lists. Builders turn a catalog
into a dictionary; callers can pass their own catalog to any builder.
Build dictionaries once at startup and share them read-only.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tonal_patterns.constants import (
    CHORD_INTERVAL_RANGE,
    MODE_INTERVAL_RANGE,
    SCALE_INTERVAL_RANGE,
    ExpansionMode,
)
from tonal_patterns.core.chord import (
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
from tonal_patterns.core.scale import (
    MODE_NAMES,
    create_harmonic_minor_scale_pattern,
    create_ionian_mode,
    create_major_pentatonic_scale_pattern,
    create_major_scale,
    create_melodic_minor_ascending_scale_pattern,
    create_minor_pentatonic_scale_pattern,
    create_minor_scale,
    create_symmetric_scale_pattern,
)
from tonal_patterns.models.definition import PatternDefinition

from .pattern_dictionary import ChordDictionary, ScaleDictionary

logger = logging.getLogger(__name__)

_INVERSIONS = ExpansionMode.INVERSIONS

MODE_CATALOG: tuple[PatternDefinition, ...] = (
    PatternDefinition.from_pattern(
        "Ionian", create_ionian_mode(), ExpansionMode.ROTATIONS, mode_names=MODE_NAMES
    ),
)

SCALE_CATALOG: tuple[PatternDefinition, ...] = (
    PatternDefinition.from_pattern("Major", create_major_scale()),
    PatternDefinition.from_pattern("Minor", create_minor_scale()),
    PatternDefinition.from_pattern("Harmonic Minor", create_harmonic_minor_scale_pattern()),
    PatternDefinition.from_pattern(
        "Ascending Melodic Minor", create_melodic_minor_ascending_scale_pattern()
    ),
    PatternDefinition.from_pattern("Pentatonic Major", create_major_pentatonic_scale_pattern()),
    PatternDefinition.from_pattern("Pentatonic Minor", create_minor_pentatonic_scale_pattern()),
    PatternDefinition.from_pattern("Symmetric", create_symmetric_scale_pattern()),
)

# Order matters: where two chords share a shape the earlier one names it.
CHORD_CATALOG: tuple[PatternDefinition, ...] = (
    PatternDefinition.from_pattern("5", create_power_chord(), _INVERSIONS),
    # Triads
    PatternDefinition.from_pattern(" Major", create_major_triad(), _INVERSIONS),
    PatternDefinition.from_pattern(" Minor", create_minor_triad(), _INVERSIONS),
    PatternDefinition.from_pattern(" Diminished", create_diminished_triad(), _INVERSIONS),
    PatternDefinition.from_pattern(" Augmented", create_augmented_triad(), _INVERSIONS),
    PatternDefinition.from_pattern(" Suspended", create_suspended_triad(), _INVERSIONS),
    PatternDefinition.from_pattern(
        " Suspended Second", create_suspended_second_triad(), _INVERSIONS
    ),
    # Sevenths
    PatternDefinition.from_pattern(" Dominant Seventh", create_dominant_seventh(), _INVERSIONS),
    PatternDefinition.from_pattern(" Major Seventh", create_major_seventh(), _INVERSIONS),
    PatternDefinition.from_pattern(" Minor Seventh", create_minor_seventh(), _INVERSIONS),
    PatternDefinition.from_pattern(
        " Half-Diminished Seventh", create_half_diminished_seventh(), _INVERSIONS
    ),
    PatternDefinition.from_pattern(
        " Diminished Seventh", create_diminished_seventh(), _INVERSIONS
    ),
    PatternDefinition.from_pattern(
        " Minor Major Seventh", create_minor_major_seventh(), _INVERSIONS
    ),
    # Sixths are inversions of minor and half-diminished sevenths, so they
    # only name voicings the sevenths above do not claim
    PatternDefinition.from_pattern(" Major Sixth", create_major_sixth(), _INVERSIONS),
    PatternDefinition.from_pattern(" Minor Sixth", create_minor_sixth(), _INVERSIONS),
    # Extended chords span more than an octave, so only ordered pitches can
    # name them, and only in root position
    PatternDefinition(name=" Dominant Ninth", intervals=(4, 3, 3, 4)),
    PatternDefinition(name=" Major Ninth", intervals=(4, 3, 4, 3)),
    PatternDefinition(name=" Minor Ninth", intervals=(3, 4, 3, 4)),
    PatternDefinition(name=" Added Ninth", intervals=(4, 3, 7)),
)


def build_mode_dictionary(catalog: Iterable[PatternDefinition] = MODE_CATALOG) -> ScaleDictionary:
    """Build a dictionary containing the seven modes."""
    dictionary = ScaleDictionary(*MODE_INTERVAL_RANGE)
    _register_scales(dictionary, catalog)
    logger.debug(f"Built mode dictionary: {dictionary!r}")
    return dictionary


def build_scale_dictionary(
    catalog: Iterable[PatternDefinition] = SCALE_CATALOG,
) -> ScaleDictionary:
    """Build a dictionary containing the standard scales."""
    dictionary = ScaleDictionary(*SCALE_INTERVAL_RANGE)
    _register_scales(dictionary, catalog)
    logger.debug(f"Built scale dictionary: {dictionary!r}")
    return dictionary


def create_chord_dictionary(
    catalog: Iterable[PatternDefinition] = CHORD_CATALOG,
) -> ChordDictionary:
    """
    Build a dictionary of chords, with inversions.

    Intervals between adjacent chord tones are always within one octave,
    so the trie only needs 1..11.
    """
    dictionary = ChordDictionary(*CHORD_INTERVAL_RANGE)
    for definition in catalog:
        pattern = definition.to_pattern()
        if definition.expansion == ExpansionMode.INVERSIONS:
            dictionary.add_chord(pattern, definition.name)
        else:
            dictionary.add_voicing(pattern, definition.name)
    logger.debug(f"Built chord dictionary: {dictionary!r}")
    return dictionary


def _register_scales(dictionary: ScaleDictionary, catalog: Iterable[PatternDefinition]) -> None:
    """Register scale definitions by their expansion mode."""
    for definition in catalog:
        pattern = definition.to_pattern()
        if definition.expansion == ExpansionMode.ROTATIONS:
            dictionary.add_rotations(pattern, definition.name, definition.mode_names)
        else:
            dictionary.add_scale(pattern, definition.name)
