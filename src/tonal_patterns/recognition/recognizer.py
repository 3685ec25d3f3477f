"""
Chord recognition - name a chord from its pitches.

Two input modes:
- Pitch-class sets: unordered, octave-free. Adjacent gaps plus the gap that
  wraps back to the lowest class form a closed pattern. Octave information
  is gone, so extended chords and slash basses cannot be named.
- Ordered pitches: absolute pitches, possibly spanning octaves. Only the
  gaps between adjacent pitches are used, and inversions are reported in
  slash notation ("C Major/G").
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tonal_patterns.constants import MIN_CHORD_PITCHES, OCTAVE
from tonal_patterns.core.pattern import Pattern
from tonal_patterns.core.pitch import Pitch, PitchClass, PitchNamer
from tonal_patterns.dictionary.pattern_dictionary import ChordDictionary
from tonal_patterns.models.match import ChordMatch

logger = logging.getLogger(__name__)


def identify_pitch_classes(
    dictionary: ChordDictionary,
    namer: PitchNamer,
    pitch_classes: Iterable[int],
) -> ChordMatch | None:
    """
    Identify a chord from an unordered set of pitch classes.

    Duplicates are ignored. The first dictionary entry for the shape wins.

    Args:
        dictionary: Chord dictionary to search
        namer: Spelling for the root name
        pitch_classes: Pitch classes (or any ints, reduced modulo the octave)

    Returns:
        ChordMatch, or None if fewer than two distinct classes were given or
        the shape is unknown
    """
    classes = sorted({PitchClass(int(pc) % OCTAVE) for pc in pitch_classes})
    if len(classes) < MIN_CHORD_PITCHES:
        logger.debug(f"Need {MIN_CHORD_PITCHES} distinct pitch classes, got {len(classes)}")
        return None

    gaps = [b - a for a, b in zip(classes, classes[1:])]
    gaps.append(classes[0] - classes[-1] + OCTAVE)
    query = Pattern(tuple(gaps))

    entries = dictionary.get_entries(query)
    if not entries:
        logger.debug(f"No chord matches pitch-class pattern {query}")
        return None

    entry = entries[0]
    root = classes[entry.root_index]
    return ChordMatch(
        name=f"{namer.name(root)}{entry.name}",
        quality=entry.name.strip(),
        root=root,
        bass=classes[0],
        root_index=entry.root_index,
    )


def get_chord_name(
    dictionary: ChordDictionary,
    namer: PitchNamer,
    pitch_classes: Iterable[int],
) -> tuple[str, bool]:
    """
    Name a chord from an unordered set of pitch classes.

    Returns:
        (name, True) such as ("C Major", True), or ("", False)
    """
    match = identify_pitch_classes(dictionary, namer, pitch_classes)
    if match is None:
        return "", False
    return match.name, True


def identify_pitches(
    dictionary: ChordDictionary,
    namer: PitchNamer,
    pitches: Iterable[Pitch],
) -> ChordMatch | None:
    """
    Identify a chord from absolute pitches.

    Pitches are sorted low to high; the lowest is the bass. A root-position
    match is named after the bass, an inversion as "<root><quality>/<bass>".

    Returns:
        ChordMatch, or None if fewer than two pitches were given or the
        voicing is unknown
    """
    ordered = sorted(pitches)
    if len(ordered) < MIN_CHORD_PITCHES:
        logger.debug(f"Need {MIN_CHORD_PITCHES} pitches, got {len(ordered)}")
        return None

    query = Pattern.between(p.value for p in ordered)
    bass = ordered[0].pitch_class

    entries = dictionary.get_entries(query)
    if not entries:
        logger.debug(f"No chord matches voicing {query}")
        return None

    entry = entries[0]
    root = ordered[entry.root_index].pitch_class
    name = f"{namer.name(root)}{entry.name}"
    if entry.root_index > 0:
        name = f"{name}/{namer.name(bass)}"
    return ChordMatch(
        name=name,
        quality=entry.name.strip(),
        root=root,
        bass=bass,
        root_index=entry.root_index,
    )
