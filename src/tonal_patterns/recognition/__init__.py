"""
Chord recognition.

This module provides:
- get_chord_name / identify_pitch_classes: Name a set of pitch classes
- identify_pitches: Name ordered absolute pitches, inversions as slash chords
- Chord: An ordered set of pitches with get_name
"""

from tonal_patterns.recognition.chord import Chord
from tonal_patterns.recognition.recognizer import (
    get_chord_name,
    identify_pitch_classes,
    identify_pitches,
)

__all__ = [
    "Chord",
    "get_chord_name",
    "identify_pitch_classes",
    "identify_pitches",
]
