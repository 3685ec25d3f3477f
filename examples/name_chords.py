#!/usr/bin/env python3
"""
Example: Naming Scales and Chords.

This demonstrates building the built-in dictionaries once and using them to
name modes, pitch-class sets and voiced chords (with slash notation for
inversions).

Usage:
    python examples/name_chords.py
"""

from itertools import islice

from tonal_patterns.core import (
    ChordFactory,
    Pitch,
    PitchClass,
    RootedPattern,
    create_flat_pitch_namer,
    create_major_scale,
    create_modes,
    create_sharp_pitch_namer,
)
from tonal_patterns.dictionary import build_mode_dictionary, create_chord_dictionary
from tonal_patterns.recognition import Chord, get_chord_name


def main() -> None:
    """Demonstrate scale and chord naming."""
    print("Tonal Patterns Demo")
    print("=" * 40)
    print()

    sharps = create_sharp_pitch_namer()
    flats = create_flat_pitch_namer()
    modes = build_mode_dictionary()
    chords = create_chord_dictionary()

    # Modes from C
    print("Modes from C:")
    for mode in create_modes():
        name, _ = modes.get_name(mode)
        line = islice(RootedPattern(mode, Pitch(60)).sing(), mode.length() + 1)
        notes = " ".join(p.name(sharps) for p in line)
        print(f"  {name:<10} {mode}  {notes}")
    print()

    # Pitch-class sets
    print("Pitch-class sets:")
    for classes in (
        [PitchClass.C, PitchClass.E, PitchClass.G],
        [PitchClass.E, PitchClass.G, PitchClass.C],
        [PitchClass.G, PitchClass.B, PitchClass.D, PitchClass.F],
        [PitchClass.C, PitchClass.Cs, PitchClass.D],
    ):
        name, found = get_chord_name(chords, sharps, classes)
        label = " ".join(sharps.name(pc) for pc in classes)
        print(f"  {label:<12} -> {name if found else '(unknown)'}")
    print()

    # Diatonic triads and sevenths in C major
    print("Diatonic chords in C major:")
    scale = create_major_scale()
    for offset in range(scale.length()):
        factory = ChordFactory(scale, Pitch(60), offset)
        triad, _ = Chord(tuple(factory.triad())).get_name(chords, sharps)
        seventh, _ = Chord(tuple(factory.seventh())).get_name(chords, sharps)
        print(f"  {offset + 1}: {triad:<14} {seventh}")
    print()

    # Voicings, including inversions
    print("Voiced chords:")
    for chord, namer in (
        (Chord.of(Pitch(55), Pitch(60), Pitch(64)), sharps),
        (Chord.of(Pitch(62), Pitch(65), Pitch(70)), flats),
        (Chord.of(Pitch(60), Pitch(64), Pitch(67), Pitch(70), Pitch(74)), sharps),
    ):
        name, found = chord.get_name(chords, namer)
        notes = " ".join(p.name(namer) for p in chord.pitches)
        print(f"  {notes:<18} -> {name if found else '(unknown)'}")


if __name__ == "__main__":
    main()
