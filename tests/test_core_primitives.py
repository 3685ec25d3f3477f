"""
Tests for core theory primitives.

Tests cover:
- PitchClass, Pitch and PitchNamer (pitch.py)
- Pattern and RootedPattern (pattern.py)
- Scale and mode patterns (scale.py)
- Chord patterns and ChordFactory (chord.py)
"""

from itertools import islice

import pytest

from tonal_patterns.constants import Degree
from tonal_patterns.core import (
    ChordFactory,
    Pattern,
    Pitch,
    PitchClass,
    PitchNamer,
    RootedPattern,
    a4,
    create_aeolian_mode,
    create_augmented_triad,
    create_chromatic_scale_pattern,
    create_dorian_mode,
    create_flat_pitch_namer,
    create_harmonic_minor_scale_pattern,
    create_ionian_mode,
    create_locrian_mode,
    create_lydian_mode,
    create_major_pentatonic_scale_pattern,
    create_major_scale,
    create_major_triad,
    create_melodic_minor_descending_scale_pattern,
    create_minor_pentatonic_scale_pattern,
    create_minor_scale,
    create_mixolydian_mode,
    create_modes,
    create_phrygian_mode,
    create_sharp_pitch_namer,
    create_symmetric_scale_pattern,
    middle_c,
    scale_order_name,
)


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.E == 4
        assert PitchClass.G == 7
        assert PitchClass.B == 11

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave in both directions."""
        assert PitchClass.C.transpose(2) == PitchClass.D
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B
        assert PitchClass.C.transpose(14) == PitchClass.D

    def test_sharp_and_flat(self) -> None:
        assert PitchClass.F.sharp() == PitchClass.Fs
        assert PitchClass.C.flat() == PitchClass.B

    def test_distance_to_higher(self) -> None:
        """Upward distance; the same class is a full octave away."""
        assert PitchClass.C.distance_to_higher(PitchClass.G) == 7
        assert PitchClass.G.distance_to_higher(PitchClass.C) == 5
        assert PitchClass.C.distance_to_higher(PitchClass.C) == 12

    def test_distance_to_lower(self) -> None:
        """Downward distance is negative; the same class is a full octave away."""
        assert PitchClass.C.distance_to_lower(PitchClass.A) == -3
        assert PitchClass.A.distance_to_lower(PitchClass.C) == -9
        assert PitchClass.C.distance_to_lower(PitchClass.C) == -12

    def test_parse(self) -> None:
        """Parse sharps, flats, unicode accidentals and enum names."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("C#") == PitchClass.Cs
        assert PitchClass.parse("Db") == PitchClass.Cs
        assert PitchClass.parse("F♯") == PitchClass.Fs
        assert PitchClass.parse("B♭") == PitchClass.As
        assert PitchClass.parse("Gs") == PitchClass.Gs

    def test_parse_white_key_accidentals(self) -> None:
        """C♭ is B and E♯ is F."""
        assert PitchClass.parse("Cb") == PitchClass.B
        assert PitchClass.parse("E#") == PitchClass.F

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError):
            PitchClass.parse("H")

    def test_midi_round_trip(self) -> None:
        assert PitchClass.C.to_midi(4) == 60
        assert PitchClass.from_midi(69) == PitchClass.A


class TestPitch:
    """Tests for Pitch."""

    def test_of(self) -> None:
        """Build a pitch from class and octave."""
        assert Pitch.of(PitchClass.C, 4) == middle_c()
        assert Pitch.of(PitchClass.A, 4) == a4()
        assert Pitch.of(PitchClass.Gs, 5).value == 80

    def test_class_and_octave(self) -> None:
        assert Pitch(61).pitch_class == PitchClass.Cs
        assert Pitch(60).octave == 4
        assert Pitch(59).octave == 3

    def test_distance(self) -> None:
        """Distance is negative when the other pitch is lower."""
        assert middle_c().distance_to(a4()) == 9
        assert Pitch(60).distance_to(Pitch(55)) == -5

    def test_transpose_returns_new_pitch(self) -> None:
        c4 = middle_c()
        assert c4.transpose(12) == Pitch(72)
        assert c4 == Pitch(60)

    def test_raise_and_lower_to_next(self) -> None:
        """Moving to the next pitch of a class always moves."""
        assert middle_c().raise_to_next(PitchClass.E) == Pitch(64)
        assert middle_c().raise_to_next(PitchClass.C) == Pitch(72)
        assert middle_c().lower_to_next(PitchClass.A) == Pitch(57)
        assert a4().lower_to_next(PitchClass.C) == middle_c()

    def test_frequency(self) -> None:
        """Frequency doubles per octave from A4."""
        assert a4().frequency() == 440.0
        assert Pitch(81).frequency() == 880.0
        assert a4().frequency(432.0) == 432.0
        assert middle_c().frequency() == pytest.approx(261.63, abs=0.01)

    def test_ordering(self) -> None:
        assert sorted([Pitch(67), Pitch(60), Pitch(64)]) == [Pitch(60), Pitch(64), Pitch(67)]

    def test_name(self, sharp_namer: PitchNamer) -> None:
        assert Pitch(61).name(sharp_namer) == "C♯4"


class TestPitchNamer:
    """Tests for sharp and flat pitch namers."""

    def test_sharp_names(self) -> None:
        namer = create_sharp_pitch_namer()
        assert namer.name(PitchClass.C) == "C"
        assert namer.name(PitchClass.Cs) == "C♯"
        assert namer.name(PitchClass.As) == "A♯"

    def test_flat_names(self) -> None:
        namer = create_flat_pitch_namer()
        assert namer.name(PitchClass.Cs) == "D♭"
        assert namer.name(PitchClass.As) == "B♭"
        assert namer.name(PitchClass.B) == "B"

    def test_total_over_ints(self) -> None:
        """Any int is reduced modulo the octave."""
        assert create_sharp_pitch_namer().name(13) == "C♯"

    def test_wrong_size(self) -> None:
        with pytest.raises(ValueError):
            PitchNamer(("C", "D"))


class TestPattern:
    """Tests for Pattern."""

    def test_empty_pattern_rejected(self) -> None:
        with pytest.raises(ValueError):
            Pattern(())

    def test_equality_and_hash(self) -> None:
        """Patterns are values: lists and tuples give equal, hashable patterns."""
        assert Pattern([4, 3, 5]) == Pattern.of(4, 3, 5)
        assert len({Pattern.of(1, 2), Pattern.of(1, 2)}) == 1

    def test_at_wraps(self) -> None:
        major = create_major_scale()
        assert major.at(0) == 2
        assert major.at(6) == 1
        assert major.at(7) == 2
        assert major.at(9) == 1

    def test_length(self) -> None:
        assert create_major_scale().length() == 7
        assert len(create_chromatic_scale_pattern()) == 12

    def test_offset(self) -> None:
        """Offsetting rotates the pattern; negative offsets count from the end."""
        major = create_major_scale()
        assert major.offset(1).intervals == (2, 1, 2, 2, 2, 1, 2)
        assert major.offset(-1).intervals == (1, 2, 2, 1, 2, 2, 2)
        assert major.offset(7) == major

    def test_offset_round_trip(self) -> None:
        """offset(k) then offset(-k) restores the pattern for every k."""
        major = create_major_scale()
        for k in range(-7, 8):
            assert major.offset(k).offset(-k) == major

    def test_reverse(self) -> None:
        """Reversing gives the descending line."""
        assert Pattern.of(3, 2, 1).reverse().intervals == (-1, -2, -3)
        assert create_major_scale().reverse().intervals == (-1, -2, -2, -2, -1, -2, -2)

    def test_reverse_round_trip(self) -> None:
        for pattern in [create_major_scale(), Pattern.of(5), Pattern.of(3, -1, 4, 1)]:
            assert pattern.reverse().reverse() == pattern

    def test_invert_major_triad(self) -> None:
        """Three inversions of a major triad come back to root position."""
        triad = create_major_triad()
        first = triad.invert()
        second = first.invert()
        assert first.intervals == (3, 5, 4)
        assert second.intervals == (5, 4, 3)
        assert second.invert() == triad

    def test_invert_does_not_mutate(self) -> None:
        triad = create_major_triad()
        triad.invert()
        assert triad.intervals == (4, 3, 5)

    def test_invert_without_octave_does_not_cycle(self) -> None:
        """A pattern that does not sum to an octave never returns to itself."""
        open_triad = Pattern.of(4, 3)
        assert open_triad.invert().intervals == (3, 9)
        assert open_triad.invert().invert() != open_triad

    def test_augmented_is_symmetric(self) -> None:
        augmented = create_augmented_triad()
        assert augmented.invert() == augmented

    def test_repeats_at_octave(self) -> None:
        assert create_major_scale().repeats_at_octave()
        assert create_major_triad().repeats_at_octave()
        assert not Pattern.of(4, 3).repeats_at_octave()

    def test_cumulative(self) -> None:
        assert create_major_scale().cumulative() == (0, 2, 4, 5, 7, 9, 11, 12)

    def test_between(self) -> None:
        assert Pattern.between([60, 64, 67]) == Pattern.of(4, 3)

    def test_sing(self) -> None:
        """Singing a major scale from C4 climbs through C5 and beyond."""
        sung = list(islice(create_major_scale().sing(middle_c()), 10))
        assert [p.value for p in sung] == [60, 62, 64, 65, 67, 69, 71, 72, 74, 76]

    def test_sing_descending(self) -> None:
        """The descending line retraces the ascending one."""
        c5 = Pitch(72)
        sung = list(islice(create_major_scale().sing_descending(c5), 8))
        assert [p.value for p in sung] == [72, 71, 69, 67, 65, 64, 62, 60]


class TestRootedPattern:
    """Tests for RootedPattern."""

    def test_pitch_classes(self) -> None:
        """G major contains F♯ and no F."""
        g_major = RootedPattern(create_major_scale(), Pitch.of(PitchClass.G, 4))
        assert g_major.pitch_classes() == [
            PitchClass.C,
            PitchClass.D,
            PitchClass.E,
            PitchClass.Fs,
            PitchClass.G,
            PitchClass.A,
            PitchClass.B,
        ]

    def test_transpose(self) -> None:
        """Transposing G major up three half steps gives B♭ major."""
        g_major = RootedPattern(create_major_scale(), Pitch.of(PitchClass.G, 4))
        b_flat = g_major.transpose(3)
        assert b_flat.root == Pitch.of(PitchClass.As, 4)
        assert g_major.root == Pitch.of(PitchClass.G, 4)

    def test_sing(self) -> None:
        rooted = RootedPattern(create_minor_pentatonic_scale_pattern(), Pitch.of(PitchClass.A, 3))
        assert [p.value for p in islice(rooted.sing(), 6)] == [57, 60, 62, 64, 67, 69]
        assert [p.value for p in islice(rooted.sing_descending(), 3)] == [57, 55, 52]


class TestScales:
    """Tests for scale and mode patterns."""

    def test_major_and_minor(self) -> None:
        assert create_major_scale().intervals == (2, 2, 1, 2, 2, 2, 1)
        assert create_minor_scale().intervals == (2, 1, 2, 2, 1, 2, 2)
        assert create_minor_scale() == create_aeolian_mode()

    def test_modes(self) -> None:
        """Each mode is a rotation of Ionian."""
        assert create_ionian_mode().intervals == (2, 2, 1, 2, 2, 2, 1)
        assert create_dorian_mode().intervals == (2, 1, 2, 2, 2, 1, 2)
        assert create_phrygian_mode().intervals == (1, 2, 2, 2, 1, 2, 2)
        assert create_lydian_mode().intervals == (2, 2, 2, 1, 2, 2, 1)
        assert create_mixolydian_mode().intervals == (2, 2, 1, 2, 2, 1, 2)
        assert create_locrian_mode().intervals == (1, 2, 2, 1, 2, 2, 2)

    def test_create_modes(self) -> None:
        modes = create_modes()
        assert len(modes) == 7
        assert modes[1] == create_dorian_mode()
        assert all(mode.repeats_at_octave() for mode in modes)

    def test_other_scales_repeat_at_octave(self) -> None:
        for pattern in [
            create_harmonic_minor_scale_pattern(),
            create_major_pentatonic_scale_pattern(),
            create_minor_pentatonic_scale_pattern(),
            create_chromatic_scale_pattern(),
            create_symmetric_scale_pattern(),
        ]:
            assert pattern.repeats_at_octave()

    def test_pentatonics_are_rotations(self) -> None:
        """Minor pentatonic is major pentatonic started from its fifth tone."""
        assert create_major_pentatonic_scale_pattern().offset(4) == (
            create_minor_pentatonic_scale_pattern()
        )

    def test_melodic_minor_descending(self) -> None:
        assert create_melodic_minor_descending_scale_pattern().intervals == (
            -2,
            -2,
            -1,
            -2,
            -2,
            -1,
            -2,
        )

    def test_scale_order_name(self) -> None:
        assert scale_order_name(create_major_pentatonic_scale_pattern()) == "Pentatonic"
        assert scale_order_name(create_major_scale()) == "Heptatonic"
        assert scale_order_name(create_symmetric_scale_pattern()) == "Octatonic"
        assert scale_order_name(create_chromatic_scale_pattern()) == "Chromatic"
        assert scale_order_name(Pattern((1,) * 9)) is None


class TestChordFactory:
    """Tests for ChordFactory."""

    def test_c_major_chord_tones(self) -> None:
        factory = ChordFactory(create_major_scale(), middle_c())
        assert factory.get_pitch(Degree.FIRST) == middle_c()
        assert factory.get_pitch(Degree.THIRD) == Pitch.of(PitchClass.E, 4)
        assert factory.get_pitch(Degree.FIFTH) == Pitch.of(PitchClass.G, 4)

    def test_offset_into_scale(self) -> None:
        """The third of the chord on E in C major is G."""
        factory = ChordFactory(create_major_scale(), middle_c(), 2)
        assert factory.get_pitch(Degree.THIRD) == Pitch.of(PitchClass.G, 4)

    def test_spans_octaves(self) -> None:
        """E major chord tones from A major, rooted on A4."""
        factory = ChordFactory(create_major_scale(), a4(), 4)
        assert factory.get_pitch(Degree.THIRD) == Pitch.of(PitchClass.Gs, 5)
        assert factory.get_pitch(Degree.FIFTH) == Pitch.of(PitchClass.B, 5)
        assert factory.get_pitch(Degree.SEVENTH) == Pitch.of(PitchClass.D, 6)

    def test_get_pitch_class(self) -> None:
        factory = ChordFactory(create_major_scale(), a4(), 4)
        assert factory.get_pitch_class(Degree.THIRD) == PitchClass.Gs

    def test_qualities(self) -> None:
        major = create_major_scale()
        assert ChordFactory(major, middle_c(), 0).has_major_third()
        assert not ChordFactory(major, middle_c(), 1).has_major_third()
        assert ChordFactory(major, middle_c(), 0).has_perfect_fourth()
        assert not ChordFactory(major, middle_c(), 3).has_perfect_fourth()
        assert ChordFactory(major, middle_c(), 4).has_perfect_fifth()
        assert not ChordFactory(major, middle_c(), 6).has_perfect_fifth()

    def test_triad_and_seventh(self) -> None:
        assert [p.value for p in ChordFactory(create_major_scale(), middle_c()).triad()] == [
            60,
            64,
            67,
        ]
        g_seventh = ChordFactory(create_major_scale(), middle_c(), 4).seventh()
        assert [p.value for p in g_seventh] == [67, 71, 74, 77]

    def test_invalid_degree(self) -> None:
        with pytest.raises(ValueError):
            ChordFactory(create_major_scale(), middle_c()).get_pitch(0)
