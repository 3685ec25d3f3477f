"""
Chord primitives - chord patterns and ChordFactory.

Chords are stacks of intervals. A chord pattern lists the gaps between
adjacent chord tones in root position, closed at the octave: a major triad
is M3 + m3 + P4 (4, 3, 5 half steps), the last gap leading back to the root.
"""

from __future__ import annotations

from dataclasses import dataclass

from tonal_patterns.constants import Degree, ErrorMessages

from .pattern import Pattern
from .pitch import Pitch, PitchClass


def create_power_chord() -> Pattern:
    """Root and fifth only."""
    return Pattern.of(7, 5)


def create_major_triad() -> Pattern:
    return Pattern.of(4, 3, 5)


def create_minor_triad() -> Pattern:
    return Pattern.of(3, 4, 5)


def create_diminished_triad() -> Pattern:
    return Pattern.of(3, 3, 6)


def create_augmented_triad() -> Pattern:
    """Symmetric: every inversion has the same shape as root position."""
    return Pattern.of(4, 4, 4)


def create_suspended_triad() -> Pattern:
    """Suspended fourth."""
    return Pattern.of(5, 2, 5)


def create_suspended_second_triad() -> Pattern:
    return Pattern.of(2, 5, 5)


def create_dominant_seventh() -> Pattern:
    return Pattern.of(4, 3, 3, 2)


def create_major_seventh() -> Pattern:
    return Pattern.of(4, 3, 4, 1)


def create_minor_seventh() -> Pattern:
    return Pattern.of(3, 4, 3, 2)


def create_minor_major_seventh() -> Pattern:
    return Pattern.of(3, 4, 4, 1)


def create_half_diminished_seventh() -> Pattern:
    return Pattern.of(3, 3, 4, 2)


def create_diminished_seventh() -> Pattern:
    """Symmetric, like the augmented triad."""
    return Pattern.of(3, 3, 3, 3)


def create_major_sixth() -> Pattern:
    return Pattern.of(4, 3, 2, 3)


def create_minor_sixth() -> Pattern:
    return Pattern.of(3, 4, 2, 3)


@dataclass(frozen=True)
class ChordFactory:
    """
    Builds chords from scale degrees without counting half steps.

    Ask for "the third" and get a major or minor third depending on where
    the chord sits in the scale.

    Examples:
        ChordFactory(create_major_scale(), Pitch.of(PitchClass.C, 4), 2)
        builds chords on E (the third degree of C major).
    """

    pattern: Pattern  # the scale, which should be diatonic
    root: Pitch  # the pitch the scale is applied from
    offset: int = 0  # scale position of the chord root

    def get_pitch(self, degree: int) -> Pitch:
        """
        The pitch a chord degree above the chord root.

        Degree 1 is the chord root itself, so the third is two scale steps up.
        """
        if degree < 1:
            raise ValueError(ErrorMessages.INVALID_DEGREE.format(degree=degree))
        steps = self.offset + degree - 1
        return self.root.transpose(sum(self.pattern.at(i) for i in range(steps)))

    def get_pitch_class(self, degree: int) -> PitchClass:
        return self.get_pitch(degree).pitch_class

    def _interval_to(self, degree: Degree) -> int:
        return self.get_pitch(Degree.FIRST).distance_to(self.get_pitch(degree))

    def has_major_third(self) -> bool:
        """True for a major third above the chord root, False for a minor one."""
        return self._interval_to(Degree.THIRD) == 4

    def has_perfect_fourth(self) -> bool:
        return self._interval_to(Degree.FOURTH) == 5

    def has_perfect_fifth(self) -> bool:
        return self._interval_to(Degree.FIFTH) == 7

    def triad(self) -> list[Pitch]:
        """Root, third and fifth, ascending."""
        return [self.get_pitch(d) for d in (Degree.FIRST, Degree.THIRD, Degree.FIFTH)]

    def seventh(self) -> list[Pitch]:
        """Root, third, fifth and seventh, ascending."""
        return self.triad() + [self.get_pitch(Degree.SEVENTH)]
