"""
Chord - an ordered set of concrete pitches.

This is the played form of a chord: actual pitches in actual octaves,
as they sit on an instrument.
"""

from __future__ import annotations

from dataclasses import dataclass

from tonal_patterns.core.pitch import Pitch, PitchClass, PitchNamer
from tonal_patterns.dictionary.pattern_dictionary import ChordDictionary
from tonal_patterns.models.match import ChordMatch

from .recognizer import identify_pitches


@dataclass(frozen=True)
class Chord:
    """
    A set of pitches sounded together, kept low to high.

    Immutable and hashable.
    """

    pitches: tuple[Pitch, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pitches", tuple(sorted(self.pitches)))

    @classmethod
    def of(cls, *pitches: Pitch) -> Chord:
        return cls(pitches)

    @property
    def bass(self) -> Pitch | None:
        """The lowest pitch, if there is one."""
        return self.pitches[0] if self.pitches else None

    def pitch_classes(self) -> list[PitchClass]:
        """Distinct pitch classes, ascending."""
        return sorted({p.pitch_class for p in self.pitches})

    def identify(self, dictionary: ChordDictionary, namer: PitchNamer) -> ChordMatch | None:
        return identify_pitches(dictionary, namer, self.pitches)

    def get_name(self, dictionary: ChordDictionary, namer: PitchNamer) -> tuple[str, bool]:
        """
        Name this chord, using slash notation for inversions.

        Returns:
            (name, True) such as ("C Major/G", True), or ("", False)
        """
        match = self.identify(dictionary, namer)
        if match is None:
            return "", False
        return match.name, True

    def __len__(self) -> int:
        return len(self.pitches)

    def __str__(self) -> str:
        return " ".join(str(p.value) for p in self.pitches)
