"""
Pitch primitives - PitchClass, Pitch and PitchNamer.

PitchClass represents the 12 chromatic pitches (octave-independent).
Pitch is a specific tone at a specific octave, stored as a MIDI note number.
PitchNamer turns pitch classes into display strings; spelling depends on
context, so it is always supplied by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from tonal_patterns.constants import (
    A4_MIDI,
    HALF_STEP,
    MIDDLE_C_MIDI,
    OCTAVE,
    STANDARD_CONCERT_PITCH,
    ErrorMessages,
)

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: tuple[str, ...] = (
    "C",
    "C♯",
    "D",
    "D♯",
    "E",
    "F",
    "F♯",
    "G",
    "G♯",
    "A",
    "A♯",
    "B",
)
_FLAT_NAMES: tuple[str, ...] = (
    "C",
    "D♭",
    "D",
    "E♭",
    "E",
    "F",
    "G♭",
    "G",
    "A♭",
    "A",
    "B♭",
    "B",
)


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C♯ == D♭ == 1).
    """

    C = 0
    Cs = 1  # C♯ / D♭
    D = 2
    Ds = 3  # D♯ / E♭
    E = 4
    F = 5
    Fs = 6  # F♯ / G♭
    G = 7
    Gs = 8  # G♯ / A♭
    A = 9
    As = 10  # A♯ / B♭
    B = 11

    def transpose(self, half_steps: int) -> PitchClass:
        """Transpose by a number of half steps (positive or negative), wrapping at the octave."""
        return PitchClass((self.value + half_steps) % OCTAVE)

    def sharp(self) -> PitchClass:
        return self.transpose(HALF_STEP)

    def flat(self) -> PitchClass:
        return self.transpose(-HALF_STEP)

    def distance_to_higher(self, other: PitchClass) -> int:
        """
        Half steps up to the next occurrence of another pitch class.

        The same pitch class is a whole octave away, never zero.
        """
        return (other.value - self.value - 1) % OCTAVE + 1

    def distance_to_lower(self, other: PitchClass) -> int:
        """
        Half steps (negative) down to the next occurrence of another pitch class.

        The same pitch class is a whole octave away, never zero.
        """
        return -other.distance_to_higher(self)

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * OCTAVE

    @classmethod
    def from_midi(cls, midi_note: int) -> PitchClass:
        """Extract pitch class from MIDI note number."""
        return cls(midi_note % OCTAVE)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db', 'F♯' or 'B♭'."""
        cleaned = name.strip().replace("#", "♯")
        if len(cleaned) == 2 and cleaned[1] == "b":
            cleaned = cleaned[0] + "♭"
        cleaned = cleaned[:1].upper() + cleaned[1:]

        if cleaned in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(cleaned))
        if cleaned in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(cleaned))

        # Spellings that fall on a white key, e.g. E♯ or C♭
        if len(cleaned) == 2 and cleaned[0] in _SHARP_NAMES:
            natural = cls(_SHARP_NAMES.index(cleaned[0]))
            if cleaned[1] == "♯":
                return natural.sharp()
            if cleaned[1] == "♭":
                return natural.flat()

        # Enum names (C, Cs, D, Ds, etc.)
        for member in cls:
            if member.name.upper() == name.strip().upper():
                return member

        raise ValueError(ErrorMessages.UNKNOWN_PITCH_CLASS.format(name=name))


@dataclass(frozen=True, order=True)
class Pitch:
    """
    A specific tone: a pitch class at an octave.

    The value is the MIDI note number, used for every distance calculation.
    Physical frequency is not stored, since not everyone agrees A4 is 440Hz.
    """

    value: int

    @classmethod
    def of(cls, pitch_class: PitchClass, octave: int) -> Pitch:
        """Get the pitch with the given class in the given octave (C4 = middle C)."""
        return cls(pitch_class.to_midi(octave))

    @property
    def pitch_class(self) -> PitchClass:
        return PitchClass.from_midi(self.value)

    @property
    def octave(self) -> int:
        """
        Octave number, where middle C starts octave 4.

        Be careful using this for display: C♭4 is a B, so it reports 3.
        """
        return self.value // OCTAVE - 1

    def distance_to(self, other: Pitch) -> int:
        """Half steps to another pitch; negative if the other pitch is lower."""
        return other.value - self.value

    def transpose(self, half_steps: int) -> Pitch:
        return Pitch(self.value + half_steps)

    def raise_to_next(self, pitch_class: PitchClass) -> Pitch:
        """The next pitch up with the given class. Always moves."""
        return self.transpose(self.pitch_class.distance_to_higher(pitch_class))

    def lower_to_next(self, pitch_class: PitchClass) -> Pitch:
        """The next pitch down with the given class. Always moves."""
        return self.transpose(self.pitch_class.distance_to_lower(pitch_class))

    def frequency(self, concert_pitch: float = STANDARD_CONCERT_PITCH) -> float:
        """Physical frequency in Hz, using the given frequency for A4."""
        return float(2 ** ((self.value - A4_MIDI) / OCTAVE) * concert_pitch)

    def name(self, namer: PitchNamer) -> str:
        """Display name with octave, e.g. 'C♯4'."""
        return f"{namer.name(self.pitch_class)}{self.octave}"

    def __repr__(self) -> str:
        return f"Pitch({self.value})"


def middle_c() -> Pitch:
    """C4."""
    return Pitch(MIDDLE_C_MIDI)


def a4() -> Pitch:
    """The A above middle C, the usual tuning reference."""
    return Pitch(A4_MIDI)


class PitchNamer:
    """
    Looks up display names for pitch classes.

    The right name for a pitch depends on context: in B♭ major flats are used
    because the key already contains an A. Sharp or flat is picked by the
    caller to avoid such overlaps.
    """

    __slots__ = ("_names",)

    def __init__(self, names: tuple[str, ...]) -> None:
        if len(names) != OCTAVE:
            raise ValueError(ErrorMessages.NAMER_SIZE.format(count=len(names)))
        self._names = tuple(names)

    def name(self, pitch_class: int) -> str:
        """Get the name of a pitch class (any int is reduced modulo the octave)."""
        return self._names[int(pitch_class) % OCTAVE]

    def __repr__(self) -> str:
        return f"PitchNamer({', '.join(self._names)})"


def create_sharp_pitch_namer() -> PitchNamer:
    """A namer using sharps (♯) for the black keys."""
    return PitchNamer(_SHARP_NAMES)


def create_flat_pitch_namer() -> PitchNamer:
    """A namer using flats (♭) for the black keys."""
    return PitchNamer(_FLAT_NAMES)
