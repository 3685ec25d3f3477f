"""
Constants and enums for the theory library.

No magic numbers - step sizes, interval ranges and standard messages live here.
"""

from enum import Enum, IntEnum

# Step sizes in half steps
HALF_STEP = 1
WHOLE_STEP = 2 * HALF_STEP
OCTAVE = 12 * HALF_STEP

# The number of notes in a diatonic mode
NOTES_IN_MODE = 7

# A4 in Hz, and its MIDI note number
STANDARD_CONCERT_PITCH = 440.0
A4_MIDI = 69
MIDDLE_C_MIDI = 60

# Legal trie key ranges (inclusive) for each dictionary kind
MODE_INTERVAL_RANGE: tuple[int, int] = (HALF_STEP, WHOLE_STEP)
SCALE_INTERVAL_RANGE: tuple[int, int] = (HALF_STEP, WHOLE_STEP + HALF_STEP)
CHORD_INTERVAL_RANGE: tuple[int, int] = (HALF_STEP, OCTAVE - HALF_STEP)

# Fewest distinct pitches that can name a chord
MIN_CHORD_PITCHES = 2

# Scale names by number of tones (9, 10 and 11 have no common name)
SCALE_ORDER_NAMES: dict[int, str] = {
    1: "Monotonic",
    2: "Ditonic",  # not the same thing as diatonic
    3: "Tritonic",
    4: "Tetratonic",
    5: "Pentatonic",
    6: "Hexatonic",
    7: "Heptatonic",
    8: "Octatonic",
    12: "Chromatic",
}


class ExpansionMode(str, Enum):
    """How a pattern is registered into a dictionary."""

    PLAIN = "plain"  # as given, root position only
    ROTATIONS = "rotations"  # every cyclic rotation, offset recorded
    INVERSIONS = "inversions"  # chord inversions plus open voicings


class Degree(IntEnum):
    """Chord tones counted from the chord root (1 is the root itself)."""

    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5
    SIXTH = 6
    SEVENTH = 7
    NINTH = 9
    ELEVENTH = 11
    THIRTEENTH = 13


class ErrorMessages:
    """Standardized error messages."""

    EMPTY_PATTERN = "A pattern needs at least one interval."
    INVALID_TRIE_RANGE = (
        "Invalid trie range: max ({max_value}) must be greater than min ({min_value})."
    )
    PATH_OUT_OF_RANGE = "Path value {value} is outside the trie range {min_value}..{max_value}."
    NOT_AN_OCTAVE = "Pattern {intervals} does not repeat at the octave, so it has no inversions."
    UNKNOWN_PITCH_CLASS = "Unknown pitch class: '{name}'."
    INVALID_DEGREE = "Degree must be 1 or higher, got {degree}."
    NAMER_SIZE = "A pitch namer needs exactly 12 names, got {count}."
