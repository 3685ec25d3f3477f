"""
Scale primitives - scale and mode patterns.

Scales are interval patterns from one degree to the next (not cumulative).
A major scale is: W W H W W W H (2 2 1 2 2 2 1 half steps).
The seven modes are rotations of the Ionian pattern.
"""

from __future__ import annotations

from tonal_patterns.constants import HALF_STEP, NOTES_IN_MODE, SCALE_ORDER_NAMES, WHOLE_STEP

from .pattern import Pattern

# Interval shorthand
_W = WHOLE_STEP
_H = HALF_STEP
_A2 = WHOLE_STEP + HALF_STEP  # augmented second

MODE_NAMES: tuple[str, ...] = (
    "Ionian",
    "Dorian",
    "Phrygian",
    "Lydian",
    "Mixolydian",
    "Aeolian",
    "Locrian",
)


def create_ionian_mode() -> Pattern:
    """The Ionian (I) mode, from which every other mode is a rotation."""
    return Pattern.of(_W, _W, _H, _W, _W, _W, _H)


def create_dorian_mode() -> Pattern:
    return create_ionian_mode().offset(1)


def create_phrygian_mode() -> Pattern:
    return create_ionian_mode().offset(2)


def create_lydian_mode() -> Pattern:
    return create_ionian_mode().offset(3)


def create_mixolydian_mode() -> Pattern:
    return create_ionian_mode().offset(4)


def create_aeolian_mode() -> Pattern:
    return create_ionian_mode().offset(5)


def create_locrian_mode() -> Pattern:
    return create_ionian_mode().offset(6)


def create_modes() -> list[Pattern]:
    """All seven modes, in order from I (Ionian) to VII (Locrian)."""
    return [create_ionian_mode().offset(i) for i in range(NOTES_IN_MODE)]


def create_major_scale() -> Pattern:
    return create_ionian_mode()


def create_minor_scale() -> Pattern:
    """The natural minor scale, i.e. the Aeolian mode."""
    return create_aeolian_mode()


def create_harmonic_minor_scale_pattern() -> Pattern:
    """Natural minor with a raised seventh: W H W W H A2 H."""
    return Pattern.of(_W, _H, _W, _W, _H, _A2, _H)


def create_melodic_minor_ascending_scale_pattern() -> Pattern:
    """Natural minor with raised sixth and seventh: W H W W W W H."""
    return Pattern.of(_W, _H, _W, _W, _W, _W, _H)


def create_melodic_minor_descending_scale_pattern() -> Pattern:
    """Descending melodic minor is the natural minor, walked downwards."""
    return create_minor_scale().reverse()


def create_chromatic_scale_pattern() -> Pattern:
    return Pattern((_H,) * 12)


def create_symmetric_scale_pattern() -> Pattern:
    """The symmetric (octatonic, whole-half diminished) scale."""
    return Pattern((_W, _H) * 4)


def create_major_pentatonic_scale_pattern() -> Pattern:
    return Pattern.of(_W, _W, _A2, _W, _A2)


def create_minor_pentatonic_scale_pattern() -> Pattern:
    return Pattern.of(_A2, _W, _W, _A2, _W)


def scale_order_name(pattern: Pattern) -> str | None:
    """
    The name for a scale with this many tones, e.g. 'Pentatonic'.

    Returns None for sizes without a common name.
    """
    return SCALE_ORDER_NAMES.get(pattern.length())
