"""
Pytest configuration and shared fixtures.
"""

import pytest

from tonal_patterns.core import PitchNamer, create_flat_pitch_namer, create_sharp_pitch_namer
from tonal_patterns.dictionary import (
    ChordDictionary,
    ScaleDictionary,
    build_mode_dictionary,
    build_scale_dictionary,
    create_chord_dictionary,
)


@pytest.fixture(scope="session")
def chord_dictionary() -> ChordDictionary:
    """The built-in chord dictionary (read-only, shared)."""
    return create_chord_dictionary()


@pytest.fixture(scope="session")
def mode_dictionary() -> ScaleDictionary:
    """The built-in mode dictionary."""
    return build_mode_dictionary()


@pytest.fixture(scope="session")
def scale_dictionary() -> ScaleDictionary:
    """The built-in scale dictionary."""
    return build_scale_dictionary()


@pytest.fixture
def sharp_namer() -> PitchNamer:
    return create_sharp_pitch_namer()


@pytest.fixture
def flat_namer() -> PitchNamer:
    return create_flat_pitch_namer()
