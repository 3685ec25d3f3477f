"""
Pydantic models for the theory library.

This module provides:
- PatternDefinition: Named interval pattern plus registration mode
- ChordMatch: Structured chord recognition result
"""

from tonal_patterns.models.definition import PatternDefinition
from tonal_patterns.models.match import ChordMatch

__all__ = [
    "ChordMatch",
    "PatternDefinition",
]
