"""
Recognition results.

ChordMatch is the structured answer behind the (name, found) pairs the
recognizers return.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from tonal_patterns.core.pitch import PitchClass


class ChordMatch(BaseModel):
    """A recognized chord."""

    name: str = Field(..., description="Display name, e.g. 'C Major' or 'C Major/G'")
    quality: str = Field(..., description="Dictionary suffix with surrounding space removed")
    root: PitchClass = Field(..., description="True root of the chord")
    bass: PitchClass = Field(..., description="Lowest pitch class of the input")
    root_index: int = Field(0, ge=0, description="Position of the root in the sorted input")

    model_config = {"frozen": True}

    @property
    def is_inversion(self) -> bool:
        """True when something other than the root is the lowest tone."""
        return self.root_index > 0
