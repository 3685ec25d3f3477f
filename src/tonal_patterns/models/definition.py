"""
Pattern definitions - declarative catalog entries.

A definition names an interval pattern and says how it is registered into
a dictionary. The built-in mode, scale and chord catalogs are lists of
these, and callers can pass their own.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from tonal_patterns.constants import ExpansionMode
from tonal_patterns.core.pattern import Pattern


class PatternDefinition(BaseModel):
    """
    A named interval pattern plus its registration mode.

    For chords the name is the display suffix that follows the root name,
    so it carries its own leading space (" Major") or none ("5").
    """

    name: str = Field(..., description="Display name or suffix")
    intervals: tuple[int, ...] = Field(..., min_length=1, description="Half-step intervals")
    expansion: ExpansionMode = Field(
        ExpansionMode.PLAIN, description="How the pattern is registered"
    )
    mode_names: tuple[str, ...] | None = Field(
        None, description="Per-rotation names for rotation-expanded patterns"
    )

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure the name has something to display."""
        if not v.strip():
            raise ValueError("Pattern definition name must not be blank")
        return v

    @classmethod
    def from_pattern(
        cls,
        name: str,
        pattern: Pattern,
        expansion: ExpansionMode = ExpansionMode.PLAIN,
        mode_names: tuple[str, ...] | None = None,
    ) -> PatternDefinition:
        """Create a definition from an existing pattern."""
        return cls(
            name=name,
            intervals=pattern.intervals,
            expansion=expansion,
            mode_names=mode_names,
        )

    def to_pattern(self) -> Pattern:
        return Pattern(self.intervals)
