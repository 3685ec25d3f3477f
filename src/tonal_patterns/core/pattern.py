"""
Pattern primitives - Pattern and RootedPattern.

A pattern is a cyclic sequence of half-step intervals. Scales are patterns
walked from a root; chords are patterns stacked from a root. Patterns are
immutable: rotations, reversals and inversions all return new patterns.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import cycle

from tonal_patterns.constants import OCTAVE, ErrorMessages

from .pitch import Pitch, PitchClass


@dataclass(frozen=True)
class Pattern:
    """
    An ordered, non-empty sequence of half-step intervals.

    Indexing wraps around, so a pattern can be applied indefinitely.
    Values may be negative for descending lines.

    Immutable and hashable.
    """

    intervals: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.intervals) < 1:
            raise ValueError(ErrorMessages.EMPTY_PATTERN)
        object.__setattr__(self, "intervals", tuple(int(i) for i in self.intervals))

    @classmethod
    def of(cls, *intervals: int) -> Pattern:
        """Build a pattern from intervals given as arguments."""
        return cls(intervals)

    @classmethod
    def between(cls, values: Iterable[int]) -> Pattern:
        """Pattern of the differences between consecutive values."""
        ordered = list(values)
        return cls(tuple(b - a for a, b in zip(ordered, ordered[1:])))

    def at(self, index: int) -> int:
        """The interval at an index; indexes past the end loop back to the start."""
        return self.intervals[index % len(self.intervals)]

    def length(self) -> int:
        return len(self.intervals)

    def offset(self, k: int) -> Pattern:
        """
        A rotation of this pattern that starts k intervals in.

        Negative offsets count back from the end.
        """
        k %= len(self.intervals)
        return Pattern(self.intervals[k:] + self.intervals[:k])

    def reverse(self) -> Pattern:
        """
        The same line traversed backwards.

        An ascending major scale becomes a descending one:
        (3, 2, 1) becomes (-1, -2, -3).
        """
        return Pattern(tuple(-interval for interval in reversed(self.intervals)))

    def invert(self) -> Pattern:
        """
        The next inversion of this pattern.

        The first interval is dropped and the interval that completes the
        octave is appended. Applied length() times to a pattern that repeats
        at the octave, this returns the original pattern.
        """
        remaining = self.intervals[1:]
        return Pattern(remaining + (OCTAVE - sum(remaining),))

    def repeats_at_octave(self) -> bool:
        """True if applying the pattern once lands exactly one octave up."""
        return sum(self.intervals) == OCTAVE

    def cumulative(self) -> tuple[int, ...]:
        """Offset of every tone from the first, including the first (0)."""
        offsets = [0]
        for interval in self.intervals:
            offsets.append(offsets[-1] + interval)
        return tuple(offsets)

    def sing(self, start: Pitch) -> Iterator[Pitch]:
        """
        Produce pitches indefinitely by applying this pattern from a start pitch.

        Unless the intervals sum to zero the line never loops: it keeps
        climbing (or falling) forever.
        """
        pitch = start
        yield pitch
        for interval in cycle(self.intervals):
            pitch = pitch.transpose(interval)
            yield pitch

    def sing_descending(self, start: Pitch) -> Iterator[Pitch]:
        """Produce pitches applying this pattern in reverse from a start pitch."""
        return self.reverse().sing(start)

    def __len__(self) -> int:
        return len(self.intervals)

    def __iter__(self) -> Iterator[int]:
        return iter(self.intervals)

    def __str__(self) -> str:
        return "-".join(str(i) for i in self.intervals)

    def __repr__(self) -> str:
        return f"Pattern{self.intervals!r}"


@dataclass(frozen=True)
class RootedPattern:
    """
    A pattern applied from a specific pitch.

    Examples:
        RootedPattern(create_major_scale(), middle_c()) = C major from C4
    """

    pattern: Pattern
    root: Pitch

    def transpose(self, half_steps: int) -> RootedPattern:
        """The same pattern from a root moved by a number of half steps."""
        return RootedPattern(self.pattern, self.root.transpose(half_steps))

    def sing(self) -> Iterator[Pitch]:
        return self.pattern.sing(self.root)

    def sing_descending(self) -> Iterator[Pitch]:
        return self.pattern.sing_descending(self.root)

    def pitch_classes(self) -> list[PitchClass]:
        """The distinct pitch classes of one pass through the pattern, ascending."""
        root = self.root.pitch_class
        return sorted({root.transpose(offset) for offset in self.pattern.cumulative()})

    def __str__(self) -> str:
        return f"{self.pattern} from {self.root!r}"
