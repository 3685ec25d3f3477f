"""
Pattern dictionaries - name lookup for interval patterns.

A dictionary wraps a fixed-radix trie configured for the interval range of
its domain. ScaleDictionary registers scales and mode families;
ChordDictionary registers chords together with all of their inversions.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from tonal_patterns.constants import ErrorMessages
from tonal_patterns.core.pattern import Pattern
from tonal_patterns.core.trie import TrieNode

from .entries import ChordEntry, ScaleEntry

logger = logging.getLogger(__name__)

E = TypeVar("E", ScaleEntry, ChordEntry)


class PatternDictionary(Generic[E]):
    """
    Looks up the entries registered for an exact interval pattern.

    A dictionary built with an invalid range (max <= min) is empty and
    unusable: inserts are dropped and every lookup misses.

    Build once, then only read. There is no removal.
    """

    def __init__(self, min_interval: int, max_interval: int) -> None:
        """
        Initialize the dictionary.

        Args:
            min_interval: Smallest legal interval (inclusive)
            max_interval: Largest legal interval (inclusive)
        """
        self._trie: TrieNode[E] | None = TrieNode.create(min_interval, max_interval)
        if self._trie is None:
            logger.warning(
                ErrorMessages.INVALID_TRIE_RANGE.format(
                    min_value=min_interval, max_value=max_interval
                )
            )

    @property
    def is_usable(self) -> bool:
        """False if the dictionary was configured with an invalid range."""
        return self._trie is not None

    def add_pattern(self, pattern: Pattern, entry: E) -> bool:
        """
        Register an entry for a pattern exactly as given.

        Returns:
            True if the entry was stored, False if the dictionary is unusable
            or the pattern has intervals outside its range
        """
        if self._trie is None:
            return False
        if not self._trie.accepts(pattern.intervals):
            logger.warning(
                f"Dropping '{entry.name}': pattern {pattern} is outside "
                f"{self._trie.min_value}..{self._trie.max_value}"
            )
            return False
        self._trie.add_value(pattern.intervals, entry)
        return True

    def get_entries(self, pattern: Pattern) -> tuple[E, ...]:
        """Every entry registered for exactly this pattern, in insertion order."""
        if self._trie is None:
            return ()
        return self._trie.find_values(pattern.intervals)

    def get_name(self, pattern: Pattern) -> tuple[str, bool]:
        """
        Name of the pattern, if it is in the dictionary.

        The first registered entry wins. Returns ("", False) on a miss.
        """
        entries = self.get_entries(pattern)
        if not entries:
            return "", False
        return entries[0].name, True

    def __contains__(self, pattern: object) -> bool:
        return isinstance(pattern, Pattern) and bool(self.get_entries(pattern))

    def __len__(self) -> int:
        """Number of registered entries, counting every rotation or inversion."""
        return 0 if self._trie is None else len(self._trie)

    def __repr__(self) -> str:
        if self._trie is None:
            return f"{type(self).__name__}(unusable)"
        return (
            f"{type(self).__name__}({self._trie.min_value}..{self._trie.max_value}, "
            f"{len(self)} entries)"
        )


class ScaleDictionary(PatternDictionary[ScaleEntry]):
    """A dictionary of scale and mode names."""

    def add_scale(self, pattern: Pattern, name: str) -> bool:
        """Register a scale under its name, as given."""
        return self.add_pattern(pattern, ScaleEntry(name))

    def add_rotations(
        self,
        pattern: Pattern,
        family: str,
        names: tuple[str, ...] | None = None,
    ) -> int:
        """
        Register every cyclic rotation of a pattern.

        A query started from any degree then resolves to the family with the
        rotation recorded as the entry's offset.

        Args:
            pattern: The family pattern, e.g. the Ionian mode
            family: Family name, used as the entry name when names is omitted
            names: Optional name per rotation, e.g. the seven mode names

        Returns:
            Number of rotations registered
        """
        registered = 0
        for k in range(pattern.length()):
            name = names[k] if names and k < len(names) else family
            registered += self.add_pattern(pattern.offset(k), ScaleEntry(name, k, family))
        logger.debug(f"Registered {registered} rotation(s) of '{family}'")
        return registered


class ChordDictionary(PatternDictionary[ChordEntry]):
    """
    A dictionary of chord names, inversions included.

    Each chord is registered twice per inversion: the closed pattern (which
    wraps back to the octave and sums to 12) for pitch-class sets, and the
    open pattern (closing interval dropped) for ordered pitches. Closed
    patterns sum to an octave and open ones never do, so they cannot collide.
    """

    def add_chord(self, pattern: Pattern, name: str) -> int:
        """
        Register a chord in root position and every inversion.

        The k-th inversion of an n-tone chord has its root at sorted position
        (n - k) mod n. A symmetric chord (augmented, diminished seventh) stops
        at the first inversion that repeats the root-position shape, since
        those inversions would shadow other roots' root positions.

        Returns:
            Number of patterns registered

        Raises:
            ValueError: If the pattern does not repeat at the octave
        """
        if not pattern.repeats_at_octave():
            raise ValueError(ErrorMessages.NOT_AN_OCTAVE.format(intervals=pattern.intervals))

        tones = pattern.length()
        registered = 0
        current = pattern
        for k in range(tones):
            if k and current == pattern:
                logger.debug(f"'{name}' is symmetric, skipping {tones - k} inversion(s)")
                break
            entry = ChordEntry(name, (tones - k) % tones)
            registered += self.add_pattern(current, entry)
            if tones > 1:
                registered += self.add_pattern(Pattern(current.intervals[:-1]), entry)
            current = current.invert()
        return registered

    def add_voicing(self, pattern: Pattern, name: str) -> bool:
        """Register an open voicing in root position only, e.g. a ninth chord."""
        return self.add_pattern(pattern, ChordEntry(name))

