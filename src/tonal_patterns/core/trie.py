"""
Fixed-radix trie keyed by sequences of bounded integers.

Every legal key value has its own child slot, so a lookup is one list index
per path element. Several values may share a path.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

from tonal_patterns.constants import ErrorMessages

T = TypeVar("T")


class TrieNode(Generic[T]):
    """
    A node in a trie whose path values must lie in [min_value, max_value].

    Nodes are created lazily on insert and never removed.
    """

    __slots__ = ("min_value", "max_value", "_children", "_values")

    def __init__(self, min_value: int, max_value: int) -> None:
        if max_value <= min_value:
            raise ValueError(
                ErrorMessages.INVALID_TRIE_RANGE.format(min_value=min_value, max_value=max_value)
            )
        self.min_value = min_value
        self.max_value = max_value
        self._children: list[TrieNode[T] | None] = [None] * (max_value - min_value + 1)
        self._values: list[T] = []

    @classmethod
    def create(cls, min_value: int, max_value: int) -> TrieNode[T] | None:
        """Create a trie root, or None if the range is empty or inverted."""
        if max_value <= min_value:
            return None
        return cls(min_value, max_value)

    def accepts(self, path: Sequence[int]) -> bool:
        """True if every path value is within this trie's range."""
        return all(self.min_value <= value <= self.max_value for value in path)

    def add_value(self, path: Sequence[int], value: T) -> None:
        """Add a value at the given path, keeping any values already there."""
        for step in path:
            if not self.min_value <= step <= self.max_value:
                raise ValueError(
                    ErrorMessages.PATH_OUT_OF_RANGE.format(
                        value=step, min_value=self.min_value, max_value=self.max_value
                    )
                )

        node = self
        for step in path:
            slot = step - self.min_value
            child = node._children[slot]
            if child is None:
                child = TrieNode(self.min_value, self.max_value)
                node._children[slot] = child
            node = child
        node._values.append(value)

    def find_values(self, path: Sequence[int]) -> tuple[T, ...]:
        """
        All values stored at exactly this path, in insertion order.

        Out-of-range values and missing branches give an empty tuple.
        """
        node = self
        for step in path:
            if not self.min_value <= step <= self.max_value:
                return ()
            child = node._children[step - self.min_value]
            if child is None:
                return ()
            node = child
        return tuple(node._values)

    def items(self) -> Iterator[tuple[tuple[int, ...], tuple[T, ...]]]:
        """Depth-first (path, values) pairs for every node holding values."""
        stack: list[tuple[tuple[int, ...], TrieNode[T]]] = [((), self)]
        while stack:
            path, node = stack.pop()
            if node._values:
                yield path, tuple(node._values)
            for slot in range(len(node._children) - 1, -1, -1):
                child = node._children[slot]
                if child is not None:
                    stack.append((path + (slot + self.min_value,), child))

    def __len__(self) -> int:
        return sum(len(values) for _, values in self.items())

    def __repr__(self) -> str:
        return f"TrieNode({self.min_value}..{self.max_value}) with {len(self._values)} value(s)"
