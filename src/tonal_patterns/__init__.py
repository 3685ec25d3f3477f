"""
tonal-patterns - pitches, scales and chords as half-step patterns.

Subpackages:
- core: pitch, pattern, scale, chord and trie primitives
- models: pydantic catalog definitions and recognition results
- dictionary: trie-backed scale, mode and chord dictionaries
- recognition: chord naming from pitch classes or ordered pitches
"""

__version__ = "0.1.0"
