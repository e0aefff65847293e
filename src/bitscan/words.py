"""
Constants and helpers for addressing bits inside fixed-width storage words.
"""

from __future__ import annotations

#: The number of bits held by a single storage word.
WORD_BITS = 64

#: log2(WORD_BITS), used to turn a position into a word index.
WORD_SHIFT = 6

#: All 64 bits set. Shifted masks are ANDed with this to stay within the word.
WORD_MASK = (1 << WORD_BITS) - 1


def word_count_for(capacity: int) -> int:
    """
    Returns the number of storage words needed to hold ``capacity`` bits.
    """

    return (capacity + WORD_BITS - 1) >> WORD_SHIFT


def bit_mask(position: int) -> int:
    """
    Returns the single-bit mask selecting ``position`` within its word.
    """

    return (1 << (position & (WORD_BITS - 1))) & WORD_MASK
