from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Self

from bitscan.words import WORD_BITS, WORD_MASK

if TYPE_CHECKING:
    from bitscan.bitarray import BitArray

__all__ = ("CursorState", "ScanCursor")


class CursorState(enum.IntEnum):
    """
    Enumeration of the states a :class:`.ScanCursor` moves through.
    """

    #: No position has been reported yet.
    FRESH = 0

    #: At least one step has been taken and more positions may follow.
    ADVANCING = 1

    #: Every position has been visited. All further calls return None.
    EXHAUSTED = 2


class ScanCursor:
    """
    A forward-only, single-use enumerator over the set positions of a :class:`.BitArray`.

    The cursor keeps its current word, mask and position between calls so each step continues
    where the last one stopped. Words that are entirely clear are skipped in one step.

    The bit array must not be modified while a cursor over it is in use. To scan again, create a
    new cursor.
    """

    __slots__ = ("_bits", "_capacity", "_word_idx", "_mask", "_position")

    def __init__(self, bits: BitArray) -> None:
        self._bits = bits
        self._capacity: int = bits.capacity

        # one before the first word; the zero mask makes the first step start word 0
        self._word_idx = -1
        self._mask = 0
        self._position = -1

    @property
    def position(self) -> int:
        """
        The last position reported. This is -1 before the first call, and the capacity of the
        bit array once the cursor is exhausted.
        """

        return self._position

    @property
    def state(self) -> CursorState:
        """
        The current state of this cursor.
        """

        if self._position < 0:
            return CursorState.FRESH

        if self._position >= self._capacity:
            return CursorState.EXHAUSTED

        return CursorState.ADVANCING

    def next(self) -> int | None:
        """
        Advances to the next set position.

        :return: The position, or None if there are no more set bits.
        :raise BitArrayDestroyedError: If the bit array has been destroyed.
        """

        words = self._bits.storage
        capacity = self._capacity
        position = self._position
        if position >= capacity:
            return None

        word_idx = self._word_idx
        mask = self._mask

        while True:
            mask = (mask << 1) & WORD_MASK
            position += 1
            if position >= capacity:
                break

            # the bit fell off the top of the word, so start on the next one
            if not mask:
                mask = 1
                word_idx += 1

                while not words[word_idx]:
                    word_idx += 1
                    position += WORD_BITS
                    if position >= capacity:
                        break

                if position >= capacity:
                    break

            if mask & words[word_idx]:
                self._word_idx = word_idx
                self._mask = mask
                self._position = position
                return position

        self._word_idx = len(words)
        self._mask = 0
        self._position = capacity
        return None

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> int:
        position = self.next()
        if position is None:
            raise StopIteration

        return position

    def __repr__(self) -> str:
        return f"<ScanCursor position={self._position} state={self.state.name}>"
