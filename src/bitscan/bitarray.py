from __future__ import annotations

from types import TracebackType
from typing import Self

from bitscan.cursor import ScanCursor
from bitscan.exc import AllocationFailureError, BitArrayDestroyedError, IndexOutOfRangeError
from bitscan.utils import LoggerWithTrace
from bitscan.words import WORD_BITS, WORD_MASK, WORD_SHIFT, bit_mask, word_count_for

__all__ = ("BitArray", "next_set_bit")

logger: LoggerWithTrace = LoggerWithTrace.get(__name__)


class BitArray:
    """
    A fixed-capacity, compact array of bits stored in 64-bit words.

    Set positions can be enumerated in ascending order either with a :class:`.ScanCursor`
    (see :meth:`scan`) or by repeatedly calling :meth:`next_set_bit`. Both skip over entire
    empty words rather than testing every bit.
    """

    __slots__ = ("_capacity", "_words", "_destroyed")

    def __init__(self, capacity: int) -> None:
        """
        :param capacity: The number of addressable bit positions. Must be positive.
        """

        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise TypeError(f"capacity must be an int, not {type(capacity).__name__}")

        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")

        self._capacity = capacity
        self._destroyed = False

        word_count = word_count_for(capacity)
        try:
            self._words: list[int] = [0] * word_count
        except (MemoryError, OverflowError) as e:
            logger.critical(f"Failed to allocate {word_count} words for {capacity} bits")
            raise AllocationFailureError(capacity) from e

        logger.trace(f"Created bit array with {capacity=} ({word_count} words)")

    @classmethod
    def create(cls, capacity: int) -> Self:
        """
        Creates a new bit array with every bit clear.
        """

        return cls(capacity)

    @property
    def capacity(self) -> int:
        """
        The number of addressable bit positions.
        """

        return self._capacity

    @property
    def word_count(self) -> int:
        """
        The number of 64-bit storage words backing this array.
        """

        return len(self._live_words())

    @property
    def words(self) -> tuple[int, ...]:
        """
        A snapshot of the storage words, lowest positions first.
        """

        return tuple(self._live_words())

    @property
    def destroyed(self) -> bool:
        """
        If this array has been destroyed and can no longer be used.
        """

        return self._destroyed

    @property
    def storage(self) -> list[int]:
        """
        The live list of storage words. This is for use by cursors inside this package and must
        not be modified by callers.

        :raise BitArrayDestroyedError: If this array has been destroyed.
        """

        return self._live_words()

    def _live_words(self) -> list[int]:
        if self._destroyed:
            raise BitArrayDestroyedError("bit array has been destroyed")

        return self._words

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool):
            raise TypeError("bit positions must be ints, not bool")

        if index < 0 or index >= self._capacity:
            raise IndexOutOfRangeError(index, self._capacity)

    def reset(self) -> None:
        """
        Clears every bit.
        """

        words = self._live_words()
        words[:] = [0] * len(words)
        logger.trace(f"Reset bit array with capacity {self._capacity}")

    def set(self, index: int) -> None:
        """
        Sets the bit at ``index``.

        :raise IndexOutOfRangeError: If ``index`` is not in ``[0, capacity)``.
        """

        words = self._live_words()
        self._check_index(index)
        words[index >> WORD_SHIFT] |= bit_mask(index)

    def clear(self, index: int) -> None:
        """
        Clears the bit at ``index``.

        :raise IndexOutOfRangeError: If ``index`` is not in ``[0, capacity)``.
        """

        words = self._live_words()
        self._check_index(index)
        words[index >> WORD_SHIFT] &= ~bit_mask(index) & WORD_MASK

    def test(self, index: int) -> bool:
        """
        Checks if the bit at ``index`` is set.

        :raise IndexOutOfRangeError: If ``index`` is not in ``[0, capacity)``.
        """

        words = self._live_words()
        self._check_index(index)
        return (words[index >> WORD_SHIFT] & bit_mask(index)) != 0

    def count(self) -> int:
        """
        Returns the number of set bits.
        """

        return sum(word.bit_count() for word in self._live_words())

    def next_set_bit(self, start: int) -> int | None:
        """
        Finds the smallest set position that is greater than or equal to ``start``.

        This keeps no state between calls, so it can be used to drive an enumeration loop
        externally:

        .. code-block:: python

            pos = bits.next_set_bit(0)
            while pos is not None:
                ...
                pos = bits.next_set_bit(pos + 1)

        :param start: The position to start searching from. Negative values search from 0.
        :return: The next set position, or None if there are no more.
        """

        words = self._live_words()
        capacity = self._capacity
        if start >= capacity:
            return None

        position = max(start, 0)
        word_idx = position >> WORD_SHIFT
        mask = bit_mask(position)

        while True:
            if mask & words[word_idx]:
                return position

            mask = (mask << 1) & WORD_MASK
            position += 1
            if position >= capacity:
                return None

            # the bit fell off the top of the word, so start on the next one
            if not mask:
                mask = 1
                word_idx += 1

                while not words[word_idx]:
                    word_idx += 1
                    position += WORD_BITS
                    if position >= capacity:
                        return None

    def scan(self) -> ScanCursor:
        """
        Creates a new :class:`.ScanCursor` over the set positions of this array.
        """

        self._live_words()
        return ScanCursor(self)

    def dump(self) -> str:
        """
        Returns the set positions as a space-separated string, for debugging.
        """

        return " ".join(str(pos) for pos in self.scan())

    def destroy(self) -> None:
        """
        Releases the storage of this array. Any further use will raise
        :class:`.BitArrayDestroyedError`.
        """

        if self._destroyed:
            return

        self._words = []
        self._destroyed = True
        logger.trace(f"Destroyed bit array with capacity {self._capacity}")

    def __enter__(self) -> Self:
        self._live_words()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.destroy()

    def __len__(self) -> int:
        return self._capacity

    def __iter__(self) -> ScanCursor:
        return self.scan()

    def __getitem__(self, item: int) -> bool:
        return self.test(item)

    def __setitem__(self, key: int, value: bool) -> None:
        if value:
            self.set(key)
        else:
            self.clear(key)

    def __repr__(self) -> str:
        if self._destroyed:
            return f"<BitArray capacity={self._capacity} destroyed>"

        return f"<BitArray capacity={self._capacity} count={self.count()}>"


def next_set_bit(bits: BitArray, start: int) -> int | None:
    """
    Finds the smallest set position in ``bits`` at or after ``start``, or None.
    """

    return bits.next_set_bit(start)
