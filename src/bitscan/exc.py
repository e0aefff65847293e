from __future__ import annotations

from collections.abc import Callable
from typing import Self

from typing_extensions import override

__all__ = (
    "BitArrayError",
    "IndexOutOfRangeError",
    "AllocationFailureError",
    "BitArrayDestroyedError",
)


class BitArrayError(Exception):
    """
    Base class exception for all bit array errors.
    """

    __slots__ = ()


class IndexOutOfRangeError(BitArrayError, IndexError):
    """
    Thrown when a bit position outside of ``[0, capacity)`` is accessed.
    """

    __slots__ = ("index", "capacity")

    def __init__(self, index: int, capacity: int):
        #: The offending bit position.
        self.index: int = index
        #: The capacity of the bit array, i.e. the exclusive upper bound of valid positions.
        self.capacity: int = capacity

        super().__init__(index, capacity)

    @override
    def __str__(self) -> str:
        return f"index {self.index} out of range [0, {self.capacity})"

    __repr__: Callable[[Self], str] = __str__


class AllocationFailureError(BitArrayError, MemoryError):
    """
    Thrown when the word storage for a bit array cannot be allocated.
    """

    __slots__ = ("capacity",)

    def __init__(self, capacity: int):
        #: The capacity that was requested.
        self.capacity: int = capacity

        super().__init__(f"could not allocate storage for {capacity} bits")


class BitArrayDestroyedError(BitArrayError, RuntimeError):
    """
    Thrown when a bit array is used after :meth:`.BitArray.destroy` has been called.
    """

    __slots__ = ()
