import os
from collections.abc import Iterable

from bitscan import BitArray

# Capacities around word boundaries, plus whatever extra one is requested
BOUNDARY_CAPACITIES = [1, 2, 63, 64, 65, 127, 128, 129, 191, 192, 1000]
if extra := os.environ.get("BITSCAN_TEST_CAPACITY"):
    BOUNDARY_CAPACITIES.append(int(extra))


def _make_bits(capacity: int, positions: Iterable[int] = ()) -> BitArray:
    bits = BitArray(capacity)
    for pos in positions:
        bits.set(pos)

    return bits


def _search_positions(bits: BitArray) -> list[int]:
    found = []
    pos = bits.next_set_bit(0)
    while pos is not None:
        found.append(pos)
        pos = bits.next_set_bit(pos + 1)

    return found
