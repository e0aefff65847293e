"""
Summation self-test and enumeration benchmark built on the public :class:`.BitArray` API.
"""

from __future__ import annotations

import enum
import os
import time

import attr

from bitscan.bitarray import BitArray
from bitscan.utils import LoggerWithTrace

__all__ = (
    "EnumerationMethod",
    "BenchmarkConfig",
    "BenchmarkResult",
    "fill_stride",
    "sum_by_cursor",
    "sum_by_search",
    "run_benchmark",
)

logger: LoggerWithTrace = LoggerWithTrace.get(__name__)


class EnumerationMethod(enum.StrEnum):
    """
    Enumeration of the ways set positions can be walked.
    """

    #: Use a stateful :class:`.ScanCursor`.
    CURSOR = "cursor"

    #: Use repeated stateless :meth:`.BitArray.next_set_bit` calls.
    SEARCH = "search"


def fill_stride(bits: BitArray, stride: int) -> None:
    """
    Sets every ``stride``-th position of ``bits``, starting from zero.
    """

    if stride <= 0:
        raise ValueError(f"stride must be positive, got {stride}")

    for pos in range(0, bits.capacity, stride):
        bits.set(pos)


def sum_by_cursor(bits: BitArray) -> int:
    """
    Sums every set position using a :class:`.ScanCursor`.
    """

    total = 0
    cursor = bits.scan()
    while (pos := cursor.next()) is not None:
        total += pos

    return total


def sum_by_search(bits: BitArray) -> int:
    """
    Sums every set position using repeated :meth:`.BitArray.next_set_bit` calls.
    """

    total = 0
    pos = bits.next_set_bit(0)
    while pos is not None:
        total += pos
        pos = bits.next_set_bit(pos + 1)

    return total


_SUMMERS = {
    EnumerationMethod.CURSOR: sum_by_cursor,
    EnumerationMethod.SEARCH: sum_by_search,
}


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default

    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _positive(instance: object, attribute: attr.Attribute[int], value: int) -> None:
    if value <= 0:
        raise ValueError(f"{attribute.name} must be positive, got {value}")


@attr.s(frozen=True, slots=True, kw_only=True)
class BenchmarkConfig:
    """
    Settings for a single benchmark run.
    """

    #: The capacity of the bit array to enumerate.
    capacity: int = attr.ib(default=50000, validator=_positive)

    #: Every ``stride``-th position is set. A stride of 2 sets every even position.
    stride: int = attr.ib(default=2, validator=_positive)

    #: How many full enumerations to time.
    rounds: int = attr.ib(default=1000, validator=_positive)

    @classmethod
    def from_env(cls) -> BenchmarkConfig:
        """
        Creates a new config from the ``BITSCAN_BENCH_*`` environment variables, falling back to
        the defaults for any that are unset.
        """

        return BenchmarkConfig(
            capacity=_env_int("BITSCAN_BENCH_CAPACITY", 50000),
            stride=_env_int("BITSCAN_BENCH_STRIDE", 2),
            rounds=_env_int("BITSCAN_BENCH_ROUNDS", 1000),
        )


@attr.s(frozen=True, slots=True, kw_only=True)
class BenchmarkResult:
    """
    The outcome of a benchmark run.
    """

    #: The enumeration method that was timed.
    method: EnumerationMethod = attr.ib()

    #: The capacity of the enumerated bit array.
    capacity: int = attr.ib()

    #: The number of set bits.
    population: int = attr.ib()

    #: The number of full enumerations performed.
    rounds: int = attr.ib()

    #: The sum of all set positions, as seen by a single enumeration.
    total: int = attr.ib()

    #: The wall-clock time taken by all rounds, in seconds.
    elapsed: float = attr.ib()

    @property
    def per_round(self) -> float:
        """
        The average time of a single enumeration, in seconds.
        """

        return self.elapsed / self.rounds


def run_benchmark(
    config: BenchmarkConfig,
    method: EnumerationMethod = EnumerationMethod.CURSOR,
) -> BenchmarkResult:
    """
    Enumerates a strided bit array repeatedly and times it.

    Every round must produce the same total; a mismatch means the enumeration is broken and
    raises :class:`AssertionError`.
    """

    summer = _SUMMERS[EnumerationMethod(method)]

    with BitArray(config.capacity) as bits:
        fill_stride(bits, config.stride)
        population = bits.count()
        logger.debug(
            f"Benchmarking {method} enumeration of {population}/{config.capacity} bits "
            f"over {config.rounds} rounds"
        )

        expected = summer(bits)
        start = time.perf_counter()
        for _ in range(config.rounds):
            total = summer(bits)
            assert total == expected, f"enumeration changed between rounds ({total}!={expected})"

        elapsed = time.perf_counter() - start

    result = BenchmarkResult(
        method=EnumerationMethod(method),
        capacity=config.capacity,
        population=population,
        rounds=config.rounds,
        total=expected,
        elapsed=elapsed,
    )
    logger.info(
        f"{result.method} enumeration: {result.rounds} rounds in {result.elapsed:.3f}s "
        f"({result.per_round * 1e6:.1f}us/round)"
    )
    return result
