import pytest

from bitscan import BitArray
from bitscan.benchmark import (
    BenchmarkConfig,
    EnumerationMethod,
    fill_stride,
    run_benchmark,
    sum_by_cursor,
    sum_by_search,
)


def test_summation_self_test():
    """
    Tests that both summation methods agree on the even position scenario.
    """

    bits = BitArray(50_000)
    fill_stride(bits, 2)

    assert sum_by_cursor(bits) == 624_975_000
    assert sum_by_search(bits) == 624_975_000


def test_summation_empty():
    """
    Tests summation of an empty array.
    """

    bits = BitArray(10)
    assert sum_by_cursor(bits) == 0
    assert sum_by_search(bits) == 0


def test_bad_stride():
    """
    Tests that a stride that isn't positive is rejected.
    """

    with pytest.raises(ValueError):
        fill_stride(BitArray(10), 0)


def test_config_from_env(monkeypatch: pytest.MonkeyPatch):
    """
    Tests reading the benchmark config from the environment.
    """

    monkeypatch.setenv("BITSCAN_BENCH_CAPACITY", "1000")
    monkeypatch.setenv("BITSCAN_BENCH_ROUNDS", "3")
    monkeypatch.delenv("BITSCAN_BENCH_STRIDE", raising=False)

    config = BenchmarkConfig.from_env()
    assert config == BenchmarkConfig(capacity=1000, stride=2, rounds=3)


def test_config_validation(monkeypatch: pytest.MonkeyPatch):
    """
    Tests that invalid config values are rejected.
    """

    with pytest.raises(ValueError):
        BenchmarkConfig(rounds=0)

    monkeypatch.setenv("BITSCAN_BENCH_STRIDE", "two")
    with pytest.raises(ValueError):
        BenchmarkConfig.from_env()


@pytest.mark.parametrize("method", list(EnumerationMethod))
def test_run_benchmark(method: EnumerationMethod):
    """
    Tests a short benchmark run with each method.
    """

    config = BenchmarkConfig(capacity=1000, stride=3, rounds=5)
    result = run_benchmark(config, method)

    assert result.method == method
    assert result.population == 334
    assert result.total == sum(range(0, 1000, 3))
    assert result.rounds == 5
    assert result.elapsed >= 0
    assert result.per_round == result.elapsed / 5


@pytest.mark.slow
@pytest.mark.parametrize("method", list(EnumerationMethod))
def test_sparse_and_dense_benchmark(method: EnumerationMethod):
    """
    Tests longer benchmark runs over a sparse and a dense array.
    """

    sparse = run_benchmark(BenchmarkConfig(capacity=50_000, stride=5_000, rounds=1_000), method)
    dense = run_benchmark(BenchmarkConfig(capacity=50_000, stride=2, rounds=20), method)

    assert sparse.total == sum(range(0, 50_000, 5_000))
    assert dense.total == 624_975_000
