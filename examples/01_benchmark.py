import logging

from bitscan.benchmark import BenchmarkConfig, EnumerationMethod, run_benchmark


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = BenchmarkConfig.from_env()
    for method in EnumerationMethod:
        result = run_benchmark(config, method)
        print(f"{method}: sum={result.total} elapsed={result.elapsed:.3f}s")


if __name__ == "__main__":
    main()
