"""Benchmarks for the gray-range scan and rescaling.

Run explicitly: pytest tests/benchmarks/bench_gray_range.py -s
"""

import pytest

from .conftest import benchmark_test


class TestScanBenchmarks:
    """Serial vs sharded gray-range scan."""

    @benchmark_test
    def test_scan_serial_4k(self, benchmark_4k_image, benchmark):
        from grayprep.core.gray_range import scan_gray_range

        result = benchmark.run(lambda: scan_gray_range(benchmark_4k_image), "scan_serial_4k")
        print(f"\n{result}")

    @pytest.mark.parametrize("workers", [2, 4, 8])
    @benchmark_test
    def test_scan_sharded_4k(self, benchmark_4k_image, benchmark, workers):
        from grayprep.core.gray_range import scan_gray_range

        serial = scan_gray_range(benchmark_4k_image)
        assert scan_gray_range(benchmark_4k_image, workers=workers) == serial

        result = benchmark.run(
            lambda: scan_gray_range(benchmark_4k_image, workers=workers),
            f"scan_{workers}_workers_4k",
        )
        print(f"\n{result}")


class TestRescaleBenchmarks:
    """Up/down scaling throughput."""

    @benchmark_test
    def test_downscale_4k(self, benchmark_4k_image, benchmark):
        from grayprep.core.rescaler import downscale_16_to_8

        result = benchmark.run(lambda: downscale_16_to_8(benchmark_4k_image), "downscale_4k")
        print(f"\n{result}")

    @benchmark_test
    def test_upscale_4k(self, benchmark_4k_image, benchmark):
        from grayprep.core.rescaler import upscale_8_to_12, downscale_16_to_8

        img8 = downscale_16_to_8(benchmark_4k_image)
        result = benchmark.run(lambda: upscale_8_to_12(img8), "upscale_4k")
        print(f"\n{result}")
