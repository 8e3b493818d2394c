"""Benchmark utilities and fixtures for performance testing."""

import pytest
import time
import gc
from dataclasses import dataclass, field
from typing import Callable, Optional, List
import numpy as np
from functools import wraps


@dataclass
class BenchmarkResult:
    """Results from a benchmark run."""
    name: str
    time_ms: float
    iterations: int
    time_std_ms: float = 0.0
    all_times_ms: List[float] = field(default_factory=list)

    def __str__(self):
        return f"{self.name}: time={self.time_ms:.2f}ms (std={self.time_std_ms:.2f}ms)"


class BenchmarkRunner:
    """Runner for timing benchmarks."""

    def __init__(self, warmup: int = 2, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def run(self, func: Callable, name: Optional[str] = None) -> BenchmarkResult:
        """Time a zero-argument callable, returning the median over iterations."""
        name = name or getattr(func, '__name__', 'benchmark')

        gc.collect()
        for _ in range(self.warmup):
            func()

        times = []
        for _ in range(self.iterations):
            gc.collect()
            start = time.perf_counter()
            func()
            times.append((time.perf_counter() - start) * 1000)

        return BenchmarkResult(
            name=name,
            time_ms=float(np.median(times)),
            time_std_ms=float(np.std(times)),
            iterations=self.iterations,
            all_times_ms=times,
        )


@pytest.fixture
def benchmark():
    """Fixture providing a BenchmarkRunner instance."""
    return BenchmarkRunner(warmup=2, iterations=10)


@pytest.fixture
def benchmark_4k_image():
    """4096x4096 16-bit image for benchmarking."""
    np.random.seed(42)
    return np.random.randint(0, 65535, (4096, 4096), dtype=np.uint16)


def benchmark_test(func):
    """Decorator to mark a function as a benchmark test."""
    @wraps(func)
    @pytest.mark.benchmark
    @pytest.mark.slow
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)
    return wrapper
