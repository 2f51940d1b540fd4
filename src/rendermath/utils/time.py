"""
Timing utilities for rendermath.

Used by the benchmark command and script to measure math operations.
"""

import statistics
import time
from typing import Callable


class Timer:
    """
    Context manager for timing code blocks.

    Example:
        with Timer() as t:
            do_work()
        print(f"Elapsed: {t.elapsed_ms:.2f} ms")
    """

    def __init__(self) -> None:
        self._start: float = 0.0
        self._end: float = 0.0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args: object) -> None:
        self._end = time.perf_counter()

    @property
    def elapsed_s(self) -> float:
        """Elapsed time in seconds."""
        if self._end == 0.0:
            return time.perf_counter() - self._start
        return self._end - self._start

    @property
    def elapsed_ms(self) -> float:
        """Elapsed time in milliseconds."""
        return self.elapsed_s * 1000.0

    @property
    def elapsed_us(self) -> float:
        """Elapsed time in microseconds."""
        return self.elapsed_s * 1_000_000.0


def time_operation(
    operation: Callable[[], object],
    iterations: int = 1000,
    warmup: int = 10,
) -> dict[str, float]:
    """
    Time repeated calls of a zero-argument callable.

    Args:
        operation: Callable to time.
        iterations: Number of measured calls.
        warmup: Number of unmeasured calls made first.

    Returns:
        Dictionary with mean_us, median_us, min_us, max_us and p95_us.

    Raises:
        ValueError: If iterations is not positive.
    """
    if iterations <= 0:
        raise ValueError("iterations must be positive")

    for _ in range(warmup):
        operation()

    samples: list[float] = []
    for _ in range(iterations):
        with Timer() as t:
            operation()
        samples.append(t.elapsed_us)

    ordered = sorted(samples)
    return {
        "mean_us": statistics.mean(samples),
        "median_us": statistics.median(samples),
        "min_us": ordered[0],
        "max_us": ordered[-1],
        "p95_us": ordered[min(len(ordered) - 1, int(len(ordered) * 0.95))],
    }
