"""Running-time estimate for a quadratic sorting algorithm."""

from __future__ import annotations

import time
from collections.abc import Sequence

DATA_SIZES = (100, 1000, 5000, 10000, 50000)
ASSIGNATION_TIME = 0.00001
COMPARATION_TIME = 0.000001


def order_time_estimation(
    data_size: float, assignation_time: float, comparation_time: float
) -> float:
    """Estimate the time to sort ``data_size`` items with a quadratic sort."""
    pairs = data_size * (data_size - 1) / 2
    return assignation_time * data_size + pairs * (assignation_time + comparation_time)


def _measure_microseconds(action) -> float:
    start = time.perf_counter_ns()
    action()
    return float((time.perf_counter_ns() - start) // 1000)


def main(argv: Sequence[str] | None = None) -> int:
    """Print a measured assignment time and estimates for the sample sizes."""
    assignation = _measure_microseconds(lambda: None)
    print(f"{assignation:g}")
    for size in DATA_SIZES:
        estimate = order_time_estimation(size, ASSIGNATION_TIME, COMPARATION_TIME)
        print(f"{estimate:g}")
    return 0