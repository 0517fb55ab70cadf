"""Binary-search exercises: crossover index and integer cube root."""

from __future__ import annotations

from collections.abc import Sequence


def find_crossover_index(x: Sequence[float], y: Sequence[float]) -> int:
    """Return an index j with x[j] > y[j] and x[j + 1] < y[j + 1].

    Requires equal lengths, ``x[0] > y[0]`` and ``x[-1] < y[-1]``.
    """
    if len(x) != len(y):
        raise ValueError("x and y must have the same length")
    if not x:
        raise ValueError("x and y must not be empty")
    if not x[0] > y[0]:
        raise ValueError("x must start above y")
    if not x[-1] < y[-1]:
        raise ValueError("x must end below y")

    left, right = 0, len(x) - 1
    while left + 1 != right:
        mid = left + (right - left) // 2
        if x[mid] < y[mid]:
            right = mid
        elif x[mid] > y[mid]:
            left = mid
        else:
            raise ValueError(f"x and y are equal at index {mid}")
    return left


def integer_cube_root(n: int) -> int:
    """Return the largest integer whose cube does not exceed ``n``."""
    if n <= 0:
        raise ValueError("n must be positive")
    if n in (1, 2):
        return 1

    left, right = 0, n - 1
    while left + 1 != right:
        mid = left + (right - left) // 2
        cube = mid ** 3
        if cube == n:
            return mid
        if cube < n:
            left = mid
        else:
            right = mid
    return left