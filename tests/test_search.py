import pytest

from algoclase.search import find_crossover_index, integer_cube_root


def test_crossover_j1():
    assert find_crossover_index(
        [0, 1, 2, 3, 4, 5, 6, 7], [-2, 0, 4, 5, 6, 7, 8, 9]
    ) == 1


def test_crossover_j2():
    j = find_crossover_index(
        [0, 1, 2, 3, 4, 5, 6, 7], [-2, 0, 4, 4.2, 4.3, 4.5, 8, 9]
    )
    assert j in (1, 5)


def test_crossover_j3():
    assert find_crossover_index([0, 1], [-10, 10]) == 0


def test_crossover_j4():
    assert find_crossover_index([0, 1, 2, 3], [-10, -9, -8, 5]) == 2


@pytest.mark.parametrize(
    "x, y",
    [
        ([0, 1], [-1]),
        ([], []),
        ([0, 1], [1, 2]),
        ([1, 2], [0, 1]),
    ],
)
def test_crossover_invalid_input(x, y):
    with pytest.raises(ValueError):
        find_crossover_index(x, y)


@pytest.mark.parametrize(
    "n, expected",
    [(1, 1), (2, 1), (4, 1), (7, 1), (8, 2), (20, 2), (26, 2)],
)
def test_cube_root_small(n, expected):
    assert integer_cube_root(n) == expected


@pytest.mark.parametrize(
    "low, high, expected",
    [(27, 64, 3), (64, 125, 4), (125, 216, 5), (216, 343, 6), (343, 512, 7)],
)
def test_cube_root_ranges(low, high, expected):
    for n in range(low, high):
        assert integer_cube_root(n) == expected


def test_cube_root_bounds_invariant():
    for n in range(1, 3000):
        r = integer_cube_root(n)
        assert r ** 3 <= n < (r + 1) ** 3


@pytest.mark.parametrize("n", [0, -1, -27])
def test_cube_root_rejects_non_positive(n):
    with pytest.raises(ValueError):
        integer_cube_root(n)