"""Largest group of guests whose drink preferences fit one shared mix."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

MAX_TOTAL = 10000


@dataclass(frozen=True)
class PersonPreference:
    """Minimum amounts of each of the three drinks a person will accept."""

    a: int
    b: int
    c: int

    def __post_init__(self) -> None:
        for value in (self.a, self.b, self.c):
            if not 0 <= value <= MAX_TOTAL:
                raise ValueError(
                    f"each preference must lie between 0 and {MAX_TOTAL}, got {value}"
                )
        if self.a + self.b + self.c > MAX_TOTAL:
            raise ValueError(
                f"preferences must add up to at most {MAX_TOTAL}, "
                f"got {self.a + self.b + self.c}"
            )


def max_people_party(persons: Iterable[PersonPreference]) -> int:
    """Return how many people can be satisfied by a single mix.

    People are considered in order; each one is either added to the group,
    raising the required amounts to cover them, or left out.  When adding the
    next person would push the required total past the limit, the search on
    that branch stops there.
    """
    people = list(persons)

    def best(count: int, need: tuple[int, int, int], index: int) -> int:
        if index == len(people):
            return count
        person = people[index]
        joined = (
            max(need[0], person.a),
            max(need[1], person.b),
            max(need[2], person.c),
        )
        if sum(joined) > MAX_TOTAL:
            return count
        return max(
            best(count + 1, joined, index + 1),
            best(count, need, index + 1),
        )

    return best(0, (0, 0, 0), 0)


def _read_person(prompt: str) -> PersonPreference:
    fields = input(prompt).split()
    if len(fields) < 3:
        raise ValueError("a person needs three preferences")
    a, b, c = (int(field) for field in fields[:3])
    return PersonPreference(a, b, c)


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from standard input and print each answer."""
    tests = int(input("Number of tests: "))
    if tests <= 0:
        raise ValueError("the number of tests must be positive")

    for case in range(1, tests + 1):
        count = int(input("Number of persons: "))
        if count <= 0:
            raise ValueError("the number of persons must be positive")
        persons = [_read_person("Person data: ") for _ in range(count)]
        print(f"Caso #{case}: {max_people_party(persons)}")
    sys.stdout.flush()
    return 0