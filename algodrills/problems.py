"""Small contest problems built on ordered maps and priority queues."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ElectionResult:
    """The country and the chef that received the most votes."""

    country: str
    chef: str


@dataclass(frozen=True)
class Evacuation:
    """The values used, in order, and whether they covered the requirement."""

    removed: list[int] = field(default_factory=list)
    succeeded: bool = False

    @property
    def count(self) -> int:
        """Number of values taken from the queue."""
        return len(self.removed)


def distinct_sum_pairs(
    first: Sequence[int], second: Sequence[int]
) -> list[tuple[int, int]]:
    """Return index pairs (i, j) giving distinct sums first[i] + second[j].

    Pairs are scanned row by row and the first pair for each sum is kept; the
    scan stops once len(first) + len(second) - 1 sums are known. The result is
    ordered by increasing sum.
    """
    wanted = len(first) + len(second) - 1
    by_sum: dict[int, tuple[int, int]] = {}
    for i, a in enumerate(first):
        for j, b in enumerate(second):
            by_sum.setdefault(a + b, (i, j))
            if len(by_sum) == wanted:
                return [by_sum[total] for total in sorted(by_sum)]
    return [by_sum[total] for total in sorted(by_sum)]


def open_edge_count(cells: Iterable[tuple[int, int]]) -> int:
    """Count the sides of the given grid cells that do not touch another given cell."""
    occupied = set(cells)
    return sum(
        (row + dr, col + dc) not in occupied
        for row, col in occupied
        for dr, dc in ((1, 0), (0, 1), (-1, 0), (0, -1))
    )


def election_winners(
    chefs: Iterable[tuple[str, str]], votes: Iterable[str]
) -> ElectionResult:
    """Return the country and the chef with the most votes.

    chefs holds (name, country) pairs; a repeated name keeps its first country.
    A vote for an unknown name counts for a chef with an empty country. Ties
    go to the name that sorts first.
    """
    chef_country: dict[str, str] = {}
    chef_votes: dict[str, int] = {}
    country_votes: dict[str, int] = {}
    for name, country in chefs:
        country_votes.setdefault(country, 0)
        if name not in chef_country:
            chef_country[name] = country
            chef_votes[name] = 0
    for vote in votes:
        if vote not in chef_country:
            chef_country[vote] = ""
            chef_votes[vote] = 0
        chef_votes[vote] += 1
        country = chef_country[vote]
        country_votes[country] = country_votes.get(country, 0) + 1
    if not chef_votes:
        raise ValueError("at least one chef is required")

    def best(tally: dict[str, int]) -> str:
        return min(sorted(tally), key=lambda key: -tally[key])

    return ElectionResult(country=best(country_votes), chef=best(chef_votes))


def _halve(value: int) -> int:
    return -(-value // 2) if value < 0 else value // 2


def evacuation(values: Iterable[int], required: int) -> Evacuation:
    """Take the largest value repeatedly until the total reaches required.

    Each taken value is put back halved (rounding toward zero). Taking stops
    when the largest value is zero or the queue is empty.
    """
    heap = [-value for value in values]
    heapq.heapify(heap)
    removed: list[int] = []
    remaining = required
    while heap and heap[0] != 0:
        largest = -heapq.heappop(heap)
        removed.append(largest)
        remaining -= largest
        heapq.heappush(heap, -_halve(largest))
        if remaining <= 0:
            return Evacuation(removed=removed, succeeded=True)
    return Evacuation(removed=removed, succeeded=False)