"""Classic recursive exercises: sequences, stacks, grammars and the towers of Hanoi."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import product

_RUN = re.compile(r"([0-9])([A-Z]*)")


@dataclass(frozen=True)
class Move:
    """A single disk moved from one peg to another."""

    disk: int
    source: int
    target: int


def strings_of_length(alphabet: str, k: int) -> Iterator[str]:
    """Yield every string of length k over alphabet, in lexicographic order of positions."""
    if k < 0:
        raise ValueError("length must not be negative")
    return ("".join(chars) for chars in product(alphabet, repeat=k))


def delete_middle(stack: Sequence[int]) -> list[int]:
    """Return the stack (bottom first) without its middle element.

    For a stack of size n the element at index n // 2 from the bottom is removed.
    """
    items = list(stack)
    if items:
        del items[len(items) // 2]
    return items


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def kth_symbol(n: int, k: int) -> int:
    """Return the k-th symbol (1-based) in row n of the 0 -> 01, 1 -> 10 grammar."""
    if n < 1 or not 1 <= k <= 1 << (n - 1):
        raise ValueError("row must be at least 1 and k within the row")
    if n == 1:
        return 0
    parent = kth_symbol(n - 1, (k + 1) // 2)
    return parent if k % 2 else 1 - parent


def is_palindrome_number(num: int) -> bool:
    """Return True if the decimal digits of num read the same both ways."""
    if num < 0:
        return False
    digits = str(num)
    return digits == digits[::-1]


def ascending(n: int) -> range:
    """Return the numbers 1 to n in increasing order."""
    if n < 0:
        raise ValueError("n must not be negative")
    return range(1, n + 1)


def descending(n: int) -> range:
    """Return the numbers n down to 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    return range(n, 0, -1)


def sort_stack(stack: Sequence[int]) -> list[int]:
    """Return the stack (bottom first) rearranged so the largest value is on top."""
    return sorted(stack)


def expand_runs(text: str) -> str:
    """Expand runs such as '3AB' into 'ABABAB'.

    Each run is one digit followed by upper-case letters; expansion stops at the
    first position that does not start with a digit.
    """
    parts = []
    pos = 0
    while match := _RUN.match(text, pos):
        parts.append(match.group(2) * int(match.group(1)))
        pos = match.end()
    return "".join(parts)


def hanoi_moves(
    n: int, source: int = 1, target: int = 3, spare: int = 2
) -> Iterator[Move]:
    """Yield the moves that carry n disks from source to target."""
    if n < 1:
        raise ValueError("at least one disk is required")

    def solve(disks: int, src: int, dst: int, via: int) -> Iterator[Move]:
        if disks == 1:
            yield Move(1, src, dst)
            return
        yield from solve(disks - 1, src, via, dst)
        yield Move(disks, src, dst)
        yield from solve(disks - 1, via, dst, src)

    return solve(n, source, target, spare)


def hanoi_call_count(n: int) -> int:
    """Return how many recursive steps solving n disks takes; one per move."""
    if n < 1:
        raise ValueError("at least one disk is required")
    return (1 << n) - 1