"""Bit manipulation helpers and a brute-force subset sum."""

from __future__ import annotations

from collections.abc import Sequence


def _mask(position: int) -> int:
    if position < 1:
        raise ValueError("bit positions start at 1")
    return 1 << (position - 1)


def get_bit(num: int, position: int) -> int:
    """Return the bit at a 1-based position (1 is the least significant)."""
    return (num & _mask(position)) >> (position - 1)


def set_bit(num: int, position: int) -> int:
    """Return num with the bit at a 1-based position set to 1."""
    return num | _mask(position)


def clear_bit(num: int, position: int) -> int:
    """Return num with the bit at a 1-based position set to 0."""
    return num & ~_mask(position)


def toggle_bit(num: int, position: int) -> int:
    """Return num with the bit at a 1-based position inverted."""
    return num ^ _mask(position)


def subset_sum_exists(values: Sequence[int], target: int) -> bool:
    """Return True if some subset of values (the empty one included) sums to target.

    Every subset is enumerated through a bit mask, so this is exponential in len(values).
    """
    items = list(values)
    return any(
        sum(value for bit, value in enumerate(items) if mask >> bit & 1) == target
        for mask in range(1 << len(items))
    )


def flip(value: int) -> int:
    """Toggle the lowest bit of value."""
    return value ^ 1


def is_odd(value: int) -> bool:
    """Return True if the lowest bit of value is set."""
    return value & 1 == 1


def to_lower(ch: str) -> str:
    """Lower-case an ASCII letter by setting its 0x20 bit."""
    if len(ch) != 1:
        raise ValueError("expected a single character")
    return chr(ord(ch) | ord(" "))