#!/usr/bin/env python3
"""
Character Ranges
================
Inclusive code-point intervals and the positional index space formed by
an ordered sequence of them.

Index 0 is the first code point of the first range and indices continue
across ranges in declaration order. Ranges are never sorted or merged:
overlapping ranges count shared characters twice, and lookups by code
point return the position within the FIRST range that contains it.

Usage:
    from pwgen.generators.ranges import CharRange, size_of, char_at

    digits = [CharRange('0', '9')]
    size_of(digits)        # 10
    char_at(digits, 3)     # '3'
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Union


Bound = Union[int, str]


def _code_point(value: Bound, which: str) -> int:
    """Convert a range bound given as an int or one-char string."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"Range {which} {value!r} must be exactly one char long")
        return ord(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Range {which} {value!r} must be an int or a one-char string")
    if value < 0 or value > 0x10FFFF:
        raise ValueError(f"Range {which} {value} is not a valid code point")
    return value


@dataclass(frozen=True, init=False)
class CharRange:
    """A range of characters between two code points (both inclusive)."""
    min: int
    max: int

    def __init__(self, min: Bound, max: Optional[Bound] = None):
        lo = _code_point(min, 'min')
        hi = lo if max is None else _code_point(max, 'max')
        if lo > hi:
            raise ValueError(f"Range min {lo:#x} is greater than max {hi:#x}")
        object.__setattr__(self, 'min', lo)
        object.__setattr__(self, 'max', hi)

    @property
    def size(self) -> int:
        """Number of characters in this range."""
        return self.max - self.min + 1

    @property
    def min_char(self) -> str:
        return chr(self.min)

    @property
    def max_char(self) -> str:
        return chr(self.max)

    def __contains__(self, code_point: int) -> bool:
        return self.min <= code_point <= self.max

    def __repr__(self) -> str:
        if self.min == self.max:
            return f"CharRange({self.min_char!r})"
        return f"CharRange({self.min_char!r}, {self.max_char!r})"


RangeSet = Sequence[CharRange]


def size_of(ranges: RangeSet) -> int:
    """Sum of the sizes of the ranges."""
    return sum(r.size for r in ranges)


def code_point_at(ranges: RangeSet, index: int) -> Optional[int]:
    """
    Return the code point at a position in the ranges' index space.

    Raises:
        IndexError: If index is negative

    Returns:
        The code point, or None if index is past the end of the ranges
    """
    if index < 0:
        raise IndexError(f"Invalid index: {index}")
    for r in ranges:
        if index < r.size:
            return r.min + index
        index -= r.size
    return None


def char_at(ranges: RangeSet, index: int) -> str:
    """Character form of code_point_at(); '' past the end of the ranges."""
    cp = code_point_at(ranges, index)
    return '' if cp is None else chr(cp)


def index_of(ranges: RangeSet, code_point: Union[int, str]) -> int:
    """
    Position of a code point in the ranges' index space.

    Args:
        ranges: Ranges to search in declaration order
        code_point: Code point, or a one-char string

    Returns:
        Index of the code point within the first range containing it,
        or -1 if no range contains it
    """
    if isinstance(code_point, str):
        code_point = ord(code_point)
    preceding = 0
    for r in ranges:
        if code_point in r:
            return preceding + (code_point - r.min)
        preceding += r.size
    return -1


def contains(ranges: RangeSet, char: str) -> bool:
    return index_of(ranges, char) >= 0
