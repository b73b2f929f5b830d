#!/usr/bin/env python3
"""
Mixed-Radix Partitioning
========================
Turns an entropy buffer into a sequence of digit indices.

The buffer is read as one little-endian integer (byte 0 is least
significant). When the top bit of the last byte is set the value is
taken as two's complement and negated, so the magnitude fed to the
division loop is never negative. Python ints are arbitrary precision,
so buffers of any width are handled exactly.

Digits come out least-significant first. The first digit may use its
own radix; every later digit uses the main radix.
"""

from typing import List, Optional


def magnitude_of(buffer: bytes) -> int:
    """Absolute value of the buffer read as a signed little-endian integer."""
    return abs(int.from_bytes(bytes(buffer), 'little', signed=True))


def divide(value: int, digit_count: int, radix: int,
           first_radix: Optional[int] = None) -> List[int]:
    """
    Decompose value into digit_count mixed-radix digits.

    Args:
        value: Non-negative integer to decompose
        digit_count: Total number of digits, including the first
        radix: Base for every digit after the first
        first_radix: Base for digit 0 (defaults to radix)

    Returns:
        Remainders in least-significant-first order
    """
    if value < 0:
        raise ValueError(f"Cannot partition negative value {value}")
    if radix < 1 or (first_radix is not None and first_radix < 1):
        raise ValueError(f"Invalid radix {radix}/{first_radix}; must be >= 1")

    digits = []
    if first_radix is not None and digit_count > 0:
        value, digit = divmod(value, first_radix)
        digits.append(digit)
    while len(digits) < digit_count:
        value, digit = divmod(value, radix)
        digits.append(digit)
    return digits


def partition(buffer: bytes, digit_count: int, radix: int,
              first_radix: Optional[int] = None) -> List[int]:
    """Partition an entropy buffer into digit indices."""
    return divide(magnitude_of(buffer), digit_count, radix, first_radix)
