#!/usr/bin/env python3
"""
Password Generator
==================
Encodes entropy buffers as passwords over a set of allowed characters
and repairs them to meet complexity constraints.

Pipeline:
    entropy bytes -> mixed-radix digits -> characters -> repair

Repair never consumes new entropy. Its only source of variation is a
31-bit rotate/xor hash of the candidate itself, so the same buffer always
yields the same password.

Usage:
    from pwgen.generators import Generator, CharRange, ComplexityConstraint

    gen = Generator(
        'Alphanumeric',
        [CharRange('0', '9'), CharRange('A', 'Z'), CharRange('a', 'z')],
        [ComplexityConstraint('Lu'), ComplexityConstraint('Ll'), ComplexityConstraint('No')],
    )
    password = gen.generate(buffer)
"""

import logging
import math
from typing import Dict, Iterable, List, Optional, Sequence

from .categories import simplified_category_of, substitute_alphabet
from .constraint import ComplexityConstraint
from .partition import partition
from .ranges import CharRange, char_at, contains, size_of

logger = logging.getLogger(__name__)


# =============================================================================
# Hashing
# =============================================================================

HASH_SEED = 0x6E25B2B1
HASH_ROTATION = 19
WORD_MASK = 0xFFFFFFFF
HASH_MASK = 0x7FFFFFFF


def _rotate(value: int) -> int:
    """Rotate a 32-bit word left by HASH_ROTATION bits."""
    return ((value << HASH_ROTATION) | (value >> (32 - HASH_ROTATION))) & WORD_MASK


def _advance(value: int) -> int:
    """Next repair hash: one rotation with nothing mixed in."""
    return _rotate(value) & HASH_MASK


# =============================================================================
# Generator
# =============================================================================

class Generator:
    """
    A named password generator.

    Args:
        name: Name of the generator
        ranges: Allowed characters
        constraints: Complexity constraints (optional)
        first_ranges: Allowed characters for the first position only
                      (optional; defaults to ranges)

    Raises:
        ValueError: If the configuration cannot produce valid passwords
    """

    def __init__(self, name: str, ranges: Iterable[CharRange],
                 constraints: Optional[Iterable[ComplexityConstraint]] = None,
                 first_ranges: Optional[Iterable[CharRange]] = None):
        if not name:
            raise ValueError("Generator name cannot be empty")
        self._name = name
        self._ranges = tuple(ranges)
        if size_of(self._ranges) < 2:
            raise ValueError(f"Generator {name} must allow at least two characters")

        self._first_ranges = None
        if first_ranges is not None:
            self._first_ranges = tuple(first_ranges)
            if size_of(self._first_ranges) < 1:
                raise ValueError(f"Generator {name} has an empty first-character set")

        self._constraints = tuple(constraints or ())
        for c in self._constraints:
            alphabet = substitute_alphabet(c.category)
            if alphabet is None:
                logger.warning(f"{name}: constraint {c} cannot be repaired and is not enforced")
                continue
            missing = ''.join(ch for ch in alphabet if not contains(self._ranges, ch))
            if missing:
                raise ValueError(
                    f"Generator {name}: constraint {c} needs characters {missing!r} "
                    f"that are not in its ranges"
                )

    @property
    def name(self) -> str:
        return self._name

    @property
    def ranges(self) -> Sequence[CharRange]:
        return self._ranges

    @property
    def first_ranges(self) -> Optional[Sequence[CharRange]]:
        return self._first_ranges

    @property
    def constraints(self) -> Sequence[ComplexityConstraint]:
        return self._constraints

    def __repr__(self) -> str:
        return f"Generator({self._name!r}, size={size_of(self._ranges)})"

    def _ranges_at(self, position: int) -> Sequence[CharRange]:
        if position == 0 and self._first_ranges is not None:
            return self._first_ranges
        return self._ranges

    def _enforced(self) -> List[ComplexityConstraint]:
        """Constraints that repair can satisfy, in configured order."""
        return [c for c in self._constraints
                if c.count >= 1 and substitute_alphabet(c.category) is not None]

    def _minimums(self) -> Dict[str, int]:
        minimums: Dict[str, int] = {}
        for c in self._constraints:
            minimums[c.category] = max(minimums.get(c.category, 0), c.count)
        return minimums

    # -------------------------------------------------------------------------
    # Static utilities
    # -------------------------------------------------------------------------

    @staticmethod
    def hash_of(chars: Iterable[str]) -> int:
        """31-bit rotate/xor hash of a string or sequence of characters."""
        value = HASH_SEED
        for ch in chars:
            value = _rotate(value) ^ ord(ch)
        return value & HASH_MASK

    @staticmethod
    def count_categories(chars: Iterable[str]) -> Dict[str, int]:
        """Occurrences of each simplified category, in order of first appearance."""
        counts: Dict[str, int] = {}
        for ch in chars:
            cat = simplified_category_of(ch)
            counts[cat] = counts.get(cat, 0) + 1
        return counts

    # -------------------------------------------------------------------------
    # Encoding
    # -------------------------------------------------------------------------

    def length_of(self, bits: float) -> int:
        """
        Number of characters needed to carry the given bits of entropy.

        Rounds up, so the password never carries less entropy than asked.
        """
        count = 0
        if self._first_ranges is not None:
            bits -= math.log2(size_of(self._first_ranges))
            count += 1
        if bits > 0:
            count += math.ceil(bits / math.log2(size_of(self._ranges)))
        return count

    def partition(self, buffer: bytes) -> List[int]:
        """Digit indices for each character position of the buffer's password."""
        first_radix = None
        if self._first_ranges is not None:
            first_radix = size_of(self._first_ranges)
        return partition(
            buffer, self.length_of(len(buffer) * 8), size_of(self._ranges), first_radix
        )

    def encode(self, buffer: bytes) -> str:
        """Map the buffer's digits onto characters, first digit first."""
        return ''.join(
            char_at(self._ranges_at(i), digit)
            for i, digit in enumerate(self.partition(buffer))
        )

    def generate(self, buffer: bytes) -> str:
        """Encode the buffer and, if constrained, repair the result."""
        encoded = self.encode(buffer)
        if not self._constraints:
            return encoded
        return self.make_acceptable(encoded)

    # -------------------------------------------------------------------------
    # Constraints
    # -------------------------------------------------------------------------

    def is_acceptable(self, candidate: str) -> bool:
        """True if every character is allowed and every constraint is met."""
        for i, ch in enumerate(candidate):
            if not contains(self._ranges_at(i), ch):
                return False
        enforced = self._enforced()
        if enforced:
            counts = self.count_categories(candidate)
            for c in enforced:
                if counts.get(c.category, 0) < c.count:
                    return False
        return True

    def make_acceptable(self, candidate: str) -> str:
        """
        Deterministically repair a candidate so that is_acceptable() holds.

        Steps:
            1. Replace characters outside the allowed ranges
            2. For each unmet constraint, convert characters of the class
               with the largest surplus into the required class
            3. Append required characters for anything still unmet

        An acceptable candidate is returned unchanged. Step 3 may make
        the password longer than length_of() predicted.
        """
        chars = list(candidate)
        value = self.hash_of(chars)
        for i, ch in enumerate(chars):
            allowed = self._ranges_at(i)
            if not contains(allowed, ch):
                chars[i] = char_at(allowed, value % size_of(allowed))
                logger.debug(f"{self._name}: replaced out-of-range {ch!r} at {i} with {chars[i]!r}")
                value = _advance(value)

        enforced = self._enforced()
        if not enforced:
            return ''.join(chars)

        value = self.hash_of(chars)
        counts = self.count_categories(chars)
        minimums = self._minimums()
        for c in enforced:
            alphabet = substitute_alphabet(c.category)
            while counts.get(c.category, 0) < c.count:
                donor = self._pick_donor(counts, c.category, minimums)
                if donor is None:
                    break
                replacement = alphabet[value % len(alphabet)]
                position = self._substitute(chars, donor, value % counts[donor], replacement)
                if position is None:
                    # Tallies move regardless; padding below settles any shortfall.
                    logger.debug(f"{self._name}: no substitutable {donor} for {c}")
                else:
                    logger.debug(f"{self._name}: {donor} at {position} -> {replacement!r} for {c}")
                counts[donor] -= 1
                counts[c.category] = counts.get(c.category, 0) + 1
                value = _advance(value)

        counts = self.count_categories(chars)
        if not chars and self._first_ranges is not None:
            chars.append(char_at(self._first_ranges, value % size_of(self._first_ranges)))
            counts = self.count_categories(chars)
            value = _advance(value)
        for c in enforced:
            alphabet = substitute_alphabet(c.category)
            while counts.get(c.category, 0) < c.count:
                logger.debug(f"{self._name}: padding for {c}")
                chars.append(alphabet[value % len(alphabet)])
                counts[c.category] = counts.get(c.category, 0) + 1
                value = _advance(value)

        return ''.join(chars)

    @staticmethod
    def _pick_donor(counts: Dict[str, int], target: str,
                    minimums: Dict[str, int]) -> Optional[str]:
        """
        Category to take a character from when target is short.

        Prefers the largest surplus over the category's own minimum;
        failing that, the most frequent unconstrained category.
        """
        donor, best = None, 0
        for cat, n in counts.items():
            if cat == target or n <= 0:
                continue
            surplus = n - minimums.get(cat, 0)
            if surplus > best:
                donor, best = cat, surplus
        if donor is not None:
            return donor

        for cat, n in counts.items():
            if cat == target or cat in minimums:
                continue
            if n > best:
                donor, best = cat, n
        return donor

    @staticmethod
    def _substitute(chars: List[str], donor: str, skip: int, replacement: str) -> Optional[int]:
        """
        Replace the skip-th occurrence of the donor category.

        Position 0 is never replaced; if the chosen occurrence is there,
        the next occurrence is used instead.

        Returns:
            Position replaced, or None if no occurrence was replaceable
        """
        for i, ch in enumerate(chars):
            if simplified_category_of(ch) != donor:
                continue
            if skip > 0:
                skip -= 1
                continue
            if i == 0:
                continue
            chars[i] = replacement
            return i
        return None
