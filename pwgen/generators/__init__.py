#!/usr/bin/env python3
"""
Password Generators
===================
Core of pwgen:
- Ranges: allowed characters and their index space
- Categories: Unicode classification and repair alphabets
- Partition: entropy bytes to mixed-radix digits
- Generator: encoding, acceptability checks and constraint repair
- Registry: named generators, loaded from the YAML presets
"""

from .ranges import (
    CharRange,
    size_of,
    code_point_at,
    char_at,
    index_of,
)
from .categories import (
    CATEGORIES,
    SUBSTITUTES,
    category_description,
    category_symbol,
    category_of,
    is_category,
    simplify,
    simplified_category_of,
    substitute_alphabet,
)
from .constraint import ComplexityConstraint
from .partition import partition, magnitude_of
from .entropy import random_bytes, derive_bytes, entropy
from .generator import Generator
from .registry import GeneratorRegistry, GeneratorNotFoundError
from .presets import load_registry, default_registry

__all__ = [
    # Ranges
    'CharRange',
    'size_of',
    'code_point_at',
    'char_at',
    'index_of',
    # Categories
    'CATEGORIES',
    'SUBSTITUTES',
    'category_description',
    'category_symbol',
    'category_of',
    'is_category',
    'simplify',
    'simplified_category_of',
    'substitute_alphabet',
    'ComplexityConstraint',
    # Encoding
    'partition',
    'magnitude_of',
    'Generator',
    # Entropy
    'random_bytes',
    'derive_bytes',
    'entropy',
    # Registry
    'GeneratorRegistry',
    'GeneratorNotFoundError',
    'load_registry',
    'default_registry',
]
