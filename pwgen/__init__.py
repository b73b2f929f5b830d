#!/usr/bin/env python3
"""
pwgen - Deterministic Password Generator
========================================

Turns entropy (random bytes, or bytes derived from a master password and
a site) into passwords drawn from a configured character set that meet
per-category complexity requirements.

Quick Start
-----------
    from pwgen import load_registry, entropy

    registry = load_registry()
    qwerty = registry.generator_of('qwerty')

    # Fresh random password with 88 bits of entropy
    password = qwerty.generate(entropy(88))

    # Same inputs, same password
    password = qwerty.generate(entropy(88, 'master', 'https://site.io/', 1000))

Modules
-------
    pwgen.generators - Ranges, categories, encoding, repair and presets
    pwgen.settings   - Application settings (configs/app.yaml)

CLI Usage
---------
    python -m pwgen generate 88 qwerty
    python -m pwgen generate 64 NCName master https://site.io/ 1000
    python -m pwgen list
"""

__version__ = "0.1.0"

from . import generators

from .generators import (
    CharRange,
    ComplexityConstraint,
    Generator,
    GeneratorRegistry,
    GeneratorNotFoundError,
    load_registry,
    default_registry,
    random_bytes,
    derive_bytes,
    entropy,
)

__all__ = [
    '__version__',
    'generators',
    'CharRange',
    'ComplexityConstraint',
    'Generator',
    'GeneratorRegistry',
    'GeneratorNotFoundError',
    'load_registry',
    'default_registry',
    'random_bytes',
    'derive_bytes',
    'entropy',
]
