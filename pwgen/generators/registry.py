#!/usr/bin/env python3
"""
Generator Registry
==================
A caller-owned, name-keyed collection of generators.

Names are case-insensitive and unique. Registration order is kept so
generators can also be listed and addressed by index.

Usage:
    from pwgen.generators import GeneratorRegistry, load_registry

    registry = load_registry()            # shipped presets
    qwerty = registry.generator_of('qwerty')

    custom = GeneratorRegistry()          # empty, for tests or embedding
    custom.add(my_generator)
"""

import logging
from typing import Dict, Iterator, List

from .generator import Generator

logger = logging.getLogger(__name__)


class GeneratorNotFoundError(KeyError):
    """No generator is registered under the requested name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else super().__str__()


class GeneratorRegistry:
    """Registry of available password generators."""

    def __init__(self):
        self._generators: List[Generator] = []
        self._lookup: Dict[str, Generator] = {}

    def add(self, generator: Generator) -> int:
        """
        Register a generator.

        Returns:
            Index at which the generator was added

        Raises:
            ValueError: If a generator with the same name is registered
        """
        key = generator.name.lower()
        if key in self._lookup:
            existing = self._lookup[key].name
            raise ValueError(f"Generator named {generator.name} already added (as {existing})")
        index = len(self._generators)
        self._generators.append(generator)
        self._lookup[key] = generator
        logger.debug(f"Registered generator {generator.name} at {index}")
        return index

    def has_generator(self, name: str) -> bool:
        return name.lower() in self._lookup

    def generator_of(self, name: str) -> Generator:
        """
        Generator registered under a name (case-insensitive).

        Raises:
            GeneratorNotFoundError: If the name is not registered
        """
        generator = self._lookup.get(name.lower())
        if generator is None:
            available = ', '.join(self.names())
            raise GeneratorNotFoundError(
                f"Generator named \"{name}\" not found. Available generators: {available}"
            )
        return generator

    def generator_at(self, index: int) -> Generator:
        """
        Generator at a position in registration order.

        Raises:
            IndexError: If index is outside [0, len(registry))
        """
        if 0 <= index < len(self._generators):
            return self._generators[index]
        raise IndexError(f"Index {index} out of range: [0,{len(self._generators)})")

    def names(self) -> List[str]:
        return [g.name for g in self._generators]

    def __len__(self) -> int:
        return len(self._generators)

    def __iter__(self) -> Iterator[Generator]:
        return iter(self._generators)

    def __contains__(self, name: str) -> bool:
        return self.has_generator(name)
