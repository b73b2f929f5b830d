#!/usr/bin/env python3
"""
Preset Generator Loader
=======================
Loads preset generator definitions from YAML files in this directory.

Usage:
    from pwgen.generators.presets import load_registry, default_registry

    registry = load_registry()          # fresh registry, caller-owned
    registry = default_registry()       # shared instance for the CLI
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..constraint import ComplexityConstraint
from ..generator import Generator
from ..ranges import CharRange
from ..registry import GeneratorRegistry

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Path
# =============================================================================

PRESETS_DIR = Path(__file__).parent
PRESETS_FILE = PRESETS_DIR / 'generators.yaml'


# =============================================================================
# Parsing
# =============================================================================

def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML preset file."""
    if not path.exists():
        raise FileNotFoundError(f"Preset config not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _parse_ranges(raw: Any, context: str) -> List[CharRange]:
    if not isinstance(raw, list) or not raw:
        raise ValueError(f"{context} must be a non-empty list of ranges")
    ranges = []
    for entry in raw:
        bounds = entry if isinstance(entry, list) else [entry]
        if len(bounds) not in (1, 2):
            raise ValueError(f"{context}: range {entry!r} must have one or two bounds")
        ranges.append(CharRange(*bounds))
    return ranges


def _parse_constraints(raw: Any, context: str) -> List[ComplexityConstraint]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"{context} must be a list of {{category, count}} entries")
    constraints = []
    for entry in raw:
        if not isinstance(entry, dict) or 'category' not in entry:
            raise ValueError(f"{context}: constraint {entry!r} needs a category")
        constraints.append(ComplexityConstraint(str(entry['category']), entry.get('count', 1)))
    return constraints


def parse_generator(raw: Dict[str, Any]) -> Generator:
    """Build a Generator from one preset entry."""
    name = raw.get('name')
    if not name:
        raise ValueError(f"Preset {raw!r} has no name")
    name = str(name)

    first: Optional[List[CharRange]] = None
    if raw.get('first') is not None:
        first = _parse_ranges(raw['first'], f"{name}.first")

    return Generator(
        name,
        _parse_ranges(raw.get('ranges'), f"{name}.ranges"),
        _parse_constraints(raw.get('constraints'), f"{name}.constraints"),
        first,
    )


# =============================================================================
# Loader Functions
# =============================================================================

def load_registry(path: Optional[Path] = None) -> GeneratorRegistry:
    """
    Build a new registry from a preset file.

    Args:
        path: YAML file to load (defaults to the shipped presets)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a preset is malformed or a name is duplicated
    """
    path = Path(path) if path is not None else PRESETS_FILE
    raw = _load_yaml(path)

    registry = GeneratorRegistry()
    for entry in raw.get('generators') or []:
        registry.add(parse_generator(entry))
    logger.debug(f"Loaded {len(registry)} generators from {path}")
    return registry


@lru_cache(maxsize=1)
def default_registry() -> GeneratorRegistry:
    """Registry of the shipped presets, loaded once."""
    return load_registry()


__all__ = [
    'PRESETS_FILE',
    'parse_generator',
    'load_registry',
    'default_registry',
]
