#!/usr/bin/env python3
"""Settings loader for pwgen (reads configs/app.yaml)."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
APP_CONFIG_PATH = PACKAGE_ROOT / "configs" / "app.yaml"


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"Missing app config: {APP_CONFIG_PATH}")
    return yaml.safe_load(APP_CONFIG_PATH.read_text(encoding="utf-8")) or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Look up a setting by dotted path, e.g. "defaults.bits"."""
    node: Any = load_app_config()
    for key in path.split('.'):
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node


@dataclass(frozen=True)
class Defaults:
    """Defaults applied by the CLI when arguments are omitted."""
    bits: int = 88
    generator: str = "qwerty"
    iterations: int = 1000
    sample_bits: int = 88

    def __post_init__(self):
        for key in ("bits", "iterations", "sample_bits"):
            value = getattr(self, key)
            if not isinstance(value, int) or value < 1:
                raise ValueError(f"defaults.{key} must be a positive integer, got {value!r}")


def get_defaults() -> Defaults:
    """Defaults from app.yaml, falling back to the built-in values."""
    raw = get_setting("defaults", {}) or {}
    known = {k: raw[k] for k in ("bits", "generator", "iterations", "sample_bits") if k in raw}
    return Defaults(**known)


__all__ = [
    "load_app_config",
    "get_setting",
    "get_defaults",
    "Defaults",
    "APP_CONFIG_PATH",
]
