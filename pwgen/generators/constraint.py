#!/usr/bin/env python3
"""Password complexity constraints."""

from dataclasses import dataclass

from .categories import require_category


@dataclass(frozen=True)
class ComplexityConstraint:
    """
    Minimum number of characters required from a Unicode category.

    Raises:
        ValueError: If count is less than one or the category is unknown
    """
    category: str
    count: int = 1

    def __post_init__(self):
        require_category(self.category)
        if self.count < 1:
            raise ValueError(f"Invalid character count: {self.count}; must be >= 1")

    def __str__(self) -> str:
        return f"{self.category}>={self.count}"
