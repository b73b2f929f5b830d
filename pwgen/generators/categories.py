#!/usr/bin/env python3
"""
Unicode Categories
==================
Unicode general categories and the simplified character classes used by
complexity constraints.

The classifier itself is the standard library's ``unicodedata``; this
module owns the closed table of category symbols and descriptions, the
simplification of those categories into six classes, and the ASCII
substitute alphabet of each class that can be repaired.

Simplified classes:
    Lu  uppercase letters (Lu, Lt)
    Ll  lowercase and other letters (Ll, Lo)
    No  numbers (Nd, Nl, No)
    Po  punctuation (Pc, Pd, Pe, Pf, Pi, Po, Ps)
    So  symbols (Sc, Sk, Sm, So)
    Co  everything else; never targeted by repair
"""

import unicodedata
from typing import Dict, Optional


# =============================================================================
# Category Table
# =============================================================================

# symbol -> (description, simplified class)
CATEGORIES: Dict[str, tuple] = {
    'Cc': ("Other, Control", 'Co'),
    'Cf': ("Other, Format", 'Co'),
    'Cn': ("Other, Not Assigned", 'Co'),
    'Co': ("Other, Private Use", 'Co'),
    'Cs': ("Other, Surrogate", 'Co'),
    'LC': ("Letter, Cased", 'Co'),
    'Ll': ("Letter, Lowercase", 'Ll'),
    'Lm': ("Letter, Modifier", 'Co'),
    'Lo': ("Letter, Other", 'Ll'),
    'Lt': ("Letter, Titlecase", 'Lu'),
    'Lu': ("Letter, Uppercase", 'Lu'),
    'Mc': ("Mark, Spacing Combining", 'Co'),
    'Me': ("Mark, Enclosing", 'Co'),
    'Mn': ("Mark, Nonspacing", 'Co'),
    'Nd': ("Number, Decimal Digit", 'No'),
    'Nl': ("Number, Letter", 'No'),
    'No': ("Number, Other", 'No'),
    'Pc': ("Punctuation, Connector", 'Po'),
    'Pd': ("Punctuation, Dash", 'Po'),
    'Pe': ("Punctuation, Close", 'Po'),
    'Pf': ("Punctuation, Final quote", 'Po'),
    'Pi': ("Punctuation, Initial quote", 'Po'),
    'Po': ("Punctuation, Other", 'Po'),
    'Ps': ("Punctuation, Open", 'Po'),
    'Sc': ("Symbol, Currency", 'So'),
    'Sk': ("Symbol, Modifier", 'So'),
    'Sm': ("Symbol, Math", 'So'),
    'So': ("Symbol, Other", 'So'),
    'Zl': ("Separator, Line", 'Co'),
    'Zp': ("Separator, Paragraph", 'Co'),
    'Zs': ("Separator, Space", 'Co'),
}

OTHER = 'Co'

SUBSTITUTES: Dict[str, str] = {
    'Lu': "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    'Ll': "abcdefghijklmnopqrstuvwxyz",
    'No': "0123456789",
    'Po': "!\"#%&'()*,-./:;?@[\\]_{}",
    'So': "$+<=>^`|~",
}


# =============================================================================
# Lookups
# =============================================================================

def is_category(symbol: str) -> bool:
    return symbol in CATEGORIES


def require_category(symbol: str) -> str:
    """Return the symbol unchanged, or raise ValueError if it is unknown."""
    if symbol not in CATEGORIES:
        known = ', '.join(CATEGORIES)
        raise ValueError(f"Unknown Unicode category '{symbol}'. Known categories: {known}")
    return symbol


def category_description(symbol: str) -> str:
    """Description of a category, e.g. "Separator, Line" for Zl."""
    return CATEGORIES[require_category(symbol)][0]


def category_symbol(description: str) -> Optional[str]:
    """Reverse lookup of category_description(); None if not found."""
    for symbol, (desc, _) in CATEGORIES.items():
        if desc == description:
            return symbol
    return None


def category_of(char: str) -> str:
    """Unicode general category of a single character."""
    return unicodedata.category(char)


def simplify(symbol: Optional[str]) -> str:
    """Collapse a general category into one of Lu, Ll, No, Po, So, Co."""
    entry = CATEGORIES.get(symbol)
    return entry[1] if entry else OTHER


def simplified_category_of(char: str) -> str:
    return simplify(category_of(char))


def substitute_alphabet(symbol: str) -> Optional[str]:
    """ASCII characters used to repair a simplified class, or None."""
    return SUBSTITUTES.get(symbol)
