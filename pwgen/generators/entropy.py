#!/usr/bin/env python3
"""
Entropy Module for Password Generation
======================================
Provides the entropy buffers that generators encode into passwords.

Two sources:
- secrets.token_bytes() for fresh random passwords
- PBKDF2-HMAC-SHA1 for passwords derived from a master password and
  a salt (typically the site the password is for), which makes the
  same inputs reproduce the same password

Both return ceil(bits / 8) bytes.
"""

import hashlib
import logging
import secrets
from typing import Optional

logger = logging.getLogger(__name__)


def byte_length(bits: int) -> int:
    """Number of bytes needed to hold the given number of bits."""
    if bits < 0:
        raise ValueError(f"Invalid bit count: {bits}")
    return (bits + 7) // 8


def random_bytes(bits: int) -> bytes:
    """
    Cryptographically secure random entropy.

    Args:
        bits: Number of bits of entropy to generate

    Returns:
        ceil(bits / 8) bytes from the system CSPRNG
    """
    return secrets.token_bytes(byte_length(bits))


def derive_bytes(bits: int, password: str, salt: str, iterations: int) -> bytes:
    """
    Entropy derived from a password and salt using PBKDF2-HMAC-SHA1.

    Args:
        bits: Number of bits of entropy to derive
        password: Password from which to derive entropy
        salt: Salt mixed into the derivation (e.g. a site URL)
        iterations: Number of PBKDF2 iterations

    Returns:
        ceil(bits / 8) derived bytes
    """
    if iterations < 1:
        raise ValueError(f"Invalid iteration count: {iterations}; must be >= 1")
    length = byte_length(bits)
    if length == 0:
        return b''
    logger.debug(f"Deriving {length} bytes with {iterations} PBKDF2 iterations")
    return hashlib.pbkdf2_hmac(
        'sha1', password.encode('utf-8'), salt.encode('utf-8'), iterations, length
    )


def entropy(bits: int, password: Optional[str] = None, salt: Optional[str] = None,
            iterations: Optional[int] = None) -> bytes:
    """
    Random or password-derived entropy.

    PBKDF2 is used only when password, salt and iterations are all
    given; otherwise the buffer is random.
    """
    if password is None or salt is None or iterations is None:
        return random_bytes(bits)
    return derive_bytes(bits, password, salt, iterations)
