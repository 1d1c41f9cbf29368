"""Credential digests for registered users.

Passwords are stored as salted PBKDF2-SHA256 digests in the form
``<salt_hex>:<hash_hex>``. The store only ever sees the digest.
"""

from __future__ import annotations

import hashlib
import hmac
import os

__all__ = ["hash_password", "verify_password"]

_PBKDF2_ITERATIONS = 100_000
_SALT_BYTES = 16


def _derive(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)


def hash_password(password: str) -> str:
    """Return a salted PBKDF2 digest for *password*."""
    salt = os.urandom(_SALT_BYTES)
    return f"{salt.hex()}:{_derive(password, salt).hex()}"


def verify_password(password: str, digest: str) -> bool:
    """Return True when *password* matches a stored ``salt:hash`` digest.

    Malformed digests never match.
    """
    salt_hex, sep, hash_hex = digest.partition(":")
    if not sep or not salt_hex or not hash_hex:
        return False
    try:
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    return hmac.compare_digest(_derive(password, salt), expected)
