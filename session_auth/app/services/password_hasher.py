"""
Password Hasher

Derives and checks password verifiers with bcrypt.

bcrypt only reads the first 72 bytes of its input, so the password is first
reduced to a fixed-size base64 SHA-256 digest. Passwords of any accepted
length therefore contribute every character to the verifier.
"""

import base64
import hashlib
import secrets
from functools import lru_cache

import bcrypt

from config import ApplicationConfig


def _prehash(plaintext: str) -> bytes:
    return base64.b64encode(hashlib.sha256(plaintext.encode("utf-8")).digest())


def derive(plaintext: str) -> str:
    """
    Derive a salted, non-reversible verifier for a password.

    Args:
        plaintext: Password as typed by the user

    Returns:
        bcrypt hash string (60 chars, salt and cost embedded)
    """
    salt = bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_prehash(plaintext), salt).decode("utf-8")


def matches(plaintext: str, verifier: str) -> bool:
    """
    Check a password against a stored verifier.

    bcrypt recomputes the hash with the verifier's own salt and cost and
    compares the two in constant time. A malformed verifier never matches.
    """
    try:
        return bcrypt.checkpw(_prehash(plaintext), verifier.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False


@lru_cache(maxsize=1)
def dummy_verifier() -> str:
    """Verifier of a random password, checked when a login names no account"""
    return derive(secrets.token_hex(16))
