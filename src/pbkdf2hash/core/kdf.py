"""Thin adapters over the stdlib crypto primitives (PBKDF2, urandom, compare_digest)."""

from __future__ import annotations

import hashlib
import hmac
import logging
import os

from pbkdf2hash.exceptions import RandomSourceError

log = logging.getLogger(__name__)

_DIGEST = "sha512"

Password = str | bytes | bytearray


def password_bytes(password: Password) -> bytes:
    """UTF-8 encode *password* if it is text. No normalization is applied."""
    if isinstance(password, str):
        return password.encode("utf-8")
    if isinstance(password, (bytes, bytearray)):
        return bytes(password)
    raise TypeError(f"password must be str or bytes, got {type(password).__name__}")


def random_salt(n: int) -> bytes:
    """Return *n* bytes from the OS CSPRNG."""
    try:
        return os.urandom(n)
    except (OSError, NotImplementedError) as exc:
        log.warning("Secure random source failed: %s", type(exc).__name__)
        raise RandomSourceError(str(exc)) from exc


def derive_key(password: Password, salt: bytes, iterations: int, key_length: int) -> bytes:
    """PBKDF2-HMAC-SHA512. Errors from hashlib propagate unchanged."""
    return hashlib.pbkdf2_hmac(
        _DIGEST, password_bytes(password), salt, iterations, dklen=key_length
    )


def constant_time_equal(a: bytes, b: bytes) -> bool:
    """Timing-safe comparison. Different lengths compare unequal."""
    return hmac.compare_digest(a, b)
