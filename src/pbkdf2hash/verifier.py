"""Verify passwords against stored hashes."""

from __future__ import annotations

import logging

from pbkdf2hash.core.codec import decode_hash
from pbkdf2hash.core.kdf import Password, constant_time_equal, derive_key
from pbkdf2hash.core.types import Params

log = logging.getLogger(__name__)


def check_hash(password: Password, hash: str) -> tuple[bool, Params]:
    """Check *password* against *hash*. Returns (matched, params).

    The params are the ones the hash was created with, which lets callers
    spot hashes made with outdated settings. Decode errors propagate; a key
    mismatch is ``(False, params)``, not an error.
    """
    decoded = decode_hash(hash)
    params = decoded.params
    other = derive_key(password, decoded.salt, params.iterations, params.key_length)
    matched = constant_time_equal(decoded.key, other)
    log.debug("Checked hash (iterations=%d, matched=%s)", params.iterations, matched)
    return matched, params


def compare_password_and_hash(password: Password, hash: str) -> bool:
    """Constant-time check of *password* against *hash*."""
    matched, _ = check_hash(password, hash)
    return matched
