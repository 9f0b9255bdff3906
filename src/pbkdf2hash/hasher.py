"""Create new PBKDF2-HMAC-SHA512 password hashes."""

from __future__ import annotations

import logging

from pbkdf2hash.core.codec import encode_hash
from pbkdf2hash.core.kdf import Password, derive_key, random_salt
from pbkdf2hash.core.types import DEFAULT_PARAMS, Params

log = logging.getLogger(__name__)


def create_hash(password: Password, params: Params = DEFAULT_PARAMS) -> str:
    """Hash a plain-text password with a fresh random salt.

    Returns a string of the form::

        $pbkdf2-sha512$<iterations>$<b64 salt>$<b64 key>

    Two calls with the same password and params return different strings.
    Raises :class:`~pbkdf2hash.exceptions.RandomSourceError` if no salt can
    be drawn; that is never retried.
    """
    salt = random_salt(params.salt_length)
    key = derive_key(password, salt, params.iterations, params.key_length)
    log.debug(
        "Created hash (iterations=%d, salt_length=%d, key_length=%d)",
        params.iterations,
        params.salt_length,
        params.key_length,
    )
    return encode_hash(params.iterations, salt, key)
