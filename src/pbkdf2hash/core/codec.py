"""Encoding and strict decoding of ``$pbkdf2-sha512$...`` hash strings.

Format::

    $pbkdf2-sha512$<iterations>$<b64 salt>$<b64 key>

Both base64 segments use the standard alphabet without padding, e.g.::

    $pbkdf2-sha512$210000$KuwdBW88vV7YiVGWsMmc8g$XO+ztCemYHheH1kqHe6QAmb99lL3MI7IeBQ05dnAXGk
"""

from __future__ import annotations

import base64
import binascii
import logging
import re

from pbkdf2hash.core.types import (
    UINT32_MAX,
    DecodedHash,
    DecodeFailure,
    HashErrorKind,
    Params,
)

log = logging.getLogger(__name__)

VARIANT = "pbkdf2-sha512"
SEPARATOR = "$"

_DIGITS = re.compile(r"[0-9]+")
_B64_CHARS = re.compile(r"[A-Za-z0-9+/]*")


def _b64encode(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii").rstrip("=")


def _b64decode_strict(segment: str) -> bytes | None:
    """Decode unpadded standard base64, or return ``None``.

    Rejects padding, whitespace, characters outside the alphabet, impossible
    lengths and non-zero trailing bits.
    """
    if not _B64_CHARS.fullmatch(segment) or len(segment) % 4 == 1:
        return None
    try:
        raw = base64.b64decode(segment + "=" * (-len(segment) % 4), validate=True)
    except binascii.Error:
        return None
    # Only the canonical encoding round-trips; this catches stray low bits.
    if _b64encode(raw) != segment:
        return None
    return raw


def encode_hash(iterations: int, salt: bytes, key: bytes) -> str:
    """Serialize parameters, salt and key into the canonical hash string."""
    if not isinstance(iterations, int) or isinstance(iterations, bool):
        raise TypeError(f"iterations must be an int, got {type(iterations).__name__}")
    if not 0 < iterations <= UINT32_MAX:
        raise ValueError(f"iterations must be in 1..{UINT32_MAX}, got {iterations}")
    if not salt or not key:
        raise ValueError("salt and key must be non-empty")
    return SEPARATOR + SEPARATOR.join(
        (VARIANT, str(iterations), _b64encode(salt), _b64encode(key))
    )


def _invalid(detail: str) -> DecodeFailure:
    log.debug("Rejected hash string: %s", detail)
    return DecodeFailure(kind=HashErrorKind.invalid_format, message=detail)


def try_decode_hash(hash: str) -> DecodedHash | DecodeFailure:
    """Parse *hash* without raising.

    Returns a :class:`DecodedHash` on success, otherwise a
    :class:`DecodeFailure` whose ``kind`` is ``invalid_format`` or
    ``incompatible_variant``. Never partially succeeds.
    """
    if not isinstance(hash, str):
        return _invalid("expected str")

    parts = hash.split(SEPARATOR)
    if len(parts) != 5 or parts[0] != "":
        return _invalid(f"expected 5 fields, got {len(parts)}")

    _, variant, iterations_s, salt_b64, key_b64 = parts
    if variant != VARIANT:
        log.debug("Rejected hash string: incompatible variant")
        return DecodeFailure(kind=HashErrorKind.incompatible_variant, message=variant)

    if not _DIGITS.fullmatch(iterations_s):
        return _invalid("iterations is not a decimal integer")
    # Bounded before int(), which refuses very long digit strings.
    if len(iterations_s.lstrip("0")) > len(str(UINT32_MAX)):
        return _invalid("iterations out of range")
    iterations = int(iterations_s)
    if iterations > UINT32_MAX:
        return _invalid("iterations out of range")

    salt = _b64decode_strict(salt_b64)
    if salt is None:
        return _invalid("salt is not valid base64")
    key = _b64decode_strict(key_b64)
    if key is None:
        return _invalid("key is not valid base64")

    params = Params(iterations=iterations, salt_length=len(salt), key_length=len(key))
    return DecodedHash(params=params, salt=salt, key=key)


def decode_hash(hash: str) -> DecodedHash:
    """Parse *hash*, raising on failure.

    Raises :class:`~pbkdf2hash.exceptions.InvalidHashError` for malformed
    input and :class:`~pbkdf2hash.exceptions.IncompatibleVariantError` for a
    well-formed hash of another variant.
    """
    result = try_decode_hash(hash)
    if isinstance(result, DecodeFailure):
        raise result.to_exception()
    return result
