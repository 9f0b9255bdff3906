"""pbkdf2hash — PBKDF2-HMAC-SHA512 password hashing and verification."""

from pbkdf2hash.client import PasswordHasher
from pbkdf2hash.config import HashConfig
from pbkdf2hash.core.codec import decode_hash, encode_hash, try_decode_hash
from pbkdf2hash.core.types import (
    DEFAULT_PARAMS,
    DecodedHash,
    DecodeFailure,
    HashErrorKind,
    Params,
)
from pbkdf2hash.exceptions import (
    ConfigError,
    IncompatibleVariantError,
    InvalidHashError,
    Pbkdf2Error,
    RandomSourceError,
)
from pbkdf2hash.hasher import create_hash
from pbkdf2hash.verifier import check_hash, compare_password_and_hash

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_PARAMS",
    "ConfigError",
    "DecodeFailure",
    "DecodedHash",
    "HashConfig",
    "HashErrorKind",
    "IncompatibleVariantError",
    "InvalidHashError",
    "Params",
    "PasswordHasher",
    "Pbkdf2Error",
    "RandomSourceError",
    "check_hash",
    "compare_password_and_hash",
    "create_hash",
    "decode_hash",
    "encode_hash",
    "try_decode_hash",
]
