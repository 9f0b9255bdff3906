"""pbkdf2hash core types and primitives."""

from pbkdf2hash.core.types import (
    DEFAULT_PARAMS,
    DecodedHash,
    DecodeFailure,
    HashErrorKind,
    Params,
)

__all__ = ["DEFAULT_PARAMS", "DecodeFailure", "DecodedHash", "HashErrorKind", "Params"]
