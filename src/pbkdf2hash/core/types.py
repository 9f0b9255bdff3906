"""Core Pydantic models for pbkdf2hash."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from pbkdf2hash.exceptions import Pbkdf2Error

UINT32_MAX = 0xFFFF_FFFF

DEFAULT_ITERATIONS = 210_000
DEFAULT_SALT_LENGTH = 16
DEFAULT_KEY_LENGTH = 32


class HashErrorKind(str, Enum):
    """Ways a hash operation can fail."""

    invalid_format = "invalid_format"
    incompatible_variant = "incompatible_variant"
    random_source_failure = "random_source_failure"


class Params(BaseModel):
    """PBKDF2 input parameters.

    ``iterations`` controls the computational cost of hashing: the higher it
    is, the longer hashing takes, for you and for anyone guessing passwords.
    Changing it changes the hash output.

    The field defaults are the recommended preset, so ``Params()`` gives
    210000 iterations, a 16 byte salt and a 32 byte key.
    """

    model_config = ConfigDict(frozen=True)

    iterations: int = Field(default=DEFAULT_ITERATIONS, ge=0, le=UINT32_MAX)
    salt_length: int = Field(default=DEFAULT_SALT_LENGTH, ge=0, le=UINT32_MAX)
    key_length: int = Field(default=DEFAULT_KEY_LENGTH, ge=0, le=UINT32_MAX)


DEFAULT_PARAMS = Params()


class DecodedHash(BaseModel):
    """A successfully parsed hash string."""

    model_config = ConfigDict(frozen=True)

    params: Params
    salt: bytes
    key: bytes


class DecodeFailure(BaseModel):
    """A hash string that could not be parsed, and why."""

    model_config = ConfigDict(frozen=True)

    kind: HashErrorKind
    message: str = ""

    def to_exception(self) -> Pbkdf2Error:
        from pbkdf2hash.exceptions import error_for_kind

        return error_for_kind(self.kind, self.message)
