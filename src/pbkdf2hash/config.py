"""pbkdf2hash configuration."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from pbkdf2hash.core.types import (
    DEFAULT_ITERATIONS,
    DEFAULT_KEY_LENGTH,
    DEFAULT_SALT_LENGTH,
    UINT32_MAX,
    Params,
)
from pbkdf2hash.exceptions import ConfigError

log = logging.getLogger(__name__)

_MIN_KEY_LENGTH = 16

_ENV_VARS = {
    "iterations": "PBKDF2_ITERATIONS",
    "salt_length": "PBKDF2_SALT_LENGTH",
    "key_length": "PBKDF2_KEY_LENGTH",
}


class HashConfig(BaseModel):
    """Hashing parameters for a :class:`~pbkdf2hash.client.PasswordHasher`.

    Defaults follow the NIST/OWASP guidance for PBKDF2-HMAC-SHA512. They are
    fine for development; production settings should be tuned to the
    available CPU and latency budget.
    """

    iterations: int = Field(default=DEFAULT_ITERATIONS, ge=1, le=UINT32_MAX)
    salt_length: int = Field(default=DEFAULT_SALT_LENGTH, ge=1, le=UINT32_MAX)
    key_length: int = Field(default=DEFAULT_KEY_LENGTH, ge=1, le=UINT32_MAX)

    def model_post_init(self, __context: Any) -> None:
        if self.iterations < DEFAULT_ITERATIONS:
            log.warning(
                "PBKDF2 iterations=%d is below the recommended %d",
                self.iterations,
                DEFAULT_ITERATIONS,
            )
        if self.salt_length < DEFAULT_SALT_LENGTH:
            log.warning(
                "Salt length %d bytes is below the recommended %d",
                self.salt_length,
                DEFAULT_SALT_LENGTH,
            )
        if self.key_length < _MIN_KEY_LENGTH:
            log.warning(
                "Key length %d bytes is below the recommended %d",
                self.key_length,
                _MIN_KEY_LENGTH,
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> HashConfig:
        """Build a config from ``PBKDF2_*`` environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        values: dict[str, int] = {}
        for field, var in _ENV_VARS.items():
            raw = env.get(var)
            if raw is None or raw.strip() == "":
                continue
            try:
                values[field] = int(raw)
            except ValueError as exc:
                raise ConfigError(f"{var} must be an integer, got {raw!r}") from exc
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc

    def to_params(self) -> Params:
        return Params(
            iterations=self.iterations,
            salt_length=self.salt_length,
            key_length=self.key_length,
        )
