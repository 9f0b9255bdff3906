"""pbkdf2hash exceptions."""

from __future__ import annotations

from pbkdf2hash.core.types import HashErrorKind


class Pbkdf2Error(Exception):
    """Base exception for all pbkdf2hash errors."""

    kind: HashErrorKind | None = None


class InvalidHashError(Pbkdf2Error):
    """Raised when a hash string is not in the expected format."""

    kind = HashErrorKind.invalid_format

    def __init__(self, detail: str = ""):
        self.detail = detail
        msg = "pbkdf2: hash is not in the correct format"
        super().__init__(f"{msg} ({detail})" if detail else msg)


class IncompatibleVariantError(Pbkdf2Error):
    """Raised when a well-formed hash names a variant other than pbkdf2-sha512."""

    kind = HashErrorKind.incompatible_variant

    def __init__(self, variant: str = ""):
        self.variant = variant
        super().__init__("pbkdf2: incompatible variant of pbkdf2")


class RandomSourceError(Pbkdf2Error):
    """Raised when the system random generator cannot supply salt bytes."""

    kind = HashErrorKind.random_source_failure

    def __init__(self, detail: str = ""):
        self.detail = detail
        msg = "pbkdf2: secure random source failed"
        super().__init__(f"{msg} ({detail})" if detail else msg)


class ConfigError(Pbkdf2Error):
    """Raised on invalid configuration."""


def error_for_kind(kind: HashErrorKind, detail: str = "") -> Pbkdf2Error:
    """Build the exception matching *kind*."""
    if kind is HashErrorKind.invalid_format:
        return InvalidHashError(detail)
    if kind is HashErrorKind.incompatible_variant:
        return IncompatibleVariantError(detail)
    return RandomSourceError(detail)
