"""User-facing PasswordHasher client."""

from __future__ import annotations

from pbkdf2hash.config import HashConfig
from pbkdf2hash.core.kdf import Password
from pbkdf2hash.core.types import Params
from pbkdf2hash.hasher import create_hash
from pbkdf2hash.verifier import check_hash, compare_password_and_hash


class PasswordHasher:
    """Hash and verify passwords with one fixed parameter set.

    >>> hasher = PasswordHasher()
    >>> stored = hasher.hash("correct horse")
    >>> hasher.verify("correct horse", stored)
    True

    Instances hold only immutable params and can be shared between threads.
    """

    def __init__(
        self,
        config: HashConfig | None = None,
        *,
        params: Params | None = None,
    ):
        if params is None:
            params = (config or HashConfig()).to_params()
        self._params = params

    @property
    def params(self) -> Params:
        return self._params

    def hash(self, password: Password) -> str:
        """Hash *password* with this instance's params."""
        return create_hash(password, self._params)

    def verify(self, password: Password, hash: str) -> bool:
        """Return ``True`` if *password* matches *hash*.

        Verification uses the params embedded in *hash*, not this instance's.
        """
        return compare_password_and_hash(password, hash)

    def check(self, password: Password, hash: str) -> tuple[bool, Params]:
        """Like :meth:`verify`, also returning the params *hash* was made with."""
        return check_hash(password, hash)
