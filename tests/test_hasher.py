"""Tests for hash creation."""

import os
import re

import pytest

from pbkdf2hash import (
    DEFAULT_PARAMS,
    HashErrorKind,
    Params,
    RandomSourceError,
    create_hash,
    decode_hash,
)

DEFAULT_RX = re.compile(r"^\$pbkdf2-sha512\$210000\$[A-Za-z0-9+/]{22}\$[A-Za-z0-9+/]{43}$")

FAST = Params(iterations=1000, salt_length=16, key_length=32)


class TestCreateHash:
    def test_default_format(self):
        h = create_hash("pa$$word", DEFAULT_PARAMS)
        assert DEFAULT_RX.match(h), h

    def test_default_params_used_when_omitted(self):
        h = create_hash("pa$$word")
        assert decode_hash(h).params == DEFAULT_PARAMS

    def test_hashes_are_unique(self):
        h1 = create_hash("pa$$word", FAST)
        h2 = create_hash("pa$$word", FAST)
        assert h1 != h2  # different salts

    @pytest.mark.parametrize(
        "params, salt_chars, key_chars",
        [
            (Params(iterations=1, salt_length=8, key_length=16), 11, 22),
            (Params(iterations=7, salt_length=1, key_length=1), 2, 2),
            (Params(iterations=3, salt_length=24, key_length=64), 32, 86),
        ],
    )
    def test_segment_lengths(self, params, salt_chars, key_chars):
        _, variant, iterations, salt, key = create_hash("pw", params).split("$")
        assert variant == "pbkdf2-sha512"
        assert iterations == str(params.iterations)
        assert len(salt) == salt_chars
        assert len(key) == key_chars

    def test_binary_and_empty_passwords(self):
        for pw in (b"\x00\xff$\n", "", b"", "pässwörd"):
            h = create_hash(pw, FAST)
            assert decode_hash(h).params == FAST

    def test_random_source_failure(self, monkeypatch: pytest.MonkeyPatch):
        calls = []

        def boom(n):
            calls.append(n)
            raise OSError("entropy unavailable")

        monkeypatch.setattr(os, "urandom", boom)
        with pytest.raises(RandomSourceError) as exc_info:
            create_hash("pw", FAST)
        assert exc_info.value.kind is HashErrorKind.random_source_failure
        assert isinstance(exc_info.value.__cause__, OSError)
        assert calls == [16]  # no retry

    @pytest.mark.parametrize("pw", [1234, None, ["pw"]])
    def test_rejects_non_text_password(self, pw):
        with pytest.raises(TypeError):
            create_hash(pw, FAST)

    def test_zero_iterations_propagates_kdf_error(self):
        with pytest.raises(ValueError):
            create_hash("pw", Params(iterations=0))

    def test_password_not_logged(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level("DEBUG", logger="pbkdf2hash")
        h = create_hash("hunter2-secret", FAST)
        assert "hunter2-secret" not in caplog.text
        assert h.split("$")[4] not in caplog.text
