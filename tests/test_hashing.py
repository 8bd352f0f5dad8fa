"""Tests for BLAKE3 digests."""

import pytest

from keyring_core.crypto import Digest, digest, digest_hex


class TestDigest:
    def test_empty_vector(self) -> None:
        assert digest_hex(b"") == (
            "af1349b9f5f9a1a6a0404dea36dcc9499bcb25c9adc112b7cc9a93cae41f3262"
        )

    def test_abc_vector(self) -> None:
        assert digest_hex(b"abc") == (
            "6437b3ac38465133ffb63b75273a8db548c558465d79db03fd359c6cd5bd9d85"
        )

    def test_fixed_length(self) -> None:
        for data in (b"", b"a", b"x" * 10_000):
            result = digest(data)
            assert isinstance(result, Digest)
            assert len(result) == 32

    def test_deterministic(self) -> None:
        data = b"some content"
        assert digest(data) == digest(data)

    def test_different_inputs(self) -> None:
        assert digest(b"a") != digest(b"b")
        assert digest(b"") != digest(b"\x00")

    def test_bytes_like_inputs(self) -> None:
        assert digest(bytearray(b"abc")) == digest(b"abc")
        assert digest(memoryview(b"abc")) == digest(b"abc")

    def test_rejects_str(self) -> None:
        with pytest.raises(TypeError):
            digest("abc")  # type: ignore[arg-type]
