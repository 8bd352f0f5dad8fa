"""BLAKE3 hashing, the digest primitive shared by node ids and content addressing."""

from __future__ import annotations

from blake3 import blake3

from keyring_core.crypto.keys import DIGEST_SIZE, Digest


def digest(data: bytes | bytearray | memoryview) -> Digest:
    """Compute the 32-byte BLAKE3 digest of data.

    Args:
        data: Arbitrary bytes, including empty input.

    Returns:
        The digest as a ``Digest``.

    Raises:
        TypeError: If data is not bytes-like.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("data must be bytes-like")
    return Digest(blake3(data).digest(length=DIGEST_SIZE))


def digest_hex(data: bytes | bytearray | memoryview) -> str:
    """Lowercase hex of ``digest(data)``."""
    return digest(data).hex()
