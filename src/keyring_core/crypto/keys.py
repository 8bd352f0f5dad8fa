"""Fixed-width value types for keys, identifiers, signatures and digests.

Each type is an immutable ``bytes`` subclass that refuses to exist with the
wrong length, so a public key can never be passed where a signature is
expected without the mismatch being visible at construction time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from keyring_core.errors import InvalidKeyLengthError

KEY_SIZE = 32
SIGNATURE_SIZE = 64
DIGEST_SIZE = 32
SHORT_ID_BYTES = 8


class _FixedBytes(bytes):
    """Base for byte strings of one exact length."""

    size: ClassVar[int]

    def __new__(cls, value: bytes | bytearray | memoryview) -> _FixedBytes:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            msg = f"{cls.__name__} requires bytes, got {type(value).__name__}"
            raise TypeError(msg)
        data = bytes(value)
        if len(data) != cls.size:
            raise InvalidKeyLengthError(cls.__name__, cls.size, len(data))
        return super().__new__(cls, data)

    @classmethod
    def from_hex(cls, text: str) -> _FixedBytes:
        return cls(bytes.fromhex(text))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hex()})"


class SigningKey(_FixedBytes):
    """Ed25519 secret key (32-byte seed).

    The repr is redacted; use ``bytes(key)`` or ``key.hex()`` to get at the
    material explicitly.
    """

    size = KEY_SIZE

    def __repr__(self) -> str:
        return "SigningKey(<redacted>)"

    __str__ = __repr__


class VerifyingKey(_FixedBytes):
    """Ed25519 public key."""

    size = KEY_SIZE


class NodeId(_FixedBytes):
    """Stable node identifier: BLAKE3 digest of a verifying key."""

    size = DIGEST_SIZE

    @property
    def short_id(self) -> str:
        """Lowercase hex of the first 8 bytes."""
        return self[:SHORT_ID_BYTES].hex()


class Signature(_FixedBytes):
    """Ed25519 signature."""

    size = SIGNATURE_SIZE


class Digest(_FixedBytes):
    """32-byte BLAKE3 digest."""

    size = DIGEST_SIZE


@dataclass(frozen=True)
class Keypair:
    """Result of keypair generation. Owned by the caller."""

    secret: SigningKey = field(repr=False)
    public: VerifyingKey
    node_id: NodeId
