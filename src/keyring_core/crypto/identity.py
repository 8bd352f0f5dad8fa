"""Node identity — Ed25519 key generation, signing and verification.

The node id is the BLAKE3 digest of the raw 32-byte Ed25519 public key.
Every function here is a pure function of its arguments; the only shared
resource is the OS random source used by ``generate_keypair``.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from keyring_core.crypto.hashing import digest
from keyring_core.crypto.keys import (
    KEY_SIZE,
    SIGNATURE_SIZE,
    Keypair,
    NodeId,
    Signature,
    SigningKey,
    VerifyingKey,
)

_BYTES_LIKE = (bytes, bytearray, memoryview)


def generate_keypair() -> Keypair:
    """Generate a fresh Ed25519 keypair and derive its node id."""
    private_key = Ed25519PrivateKey.generate()
    secret = SigningKey(
        private_key.private_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PrivateFormat.Raw,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    public = _public_bytes(private_key.public_key())
    return Keypair(secret=secret, public=public, node_id=node_id(public))


def derive_verifying_key(secret: bytes) -> VerifyingKey:
    """Derive the public key paired with a secret key.

    Raises:
        InvalidKeyLengthError: If secret is not 32 bytes.
    """
    return _public_bytes(_load_private_key(secret).public_key())


def node_id(public: bytes) -> NodeId:
    """Derive the node id for a public key: BLAKE3(public).

    Raises:
        InvalidKeyLengthError: If public is not 32 bytes.
    """
    return NodeId(digest(VerifyingKey(public)))


def short_id(identifier: bytes) -> str:
    """Short hex form of a node id (first 8 bytes)."""
    return NodeId(identifier).short_id


def sign(message: bytes, secret: bytes) -> Signature:
    """Sign message with an Ed25519 secret key.

    Args:
        message: Arbitrary bytes; signed exactly as given.
        secret: 32-byte secret key.

    Returns:
        64-byte signature. Ed25519 signing is deterministic.

    Raises:
        InvalidKeyLengthError: If secret is not exactly 32 bytes.
        TypeError: If message is not bytes-like.
    """
    _check_message(message)
    private_key = _load_private_key(secret)
    return Signature(private_key.sign(bytes(message)))


def verify(message: bytes, signature: bytes, public: bytes) -> bool:
    """Verify an Ed25519 signature.

    Never raises. A signature that is not 64 bytes, a public key that is
    not 32 bytes or does not decode to a curve point, and a signature that
    does not match all yield ``False`` alike.
    """
    if not (
        isinstance(message, _BYTES_LIKE)
        and isinstance(signature, _BYTES_LIKE)
        and isinstance(public, _BYTES_LIKE)
    ):
        return False
    if len(signature) != SIGNATURE_SIZE or len(public) != KEY_SIZE:
        return False
    try:
        public_key = Ed25519PublicKey.from_public_bytes(bytes(public))
        public_key.verify(bytes(signature), bytes(message))
    except (InvalidSignature, ValueError):
        return False
    return True


class NodeIdentity:
    """A node's signing identity held in memory.

    Convenience wrapper over the module functions for callers that sign
    many messages with one key. Nothing is written to disk.
    """

    def __init__(self, secret: bytes) -> None:
        self._private_key = _load_private_key(secret)
        self._public = _public_bytes(self._private_key.public_key())
        self._node_id = node_id(self._public)

    @classmethod
    def generate(cls) -> NodeIdentity:
        """Generate a new random identity."""
        return cls(generate_keypair().secret)

    @property
    def node_id(self) -> NodeId:
        return self._node_id

    @property
    def short_id(self) -> str:
        return self._node_id.short_id

    @property
    def public_key(self) -> VerifyingKey:
        return self._public

    def sign(self, data: bytes) -> Signature:
        """Sign data with this node's secret key."""
        _check_message(data)
        return Signature(self._private_key.sign(bytes(data)))

    def verify(self, signature: bytes, data: bytes) -> bool:
        """Verify a signature against data using this node's public key."""
        return verify(data, signature, self._public)

    def __repr__(self) -> str:
        return f"NodeIdentity(node_id={self.short_id})"


def _check_message(message: object) -> None:
    if not isinstance(message, _BYTES_LIKE):
        raise TypeError("message must be bytes-like")


def _load_private_key(secret: bytes) -> Ed25519PrivateKey:
    return Ed25519PrivateKey.from_private_bytes(bytes(SigningKey(secret)))


def _public_bytes(public_key: Ed25519PublicKey) -> VerifyingKey:
    return VerifyingKey(
        public_key.public_bytes(
            encoding=serialization.Encoding.Raw,
            format=serialization.PublicFormat.Raw,
        )
    )
