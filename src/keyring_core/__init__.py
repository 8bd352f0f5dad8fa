"""Keyring core — node identity, signing and content hashing for mesh nodes."""

from keyring_core.crypto import (
    Digest,
    Keypair,
    NodeId,
    Signature,
    SigningKey,
    VerifyingKey,
    digest,
    generate_keypair,
    node_id,
    sign,
    verify,
)
from keyring_core.errors import (
    BackendNotFoundError,
    BackendNotImplementedError,
    InvalidKeyLengthError,
    KeyringError,
)

__version__ = "0.1.0"

__all__ = [
    "BackendNotFoundError",
    "BackendNotImplementedError",
    "Digest",
    "InvalidKeyLengthError",
    "Keypair",
    "KeyringError",
    "NodeId",
    "Signature",
    "SigningKey",
    "VerifyingKey",
    "digest",
    "generate_keypair",
    "node_id",
    "sign",
    "verify",
]
