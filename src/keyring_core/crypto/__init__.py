"""Cryptographic primitives — BLAKE3 hashing, Ed25519 signing, node identity."""

from keyring_core.crypto.hashing import digest, digest_hex
from keyring_core.crypto.identity import (
    NodeIdentity,
    derive_verifying_key,
    generate_keypair,
    node_id,
    short_id,
    sign,
    verify,
)
from keyring_core.crypto.keys import (
    Digest,
    Keypair,
    NodeId,
    Signature,
    SigningKey,
    VerifyingKey,
)

__all__ = [
    "Digest",
    "Keypair",
    "NodeId",
    "NodeIdentity",
    "Signature",
    "SigningKey",
    "VerifyingKey",
    "derive_verifying_key",
    "digest",
    "digest_hex",
    "generate_keypair",
    "node_id",
    "short_id",
    "sign",
    "verify",
]
