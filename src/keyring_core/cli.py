"""keyring-core command line tool.

Usage:
    keyring-core keygen [--show-secret]     generate a node identity
    keyring-core hash FILE                  BLAKE3 digest of a file ('-' for stdin)
    keyring-core verify FILE -s SIG -p KEY  check an Ed25519 signature
    keyring-core store put FILE             store a file as a content-addressed blob
    keyring-core store get HASH             retrieve a blob by digest
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from keyring_core.backends.loader import open_store
from keyring_core.config import KeyringConfig
from keyring_core.crypto import Digest, digest_hex, generate_keypair, verify
from keyring_core.errors import BackendNotImplementedError, KeyringError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_NOT_IMPLEMENTED = 2


def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def cmd_keygen(args: argparse.Namespace, config: KeyringConfig) -> int:
    keypair = generate_keypair()
    print(f"Node ID:    {keypair.node_id.hex()}")
    print(f"Short ID:   {keypair.node_id.short_id}")
    print(f"Public key: {keypair.public.hex()}")
    if args.show_secret:
        print(f"Secret key: {keypair.secret.hex()}")
    return EXIT_OK


def cmd_hash(args: argparse.Namespace, config: KeyringConfig) -> int:
    print(digest_hex(_read_input(args.file)))
    return EXIT_OK


def cmd_verify(args: argparse.Namespace, config: KeyringConfig) -> int:
    try:
        signature = bytes.fromhex(args.signature)
        public_key = bytes.fromhex(args.public_key)
    except ValueError:
        print("invalid")
        return EXIT_INVALID
    if verify(_read_input(args.file), signature, public_key):
        print("valid")
        return EXIT_OK
    print("invalid")
    return EXIT_INVALID


def cmd_store(args: argparse.Namespace, config: KeyringConfig) -> int:
    blob_hash = None
    if args.store_command == "get":
        try:
            blob_hash = Digest.from_hex(args.hash)
        except ValueError:
            print(f"Error: invalid blob hash: {args.hash!r}", file=sys.stderr)
            return EXIT_INVALID

    try:
        store = open_store(config)
        if blob_hash is None:
            print(store.put_blob(_read_input(args.file)).hex())
        else:
            sys.stdout.buffer.write(store.get_blob(blob_hash))
    except BackendNotImplementedError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_NOT_IMPLEMENTED
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keyring-core",
        description="Keyring node identity and content hashing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", type=Path, help="Path to a JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    keygen = subparsers.add_parser("keygen", help="Generate a node identity")
    keygen.add_argument(
        "--show-secret",
        action="store_true",
        help="Also print the secret key (it is not saved anywhere)",
    )
    keygen.set_defaults(func=cmd_keygen)

    hash_parser = subparsers.add_parser("hash", help="BLAKE3 digest of a file")
    hash_parser.add_argument("file", help="File to hash, or '-' for stdin")
    hash_parser.set_defaults(func=cmd_hash)

    verify_parser = subparsers.add_parser("verify", help="Verify an Ed25519 signature")
    verify_parser.add_argument("file", help="Signed message file, or '-' for stdin")
    verify_parser.add_argument("-s", "--signature", required=True, help="Signature (hex)")
    verify_parser.add_argument("-p", "--public-key", required=True, help="Public key (hex)")
    verify_parser.set_defaults(func=cmd_verify)

    store_parser = subparsers.add_parser("store", help="Content store operations")
    store_sub = store_parser.add_subparsers(dest="store_command", required=True)
    put = store_sub.add_parser("put", help="Store a file as a blob")
    put.add_argument("file")
    get = store_sub.add_parser("get", help="Retrieve a blob by digest")
    get.add_argument("hash")
    store_parser.set_defaults(func=cmd_store)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = KeyringConfig.from_file(args.config) if args.config else KeyringConfig()
    except (OSError, ValueError) as e:
        print(f"Error: cannot load config: {e}", file=sys.stderr)
        return EXIT_INVALID

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        return args.func(args, config)
    except (KeyringError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
