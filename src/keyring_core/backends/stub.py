"""Placeholder backends that report every operation as not implemented."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NoReturn

from keyring_core.backends.base import Connection, ContentStore, Listener, Transport
from keyring_core.crypto.keys import Digest
from keyring_core.errors import BackendNotImplementedError


class StubContentStore(ContentStore):
    """Content store placeholder until a storage engine is wired in."""

    name = "stub-store"

    def _unimplemented(self, operation: str) -> NoReturn:
        raise BackendNotImplementedError(self.name, operation)

    def open(self, path: str) -> None:
        self._unimplemented("open")

    def put_blob(self, data: bytes) -> Digest:
        self._unimplemented("put_blob")

    def get_blob(self, blob_hash: bytes) -> bytes:
        self._unimplemented("get_blob")

    def has_blob(self, blob_hash: bytes) -> bool:
        self._unimplemented("has_blob")

    def put_document(self, document: Mapping[str, Any]) -> None:
        self._unimplemented("put_document")

    def get_document(self, document_id: bytes) -> dict[str, Any]:
        self._unimplemented("get_document")

    def list_documents(self, keyring_id: bytes) -> list[dict[str, Any]]:
        self._unimplemented("list_documents")

    def delete_document(self, document_id: bytes) -> None:
        self._unimplemented("delete_document")


class StubTransport(Transport):
    """Transport placeholder.

    ``close`` fails like everything else: this backend never issues
    connections, so no handle passed to it can be valid.
    """

    name = "stub-transport"

    def _unimplemented(self, operation: str) -> NoReturn:
        raise BackendNotImplementedError(self.name, operation)

    def connect(self, host: str, port: int) -> Connection:
        self._unimplemented("connect")

    def send(self, conn: Connection, data: bytes) -> None:
        self._unimplemented("send")

    def recv(self, conn: Connection, timeout_ms: int) -> bytes:
        self._unimplemented("recv")

    def close(self, conn: Connection) -> None:
        self._unimplemented("close")

    def listen(self, port: int, **opts: Any) -> Listener:
        self._unimplemented("listen")

    def accept(self, listener: Listener) -> Connection:
        self._unimplemented("accept")
