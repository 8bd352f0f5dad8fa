"""Abstract interfaces for the collaborators around the identity core.

Backends are discovered via setuptools entry points:
    [project.entry-points."keyring.store"]
    redb = "my_package:RedbContentStore"

    [project.entry-points."keyring.transport"]
    quic = "my_package:QuicTransport"

The identity core does not depend on either collaborator. The store
consumes node ids and digests as keys; the transport carries signatures
and verifying keys alongside payloads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from keyring_core.crypto.keys import Digest


@dataclass(frozen=True)
class Connection:
    """Opaque handle for an open transport connection."""

    backend: str
    handle: Any


@dataclass(frozen=True)
class Listener:
    """Opaque handle for a listening transport endpoint."""

    backend: str
    handle: Any


class ContentStore(ABC):
    """Content-addressed storage for blobs and documents.

    Blobs are keyed by their BLAKE3 digest, so identical content is stored
    once. Documents are structured metadata keyed by an opaque id and
    grouped by keyring id.
    """

    name: str = "store"

    @abstractmethod
    def open(self, path: str) -> None:
        """Open or create the store at path."""

    @abstractmethod
    def put_blob(self, data: bytes) -> Digest:
        """Store a blob.

        Returns:
            The blob's BLAKE3 digest, which is its key.
        """

    @abstractmethod
    def get_blob(self, blob_hash: bytes) -> bytes:
        """Retrieve a blob by digest.

        Raises:
            KeyError: If no blob has this digest.
        """

    @abstractmethod
    def has_blob(self, blob_hash: bytes) -> bool:
        """Check whether a blob exists."""

    @abstractmethod
    def put_document(self, document: Mapping[str, Any]) -> None:
        """Store a document (metadata plus replicated state)."""

    @abstractmethod
    def get_document(self, document_id: bytes) -> dict[str, Any]:
        """Retrieve a document by id.

        Raises:
            KeyError: If the document does not exist.
        """

    @abstractmethod
    def list_documents(self, keyring_id: bytes) -> list[dict[str, Any]]:
        """List the documents belonging to a keyring."""

    @abstractmethod
    def delete_document(self, document_id: bytes) -> None:
        """Delete a document by id.

        Raises:
            KeyError: If the document does not exist.
        """


class Transport(ABC):
    """Node-to-node byte transport.

    Implementations may use QUIC, TCP, WebSocket or anything else that
    moves bytes reliably between a host/port pair.
    """

    name: str = "transport"

    @abstractmethod
    def connect(self, host: str, port: int) -> Connection:
        """Connect to a remote endpoint."""

    @abstractmethod
    def send(self, conn: Connection, data: bytes) -> None:
        """Send data on an open connection."""

    @abstractmethod
    def recv(self, conn: Connection, timeout_ms: int) -> bytes:
        """Receive data, blocking up to timeout_ms."""

    @abstractmethod
    def close(self, conn: Connection) -> None:
        """Close a connection.

        Implementations must reject handles they did not issue.
        """

    @abstractmethod
    def listen(self, port: int, **opts: Any) -> Listener:
        """Listen for incoming connections."""

    @abstractmethod
    def accept(self, listener: Listener) -> Connection:
        """Accept an incoming connection."""
