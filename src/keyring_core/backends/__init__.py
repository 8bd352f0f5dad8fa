"""Collaborator interfaces for the content store and transport, with stub backends."""

from keyring_core.backends.base import Connection, ContentStore, Listener, Transport
from keyring_core.backends.loader import (
    create_transport,
    list_backends,
    load_store_backend,
    load_transport_backend,
    open_store,
)
from keyring_core.backends.stub import StubContentStore, StubTransport

__all__ = [
    "Connection",
    "ContentStore",
    "Listener",
    "StubContentStore",
    "StubTransport",
    "Transport",
    "create_transport",
    "list_backends",
    "load_store_backend",
    "load_transport_backend",
    "open_store",
]
