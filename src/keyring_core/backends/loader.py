"""Backend discovery and loading via setuptools entry points."""

from __future__ import annotations

import logging
from importlib.metadata import entry_points
from typing import TypeVar

from keyring_core.backends.base import ContentStore, Transport
from keyring_core.backends.stub import StubContentStore, StubTransport
from keyring_core.config import KeyringConfig
from keyring_core.errors import BackendNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Entry point group names
STORE_GROUP = "keyring.store"
TRANSPORT_GROUP = "keyring.transport"

STUB_BACKEND = "stub"

_BUILTINS: dict[str, type] = {
    STORE_GROUP: StubContentStore,
    TRANSPORT_GROUP: StubTransport,
}


def _load_backend(group: str, name: str, expected_type: type[T]) -> type[T]:
    """Load a backend class by entry point group and name.

    Args:
        group: Entry point group (e.g., 'keyring.store').
        name: Backend name as registered in entry points, or 'stub'.
        expected_type: Expected base class.

    Returns:
        The backend class (not an instance).

    Raises:
        BackendNotFoundError: If the backend is not installed.
        TypeError: If the loaded object doesn't subclass expected_type.
    """
    if name == STUB_BACKEND:
        return _BUILTINS[group]  # type: ignore[return-value]

    for ep in entry_points(group=group):
        if ep.name == name:
            cls = ep.load()
            if not (isinstance(cls, type) and issubclass(cls, expected_type)):
                msg = f"Backend '{name}' in '{group}' is not a subclass of {expected_type.__name__}"
                raise TypeError(msg)
            logger.debug("Loaded backend %s from %s", name, ep.value)
            return cls

    msg = f"Backend '{name}' not found in entry point group '{group}'"
    raise BackendNotFoundError(msg)


def load_store_backend(name: str) -> type[ContentStore]:
    """Load a content store backend by name."""
    return _load_backend(STORE_GROUP, name, ContentStore)


def load_transport_backend(name: str) -> type[Transport]:
    """Load a transport backend by name."""
    return _load_backend(TRANSPORT_GROUP, name, Transport)


def list_backends(group: str) -> list[str]:
    """List all available backend names in a group, built-ins first."""
    names = [STUB_BACKEND] if group in _BUILTINS else []
    names.extend(ep.name for ep in entry_points(group=group) if ep.name not in names)
    return names


def open_store(config: KeyringConfig) -> ContentStore:
    """Instantiate the configured store backend and open it."""
    store = load_store_backend(config.store.backend)()
    path = config.store.resolved_path()
    logger.info("Opening %s store at %s", config.store.backend, path)
    store.open(str(path))
    return store


def create_transport(config: KeyringConfig) -> Transport:
    """Instantiate the configured transport backend."""
    return load_transport_backend(config.transport.backend)()
