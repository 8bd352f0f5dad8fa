"""Exception hierarchy for keyring core."""

from __future__ import annotations


class KeyringError(Exception):
    """Base class for all keyring core errors."""


class InvalidKeyLengthError(KeyringError, ValueError):
    """Raised when fixed-width key material has the wrong length.

    Attributes:
        kind: Name of the value type that was being constructed.
        expected: Required length in bytes.
        actual: Length that was supplied.
    """

    def __init__(self, kind: str, expected: int, actual: int) -> None:
        self.kind = kind
        self.expected = expected
        self.actual = actual
        super().__init__(f"{kind} must be exactly {expected} bytes, got {actual}")


class BackendNotImplementedError(KeyringError, NotImplementedError):
    """Raised by placeholder collaborators for every operation."""

    def __init__(self, backend: str, operation: str) -> None:
        self.backend = backend
        self.operation = operation
        super().__init__(f"{backend}: '{operation}' is not implemented")


class BackendNotFoundError(KeyringError, LookupError):
    """Raised when a requested backend is not installed."""
