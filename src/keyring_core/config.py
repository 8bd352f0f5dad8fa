"""Runtime configuration for keyring nodes."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_STORE_PATH = "~/.keyring/store"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class StoreConfig(BaseModel):
    """Which content store backend to use and where it keeps its data."""

    backend: str = Field(default="stub", description="Store backend name (entry point)")
    path: str = Field(default=DEFAULT_STORE_PATH, description="Store location on disk")

    def resolved_path(self) -> Path:
        return Path(self.path).expanduser()


class TransportConfig(BaseModel):
    """Transport backend selection and socket defaults."""

    backend: str = Field(default="stub", description="Transport backend name (entry point)")
    listen_port: int = Field(default=4433, ge=0, le=65535, description="Port to listen on")
    recv_timeout_ms: int = Field(default=5000, ge=0, description="Default receive timeout")


class KeyringConfig(BaseModel):
    """Top-level node configuration."""

    store: StoreConfig = Field(default_factory=StoreConfig)
    transport: TransportConfig = Field(default_factory=TransportConfig)
    log_level: LogLevel = Field(default="WARNING", description="Root logging level")

    @classmethod
    def from_file(cls, path: str | Path) -> KeyringConfig:
        """Load configuration from a JSON file."""
        return cls.model_validate_json(Path(path).read_text())
