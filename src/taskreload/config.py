"""Configuration models for taskreload."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field


class ApiConfig(BaseModel):
    """Configuration for the REST endpoint."""

    base_url: str = "http://localhost:8080"
    timeout_seconds: float = 10.0


class NotificationsConfig(BaseModel):
    """Configuration for transient notifications."""

    duration_seconds: float = 3.0


class ClientConfig(BaseModel):
    """Main configuration for taskreload."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    notifications: NotificationsConfig = Field(default_factory=NotificationsConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> ClientConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.model_dump(exclude_none=True), f, indent=2)


# Default config directory
TASKRELOAD_DIR = Path(".taskreload")
CONFIG_FILE = TASKRELOAD_DIR / "config.json"
