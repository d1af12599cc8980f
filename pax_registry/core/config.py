"""
Settings
Process-wide configuration for the registry server.

Settings are built once at startup (from CLI arguments, falling back to
environment variables and then defaults) and never change afterwards.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DIRECTORY_ENV_VAR = "PAX_REGISTRY_DIRECTORY"
PORT_ENV_VAR = "PAX_REGISTRY_PORT"
HOST_ENV_VAR = "PAX_REGISTRY_HOST"
LOG_LEVEL_ENV_VAR = "PAX_REGISTRY_LOG_LEVEL"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseModel):
    """Immutable server configuration."""

    model_config = ConfigDict(frozen=True)

    directory: Path = Field(
        default_factory=Path.cwd,
        description="Registry root holding one subdirectory per package.",
    )
    host: str = Field(default=DEFAULT_HOST, description="Interface to bind to.")
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535, description="TCP port to listen on.")
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Root logging level.")

    @field_validator("directory")
    @classmethod
    def _absolute_directory(cls, value: Path) -> Path:
        return value.expanduser().absolute()

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def from_env(cls, **overrides) -> "Settings":
        """
        Build settings from the environment.

        Priority:
        1. Explicit keyword overrides (non-None values only)
        2. PAX_REGISTRY_* environment variables
        3. Defaults (current working directory, port 8080)
        """
        values = {}
        env_directory = os.environ.get(DIRECTORY_ENV_VAR)
        if env_directory:
            values["directory"] = Path(env_directory)
        env_port = os.environ.get(PORT_ENV_VAR)
        if env_port:
            values["port"] = int(env_port)
        env_host = os.environ.get(HOST_ENV_VAR)
        if env_host:
            values["host"] = env_host
        env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
        if env_level:
            values["log_level"] = env_level

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
