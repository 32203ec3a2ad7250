"""
Configuration models.

Provides Pydantic models for unorunner settings sections with validation.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import ConfigDict, Field, field_validator

from .base import UnoBaseModel

# Type aliases
HostLocation = Literal["auto", "local", "remote"]
LogLevel = Literal["debug", "info", "warning", "error"]

VALID_HOST_LOCATIONS: tuple[str, ...] = ("auto", "local", "remote")

Port = Annotated[int, Field(ge=1, le=65535)]


class ConfigBaseModel(UnoBaseModel):
    """Base model for settings sections with relaxed strict mode for TOML/env loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env strings
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        revalidate_instances="never",
    )


class ClientConfig(ConfigBaseModel):
    """Defaults shared by the unoconvert and unocompare clients.

    Unset values are never passed to the tools, which then fall back to
    their own defaults (127.0.0.1, port 2003, host location auto).
    """

    host: str | None = None
    port: Port | None = None
    host_location: HostLocation | None = None

    @field_validator("host", mode="before")
    @classmethod
    def empty_host_is_unset(cls, v: Any) -> Any:
        """Treat an empty host as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ServerConfig(ConfigBaseModel):
    """Defaults for launching unoserver."""

    interface: str | None = None
    port: Port | None = None
    uno_interface: str | None = None
    uno_port: Port | None = None
    executable: str | None = None  # LibreOffice binary
    user_installation: str | None = None


class ExecutionConfig(ConfigBaseModel):
    """Process execution settings."""

    # Base command -> explicit executable path, e.g. {"unoconvert": "/opt/uno/bin/unoconvert"}
    executables: dict[str, str] = Field(default_factory=dict)
    surface_spawn_errors: bool = False

    @field_validator("executables")
    @classmethod
    def validate_executables(cls, v: dict[str, str]) -> dict[str, str]:
        """Reject empty executable paths."""
        for name, path in v.items():
            if not path.strip():
                raise ValueError(f"Executable path for {name!r} must not be empty")
        return v


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: str | None = None  # Optional log file path

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept upper-case level names from the environment."""
        return v.lower() if isinstance(v, str) else v
