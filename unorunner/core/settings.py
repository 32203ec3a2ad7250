"""
Pydantic Settings for unorunner configuration.

Provides settings loading from TOML files, environment variables, and defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from .exceptions import ConfigFileError, ConfigValidationError
from .models.config import ClientConfig, ExecutionConfig, LoggingConfig, ServerConfig

CONFIG_DIR_NAME = ".unorunner"
CONFIG_FILE_NAME = "config.toml"


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Find .unorunner/config.toml by walking up from start_dir (or cwd).

    A pyproject.toml with a [tool.unorunner] table also counts.

    Returns:
        Path to config file, or None if not found.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *list(start.parents)]:
        config_path = parent / CONFIG_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

        pyproject = parent / "pyproject.toml"
        if pyproject.exists():
            try:
                with open(pyproject, "rb") as f:
                    data = tomllib.load(f)
            except (tomllib.TOMLDecodeError, OSError):
                # An unrelated broken pyproject.toml must not stop the search
                continue
            if "unorunner" in data.get("tool", {}):
                return pyproject

    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """
    Read settings data from a TOML file.

    Raises:
        ConfigFileError: If the file cannot be read or parsed
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigFileError(
            "Failed to parse config file", file_path=str(path), cause=e
        ) from e
    except OSError as e:
        raise ConfigFileError("Failed to read config file", file_path=str(path), cause=e) from e

    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get("unorunner", {})
    return data


class TomlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from TOML config files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        config_path: Path | None = None,
        start_dir: str | None = None,
        discover: bool = True,
    ):
        super().__init__(settings_cls)
        self._config_path = config_path
        self._start_dir = start_dir
        self._discover = discover
        self._data: dict[str, Any] | None = None

    def _load_toml(self) -> dict[str, Any]:
        """Load and cache TOML data."""
        if self._data is not None:
            return self._data

        path = self._config_path
        if path is None and self._discover:
            path = find_config_file(self._start_dir)

        if path is None:
            self._data = {}
            return self._data

        self._data = read_config_file(path)
        return self._data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Get field value from TOML data."""
        data = self._load_toml()
        field_value = data.get(field_name)
        return field_value, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return all TOML data for settings initialization."""
        return self._load_toml()


class UnoSettings(BaseSettings):
    """unorunner settings with TOML and environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (UNORUNNER_<section>__<field>)
    3. TOML config file (.unorunner/config.toml or pyproject.toml [tool.unorunner])
    4. Model defaults
    """

    model_config = {
        "env_prefix": "UNORUNNER_",
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }

    client: ClientConfig = ClientConfig()
    server: ServerConfig = ServerConfig()
    execution: ExecutionConfig = ExecutionConfig()
    logging: LoggingConfig = LoggingConfig()

    # Internal fields (not from config)
    _config_file: str | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources to add TOML loading.

        The config path cannot be passed in here, so load_settings() hands it
        over through module-level variables.
        """
        toml_source = TomlConfigSource(
            settings_cls,
            config_path=_current_config_path,
            start_dir=_current_start_dir,
            discover=not _config_resolved,
        )
        return (
            init_settings,
            env_settings,
            toml_source,
        )

    @property
    def config_file(self) -> str | None:
        """Path of the TOML file the settings were read from, if any."""
        return self._config_file


# Module-level variables for passing to settings_customise_sources
_current_config_path: Path | None = None
_current_start_dir: str | None = None
_config_resolved = False


def load_settings(
    config_path: Path | None = None,
    start_dir: str | None = None,
    **overrides: Any,
) -> UnoSettings:
    """Load unorunner settings from config file and environment.

    Args:
        config_path: Explicit path to config file
        start_dir: Directory to start searching from (if config_path not given)
        **overrides: Explicit section values, highest priority

    Returns:
        UnoSettings instance with all sources merged

    Raises:
        ConfigFileError: If the config file cannot be read or parsed
        ConfigValidationError: If a merged value is invalid
    """
    global _current_config_path, _current_start_dir, _config_resolved

    if config_path is None:
        config_path = find_config_file(start_dir)
    _current_config_path = config_path
    _current_start_dir = start_dir
    _config_resolved = True

    try:
        try:
            settings = UnoSettings(**overrides)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(loc) for loc in first["loc"])
            raise ConfigValidationError(
                f"Invalid setting: {first['msg']}", key=key or None, cause=e
            ) from e

        if config_path is not None:
            settings._config_file = str(config_path)

        return settings
    finally:
        _current_config_path = None
        _current_start_dir = None
        _config_resolved = False
