"""
Core infrastructure for unorunner.

This module provides:
- Custom exception hierarchy
- Pydantic models for settings, results and service descriptors
- Settings loading from TOML and environment
- Protocol definitions for the execution services
"""

from .exceptions import (
    ConfigFileError,
    ConfigValidationError,
    ExecutableNotFoundError,
    InvalidArgumentError,
    MissingArgumentError,
    ProcessExecutionError,
    ProcessSpawnError,
    ServiceDefinitionError,
    ShellExecutionError,
    UnoConfigError,
    UnoExecutionError,
    UnoRunnerException,
    UnoValidationError,
)
from .settings import UnoSettings, find_config_file, load_settings

__all__ = [
    "ConfigFileError",
    "ConfigValidationError",
    "ExecutableNotFoundError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "ProcessExecutionError",
    "ProcessSpawnError",
    "ServiceDefinitionError",
    "ShellExecutionError",
    "UnoConfigError",
    "UnoExecutionError",
    "UnoRunnerException",
    "UnoSettings",
    "UnoValidationError",
    "find_config_file",
    "load_settings",
]
