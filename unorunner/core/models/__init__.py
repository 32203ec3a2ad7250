"""
Pydantic models for unorunner.

This package provides typed, validated models for settings sections,
process results and service descriptors.
"""

from .base import ImmutableModel, UnoBaseModel
from .config import (
    VALID_HOST_LOCATIONS,
    ClientConfig,
    ExecutionConfig,
    HostLocation,
    LoggingConfig,
    LogLevel,
    ServerConfig,
)
from .process import ExecResult, ProcessOutcome
from .service import UNDEFINED_SERVICE, FlagTable, ServiceDescriptor, flag_table

__all__ = [
    "UNDEFINED_SERVICE",
    "VALID_HOST_LOCATIONS",
    "ClientConfig",
    "ExecResult",
    "ExecutionConfig",
    "FlagTable",
    "HostLocation",
    "ImmutableModel",
    "LogLevel",
    "LoggingConfig",
    "ProcessOutcome",
    "ServerConfig",
    "ServiceDescriptor",
    "UnoBaseModel",
    "flag_table",
]
