"""Service interfaces for unorunner."""

from .logger import ILogger
from .runner import IProcessRunner

__all__ = [
    "ILogger",
    "IProcessRunner",
]
