"""
unorunner - fluent wrappers for unoserver, unoconvert and unocompare.

Builds command lines for the unoserver family of tools from a fluent
configuration and runs them as subprocesses, delivering their output via
a callback or an asyncio task.

Usage:
    from unorunner import Unoconverter

    async def to_pdf(path: str) -> bytes:
        return await (
            Unoconverter()
            .set_in_file(path)
            .set_out_file("-")
            .set_convert_to("pdf")
            .run()
        )
"""

from .core.exceptions import (
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
from .core.models import ExecResult, ProcessOutcome
from .core.settings import UnoSettings, load_settings
from .services.uno import UnoService, Unocompare, Unoconverter, Unoserver

try:
    from importlib.metadata import version

    __version__ = version("unorunner")
except Exception:
    __version__ = "0.1.0"

__all__ = [
    "ConfigFileError",
    "ConfigValidationError",
    "ExecResult",
    "ExecutableNotFoundError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "ProcessExecutionError",
    "ProcessOutcome",
    "ProcessSpawnError",
    "ServiceDefinitionError",
    "ShellExecutionError",
    "UnoConfigError",
    "UnoExecutionError",
    "UnoRunnerException",
    "UnoService",
    "UnoSettings",
    "UnoValidationError",
    "Unocompare",
    "Unoconverter",
    "Unoserver",
    "__version__",
    "load_settings",
]
