"""
Custom exception hierarchy for unorunner.

Configuration and validation errors are raised synchronously while a command
is being configured or built. Execution errors are delivered through the
result channel (callback or task) selected by the caller.
"""

from __future__ import annotations


class UnoRunnerException(Exception):
    """
    Base exception for all unorunner errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (keys, commands, paths)
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class UnoConfigError(UnoRunnerException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(UnoConfigError):
    """
    Error reading or parsing a settings file.

    Raised for TOML parsing errors and unreadable files.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(UnoConfigError, ValueError):
    """Invalid settings value."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


class ServiceDefinitionError(UnoConfigError):
    """
    A service has no flag table or no base command.

    Raised when the abstract service base is used directly instead of
    through one of the concrete services.
    """

    def __init__(
        self,
        message: str,
        *,
        service: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if service:
            ctx["service"] = service
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Validation Errors
# =============================================================================


class UnoValidationError(UnoRunnerException, ValueError):
    """
    Base class for input validation errors.

    Inherits from ValueError so callers can catch plain ValueError.
    """

    pass


class MissingArgumentError(UnoValidationError):
    """
    A required argument is missing or empty.

    Raised when the command is built, never when a setter is called.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        super().__init__(message, context=ctx, cause=cause)
        self.argument = argument


class InvalidArgumentError(UnoValidationError):
    """
    Invalid value passed to a setter.

    Raised immediately by the setter.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Execution Errors
# =============================================================================


class UnoExecutionError(UnoRunnerException):
    """Base class for execution-related errors."""

    pass


class ProcessExecutionError(UnoExecutionError):
    """
    The external command wrote to stderr.

    Any stderr output counts as failure, whatever the exit code. The message
    is the raw stderr text, so ``str(error)`` is exactly what the tool printed.
    """

    def __init__(
        self,
        message: str,
        *,
        stdout: bytes = b"",
        stderr: bytes = b"",
        exit_code: int | None = None,
        command: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.stdout = stdout
        self.stderr = stderr
        self.exit_code = exit_code
        self.command = command


class ProcessSpawnError(UnoExecutionError):
    """
    The operating system refused to start the external command.

    Only delivered to callers when spawn errors are surfaced in settings.
    """

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if command:
            ctx["command"] = command
        super().__init__(message, context=ctx, cause=cause)


class ExecutableNotFoundError(ProcessSpawnError):
    """The external executable could not be located."""

    pass


class ShellExecutionError(UnoExecutionError):
    """
    The shell used for buffered execution could not be started.

    Raised before any output exists, so only the command line is attached.
    """

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if command:
            ctx["command"] = command
        super().__init__(message, context=ctx, cause=cause)
