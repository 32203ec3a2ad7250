"""
Shared plumbing for the unoserver, unoconvert and unocompare wrappers.

A concrete service only declares a ``ServiceDescriptor`` and its fluent
setters. Argument building is delegated to ``CommandBuilder`` and process
handling to ``ProcessRunner``.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from ...core.exceptions import InvalidArgumentError
from ...core.interfaces.logger import ILogger
from ...core.interfaces.runner import IProcessRunner
from ...core.models.config import VALID_HOST_LOCATIONS
from ...core.models.process import ExecResult
from ...core.models.service import UNDEFINED_SERVICE, ServiceDescriptor
from ...core.settings import UnoSettings, load_settings
from ..execution.args import CommandBuilder, format_command
from ..execution.delivery import RunCallback, deliver
from ..execution.runner import ProcessRunner
from ..logging import get_service_logger

ServiceT = TypeVar("ServiceT", bound="UnoService")


class UnoService:
    """
    Fluent base for the wrapped executables.

    Not usable on its own: building or running fails with
    ServiceDefinitionError until a subclass supplies a descriptor.

    Usage:
        task = Unoconverter().set_in_file("in.docx").set_out_file("-").set_convert_to("pdf").run()
        pdf_bytes = await task
    """

    descriptor: ClassVar[ServiceDescriptor] = UNDEFINED_SERVICE

    def __init__(
        self,
        settings: UnoSettings | None = None,
        runner: IProcessRunner | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            settings: Settings to use (loaded from file/environment when omitted)
            runner: Process runner (one is built from settings when omitted)
            logger: Diagnostic logger (per-command channel when omitted)
        """
        self._settings = settings
        self._runner = runner
        self._logger = logger
        self._options: dict[str, Any] = {}
        self._run_callback: RunCallback | None = None
        self._stdin: bytes | None = None
        self._debug = False

    @property
    def settings(self) -> UnoSettings:
        """Get settings, loading them on first access."""
        if self._settings is None:
            self._settings = load_settings()
        return self._settings

    @property
    def logger(self) -> ILogger:
        """Get the injected logger or this command's diagnostic channel."""
        if self._logger is not None:
            return self._logger
        return get_service_logger(self.descriptor.name, self.settings.logging, debug=self._debug)

    @property
    def options(self) -> dict[str, Any]:
        """Copy of the options set so far, without defaults."""
        return dict(self._options)

    # -- shared setters -------------------------------------------------

    def set_run_callback(self: ServiceT, run_callback: RunCallback) -> ServiceT:
        """
        Set the function called once the process has closed.

        The callback receives ``(result, error)``: stdout bytes and None on
        success, None and the error otherwise.
        """
        self._run_callback = run_callback
        return self

    def allow_debug(self: ServiceT) -> ServiceT:
        """Print diagnostic messages for this command on stderr."""
        self._debug = True
        return self

    def set_stdin(self: ServiceT, data: bytes) -> ServiceT:
        """Bytes to feed to the process, for files given as "-"."""
        self._stdin = data
        return self

    def _set(self: ServiceT, key: str, value: Any) -> ServiceT:
        self._options[key] = value
        return self

    def _set_host_location(self: ServiceT, host_location: str) -> ServiceT:
        if host_location not in VALID_HOST_LOCATIONS:
            raise InvalidArgumentError(
                "Invalid host location",
                argument="host_location",
                value=str(host_location),
            )
        return self._set("host_location", host_location)

    # -- building -------------------------------------------------------

    def default_options(self) -> Mapping[str, Any]:
        """Settings-provided values used for keys the caller left unset."""
        return {}

    def merged_options(self) -> dict[str, Any]:
        """Options set by the caller followed by applicable defaults."""
        merged = dict(self._options)
        for key, value in self.default_options().items():
            if value is not None and key not in merged:
                merged[key] = value
        return merged

    def build_args(self, logger: ILogger | None = None) -> list[str]:
        """
        Validate the configuration and build the argument list.

        Raises:
            ServiceDefinitionError: If used without a concrete descriptor
            MissingArgumentError: If a required argument is missing
        """
        builder = CommandBuilder(self.descriptor, logger=logger or self.logger)
        return builder.build(self.merged_options())

    def command_line(self) -> str:
        """The command line that run() or execute() would launch."""
        args = self.build_args()
        return format_command(self.descriptor.base_cmd or "", args)

    def _get_runner(self, logger: ILogger) -> IProcessRunner:
        if self._runner is not None:
            return self._runner
        return ProcessRunner(executables=self.settings.execution.executables, logger=logger)

    # -- execution ------------------------------------------------------

    def run(self) -> asyncio.Task[Any]:
        """
        Spawn the command and deliver its output asynchronously.

        Must be called from a running event loop. Returns the task driving
        the run: with a run callback the task resolves to the callback's
        return value, otherwise to the stdout bytes, raising
        ProcessExecutionError if the command wrote to stderr.

        Raises:
            ServiceDefinitionError: If used without a concrete descriptor
            MissingArgumentError: If a required argument is missing
        """
        logger = self.logger
        args = self.build_args(logger)
        base_cmd = self.descriptor.base_cmd or ""
        runner = self._get_runner(logger)

        return deliver(
            runner.stream(base_cmd, args, input_data=self._stdin),
            callback=self._run_callback,
            logger=logger,
            surface_spawn_errors=self.settings.execution.surface_spawn_errors,
        )

    def execute(self) -> ExecResult:
        """
        Run the command through the shell and wait for it.

        Returns both output streams whatever the exit status.

        Raises:
            ServiceDefinitionError: If used without a concrete descriptor
            MissingArgumentError: If a required argument is missing
            ShellExecutionError: If the shell cannot be started
        """
        logger = self.logger
        args = self.build_args(logger)
        runner = self._get_runner(logger)
        return runner.execute(self.descriptor.base_cmd or "", args, input_data=self._stdin)


class UnoClientService(UnoService):
    """Setters shared by the clients that talk to a running unoserver."""

    def set_host(self: ServiceT, host: str) -> ServiceT:
        """Sets the host used by the server, defaults to "127.0.0.1"."""
        return self._set("host", host)

    def set_port(self: ServiceT, port: str | int) -> ServiceT:
        """Sets the port used by the server."""
        return self._set("port", port)

    def set_host_location(self: ServiceT, host_location: str) -> ServiceT:
        """
        Sets how files reach the server: ``auto``, ``local`` or ``remote``.

        With ``local`` files are passed as paths, so client and server must
        share a filesystem. With ``remote`` they are sent as binary data.
        ``auto`` (the tools' default) picks ``local`` for 127.0.0.1 and
        localhost and ``remote`` otherwise.

        Raises:
            InvalidArgumentError: For any other value
        """
        return self._set_host_location(host_location)

    def default_options(self) -> Mapping[str, Any]:
        client = self.settings.client
        return {
            "host": client.host,
            "port": client.port,
            "host_location": client.host_location,
        }
