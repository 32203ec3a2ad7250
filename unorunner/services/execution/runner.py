"""
Process runner for the wrapped executables.

Two modes:
- streaming: spawn the executable directly, capture stdout and stderr
  separately and classify the run by whether stderr received anything
- buffered: run the assembled command line through the shell and hand back
  both streams as bytes, whatever the exit status
"""

import asyncio
import subprocess
import time

from ...core.exceptions import ShellExecutionError
from ...core.interfaces.logger import ILogger
from ...core.models.process import ExecResult, ProcessOutcome
from ..logging import NullLogger
from .args import format_command


class ProcessRunner:
    """
    Spawns one external command per call.

    Holds no per-run state, so a single runner can serve any number of
    concurrent invocations.
    """

    def __init__(
        self,
        executables: dict[str, str] | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize process runner.

        Args:
            executables: Base command -> executable path overrides
            logger: Diagnostic channel for command lines and spawn failures
        """
        self._executables = dict(executables or {})
        self._logger = logger or NullLogger()

    @property
    def logger(self) -> ILogger:
        return self._logger

    def resolve_executable(self, base_cmd: str) -> str:
        """Return the configured executable for base_cmd, or base_cmd itself."""
        return self._executables.get(base_cmd, base_cmd)

    async def stream(
        self,
        base_cmd: str,
        args: list[str],
        input_data: bytes | None = None,
    ) -> ProcessOutcome:
        """
        Spawn the command and wait for it to close.

        Args:
            base_cmd: Executable name
            args: Arguments after the executable
            input_data: Bytes fed to stdin (for "-" inputs); stdin is closed otherwise

        Returns:
            ProcessOutcome: ok, failed (stderr non-empty) or not_spawned
        """
        executable = self.resolve_executable(base_cmd)
        command = format_command(executable, args)
        self._logger.debug("Running command: %s", command)

        try:
            proc = await asyncio.create_subprocess_exec(
                executable,
                *args,
                stdin=subprocess.PIPE if input_data is not None else subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except FileNotFoundError as e:
            self._logger.debug("%s command not found. %r", base_cmd, e)
            return ProcessOutcome.not_spawned(command, str(e), executable_missing=True)
        except OSError as e:
            self._logger.debug("Failed to start %s: %r", base_cmd, e)
            return ProcessOutcome.not_spawned(command, str(e))

        self._logger.debug("Process started: pid=%d", proc.pid)
        start_time = time.time()
        stdout, stderr = await proc.communicate(input_data)
        duration = time.time() - start_time

        self._logger.debug(
            "%s finished with code: %s (%.2fs, stdout=%d bytes, stderr=%d bytes)",
            base_cmd,
            proc.returncode,
            duration,
            len(stdout),
            len(stderr),
        )
        self._logger.debug("Finished executing: %s", command)

        if stderr:
            self._logger.debug("stderr from %s: %s", base_cmd, stderr.decode("utf-8", "replace"))
            return ProcessOutcome.failed(
                command,
                stderr=stderr,
                stdout=stdout,
                exit_code=proc.returncode,
            )
        return ProcessOutcome.ok(command, stdout, exit_code=proc.returncode)

    def execute(
        self,
        base_cmd: str,
        args: list[str],
        input_data: bytes | None = None,
    ) -> ExecResult:
        """
        Run the assembled command line through the shell.

        Blocks until the shell exits. A non-zero exit status is not an error
        here; callers inspect ``ExecResult.exit_code`` and ``stderr``. stdin
        receives input_data when given and is /dev/null otherwise.

        Raises:
            ShellExecutionError: If the shell itself cannot be started
        """
        command = format_command(self.resolve_executable(base_cmd), args)
        self._logger.debug("Running command: %s", command)

        try:
            # Buffered mode always goes through the shell
            result = subprocess.run(
                command,
                shell=True,
                input=input_data,
                stdin=None if input_data is not None else subprocess.DEVNULL,
                capture_output=True,
            )
        except OSError as e:
            self._logger.error("Failed to run %s: %s", command, e)
            raise ShellExecutionError(
                f"Failed to run command: {e}", command=command, cause=e
            ) from e

        self._logger.debug("%s finished with code: %s", base_cmd, result.returncode)
        self._logger.debug("stdout: %s", result.stdout.decode("utf-8", "replace"))
        self._logger.debug("stderr: %s", result.stderr.decode("utf-8", "replace"))
        self._logger.debug("Finished executing: %s", command)

        return ExecResult(
            command=command,
            stdout=result.stdout,
            stderr=result.stderr,
            exit_code=result.returncode,
        )
