"""
Process execution result models.

``ProcessOutcome`` is what the streaming runner produces; ``ExecResult`` is
what buffered (shell) execution returns.
"""

from __future__ import annotations

from typing import Literal

from .base import ImmutableModel

OutcomeKind = Literal["ok", "failed", "not_spawned"]


class ProcessOutcome(ImmutableModel):
    """Result of a streamed process run.

    Exactly one of three shapes:
        - ok: the process exited without writing to stderr
        - failed: the process wrote to stderr (exit code is irrelevant)
        - not_spawned: the process never started
    """

    kind: OutcomeKind
    command: str
    stdout: bytes = b""
    stderr: bytes = b""
    exit_code: int | None = None
    reason: str | None = None
    executable_missing: bool = False

    @property
    def success(self) -> bool:
        return self.kind == "ok"

    @property
    def spawned(self) -> bool:
        return self.kind != "not_spawned"

    @property
    def error_message(self) -> str:
        """Decoded stderr for failed runs, spawn reason otherwise."""
        if self.kind == "failed":
            return self.stderr.decode("utf-8", errors="replace")
        return self.reason or ""

    @classmethod
    def ok(cls, command: str, stdout: bytes, exit_code: int | None = None) -> ProcessOutcome:
        """Create a successful outcome."""
        return cls(kind="ok", command=command, stdout=stdout, exit_code=exit_code)

    @classmethod
    def failed(
        cls,
        command: str,
        stderr: bytes,
        stdout: bytes = b"",
        exit_code: int | None = None,
    ) -> ProcessOutcome:
        """Create a failed outcome from captured stderr."""
        return cls(
            kind="failed",
            command=command,
            stdout=stdout,
            stderr=stderr,
            exit_code=exit_code,
        )

    @classmethod
    def not_spawned(
        cls,
        command: str,
        reason: str,
        executable_missing: bool = False,
    ) -> ProcessOutcome:
        """Create an outcome for a process that could not be started."""
        return cls(
            kind="not_spawned",
            command=command,
            reason=reason,
            executable_missing=executable_missing,
        )


class ExecResult(ImmutableModel):
    """Output of a buffered shell run, returned whatever the exit status."""

    command: str
    stdout: bytes
    stderr: bytes
    exit_code: int

    @property
    def succeeded(self) -> bool:
        """True when the shell reported exit status 0."""
        return self.exit_code == 0
