"""
Protocol definitions for process execution.
"""

from typing import Protocol, runtime_checkable

from ..models.process import ExecResult, ProcessOutcome


@runtime_checkable
class IProcessRunner(Protocol):
    """Protocol for running an external executable."""

    async def stream(
        self,
        base_cmd: str,
        args: list[str],
        input_data: bytes | None = None,
    ) -> ProcessOutcome:
        """Spawn the command and capture stdout/stderr separately."""
        ...

    def execute(
        self,
        base_cmd: str,
        args: list[str],
        input_data: bytes | None = None,
    ) -> ExecResult:
        """Run the assembled command line through the shell."""
        ...
