"""
Delivery of streamed process outcomes.

Turns a ``ProcessOutcome`` into either a ``(result, error)`` callback
invocation or the result/exception of an asyncio task.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from ...core.exceptions import (
    ExecutableNotFoundError,
    ProcessExecutionError,
    ProcessSpawnError,
    UnoExecutionError,
)
from ...core.interfaces.logger import ILogger
from ...core.models.process import ProcessOutcome
from ..logging import NullLogger

RunCallback = Callable[[bytes | None, UnoExecutionError | None], Any]


def outcome_error(outcome: ProcessOutcome) -> UnoExecutionError | None:
    """Build the exception matching a non-successful outcome."""
    if outcome.kind == "failed":
        return ProcessExecutionError(
            outcome.error_message,
            stdout=outcome.stdout,
            stderr=outcome.stderr,
            exit_code=outcome.exit_code,
            command=outcome.command,
        )
    if outcome.kind == "not_spawned":
        error_cls = ExecutableNotFoundError if outcome.executable_missing else ProcessSpawnError
        return error_cls(outcome.error_message, command=outcome.command)
    return None


async def settle(
    pending: Awaitable[ProcessOutcome],
    callback: RunCallback | None = None,
    logger: ILogger | None = None,
    surface_spawn_errors: bool = False,
) -> Any:
    """
    Await an outcome and deliver it.

    With a callback, the callback receives ``(stdout, None)`` or
    ``(None, error)`` and its return value is returned. Without one, stdout
    is returned or the error raised.

    A process that never started is only logged unless surface_spawn_errors
    is set; the coroutine then stays pending until cancelled.
    """
    logger = logger or NullLogger()
    outcome = await pending

    if not outcome.spawned and not surface_spawn_errors:
        logger.debug("Result not delivered, process never started: %s", outcome.reason)
        await asyncio.Event().wait()

    error = outcome_error(outcome)
    if callback is not None:
        if error is not None:
            logger.debug("%r", error)
            logger.debug("Executing run callback with error...")
            return callback(None, error)
        logger.debug("Executing run callback with result...")
        return callback(outcome.stdout, None)

    if error is not None:
        raise error
    return outcome.stdout


def deliver(
    pending: Awaitable[ProcessOutcome],
    callback: RunCallback | None = None,
    logger: ILogger | None = None,
    surface_spawn_errors: bool = False,
) -> "asyncio.Task[Any]":
    """
    Schedule delivery of an outcome on the running event loop.

    Returns immediately with the task driving the run.

    Raises:
        RuntimeError: If called outside a running event loop
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        if asyncio.iscoroutine(pending):
            pending.close()
        raise
    return loop.create_task(
        settle(
            pending,
            callback=callback,
            logger=logger,
            surface_spawn_errors=surface_spawn_errors,
        )
    )
