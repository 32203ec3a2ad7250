"""Argument building, process execution and result delivery."""

from .args import CommandBuilder, build_flag_args, format_command
from .delivery import RunCallback, deliver, outcome_error, settle
from .runner import ProcessRunner

__all__ = [
    "CommandBuilder",
    "ProcessRunner",
    "RunCallback",
    "build_flag_args",
    "deliver",
    "format_command",
    "outcome_error",
    "settle",
]
