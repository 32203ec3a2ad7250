"""
Argument building for the wrapped executables.

Translates a configuration mapping into command-line tokens using a
service's flag table, then appends the service's positional arguments.
"""

import shlex
from collections.abc import Mapping
from typing import Any

from ...core.exceptions import MissingArgumentError, ServiceDefinitionError
from ...core.interfaces.logger import ILogger
from ...core.models.service import FlagTable, ServiceDescriptor
from ..logging import NullLogger


def _stringify(value: Any) -> str:
    # Tools expect lower-case booleans, e.g. --filter-option EmbedImages=true
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_flag_args(options: Mapping[str, Any], flags: FlagTable) -> list[str]:
    """
    Map configuration values to flag tokens.

    Keys are visited in the configuration's order; keys without a flag are
    skipped. ``True`` emits the bare flag, ``False`` and ``None`` emit
    nothing, a nested mapping emits ``flag key=value`` once per entry and
    any other value emits ``flag str(value)``.

    Args:
        options: Configuration key -> value
        flags: Configuration key -> command-line flag

    Returns:
        Flag tokens in emission order
    """
    args: list[str] = []
    for key, value in options.items():
        flag = flags.get(key)
        if flag is None:
            continue

        if isinstance(value, bool):
            if value:
                args.append(flag)
        elif value is None:
            continue
        elif isinstance(value, Mapping):
            for name, inner in value.items():
                args.extend([flag, f"{name}={_stringify(inner)}"])
        else:
            args.extend([flag, str(value)])
    return args


def format_command(base_cmd: str, args: list[str]) -> str:
    """Render a shell-safe command line for logging and shell execution."""
    return shlex.join([base_cmd, *args])


class CommandBuilder:
    """
    Builds the argument list for one service descriptor.

    Validation happens here rather than in the setters, so a configuration
    can be assembled in any order and is only checked once it is complete.
    """

    def __init__(self, descriptor: ServiceDescriptor, logger: ILogger | None = None) -> None:
        self._descriptor = descriptor
        self._logger = logger or NullLogger()

    @property
    def descriptor(self) -> ServiceDescriptor:
        return self._descriptor

    def validate_descriptor(self) -> None:
        """
        Ensure the descriptor names a command and defines flags.

        Raises:
            ServiceDefinitionError: If the abstract base is used directly
        """
        descriptor = self._descriptor
        if not descriptor.flags:
            raise ServiceDefinitionError(
                "Map of command arguments not defined or direct use of the base service attempted",
                service=descriptor.name,
            )
        if not descriptor.base_cmd:
            raise ServiceDefinitionError(
                "Base command not defined or direct use of the base service attempted",
                service=descriptor.name,
            )

    def validate_required(self, options: Mapping[str, Any]) -> None:
        """
        Ensure every required key is present and truthy.

        Raises:
            MissingArgumentError: Naming the first missing key
        """
        for key in self._descriptor.required:
            if not options.get(key):
                raise MissingArgumentError(f"{key} must be set and valid", argument=key)

    def build(self, options: Mapping[str, Any]) -> list[str]:
        """
        Validate and build flags followed by positional arguments.

        Args:
            options: Configuration key -> value

        Returns:
            Argument list, without the base command
        """
        self.validate_descriptor()
        self.validate_required(options)

        args = build_flag_args(options, self._descriptor.flags)
        for key in self._descriptor.positional:
            value = options.get(key)
            if not value:
                raise MissingArgumentError(f"{key} must be set and valid", argument=key)
            args.append(str(value))

        self._logger.debug("Built arguments for %s: %s", self._descriptor.base_cmd, args)
        return args
