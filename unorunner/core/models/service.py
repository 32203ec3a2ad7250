"""
Service description models.

A ``ServiceDescriptor`` captures everything that distinguishes one wrapped
executable from another: its base command, the flag table, which
configuration keys are required and which are appended positionally.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

FlagTable = Mapping[str, str]


def flag_table(**flags: str) -> FlagTable:
    """Build a read-only flag table from keyword arguments."""
    return MappingProxyType(dict(flags))


@dataclass(frozen=True)
class ServiceDescriptor:
    """Per-executable command layout.

    Attributes:
        base_cmd: Executable name (unoserver, unoconvert or unocompare)
        flags: Configuration key -> literal command-line flag
        required: Keys that must be set and truthy before building
        positional: Keys appended after all flags, in this order
    """

    base_cmd: str | None
    flags: FlagTable = field(default_factory=lambda: MappingProxyType({}))
    required: tuple[str, ...] = ()
    positional: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.base_cmd or "<undefined>"


# Descriptor of the abstract base: no command, no flags.
UNDEFINED_SERVICE = ServiceDescriptor(base_cmd=None)
