"""Fluent wrappers for the unoserver family of executables."""

from .base import UnoClientService, UnoService
from .compare import Unocompare
from .convert import Unoconverter
from .server import Unoserver

__all__ = [
    "UnoClientService",
    "UnoService",
    "Unocompare",
    "Unoconverter",
    "Unoserver",
]
