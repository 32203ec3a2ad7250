"""Wrapper for ``unocompare``."""

from __future__ import annotations

from ...core.models.service import ServiceDescriptor, flag_table
from .base import ServiceT, UnoClientService


class Unocompare(UnoClientService):
    """
    Compares two documents through a running unoserver.

    Builds ``unocompare [flags] <old_file> <new_file> <out_file>``.
    """

    descriptor = ServiceDescriptor(
        base_cmd="unocompare",
        flags=flag_table(
            file_type="--file-type",
            host="--host",
            port="--port",
            host_location="--host-location",
        ),
        required=("old_file", "new_file", "out_file"),
        positional=("old_file", "new_file", "out_file"),
    )

    def set_file_type(self: ServiceT, file_type: str) -> ServiceT:
        """
        Sets the file type/extension of the comparison result (e.g. "pdf").

        Required when writing to stdout.
        """
        return self._set("file_type", file_type)

    def set_old_file(self: ServiceT, old_file: str) -> ServiceT:
        """Sets the path to the original document (use - for stdin)."""
        return self._set("old_file", old_file)

    def set_new_file(self: ServiceT, new_file: str) -> ServiceT:
        """Sets the path to the modified document (use - for stdin)."""
        return self._set("new_file", new_file)

    def set_out_file(self: ServiceT, out_file: str) -> ServiceT:
        """Sets the path to the comparison result (use - for stdout)."""
        return self._set("out_file", out_file)
