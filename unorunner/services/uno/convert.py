"""Wrapper for ``unoconvert``."""

from __future__ import annotations

from typing import Any

from ...core.models.service import ServiceDescriptor, flag_table
from .base import ServiceT, UnoClientService


class Unoconverter(UnoClientService):
    """
    Converts a document through a running unoserver.

    Builds ``unoconvert [flags] <in_file> <out_file>``.
    """

    descriptor = ServiceDescriptor(
        base_cmd="unoconvert",
        flags=flag_table(
            convert_to="--convert-to",
            filter="--filter",
            filter_option="--filter-option",
            host="--host",
            port="--port",
            host_location="--host-location",
        ),
        required=("in_file", "out_file"),
        positional=("in_file", "out_file"),
    )

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._options["filter_option"] = {}

    def set_convert_to(self: ServiceT, convert_to: str) -> ServiceT:
        """
        The file type/extension of the output file (e.g. "pdf").

        Required when writing to stdout.
        """
        return self._set("convert_to", convert_to)

    def set_filter(self: ServiceT, filter_name: str) -> ServiceT:
        """The export filter to use. Selected automatically when not set."""
        return self._set("filter", filter_name)

    def add_filter_option(
        self: ServiceT, option_name: str, value: str | int | float | bool
    ) -> ServiceT:
        """
        Attach an option for the export filter, passed as ``name=value``.

        May be called repeatedly; each option becomes its own
        ``--filter-option`` pair. Available options depend on the export
        filter and the LibreOffice version.
        """
        self._options["filter_option"][option_name] = value
        return self

    def set_in_file(self: ServiceT, in_file: str) -> ServiceT:
        """Sets the path to the file to be converted (use - for stdin)."""
        return self._set("in_file", in_file)

    def set_out_file(self: ServiceT, out_file: str) -> ServiceT:
        """Sets the path to the converted file (use - for stdout)."""
        return self._set("out_file", out_file)
