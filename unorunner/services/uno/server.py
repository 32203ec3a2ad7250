"""Wrapper for ``unoserver``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...core.models.service import ServiceDescriptor, flag_table
from .base import ServiceT, UnoService


class Unoserver(UnoService):
    """
    Launches unoserver, which starts and owns a LibreOffice instance.

    Every flag is optional and nothing is appended positionally. Without
    ``make_daemon()`` the run lasts as long as the server does.
    """

    descriptor = ServiceDescriptor(
        base_cmd="unoserver",
        flags=flag_table(
            server_interface="--interface",
            port="--port",
            uno_interface="--uno-interface",
            uno_port="--uno-port",
            daemon="--daemon",
            libreoffice_path="--executable",
            user_profile_path="--user-installation",
            pid_file="--libreoffice-pid-file",
        ),
    )

    def set_server_interface(self: ServiceT, server_interface: str) -> ServiceT:
        """Sets the interface the XML-RPC server listens on (default 127.0.0.1)."""
        return self._set("server_interface", server_interface)

    def set_port(self: ServiceT, port: str | int) -> ServiceT:
        """Sets the port of the XML-RPC server (default 2003)."""
        return self._set("port", port)

    def set_uno_interface(self: ServiceT, uno_interface: str) -> ServiceT:
        """Sets the interface LibreOffice listens on (default 127.0.0.1)."""
        return self._set("uno_interface", uno_interface)

    def set_uno_port(self: ServiceT, uno_port: str | int) -> ServiceT:
        """Sets the port LibreOffice listens on (default 2002)."""
        return self._set("uno_port", uno_port)

    def make_daemon(self: ServiceT) -> ServiceT:
        """Daemonizes unoserver."""
        return self._set("daemon", True)

    def set_libreoffice_path(self: ServiceT, libreoffice_path: str) -> ServiceT:
        """Sets the path to the LibreOffice executable."""
        return self._set("libreoffice_path", libreoffice_path)

    def set_user_profile_path(self: ServiceT, user_profile_path: str) -> ServiceT:
        """
        Sets the LibreOffice user profile directory.

        unoserver creates a temporary one when this is not set.
        """
        return self._set("user_profile_path", user_profile_path)

    def set_process_id_file(self: ServiceT, pid_file: str) -> ServiceT:
        """
        Sets the file the LibreOffice process id is written to.

        When unoserver runs as a daemon the file is left behind on exit.
        """
        return self._set("pid_file", pid_file)

    def default_options(self) -> Mapping[str, Any]:
        server = self.settings.server
        return {
            "server_interface": server.interface,
            "port": server.port,
            "uno_interface": server.uno_interface,
            "uno_port": server.uno_port,
            "libreoffice_path": server.executable,
            "user_profile_path": server.user_installation,
        }
