"""
Unit tests for the Unoconverter, Unocompare and Unoserver wrappers.

Command building is tested directly; runs use a runner double so no
uno tool has to be installed.
"""

import asyncio
import sys
from unittest.mock import AsyncMock, MagicMock

import pytest

from unorunner.core.exceptions import (
    ExecutableNotFoundError,
    InvalidArgumentError,
    MissingArgumentError,
    ProcessExecutionError,
    ServiceDefinitionError,
)
from unorunner.core.models.config import ClientConfig, ExecutionConfig, ServerConfig
from unorunner.core.models.process import ExecResult, ProcessOutcome
from unorunner.core.settings import UnoSettings
from unorunner.services.uno import UnoService, Unocompare, Unoconverter, Unoserver


class TestUnoconverter:
    """Tests for Unoconverter command building."""

    def test_basic_conversion_command(self, settings):
        """in.docx to stdout as pdf."""
        converter = (
            Unoconverter(settings=settings)
            .set_in_file("in.docx")
            .set_out_file("-")
            .set_convert_to("pdf")
        )

        assert converter.command_line() == "unoconvert --convert-to pdf in.docx -"

    def test_filter_options_merge_into_repeated_flags(self, settings):
        """Each filter option becomes its own --filter-option pair."""
        converter = (
            Unoconverter(settings=settings)
            .set_in_file("in.docx")
            .set_out_file("out.pdf")
            .set_filter("writer_pdf_Export")
            .add_filter_option("PageRange", "1-2")
            .add_filter_option("EmbedStandardFonts", True)
        )

        assert converter.build_args() == [
            "--filter-option",
            "PageRange=1-2",
            "--filter-option",
            "EmbedStandardFonts=true",
            "--filter",
            "writer_pdf_Export",
            "in.docx",
            "out.pdf",
        ]

    def test_filter_option_overwrites_same_name(self, settings):
        converter = (
            Unoconverter(settings=settings)
            .set_in_file("a")
            .set_out_file("b")
            .add_filter_option("Quality", 50)
            .add_filter_option("Quality", 90)
        )

        assert converter.build_args() == ["--filter-option", "Quality=90", "a", "b"]

    def test_filter_options_are_per_instance(self, settings):
        """Options added to one converter do not leak into another."""
        Unoconverter(settings=settings).add_filter_option("Quality", 90)
        other = Unoconverter(settings=settings).set_in_file("a").set_out_file("b")

        assert other.build_args() == ["a", "b"]

    def test_missing_out_file_raises_before_spawning(self, settings, fake_runner):
        converter = Unoconverter(settings=settings, runner=fake_runner).set_in_file("in.docx")

        with pytest.raises(MissingArgumentError, match="out_file"):
            converter.build_args()
        fake_runner.stream.assert_not_called()

    def test_missing_in_file_raises(self, settings):
        with pytest.raises(MissingArgumentError, match="in_file must be set and valid"):
            Unoconverter(settings=settings).set_out_file("-").build_args()

    def test_client_flags(self, settings):
        converter = (
            Unoconverter(settings=settings)
            .set_host("10.0.0.5")
            .set_port(2003)
            .set_host_location("remote")
            .set_in_file("a.odt")
            .set_out_file("b.docx")
        )

        assert converter.build_args() == [
            "--host",
            "10.0.0.5",
            "--port",
            "2003",
            "--host-location",
            "remote",
            "a.odt",
            "b.docx",
        ]

    def test_setters_are_fluent(self, settings):
        converter = Unoconverter(settings=settings)
        assert converter.set_convert_to("pdf") is converter
        assert converter.add_filter_option("a", 1) is converter

    def test_shared_setters_keep_the_converter_type(self, settings):
        """Client and base setters return the converter so its own setters chain."""
        converter = (
            Unoconverter(settings=settings)
            .set_host("h")
            .set_stdin(b"doc")
            .set_in_file("a")
            .set_out_file("b")
        )

        assert isinstance(converter, Unoconverter)
        assert converter.build_args() == ["--host", "h", "a", "b"]


class TestUnocompare:
    """Tests for Unocompare command building."""

    def test_positional_files_only(self, settings):
        compare = (
            Unocompare(settings=settings)
            .set_old_file("a.odt")
            .set_new_file("b.odt")
            .set_out_file("out.pdf")
        )

        assert compare.command_line() == "unocompare a.odt b.odt out.pdf"

    def test_positional_order_is_old_new_out(self, settings):
        """Setting order does not change positional order."""
        compare = (
            Unocompare(settings=settings)
            .set_out_file("-")
            .set_new_file("b.odt")
            .set_file_type("pdf")
            .set_old_file("a.odt")
        )

        assert compare.build_args() == ["--file-type", "pdf", "a.odt", "b.odt", "-"]

    @pytest.mark.parametrize("missing", ["old_file", "new_file", "out_file"])
    def test_each_file_is_required(self, settings, missing):
        compare = Unocompare(settings=settings)
        values = {"old_file": "a.odt", "new_file": "b.odt", "out_file": "c.pdf"}
        for key, value in values.items():
            if key != missing:
                getattr(compare, f"set_{key}")(value)

        with pytest.raises(MissingArgumentError, match=missing):
            compare.build_args()

    def test_invalid_host_location_raises_at_set_time(self, settings):
        compare = Unocompare(settings=settings)

        with pytest.raises(InvalidArgumentError, match="Invalid host location"):
            compare.set_host_location("invalid")
        assert "host_location" not in compare.options

    @pytest.mark.parametrize("location", ["auto", "local", "remote"])
    def test_valid_host_locations(self, settings, location):
        compare = Unocompare(settings=settings).set_host_location(location)
        assert compare.options["host_location"] == location


class TestUnoserver:
    """Tests for Unoserver command building."""

    def test_no_arguments_required(self, settings):
        assert Unoserver(settings=settings).command_line() == "unoserver"

    def test_all_flags(self, settings):
        server = (
            Unoserver(settings=settings)
            .set_server_interface("0.0.0.0")
            .set_port(2003)
            .set_uno_interface("127.0.0.1")
            .set_uno_port(2002)
            .make_daemon()
            .set_libreoffice_path("/usr/bin/soffice")
            .set_user_profile_path("/tmp/profile")
            .set_process_id_file("/tmp/lo.pid")
        )

        assert server.build_args() == [
            "--interface",
            "0.0.0.0",
            "--port",
            "2003",
            "--uno-interface",
            "127.0.0.1",
            "--uno-port",
            "2002",
            "--daemon",
            "--executable",
            "/usr/bin/soffice",
            "--user-installation",
            "/tmp/profile",
            "--libreoffice-pid-file",
            "/tmp/lo.pid",
        ]


class TestSettingsDefaults:
    """Settings values fill in options the caller left unset."""

    def test_client_defaults_are_appended(self):
        settings = UnoSettings(client=ClientConfig(host="uno.internal", port=2003))
        converter = Unoconverter(settings=settings).set_in_file("a").set_out_file("b")

        assert converter.build_args() == ["--host", "uno.internal", "--port", "2003", "a", "b"]

    def test_explicit_values_win_over_defaults(self):
        settings = UnoSettings(client=ClientConfig(host="uno.internal"))
        compare = (
            Unocompare(settings=settings)
            .set_host("localhost")
            .set_old_file("a")
            .set_new_file("b")
            .set_out_file("c")
        )

        assert compare.build_args() == ["--host", "localhost", "a", "b", "c"]

    def test_server_defaults(self):
        settings = UnoSettings(server=ServerConfig(uno_port=2102, executable="/opt/lo/soffice"))

        assert Unoserver(settings=settings).build_args() == [
            "--uno-port",
            "2102",
            "--executable",
            "/opt/lo/soffice",
        ]

    def test_defaults_do_not_mutate_configuration(self):
        settings = UnoSettings(client=ClientConfig(port=2003))
        converter = Unoconverter(settings=settings).set_in_file("a").set_out_file("b")

        converter.build_args()

        assert "port" not in converter.options


class TestAbstractService:
    """Using the base class directly fails when building."""

    def test_build_fails(self, settings):
        with pytest.raises(ServiceDefinitionError):
            UnoService(settings=settings).build_args()

    def test_run_fails_synchronously(self, settings, fake_runner):
        async def main():
            UnoService(settings=settings, runner=fake_runner).run()

        with pytest.raises(ServiceDefinitionError):
            asyncio.run(main())
        fake_runner.stream.assert_not_called()


class TestRun:
    """Streaming runs through a runner double."""

    @pytest.fixture
    def converter(self, settings, fake_runner):
        return (
            Unoconverter(settings=settings, runner=fake_runner, logger=MagicMock())
            .set_in_file("-")
            .set_out_file("-")
            .set_convert_to("pdf")
        )

    def test_run_resolves_with_stdout(self, converter, fake_runner):
        async def main():
            return await converter.set_stdin(b"docx bytes").run()

        assert asyncio.run(main()) == b"output"
        fake_runner.stream.assert_called_once_with(
            "unoconvert", ["--convert-to", "pdf", "-", "-"], input_data=b"docx bytes"
        )

    def test_run_rejects_on_stderr(self, converter, fake_runner):
        fake_runner.stream = AsyncMock(
            return_value=ProcessOutcome.failed("unoconvert", stderr=b"conversion failed")
        )

        async def main():
            return await converter.run()

        with pytest.raises(ProcessExecutionError) as exc:
            asyncio.run(main())
        assert str(exc.value) == "conversion failed"

    def test_run_with_callback(self, converter):
        received = []

        async def main():
            converter.set_run_callback(lambda result, error: received.append((result, error)))
            await converter.run()

        asyncio.run(main())
        assert received == [(b"output", None)]

    def test_surfaced_spawn_error(self, fake_runner):
        settings = UnoSettings(execution=ExecutionConfig(surface_spawn_errors=True))
        fake_runner.stream = AsyncMock(
            return_value=ProcessOutcome.not_spawned("unoserver", "missing", executable_missing=True)
        )
        server = Unoserver(settings=settings, runner=fake_runner)
        errors = []

        async def main():
            await server.set_run_callback(lambda result, error: errors.append(error)).run()

        asyncio.run(main())
        assert isinstance(errors[0], ExecutableNotFoundError)


class TestRealProcess:
    """End-to-end runs with the interpreter standing in for the tool."""

    @pytest.fixture
    def python_settings(self):
        return UnoSettings(execution=ExecutionConfig(executables={"unoconvert": sys.executable}))

    def test_run_spawns_configured_executable(self, python_settings):
        converter = (
            Unoconverter(settings=python_settings)
            .set_in_file("-c")
            .set_out_file("import sys; sys.stdout.write('ok')")
        )

        async def main():
            return await converter.run()

        assert asyncio.run(main()) == b"ok"

    def test_execute_returns_exec_result(self, python_settings):
        converter = (
            Unoconverter(settings=python_settings)
            .set_in_file("-c")
            .set_out_file("import sys; print('out'); print('err', file=sys.stderr)")
        )

        result = converter.execute()

        assert isinstance(result, ExecResult)
        assert result.stdout.strip() == b"out"
        assert result.stderr.strip() == b"err"

    def test_execute_feeds_stdin(self, python_settings):
        """Data given with set_stdin reaches the tool in buffered mode too."""
        converter = (
            Unoconverter(settings=python_settings)
            .set_in_file("-c")
            .set_out_file("import sys; sys.stdout.buffer.write(sys.stdin.buffer.read())")
            .set_stdin(b"doc")
        )

        assert converter.execute().stdout == b"doc"

    def test_execute_forwards_stdin_to_runner(self, settings, fake_runner):
        converter = (
            Unoconverter(settings=settings, runner=fake_runner)
            .set_in_file("-")
            .set_out_file("-")
            .set_stdin(b"doc")
        )

        converter.execute()

        fake_runner.execute.assert_called_once_with(
            "unoconvert", ["-", "-"], input_data=b"doc"
        )
