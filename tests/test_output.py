"""Tests for the output formatting system.

Covers stdout/stderr discipline, quiet and verbose modes, NO_COLOR
handling, and the JSON/plain renderers used by ``config show``.
"""

from __future__ import annotations

import json

import pytest

from pokedex import output as output_module
from pokedex.output import OutputFormat, OutputManager, get_output, reset_output, set_output


@pytest.fixture
def plain() -> OutputManager:
    manager = OutputManager(format=OutputFormat.PLAIN, no_color=True)
    set_output(manager)
    return manager


class TestStreams:
    def test_data_goes_to_stdout(self, plain: OutputManager, capsys) -> None:
        output_module.print_data("area-0")
        captured = capsys.readouterr()
        assert captured.out == "area-0\n"
        assert captured.err == ""

    def test_diagnostics_go_to_stderr(self, plain: OutputManager, capsys) -> None:
        output_module.info("hello")
        output_module.error("broken")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.splitlines() == ["hello", "Error: broken"]


class TestModes:
    def test_quiet_suppresses_info_not_errors(self, capsys) -> None:
        set_output(OutputManager(format=OutputFormat.PLAIN, no_color=True, quiet=True))
        output_module.info("hidden")
        output_module.success("hidden too")
        output_module.error("shown")
        assert capsys.readouterr().err == "Error: shown\n"

    def test_debug_only_when_verbose(self, capsys) -> None:
        set_output(OutputManager(format=OutputFormat.PLAIN, no_color=True))
        output_module.debug("Cache hit for: x")
        assert capsys.readouterr().err == ""

        set_output(OutputManager(format=OutputFormat.PLAIN, no_color=True, verbose=True))
        output_module.debug("Cache hit for: x")
        assert capsys.readouterr().err == "[debug] Cache hit for: x\n"

    def test_no_color_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        assert OutputManager().format == OutputFormat.PLAIN

    def test_auto_is_plain_when_not_a_tty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("pokedex.output._is_tty", lambda: False)
        assert OutputManager(format=OutputFormat.AUTO).format == OutputFormat.PLAIN


class TestRenderers:
    def test_json_format_response(self, capsys) -> None:
        set_output(OutputManager(format=OutputFormat.JSON, no_color=True))
        output_module.format_response({"page_size": 20})
        assert json.loads(capsys.readouterr().out) == {"page_size": 20}

    def test_plain_format_response(self, plain: OutputManager, capsys) -> None:
        output_module.format_response({"base_url": "http://x", "page_size": 20})
        assert capsys.readouterr().out.splitlines() == ["base_url\thttp://x", "page_size\t20"]


class TestGlobalInstance:
    def test_reset_creates_fresh_manager(self) -> None:
        first = get_output()
        reset_output()
        assert get_output() is not first
