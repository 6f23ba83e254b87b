"""Tests for the getopty console command."""

from __future__ import annotations

import io
import sys

import pytest

from getopty import ListTokenSource
from getopty.cli import ClassifyCommand
from getopty.cli import main


def run(*args: str) -> tuple[int, str, str]:
    stdout, stderr = io.StringIO(), io.StringIO()
    command = ClassifyCommand(stdout=stdout, stderr=stderr)
    status = command.execute(ListTokenSource(list(args), program="/bin/getopty"))
    return status, stdout.getvalue(), stderr.getvalue()


class TestClassify:
    def test_clean_classification(self) -> None:
        status, out, err = run("-s", "ab:", "--long=foo", "-L", "out", "--", "-abx", "--foo", "--out=f", "y")
        assert status == 0
        assert err == ""
        assert out.splitlines() == [
            "option '-a'",
            "option '-b' with value 'x'",
            "option '--foo'",
            "option '--out' with value 'f'",
            "arguments ['y']",
        ]

    def test_errors_go_to_stderr(self) -> None:
        status, out, err = run("-s", "a", "--", "-ax", "--nope", "arg")
        assert status == 1
        assert out.splitlines() == ["option '-a'", "arguments ['arg']"]
        assert err.splitlines() == [
            "getopty: invalid option -- 'x'",
            "getopty: invalid option -- 'nope'",
        ]

    def test_no_tokens(self) -> None:
        assert run("-s", "a") == (0, "", "")

    def test_long_arg_also_declared_as_long(self) -> None:
        status, out, _ = run("-l", "out", "-L", "out", "--", "--out=1")
        assert status == 0
        assert out == "option '--out' with value '1'\n"


class TestUsageErrors:
    def test_unknown_own_option(self) -> None:
        status, out, err = run("-q")
        assert status == 2
        assert out == ""
        lines = err.splitlines()
        assert lines[0] == "getopty: invalid option -- 'q'"
        assert lines[1].startswith("Usage: getopty [-hv]")

    def test_missing_own_value(self) -> None:
        status, _, err = run("-s")
        assert status == 2
        assert err.startswith("getopty: option requires an argument -- 's'\n")

    def test_invalid_spec(self) -> None:
        status, _, err = run("-s", "a::")
        assert status == 2
        assert err.startswith("getopty: invalid short option string 'a::'")

    def test_conflicting_long_options(self) -> None:
        status, _, err = run("-l", "foo", "-l", "foo")
        assert status == 2
        assert err.startswith("getopty: option --foo: declared twice\n")


class TestHelp:
    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help(self, flag: str) -> None:
        status, out, err = run(flag, "-q")
        assert status == 0
        assert err == ""
        assert out.startswith("Usage: getopty ")
        assert "--long-arg=NAME" in out


class TestMain:
    def test_main_reads_process_argv(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(sys, "argv", ["getopty", "-s", "d", "--", "-d"])
        assert main() == 0
        assert capsys.readouterr().out == "option '-d'\n"

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def interrupted(self, source):
            raise KeyboardInterrupt

        monkeypatch.setattr(ClassifyCommand, "handle", interrupted)
        assert main(ListTokenSource([])) == 1
