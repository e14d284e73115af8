"""Unit tests for the shared CLI utilities module."""

from io import StringIO

import pytest
from rich.console import Console

from tsdown_action.cli._shared import (
    ExitCode,
    exit_with_error,
    exit_with_success,
    get_error_console,
)


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=120, color_system=None), buffer


class TestExitCode:
    def test_exit_code_values_are_unique(self) -> None:
        values = [code.value for code in ExitCode]
        assert len(values) == len(set(values))

    def test_exit_code_values(self) -> None:
        assert ExitCode.SUCCESS == 0
        assert ExitCode.BUILD_FAILED == 1
        assert ExitCode.VALIDATION_ERROR == 2
        assert ExitCode.LOAD_ERROR == 3
        assert ExitCode.SPAWN_ERROR == 4


class TestExitWithError:
    def test_prints_and_exits(self) -> None:
        console, buffer = _console()

        with pytest.raises(SystemExit) as exc_info:
            exit_with_error(
                "tsdown exited with code 1", ExitCode.BUILD_FAILED, console=console
            )

        assert exc_info.value.code == ExitCode.BUILD_FAILED
        assert "Error: tsdown exited with code 1" in buffer.getvalue()

    def test_message_markup_is_escaped(self) -> None:
        console, buffer = _console()

        with pytest.raises(SystemExit):
            exit_with_error(
                "bad [bold]value[/bold]", ExitCode.VALIDATION_ERROR, console=console
            )

        assert "bad [bold]value[/bold]" in buffer.getvalue()


class TestExitWithSuccess:
    def test_without_message(self) -> None:
        console, buffer = _console()

        with pytest.raises(SystemExit) as exc_info:
            exit_with_success(console=console)

        assert exc_info.value.code == ExitCode.SUCCESS
        assert buffer.getvalue() == ""

    def test_long_command_is_not_wrapped(self) -> None:
        console, buffer = _console()
        command = "npx tsdown " + " ".join(f"src/entry{i}.ts" for i in range(20))

        with pytest.raises(SystemExit):
            exit_with_success(command, console=console)

        assert buffer.getvalue().strip() == command


def test_error_console_writes_to_stderr() -> None:
    assert get_error_console().stderr is True
