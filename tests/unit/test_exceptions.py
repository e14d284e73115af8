"""Unit tests for the exception hierarchy."""

from pathlib import Path

import pytest

from tsdown_action.exceptions import (
    ExecutableNotFoundError,
    InvalidOptionsError,
    OptionsLoadError,
    ProcessError,
    ProcessExitError,
    ProcessSpawnError,
    TsdownActionError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_type",
        [
            InvalidOptionsError,
            OptionsLoadError,
            ProcessError,
            ExecutableNotFoundError,
            ProcessSpawnError,
            ProcessExitError,
        ],
    )
    def test_all_derive_from_base(self, error_type: type[Exception]) -> None:
        assert issubclass(error_type, TsdownActionError)

    def test_invalid_options_is_value_error(self) -> None:
        assert issubclass(InvalidOptionsError, ValueError)

    def test_exit_and_spawn_errors_are_distinct(self) -> None:
        assert not issubclass(ProcessExitError, ProcessSpawnError)
        assert not issubclass(ProcessSpawnError, ProcessExitError)


class TestContext:
    def test_options_load_error(self) -> None:
        error = OptionsLoadError("bad", path=Path("a.toml"), line=3, column=7)
        assert (error.path, error.line, error.column) == (Path("a.toml"), 3, 7)

    def test_process_exit_error(self) -> None:
        error = ProcessExitError(
            "tsdown exited with code 2", exit_code=2, command=("npx", "tsdown")
        )
        assert error.exit_code == 2
        assert error.command == ("npx", "tsdown")
        assert str(error) == "tsdown exited with code 2"

    def test_spawn_error_keeps_cause(self) -> None:
        cause = FileNotFoundError("node")
        error = ProcessSpawnError("failed", command=("node",), cause=cause)
        assert error.cause is cause
