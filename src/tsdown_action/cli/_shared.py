"""Shared CLI utilities.

This module provides:
- Standardized exit codes
- Console utilities for error handling
"""

from enum import IntEnum
from typing import Never

from rich.console import Console
from rich.markup import escape

__all__ = [
    "ExitCode",
    "exit_with_error",
    "exit_with_success",
    "get_error_console",
]


class ExitCode(IntEnum):
    """Exit codes for tsdown-action CLI commands."""

    SUCCESS = 0
    BUILD_FAILED = 1
    VALIDATION_ERROR = 2
    LOAD_ERROR = 3
    SPAWN_ERROR = 4


def get_error_console() -> Console:
    """Get a Rich console configured for error output to stderr."""
    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode,
    *,
    console: Console | None = None,
) -> Never:
    """Print an error message and exit with the specified code.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        console = get_error_console()

    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
    raise SystemExit(code)


def exit_with_success(
    message: str | None = None,
    *,
    console: Console | None = None,
) -> Never:
    """Print an optional message and exit with SUCCESS code.

    Raises:
        SystemExit: Always raised with ExitCode.SUCCESS (0).
    """
    if message is not None:
        if console is None:
            console = Console()
        console.print(message, markup=False, highlight=False, soft_wrap=True)
    raise SystemExit(ExitCode.SUCCESS)
