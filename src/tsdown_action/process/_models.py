"""Data models for running the bundler process."""

from dataclasses import dataclass
from pathlib import Path  # noqa: TC003 - Used in runtime type annotations
from typing import Literal


@dataclass(frozen=True, slots=True)
class ExecutableReference:
    """How to invoke a tool.

    Attributes:
        program: The program to execute (``node``, ``npx``, ...).
        prefix: Arguments placed before the tool's own arguments.
        source: Which resolver produced the reference.
        path: Location of the tool's script for local installations.
    """

    program: str
    prefix: tuple[str, ...] = ()
    source: Literal["local", "package-runner", "custom"] = "custom"
    path: Path | None = None

    def command(self, arguments: tuple[str, ...]) -> tuple[str, ...]:
        """Return the full command line for ``arguments``."""
        return (self.program, *self.prefix, *arguments)


@dataclass(frozen=True, slots=True)
class ProcessOutcome:
    """Result of a successful process run.

    Attributes:
        command: The command that was run.
        exit_code: The process exit code (always 0 for a returned outcome).
    """

    command: tuple[str, ...]
    exit_code: int = 0
