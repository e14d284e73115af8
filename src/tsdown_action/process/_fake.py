# ruff: noqa: TC003  # Path needed at runtime for dataclass fields
"""Fake process collaborators for testing.

This module provides FakeProcessLauncher and StaticResolver, which implement
the ProcessLauncher and ExecutableResolver protocols without spawning
anything. Useful for unit testing the runner and the action, and for dry
runs from the CLI.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from tsdown_action.enums import IOMode
from tsdown_action.exceptions import ProcessSpawnError

from ._models import ExecutableReference


@dataclass(frozen=True, slots=True)
class LaunchCall:
    """A recorded call to FakeProcessLauncher.launch."""

    command: tuple[str, ...]
    cwd: Path
    io_mode: IOMode


@dataclass(slots=True)
class FakeProcessLauncher:
    """Fake launcher that records calls instead of spawning processes.

    Example:
        >>> launcher = FakeProcessLauncher(exit_code=2)
        >>> await launcher.launch(("node", "cli.mjs"), Path("/p"), IOMode.SILENT)
        2
        >>> launcher.calls[0].io_mode
        <IOMode.SILENT: 'silent'>
    """

    exit_code: int = 0
    spawn_error: OSError | None = None
    calls: list[LaunchCall] = field(default_factory=list)

    async def launch(
        self,
        command: Sequence[str],
        cwd: Path,
        io_mode: IOMode,
    ) -> int:
        self.calls.append(LaunchCall(tuple(command), cwd, io_mode))
        if self.spawn_error is not None:
            msg = f"Failed to launch '{command[0]}': {self.spawn_error}"
            raise ProcessSpawnError(
                msg, command=tuple(command), cause=self.spawn_error
            ) from self.spawn_error
        return self.exit_code

    @property
    def last_call(self) -> LaunchCall | None:
        """Return the most recent call, if any."""
        return self.calls[-1] if self.calls else None


@dataclass(slots=True)
class StaticResolver:
    """Resolver that always returns the same reference."""

    reference: ExecutableReference = field(
        default_factory=lambda: ExecutableReference(
            program="tsdown", source="custom"
        )
    )
    resolved_from: list[Path] = field(default_factory=list)

    def resolve(self, cwd: Path) -> ExecutableReference:
        self.resolved_from.append(cwd)
        return self.reference
