"""Protocol definitions for process execution.

This module defines the ports that decouple the process runner from how an
executable is located and how a child process is spawned:
- ExecutableResolver: Locates an executable reference for a tool
- ProcessLauncher: Spawns a command and waits for its exit code
"""

from collections.abc import Sequence
from pathlib import Path  # noqa: TC003 - Used at runtime in protocol signatures
from typing import Protocol, runtime_checkable

from tsdown_action.enums import IOMode  # noqa: TC001

from ._models import ExecutableReference  # noqa: TC001


@runtime_checkable
class ExecutableResolver(Protocol):
    """Protocol for locating the executable of a tool."""

    def resolve(self, cwd: Path) -> ExecutableReference:
        """Resolve an executable reference.

        Args:
            cwd: Working directory the tool will run in.

        Returns:
            The executable reference.

        Raises:
            ExecutableNotFoundError: If the tool cannot be located.
        """
        ...


@runtime_checkable
class ProcessLauncher(Protocol):
    """Protocol for spawning a child process.

    Implementations launch exactly one process per call and wait for it to
    exit. Launch failures raise; exit codes are returned.
    """

    async def launch(
        self,
        command: Sequence[str],
        cwd: Path,
        io_mode: IOMode,
    ) -> int:
        """Launch ``command`` and wait for it to finish.

        Args:
            command: Program followed by its arguments.
            cwd: Working directory for the process.
            io_mode: Whether to inherit or discard standard streams.

        Returns:
            The process exit code.

        Raises:
            ProcessSpawnError: If the process could not be launched.
        """
        ...
