"""Process runner for the bundler.

This module provides the ProcessRunner class that resolves the bundler
executable, launches it once with the built arguments and maps the exit
code to an outcome.
"""

import shlex
from pathlib import Path  # noqa: TC003 - Used at runtime in signatures
from typing import TYPE_CHECKING, final

from tsdown_action.enums import IOMode
from tsdown_action.exceptions import ProcessExitError

from ._launcher import AnyioProcessLauncher
from ._models import ProcessOutcome
from ._resolver import DEFAULT_PACKAGE, create_resolver

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from ._protocol import ExecutableResolver, ProcessLauncher


@final
class ProcessRunner:
    """Runs a tool once and reports a binary outcome.

    There is no retry, no timeout and no cancellation API; the run lasts
    as long as the child process does.
    """

    __slots__ = ("_launcher", "_logger", "_resolver", "tool")

    def __init__(
        self,
        resolver: "ExecutableResolver | None" = None,  # noqa: UP037
        launcher: "ProcessLauncher | None" = None,  # noqa: UP037
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
        *,
        tool: str = DEFAULT_PACKAGE,
    ) -> None:
        """Initialize the runner.

        Args:
            resolver: Locates the executable. Defaults to local-then-npx.
            launcher: Spawns the process. Defaults to AnyioProcessLauncher.
            logger: Logger for debug output of the command line.
            tool: Tool name used in messages.
        """
        self._resolver: ExecutableResolver = resolver or create_resolver(
            package=tool, logger=logger
        )
        self._launcher: ProcessLauncher = launcher or AnyioProcessLauncher()
        self._logger = logger
        self.tool = tool

    def command_for(self, arguments: tuple[str, ...], cwd: Path) -> tuple[str, ...]:
        """Return the full command line ``run`` would launch.

        Raises:
            ExecutableNotFoundError: If the resolver cannot locate the tool.
        """
        return self._resolver.resolve(cwd).command(arguments)

    async def run(
        self,
        arguments: tuple[str, ...],
        cwd: Path,
        *,
        silent: bool = False,
    ) -> ProcessOutcome:
        """Run the tool with ``arguments`` in ``cwd``.

        Args:
            arguments: Tool arguments, without the program itself.
            cwd: Working directory for the process.
            silent: Discard the process's standard streams.

        Returns:
            The outcome of a successful run.

        Raises:
            ExecutableNotFoundError: If the resolver cannot locate the tool.
            ProcessSpawnError: If the process could not be launched.
            ProcessExitError: If the process exits with a nonzero code.
        """
        reference = self._resolver.resolve(cwd)
        command = reference.command(arguments)

        if self._logger is not None:
            self._logger.debug(f"Running: {self.tool} {shlex.join(arguments)}")

        io_mode = IOMode.SILENT if silent else IOMode.INHERIT
        exit_code = await self._launcher.launch(command, cwd, io_mode)

        if exit_code != 0:
            msg = f"{self.tool} exited with code {exit_code}"
            raise ProcessExitError(msg, exit_code=exit_code, command=command)

        return ProcessOutcome(command=command, exit_code=exit_code)
