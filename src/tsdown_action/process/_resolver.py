"""Executable resolution strategies.

A local installation under ``node_modules`` is preferred. This package is
installed with pip, not next to the project's npm dependencies, so the
local lookup starts at the working directory tsdown will run in and walks
up through its parents, the way Node resolves packages. When none is found,
the tool is run through a package runner (``npx tsdown``), which downloads
it on demand.
"""

import shutil
from pathlib import Path  # noqa: TC003 - Used at runtime in signatures
from typing import TYPE_CHECKING, final

from tsdown_action.enums import ResolverStrategy
from tsdown_action.exceptions import ExecutableNotFoundError

from ._models import ExecutableReference

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from ._protocol import ExecutableResolver

DEFAULT_PACKAGE = "tsdown"
DEFAULT_CLI_SCRIPT = "dist/cli.mjs"


@final
class LocalBinaryResolver:
    """Resolves a tool installed in a ``node_modules`` directory.

    Searches ``cwd`` and each of its parents, the same way Node looks up
    packages.
    """

    __slots__ = ("interpreter", "package", "script")

    def __init__(
        self,
        package: str = DEFAULT_PACKAGE,
        script: str = DEFAULT_CLI_SCRIPT,
        interpreter: str = "node",
    ) -> None:
        self.package = package
        self.script = script
        self.interpreter = interpreter

    def find_script(self, cwd: Path) -> Path | None:
        """Return the installed CLI script for the package, if any."""
        start = cwd.resolve()
        for directory in (start, *start.parents):
            candidate = directory / "node_modules" / self.package / self.script
            if candidate.is_file():
                return candidate
        return None

    def resolve(self, cwd: Path) -> ExecutableReference:
        script_path = self.find_script(cwd)
        if script_path is None:
            msg = f"No local installation of '{self.package}' found from {cwd}"
            raise ExecutableNotFoundError(msg, tool=self.package)

        return ExecutableReference(
            program=shutil.which(self.interpreter) or self.interpreter,
            prefix=(str(script_path),),
            source="local",
            path=script_path,
        )


@final
class PackageRunnerResolver:
    """Resolves a tool by name through a package runner such as ``npx``."""

    __slots__ = ("package", "runner")

    def __init__(self, package: str = DEFAULT_PACKAGE, runner: str = "npx") -> None:
        self.package = package
        self.runner = runner

    def resolve(self, cwd: Path) -> ExecutableReference:  # noqa: ARG002
        # shutil.which finds npx.cmd on Windows
        return ExecutableReference(
            program=shutil.which(self.runner) or self.runner,
            prefix=(self.package,),
            source="package-runner",
        )


@final
class FallbackResolver:
    """Tries a primary resolver and falls back to a second one.

    Only ExecutableNotFoundError from the primary triggers the fallback.
    """

    __slots__ = ("_logger", "fallback", "primary")

    def __init__(
        self,
        primary: "ExecutableResolver",  # noqa: UP037
        fallback: "ExecutableResolver",  # noqa: UP037
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        self.primary = primary
        self.fallback = fallback
        self._logger = logger

    def resolve(self, cwd: Path) -> ExecutableReference:
        try:
            return self.primary.resolve(cwd)
        except ExecutableNotFoundError as e:
            if self._logger is not None:
                self._logger.debug(f"{e}; falling back to package runner")
            return self.fallback.resolve(cwd)


def create_resolver(
    strategy: ResolverStrategy | str = ResolverStrategy.AUTO,
    *,
    package: str = DEFAULT_PACKAGE,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> "ExecutableResolver":  # noqa: UP037
    """Create an executable resolver for ``package``.

    Args:
        strategy: ``auto`` (local, then package runner), ``local`` or
            ``package-runner``.
        package: Name of the npm package providing the tool.
        logger: Optional logger for fallback diagnostics.

    Returns:
        The configured resolver.

    Raises:
        ValueError: If the strategy is unknown.
    """
    match ResolverStrategy(strategy):
        case ResolverStrategy.LOCAL:
            return LocalBinaryResolver(package)
        case ResolverStrategy.PACKAGE_RUNNER:
            return PackageRunnerResolver(package)
        case ResolverStrategy.AUTO:
            return FallbackResolver(
                LocalBinaryResolver(package),
                PackageRunnerResolver(package),
                logger,
            )
