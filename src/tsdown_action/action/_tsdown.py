"""Action for bundling TypeScript/JavaScript with tsdown."""

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, final

from tsdown_action.exceptions import InvalidOptionsError
from tsdown_action.options import TsdownOptions, build_arguments, validate_options
from tsdown_action.process import ProcessRunner

from ._base import BaseAction

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from tsdown_action.process import (
        ExecutableResolver,
        ProcessLauncher,
        ProcessOutcome,
    )

TOOL_NAME = "tsdown"


@final
class TsdownAction(BaseAction[TsdownOptions]):
    """Bundles TypeScript/JavaScript by running tsdown (Rolldown-based bundler).

    Options are validated, translated into tsdown CLI arguments and passed to
    a single tsdown process. The action holds no state between calls, so
    concurrent ``execute`` calls are independent.
    """

    name = "TsdownAction"

    def __init__(
        self,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
        *,
        debug: bool | None = None,
        resolver: "ExecutableResolver | None" = None,  # noqa: UP037
        launcher: "ProcessLauncher | None" = None,  # noqa: UP037
    ) -> None:
        """Initialize the action.

        Args:
            logger: Logger to write to. Defaults to a stderr logger.
            debug: Enable debug records (None reads TSDOWN_ACTION_DEBUG).
            resolver: Locates tsdown. Defaults to local install, then npx.
            launcher: Spawns tsdown. Defaults to AnyioProcessLauncher.
        """
        super().__init__(logger, debug=debug)
        self._runner = ProcessRunner(
            resolver,
            launcher,
            self.logger,
            tool=TOOL_NAME,
        )

    def describe(self) -> str:
        return (
            "Bundle TypeScript/JavaScript files using tsdown (Rolldown-based bundler)"
        )

    def validate_options(self, options: TsdownOptions | Mapping[str, object]) -> bool:
        """Validate options, logging the first problem found."""
        return validate_options(options, self.logger)

    def build_arguments(
        self, options: TsdownOptions | Mapping[str, object]
    ) -> tuple[str, ...]:
        """Return the tsdown arguments for already validated options."""
        return build_arguments(TsdownOptions.coerce(options))

    def _checked_options(
        self, options: TsdownOptions | Mapping[str, object]
    ) -> TsdownOptions:
        if not self.validate_options(options):
            msg = f"Invalid options provided to {self.name}"
            raise InvalidOptionsError(msg)
        return TsdownOptions.coerce(options)

    def command_for(
        self, options: TsdownOptions | Mapping[str, object]
    ) -> tuple[str, ...]:
        """Return the full command ``execute`` would run, without running it.

        Raises:
            InvalidOptionsError: If the options fail validation.
            ExecutableNotFoundError: If tsdown cannot be located.
        """
        opts = self._checked_options(options)
        return self._runner.command_for(build_arguments(opts), _working_dir(opts))

    async def execute(self, options: TsdownOptions | Mapping[str, object]) -> None:
        """Bundle with tsdown.

        Raises:
            InvalidOptionsError: If the options fail validation. Nothing is
                spawned in that case.
            ExecutableNotFoundError: If tsdown cannot be located.
            ProcessSpawnError: If tsdown could not be launched.
            ProcessExitError: If tsdown exits with a nonzero code.
        """
        opts = self._checked_options(options)
        args = build_arguments(opts)
        cwd = _working_dir(opts)

        self.log_info(f"Bundling {len(opts.entries)} entry point(s) with tsdown")
        if opts.env:
            self.log_warning("'env' is not supported yet and will not be forwarded")

        try:
            outcome: ProcessOutcome = await self._runner.run(
                args, cwd, silent=opts.silent
            )
        except Exception as e:
            self.log_error("tsdown bundling failed.", e)
            raise

        self.log_debug(f"tsdown exited with code {outcome.exit_code}")
        self.log_info("Bundle completed successfully")


def _working_dir(options: TsdownOptions) -> Path:
    return Path(options.cwd) if options.cwd else Path.cwd()
