"""The command-line interface for tsdown-action."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

import shlex
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Literal

import anyio
from cyclopts import App, Parameter
from pydantic import ValidationError
from rich.console import Console

from tsdown_action.action import TsdownAction
from tsdown_action.enums import ResolverStrategy
from tsdown_action.exceptions import (
    ExecutableNotFoundError,
    InvalidOptionsError,
    OptionsLoadError,
    ProcessExitError,
    ProcessSpawnError,
)
from tsdown_action.options import TsdownOptions, load_options_file, merge_options
from tsdown_action.process import create_resolver
from tsdown_action.utils import create_action_logger, debug_enabled

from ._shared import ExitCode, exit_with_error, exit_with_success

if TYPE_CHECKING:
    from tsdown_action.process import ProcessLauncher

APP_HELP = "Bundle TypeScript/JavaScript with tsdown."


def parse_defines(values: Iterable[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` strings into an ordered mapping.

    Raises:
        ValueError: If a value has no ``=`` or an empty key.
    """
    defines: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            msg = f"Invalid --define '{item}': expected KEY=VALUE"
            raise ValueError(msg)
        defines[key] = value
    return defines


def _parse_sourcemap(value: str) -> bool | str:
    if value == "true":
        return True
    if value == "false":
        return False
    return value


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    launcher: "ProcessLauncher | None" = None,  # noqa: UP037
) -> App:
    """Create the tsdown-action CLI application.

    Args:
        console: Console for regular output.
        error_console: Console for error output.
        launcher: Process launcher for the bundle command. Defaults to
            spawning real processes.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="tsdown-action",
        help=APP_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
    )

    @app.command(name="describe")
    def _describe() -> None:  # pyright: ignore[reportUnusedFunction]
        """Print what the tsdown action does."""
        exit_with_success(TsdownAction(debug=False).describe(), console=console)

    @app.command(name="bundle")
    def _bundle(  # noqa: C901, PLR0912, PLR0913, PLR0915  # pyright: ignore[reportUnusedFunction]
        *entries: Annotated[str, Parameter(help="Entry point file(s)")],
        options_file: Annotated[
            Path | None,
            Parameter(name="--options-file", help="TOML file with action options"),
        ] = None,
        out_dir: Annotated[
            str | None, Parameter(name="--out-dir", help="Output directory")
        ] = None,
        formats: Annotated[
            list[str] | None,
            Parameter(name="--format", negative=(), help="Output format (repeatable)"),
        ] = None,
        dts: Annotated[
            bool | None, Parameter(help="Generate declaration files")
        ] = None,
        minify: Annotated[bool | None, Parameter(help="Minify the output")] = None,
        sourcemap: Annotated[
            Literal["true", "false", "inline"] | None,
            Parameter(help="Generate sourcemaps"),
        ] = None,
        clean: Annotated[
            bool | None, Parameter(help="Clean the output directory first")
        ] = None,
        external: Annotated[
            list[str] | None,
            Parameter(negative=(), help="Package to keep external (repeatable)"),
        ] = None,
        global_name: Annotated[
            str | None, Parameter(name="--global-name", help="Global name for iife")
        ] = None,
        target: Annotated[str | None, Parameter(help="Target environment")] = None,
        tsconfig: Annotated[str | None, Parameter(help="Path to tsconfig.json")] = None,
        watch: Annotated[bool | None, Parameter(help="Watch mode")] = None,
        treeshake: Annotated[bool | None, Parameter(help="Tree shaking")] = None,
        defines: Annotated[
            list[str] | None,
            Parameter(name="--define", negative=(), help="KEY=VALUE (repeatable)"),
        ] = None,
        platform: Annotated[
            str | None, Parameter(help="Platform: node, browser or neutral")
        ] = None,
        bundle: Annotated[
            bool | None, Parameter(help="Bundle node_modules dependencies")
        ] = None,
        no_external: Annotated[
            list[str] | None,
            Parameter(
                name="--no-external",
                negative=(),
                help="Package to force into the bundle (repeatable)",
            ),
        ] = None,
        cwd: Annotated[str | None, Parameter(help="Working directory")] = None,
        silent: Annotated[
            bool | None, Parameter(help="Silence tsdown's output")
        ] = None,
        config_path: Annotated[
            str | None,
            Parameter(name="--config-path", help="Path to a tsdown config file"),
        ] = None,
        resolver: Annotated[
            ResolverStrategy,
            Parameter(help="How to locate tsdown: auto, local or package-runner"),
        ] = ResolverStrategy.AUTO,
        dry_run: Annotated[
            bool,
            Parameter(name="--dry-run", negative=(), help="Print the command only"),
        ] = False,
        debug: Annotated[
            bool, Parameter(negative=(), help="Enable debug logging")
        ] = False,
    ) -> None:
        """Bundle entry points with tsdown.

        Flags given on the command line override values from --options-file.

        Args:
            entries: Entry point file(s).
            options_file: TOML file with action options.
            out_dir: Output directory.
            formats: Output formats.
            dts: Generate declaration files.
            minify: Minify the output.
            sourcemap: Generate sourcemaps (true, false or inline).
            clean: Clean the output directory before build.
            external: Packages to keep external.
            global_name: Global variable name for iife output.
            target: Target environment.
            tsconfig: Path to tsconfig.json.
            watch: Watch mode.
            treeshake: Tree shaking.
            defines: Global constants as KEY=VALUE.
            platform: Platform target.
            bundle: Bundle node_modules dependencies.
            no_external: Packages to force into the bundle.
            cwd: Working directory.
            silent: Silence tsdown's output.
            config_path: Path to a tsdown config file.
            resolver: How to locate tsdown.
            dry_run: Print the command instead of running it.
            debug: Enable debug logging.
        """
        overrides: dict[str, object] = {}
        if entries:
            overrides["entry"] = entries
        if formats:
            overrides["format"] = tuple(formats)
        if external:
            overrides["external"] = tuple(external)
        if no_external:
            overrides["no_external"] = tuple(no_external)
        if sourcemap is not None:
            overrides["sourcemap"] = _parse_sourcemap(sourcemap)
        if defines:
            try:
                overrides["define"] = parse_defines(defines)
            except ValueError as e:
                exit_with_error(
                    str(e), ExitCode.VALIDATION_ERROR, console=error_console
                )

        scalars: dict[str, object] = {
            "out_dir": out_dir,
            "dts": dts,
            "minify": minify,
            "clean": clean,
            "global_name": global_name,
            "target": target,
            "tsconfig": tsconfig,
            "watch": watch,
            "treeshake": treeshake,
            "platform": platform,
            "bundle": bundle,
            "cwd": cwd,
            "silent": silent,
            "config_path": config_path,
        }
        overrides.update({k: v for k, v in scalars.items() if v is not None})

        try:
            base = (
                load_options_file(options_file)
                if options_file is not None
                else TsdownOptions()
            )
            options = merge_options(base, overrides)
        except OptionsLoadError as e:
            exit_with_error(str(e), ExitCode.LOAD_ERROR, console=error_console)
        except ValidationError as e:
            exit_with_error(str(e), ExitCode.VALIDATION_ERROR, console=error_console)

        logger = create_action_logger(debug=debug or debug_enabled())
        action = TsdownAction(
            logger,
            resolver=create_resolver(
                resolver, logger=logger.bind(action=TsdownAction.name)
            ),
            launcher=launcher,
        )

        if dry_run:
            try:
                command = action.command_for(options)
            except InvalidOptionsError as e:
                exit_with_error(
                    str(e), ExitCode.VALIDATION_ERROR, console=error_console
                )
            except ExecutableNotFoundError as e:
                exit_with_error(str(e), ExitCode.SPAWN_ERROR, console=error_console)
            exit_with_success(shlex.join(command), console=console)

        try:
            anyio.run(action.execute, options)
        except InvalidOptionsError as e:
            exit_with_error(str(e), ExitCode.VALIDATION_ERROR, console=error_console)
        except ProcessExitError as e:
            exit_with_error(str(e), ExitCode.BUILD_FAILED, console=error_console)
        except (ExecutableNotFoundError, ProcessSpawnError) as e:
            exit_with_error(str(e), ExitCode.SPAWN_ERROR, console=error_console)

        exit_with_success(console=console)

    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `tsdown-action` CLI."""
    app = create_app()
    app()


if __name__ == "__main__":
    main()
