"""tsdown-action exceptions."""

from pathlib import Path  # noqa: TC003 - Used at runtime in attribute annotations


class TsdownActionError(Exception):
    """Base exception for tsdown-action errors."""


class InvalidOptionsError(TsdownActionError, ValueError):
    """Raised when an action is executed with options that failed validation.

    The message is deliberately generic. The specific reason is emitted
    through the action's logger during validation.
    """


class OptionsLoadError(TsdownActionError):
    """Raised when an options file cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


# =============================================================================
# Process Exceptions
# =============================================================================


class ProcessError(TsdownActionError):
    """Base exception for running the bundler process."""


class ExecutableNotFoundError(ProcessError):
    """Raised when a resolver cannot locate an executable for a tool.

    Attributes:
        tool: Name of the tool that could not be resolved.
    """

    def __init__(self, message: str, *, tool: str) -> None:
        """Initialize with error message and tool name.

        Args:
            message: Human-readable error message.
            tool: Name of the tool that could not be resolved.
        """
        super().__init__(message)
        self.tool: str = tool


class ProcessSpawnError(ProcessError):
    """Raised when the bundler process could not be launched at all.

    Attributes:
        command: The command that failed to launch.
        cause: The underlying OS error.
    """

    def __init__(
        self,
        message: str,
        *,
        command: tuple[str, ...],
        cause: OSError | None = None,
    ) -> None:
        """Initialize with error message and launch context.

        Args:
            message: Human-readable error message.
            command: The command that failed to launch.
            cause: The underlying OS error.
        """
        super().__init__(message)
        self.command: tuple[str, ...] = command
        self.cause: OSError | None = cause


class ProcessExitError(ProcessError):
    """Raised when the bundler process exits with a nonzero code.

    Attributes:
        exit_code: The process exit code.
        command: The command that was run.
    """

    def __init__(
        self,
        message: str,
        *,
        exit_code: int,
        command: tuple[str, ...] = (),
    ) -> None:
        """Initialize with error message and exit context.

        Args:
            message: Human-readable error message.
            exit_code: The process exit code.
            command: The command that was run.
        """
        super().__init__(message)
        self.exit_code: int = exit_code
        self.command: tuple[str, ...] = command
