"""Logging utilities for tsdown-action.

This module provides a standalone structlog logger factory for actions. The
logger writes text or JSON records to a stream (stderr by default) and does
not modify global structlog configuration.
"""

import logging
import sys
from os import getenv
from typing import TYPE_CHECKING, Literal, TextIO, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import EventDict, FilteringBoundLogger, WrappedLogger

LogFormatType = Literal["json", "text"]

DEBUG_ENV_VAR = "TSDOWN_ACTION_DEBUG"


def debug_enabled() -> bool:
    """Return whether debug logging is requested through the environment.

    Any non-empty value of TSDOWN_ACTION_DEBUG enables debug logging.
    """
    return bool(getenv(DEBUG_ENV_VAR, None))


def _log_level_from_string(level: str, *, debug: bool = False) -> int:
    """Convert a log level string to a logging level integer.

    Args:
        level: Log level string (debug, info, warning, error).
        debug: If True, overrides the level to DEBUG.

    Returns:
        The logging level as an integer.
    """
    if debug:
        return logging.DEBUG

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.INFO)


def prefix_action_name(
    logger: "WrappedLogger",  # noqa: UP037  # pyright: ignore[reportUnusedParameter]
    method_name: str,  # pyright: ignore[reportUnusedParameter]
    event_dict: "EventDict",  # noqa: UP037
) -> "EventDict":  # noqa: UP037
    """Move a bound ``action`` key into a ``[name]`` prefix on the event."""
    action = event_dict.pop("action", None)
    if action:
        event_dict["event"] = f"[{action}] {event_dict.get('event', '')}"
    return event_dict


def create_action_logger(
    *,
    debug: bool = False,
    level: str = "info",
    log_format: LogFormatType = "text",
    stream: TextIO | None = None,
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger for actions.

    Args:
        debug: Enable DEBUG level regardless of ``level``.
        level: Log level threshold (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        stream: Stream to write to. Defaults to stderr.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    effective_level = _log_level_from_string(level, debug=debug)

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        prefix_action_name,
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Text format: "timestamp [level] [Action] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    wrapper_class = structlog.make_filtering_bound_logger(effective_level)
    raw_logger = structlog.PrintLogger(
        file=stream if stream is not None else sys.stderr
    )

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            raw_logger,
            processors=processors,
            wrapper_class=wrapper_class,
            context_class=dict,
        ),
    )
