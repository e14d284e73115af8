"""Utilities used across tsdown-action."""

from ._logging import (
    DEBUG_ENV_VAR,
    LogFormatType,
    create_action_logger,
    debug_enabled,
    prefix_action_name,
)

__all__ = [
    "DEBUG_ENV_VAR",
    "LogFormatType",
    "create_action_logger",
    "debug_enabled",
    "prefix_action_name",
]
