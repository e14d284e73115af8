"""Command-line interface for tsdown-action."""

from ._app import app, create_app, main, parse_defines
from ._shared import ExitCode

__all__ = ["ExitCode", "app", "create_app", "main", "parse_defines"]
