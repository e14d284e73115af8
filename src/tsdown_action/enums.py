"""Enumeration types for tsdown-action."""

from enum import StrEnum


class TsdownFormat(StrEnum):
    """Output formats supported by tsdown."""

    ESM = "esm"
    CJS = "cjs"
    IIFE = "iife"


class TsdownPlatform(StrEnum):
    """Platforms tsdown can target."""

    NODE = "node"
    BROWSER = "browser"
    NEUTRAL = "neutral"


class IOMode(StrEnum):
    """How the child process's standard streams are connected.

    - INHERIT: stdin, stdout and stderr are the parent's own streams
    - SILENT: all three streams are discarded
    """

    INHERIT = "inherit"
    SILENT = "silent"


class ResolverStrategy(StrEnum):
    """Strategies for locating the tsdown executable."""

    AUTO = "auto"
    LOCAL = "local"
    PACKAGE_RUNNER = "package-runner"
