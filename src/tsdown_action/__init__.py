"""tsdown-action: bundle TypeScript/JavaScript with tsdown from Python.

Example:
    >>> import anyio
    >>> from tsdown_action import TsdownAction
    >>> action = TsdownAction()
    >>> anyio.run(action.execute, {"entry": "src/index.ts", "outDir": "dist"})
"""

from ._plugin import PLUGIN_NAME, Plugin, create_plugin
from .action import Action, BaseAction, TsdownAction
from .enums import IOMode, ResolverStrategy, TsdownFormat, TsdownPlatform
from .exceptions import (
    ExecutableNotFoundError,
    InvalidOptionsError,
    OptionsLoadError,
    ProcessError,
    ProcessExitError,
    ProcessSpawnError,
    TsdownActionError,
)
from .options import (
    TsdownOptions,
    build_arguments,
    load_options_file,
    merge_options,
    validate_options,
)

__version__ = "1.0.0"

__all__ = [
    "PLUGIN_NAME",
    "Action",
    "BaseAction",
    "ExecutableNotFoundError",
    "IOMode",
    "InvalidOptionsError",
    "OptionsLoadError",
    "Plugin",
    "ProcessError",
    "ProcessExitError",
    "ProcessSpawnError",
    "ResolverStrategy",
    "TsdownAction",
    "TsdownActionError",
    "TsdownFormat",
    "TsdownOptions",
    "TsdownPlatform",
    "__version__",
    "build_arguments",
    "create_plugin",
    "load_options_file",
    "merge_options",
    "validate_options",
]
