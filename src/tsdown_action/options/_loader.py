# pyright: reportAny=false, reportExplicitAny=false
"""TOML options file loading."""

import tomllib
from pathlib import Path  # noqa: TC003 - Used at runtime in signatures
from typing import Any

from tsdown_action.exceptions import OptionsLoadError

from ._models import TsdownOptions

OPTIONS_TABLE = "tsdown"


def read_toml_file(path: Path) -> dict[str, Any]:
    """Read and parse a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Parsed TOML content as dictionary.

    Raises:
        OptionsLoadError: If the file cannot be read or parsed.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse TOML file: {e}"
        raise OptionsLoadError(
            msg,
            path=path,
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e
    except OSError as e:
        msg = f"Failed to read options file: {e}"
        raise OptionsLoadError(msg, path=path) from e


def load_options_file(path: Path) -> TsdownOptions:
    """Load tsdown action options from a TOML file.

    Options may sit at the top level of the file or in a ``[tsdown]`` table.
    When a ``[tsdown]`` table exists, top-level keys are ignored.

    Raises:
        OptionsLoadError: If the file cannot be read or parsed.
        pydantic.ValidationError: If the file contains unknown keys or
            values of the wrong type.
    """
    data = read_toml_file(path)
    table = data.get(OPTIONS_TABLE)
    if isinstance(table, dict):
        data = table
    return TsdownOptions.model_validate(data)
