"""Options for the tsdown action: model, validation and argument building."""

from ._arguments import build_arguments
from ._loader import load_options_file, read_toml_file
from ._models import TsdownOptions, merge_options
from ._validation import VALID_FORMATS, VALID_PLATFORMS, validate_options

__all__ = [
    "VALID_FORMATS",
    "VALID_PLATFORMS",
    "TsdownOptions",
    "build_arguments",
    "load_options_file",
    "merge_options",
    "read_toml_file",
    "validate_options",
]
