"""Options model for the tsdown action.

This module provides the TsdownOptions Pydantic model. Keys may be given in
Python snake_case or in the camelCase used by JavaScript build configs
(``outDir``, ``globalName``, ``noExternal``, ``configPath``).
"""

from collections.abc import Mapping
from typing import ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel


class TsdownOptions(BaseModel):
    """Options for the tsdown action.

    ``entry``, ``format``, ``platform`` and ``sourcemap`` are typed loosely so
    that out-of-range values reach ``validate_options`` and are reported
    there instead of failing at construction.
    ``sourcemap`` takes only real booleans, so numbers such as ``1`` are
    rejected rather than read as true.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
    )

    entry: str | tuple[str, ...] | None = Field(
        default=None, description="Entry point file(s) for the bundle."
    )
    out_dir: str | None = Field(
        default=None, description="Output directory for the bundle."
    )
    format: str | tuple[str, ...] | None = Field(
        default=None, description="Output format(s): esm, cjs or iife."
    )
    dts: bool = Field(
        default=False, description="Generate TypeScript declaration files."
    )
    minify: bool = Field(default=False, description="Minify the output.")
    sourcemap: StrictBool | str | None = Field(
        default=None, description="Generate sourcemaps: true, false or 'inline'."
    )
    clean: bool = Field(
        default=False, description="Clean the output directory before build."
    )
    external: tuple[str, ...] = Field(
        default=(), description="Packages to exclude from the bundle."
    )
    global_name: str | None = Field(
        default=None, description="Global variable name for iife output."
    )
    target: str | None = Field(default=None, description="Target environment.")
    tsconfig: str | None = Field(default=None, description="Path to tsconfig.json.")
    watch: bool = Field(default=False, description="Watch mode.")
    treeshake: bool | None = Field(
        default=None,
        description="Tree shaking. Only an explicit false changes tsdown's default.",
    )
    define: dict[str, str] = Field(
        default_factory=dict, description="Global constants to replace."
    )
    env: dict[str, str] = Field(
        default_factory=dict,
        description="Environment variables to inline. Reserved, not forwarded.",
    )
    platform: str | None = Field(
        default=None, description="Platform target: node, browser or neutral."
    )
    bundle: bool | None = Field(
        default=None,
        description="Bundle node_modules. Only an explicit false disables it.",
    )
    no_external: tuple[str, ...] = Field(
        default=(), description="Packages to force into the bundle."
    )
    cwd: str | None = Field(default=None, description="Working directory.")
    silent: bool = Field(default=False, description="Silence tsdown's output.")
    config_path: str | None = Field(
        default=None, description="Path to a tsdown config file."
    )

    @property
    def entries(self) -> tuple[str, ...]:
        """Return the entry points as a tuple."""
        if self.entry is None:
            return ()
        if isinstance(self.entry, str):
            return (self.entry,)
        return self.entry

    @property
    def formats(self) -> tuple[str, ...]:
        """Return the output formats as a tuple."""
        if self.format is None:
            return ()
        if isinstance(self.format, str):
            return (self.format,)
        return self.format

    @classmethod
    def coerce(cls, options: Self | Mapping[str, object]) -> Self:
        """Return ``options`` as a TsdownOptions instance.

        Raises:
            pydantic.ValidationError: If a mapping cannot be coerced.
        """
        if isinstance(options, cls):
            return options
        return cls.model_validate(options)


def merge_options(
    base: TsdownOptions,
    overrides: Mapping[str, object],
) -> TsdownOptions:
    """Overlay ``overrides`` (keyed by field name) on ``base``.

    Neither input is modified.

    Merge rules:
        - Mappings (``define``, ``env``) are merged key by key
        - Sequences are replaced entirely
        - Scalars are replaced with the override value

    Raises:
        pydantic.ValidationError: If the merged options are malformed.
    """
    merged: dict[str, object] = base.model_dump(exclude_unset=True)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merged[key] = {**current, **value}
        else:
            merged[key] = value
    return TsdownOptions.model_validate(merged)
