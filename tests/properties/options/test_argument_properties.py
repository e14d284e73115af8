"""Property-based tests for options validation and argument building."""

import io

from hypothesis import given, strategies as st

from tsdown_action.options import (
    VALID_FORMATS,
    VALID_PLATFORMS,
    TsdownOptions,
    build_arguments,
    validate_options,
)
from tsdown_action.utils import create_action_logger

# =============================================================================
# Strategies
# =============================================================================

# Non-empty tokens without leading dashes so they never look like flags
token = st.text(
    alphabet=st.characters(whitelist_categories=["L", "N"]),
    min_size=1,
    max_size=12,
)

entries = st.one_of(token, st.lists(token, min_size=1, max_size=5).map(tuple))

valid_formats = st.lists(st.sampled_from(VALID_FORMATS), min_size=1, max_size=3)

invalid_format = token.filter(lambda value: value not in VALID_FORMATS)

packages = st.lists(token, max_size=5).map(tuple)

defines = st.dictionaries(token, token, max_size=5)

options = st.builds(
    TsdownOptions,
    entry=entries,
    out_dir=st.none() | token,
    format=st.none() | valid_formats.map(tuple),
    dts=st.booleans(),
    minify=st.booleans(),
    sourcemap=st.sampled_from([None, True, False, "inline"]),
    clean=st.booleans(),
    external=packages,
    watch=st.booleans(),
    treeshake=st.sampled_from([None, True, False]),
    define=defines,
    platform=st.none() | st.sampled_from(VALID_PLATFORMS),
    bundle=st.sampled_from([None, True, False]),
    no_external=packages,
)


def _validate(value: object) -> bool:
    logger = create_action_logger(stream=io.StringIO())
    return validate_options(value, logger)  # pyright: ignore[reportArgumentType]


# =============================================================================
# Validation Properties
# =============================================================================


@given(opts=options)
def test_generated_options_are_valid(opts: TsdownOptions) -> None:
    """Property: options drawn from the closed sets always validate."""
    assert _validate(opts) is True


@given(fmts=valid_formats, bad=invalid_format, position=st.integers(0, 3))
def test_any_unknown_format_fails(fmts: list[str], bad: str, position: int) -> None:
    """Property: one format outside the set makes the whole option invalid."""
    fmts.insert(min(position, len(fmts)), bad)
    assert _validate({"entry": "a.ts", "format": fmts}) is False


@given(opts=options)
def test_validation_is_deterministic(opts: TsdownOptions) -> None:
    """Property: validating twice gives the same answer."""
    assert _validate(opts) == _validate(opts)


# =============================================================================
# Argument Properties
# =============================================================================


@given(opts=options)
def test_build_is_deterministic(opts: TsdownOptions) -> None:
    """Property: building twice yields identical argument sequences."""
    assert build_arguments(opts) == build_arguments(opts)


@given(opts=options)
def test_entries_come_first(opts: TsdownOptions) -> None:
    """Property: arguments start with the entry points in order."""
    args = build_arguments(opts)
    assert args[: len(opts.entries)] == opts.entries


@given(opts=options)
def test_repeated_flags_match_element_counts(opts: TsdownOptions) -> None:
    """Property: external, no-external and define repeat once per element."""
    args = build_arguments(opts)

    assert args.count("--external") == len(opts.external)
    assert args.count("--no-external") == len(opts.no_external)
    assert args.count("--define") == len(opts.define)


@given(opts=options)
def test_format_flag_appears_at_most_once(opts: TsdownOptions) -> None:
    """Property: formats are joined into a single --format value."""
    args = build_arguments(opts)

    if opts.formats:
        index = args.index("--format")
        assert args[index + 1] == ",".join(opts.formats)
        assert args.count("--format") == 1
    else:
        assert "--format" not in args


@given(opts=options)
def test_boolean_flags_follow_values(opts: TsdownOptions) -> None:
    """Property: positive flags only when true, negated flags only when false."""
    args = build_arguments(opts)

    assert ("--dts" in args) is opts.dts
    assert ("--minify" in args) is opts.minify
    assert ("--clean" in args) is opts.clean
    assert ("--watch" in args) is opts.watch
    assert ("--no-treeshake" in args) is (opts.treeshake is False)
    assert ("--no-bundle" in args) is (opts.bundle is False)
    assert "--treeshake" not in args
    assert "--bundle" not in args


@given(opts=options)
def test_sourcemap_false_emits_nothing(opts: TsdownOptions) -> None:
    """Property: --sourcemap is present only for true or inline."""
    args = build_arguments(opts)
    assert ("--sourcemap" in args) is (opts.sourcemap in (True, "inline"))
