"""Translation of tsdown action options into tsdown CLI arguments.

Arguments are appended in a fixed order that mirrors tsdown's flag grammar.
Callers must validate options first; the builder assumes validated shapes.
"""

from ._models import TsdownOptions


def build_arguments(options: TsdownOptions) -> tuple[str, ...]:
    """Build tsdown CLI arguments from validated options.

    Entry points come first as positional arguments. ``format`` is joined
    into a single comma-separated value while ``external``, ``define`` and
    ``no_external`` repeat their flag once per element.

    Args:
        options: Options that passed ``validate_options``.

    Returns:
        The ordered argument tokens.
    """
    args: list[str] = []

    args.extend(options.entries)

    if options.config_path:
        args.extend(("--config", options.config_path))

    if options.out_dir:
        args.extend(("--out-dir", options.out_dir))

    if options.formats:
        args.extend(("--format", ",".join(options.formats)))

    if options.dts:
        args.append("--dts")

    if options.minify:
        args.append("--minify")

    if options.sourcemap is True:
        args.append("--sourcemap")
    elif options.sourcemap == "inline":
        args.extend(("--sourcemap", "inline"))

    if options.clean:
        args.append("--clean")

    for package in options.external:
        args.extend(("--external", package))

    if options.global_name:
        args.extend(("--global-name", options.global_name))

    if options.target:
        args.extend(("--target", options.target))

    if options.tsconfig:
        args.extend(("--tsconfig", options.tsconfig))

    if options.watch:
        args.append("--watch")

    # Tree shaking and bundling are on by default in tsdown
    if options.treeshake is False:
        args.append("--no-treeshake")

    for key, value in options.define.items():
        args.extend(("--define", f"{key}={value}"))

    if options.platform:
        args.extend(("--platform", options.platform))

    if options.bundle is False:
        args.append("--no-bundle")

    for package in options.no_external:
        args.extend(("--no-external", package))

    return tuple(args)
