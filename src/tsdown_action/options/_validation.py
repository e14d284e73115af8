"""Validation of tsdown action options.

Validation short-circuits on the first problem. The reason is emitted as an
error through the supplied logger and the caller only sees a boolean.
"""

from collections.abc import Mapping
from typing import TYPE_CHECKING

from pydantic import ValidationError

from tsdown_action.enums import TsdownFormat, TsdownPlatform

from ._models import TsdownOptions

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

VALID_FORMATS: tuple[str, ...] = tuple(fmt.value for fmt in TsdownFormat)
VALID_PLATFORMS: tuple[str, ...] = tuple(
    platform.value for platform in TsdownPlatform
)


def _format_location(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def validate_options(
    options: TsdownOptions | Mapping[str, object],
    logger: "FilteringBoundLogger",  # noqa: UP037
) -> bool:
    """Check options before anything is built or spawned.

    Args:
        options: A TsdownOptions instance or a raw mapping of options.
        logger: Logger receiving one error per rejection reason.

    Returns:
        True if the options are valid, False otherwise.
    """
    try:
        opts = TsdownOptions.coerce(options)
    except ValidationError as e:
        for error in e.errors():
            logger.error(
                f"Invalid options: '{_format_location(error['loc'])}' {error['msg']}"
            )
        return False

    if opts.entry is None or opts.entry == "":
        logger.error("Invalid options: 'entry' is required")
        return False

    if not opts.entries:  # an empty sequence
        logger.error("Invalid options: 'entry' must have at least one entry point")
        return False

    if opts.format:
        for fmt in opts.formats:
            if fmt not in VALID_FORMATS:
                logger.error(
                    "Invalid options: 'format' must be one of: "
                    + ", ".join(VALID_FORMATS)
                )
                return False

    if opts.platform and opts.platform not in VALID_PLATFORMS:
        logger.error(
            "Invalid options: 'platform' must be one of: " + ", ".join(VALID_PLATFORMS)
        )
        return False

    if (
        opts.sourcemap is not None
        and not isinstance(opts.sourcemap, bool)
        and opts.sourcemap != "inline"
    ):
        logger.error("Invalid options: 'sourcemap' must be boolean or 'inline'")
        return False

    return True
