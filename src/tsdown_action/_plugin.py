"""Plugin definition handed to host plugin systems."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from tsdown_action.action import Action, TsdownAction

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

PLUGIN_NAME = "tsdown-action"


@dataclass(frozen=True, slots=True)
class Plugin:
    """A named, versioned collection of actions.

    Attributes:
        name: Package name of the plugin.
        version: Plugin version.
        actions: Actions keyed by action name.
    """

    name: str
    version: str
    actions: Mapping[str, Action[Any]] = field(default_factory=dict)

    def get_action(self, name: str) -> Action[Any]:
        """Return the action registered under ``name``.

        Raises:
            KeyError: If no action has that name.
        """
        try:
            return self.actions[name]
        except KeyError:
            msg = f"Action '{name}' not found in plugin '{self.name}'"
            raise KeyError(msg) from None


def create_plugin(
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    *,
    debug: bool | None = None,
) -> Plugin:
    """Create the plugin definition with a fresh TsdownAction.

    Args:
        logger: Logger shared by the plugin's actions.
        debug: Enable debug records (None reads TSDOWN_ACTION_DEBUG).
    """
    from tsdown_action import __version__  # noqa: PLC0415

    action = TsdownAction(logger, debug=debug)
    return Plugin(
        name=PLUGIN_NAME,
        version=__version__,
        actions={action.name: action},
    )
