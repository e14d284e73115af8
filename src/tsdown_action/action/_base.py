"""Base class for actions.

Provides the logging helpers shared by all action implementations. Every
record is bound to the action's name so that it renders as
``[ActionName] message``.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from tsdown_action.utils import create_action_logger, debug_enabled

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

OptionsT = TypeVar("OptionsT")


class BaseAction(ABC, Generic[OptionsT]):
    """Base class for actions with name-prefixed logging.

    Attributes:
        name: The unique name of the action.
    """

    name: ClassVar[str]

    def __init__(
        self,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
        *,
        debug: bool | None = None,
    ) -> None:
        """Initialize the action.

        Args:
            logger: Logger to write to. When omitted, a stderr logger is
                created.
            debug: Enable debug records on the created logger. None reads
                TSDOWN_ACTION_DEBUG once, here. Ignored when ``logger`` is
                given.
        """
        if logger is None:
            if debug is None:
                debug = debug_enabled()
            logger = create_action_logger(debug=debug)
        self._logger: FilteringBoundLogger = logger.bind(action=self.name)

    @property
    def logger(self) -> "FilteringBoundLogger":  # noqa: UP037
        """Return the logger bound to this action's name."""
        return self._logger

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable description of what this action does."""

    @abstractmethod
    def validate_options(self, options: OptionsT | Mapping[str, object]) -> bool:
        """Validate the provided options before execution."""

    @abstractmethod
    async def execute(self, options: OptionsT | Mapping[str, object]) -> None:
        """Execute the action with the provided options."""

    def log_info(self, message: str) -> None:
        self._logger.info(message)

    def log_warning(self, message: str) -> None:
        self._logger.warning(message)

    def log_error(self, message: str, error: BaseException | None = None) -> None:
        """Log an error, with the exception's type and message if given."""
        if error is None:
            self._logger.error(message)
        else:
            self._logger.error(
                message, error=str(error), error_type=type(error).__name__
            )

    def log_debug(self, message: str) -> None:
        self._logger.debug(message)
