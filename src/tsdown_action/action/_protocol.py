"""Protocol for actions invoked by a host plugin system."""

from collections.abc import Mapping
from typing import Protocol, TypeVar, runtime_checkable

OptionsT = TypeVar("OptionsT")


@runtime_checkable
class Action(Protocol[OptionsT]):
    """Capability contract a host needs to run an action.

    The host only uses these four members and never introspects further.
    """

    @property
    def name(self) -> str:
        """Return the stable identifier of this action."""
        ...

    def describe(self) -> str:
        """Return a human-readable summary of what this action does."""
        ...

    def validate_options(self, options: OptionsT | Mapping[str, object]) -> bool:
        """Validate options before execution.

        Args:
            options: The options to validate.

        Returns:
            True if the options are valid, False otherwise.
        """
        ...

    async def execute(self, options: OptionsT | Mapping[str, object]) -> None:
        """Execute the action.

        Args:
            options: The options for this action.
        """
        ...
