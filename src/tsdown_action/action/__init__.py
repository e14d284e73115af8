"""Actions exposed to host plugin systems."""

from ._base import BaseAction
from ._protocol import Action
from ._tsdown import TOOL_NAME, TsdownAction

__all__ = ["TOOL_NAME", "Action", "BaseAction", "TsdownAction"]
