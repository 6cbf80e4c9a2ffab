"""Core runtime objects."""

from weex.core.toolbox import Toolbox

__all__ = ["Toolbox"]
