"""Toolbox helpers shared by loaders and extensions."""

from weex.toolbox import filesystem

__all__ = ["filesystem"]
