"""
Weex - plugin loading and file patching for command-line tools.

Plugins are directories of commands and extensions that are discovered
without being executed and wired into a shared toolbox on demand.
"""

from weex.core.toolbox import Toolbox
from weex.loaders.plugin_loader import load_plugin_from_directory
from weex.models import Command, Extension, Plugin

__version__ = "0.1.0"

__all__ = [
    "Command",
    "Extension",
    "Plugin",
    "Toolbox",
    "load_plugin_from_directory",
]
