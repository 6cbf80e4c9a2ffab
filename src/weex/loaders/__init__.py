"""
Plugin discovery.

Turns a plugin directory into a :class:`weex.models.Plugin` without
executing any of its command or extension files.
"""

from weex.loaders.command_loader import load_command_from_file
from weex.loaders.extension_loader import load_extension_from_file
from weex.loaders.plugin_loader import load_plugin_from_directory

__all__ = [
    "load_command_from_file",
    "load_extension_from_file",
    "load_plugin_from_directory",
]
