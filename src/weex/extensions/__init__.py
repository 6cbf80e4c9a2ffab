"""Built-in toolbox extensions."""

from weex.extensions import patching

# Installers run for every toolbox, in order
BUILTIN_EXTENSIONS = [patching.create]

__all__ = ["BUILTIN_EXTENSIONS", "patching"]
