"""
The shared toolbox.

A toolbox is created once per CLI invocation and handed to every extension's
``setup`` function, which installs a named capability on it.
"""

import logging
from typing import Any, Dict, Iterable, List

logger = logging.getLogger(__name__)


class Toolbox:
    """
    Mutable registry of named capabilities.

    Capabilities are plain attributes, so extensions may either call
    :meth:`install` or assign directly (``toolbox.hello = ...``).

    Example:
        >>> toolbox = Toolbox()
        >>> toolbox.install("greeting", "hi")
        >>> toolbox.greeting
        'hi'
    """

    def __init__(self, **capabilities: Any) -> None:
        for name, value in capabilities.items():
            self.install(name, value)

    def install(self, name: str, value: Any) -> None:
        """
        Install a capability under ``name``.

        Installing over an existing capability replaces it.
        """
        if not name.isidentifier():
            raise ValueError(f"Capability name must be an identifier: {name!r}")
        if name in self.__dict__:
            logger.debug(f"Replacing toolbox capability: {name}")
        setattr(self, name, value)

    def setup_extensions(self, extensions: Iterable[Any]) -> List[str]:
        """
        Run ``setup`` for each extension, in order.

        Returns:
            Names of the extensions that were set up
        """
        names = []
        for extension in extensions:
            extension.setup(self)
            names.append(extension.name)
            logger.debug(f"Set up extension: {extension.name}")
        return names

    def capabilities(self) -> Dict[str, Any]:
        """Snapshot of the installed capabilities."""
        return dict(self.__dict__)

    def __contains__(self, name: str) -> bool:
        return name in self.__dict__

    def __repr__(self) -> str:
        return f"Toolbox({', '.join(sorted(self.__dict__))})"
