"""
Lazy module handles.

A :class:`ModuleHandle` pairs a source file with the attribute that should be
called from it. The file is only imported on the first call, which keeps
discovery free of side effects.
"""

import hashlib
import importlib.util
import logging
import os
import sys
from types import ModuleType
from typing import Any, Callable, Optional

from weex.exceptions import ModuleLoadError

logger = logging.getLogger(__name__)


def module_name_for(path: str) -> str:
    """
    Generate a unique module name for a plugin file.

    Incorporates a hash of the directory so that files sharing a base name
    in different plugins do not collide in ``sys.modules``.
    """
    abspath = os.path.abspath(path)
    base = os.path.splitext(os.path.basename(abspath))[0]
    digest = hashlib.sha1(os.path.dirname(abspath).encode("utf-8")).hexdigest()[:8]
    return f"_weex_{base}_{digest}"


def load_module(path: str) -> ModuleType:
    """
    Import a module from a file path under an isolated name.

    Raises:
        ModuleLoadError: If the file cannot be imported
    """
    name = module_name_for(path)
    spec = importlib.util.spec_from_file_location(name, path)
    if spec is None or spec.loader is None:
        raise ModuleLoadError(f"Cannot load module from {path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(name, None)
        raise ModuleLoadError(f"Failed to import {path}: {e}") from e

    logger.debug(f"Loaded module {name} from {path}")
    return module


class ModuleHandle:
    """
    Callable handle to ``attribute`` in the module at ``file``.

    Calling the handle imports the module (once), checks that the attribute
    is callable and forwards all arguments to it.
    """

    def __init__(self, file: str, attribute: str) -> None:
        self.file = file
        self.attribute = attribute
        self._target: Optional[Callable[..., Any]] = None

    def resolve(self) -> Callable[..., Any]:
        """
        Import the module and return the target callable.

        Raises:
            ModuleLoadError: If the module cannot be imported or does not
                             define a callable ``attribute``
        """
        if self._target is not None:
            return self._target

        module = load_module(self.file)
        target = getattr(module, self.attribute, None)
        if not callable(target):
            raise ModuleLoadError(
                f"{self.file} does not define a callable '{self.attribute}'"
            )

        self._target = target
        return target

    @property
    def resolved(self) -> bool:
        """Whether the module has already been imported."""
        return self._target is not None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.resolve()(*args, **kwargs)

    def __repr__(self) -> str:
        return f"ModuleHandle({self.file!r}, {self.attribute!r})"
