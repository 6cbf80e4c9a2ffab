"""Extension discovery for a single file."""

import logging
import os

from weex.loaders.command_loader import name_from_file
from weex.loaders.front_matter import read_front_matter
from weex.loaders.module_loader import ModuleHandle
from weex.models import Extension

logger = logging.getLogger(__name__)

# Function an extension module must define; it receives the toolbox
SETUP_ATTRIBUTE = "setup"


def load_extension_from_file(file_path: str) -> Extension:
    """
    Build an Extension for ``file_path`` without executing it.

    Raises:
        FrontMatterError: If the file's front matter is malformed
    """
    file_path = os.path.abspath(file_path)
    front_matter = read_front_matter(file_path)

    name = front_matter.name.strip() if front_matter.name else ""

    extension = Extension(
        name=name or name_from_file(file_path),
        file=file_path,
        setup=ModuleHandle(file_path, SETUP_ATTRIBUTE),
        description=front_matter.description or "",
    )
    logger.debug(f"Discovered extension '{extension.name}' at {file_path}")
    return extension
