"""
Command discovery for a single file.

A command's base descriptor comes from its path; front matter then
overrides individual fields.
"""

import logging
import os
from typing import Optional, Sequence

from weex.loaders.front_matter import read_front_matter
from weex.loaders.module_loader import ModuleHandle
from weex.models import Command

logger = logging.getLogger(__name__)

# Function a command module must define
RUN_ATTRIBUTE = "run"


def name_from_file(file_path: str) -> str:
    """
    Derive an item name from its file name.

    The extension is dropped and underscores become hyphens, so
    ``new_project.py`` is exposed as ``new-project``.
    """
    stem = os.path.splitext(os.path.basename(file_path))[0]
    return stem.replace("_", "-")


def load_command_from_file(
    file_path: str,
    command_path: Optional[Sequence[str]] = None,
    hidden: bool = False,
) -> Command:
    """
    Build a Command for ``file_path`` without executing it.

    Args:
        file_path: Path to the command's source file
        command_path: Directory names between ``commands/`` and the file
        hidden: Force the command to be hidden (front matter cannot unhide it)

    Returns:
        Command whose ``run`` imports the file on first call

    Raises:
        FrontMatterError: If the file's front matter is malformed
    """
    file_path = os.path.abspath(file_path)
    front_matter = read_front_matter(file_path)

    name = front_matter.name.strip() if front_matter.name else ""
    name = name or name_from_file(file_path)

    command = Command(
        name=name,
        file=file_path,
        run=ModuleHandle(file_path, RUN_ATTRIBUTE),
        hidden=hidden or bool(front_matter.hidden),
        description=front_matter.description or "",
        aliases=tuple(front_matter.aliases),
        command_path=tuple(command_path or ()) + (name,),
    )
    logger.debug(f"Discovered command '{command.name}' at {file_path}")
    return command
