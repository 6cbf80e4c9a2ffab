"""
Plugin discovery from a directory.

A plugin directory looks like:

    my-plugin/
        weex.json            optional config: name, description, defaults
        commands/            command files, may be nested in subdirectories
            hello.py
            generate/
                model.py
        extensions/          extension files
            greeting.py

Missing ``commands/``, ``extensions/`` or config file are not errors; the
plugin simply has no commands, no extensions or empty defaults.
"""

import fnmatch
import json
import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from weex.config import settings
from weex.exceptions import ConfigError, PluginNotFoundError
from weex.loaders.command_loader import load_command_from_file
from weex.loaders.extension_loader import load_extension_from_file
from weex.models import Command, Extension, Plugin, PluginConfig, PluginLoadOptions
from weex.toolbox import filesystem

logger = logging.getLogger(__name__)

COMMANDS_DIR = "commands"
EXTENSIONS_DIR = "extensions"

SOURCE_SUFFIX = ".py"
TEST_FILE_PATTERNS = ("test_*.py", "*_test.py", "*.test.py", "*.spec.py")


def is_test_file(file_name: str) -> bool:
    """Check whether a file name follows a test-file naming convention."""
    return any(fnmatch.fnmatchcase(file_name, p) for p in TEST_FILE_PATTERNS)


def is_loadable_file(file_name: str, patterns: Sequence[str]) -> bool:
    """
    Check whether a file should yield a command or extension.

    Only Python sources qualify; test files and private modules
    (including ``__init__.py``) are skipped.
    """
    if not file_name.endswith(SOURCE_SUFFIX):
        return False
    if file_name.startswith("_") or is_test_file(file_name):
        return False
    return any(fnmatch.fnmatchcase(file_name, p) for p in patterns)


def _scan(
    directory: Path, patterns: Sequence[str], recursive: bool
) -> List[Tuple[Path, Tuple[str, ...]]]:
    """
    Collect loadable files under ``directory``, sorted by relative path.

    Returns:
        (file path, parent directory names relative to ``directory``) pairs
    """
    if not filesystem.is_directory(directory):
        return []

    candidates = directory.rglob("*") if recursive else directory.iterdir()
    found = []
    for path in candidates:
        if not path.is_file() or not is_loadable_file(path.name, patterns):
            continue
        relative = path.relative_to(directory)
        if any(part.startswith((".", "_")) for part in relative.parts[:-1]):
            continue
        found.append((path, relative.parts[:-1]))

    return sorted(found, key=lambda item: item[0].relative_to(directory).parts)


def load_plugin_config(directory: Path, brand: str) -> PluginConfig:
    """
    Read the plugin-level ``<brand>.json`` config file, if present.

    Raises:
        ConfigError: If the file is not valid JSON or has invalid fields
    """
    config_path = directory / f"{brand}.json"
    if not filesystem.is_file(config_path):
        logger.debug(f"No plugin config at {config_path}")
        return PluginConfig()

    try:
        data = json.loads(filesystem.read(config_path))
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in plugin config ({e})", str(config_path)
        ) from e

    if not isinstance(data, dict):
        raise ConfigError("Plugin config must be a JSON object", str(config_path))

    try:
        return PluginConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid plugin config ({e})", str(config_path)) from e


def _resolve_name(*candidates: Optional[str]) -> str:
    """Return the first candidate that is not blank."""
    for candidate in candidates:
        if candidate and candidate.strip():
            return candidate.strip()
    return ""


def load_commands(
    directory: Path, patterns: Sequence[str], hidden: bool = False
) -> List[Command]:
    """Discover the commands under ``directory/commands``."""
    return [
        load_command_from_file(str(path), command_path=parents, hidden=hidden)
        for path, parents in _scan(directory / COMMANDS_DIR, patterns, recursive=True)
    ]


def load_extensions(directory: Path, patterns: Sequence[str]) -> List[Extension]:
    """Discover the extensions under ``directory/extensions``."""
    return [
        load_extension_from_file(str(path))
        for path, _ in _scan(directory / EXTENSIONS_DIR, patterns, recursive=False)
    ]


def load_plugin_from_directory(
    directory: Union[str, Path],
    options: Union[PluginLoadOptions, Mapping[str, Any], None] = None,
) -> Plugin:
    """
    Load a plugin from a directory.

    Args:
        directory: Plugin root directory
        options: PluginLoadOptions or an equivalent mapping; recognised keys
                 include ``name`` (override the plugin name) and ``hidden``
                 (hide the plugin and all of its commands)

    Returns:
        Plugin with discovered commands, extensions and defaults

    Raises:
        PluginNotFoundError: If ``directory`` is missing or not a directory
        FrontMatterError: If a command or extension has malformed front matter
        ConfigError: If the plugin config file is malformed

    Example:
        >>> plugin = load_plugin_from_directory("plugins/demo", {"hidden": True})
        >>> [command.name for command in plugin.commands]
        ['hello', 'model']
    """
    options = PluginLoadOptions.coerce(options)
    directory = str(directory)

    if filesystem.is_not_directory(directory):
        raise PluginNotFoundError(directory)

    root = Path(directory)
    config = load_plugin_config(root, options.brand or settings.brand)

    # Base name of the path as given; symlinks are not followed
    fallback = os.path.basename(os.path.normpath(os.path.abspath(directory)))
    name = _resolve_name(options.name, config.name, fallback)

    commands = load_commands(root, options.command_file_pattern, hidden=options.hidden)
    for command in options.preloaded_commands:
        if options.hidden and not command.hidden:
            command = replace(command, hidden=True)
        commands.append(command)

    extensions = load_extensions(root, options.extension_file_pattern)

    plugin = Plugin(
        name=name,
        directory=directory,
        hidden=options.hidden,
        description=config.description or "",
        defaults={**config.defaults},
        commands=commands,
        extensions=extensions,
    )

    logger.info(
        f"Loaded plugin '{plugin.name}' from {directory}: "
        f"{len(plugin.commands)} command(s), {len(plugin.extensions)} extension(s)"
    )
    return plugin
