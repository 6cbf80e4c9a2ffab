"""
Filesystem tools.

Thin wrappers over :mod:`pathlib` used by the plugin loader and the patching
extension. Paths may be given as ``str`` or ``Path``.
"""

import fnmatch
import json
import os
from pathlib import Path
from typing import Any, List, Optional, Union
from urllib.parse import urlparse

PathLike = Union[str, Path]


def is_file(path: PathLike) -> bool:
    """Check whether ``path`` is an existing regular file."""
    return bool(path) and Path(path).is_file()


def is_not_file(path: PathLike) -> bool:
    return not is_file(path)


def is_directory(path: PathLike) -> bool:
    """Check whether ``path`` is an existing directory."""
    return bool(path) and Path(path).is_dir()


def is_not_directory(path: PathLike) -> bool:
    return not is_directory(path)


def exists(path: PathLike) -> Optional[str]:
    """
    Report what kind of entry lives at ``path``.

    Returns:
        "file", "dir", "other" or None if nothing exists there
    """
    if not path:
        return None
    target = Path(path)
    if target.is_file():
        return "file"
    if target.is_dir():
        return "dir"
    if target.exists():
        return "other"
    return None


def list_dir(path: PathLike) -> Optional[List[str]]:
    """
    List the entry names in a directory, sorted.

    Returns:
        Sorted entry names, or None if ``path`` is not a directory
    """
    if not is_directory(path):
        return None
    return sorted(entry.name for entry in Path(path).iterdir())


def read(path: PathLike, encoding: str = "utf-8") -> str:
    """
    Read a file as text.

    Line endings are returned as stored, so a read followed by a write
    leaves CRLF files untouched.

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the file cannot be read
    """
    with open(path, encoding=encoding, newline="") as f:
        return f.read()


def write(path: PathLike, content: Any, encoding: str = "utf-8") -> None:
    """
    Write text (or a JSON-serializable mapping/list) to ``path``.

    Parent directories are created as needed. Mappings and lists are written
    as 2-space indented JSON in insertion order.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, (dict, list)):
        content = json.dumps(content, indent=2, ensure_ascii=False)
    # newline="" keeps line endings exactly as given
    with open(target, "w", encoding=encoding, newline="") as f:
        f.write(content)


def subdirectories(
    path: PathLike, relative: bool = False, pattern: str = ""
) -> List[str]:
    """
    List the immediate subdirectories of ``path``.

    Args:
        path: Directory to scan
        relative: Return names instead of full paths
        pattern: Optional glob matched against each subdirectory name

    Returns:
        Sorted subdirectory paths (or names); empty if ``path`` is blank or
        not a directory
    """
    if not is_directory(path):
        return []

    names = sorted(entry.name for entry in Path(path).iterdir() if entry.is_dir())
    if pattern:
        names = [name for name in names if fnmatch.fnmatchcase(name, pattern)]

    if relative:
        return names
    return [os.path.join(str(path), name) for name in names]


def is_local_path(path: str) -> bool:
    """Check that ``path`` is a filesystem path rather than a URL."""
    parsed = urlparse(path)
    # Single letters are Windows drive letters, not schemes
    return len(parsed.scheme) <= 1


def get_absolute_path(path: PathLike) -> str:
    """Resolve ``path`` against the current working directory."""
    if os.path.isabs(path):
        return str(path)
    return os.path.normpath(os.path.join(os.getcwd(), str(path)))
