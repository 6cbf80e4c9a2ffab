"""
Patching extension.

Read-transform-write helpers for text and JSON files, installed on the
toolbox as ``toolbox.patching``. Every mutating operation reads the whole
file, computes the new content in memory and overwrites the file.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Callable, Mapping, Pattern, Union

from weex.exceptions import ParseError
from weex.models import PatchSpec
from weex.toolbox import filesystem

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
Matcher = Union[str, Pattern[str]]

# File suffixes parsed into Python objects before calling an update transform
STRUCTURED_SUFFIXES = {".json"}


def is_structured(path: PathLike) -> bool:
    """Check whether ``path`` holds structured (JSON) content."""
    return Path(path).suffix.lower() in STRUCTURED_SUFFIXES


def _load(path: PathLike) -> Any:
    content = filesystem.read(path)
    if not is_structured(path):
        return content
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON ({e})", str(path)) from e


def _dump(path: PathLike, value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        # An in-place mutation that forgot to return would write "null"
        raise TypeError(f"Transform for {path} returned None")
    if is_structured(path):
        return json.dumps(value, indent=2, ensure_ascii=False)
    raise TypeError(
        f"Transform for text file {path} must return str, "
        f"got {type(value).__name__}"
    )


def _splice(content: str, target: str, replacement: str) -> str:
    """Replace the first occurrence of ``target``; unchanged if absent."""
    return content.replace(target, replacement, 1)


def exists(path: PathLike, matcher: Matcher) -> bool:
    """
    Check whether a file contains a substring or pattern.

    Args:
        path: File to search
        matcher: Literal substring, or a compiled regular expression (flags
                 such as ``re.IGNORECASE`` are taken from the pattern)

    Returns:
        True if the matcher is found anywhere in the file
    """
    content = filesystem.read(path)
    if isinstance(matcher, re.Pattern):
        return matcher.search(content) is not None
    return matcher in content


def update(path: PathLike, transform: Callable[[Any], Any]) -> Any:
    """
    Transform a file's content and write the result back.

    JSON files are parsed before ``transform`` is called and the returned
    value is written as 2-space indented JSON in insertion order. Other
    files are passed as text and ``transform`` must return text. A
    transform that returns None is rejected; mutate and return the object.

    Returns:
        The value returned by ``transform``, or False if it returned False
        (the file is then left untouched)

    Raises:
        FileNotFoundError: If the file does not exist
        ParseError: If a JSON file cannot be parsed
        TypeError: If ``transform`` returns None, or a non-string for a text
                   file
    """
    current = _load(path)
    updated = transform(current)

    if updated is False:
        logger.debug(f"Update of {path} cancelled")
        return False

    filesystem.write(path, _dump(path, updated))
    logger.debug(f"Updated {path}")
    return updated


def _rewrite(path: PathLike, transform: Callable[[str], str]) -> str:
    """Like update, but always on raw text and without a cancel path."""
    updated = transform(filesystem.read(path))
    filesystem.write(path, updated)
    logger.debug(f"Rewrote {path}")
    return updated


def prepend(path: PathLike, text: str) -> str:
    """Insert ``text`` at the start of a file."""
    return _rewrite(path, lambda content: text + content)


def append(path: PathLike, text: str) -> str:
    """Add ``text`` to the end of a file."""
    return _rewrite(path, lambda content: content + text)


def replace(path: PathLike, search: str, replacement: str) -> str:
    """
    Replace the first occurrence of ``search`` in a file.

    The file is rewritten even when ``search`` does not occur.
    """
    return _rewrite(path, lambda content: _splice(content, search, replacement))


def apply_patch(content: str, spec: PatchSpec) -> str:
    """Apply a validated patch spec to text."""
    target = spec.target
    if spec.action == "replace":
        return _splice(content, target, spec.insert)
    if spec.action == "before":
        return _splice(content, target, spec.insert + target)
    if spec.action == "after":
        return _splice(content, target, target + spec.insert)
    return _splice(content, target, "")


def patch(path: PathLike, spec: Union[PatchSpec, Mapping[str, Any]]) -> str:
    """
    Replace, insert around, or delete a substring in a file.

    Args:
        path: File to patch
        spec: PatchSpec or mapping with exactly one of ``replace``,
              ``before``, ``after`` or ``delete``, plus ``insert`` for the
              first three

    Returns:
        The new file content

    Raises:
        PatchSpecError: If the spec names zero or several actions, or lacks
                        ``insert`` where one is needed
    """
    spec = PatchSpec.coerce(spec)
    return _rewrite(path, lambda content: apply_patch(content, spec))


class Patching:
    """The patching operations bundled for installation on a toolbox."""

    exists = staticmethod(exists)
    update = staticmethod(update)
    prepend = staticmethod(prepend)
    append = staticmethod(append)
    replace = staticmethod(replace)
    patch = staticmethod(patch)


def create(toolbox: Any) -> None:
    """Install :class:`Patching` on ``toolbox`` as ``patching``."""
    toolbox.install("patching", Patching())
