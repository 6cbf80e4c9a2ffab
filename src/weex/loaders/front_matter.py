"""
Front matter parsing for command and extension files.

Front matter is a YAML block at the start of a module docstring, delimited
by ``---`` lines:

    \"\"\"
    ---
    name: full
    hidden: false
    description: Does everything
    ---
    Free-form docstring text continues here.
    \"\"\"

The file is parsed with :mod:`ast`; it is never executed.
"""

import ast
import logging
from typing import Any, Dict, Tuple

import yaml
from pydantic import ValidationError

from weex.exceptions import FrontMatterError
from weex.models import FrontMatter
from weex.toolbox import filesystem

logger = logging.getLogger(__name__)

DELIMITER = "---"


def split_front_matter(docstring: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a docstring into its front matter mapping and remaining text.

    Returns:
        (metadata, body); metadata is empty if there is no front matter

    Raises:
        FrontMatterError: If the block is unterminated, is not valid YAML,
                          or does not hold a mapping
    """
    lines = docstring.strip().splitlines()
    if not lines or lines[0].strip() != DELIMITER:
        return {}, docstring

    try:
        end = next(
            i for i, line in enumerate(lines[1:], start=1) if line.strip() == DELIMITER
        )
    except StopIteration:
        raise FrontMatterError("Unterminated front matter block") from None

    block = "\n".join(lines[1:end])
    body = "\n".join(lines[end + 1 :]).strip()

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid YAML in front matter ({e})") from e

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"Front matter must be a mapping, got {type(data).__name__}"
        )
    return data, body


def read_front_matter(file_path: str) -> FrontMatter:
    """
    Read and validate the front matter of a Python source file.

    Args:
        file_path: Path to a command or extension file

    Returns:
        FrontMatter (all fields unset if the file has none)

    Raises:
        FrontMatterError: If the file is not valid Python or its front
                          matter is malformed
    """
    source = filesystem.read(file_path)
    try:
        tree = ast.parse(source, filename=file_path)
    except SyntaxError as e:
        raise FrontMatterError(f"Cannot parse source ({e.msg})", file_path) from e

    docstring = ast.get_docstring(tree)
    if not docstring:
        return FrontMatter()

    try:
        data, _ = split_front_matter(docstring)
        front_matter = FrontMatter.model_validate(data)
    except FrontMatterError as e:
        raise FrontMatterError(str(e), file_path) from e
    except ValidationError as e:
        raise FrontMatterError(f"Invalid front matter ({e})", file_path) from e

    if data:
        logger.debug(f"Front matter for {file_path}: {list(data)}")
    return front_matter
