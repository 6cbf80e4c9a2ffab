"""
Pytest configuration and fixtures for Weex tests.

Plugin directories are generated under ``tmp_path`` so each test sees a
fresh, known filesystem state.
"""

import json
import textwrap
from pathlib import Path
from typing import Dict

import pytest

TEXT_STRING = """These are some words.

They're very amazing.
"""

CONFIG_STRING = """{
  "test": "what???",
  "test2": "never"
}
"""


def write_tree(root: Path, files: Dict[str, str]) -> Path:
    """Write ``files`` (relative path -> content) under ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for relative, content in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(textwrap.dedent(content).lstrip("\n"))
    return root


def command_source(result: str) -> str:
    return f"""
    def run(*args, **kwargs):
        return {result!r}
    """


@pytest.fixture
def good_plugins(tmp_path):
    """Create a directory of well-formed plugins, one per scenario."""
    root = tmp_path / "good-plugins"

    (root / "empty").mkdir(parents=True)

    write_tree(
        root / "simplest",
        {"README.md": "# simplest\n"},
    )

    write_tree(
        root / "missing-name",
        {"weex.json": json.dumps({"description": "No name here"})},
    )

    write_tree(
        root / "blank-name",
        {"weex.json": json.dumps({"name": "   "})},
    )

    write_tree(
        root / "threepack",
        {
            "weex.json": json.dumps({"name": "3pack", "defaults": {"numbers": 3}}),
            "commands/one.py": command_source("one"),
            "commands/two.py": command_source("two"),
            "commands/three.py": command_source("three"),
        },
    )

    write_tree(
        root / "front-matter",
        {
            "commands/full.py": '''
            """
            ---
            name: full
            description: This is the full command
            hidden: false
            aliases: [f, everything]
            ---
            Runs everything.
            """


            def run(*args, **kwargs):
                return 123
            ''',
            "extensions/hello_extension.py": '''
            """
            ---
            name: hello
            description: Says hello
            ---
            """


            def setup(toolbox):
                toolbox.hello = {"very": "little"}
            ''',
        },
    )

    write_tree(
        root / "auto-detect",
        {
            "commands/detectCommand.py": command_source("detected"),
            "commands/new_project.py": command_source("new project"),
            "extensions/detectExtension.py": """
            def setup(toolbox):
                toolbox.detected = True
            """,
        },
    )

    write_tree(
        root / "excluded",
        {
            "commands/foo.py": command_source("foo"),
            "commands/bar.py": command_source("bar"),
            "commands/foo_test.py": command_source("foo test"),
            "commands/test_bar.py": command_source("bar test"),
            "commands/__init__.py": "",
            "commands/_helpers.py": "HELPER = True\n",
            "commands/notes.md": "not a command\n",
            "extensions/ext.py": "def setup(toolbox):\n    pass\n",
            "extensions/test_ext.py": "def setup(toolbox):\n    pass\n",
        },
    )

    write_tree(
        root / "nested",
        {
            "commands/hello.py": command_source("hello"),
            "commands/generate/model.py": command_source("model"),
            "commands/_private/secret.py": command_source("secret"),
        },
    )

    return root


@pytest.fixture
def text_file(tmp_path):
    """A text file holding TEXT_STRING."""
    path = tmp_path / "words.txt"
    path.write_text(TEXT_STRING)
    return path


@pytest.fixture
def config_file(tmp_path):
    """A JSON file holding CONFIG_STRING."""
    path = tmp_path / "config.json"
    path.write_text(CONFIG_STRING)
    return path
