"""Tests for front matter parsing."""

import pytest

from weex.exceptions import FrontMatterError
from weex.loaders.front_matter import read_front_matter, split_front_matter


class TestSplitFrontMatter:
    """Test splitting docstrings into metadata and body."""

    def test_no_front_matter(self):
        data, body = split_front_matter("Just a docstring.")

        assert data == {}
        assert body == "Just a docstring."

    def test_front_matter_and_body(self):
        data, body = split_front_matter("---\nname: full\nhidden: true\n---\nBody text")

        assert data == {"name": "full", "hidden": True}
        assert body == "Body text"

    def test_empty_block(self):
        data, body = split_front_matter("---\n---\nBody")

        assert data == {}
        assert body == "Body"

    def test_unterminated_block(self):
        with pytest.raises(FrontMatterError, match="Unterminated"):
            split_front_matter("---\nname: full\n")

    def test_invalid_yaml(self):
        with pytest.raises(FrontMatterError, match="Invalid YAML"):
            split_front_matter("---\nname: [oops\n---\n")

    def test_non_mapping(self):
        with pytest.raises(FrontMatterError, match="mapping"):
            split_front_matter("---\n- a\n- b\n---\n")


class TestReadFrontMatter:
    """Test reading front matter from source files."""

    def test_file_without_docstring(self, tmp_path):
        path = tmp_path / "plain.py"
        path.write_text("def run():\n    return 1\n")

        front_matter = read_front_matter(str(path))

        assert front_matter.name is None
        assert front_matter.hidden is None
        assert front_matter.aliases == []

    def test_file_is_not_executed(self, tmp_path):
        path = tmp_path / "explodes.py"
        path.write_text('"""\n---\nname: boom\n---\n"""\nraise RuntimeError("ran")\n')

        assert read_front_matter(str(path)).name == "boom"

    def test_single_alias_shorthand(self, tmp_path):
        path = tmp_path / "aliased.py"
        path.write_text('"""\n---\nalias: a\n---\n"""\n')

        assert read_front_matter(str(path)).aliases == ["a"]

    def test_extra_keys_are_kept(self, tmp_path):
        path = tmp_path / "extra.py"
        path.write_text('"""\n---\nname: extra\ncategory: tools\n---\n"""\n')

        front_matter = read_front_matter(str(path))

        assert front_matter.model_extra == {"category": "tools"}

    def test_wrong_field_type(self, tmp_path):
        path = tmp_path / "typed.py"
        path.write_text('"""\n---\nhidden: [1, 2]\n---\n"""\n')

        with pytest.raises(FrontMatterError) as exc_info:
            read_front_matter(str(path))

        assert exc_info.value.file_path == str(path)

    def test_syntax_error(self, tmp_path):
        path = tmp_path / "broken.py"
        path.write_text("def run(:\n")

        with pytest.raises(FrontMatterError, match="Cannot parse source"):
            read_front_matter(str(path))
