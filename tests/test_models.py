"""Tests for plugin and patch models."""

import pytest
from pydantic import ValidationError

from weex.exceptions import ConfigError, PatchSpecError
from weex.models import (
    Command,
    FrontMatter,
    PatchSpec,
    Plugin,
    PluginConfig,
    PluginLoadOptions,
)


class TestPatchSpec:
    """Test PatchSpec validation."""

    @pytest.mark.parametrize(
        "data,action,target",
        [
            ({"replace": "a", "insert": "b"}, "replace", "a"),
            ({"before": "a", "insert": "b"}, "before", "a"),
            ({"after": "a", "insert": "b"}, "after", "a"),
            ({"delete": "a"}, "delete", "a"),
        ],
    )
    def test_single_action(self, data, action, target):
        spec = PatchSpec.coerce(data)

        assert spec.action == action
        assert spec.target == target

    def test_multiple_actions(self):
        with pytest.raises(ValidationError):
            PatchSpec(before="a", after="b", insert="c")

    def test_coerce_wraps_errors(self):
        with pytest.raises(PatchSpecError, match="exactly one"):
            PatchSpec.coerce({"before": "a", "after": "b", "insert": "c"})

    def test_coerce_passes_models_through(self):
        spec = PatchSpec(delete="x")

        assert PatchSpec.coerce(spec) is spec


class TestPluginLoadOptions:
    """Test loader options."""

    def test_defaults(self):
        options = PluginLoadOptions.coerce(None)

        assert options.name is None
        assert options.hidden is False
        assert options.command_file_pattern == ["*.py"]
        assert options.preloaded_commands == []

    def test_pattern_string_coerced(self):
        options = PluginLoadOptions(extension_file_pattern="ext_*.py")

        assert options.extension_file_pattern == ["ext_*.py"]

    def test_preloaded_commands_must_be_commands(self):
        with pytest.raises(ValidationError):
            PluginLoadOptions(preloaded_commands=[{"name": "nope"}])

    def test_coerce_wraps_errors(self):
        with pytest.raises(ConfigError, match="Invalid plugin load options"):
            PluginLoadOptions.coerce({"hidden": True, "colour": "blue"})


class TestFrontMatter:
    def test_aliases_merge(self):
        front_matter = FrontMatter.model_validate({"alias": "a", "aliases": ["b"]})

        assert front_matter.aliases == ["b", "a"]


class TestPlugin:
    """Test Plugin helpers."""

    def test_find_command(self):
        hello = Command(name="hello", file="", run=lambda: 1, aliases=("hi",))
        plugin = Plugin(name="p", directory="/tmp/p", commands=[hello])

        assert plugin.find_command("hello") is hello
        assert plugin.find_command("hi") is hello
        assert plugin.find_command("bye") is None

    def test_commands_are_immutable(self):
        command = Command(name="hello", file="", run=lambda: 1)

        with pytest.raises(AttributeError):
            command.name = "bye"

    def test_config_ignores_unknown_keys(self):
        config = PluginConfig.model_validate({"name": "x", "version": "1.0.0"})

        assert config.name == "x"
        assert config.defaults == {}
