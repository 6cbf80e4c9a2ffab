"""Tests for the shared toolbox."""

import pytest

from weex.core.toolbox import Toolbox
from weex.extensions import BUILTIN_EXTENSIONS
from weex.models import Extension


class TestToolbox:
    """Test capability installation."""

    def test_install(self):
        toolbox = Toolbox()
        toolbox.install("greeting", "hi")

        assert toolbox.greeting == "hi"
        assert "greeting" in toolbox

    def test_constructor_capabilities(self):
        toolbox = Toolbox(answer=42)

        assert toolbox.answer == 42
        assert toolbox.capabilities() == {"answer": 42}

    def test_install_replaces(self):
        toolbox = Toolbox(answer=1)
        toolbox.install("answer", 2)

        assert toolbox.answer == 2

    def test_invalid_name(self):
        with pytest.raises(ValueError):
            Toolbox().install("not valid", 1)

    def test_setup_extensions_in_order(self):
        calls = []

        def make(name):
            def setup(toolbox):
                calls.append(name)
                toolbox.install(name, True)

            return Extension(name=name, file="", setup=setup)

        toolbox = Toolbox()
        names = toolbox.setup_extensions([make("first"), make("second")])

        assert names == ["first", "second"]
        assert calls == ["first", "second"]
        assert toolbox.first and toolbox.second

    def test_builtin_extensions_install_patching(self):
        toolbox = Toolbox()
        for install in BUILTIN_EXTENSIONS:
            install(toolbox)

        assert "patching" in toolbox
        assert callable(toolbox.patching.patch)

    def test_repr(self):
        assert repr(Toolbox(b=1, a=2)) == "Toolbox(a, b)"
