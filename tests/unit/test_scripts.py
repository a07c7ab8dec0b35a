import pytest

from warden.layers.action.scripts import JavaScript, ScriptDescriptor


class TestCatalog:
    """The JavaScript catalog."""

    def test_every_script_targets_first_argument(self):
        for script in JavaScript:
            assert "arguments[0]" in script.body, script.name

    def test_script_names_are_unique(self):
        names = [script.script_name for script in JavaScript]
        assert len(names) == len(set(names))

    @pytest.mark.parametrize("script", [
        JavaScript.GET_ELEMENT_TEXT,
        JavaScript.GET_ELEMENT_XPATH,
        JavaScript.GET_VIEWPORT_COORDINATES,
        JavaScript.EXPAND_SHADOW_ROOT,
        JavaScript.ELEMENT_IS_ON_SCREEN,
    ])
    def test_reads_return_a_value(self, script):
        assert "return" in script.body

    def test_by_name(self):
        assert JavaScript.by_name("clickElement") is JavaScript.CLICK_ELEMENT
        assert JavaScript.by_name("expandShadowRoot") is JavaScript.EXPAND_SHADOW_ROOT

    def test_by_name_unknown(self):
        with pytest.raises(KeyError):
            JavaScript.by_name("doSomethingElse")

    def test_descriptor_is_immutable(self):
        descriptor = JavaScript.SET_FOCUS.value
        assert isinstance(descriptor, ScriptDescriptor)
        with pytest.raises(AttributeError):
            descriptor.body = "alert(1);"
        assert str(descriptor) == "setFocus"
