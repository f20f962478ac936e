import pytest

from routekit.render.tomlrender import TOML
from routekit.response_writer import ResponseRecorder


def test_write_content_type():
    w = ResponseRecorder()
    TOML({"foo": "bar"}).write_content_type(w)
    assert w.header.get("Content-Type") == "application/toml; charset=utf-8"


def test_render_toml():
    w = ResponseRecorder()
    TOML({"foo": "bar"}).render(w)
    assert w.text == 'foo = "bar"\n'
    assert w.header.get("Content-Type") == "application/toml; charset=utf-8"


def test_render_nested_table_holds_values():
    w = ResponseRecorder()
    TOML({"server": {"host": "localhost"}}).render(w)
    assert "[server]" in w.text
    assert '"localhost"' in w.text


def test_render_non_mapping_fails():
    with pytest.raises(TypeError):
        TOML(["a", "b"]).render(ResponseRecorder())