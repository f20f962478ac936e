import pytest

from routekit.render.jsonrender import (
    JSON,
    AsciiJSON,
    IndentedJSON,
    JsonpJSON,
    PureJSON,
    SecureJSON,
    marshal,
    write_json,
)
from routekit.response_writer import ResponseRecorder


class _Unsupported:
    pass


def test_render_json():
    w = ResponseRecorder()
    data = {"foo": "bar", "html": "<b>"}

    JSON(data).write_content_type(w)
    assert w.header.get("Content-Type") == "application/json; charset=utf-8"

    JSON(data).render(w)
    assert w.text == '{"foo":"bar","html":"\\u003cb\\u003e"}'
    assert w.header.get("Content-Type") == "application/json; charset=utf-8"


def test_render_json_unsupported_type_raises():
    w = ResponseRecorder()
    with pytest.raises(TypeError):
        JSON(_Unsupported()).render(w)


def test_render_indented_json():
    w = ResponseRecorder()
    IndentedJSON({"foo": "bar", "bar": "foo"}).render(w)
    assert w.text == '{\n    "bar": "foo",\n    "foo": "bar"\n}'
    assert w.header.get("Content-Type") == "application/json; charset=utf-8"


def test_render_indented_json_fail():
    with pytest.raises(TypeError):
        IndentedJSON(_Unsupported()).render(ResponseRecorder())


def test_render_secure_json():
    w1 = ResponseRecorder()
    data = {"foo": "bar"}

    SecureJSON("while(1);", data).write_content_type(w1)
    assert w1.header.get("Content-Type") == "application/json; charset=utf-8"

    SecureJSON("while(1);", data).render(w1)
    assert w1.text == '{"foo":"bar"}'
    assert w1.header.get("Content-Type") == "application/json; charset=utf-8"

    w2 = ResponseRecorder()
    datas = [{"foo": "bar"}, {"bar": "foo"}]
    SecureJSON("while(1);", datas).render(w2)
    assert w2.text == 'while(1);[{"foo":"bar"},{"bar":"foo"}]'
    assert w2.header.get("Content-Type") == "application/json; charset=utf-8"


def test_render_secure_json_fail():
    with pytest.raises(TypeError):
        SecureJSON("while(1);", _Unsupported()).render(ResponseRecorder())


def test_render_jsonp_json():
    w1 = ResponseRecorder()
    data = {"foo": "bar"}

    JsonpJSON("x", data).write_content_type(w1)
    assert w1.header.get("Content-Type") == "application/javascript; charset=utf-8"

    JsonpJSON("x", data).render(w1)
    assert w1.text == 'x({"foo":"bar"});'
    assert w1.header.get("Content-Type") == "application/javascript; charset=utf-8"

    w2 = ResponseRecorder()
    datas = [{"foo": "bar"}, {"bar": "foo"}]
    JsonpJSON("x", datas).render(w2)
    assert w2.text == 'x([{"foo":"bar"},{"bar":"foo"}]);'
    assert w2.header.get("Content-Type") == "application/javascript; charset=utf-8"


def test_render_jsonp_json_empty_callback():
    w = ResponseRecorder()
    data = {"foo": "bar"}
    JsonpJSON("", data).write_content_type(w)
    assert w.header.get("Content-Type") == "application/javascript; charset=utf-8"

    JsonpJSON("", data).render(w)
    assert w.text == '{"foo":"bar"}'
    assert w.header.get("Content-Type") == "application/javascript; charset=utf-8"


def test_render_jsonp_json_escapes_callback():
    w = ResponseRecorder()
    JsonpJSON("a'b", 1).render(w)
    assert w.text == "a\\'b(1);"


def test_render_jsonp_json_fail():
    with pytest.raises(TypeError):
        JsonpJSON("x", _Unsupported()).render(ResponseRecorder())


def test_render_ascii_json():
    w1 = ResponseRecorder()
    AsciiJSON({"lang": "GO语言", "tag": "<br>"}).render(w1)
    assert w1.text == '{"lang":"GO\\u8bed\\u8a00","tag":"\\u003cbr\\u003e"}'
    assert w1.header.get("Content-Type") == "application/json"

    w2 = ResponseRecorder()
    AsciiJSON(3.1415926).render(w2)
    assert w2.text == "3.1415926"


def test_render_ascii_json_fail():
    with pytest.raises(TypeError):
        AsciiJSON(_Unsupported()).render(ResponseRecorder())


def test_render_pure_json():
    w = ResponseRecorder()
    PureJSON({"foo": "bar", "html": "<b>"}).render(w)
    assert w.text == '{"foo":"bar","html":"<b>"}\n'
    assert w.header.get("Content-Type") == "application/json; charset=utf-8"


def test_marshal_sorts_keys_and_keeps_unicode():
    assert marshal({"b": 1, "a": "é"}) == '{"a":"é","b":1}'.encode("utf-8")


def test_write_json_sets_content_type():
    w = ResponseRecorder()
    write_json(w, [1, 2])
    assert w.text == "[1,2]"
    assert w.header.get("Content-Type") == "application/json; charset=utf-8"