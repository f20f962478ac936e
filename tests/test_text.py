from routekit.render.text import String, write_string
from routekit.response_writer import ResponseRecorder


def test_render_string():
    w = ResponseRecorder()
    String(format="hello %s %d", data=[]).write_content_type(w)
    assert w.header.get("Content-Type") == "text/plain; charset=utf-8"

    String(format="hola %s %d", data=["manu", 2]).render(w)
    assert w.text == "hola manu 2"
    assert w.header.get("Content-Type") == "text/plain; charset=utf-8"


def test_render_string_len_zero():
    w = ResponseRecorder()
    String(format="hola %s %d", data=[]).render(w)
    assert w.text == "hola %s %d"
    assert w.header.get("Content-Type") == "text/plain; charset=utf-8"


def test_write_string_directly():
    w = ResponseRecorder()
    write_string(w, "hola %s", ["manu"])
    assert w.text == "hola manu"
    assert w.header.get("Content-Type") == "text/plain; charset=utf-8"


def test_write_string_encodes_utf8():
    w = ResponseRecorder()
    write_string(w, "GO语言")
    assert bytes(w.body) == "GO语言".encode("utf-8")