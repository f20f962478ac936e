import pytest

from routekit.utils import (
    H,
    choose_data,
    filter_flags,
    is_ascii,
    join_paths,
    last_char,
    name_of_function,
    parse_accept,
    resolve_address,
)


def somefunction():
    pass


def test_last_char():
    assert last_char("hola") == "a"
    assert last_char("adios") == "s"
    with pytest.raises(ValueError):
        last_char("")


def test_parse_accept():
    parts = parse_accept("text/html , application/xhtml+xml,application/xml;q=0.9,  */* ;q=0.8")
    assert parts == ["text/html", "application/xhtml+xml", "application/xml", "*/*"]


def test_choose_data():
    assert choose_data("a", "b") == "a"
    assert choose_data(None, "b") == "b"
    with pytest.raises(ValueError):
        choose_data(None, None)


def test_filter_flags():
    assert filter_flags("text/html ") == "text/html"
    assert filter_flags("text/html;") == "text/html"
    assert filter_flags("text/plain") == "text/plain"


def test_function_name():
    name = name_of_function(somefunction)
    assert name.split(".")[-2:] == ["test_utils", "somefunction"]


@pytest.mark.parametrize(
    "absolute, relative, expected",
    [
        ("", "", ""),
        ("", "/", "/"),
        ("/a", "", "/a"),
        ("/a/", "", "/a/"),
        ("/a/", "/", "/a/"),
        ("/a", "/", "/a/"),
        ("/a", "/hola", "/a/hola"),
        ("/a/", "/hola", "/a/hola"),
        ("/a/", "/hola/", "/a/hola/"),
        ("/a/", "/hola//", "/a/hola/"),
    ],
)
def test_join_paths(absolute, relative, expected):
    assert join_paths(absolute, relative) == expected


def test_h_to_xml_empty_key_fails():
    with pytest.raises(ValueError):
        H({"": "test"}).to_xml()


def test_h_to_xml():
    assert H({"foo": "bar"}).to_xml() == "<map><foo>bar</foo></map>"
    assert H({"tag": "<b>"}).to_xml() == "<map><tag>&lt;b&gt;</tag></map>"


def test_is_ascii():
    assert is_ascii("test") is True
    assert is_ascii("🧡💛💚💙💜") is False


def test_resolve_address(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert resolve_address([]) == ":8080"
    monkeypatch.setenv("PORT", "9000")
    assert resolve_address([]) == ":9000"
    assert resolve_address([":1234"]) == ":1234"
    with pytest.raises(ValueError, match="too many parameters"):
        resolve_address([":1", ":2"])