"""JSON renderers: plain, indented, secure, JSONP, ASCII-only and unescaped."""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass
from typing import Any

from routekit.render.base import Render, write_content_type

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
JSONP_CONTENT_TYPE = "application/javascript; charset=utf-8"
JSON_ASCII_CONTENT_TYPE = "application/json"

_LINE_ESCAPES = {"\u2028": "\\u2028", "\u2029": "\\u2029"}
_HTML_ESCAPES = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026", **_LINE_ESCAPES}

_JS_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
    "<": "\\u003C",
    ">": "\\u003E",
    "&": "\\u0026",
    "=": "\\u003D",
}


def _default(o: Any) -> Any:
    if isinstance(o, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(o)).decode("ascii")
    raise TypeError(f"json: unsupported type: {type(o).__name__}")


def _encode(obj: Any, *, indent: int | None = None, escape_html: bool = True) -> str:
    separators = (",", ": ") if indent is not None else (",", ":")
    text = json.dumps(
        obj,
        default=_default,
        ensure_ascii=False,
        allow_nan=False,
        sort_keys=True,
        indent=indent,
        separators=separators,
    )
    table = _HTML_ESCAPES if escape_html else _LINE_ESCAPES
    return "".join(table.get(c, c) for c in text)


def marshal(obj: Any) -> bytes:
    """Encode ``obj`` as compact JSON with sorted keys and HTML-safe escapes."""
    return _encode(obj).encode("utf-8")


def _js_escape_string(s: str) -> str:
    out = []
    for c in s:
        if c in _JS_ESCAPES:
            out.append(_JS_ESCAPES[c])
        elif ord(c) < 0x20 or (ord(c) >= 0x80 and not c.isprintable()):
            out.append(f"\\u{ord(c):04X}")
        else:
            out.append(c)
    return "".join(out)


def write_json(w: Any, obj: Any) -> None:
    """Write the JSON Content-Type and ``obj`` encoded as JSON."""
    write_content_type(w, JSON_CONTENT_TYPE)
    w.write(marshal(obj))


@dataclass
class JSON(Render):
    """Data written as compact JSON."""

    data: Any

    def render(self, w: Any) -> None:
        """Write the data as JSON."""
        write_json(w, self.data)

    def write_content_type(self, w: Any) -> None:
        """Write the JSON Content-Type."""
        write_content_type(w, JSON_CONTENT_TYPE)


@dataclass
class IndentedJSON(Render):
    """Data written as JSON indented by four spaces."""

    data: Any

    def render(self, w: Any) -> None:
        """Write the data as indented JSON."""
        self.write_content_type(w)
        w.write(_encode(self.data, indent=4).encode("utf-8"))

    def write_content_type(self, w: Any) -> None:
        """Write the JSON Content-Type."""
        write_content_type(w, JSON_CONTENT_TYPE)


@dataclass
class SecureJSON(Render):
    """JSON that is prefixed when it is an array, against JSON hijacking."""

    prefix: str
    data: Any

    def render(self, w: Any) -> None:
        """Write the data as JSON, prefixed if it encodes to an array."""
        self.write_content_type(w)
        encoded = marshal(self.data)
        if encoded.startswith(b"[") and encoded.endswith(b"]"):
            w.write(self.prefix.encode("utf-8"))
        w.write(encoded)

    def write_content_type(self, w: Any) -> None:
        """Write the JSON Content-Type."""
        write_content_type(w, JSON_CONTENT_TYPE)


@dataclass
class JsonpJSON(Render):
    """JSON wrapped in a call to a JavaScript callback."""

    callback: str
    data: Any

    def render(self, w: Any) -> None:
        """Write ``callback(json);``, or the bare JSON if there is no callback."""
        self.write_content_type(w)
        encoded = marshal(self.data)
        if not self.callback:
            w.write(encoded)
            return
        w.write(_js_escape_string(self.callback).encode("utf-8"))
        w.write(b"(")
        w.write(encoded)
        w.write(b");")

    def write_content_type(self, w: Any) -> None:
        """Write the JavaScript Content-Type."""
        write_content_type(w, JSONP_CONTENT_TYPE)


@dataclass
class AsciiJSON(Render):
    """JSON with every non-ASCII character written as a \\u escape."""

    data: Any

    def render(self, w: Any) -> None:
        """Write the data as ASCII-only JSON."""
        self.write_content_type(w)
        text = marshal(self.data).decode("utf-8")
        ascii_text = "".join(c if ord(c) < 128 else f"\\u{ord(c):04x}" for c in text)
        w.write(ascii_text.encode("ascii"))

    def write_content_type(self, w: Any) -> None:
        """Write the plain JSON Content-Type."""
        write_content_type(w, JSON_ASCII_CONTENT_TYPE)


@dataclass
class PureJSON(Render):
    """JSON without HTML escaping, ending in a newline."""

    data: Any

    def render(self, w: Any) -> None:
        """Write the data as JSON with HTML characters left as they are."""
        self.write_content_type(w)
        w.write((_encode(self.data, escape_html=False) + "\n").encode("utf-8"))

    def write_content_type(self, w: Any) -> None:
        """Write the JSON Content-Type."""
        write_content_type(w, JSON_CONTENT_TYPE)