"""XML rendering."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from routekit.render.base import Render, write_content_type

XML_CONTENT_TYPE = "application/xml; charset=utf-8"

_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&#34;",
    "'": "&#39;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}


def _escape(text: str) -> str:
    return "".join(_ENTITIES.get(c, c) for c in text)


def _scalar_name(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float64"
    return "string"


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return _escape(str(value))


def _encode(value: Any, name: str | None = None) -> str:
    if value is None:
        return ""
    to_xml = getattr(value, "to_xml", None)
    if callable(to_xml):
        return to_xml()
    if isinstance(value, (list, tuple)):
        return "".join(_encode(item, name) for item in value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        tag = name or type(value).__name__
        inner = "".join(_encode(getattr(value, f.name), f.name) for f in dataclasses.fields(value))
        return f"<{tag}>{inner}</{tag}>"
    if isinstance(value, Mapping):
        raise TypeError(f"xml: unsupported type: {type(value).__name__}")
    if isinstance(value, (str, int, float, bool)):
        tag = name or _scalar_name(value)
        return f"<{tag}>{_scalar_text(value)}</{tag}>"
    raise TypeError(f"xml: unsupported type: {type(value).__name__}")


@dataclass
class XML(Render):
    """Data written as XML.

    Objects with a ``to_xml()`` method write themselves; dataclasses become
    an element named after the class holding one element per field; strings,
    numbers and booleans become an element named after their type.
    """

    data: Any

    def render(self, w: Any) -> None:
        """Write the data as XML."""
        self.write_content_type(w)
        w.write(_encode(self.data).encode("utf-8"))

    def write_content_type(self, w: Any) -> None:
        """Write the XML Content-Type."""
        write_content_type(w, XML_CONTENT_TYPE)