"""Small helpers shared across the framework."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any
from xml.sax.saxutils import escape

_log = logging.getLogger(__name__)

_XML_ENTITIES = {'"': "&#34;", "'": "&#39;", "\t": "&#x9;", "\n": "&#xA;", "\r": "&#xD;"}


def _xml_text(value: Any) -> str:
    if isinstance(value, bool):
        value = "true" if value else "false"
    return escape(str(value), _XML_ENTITIES)


def _xml_element(name: str, value: Any) -> str:
    if not name:
        raise ValueError("xml: start tag with no name")
    if value is None:
        return ""
    if isinstance(value, Mapping):
        inner = "".join(_xml_element(str(k), v) for k, v in value.items())
        return f"<{name}>{inner}</{name}>"
    if isinstance(value, (list, tuple)):
        return "".join(_xml_element(name, item) for item in value)
    return f"<{name}>{_xml_text(value)}</{name}>"


class H(dict):
    """A plain string-keyed mapping that can also be written as XML."""

    def to_xml(self) -> str:
        """Serialise as ``<map>`` holding one element per key."""
        inner = "".join(_xml_element(str(key), value) for key, value in self.items())
        return f"<map>{inner}</map>"


def filter_flags(content: str) -> str:
    """Return ``content`` up to the first space or semicolon."""
    for i, char in enumerate(content):
        if char in " ;":
            return content[:i]
    return content


def choose_data(custom: Any, wildcard: Any) -> Any:
    """Return ``custom`` if set, else ``wildcard``; fail if neither is."""
    if custom is not None:
        return custom
    if wildcard is not None:
        return wildcard
    raise ValueError("negotiation config is invalid")


def parse_accept(accept_header: str) -> list[str]:
    """Split an Accept header into media types, dropping parameters."""
    out = []
    for part in accept_header.split(","):
        i = part.find(";")
        if i > 0:
            part = part[:i]
        part = part.strip()
        if part:
            out.append(part)
    return out


def last_char(s: str) -> str:
    """Return the last character of a non-empty string."""
    if not s:
        raise ValueError("The length of the string can't be 0")
    return s[-1]


def name_of_function(f: Any) -> str:
    """Return the qualified name of a callable, prefixed by its module."""
    return f"{f.__module__}.{f.__qualname__}"


def _clean(path: str) -> str:
    if not path:
        return "."
    rooted = path.startswith("/")
    stack: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if stack and stack[-1] != "..":
                stack.pop()
            elif not rooted:
                stack.append("..")
            continue
        stack.append(segment)
    joined = "/".join(stack)
    if rooted:
        return "/" + joined
    return joined or "."


def _join(*elements: str) -> str:
    parts = [e for e in elements if e]
    if not parts:
        return ""
    return _clean("/".join(parts))


def join_paths(absolute_path: str, relative_path: str) -> str:
    """Join two URL paths, keeping the trailing slash of the relative one."""
    if not relative_path:
        return absolute_path
    final_path = _join(absolute_path, relative_path)
    if last_char(relative_path) == "/" and last_char(final_path) != "/":
        return final_path + "/"
    return final_path


def resolve_address(addr: list[str] | tuple[str, ...]) -> str:
    """Pick the listening address from arguments or the PORT variable."""
    if len(addr) == 0:
        port = os.environ.get("PORT", "")
        if port:
            _log.debug('Environment variable PORT="%s"', port)
            return ":" + port
        _log.debug("Environment variable PORT is undefined. Using port :8080 by default")
        return ":8080"
    if len(addr) == 1:
        return addr[0]
    raise ValueError("too many parameters")


def is_ascii(s: str) -> bool:
    """Tell whether every character of ``s`` is ASCII."""
    return all(ord(c) < 128 for c in s)