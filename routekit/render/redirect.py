"""HTTP redirect responses."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any
from urllib.parse import urlsplit

from routekit.render.base import Render

_HTML_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&#34;", "'": "&#39;"}


def _status_text(code: int) -> str:
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return ""


def _hex_escape_non_ascii(s: str) -> str:
    return "".join(
        "".join(f"%{b:02x}" for b in c.encode("utf-8")) if ord(c) >= 0x80 else c for c in s
    )


def _html_escape(s: str) -> str:
    return "".join(_HTML_ESCAPES.get(c, c) for c in s)


def _clean(path: str) -> str:
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _absolute_location(location: str, request_path: str) -> str:
    try:
        parts = urlsplit(location)
    except ValueError:
        return location
    if parts.scheme or parts.netloc:
        return location

    old_path = request_path or "/"
    if not location.startswith("/"):
        old_dir = old_path[: old_path.rfind("/") + 1]
        location = old_dir + location

    query = ""
    i = location.find("?")
    if i >= 0:
        location, query = location[:i], location[i:]

    trailing = location.endswith("/")
    location = _clean(location)
    if trailing and not location.endswith("/"):
        location += "/"
    return location + query


@dataclass
class Redirect(Render):
    """A redirect to ``location`` with the given status code.

    ``request`` is the request being answered; its ``method`` and ``path``
    attributes are used.
    """

    code: int
    request: Any
    location: str

    def render(self, w: Any) -> None:
        """Write the redirect; raise ValueError for a non-redirect status."""
        if (self.code < 300 or self.code > 308) and self.code != 201:
            raise ValueError(f"Cannot redirect with status code {self.code}")

        method = self.request.method
        url = _absolute_location(self.location, self.request.path)

        header = w.header
        had_content_type = "Content-Type" in header
        header.set("Location", _hex_escape_non_ascii(url))
        if not had_content_type and method in ("GET", "HEAD"):
            header.set("Content-Type", "text/html; charset=utf-8")
        w.write_header(self.code)

        if not had_content_type and method == "GET":
            body = f'<a href="{_html_escape(url)}">{_status_text(self.code)}</a>.\n'
            w.write((body + "\n").encode("utf-8"))

    def write_content_type(self, w: Any) -> None:
        """A redirect writes no Content-Type of its own."""