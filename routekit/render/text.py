"""Plain-text rendering with optional printf-style formatting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from routekit.render.base import Render, write_content_type

PLAIN_CONTENT_TYPE = "text/plain; charset=utf-8"


def write_string(w: Any, fmt: str, data: list[Any] | tuple[Any, ...] | None = None) -> None:
    """Write ``fmt`` formatted with ``data``, or ``fmt`` as is if there is no data."""
    write_content_type(w, PLAIN_CONTENT_TYPE)
    text = fmt % tuple(data) if data else fmt
    w.write(text.encode("utf-8"))


@dataclass
class String(Render):
    """A format string and the values to fill into it."""

    format: str
    data: list[Any] = field(default_factory=list)

    def render(self, w: Any) -> None:
        """Write the formatted text."""
        write_string(w, self.format, self.data)

    def write_content_type(self, w: Any) -> None:
        """Write the plain-text Content-Type."""
        write_content_type(w, PLAIN_CONTENT_TYPE)