"""Streaming a readable object into the response."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, BinaryIO

from routekit.render.base import Render, write_content_type

_CHUNK_SIZE = 32 * 1024


@dataclass
class Reader(Render):
    """A binary stream with its length, Content-Type and extra headers.

    A negative ``content_length`` means the length is unknown and no
    Content-Length header is written.
    """

    content_type: str = ""
    content_length: int = -1
    reader: BinaryIO | None = None
    headers: dict[str, str] | None = None

    def render(self, w: Any) -> None:
        """Write the headers, then copy the stream into the body."""
        self.write_content_type(w)
        headers = dict(self.headers or {})
        if self.content_length >= 0:
            headers["Content-Length"] = str(self.content_length)
        self._write_headers(w, headers)
        if self.reader is None:
            return
        while chunk := self.reader.read(_CHUNK_SIZE):
            w.write(chunk)

    def write_content_type(self, w: Any) -> None:
        """Write the custom Content-Type."""
        write_content_type(w, self.content_type)

    @staticmethod
    def _write_headers(w: Any, headers: dict[str, str]) -> None:
        header = w.header
        for key, value in headers.items():
            if header.get(key) == "":
                header.set(key, value)