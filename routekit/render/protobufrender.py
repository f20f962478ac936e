"""Protocol Buffers rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from routekit.render.base import Render, write_content_type

PROTOBUF_CONTENT_TYPE = "application/x-protobuf"


@dataclass
class ProtoBuf(Render):
    """A protocol buffer message written in its wire format."""

    data: Any

    def render(self, w: Any) -> None:
        """Serialise the message and write it."""
        self.write_content_type(w)
        serialize = getattr(self.data, "SerializeToString", None)
        if not callable(serialize):
            raise TypeError(f"{type(self.data).__name__} is not a protocol buffer message")
        w.write(serialize())

    def write_content_type(self, w: Any) -> None:
        """Write the protobuf Content-Type."""
        write_content_type(w, PROTOBUF_CONTENT_TYPE)