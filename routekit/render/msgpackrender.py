"""MessagePack rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import msgpack

from routekit.render.base import Render, write_content_type

MSGPACK_CONTENT_TYPE = "application/msgpack; charset=utf-8"


def write_msgpack(w: Any, obj: Any) -> None:
    """Write the MessagePack Content-Type and ``obj`` encoded as MessagePack."""
    write_content_type(w, MSGPACK_CONTENT_TYPE)
    w.write(msgpack.packb(obj, use_bin_type=True))


@dataclass
class MsgPack(Render):
    """Data written as MessagePack."""

    data: Any

    def render(self, w: Any) -> None:
        """Write the data as MessagePack."""
        write_msgpack(w, self.data)

    def write_content_type(self, w: Any) -> None:
        """Write the MessagePack Content-Type."""
        write_content_type(w, MSGPACK_CONTENT_TYPE)