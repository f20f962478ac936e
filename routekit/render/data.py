"""Raw bytes with a caller-chosen Content-Type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from routekit.render.base import Render, write_content_type


@dataclass
class Data(Render):
    """Bytes written as they are, with a custom Content-Type."""

    content_type: str
    data: bytes

    def render(self, w: Any) -> None:
        """Write the Content-Type and the raw bytes."""
        self.write_content_type(w)
        w.write(self.data)

    def write_content_type(self, w: Any) -> None:
        """Write the custom Content-Type."""
        write_content_type(w, self.content_type)