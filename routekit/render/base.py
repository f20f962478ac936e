"""The renderer interface and the shared Content-Type helper."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Render(ABC):
    """Something that writes a response body with its own Content-Type."""

    @abstractmethod
    def render(self, w: Any) -> None:
        """Write the Content-Type and the body to ``w``."""

    @abstractmethod
    def write_content_type(self, w: Any) -> None:
        """Write only the Content-Type header to ``w``."""


def write_content_type(w: Any, value: str) -> None:
    """Set the Content-Type header of ``w`` unless it is already set."""
    header = w.header
    if "Content-Type" not in header:
        header.set("Content-Type", value)