"""TOML rendering."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import tomli_w

from routekit.render.base import Render, write_content_type

TOML_CONTENT_TYPE = "application/toml; charset=utf-8"


@dataclass
class TOML(Render):
    """A mapping written as a TOML document."""

    data: Any

    def render(self, w: Any) -> None:
        """Write the data as TOML; raise TypeError if it is not a mapping."""
        self.write_content_type(w)
        if not isinstance(self.data, Mapping):
            raise TypeError(f"toml: cannot encode a value of type {type(self.data).__name__}")
        w.write(tomli_w.dumps(dict(self.data)).encode("utf-8"))

    def write_content_type(self, w: Any) -> None:
        """Write the TOML Content-Type."""
        write_content_type(w, TOML_CONTENT_TYPE)