"""YAML rendering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import yaml

from routekit.render.base import Render, write_content_type

YAML_CONTENT_TYPE = "application/x-yaml; charset=utf-8"


@dataclass
class YAML(Render):
    """Data written as a YAML document."""

    data: Any

    def render(self, w: Any) -> None:
        """Write the data as YAML; raise yaml.YAMLError if it cannot be encoded."""
        self.write_content_type(w)
        text = yaml.safe_dump(
            self.data, allow_unicode=True, default_flow_style=False, sort_keys=True
        )
        w.write(text.encode("utf-8"))

    def write_content_type(self, w: Any) -> None:
        """Write the YAML Content-Type."""
        write_content_type(w, YAML_CONTENT_TYPE)