"""HTML rendering through Jinja2 templates."""

from __future__ import annotations

import glob
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import jinja2

from routekit.render.base import Render, write_content_type

HTML_CONTENT_TYPE = "text/html; charset=utf-8"


@dataclass
class Delims:
    """Left and right variable delimiters; empty means ``{{`` and ``}}``."""

    left: str = ""
    right: str = ""


def _context(data: Any) -> Mapping[str, Any]:
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return data
    return {"data": data}


def _resolve(template: jinja2.Environment | jinja2.Template, name: str) -> jinja2.Template:
    if isinstance(template, jinja2.Environment):
        if not name:
            raise ValueError("a template name is needed to render from a template set")
        return template.get_template(name)
    if name and template.name is not None and template.name != name:
        raise ValueError(f'template: no template "{name}" associated with template "{template.name}"')
    return template


@dataclass
class HTML(Render):
    """A template, the name of the template to run and the data to fill in.

    ``template`` is either a single ``jinja2.Template`` or a
    ``jinja2.Environment`` from which the template ``name`` is loaded.
    Mapping data is passed as the template context; any other value is
    available as ``data``.
    """

    template: jinja2.Environment | jinja2.Template
    name: str = ""
    data: Any = None

    def render(self, w: Any) -> None:
        """Run the template and write the result as HTML."""
        self.write_content_type(w)
        text = _resolve(self.template, self.name).render(_context(self.data))
        w.write(text.encode("utf-8"))

    def write_content_type(self, w: Any) -> None:
        """Write the HTML Content-Type."""
        write_content_type(w, HTML_CONTENT_TYPE)


@dataclass
class HTMLProduction:
    """Renders from templates that were loaded once."""

    template: jinja2.Environment | jinja2.Template
    delims: Delims = field(default_factory=Delims)

    def instance(self, name: str, data: Any) -> HTML:
        """Return a renderer for the template ``name`` with ``data``."""
        return HTML(template=self.template, name=name, data=data)


@dataclass
class HTMLDebug:
    """Reloads the templates from disk for every response."""

    files: list[str] = field(default_factory=list)
    glob: str = ""
    delims: Delims = field(default_factory=Delims)
    func_map: dict[str, Callable[..., Any]] | None = None

    def instance(self, name: str, data: Any) -> HTML:
        """Load the templates afresh and return a renderer for ``name``."""
        return HTML(template=self._load_template(), name=name, data=data)

    def _paths(self) -> list[str]:
        if self.files:
            return list(self.files)
        if self.glob:
            paths = sorted(glob.glob(self.glob))
            if not paths:
                raise ValueError(f"template: pattern matches no files: `{self.glob}`")
            return paths
        raise ValueError("the HTML debug render was created without files or glob pattern")

    def _load_template(self) -> jinja2.Environment:
        sources = {Path(p).name: Path(p).read_text(encoding="utf-8") for p in self._paths()}
        env = jinja2.Environment(
            loader=jinja2.DictLoader(sources),
            autoescape=True,
            variable_start_string=self.delims.left or "{{",
            variable_end_string=self.delims.right or "}}",
        )
        env.globals.update(self.func_map or {})
        return env