"""Canonical cleaning of URL paths."""

from __future__ import annotations


def clean_path(p: str) -> str:
    """Return the canonical form of the URL path ``p``.

    Repeated slashes are collapsed, ``.`` elements are dropped, ``..``
    elements remove the element before them (never climbing above the
    root), and a trailing slash is kept when the input had one. The
    result always starts with ``/``; an empty result becomes ``/``.
    """
    if not p:
        return "/"

    segments = p.split("/")
    trailing = (len(p) > 1 and p.endswith("/")) or segments[-1] == "."

    stack: list[str] = []
    for segment in segments:
        if segment in ("", "."):
            continue
        if segment == "..":
            if stack:
                stack.pop()
            continue
        stack.append(segment)

    if not stack:
        return "/"
    result = "/" + "/".join(stack)
    if trailing:
        result += "/"
    return result