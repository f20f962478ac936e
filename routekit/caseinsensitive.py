"""Case-insensitive lookup of a path in the routing tree."""

from __future__ import annotations

from routekit.tree import Node, NodeType


def _to_lower(c: str) -> str:
    lowered = c.lower()
    return lowered if len(lowered) == 1 else c


def _to_upper(c: str) -> str:
    raised = c.upper()
    return raised if len(raised) == 1 else c


def _equal_fold(a: str, b: str) -> bool:
    return len(a) == len(b) and all(
        x == y or x.lower() == y.lower() or x.upper() == y.upper() for x, y in zip(a, b)
    )


def find_case_insensitive_path(
    root: Node, path: str, fix_trailing_slash: bool = False
) -> str | None:
    """Find a registered route matching ``path`` regardless of letter case.

    Returns the path with the case used in the registered route, or None if
    nothing matches. With ``fix_trailing_slash`` a missing or extra trailing
    slash is corrected as well.
    """
    return _find(root, path, "", fix_trailing_slash)


def _find(n: Node, path: str, ci_path: str, fix: bool) -> str | None:
    while len(path) >= len(n.path) and (
        not n.path or _equal_fold(path[1 : len(n.path)], n.path[1:])
    ):
        np_len = len(n.path)
        path = path[np_len:]
        ci_path += n.path

        if not path:
            if n.handlers is not None:
                return ci_path
            if fix:
                idx = n.indices.find("/")
                if idx >= 0:
                    child = n.children[idx]
                    if (len(child.path) == 1 and child.handlers is not None) or (
                        child.n_type == NodeType.CATCH_ALL
                        and child.children[0].handlers is not None
                    ):
                        return ci_path + "/"
            return None

        if not n.wild_child:
            if np_len > 0:
                c = path[0]
                lower = _to_lower(c)
                idx = n.indices.find(lower)
                if idx >= 0:
                    out = _find(n.children[idx], path, ci_path, fix)
                    if out is not None:
                        return out
                upper = _to_upper(c)
                if upper != lower:
                    idx = n.indices.find(upper)
                    if idx >= 0:
                        n = n.children[idx]
                        continue

            if fix and path == "/" and n.handlers is not None:
                return ci_path
            return None

        n = n.children[0]
        if n.n_type == NodeType.PARAM:
            end = path.find("/")
            if end < 0:
                end = len(path)
            ci_path += path[:end]

            if end < len(path):
                if n.children:
                    n = n.children[0]
                    path = path[end:]
                    continue
                if fix and len(path) == end + 1:
                    return ci_path
                return None

            if n.handlers is not None:
                return ci_path

            if fix and len(n.children) == 1:
                n = n.children[0]
                if n.path == "/" and n.handlers is not None:
                    return ci_path + "/"
            return None

        if n.n_type == NodeType.CATCH_ALL:
            return ci_path + path

        raise RuntimeError("invalid node type")

    if fix:
        if path == "/":
            return ci_path
        if (
            len(path) + 1 == len(n.path)
            and n.path[len(path)] == "/"
            and _equal_fold(path[1:], n.path[1 : len(path)])
            and n.handlers is not None
        ):
            return ci_path + n.path
    return None