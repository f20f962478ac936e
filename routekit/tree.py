"""Radix tree that maps URL paths to handler chains."""

from __future__ import annotations

import enum
import os.path
import re
from dataclasses import dataclass, field, replace
from typing import Any, NamedTuple
from urllib.parse import unquote_plus

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class Param(NamedTuple):
    """A single URL parameter: its name and the matched value."""

    key: str
    value: str


class Params(list):
    """Ordered URL parameters; the first one in the path comes first."""

    def get(self, name: str) -> str | None:
        """Return the value of the first parameter called ``name``, or None."""
        return next((p.value for p in self if p.key == name), None)

    def by_name(self, name: str) -> str:
        """Return the value of the first parameter called ``name``, or ''."""
        value = self.get(name)
        return "" if value is None else value


class NodeType(enum.IntEnum):
    STATIC = 0
    ROOT = 1
    PARAM = 2
    CATCH_ALL = 3


@dataclass
class NodeValue:
    """Result of a lookup: handlers, captured parameters and a redirect hint."""

    handlers: list[Any] | None = None
    params: Params | None = None
    tsr: bool = False
    full_path: str = ""


@dataclass
class _SkippedNode:
    path: str
    node: Node
    params_count: int


def longest_common_prefix(a: str, b: str) -> int:
    """Return the length of the common prefix of ``a`` and ``b``."""
    return len(os.path.commonprefix([a, b]))


def count_params(path: str) -> int:
    """Count the wildcard markers (``:`` and ``*``) in ``path``."""
    return path.count(":") + path.count("*")


def count_sections(path: str) -> int:
    """Count the slashes in ``path``."""
    return path.count("/")


def find_wildcard(path: str) -> tuple[str, int, bool] | None:
    """Find the first wildcard segment in ``path``.

    Returns ``(wildcard, start, valid)`` where ``valid`` is False when the
    segment holds more than one wildcard marker, or None if there is none.
    """
    for start, char in enumerate(path):
        if char not in ":*":
            continue
        end = path.find("/", start + 1)
        wildcard = path[start:] if end < 0 else path[start:end]
        valid = not any(c in ":*" for c in wildcard[1:])
        return wildcard, start, valid
    return None


def _query_unescape(s: str) -> str:
    if _BAD_ESCAPE.search(s):
        return s
    return unquote_plus(s, errors="surrogateescape")


def _pop_skipped(skipped: list[_SkippedNode], path: str) -> _SkippedNode | None:
    while skipped:
        candidate = skipped.pop()
        if candidate.path.endswith(path):
            return candidate
    return None


@dataclass(eq=False)
class Node:
    """A node of the routing tree."""

    path: str = ""
    indices: str = ""
    wild_child: bool = False
    n_type: int = NodeType.STATIC
    priority: int = 0
    children: list[Node] = field(default_factory=list)
    handlers: list[Any] | None = None
    full_path: str = ""

    def _add_child(self, child: Node) -> None:
        if self.wild_child and self.children:
            self.children.insert(len(self.children) - 1, child)
        else:
            self.children.append(child)

    def _increment_child_prio(self, pos: int) -> int:
        children = self.children
        children[pos].priority += 1
        prio = children[pos].priority

        new_pos = pos
        while new_pos > 0 and children[new_pos - 1].priority < prio:
            children[new_pos - 1], children[new_pos] = children[new_pos], children[new_pos - 1]
            new_pos -= 1

        if new_pos != pos:
            idx = self.indices
            self.indices = idx[:new_pos] + idx[pos] + idx[new_pos:pos] + idx[pos + 1 :]
        return new_pos

    def add_route(self, path: str, handlers: list[Any] | None) -> None:
        """Register ``handlers`` for ``path``; raise ValueError on conflicts."""
        full_path = path
        n = self
        n.priority += 1

        if not n.path and not n.children:
            n._insert_child(path, full_path, handlers)
            n.n_type = NodeType.ROOT
            return

        parent_full_path_index = 0

        while True:
            i = longest_common_prefix(path, n.path)

            if i < len(n.path):
                child = Node(
                    path=n.path[i:],
                    wild_child=n.wild_child,
                    indices=n.indices,
                    children=n.children,
                    handlers=n.handlers,
                    priority=n.priority - 1,
                    full_path=n.full_path,
                )
                n.children = [child]
                n.indices = n.path[i]
                n.path = path[:i]
                n.handlers = None
                n.wild_child = False
                n.full_path = full_path[: parent_full_path_index + i]

            if i < len(path):
                path = path[i:]
                c = path[0]

                if n.n_type == NodeType.PARAM and c == "/" and len(n.children) == 1:
                    parent_full_path_index += len(n.path)
                    n = n.children[0]
                    n.priority += 1
                    continue

                idx = n.indices.find(c)
                if idx >= 0:
                    parent_full_path_index += len(n.path)
                    idx = n._increment_child_prio(idx)
                    n = n.children[idx]
                    continue

                if c not in ":*" and n.n_type != NodeType.CATCH_ALL:
                    n.indices += c
                    child = Node(full_path=full_path)
                    n._add_child(child)
                    n._increment_child_prio(len(n.indices) - 1)
                    n = child
                elif n.wild_child:
                    n = n.children[-1]
                    n.priority += 1

                    if (
                        len(path) >= len(n.path)
                        and n.path == path[: len(n.path)]
                        and n.n_type != NodeType.CATCH_ALL
                        and (len(n.path) >= len(path) or path[len(n.path)] == "/")
                    ):
                        continue

                    path_seg = path
                    if n.n_type != NodeType.CATCH_ALL:
                        path_seg = path_seg.split("/", 1)[0]
                    prefix = full_path[: full_path.index(path_seg)] + n.path
                    raise ValueError(
                        f"'{path_seg}' in new path '{full_path}' conflicts with existing "
                        f"wildcard '{n.path}' in existing prefix '{prefix}'"
                    )

                n._insert_child(path, full_path, handlers)
                return

            if n.handlers is not None:
                raise ValueError(f"handlers are already registered for path '{full_path}'")
            n.handlers = handlers
            n.full_path = full_path
            return

    def _insert_child(self, path: str, full_path: str, handlers: list[Any] | None) -> None:
        n = self
        while True:
            found = find_wildcard(path)
            if found is None:
                break
            wildcard, i, valid = found

            if not valid:
                raise ValueError(
                    f"only one wildcard per path segment is allowed, has: '{wildcard}' "
                    f"in path '{full_path}'"
                )
            if len(wildcard) < 2:
                raise ValueError(
                    f"wildcards must be named with a non-empty name in path '{full_path}'"
                )

            if wildcard[0] == ":":
                if i > 0:
                    n.path = path[:i]
                    path = path[i:]

                child = Node(n_type=NodeType.PARAM, path=wildcard, full_path=full_path)
                n._add_child(child)
                n.wild_child = True
                n = child
                n.priority += 1

                if len(wildcard) < len(path):
                    path = path[len(wildcard) :]
                    child = Node(priority=1, full_path=full_path)
                    n._add_child(child)
                    n = child
                    continue

                n.handlers = handlers
                return

            if i + len(wildcard) != len(path):
                raise ValueError(
                    "catch-all routes are only allowed at the end of the path "
                    f"in path '{full_path}'"
                )

            if n.path.endswith("/"):
                path_seg = n.children[0].path.split("/", 1)[0] if n.children else ""
                raise ValueError(
                    f"catch-all wildcard '{path}' in new path '{full_path}' conflicts with "
                    f"existing path segment '{path_seg}' in existing prefix "
                    f"'{n.path}{path_seg}'"
                )

            i -= 1
            if i < 0 or path[i] != "/":
                raise ValueError(f"no / before catch-all in path '{full_path}'")

            n.path = path[:i]

            child = Node(wild_child=True, n_type=NodeType.CATCH_ALL, full_path=full_path)
            n._add_child(child)
            n.indices = "/"
            n = child
            n.priority += 1

            n.children = [
                Node(
                    path=path[i:],
                    n_type=NodeType.CATCH_ALL,
                    handlers=handlers,
                    priority=1,
                    full_path=full_path,
                )
            ]
            return

        n.path = path
        n.handlers = handlers
        n.full_path = full_path

    def get_value(self, path: str, params: Params | None = None, unescape: bool = False) -> NodeValue:
        """Look up ``path``.

        Captured parameters are appended to ``params`` when it is given. If
        nothing matches, ``tsr`` tells whether the path with a trailing slash
        added or removed would match.
        """
        n = self
        value = NodeValue()
        skipped: list[_SkippedNode] = []
        global_params_count = 0

        def restore(candidate: _SkippedNode) -> tuple[str, Node, int]:
            if value.params is not None:
                del value.params[candidate.params_count :]
            return candidate.path, candidate.node, candidate.params_count

        while True:
            prefix = n.path
            if len(path) > len(prefix) and path.startswith(prefix):
                path = path[len(prefix) :]

                idx = n.indices.find(path[0])
                if idx >= 0:
                    if n.wild_child:
                        skipped.append(
                            _SkippedNode(
                                path=prefix + path,
                                node=replace(n, indices=""),
                                params_count=global_params_count,
                            )
                        )
                    n = n.children[idx]
                    continue

                if not n.wild_child:
                    if path != "/":
                        candidate = _pop_skipped(skipped, path)
                        if candidate is not None:
                            path, n, global_params_count = restore(candidate)
                            continue
                    value.tsr = path == "/" and n.handlers is not None
                    return value

                n = n.children[-1]
                global_params_count += 1

                if n.n_type == NodeType.PARAM:
                    end = path.find("/")
                    if end < 0:
                        end = len(path)

                    if params is not None:
                        if value.params is None:
                            value.params = params
                        val = path[:end]
                        if unescape:
                            val = _query_unescape(val)
                        value.params.append(Param(n.path[1:], val))

                    if end < len(path):
                        if n.children:
                            path = path[end:]
                            n = n.children[0]
                            continue
                        value.tsr = len(path) == end + 1
                        return value

                    value.handlers = n.handlers
                    if value.handlers is not None:
                        value.full_path = n.full_path
                        return value
                    if len(n.children) == 1:
                        n = n.children[0]
                        value.tsr = (n.path == "/" and n.handlers is not None) or (
                            n.path == "" and n.indices == "/"
                        )
                    return value

                if n.n_type == NodeType.CATCH_ALL:
                    if params is not None:
                        if value.params is None:
                            value.params = params
                        val = _query_unescape(path) if unescape else path
                        value.params.append(Param(n.path[2:], val))
                    value.handlers = n.handlers
                    value.full_path = n.full_path
                    return value

                raise RuntimeError("invalid node type")

            if path == prefix:
                if n.handlers is None and path != "/":
                    candidate = _pop_skipped(skipped, path)
                    if candidate is not None:
                        path, n, global_params_count = restore(candidate)
                        continue

                value.handlers = n.handlers
                if value.handlers is not None:
                    value.full_path = n.full_path
                    return value

                if path == "/" and n.wild_child and n.n_type != NodeType.ROOT:
                    value.tsr = True
                    return value

                idx = n.indices.find("/")
                if idx >= 0:
                    n = n.children[idx]
                    value.tsr = (len(n.path) == 1 and n.handlers is not None) or (
                        n.n_type == NodeType.CATCH_ALL and n.children[0].handlers is not None
                    )
                return value

            value.tsr = path == "/" or (
                len(prefix) == len(path) + 1
                and prefix[len(path)] == "/"
                and path == prefix[:-1]
                and n.handlers is not None
            )

            if not value.tsr and path != "/":
                candidate = _pop_skipped(skipped, path)
                if candidate is not None:
                    path, n, global_params_count = restore(candidate)
                    continue

            return value