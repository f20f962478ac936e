"""Radix-tree routing, path helpers, response writing, log formatting and rendering."""

__version__ = "0.1.0"

__all__ = [
    "caseinsensitive",
    "logger",
    "mode",
    "path",
    "recovery",
    "render",
    "response_writer",
    "tree",
    "utils",
]