"""Helpers for reporting a recovered failure: stack dumps and request masking."""

from __future__ import annotations

import linecache
import traceback
from datetime import datetime

DUNNO = "???"


def source(lines: list[str], n: int) -> str:
    """Return the whitespace-trimmed 1-based line ``n`` of ``lines``, or ``???``."""
    n -= 1
    if n < 0 or n >= len(lines):
        return DUNNO
    return lines[n].strip()


def function_name(name: str) -> str:
    """Shorten a qualified function name.

    The package path up to the last ``/`` and the package name up to the
    first ``.`` are dropped, and centre dots become dots, so
    ``runtime/debug.*T·ptrmethod`` becomes ``*T.ptrmethod``.
    """
    if not name:
        return DUNNO
    last_slash = name.rfind("/")
    if last_slash >= 0:
        name = name[last_slash + 1 :]
    period = name.find(".")
    if period >= 0:
        name = name[period + 1 :]
    return name.replace("·", ".")


def stack(skip: int) -> str:
    """Return a formatted dump of the call stack, innermost first.

    ``skip`` frames are left out, counting this function as frame 0. Each
    frame gives ``file:line`` and, when the file can be read, the function
    name and the trimmed source line.
    """
    out = []
    last_file = None
    lines: list[str] = []
    for frame in list(reversed(traceback.extract_stack()))[skip:]:
        out.append(f"{frame.filename}:{frame.lineno}\n")
        if frame.filename != last_file:
            file_lines = linecache.getlines(frame.filename)
            if not file_lines:
                continue
            lines = file_lines
            last_file = frame.filename
        out.append(f"\t{frame.name}: {source(lines, frame.lineno or 0)}\n")
    return "".join(out)


def time_format(t: datetime) -> str:
    """Format a time the way the log lines do."""
    return t.strftime("%Y/%m/%d - %H:%M:%S")


def mask_authorization(headers: str) -> str:
    """Hide the value of any Authorization header in a dumped request."""
    masked = []
    for header in headers.split("\r\n"):
        key = header.split(":", 1)[0]
        masked.append(f"{key}: *" if key == "Authorization" else header)
    return "\r\n".join(masked)