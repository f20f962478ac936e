"""Access log formatting and console colour control."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any


class ConsoleColorMode(enum.Enum):
    AUTO = 0
    DISABLE = 1
    FORCE = 2


GREEN = "\033[97;42m"
WHITE = "\033[90;47m"
YELLOW = "\033[90;43m"
RED = "\033[97;41m"
BLUE = "\033[97;44m"
MAGENTA = "\033[97;45m"
CYAN = "\033[97;46m"
RESET = "\033[0m"

_METHOD_COLORS = {
    "GET": BLUE,
    "POST": CYAN,
    "PUT": YELLOW,
    "DELETE": RED,
    "PATCH": GREEN,
    "HEAD": MAGENTA,
    "OPTIONS": WHITE,
}

_console_color_mode = ConsoleColorMode.AUTO


@dataclass
class LogFormatterParams:
    """Everything a log formatter is given about one request."""

    request: Any = None
    timestamp: datetime = datetime.min
    status_code: int = 0
    latency: timedelta = timedelta(0)
    client_ip: str = ""
    method: str = ""
    path: str = ""
    error_message: str = ""
    is_term: bool = False
    body_size: int = 0
    keys: dict[str, Any] = field(default_factory=dict)

    def status_code_color(self) -> str:
        """ANSI colour for the status code."""
        code = self.status_code
        if 200 <= code < 300:
            return GREEN
        if 300 <= code < 400:
            return WHITE
        if 400 <= code < 500:
            return YELLOW
        return RED

    def method_color(self) -> str:
        """ANSI colour for the HTTP method."""
        return _METHOD_COLORS.get(self.method, RESET)

    def reset_color(self) -> str:
        """ANSI sequence that resets all attributes."""
        return RESET

    def is_output_color(self) -> bool:
        """Whether colours should be written to the log."""
        return _console_color_mode is ConsoleColorMode.FORCE or (
            _console_color_mode is ConsoleColorMode.AUTO and self.is_term
        )


def _fraction(value: int, precision: int) -> str:
    whole, frac = divmod(value, 10**precision)
    digits = f"{frac:0{precision}d}".rstrip("0")
    return f"{whole}.{digits}" if digits else str(whole)


def format_duration(d: timedelta) -> str:
    """Render a duration like ``5s``, ``1.5ms`` or ``2743h29m3s``."""
    sign = "-" if d < timedelta(0) else ""
    ns = (abs(d) // timedelta(microseconds=1)) * 1000
    if ns < 10**9:
        if ns == 0:
            return "0s"
        if ns < 10**3:
            return f"{sign}{ns}ns"
        if ns < 10**6:
            return f"{sign}{_fraction(ns, 3)}µs"
        return f"{sign}{_fraction(ns, 6)}ms"

    minute = 60 * 10**9
    seconds = _fraction(ns % minute, 9) + "s"
    minutes = ns // minute
    if minutes == 0:
        return sign + seconds
    hours, minutes = divmod(minutes, 60)
    text = f"{minutes}m{seconds}"
    if hours:
        text = f"{hours}h{text}"
    return sign + text


_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _quote(s: str) -> str:
    out = []
    for ch in s:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        else:
            cp = ord(ch)
            if cp < 0x100:
                out.append(f"\\x{cp:02x}")
            elif cp < 0x10000:
                out.append(f"\\u{cp:04x}")
            else:
                out.append(f"\\U{cp:08x}")
    return '"' + "".join(out) + '"'


def default_log_formatter(params: LogFormatterParams) -> str:
    """Format one access-log line in the default layout."""
    status_color = method_color = reset_color = ""
    if params.is_output_color():
        status_color = params.status_code_color()
        method_color = params.method_color()
        reset_color = params.reset_color()

    latency = params.latency
    if latency > timedelta(minutes=1):
        latency -= timedelta(microseconds=latency.microseconds)

    return (
        f"[ROUTEKIT] {params.timestamp.strftime('%Y/%m/%d - %H:%M:%S')} |"
        f"{status_color} {params.status_code:3d} {reset_color}|"
        f" {format_duration(latency):>13} |"
        f" {params.client_ip:>15} |"
        f"{method_color} {params.method:<7} {reset_color}"
        f" {_quote(params.path)}\n{params.error_message}"
    )


def disable_console_color() -> None:
    """Never write colours to the console."""
    global _console_color_mode
    _console_color_mode = ConsoleColorMode.DISABLE


def force_console_color() -> None:
    """Always write colours to the console."""
    global _console_color_mode
    _console_color_mode = ConsoleColorMode.FORCE


def console_color_mode() -> ConsoleColorMode:
    """Return the current console colour mode."""
    return _console_color_mode