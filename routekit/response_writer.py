"""Response writers: a recording one for tests and the tracking wrapper."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from http import HTTPStatus
from typing import Any

_log = logging.getLogger(__name__)

NO_WRITTEN = -1
DEFAULT_STATUS = HTTPStatus.OK


def _canonical(key: str) -> str:
    return "-".join(part[:1].upper() + part[1:].lower() for part in key.split("-"))


class Headers:
    """Multi-valued HTTP headers with case-insensitive keys."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, list[str]] = {}
        for key, value in (initial or {}).items():
            self.add(key, value)

    def get(self, key: str, default: str = "") -> str:
        """Return the first value for ``key``, or ``default``."""
        values = self._values.get(_canonical(key))
        return values[0] if values else default

    def set(self, key: str, value: str) -> None:
        """Replace all values of ``key`` with ``value``."""
        self._values[_canonical(key)] = [value]

    def add(self, key: str, value: str) -> None:
        """Append ``value`` to the values of ``key``."""
        self._values.setdefault(_canonical(key), []).append(value)

    def __getitem__(self, key: str) -> list[str]:
        return list(self._values[_canonical(key)])

    def __delitem__(self, key: str) -> None:
        canonical = _canonical(key)
        if canonical not in self._values:
            raise KeyError(key)
        self._values.pop(canonical)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and bool(self._values.get(_canonical(key)))

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Headers({self._values!r})"


class ResponseRecorder:
    """An in-memory response sink that records status, headers and body."""

    def __init__(self) -> None:
        self.code = int(HTTPStatus.OK)
        self.header = Headers()
        self.body = bytearray()
        self.wrote_header = False
        self.flushed = False

    def write_header(self, code: int) -> None:
        """Record the status code; only the first call has effect."""
        if self.wrote_header:
            return
        if not 100 <= code <= 999:
            raise ValueError(f"invalid WriteHeader code {code}")
        self.code = code
        self.wrote_header = True

    def write(self, data: bytes) -> int:
        """Append ``data`` to the body, sending a 200 header first if needed."""
        if not self.wrote_header:
            self.write_header(HTTPStatus.OK)
        self.body.extend(data)
        return len(data)

    def flush(self) -> None:
        """Mark the response as flushed."""
        if not self.wrote_header:
            self.write_header(HTTPStatus.OK)
        self.flushed = True

    @property
    def text(self) -> str:
        return self.body.decode("utf-8")


class ResponseWriter:
    """Wraps a low-level writer and tracks status code and body size."""

    def __init__(self, writer: Any = None) -> None:
        self.reset(writer)

    def reset(self, writer: Any) -> None:
        """Attach a new underlying writer and clear the tracked state."""
        self.writer = writer
        self.size = NO_WRITTEN
        self.status = int(DEFAULT_STATUS)

    @property
    def header(self) -> Headers:
        return self.writer.header

    @property
    def written(self) -> bool:
        return self.size != NO_WRITTEN

    def write_header(self, code: int) -> None:
        """Remember the status code to send; ignored if not positive."""
        if code > 0 and self.status != code:
            if self.written:
                _log.warning(
                    "Headers were already written. Wanted to override status code %d with %d",
                    self.status,
                    code,
                )
            self.status = code

    def write_header_now(self) -> None:
        """Send the status line now unless it was already sent."""
        if not self.written:
            self.size = 0
            self.writer.write_header(self.status)

    def write(self, data: bytes) -> int:
        """Write body bytes, sending the header first; return the count."""
        self.write_header_now()
        n = self.writer.write(data)
        self.size += n
        return n

    def write_string(self, s: str) -> int:
        """Write ``s`` as UTF-8 body bytes."""
        return self.write(s.encode("utf-8"))

    def hijack(self) -> Any:
        """Hand over the connection of the underlying writer."""
        if self.size < 0:
            self.size = 0
        hijack = getattr(self.writer, "hijack", None)
        if hijack is None:
            raise TypeError("the underlying response writer does not support hijacking")
        return hijack()

    def flush(self) -> None:
        """Send the header if needed and flush the underlying writer."""
        self.write_header_now()
        self.writer.flush()