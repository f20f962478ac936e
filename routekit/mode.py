"""Global running mode: debug, release or test."""

from __future__ import annotations

import os

ENV_MODE = "ROUTEKIT_MODE"

DEBUG_MODE = "debug"
RELEASE_MODE = "release"
TEST_MODE = "test"

_MODES = (DEBUG_MODE, RELEASE_MODE, TEST_MODE)

_mode_name = DEBUG_MODE


def set_mode(value: str) -> None:
    """Set the running mode; an empty value picks test under pytest, else debug."""
    global _mode_name
    if not value:
        value = TEST_MODE if os.environ.get("PYTEST_CURRENT_TEST") else DEBUG_MODE
    if value not in _MODES:
        raise ValueError(f"mode unknown: {value} (available mode: debug release test)")
    _mode_name = value


def mode() -> str:
    """Return the current running mode."""
    return _mode_name


set_mode(os.environ.get(ENV_MODE, ""))