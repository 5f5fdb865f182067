"""Host platform tag stamped on every record.

The tag is opaque to the rest of the package: records carry whatever string
the host supplies, falling back to a short name derived from ``sys.platform``.
"""

from __future__ import annotations

import sys

_PLATFORM_NAMES: dict[str, str] = {
    "linux": "linux",
    "darwin": "macos",
    "win32": "windows",
    "cygwin": "windows",
    "ios": "ios",
    "android": "android",
    "emscripten": "wasm",
    "wasi": "wasm",
}


def current_platform() -> str:
    """Return a short platform tag such as ``linux``, ``macos`` or ``windows``."""

    for prefix, label in _PLATFORM_NAMES.items():
        if sys.platform.startswith(prefix):
            return label
    return sys.platform


__all__ = ["current_platform"]
