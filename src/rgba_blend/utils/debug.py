"""Debug utilities.

Diagnostics go to stderr so the demo's stdout report stays unchanged when
``RGBA_DEBUG`` is set.
"""

from __future__ import annotations
import os
import sys

DEBUG_ENV_VAR = "RGBA_DEBUG"
_OFF_VALUES = frozenset({"0", "", "false", "no", "off"})


def is_debug_enabled() -> bool:
    """Check if RGBA_DEBUG is set to anything but an off value."""
    return os.environ.get(DEBUG_ENV_VAR, "0").strip().lower() not in _OFF_VALUES


def debug_print(*args, **kwargs):
    """Print to stderr (unless another file is given) when debugging."""
    if is_debug_enabled():
        kwargs.setdefault("file", sys.stderr)
        print(*args, **kwargs)


def debug_color_info(name: str, color):
    """Print the channels and alpha of a color when debugging."""
    debug_print(f"[{name}] r={color.r} g={color.g} b={color.b} a={color.a}")
