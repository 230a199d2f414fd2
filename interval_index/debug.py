"""
Debug output switch for the interval index.

Modules print progress through their own ``_debug_print`` helper, which
checks ``is_enabled()`` first. Output goes to stderr and is off by default.
"""

import sys
from datetime import datetime


_enabled: bool = False


def set_debug(enabled: bool):
    """Turn debug output on or off for the whole package."""
    global _enabled
    _enabled = bool(enabled)


def is_enabled() -> bool:
    return _enabled


def debug_print(tag: str, msg: str) -> None:
    if not _enabled:
        return
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {tag}: {msg}", file=sys.stderr)
