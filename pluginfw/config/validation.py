"""Validation helpers shared by the plugin config types.

These are plain predicates: they never touch the filesystem and never raise.
"""

import re
from typing import Any

_INSTANCE_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_.\-]*")
_FORBIDDEN_PATH_CHARS = ("\x00", "\n", "\r")


def validate_file_path(file_path: Any) -> bool:
    """Check that a plugin file path is a usable, non-empty path string."""
    if not isinstance(file_path, str):
        return False
    if not file_path.strip():
        return False
    return not any(char in file_path for char in _FORBIDDEN_PATH_CHARS)


def validate_plugin_instance_name(name: Any) -> bool:
    """Check a plugin instance name.

    Names start with an ASCII letter, followed by letters, digits,
    underscores, dashes or dots (e.g. "audio_in", "logger-2", "net.tcp").
    """
    if not isinstance(name, str):
        return False
    return _INSTANCE_NAME_PATTERN.fullmatch(name) is not None
