"""Small helpers for instance types and file paths."""

from __future__ import annotations

import os


def is_gpu_instance_type(instance_type: str) -> bool:
    """Return True if the instance type is GPU optimised."""
    return instance_type.startswith(("p2", "p3"))


def file_exists(path: str | os.PathLike) -> bool:
    """Return whether a file exists; errors other than absence are raised."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def expand_path(path: str) -> str:
    """Expand a leading ``~/`` to the user's home directory."""
    if path.startswith("~/"):
        return os.path.expanduser("~") + path[1:]
    return path