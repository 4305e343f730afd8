"""Shared utility functions."""

import os


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def ensure_parent_dir(filepath: str) -> None:
    """Create the directory that will hold filepath if it does not exist yet."""
    os.makedirs(os.path.dirname(filepath) or ".", exist_ok=True)
