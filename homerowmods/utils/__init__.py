"""Utility functions for homerowmods."""

from homerowmods.utils.constants import Constants
from homerowmods.utils.helpers import ensure_parent_dir, expand_file_path
from homerowmods.utils.logging import setup_logger

__all__ = [
    "Constants",
    "ensure_parent_dir",
    "expand_file_path",
    "setup_logger",
]
