"""Utility functions for codeusages."""

from .file_utils import (
    ensure_dir,
    read_lines,
    safe_name,
    split_lines,
)

__all__ = [
    "ensure_dir",
    "read_lines",
    "safe_name",
    "split_lines",
]
