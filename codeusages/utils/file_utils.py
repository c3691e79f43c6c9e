"""File utility functions."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

_LINE_BREAK = re.compile(r"\r?\n")
_UNSAFE_NAME_CHARS = re.compile(r"[^a-zA-Z0-9_-]")


def ensure_dir(p: Path) -> None:
    """Create directory if it doesn't exist."""
    p.mkdir(parents=True, exist_ok=True)


def split_lines(text: str) -> List[str]:
    """Split on LF or CRLF. A trailing newline yields a final empty line."""
    return _LINE_BREAK.split(text)


def read_lines(path: Path) -> List[str]:
    """Read a UTF-8 text file as lines. Decode errors are not suppressed."""
    # newline="" keeps a lone "\r" inside its line
    with path.open("r", encoding="utf-8", newline="") as f:
        return split_lines(f.read())


def safe_name(name: str) -> str:
    return _UNSAFE_NAME_CHARS.sub("_", name)
