"""Scanner Interface."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..core import ScanResult


class Scanner:
    """Abstract base class for locating a query inside files."""

    def scan_file(self, path: Path, query: str) -> List[int]:
        """Return the 1-based line numbers of path that contain query."""
        raise NotImplementedError

    def scan(self, root: Path, files: List[str], query: str) -> ScanResult:
        """Scan files under root.

        Args:
            root: Directory the file paths are relative to
            files: Root-relative paths, in walk order
            query: Literal substring to look for

        Returns:
            Path -> line numbers, only for files with at least one hit
        """
        raise NotImplementedError
