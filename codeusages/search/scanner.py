"""Literal substring search over text files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from ..core import ScanResult
from ..utils import read_lines
from .base import Scanner

logger = logging.getLogger(__name__)


class DefaultScanner(Scanner):
    """Case-sensitive containment check, line by line."""

    def scan_file(self, path: Path, query: str) -> List[int]:
        lines = read_lines(path)
        return [idx for idx, line in enumerate(lines, start=1) if query in line]

    def scan(self, root: Path, files: List[str], query: str) -> ScanResult:
        found: ScanResult = {}
        for rel in files:
            hits = self.scan_file(root / rel, query)
            if hits:
                found[rel] = hits
        return found


def scan(root: Path, files: List[str], query: str) -> ScanResult:
    scanner = DefaultScanner()
    found = scanner.scan(root, files, query)
    logger.debug("Query %r found in %d of %d files", query, len(found), len(files))
    return found


def format_hit(path: str, lines: List[int]) -> str:
    return f"{path}:" + ",".join(str(n) for n in lines)
