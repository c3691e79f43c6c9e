"""Data models for codeusages."""

from __future__ import annotations

import dataclasses
from typing import Dict, List, Tuple


# relative path -> 1-based line numbers, in walk order
ScanResult = Dict[str, List[int]]


@dataclasses.dataclass(frozen=True)
class FileMatch:
    """A file containing the query, with the lines it occurs on."""

    path: str
    lines: Tuple[int, ...]


@dataclasses.dataclass(frozen=True)
class OwnershipRule:
    """A glob pattern and the owners declared for it."""

    pattern: str
    owners: Tuple[str, ...]


@dataclasses.dataclass
class OwnerAggregate:
    """Accumulated matches for one owner.

    A file is listed once per matching rule, so the same path may repeat.
    """

    owner: str
    files: List[FileMatch] = dataclasses.field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.files)

    def add(self, match: FileMatch) -> None:
        self.files.append(match)
