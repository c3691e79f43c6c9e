"""Minimal CSV table with per-column quoting."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Dict, List, Sequence

DELIMITER = ","
QUOTE = '"'
LINE_TERMINATOR = "\n"


@dataclasses.dataclass(frozen=True)
class Column:
    name: str
    always_quote: bool = False


def format_cell(value: str, always_quote: bool = False) -> str:
    """Quote a cell when forced to, or when it would break the row."""
    needs_quote = always_quote or any(c in value for c in (DELIMITER, QUOTE, "\n", "\r"))
    if not needs_quote:
        return value
    return QUOTE + value.replace(QUOTE, QUOTE * 2) + QUOTE


class CsvTable:
    """Ordered columns and rows of stringified cells.

    Rows are mappings of column name to cell text. Output has a header row and
    no trailing line terminator.
    """

    def __init__(self, columns: Sequence[Column]) -> None:
        self.columns = list(columns)
        self.rows: List[Dict[str, str]] = []

    def add_row(self, **cells: str) -> None:
        unknown = set(cells) - {c.name for c in self.columns}
        if unknown:
            raise KeyError(f"Unknown columns: {sorted(unknown)}")
        self.rows.append(cells)

    def render(self) -> str:
        lines = [DELIMITER.join(format_cell(c.name) for c in self.columns)]
        for row in self.rows:
            lines.append(
                DELIMITER.join(
                    format_cell(row.get(c.name, ""), c.always_quote) for c in self.columns
                )
            )
        return LINE_TERMINATOR.join(lines)

    def write(self, path: Path) -> None:
        path.write_text(self.render(), encoding="utf-8", newline="")
