"""CSV reports of per-owner query usage."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

from ..core import OwnerAggregate
from ..utils import ensure_dir, safe_name
from .table import Column, CsvTable

logger = logging.getLogger(__name__)

SUMMARY_FILE = "results.csv"
LINES_SEPARATOR = ", "


def summary_table(aggregate: Dict[str, OwnerAggregate]) -> CsvTable:
    table = CsvTable([Column("owner"), Column("count")])
    for owner, agg in aggregate.items():
        table.add_row(owner=owner, count=str(agg.count))
    return table


def owner_table(agg: OwnerAggregate) -> CsvTable:
    table = CsvTable([Column("file"), Column("lines", always_quote=True)])
    for hit in agg.files:
        table.add_row(file=hit.path, lines=LINES_SEPARATOR.join(str(n) for n in hit.lines))
    return table


def owner_filename(owner: str) -> str:
    """``@org/team-a`` -> ``_org_team-a.csv``"""
    return f"{safe_name(owner)}.csv"


def write(out_dir: Path, aggregate: Dict[str, OwnerAggregate]) -> List[Path]:
    """Write the summary and one detail table per owner.

    Existing files are overwritten. Returns the written paths, summary first.
    """
    ensure_dir(out_dir)

    summary_path = out_dir / SUMMARY_FILE
    summary_table(aggregate).write(summary_path)
    written = [summary_path]

    for owner, agg in aggregate.items():
        path = out_dir / owner_filename(owner)
        owner_table(agg).write(path)
        logger.debug("Wrote %d rows for %s to %s", agg.count, owner, path)
        written.append(path)

    return written
