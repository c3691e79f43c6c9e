"""Report output for codeusages."""

from .table import Column, CsvTable, format_cell
from .writer import SUMMARY_FILE, owner_filename, owner_table, summary_table, write

__all__ = [
    "Column",
    "CsvTable",
    "SUMMARY_FILE",
    "format_cell",
    "owner_filename",
    "owner_table",
    "summary_table",
    "write",
]
