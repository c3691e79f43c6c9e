"""Query search for codeusages."""

from .scanner import DefaultScanner, format_hit, scan

__all__ = [
    "DefaultScanner",
    "format_hit",
    "scan",
]
