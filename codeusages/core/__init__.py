"""Core data types for codeusages."""

from .models import FileMatch, OwnerAggregate, OwnershipRule, ScanResult

__all__ = [
    "FileMatch",
    "OwnerAggregate",
    "OwnershipRule",
    "ScanResult",
]
