"""Walker Interface."""

from __future__ import annotations

from typing import List

from .ignore import IgnoreEvaluator


class Walker:
    """Abstract base class for listing the files to scan."""

    def walk(self, root: str, evaluator: IgnoreEvaluator) -> List[str]:
        """List files under root.

        Args:
            root: Directory to walk
            evaluator: Exclusion rules, consulted before descending

        Returns:
            Root-relative POSIX paths in directory-listing order
        """
        raise NotImplementedError
