"""Gitignore-style exclusion rules for the tree walk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

import pathspec

from ..config import default_ignore_patterns
from ..utils import read_lines

logger = logging.getLogger(__name__)


def read_ignore_file(path: Path) -> List[str]:
    """Read ignore patterns, treating a missing file as empty."""
    try:
        return read_lines(path)
    except FileNotFoundError:
        logger.debug("No ignore file at %s", path)
        return []


class IgnoreEvaluator:
    """Answers whether a root-relative path is excluded.

    Patterns are evaluated with gitignore semantics, so a later ``!pattern``
    can re-include a path excluded earlier. Directory paths should be passed
    with a trailing slash for directory-only patterns such as ``build/``.
    """

    def __init__(self, patterns: Iterable[str]) -> None:
        self.patterns = list(patterns)
        self._spec = pathspec.GitIgnoreSpec.from_lines(self.patterns)

    def ignores(self, relative_path: str) -> bool:
        return self._spec.match_file(relative_path)


def load_ignore_evaluator(ignore_path: Path) -> IgnoreEvaluator:
    """Build the evaluator from the root ignore file plus built-in rules."""
    patterns = read_ignore_file(ignore_path)
    patterns.extend(default_ignore_patterns())
    return IgnoreEvaluator(patterns)
