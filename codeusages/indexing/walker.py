"""Recursive file listing."""

from __future__ import annotations

import logging
import os
from pathlib import PurePath
from typing import Iterator, List

from .base import Walker
from .ignore import IgnoreEvaluator

logger = logging.getLogger(__name__)

GIT_DIR = ".git"


def _relative(path: str, base: str) -> str:
    return PurePath(os.path.relpath(path, base)).as_posix()


def iter_files(directory: str, evaluator: IgnoreEvaluator, base: str | None = None) -> Iterator[str]:
    if base is None:
        base = directory

    with os.scandir(directory) as it:
        entries = list(it)

    for entry in entries:
        rel = _relative(entry.path, base)
        if rel == GIT_DIR:
            continue

        # symlinks are neither followed nor listed
        if entry.is_dir(follow_symlinks=False):
            if evaluator.ignores(rel + "/"):
                logger.debug("Skipping directory %s", rel)
                continue
            yield from iter_files(entry.path, evaluator, base)
        elif entry.is_file(follow_symlinks=False):
            if evaluator.ignores(rel):
                continue
            yield rel


class DefaultWalker(Walker):

    def walk(self, root: str, evaluator: IgnoreEvaluator) -> List[str]:
        return list(iter_files(root, evaluator))


def walk(root: str, evaluator: IgnoreEvaluator) -> List[str]:
    """List non-ignored files under root (Wrapper)."""
    walker = DefaultWalker()
    return walker.walk(root, evaluator)
