"""File discovery for codeusages."""

from .ignore import IgnoreEvaluator, load_ignore_evaluator, read_ignore_file
from .walker import DefaultWalker, iter_files, walk

__all__ = [
    "DefaultWalker",
    "IgnoreEvaluator",
    "iter_files",
    "load_ignore_evaluator",
    "read_ignore_file",
    "walk",
]
