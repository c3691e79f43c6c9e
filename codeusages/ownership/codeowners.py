"""CODEOWNERS-style rule parsing and owner attribution."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List

from wcmatch import glob

from ..core import FileMatch, OwnerAggregate, OwnershipRule, ScanResult
from ..utils import read_lines

logger = logging.getLogger(__name__)

# `*` stays inside a segment, `**` crosses segments, `{a,b}` and `+(a|b)` expand
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB


def parse_lines(lines: Iterable[str]) -> List[OwnershipRule]:
    """Parse ``pattern owner1 owner2 ...`` lines.

    The first character of each pattern is the path anchor and is dropped.
    A pattern declared again replaces the owners of the earlier declaration
    but keeps its position.
    """
    rules: Dict[str, List[str]] = {}
    for line in lines:
        if not line.strip() or line.startswith("#"):
            continue
        parts = line.split()
        pattern = parts[0][1:]
        rules[pattern] = parts[1:]
    return [OwnershipRule(pattern, tuple(owners)) for pattern, owners in rules.items()]


def parse(path: Path) -> List[OwnershipRule]:
    rules = parse_lines(read_lines(path))
    logger.debug("Loaded %d ownership rules from %s", len(rules), path)
    return rules


def rule_matches(rule: OwnershipRule, file_path: str) -> bool:
    return glob.globmatch(file_path, rule.pattern, flags=GLOB_FLAGS)


def match(files: ScanResult, rules: List[OwnershipRule]) -> Dict[str, OwnerAggregate]:
    """Attribute every matched file to the owners of every rule it satisfies.

    Args:
        files: Scan result, path -> line numbers
        rules: Ownership rules in declaration order

    Returns:
        Owner -> aggregate, in the order owners were first encountered.
        Files matching no rule are left out silently.
    """
    owners: Dict[str, OwnerAggregate] = {}
    for path, lines in files.items():
        hit = FileMatch(path=path, lines=tuple(lines))
        for rule in rules:
            if not rule_matches(rule, path):
                continue
            for owner in rule.owners:
                if owner not in owners:
                    owners[owner] = OwnerAggregate(owner)
                owners[owner].add(hit)
    return owners
