"""Ownership attribution for codeusages."""

from .codeowners import match, parse, parse_lines, rule_matches

__all__ = [
    "match",
    "parse",
    "parse_lines",
    "rule_matches",
]
