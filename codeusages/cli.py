"""Command line entry point.

Usage examples:

    codeusages --root ../webapp --codeowners .github/CODEOWNERS --query legacyFetch
    python -m codeusages -r ../webapp -c CODEOWNERS -q "import moment" -o reports/moment
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import UsageConfig, cfg_fingerprint, load_config
from .indexing import load_ignore_evaluator, walk
from .ownership import match, parse
from .report import write
from .search import format_hit, scan

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codeusages",
        description="Count occurrences of a string per CODEOWNERS owner",
    )
    parser.add_argument("-r", "--root", default="", help="Root directory to scan")
    parser.add_argument(
        "-c",
        "--codeowners",
        required=True,
        help="Ownership file, relative to --root",
    )
    parser.add_argument("-q", "--query", required=True, help="Literal string to search for")
    parser.add_argument(
        "-o",
        "--out",
        default=None,
        help="Output directory (default: results)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(cfg: UsageConfig) -> List[Path]:
    """Walk, scan, attribute and write reports. Returns written files."""
    logger.debug("Config fingerprint %s", cfg_fingerprint(cfg))

    evaluator = load_ignore_evaluator(cfg.ignore_path)
    files = walk(cfg.root, evaluator)
    logger.info("Found %d files in %s", len(files), cfg.root)

    found = scan(cfg.root_path, files, cfg.query)
    for path, lines in found.items():
        logger.debug("Hit %s", format_hit(path, lines))

    rules = parse(cfg.codeowners_path)
    aggregate = match(found, rules)
    logger.info("Found %d owners with files.", len(aggregate))

    out_dir = cfg.out_dir
    written = write(out_dir, aggregate)
    logger.info("Results written to %s", out_dir)
    return written


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("codeusages").setLevel(level)

    try:
        cfg = load_config(
            root=args.root,
            codeowners=args.codeowners,
            query=args.query,
            out=args.out,
        )
    except ValidationError as e:
        parser.error(str(e))

    run(cfg)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
