"""Configuration management for codeusages."""

from __future__ import annotations

import hashlib
import json
import os
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_OUT_DIR = "results"
DEFAULT_IGNORE_FILE = ".gitignore"

BINARY_EXTENSIONS: List[str] = [
    "png", "jpg", "jpeg", "gif", "svg", "webp", "ico",
    "zip", "tar", "gz", "bz2", "xz", "tgz",
]

DEFAULT_IGNORE_PATTERNS: List[str] = [
    ".git",
    # vendored code one level under any directory
    "**/*/lib/*",
]


def binary_patterns(extensions: List[str]) -> List[str]:
    """Turn bare extensions into patterns matching them at any depth.

    Examples:
        ['png'] -> ['**/*.png']
    """
    return ["**/*." + ext.lstrip(".") for ext in extensions]


def default_ignore_patterns() -> List[str]:
    """Built-in ignore rules, appended after the root ignore file."""
    return DEFAULT_IGNORE_PATTERNS + binary_patterns(BINARY_EXTENSIONS)


class UsageConfig(BaseModel):
    """Settings for a single scan, built once at startup."""

    root: str = ""
    codeowners: str = Field(min_length=1)
    query: str = Field(min_length=1)
    out: str = DEFAULT_OUT_DIR
    ignore_file: str = DEFAULT_IGNORE_FILE

    model_config = ConfigDict(frozen=True)

    @property
    def root_path(self) -> Path:
        return Path(self.root)

    @property
    def codeowners_path(self) -> Path:
        """Ownership file, always under the scanned root."""
        return self.root_path / self.codeowners.lstrip("/")

    @property
    def ignore_path(self) -> Path:
        return self.root_path / self.ignore_file.lstrip("/")

    @property
    def out_dir(self) -> Path:
        """Output directory, relative to the working directory."""
        return Path(self.out).resolve()


def load_config(
    root: str = "",
    codeowners: str = "",
    query: str = "",
    out: Optional[str] = None,
    ignore_file: Optional[str] = None,
) -> UsageConfig:
    """Load configuration.

    Values left as None fall back to the environment, then to the defaults.
    """
    if out is None:
        out = os.getenv("CODEUSAGES_OUT", DEFAULT_OUT_DIR)
    if ignore_file is None:
        ignore_file = os.getenv("CODEUSAGES_IGNORE_FILE", DEFAULT_IGNORE_FILE)

    return UsageConfig(
        root=root,
        codeowners=codeowners,
        query=query,
        out=out,
        ignore_file=ignore_file,
    )


def cfg_fingerprint(cfg: UsageConfig) -> str:
    """Generate fingerprint hash for config."""
    data: Dict = cfg.model_dump()
    payload = json.dumps(data, sort_keys=True, ensure_ascii=False).encode("utf-8")
    return hashlib.sha256(payload).hexdigest()
