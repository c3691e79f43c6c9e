"""Configuration management for codeusages."""

from .manager import (
    BINARY_EXTENSIONS,
    DEFAULT_IGNORE_FILE,
    DEFAULT_IGNORE_PATTERNS,
    DEFAULT_OUT_DIR,
    UsageConfig,
    binary_patterns,
    cfg_fingerprint,
    default_ignore_patterns,
    load_config,
)

__all__ = [
    "BINARY_EXTENSIONS",
    "DEFAULT_IGNORE_FILE",
    "DEFAULT_IGNORE_PATTERNS",
    "DEFAULT_OUT_DIR",
    "UsageConfig",
    "binary_patterns",
    "cfg_fingerprint",
    "default_ignore_patterns",
    "load_config",
]
