from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path):
    """Create files under tmp_path from a {relative path: content} mapping."""

    def _make(files, base: Path = tmp_path) -> Path:
        for rel, content in files.items():
            path = base / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8", newline="")
        return base

    return _make
