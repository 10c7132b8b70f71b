from pathlib import Path

import pytest


def _write_tree(root: Path, files: dict) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
    return root


@pytest.fixture
def make_tree(tmp_path):
    """Build a directory under tmp_path from a {relative path: content} mapping."""

    def _make(files, name="src"):
        return _write_tree(tmp_path / name, files)

    return _make
