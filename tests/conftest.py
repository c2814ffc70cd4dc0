"""Pytest configuration.

This repo follows the `src/` layout. Some environments may invoke a `pytest`
entrypoint from a different Python install than the one used for
`python -m pip install -e ...`, which can cause `import modpack` to fail.

To keep the suite robust, we ensure `src/` is on `sys.path` during tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Shared Test Helpers
# =============================================================================


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create `files` (relative posix path -> text) under `root`."""
    for rel, text in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def module_dir(tmp_path: Path) -> Path:
    """A small module: go.mod, a.txt, sub/b.txt and a .git directory."""
    return write_tree(
        tmp_path / "mod",
        {
            "go.mod": "module example.com/foo\n\ngo 1.21\n",
            "a.txt": "alpha\n",
            "sub/b.txt": "beta\n",
            ".git/config": "[core]\n",
        },
    )


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    p = tmp_path / "out"
    p.mkdir()
    return p
