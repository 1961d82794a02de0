from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared directory-tree fixtures used across unit and integration tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


def _can_symlink(base: Path) -> bool:
    probe = base / "_symlink_probe"
    try:
        os.symlink(str(base), str(probe))
    except (OSError, NotImplementedError, AttributeError):
        return False
    probe.unlink()
    return True


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def simple_tree(tmp_path: Path) -> Path:
    """
    Root holding one directory, one file and one hidden file.

    Structure:
    /root
      /a
      b.txt
      .hidden
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a").mkdir()
    (root / "b.txt").write_text("b", encoding="utf-8")
    (root / ".hidden").write_text("h", encoding="utf-8")
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """
    Three-level tree.

    Structure:
    /project
      /docs
        guide.md
      /src
        /pkg
          core.py
        main.py
      README.md
    """
    root = tmp_path / "project"
    (root / "docs").mkdir(parents=True)
    (root / "docs" / "guide.md").write_text("# Guide", encoding="utf-8")
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "src" / "pkg" / "core.py").write_text("x = 1", encoding="utf-8")
    (root / "src" / "main.py").write_text("print()", encoding="utf-8")
    (root / "README.md").write_text("# Project", encoding="utf-8")
    return root


@pytest.fixture
def symlink_capable(tmp_path: Path) -> None:
    """Skip the test where the platform or user cannot create symlinks."""
    if not _can_symlink(tmp_path):
        pytest.skip("symlinks not supported here")
