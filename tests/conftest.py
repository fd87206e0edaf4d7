from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports from a
   source checkout.
2. Provides small directory trees built under tmp_path.
"""

import logging
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


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Build a small project layout.

    Structure:
    /root
      a.txt
      /sub
        b.txt
        /deep
          c.txt
      /empty
    """
    root = tmp_path / "root"
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.txt").write_text("a", encoding="utf-8")
    (root / "sub" / "b.txt").write_text("b", encoding="utf-8")
    (root / "sub" / "deep" / "c.txt").write_text("c", encoding="utf-8")
    return root


@pytest.fixture
def twin_tree(tmp_path: Path) -> Path:
    """
    Directory and file sharing a base name at different levels.

    Structure:
    /twin
      x          (directory)
        x        (file)
      x.txt
    """
    root = tmp_path / "twin"
    (root / "x").mkdir(parents=True)
    (root / "x" / "x").write_text("inner", encoding="utf-8")
    (root / "x.txt").write_text("outer", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def reset_pathtree_logging():
    """Detach any handler a test installed through configure_logging."""
    yield
    from pathtree.infra.logging import shutdown_logging
    shutdown_logging()
    logging.getLogger().setLevel(logging.WARNING)
