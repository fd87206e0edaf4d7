from __future__ import annotations

"""
Unit tests for the Configuration Domain.

Verifies defaults, JSON persistence round trips through a temporary
file and the fallback behaviour for missing or corrupted files.
"""

import json
import os
from pathlib import Path
from unittest.mock import patch

from pathtree.domain.config import (
    get_default_config,
    get_default_config_path,
    load_config,
    save_config,
)
from pathtree.domain.constants import CURRENT_CONFIG_VERSION


def test_default_config_values() -> None:
    """TC-01: Defaults describe an unbounded, text-output run."""
    conf = get_default_config()
    assert conf == {
        "max_depth": None,
        "guard_cycles": False,
        "json_output": False,
        "log_level": "INFO",
        "log_file": None,
    }
    # Fresh dictionary on every call
    conf["max_depth"] = 3
    assert get_default_config()["max_depth"] is None


def test_default_config_path_in_user_data_dir() -> None:
    """TC-02: The config file lives in the application data directory."""
    with patch("pathtree.domain.config.get_user_data_dir", return_value="/data/pathtree"):
        assert get_default_config_path() == os.path.join("/data/pathtree", "config.json")


def test_load_missing_file_gives_defaults(tmp_path: Path) -> None:
    """TC-03: No file, no error."""
    assert load_config(str(tmp_path / "none.json")) == get_default_config()


def test_load_merges_over_defaults(tmp_path: Path) -> None:
    """TC-04: Stored keys override defaults, the version stamp is dropped."""
    target = tmp_path / "config.json"
    target.write_text(json.dumps({"version": "0.1", "max_depth": 2}), encoding="utf-8")

    conf = load_config(str(target))
    assert conf["max_depth"] == 2
    assert conf["guard_cycles"] is False
    assert "version" not in conf


def test_load_corrupted_file_gives_defaults(tmp_path: Path) -> None:
    """TC-05: Invalid JSON and non-object documents fall back to defaults."""
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert load_config(str(broken)) == get_default_config()

    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]", encoding="utf-8")
    assert load_config(str(listing)) == get_default_config()


def test_save_then_load(tmp_path: Path) -> None:
    """TC-06: Saved values come back, parent directories are created."""
    target = tmp_path / "nested" / "config.json"
    conf = get_default_config()
    conf["guard_cycles"] = True

    assert save_config(conf, str(target)) is True

    stored = json.loads(target.read_text(encoding="utf-8"))
    assert stored["version"] == CURRENT_CONFIG_VERSION
    assert load_config(str(target))["guard_cycles"] is True


def test_save_reports_directory_failure(tmp_path: Path) -> None:
    """TC-07: A failed mkdir is reported as False, not raised."""
    with patch("pathtree.domain.config.safe_mkdir", return_value=(False, "denied")):
        assert save_config(get_default_config(), str(tmp_path / "x" / "c.json")) is False
