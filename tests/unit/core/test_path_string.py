from __future__ import annotations

"""
Unit tests for the Path String Algebra.

Verifies:
1. Separator normalization and the trim family.
2. Join folding rules.
3. Segment splitting and indexed access.
4. Extension extraction and infix insertion.
"""

import pytest

from pathtree.core.path_string import (
    affix,
    basename,
    ext,
    infix,
    join,
    lslash,
    ltrim,
    normalize,
    part,
    rslash,
    rtrim,
    split,
    trim,
)

# -----------------------------------------------------------------------------
# NORMALIZATION AND TRIMMING
# -----------------------------------------------------------------------------

def test_normalize_replaces_backslashes_only() -> None:
    """TC-01: Backslashes become forward slashes, nothing else changes."""
    assert normalize("C:\\Users\\Me\\File.TXT") == "C:/Users/Me/File.TXT"
    assert normalize("already/fine") == "already/fine"
    assert normalize("") == ""


def test_trim_family_strips_both_slash_kinds() -> None:
    """TC-02: trim/ltrim/rtrim strip '/' and '\\' from the expected ends."""
    assert trim("/\\a/b\\/") == "a/b"
    assert ltrim("//a/") == "a/"
    assert rtrim("/a\\\\") == "/a"


def test_lslash_and_rslash_force_single_slash() -> None:
    """TC-03: Exactly one leading/trailing slash is produced."""
    assert lslash("///a") == "/a"
    assert lslash("a") == "/a"
    assert rslash("a///") == "a/"
    assert rslash("") == "/"

# -----------------------------------------------------------------------------
# JOIN
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "parts, expected",
    [
        (("a", "b", "c"), "a/b/c"),
        (("/a/", "/b/"), "/a/b/"),
        (("a/", "/b", "c/"), "a/b/c/"),
        (("", "b"), "b"),
        (("a",), "a"),
        ((), ""),
    ],
)
def test_join_folding(parts, expected) -> None:
    """TC-04: Inner slashes collapse to one, outer slashes survive."""
    assert join(*parts) == expected


def test_join_first_part_taken_verbatim() -> None:
    """TC-05: The first non-empty part keeps its own leading slashes."""
    assert join("//root", "x") == "//root/x"

# -----------------------------------------------------------------------------
# SPLIT AND PART
# -----------------------------------------------------------------------------

def test_split_segments() -> None:
    """TC-06: Outer slashes are ignored and backslashes normalized."""
    assert split("/a/b/c/") == ["a", "b", "c"]
    assert split("a\\b") == ["a", "b"]


def test_split_empty_yields_empty_list() -> None:
    """TC-07: Empty and slash-only input give [] rather than ['']."""
    assert split("") == []
    assert split("///") == []


def test_part_positive_and_negative_indices() -> None:
    """TC-08: Negative indices count from the end, misses give None."""
    assert part("a/b/c") == "a"
    assert part("a/b/c", 1) == "b"
    assert part("a/b/c", -1) == "c"
    assert part("a/b/c", 3) is None
    assert part("a/b/c", -4) is None
    assert part(["x", "y"], -2) == "x"

# -----------------------------------------------------------------------------
# EXTENSIONS
# -----------------------------------------------------------------------------

def test_ext_uses_last_dot_of_basename() -> None:
    """TC-09: Extension comes from the basename, last dot wins."""
    assert ext("dir.d/archive.tar.gz") == ".gz"
    assert ext("src/app.js") == ".js"
    assert ext(".bashrc") == ".bashrc"
    assert ext("dir.d/Makefile") is None


def test_basename_of_trailing_slash_path() -> None:
    """TC-10: Trailing slashes do not produce an empty basename."""
    assert basename("a/b/") == "b"
    assert basename("") == ""


def test_infix_inserts_before_extension() -> None:
    """TC-11: Text lands right before the final extension."""
    assert infix("js/app.js", ".min") == "js/app.min.js"
    assert infix("style.css", "-v2") == "style-v2.css"
    assert infix("README", ".min") == "README"


def test_infix_with_backslash_text_is_literal() -> None:
    """TC-12: Replacement text is not interpreted as a regex template."""
    assert infix("a.txt", "\\1") == "a\\1.txt"


def test_affix_wraps_every_item() -> None:
    """TC-13: Prefix and suffix are applied to each item."""
    assert affix(["a", "b"], "<", ">") == ["<a>", "<b>"]
    assert affix([], "x") == []
