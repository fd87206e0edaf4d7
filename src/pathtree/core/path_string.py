from __future__ import annotations

"""
Path String Algebra.

Pure, filesystem-independent helpers over path strings: separator
normalization, slash trimming, joining, segment splitting and file
extension handling. Every function here is textual; none of them
resolves symlinks, touches the disk or folds case.
"""

import re
from typing import Iterable, List, Optional, Sequence, Union

from pathtree.domain.constants import SEPARATOR, SLASHES

_EXTENSION_RX = re.compile(r"(\.\w+)$")

# -----------------------------------------------------------------------------
# NORMALIZATION AND TRIMMING
# -----------------------------------------------------------------------------

def normalize(path: str) -> str:
    """
    Convert every backslash into a forward slash.

    Args:
        path: Raw path string.

    Returns:
        str: The same path using forward slashes only.
    """
    return path.replace("\\", SEPARATOR)


def trim(value: str) -> str:
    """Strip forward and back slashes from both ends."""
    return value.strip(SLASHES)


def ltrim(value: str) -> str:
    """Strip forward and back slashes from the left end."""
    return value.lstrip(SLASHES)


def rtrim(value: str) -> str:
    """Strip forward and back slashes from the right end."""
    return value.rstrip(SLASHES)


def lslash(value: str) -> str:
    """Return ``value`` with exactly one leading forward slash."""
    return SEPARATOR + ltrim(value)


def rslash(value: str) -> str:
    """Return ``value`` with exactly one trailing forward slash."""
    return rtrim(value) + SEPARATOR

# -----------------------------------------------------------------------------
# COMPOSITION
# -----------------------------------------------------------------------------

def join(*parts: str) -> str:
    """
    Join paths or URI parts using a forward slash as the glue.

    Folds left to right. While the accumulated result is empty the next
    part is taken verbatim; afterwards the accumulator loses its trailing
    slashes, the next part loses its leading slashes and both are glued
    with a single ``/``. Outer slashes of the first and last parts are
    preserved.

    Examples:
        join("a", "b", "c")  -> "a/b/c"
        join("/a/", "/b/")   -> "/a/b/"

    Args:
        *parts: Path fragments in order.

    Returns:
        str: The joined path ("" when no parts are given).
    """
    result = ""
    for part in parts:
        result = f"{rtrim(result)}{SEPARATOR}{ltrim(part)}" if result else part
    return result


def split(path: str) -> List[str]:
    """
    Split a path into its ordered segments.

    The path is normalized and stripped of outer slashes first, so an
    empty (or slash-only) path yields an empty list rather than ``[""]``.

    Args:
        path: Path string to split.

    Returns:
        List[str]: Ordered path segments.
    """
    stripped = normalize(path).strip(SEPARATOR)
    if not stripped:
        return []
    return stripped.split(SEPARATOR)


def part(path: Union[str, Sequence[str]], idx: int = 0) -> Optional[str]:
    """
    Extract one segment of a path by index.

    Negative indices count from the end. ``path`` may be a path string or
    an already split segment sequence.

    Args:
        path: Path string or segment sequence.
        idx: Segment index.

    Returns:
        Optional[str]: The segment, or None when the index is out of range.
    """
    segments = split(path) if isinstance(path, str) else list(path)
    position = len(segments) + idx if idx < 0 else int(idx)
    if 0 <= position < len(segments):
        return segments[position]
    return None

# -----------------------------------------------------------------------------
# EXTENSIONS
# -----------------------------------------------------------------------------

def basename(path: str) -> str:
    """Return the last segment of ``path`` ("" for an empty path)."""
    last = part(path, -1)
    return last if last is not None else ""


def ext(path: str) -> Optional[str]:
    """
    Return the extension of the path's basename, dot included.

    The last dot wins, so ``archive.tar.gz`` gives ``.gz`` and a dotfile
    such as ``.bashrc`` is returned whole.

    Args:
        path: File path.

    Returns:
        Optional[str]: Extension with its leading dot, or None.
    """
    name = basename(path)
    dot = name.rfind(".")
    if dot < 0:
        return None
    return name[dot:]


def infix(path: str, text: str) -> str:
    """
    Insert ``text`` right before the file extension.

    ``infix("app.js", ".min")`` gives ``app.min.js``. Paths without a
    word-character extension are returned unchanged.

    Args:
        path: File path.
        text: Text to insert before the extension.

    Returns:
        str: The rewritten path.
    """
    return _EXTENSION_RX.sub(lambda m: text + m.group(1), path)


def affix(items: Iterable[str], prefix: str = "", suffix: str = "") -> List[str]:
    """Wrap every item with ``prefix`` and ``suffix``."""
    return [f"{prefix}{item}{suffix}" for item in items]
