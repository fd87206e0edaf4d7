from __future__ import annotations

"""
Depth Grouping and Sorting.

Buckets relative paths by nesting depth and reorders them deepest-first.
Depth is the literal number of ``/`` characters in a path, so a bare
file name sits at depth 0. Both functions are pure.
"""

from typing import Iterable, List

from pathtree.domain.constants import SEPARATOR


def depth(path: str) -> int:
    """Nesting depth of ``path``: the count of forward slashes."""
    return path.count(SEPARATOR)


def group(paths: Iterable[str]) -> List[List[str]]:
    """
    Bucket paths by depth.

    The result is dense: every depth from 0 to the maximum observed has
    a bucket, empty ones included. Within a bucket the input order is
    kept.

    Args:
        paths: Relative, forward-slash separated paths.

    Returns:
        List[List[str]]: ``result[d]`` holds the paths of depth ``d``.
    """
    items = list(paths)
    levels = [depth(p) for p in items]
    if not levels:
        return []

    buckets: List[List[str]] = [[] for _ in range(max(levels) + 1)]
    for level, path in zip(levels, items):
        buckets[level].append(path)
    return buckets


def sort(paths: Iterable[str]) -> List[str]:
    """
    Reorder paths deepest-first.

    Buckets from ``group`` are concatenated from the deepest to depth 0.
    Paths of equal depth keep their relative order, which makes the
    function stable and idempotent.

    Args:
        paths: Relative, forward-slash separated paths.

    Returns:
        List[str]: The reordered paths.
    """
    ordered: List[str] = []
    for bucket in reversed(group(paths)):
        ordered.extend(bucket)
    return ordered
