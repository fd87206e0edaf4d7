from __future__ import annotations

"""
File Flattener.

Recursively collects every file below a directory as a flat list of
paths relative to the traversal root, ordered deepest-first.
"""

import logging
from typing import List, Optional

from pathtree.core.depth import sort
from pathtree.core.listing import list_paths
from pathtree.core.path_string import join
from pathtree.core.traversal import Branch, TraversalLimits
from pathtree.infra import fs

logger = logging.getLogger(__name__)


def list_files(
        path: str,
        *,
        max_depth: Optional[int] = None,
        guard_cycles: bool = False,
) -> List[str]:
    """
    List all files below ``path``.

    Paths are relative to ``path`` and forward-slash separated. Deeper
    files come first; files at the same depth keep traversal order (see
    ``pathtree.core.depth.sort``).

    Args:
        path: Traversal root.
        max_depth: Optional limit on the directory levels read.
        guard_cycles: Skip directories already visited on the branch.

    Returns:
        List[str]: Relative file paths.

    Raises:
        OSError: Any listing failure, propagated unchanged. No partial
                 result is returned.
    """
    limits = TraversalLimits(max_depth=max_depth, guard_cycles=guard_cycles)
    files = _collect(path, limits, limits.root_branch(path))
    logger.debug(f"Collected {len(files)} files under {path}")
    return files


def _collect(path: str, limits: TraversalLimits, branch: Branch) -> List[str]:
    found: List[str] = []

    for name in list_paths(path):
        child = join(path, name)
        if not fs.is_dir(child):
            found.append(name)
            continue

        child_branch = limits.descend(child, branch)
        if child_branch is None:
            continue
        found.extend(join(name, f) for f in _collect(child, limits, child_branch))

    return sort(found) if found else found
