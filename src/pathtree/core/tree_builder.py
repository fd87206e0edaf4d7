from __future__ import annotations

"""
Directory Tree Builder.

Recursively maps a directory into a TreeNode. Each level mirrors the
listing order of ``list_paths``; nothing is sorted or pruned. Filesystem
errors raised anywhere in the descent abort the whole build.
"""

import logging
from typing import List, Optional

from pathtree.core.listing import list_paths
from pathtree.core.path_string import join
from pathtree.core.traversal import Branch, TraversalLimits
from pathtree.domain.tree_models import EntryKind, TreeEntry, TreeNode
from pathtree.infra import fs

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def tree(
        path: str,
        *,
        max_depth: Optional[int] = None,
        guard_cycles: bool = False,
) -> TreeNode:
    """
    Build the nested structure of a directory.

    Directories become entries carrying their own TreeNode, files become
    leaf entries. ``to_mapping()`` on the result gives the dictionary
    form where directory keys end with ``/``.

    Args:
        path: Traversal root.
        max_depth: Optional limit on the directory levels read.
        guard_cycles: Skip directories already visited on the branch.

    Returns:
        TreeNode: Root node.

    Raises:
        OSError: Any listing failure (missing path, not a directory,
                 permission denied), propagated unchanged.
    """
    logger.debug(f"Building directory tree for: {path}")
    limits = TraversalLimits(max_depth=max_depth, guard_cycles=guard_cycles)
    return _build_node(path, limits, limits.root_branch(path))

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _build_node(path: str, limits: TraversalLimits, branch: Branch) -> TreeNode:
    """Read one directory level and recurse into its subdirectories."""
    entries: List[TreeEntry] = []

    for name in list_paths(path):
        child = join(path, name)
        if not fs.is_dir(child):
            entries.append(TreeEntry(name=name, kind=EntryKind.FILE))
            continue

        child_branch = limits.descend(child, branch)
        children = _build_node(child, limits, child_branch) if child_branch else TreeNode()
        entries.append(TreeEntry(name=name, kind=EntryKind.DIRECTORY, children=children))

    return TreeNode(entries=tuple(entries))
