from __future__ import annotations

"""
Tree Renderer.

Converts a TreeNode into ASCII lines using the standard connectors
(├──, └──). Entries are emitted in listing order and directory names
keep their trailing slash.
"""

from typing import List, Optional

from pathtree.domain.tree_models import TreeNode

_BRANCH = "├── "
_LAST = "└── "
_PIPE = "│   "
_BLANK = "    "


def render_tree(node: TreeNode, header: Optional[str] = None) -> List[str]:
    """
    Render a tree as text lines.

    Args:
        node: Root node to render.
        header: Optional first line (usually the root path).

    Returns:
        List[str]: Visual lines, one per entry.
    """
    lines: List[str] = [header] if header else []
    _render_level(node, lines, prefix="")
    return lines


def _render_level(node: TreeNode, lines: List[str], prefix: str) -> None:
    total = len(node)
    for i, entry in enumerate(node):
        is_last = i == total - 1
        lines.append(f"{prefix}{_LAST if is_last else _BRANCH}{entry.key}")

        if entry.is_dir and entry.children is not None:
            _render_level(entry.children, lines, prefix + (_BLANK if is_last else _PIPE))
