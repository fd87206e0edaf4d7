from __future__ import annotations

"""
Unit tests for the Tree Renderer.
"""

from pathtree.core.tree_renderer import render_tree
from pathtree.domain.tree_models import EntryKind, TreeEntry, TreeNode


def _node(*entries: TreeEntry) -> TreeNode:
    return TreeNode(entries=tuple(entries))


def test_render_connectors_and_nesting() -> None:
    """Verify connectors, indentation and trailing slashes on directories."""
    node = _node(
        TreeEntry("src", EntryKind.DIRECTORY, _node(
            TreeEntry("main.py", EntryKind.FILE),
            TreeEntry("util.py", EntryKind.FILE),
        )),
        TreeEntry("README.md", EntryKind.FILE),
    )

    assert render_tree(node, header="proj") == [
        "proj",
        "├── src/",
        "│   ├── main.py",
        "│   └── util.py",
        "└── README.md",
    ]


def test_render_last_directory_uses_blank_prefix() -> None:
    """Children of the last entry are indented with spaces."""
    node = _node(TreeEntry("lib", EntryKind.DIRECTORY, _node(TreeEntry("a", EntryKind.FILE))))
    assert render_tree(node) == ["└── lib/", "    └── a"]


def test_render_empty_tree() -> None:
    assert render_tree(TreeNode()) == []
