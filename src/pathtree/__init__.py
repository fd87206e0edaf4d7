from __future__ import annotations

"""
pathtree: path string algebra and directory traversal.

Lists directories, builds nested trees, flattens file hierarchies and
orders path lists by nesting depth.
"""

from .core.depth import depth, group, sort
from .core.flattener import list_files
from .core.listing import iterate, list_dirs, list_paths, mtime
from .core.path_string import (
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
from .core.registry import OperationRegistry, UnknownOperationError, default_registry
from .core.search import contains, find, find_dir, find_file, find_path, locate, search
from .core.tree_builder import tree
from .core.tree_renderer import render_tree
from .core.uri import is_https, root, to_uri, to_url
from .domain.host_context import HostContext
from .domain.tree_models import EntryKind, TreeEntry, TreeNode

__version__ = "1.0.0"

__all__ = [
    "EntryKind",
    "HostContext",
    "OperationRegistry",
    "TreeEntry",
    "TreeNode",
    "UnknownOperationError",
    "affix",
    "basename",
    "contains",
    "default_registry",
    "depth",
    "ext",
    "find",
    "find_dir",
    "find_file",
    "find_path",
    "group",
    "infix",
    "is_https",
    "iterate",
    "join",
    "list_dirs",
    "list_files",
    "list_paths",
    "locate",
    "lslash",
    "ltrim",
    "mtime",
    "normalize",
    "part",
    "render_tree",
    "root",
    "rslash",
    "rtrim",
    "search",
    "sort",
    "split",
    "to_uri",
    "to_url",
    "tree",
    "trim",
]
