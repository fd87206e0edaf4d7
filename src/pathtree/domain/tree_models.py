from __future__ import annotations

"""
Directory Tree Data Models.

A directory is modelled as an ordered sequence of tagged entries: each
entry is either a file or a directory carrying its own child node. The
mapping view reproduces the classic "trailing slash marks a directory"
dictionary for callers that want a plain nested dict.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from pathtree.domain.constants import DIR_MARKER

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class TreeEntry:
    """
    One child of a directory node.

    Attributes:
        name: Entry name as listed (no slashes).
        kind: File or directory tag.
        children: Nested node for directories, None for files.
    """
    name: str
    kind: EntryKind
    children: Optional["TreeNode"] = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def key(self) -> str:
        """Mapping-view key: directories carry a trailing slash."""
        return self.name + DIR_MARKER if self.is_dir else self.name


@dataclass(frozen=True)
class TreeNode:
    """
    Ordered contents of one directory.

    Entry order is the filesystem listing order; it is not sorted.
    """
    entries: Tuple[TreeEntry, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[TreeEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, key: str) -> "TreeNode":
        """
        Return the child node of a directory entry.

        Accepts both ``"sub"`` and the mapping-view key ``"sub/"``.

        Raises:
            KeyError: No directory entry with that name.
        """
        name = key[:-len(DIR_MARKER)] if key.endswith(DIR_MARKER) else key
        for entry in self.entries:
            if entry.is_dir and entry.name == name:
                return entry.children if entry.children is not None else TreeNode()
        raise KeyError(key)

    def files(self) -> List[str]:
        """Names of the file entries, in listing order."""
        return [e.name for e in self.entries if not e.is_dir]

    def dirs(self) -> List[TreeEntry]:
        """Directory entries, in listing order."""
        return [e for e in self.entries if e.is_dir]

    def to_mapping(self) -> Dict[str, Any]:
        """
        Convert the node into a nested dictionary.

        Directory keys end with ``/`` and map to nested dictionaries;
        file keys never end with ``/`` and map to None.
        """
        mapping: Dict[str, Any] = {}
        for entry in self.entries:
            if entry.is_dir:
                child = entry.children if entry.children is not None else TreeNode()
                mapping[entry.key] = child.to_mapping()
            else:
                mapping[entry.key] = None
        return mapping
