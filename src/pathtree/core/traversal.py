from __future__ import annotations

"""
Traversal Limits.

Opt-in bounds for recursive descent. With default values nothing is
restricted and recursion is unbounded, including through symlink loops.
"""

import logging
import os
from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

logger = logging.getLogger(__name__)

# Branch state carried down the recursion: (level, real paths of ancestors)
Branch = Tuple[int, FrozenSet[str]]


@dataclass(frozen=True)
class TraversalLimits:
    """
    Bounds applied while descending into subdirectories.

    Attributes:
        max_depth: Deepest directory level whose contents are read. The
                   root's own entries are level 0; None means unlimited.
        guard_cycles: Skip directories whose real path already appears
                      among the ancestors of the current branch.
    """
    max_depth: Optional[int] = None
    guard_cycles: bool = False

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

    def root_branch(self, path: str) -> Branch:
        """Branch state for the traversal root."""
        ancestors = frozenset({os.path.realpath(path)}) if self.guard_cycles else frozenset()
        return 0, ancestors

    def descend(self, directory: str, branch: Branch) -> Optional[Branch]:
        """
        Decide whether ``directory`` (an entry at ``branch`` level) is read.

        Returns:
            Optional[Branch]: Branch state for the child, or None to skip it.
        """
        level, ancestors = branch
        if self.max_depth is not None and level >= self.max_depth:
            logger.debug(f"Depth limit {self.max_depth} reached at {directory}")
            return None

        if not self.guard_cycles:
            return level + 1, ancestors

        real = os.path.realpath(directory)
        if real in ancestors:
            logger.warning(f"Directory cycle detected, not descending into {directory} ({real})")
            return None
        return level + 1, ancestors | {real}
