from __future__ import annotations

"""
Operation Registry.

Explicit name-to-callable mapping for path operations. Callers resolve
operations through a registry object they hold a reference to, so extra
operations can be plugged in without any implicit dispatch on the
module or class.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Mapping, Optional

from pathtree.core import depth, flattener, listing, path_string, search, tree_builder
from pathtree.infra import fs

logger = logging.getLogger(__name__)

Operation = Callable[..., Any]


class UnknownOperationError(KeyError):
    """Raised when a registry is asked for a name it does not hold."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Operation '{self.name}' is not registered."


class OperationRegistry:
    """
    Thread-safe catalog of named path operations.
    """

    def __init__(self, operations: Optional[Mapping[str, Operation]] = None) -> None:
        self._operations: Dict[str, Operation] = {}
        self._lock = threading.Lock()
        if operations:
            self.mixin(operations)

    def register(self, name: str, fn: Optional[Operation]) -> None:
        """
        Bind ``name`` to ``fn``, replacing any previous binding.

        A None ``fn`` is ignored.

        Raises:
            TypeError: ``fn`` is neither None nor callable.
        """
        if fn is None:
            return
        if not callable(fn):
            raise TypeError(f"Operation '{name}' must be callable, got {type(fn).__name__}.")
        with self._lock:
            replaced = name in self._operations
            self._operations[name] = fn
        logger.debug(f"Registry: {'replaced' if replaced else 'registered'} operation '{name}'")

    def mixin(self, operations: Mapping[str, Optional[Operation]]) -> None:
        """Register every name/callable pair of ``operations``."""
        for name, fn in operations.items():
            self.register(name, fn)

    def get(self, name: str) -> Operation:
        """
        Resolve an operation.

        Raises:
            UnknownOperationError: ``name`` is not registered.
        """
        with self._lock:
            fn = self._operations.get(name)
        if fn is None:
            raise UnknownOperationError(name)
        return fn

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Resolve ``name`` and invoke it with the given arguments."""
        return self.get(name)(*args, **kwargs)

    def methods(self) -> List[str]:
        """Sorted names of all registered operations."""
        with self._lock:
            return sorted(self._operations)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._operations

    def __len__(self) -> int:
        with self._lock:
            return len(self._operations)


def default_registry() -> OperationRegistry:
    """
    Create a fresh registry pre-loaded with the built-in operations.

    Each call returns an independent registry, so registering extra
    operations on one never leaks into another.
    """
    return OperationRegistry({
        # Path algebra
        "normalize": path_string.normalize,
        "trim": path_string.trim,
        "ltrim": path_string.ltrim,
        "rtrim": path_string.rtrim,
        "lslash": path_string.lslash,
        "rslash": path_string.rslash,
        "join": path_string.join,
        "split": path_string.split,
        "part": path_string.part,
        "ext": path_string.ext,
        "infix": path_string.infix,
        "affix": path_string.affix,
        # Filesystem probe
        "is_path": fs.is_path,
        "is_dir": fs.is_dir,
        "is_file": fs.is_file,
        "is_dot": fs.is_dot,
        "is_abs": fs.is_abs,
        "to_abs": fs.to_abs,
        # Traversal
        "list_paths": listing.list_paths,
        "list_dirs": listing.list_dirs,
        "list_files": flattener.list_files,
        "mtime": listing.mtime,
        "tree": tree_builder.tree,
        "group": depth.group,
        "sort": depth.sort,
        # Search
        "contains": search.contains,
        "search": search.search,
        "find": search.find,
        "find_path": search.find_path,
        "find_file": search.find_file,
        "find_dir": search.find_dir,
        "locate": search.locate,
    })
