from __future__ import annotations

"""
Search and Locate Helpers.

Substring search over path lists and first-match resolution built on
top of the directory lister and the file flattener.
"""

import os
from typing import Any, Callable, Iterable, List, Mapping, Optional, Union

from pathtree.core.flattener import list_files
from pathtree.core.listing import list_dirs, list_paths

# Predicate signature: (value, key, collection) -> truthy
Test = Callable[[Any, Any, Any], Any]


def contains(haystack: Any, needle: str) -> bool:
    """
    Test whether ``needle`` occurs in ``haystack``.

    Strings are searched directly. Mappings are searched through their
    keys and values, other iterables item by item, recursively. None
    never matches.
    """
    if haystack is None:
        return False
    if isinstance(haystack, str):
        return needle in haystack
    if isinstance(haystack, Mapping):
        return any(contains(k, needle) or contains(v, needle) for k, v in haystack.items())
    if isinstance(haystack, Iterable):
        return any(contains(v, needle) for v in haystack)
    return needle in str(haystack)


def search(path: Union[str, Iterable[Any]], needle: str) -> List[Any]:
    """
    Filter paths containing ``needle``.

    Args:
        path: A directory (its immediate entries are searched) or an
              already built list of items.
        needle: Substring to look for.

    Returns:
        List[Any]: Matching items in input order.
    """
    items = list_paths(path) if isinstance(path, str) else path
    return [item for item in items if contains(item, needle)]


def find(items: Union[Iterable[Any], Mapping[Any, Any]], test: Test) -> Any:
    """
    Return the first item accepted by ``test``.

    ``test`` is called as ``test(value, key, items)``; keys are indices
    for sequences.

    Returns:
        Any: The first accepted value, or None.
    """
    pairs = items.items() if isinstance(items, Mapping) else enumerate(items)
    for key, value in pairs:
        if test(value, key, items):
            return value
    return None


def find_path(path: str, test: Test) -> Optional[str]:
    """First immediate entry of ``path`` accepted by ``test``."""
    return find(list_paths(path), test)


def find_file(path: str, test: Test) -> Optional[str]:
    """First file below ``path`` (deepest-first order) accepted by ``test``."""
    return find(list_files(path), test)


def find_dir(path: str, test: Test) -> Optional[str]:
    """First immediate subdirectory of ``path`` accepted by ``test``."""
    return find(list_dirs(path), test)


def locate(*paths: str) -> Optional[str]:
    """Return the first readable path among the arguments."""
    return find(paths, lambda p, _k, _l: isinstance(p, str) and os.access(p, os.R_OK))
