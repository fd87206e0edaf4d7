from __future__ import annotations

"""
Directory Lister.

Non-recursive listing of a directory's immediate entries. This is the
structural leaf of every traversal: the tree builder and the file
flattener only ever see the filesystem through ``list_paths``.
"""

import logging
import os
import time
from typing import Iterator, List, Optional, Union

from pathtree.core.path_string import join, normalize
from pathtree.infra import fs

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def list_paths(path: str) -> List[str]:
    """
    List the immediate entries of a directory.

    Dot entries are excluded and each name is normalized to forward
    slashes. Order is whatever the filesystem reports; it is not sorted.

    Args:
        path: Directory to read.

    Returns:
        List[str]: Entry names.

    Raises:
        FileNotFoundError: ``path`` does not exist.
        NotADirectoryError: ``path`` is not a directory.
        PermissionError: ``path`` cannot be read.
    """
    names = [normalize(n) for n in fs.list_entries(path) if not fs.is_dot(n)]
    logger.debug(f"Listed {len(names)} entries in {path}")
    return names


def list_dirs(path: str) -> List[str]:
    """Immediate entries of ``path`` that are directories."""
    return [n for n in list_paths(path) if fs.is_dir(join(path, n))]


def iterate(path: str) -> Iterator[os.DirEntry]:
    """
    Yield ``os.DirEntry`` objects for the entries of ``path``.

    The scandir handle is closed when the generator is exhausted or
    discarded.
    """
    with os.scandir(path) as it:
        for entry in it:
            yield entry


def mtime(path: str, fmt: Optional[str] = None) -> Union[float, str, None]:
    """
    Get the modification time of a file or of a directory's contents.

    For directories this is the newest modification time among the
    immediate entries; entries whose time cannot be read (dangling
    symlinks) are skipped. An empty directory gives None.

    Args:
        path: File or directory path.
        fmt: Optional ``time.strftime`` format for the result.

    Returns:
        Union[float, str, None]: Epoch seconds, formatted string, or None.
    """
    if fs.is_file(path):
        stamps = [os.path.getmtime(path)]
    else:
        stamps = [t for t in (_entry_mtime(join(path, n)) for n in list_paths(path)) if t is not None]

    newest = max(stamps) if stamps else None
    if fmt and newest is not None:
        return time.strftime(fmt, time.localtime(newest))
    return newest

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _entry_mtime(path: str) -> Optional[float]:
    try:
        return os.path.getmtime(path)
    except OSError as e:
        logger.warning(f"Cannot read modification time of {path}: {e}")
        return None
