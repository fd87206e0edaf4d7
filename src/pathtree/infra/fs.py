from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin collaborator over the 'os' module used by every traversal service:
path predicates, canonicalization, raw directory reads and small
text/JSON passthroughs. Directory read errors are never swallowed here;
callers decide what to do with them.
"""

import json
import os
from typing import Any, Callable, List, Optional, Tuple, Union

from pathtree.domain.constants import APP_DIR_NAME, DOT_ENTRIES, UNIX_APP_DIR_NAME

# -----------------------------------------------------------------------------
# APPLICATION DATA DIRECTORY
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the OS-specific directory used for configuration and logs.

    Standards:
    - Windows: %LOCALAPPDATA%/pathtree
    - Linux/Mac: ~/.pathtree

    The directory is not created here; writers create it on demand.

    Returns:
        str: Absolute path to the application data directory.
    """
    path = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)

# -----------------------------------------------------------------------------
# PATH PREDICATES
# -----------------------------------------------------------------------------

def is_path(item: Any) -> bool:
    """True when ``item`` is a string naming an existing file or directory."""
    return isinstance(item, str) and os.path.exists(item)


# Alias matching the collaborator interface naming
exists = is_path


def is_dir(item: Any) -> bool:
    """True when ``item`` is a string naming an existing directory."""
    return isinstance(item, str) and os.path.isdir(item)


def is_file(item: Any) -> bool:
    """True when ``item`` is a string naming an existing regular file."""
    return isinstance(item, str) and os.path.isfile(item)


def is_dot(item: Any) -> bool:
    """True for the ``.`` and ``..`` pseudo entries."""
    return item in DOT_ENTRIES


def is_abs(item: Any) -> bool:
    """True when ``item`` already is its own canonical absolute path."""
    return isinstance(item, str) and to_abs(item) == item


def to_abs(item: Any) -> Optional[str]:
    """
    Canonicalize a path (absolute, symlinks resolved).

    Args:
        item: Candidate path.

    Returns:
        Optional[str]: The canonical path, or None for non-string input
                       and for paths that do not exist.
    """
    if not isinstance(item, str) or not os.path.exists(item):
        return None
    return os.path.realpath(item)

# -----------------------------------------------------------------------------
# DIRECTORY READS
# -----------------------------------------------------------------------------

def list_entries(directory: str) -> List[str]:
    """
    Read the raw entry names of a directory in filesystem order.

    Raises:
        FileNotFoundError: The directory does not exist.
        NotADirectoryError: The path is not a directory.
        PermissionError: The directory cannot be read.
    """
    return os.listdir(directory)

# -----------------------------------------------------------------------------
# FILE PASSTHROUGHS
# -----------------------------------------------------------------------------

def _pass(fn: Optional[Callable[[Any], Any]], value: Any) -> Any:
    """Feed ``value`` through ``fn`` when one is given."""
    return value if fn is None else fn(value)


def get_file(path: Any, fn: Optional[Callable[[Optional[str]], Any]] = None) -> Any:
    """
    Read a text file.

    Args:
        path: File path.
        fn: Optional post-processor receiving the content (or None).

    Returns:
        Any: File content, None when ``path`` is not a file, or fn's result.
    """
    content: Optional[str] = None
    if is_file(path):
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    return _pass(fn, content)


def put_file(path: Optional[str], data: Union[str, Callable[[Optional[str]], str]]) -> Optional[int]:
    """
    Write a text file.

    ``data`` may be a callable; it receives the current content (None
    when the file does not exist yet) and returns the text to write.

    Returns:
        Optional[int]: Number of characters written, None when path is None.
    """
    if path is None:
        return None
    if callable(data):
        data = data(get_file(path))
    with open(path, "w", encoding="utf-8") as f:
        return f.write(data)


def get_json(path: Any, fn: Optional[Callable[[Any], Any]] = None) -> Any:
    """
    Decode a JSON file.

    A mapping passed instead of a path is returned as a plain dict so
    callers can hand in pre-decoded data.

    Returns:
        Any: Decoded document, None for a missing file or a None path.
    """
    if isinstance(path, str):
        content = get_file(path)
        data = json.loads(content) if content is not None else None
    elif path is None:
        data = None
    else:
        data = dict(path)
    return _pass(fn, data)


def put_json(path: Optional[str], data: Any) -> Optional[int]:
    """
    Encode and write a JSON document.

    Strings are written verbatim (assumed to be encoded JSON already).
    A callable receives the currently decoded document first.

    Returns:
        Optional[int]: Number of characters written, None when path is None.
    """
    if path is None:
        return None
    if callable(data):
        data = data(get_json(path))
    return put_file(path, data if isinstance(data, str) else json.dumps(data))
