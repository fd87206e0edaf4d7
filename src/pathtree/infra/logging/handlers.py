from __future__ import annotations

"""
Logging Handler Factories.

Creates the handlers attached by ``configure_logging`` and tags them so
that reconfiguration only ever removes handlers pathtree installed
itself, leaving host-application handlers alone.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

HANDLER_TAG_ATTR: str = "_pathtree_handler"


def tag_handler(handler: logging.Handler) -> logging.Handler:
    """Mark ``handler`` as owned by pathtree and return it."""
    setattr(handler, HANDLER_TAG_ATTR, True)
    return handler


def is_our_handler(handler: logging.Handler) -> bool:
    """True when ``handler`` carries the pathtree tag."""
    return bool(getattr(handler, HANDLER_TAG_ATTR, False))


def create_console_handler(level_int: int, formatter: logging.Formatter) -> logging.Handler:
    """Tagged stderr handler."""
    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    return tag_handler(sh)


def create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Tagged RotatingFileHandler writing UTF-8.

    The parent directory is created when missing. Returns None (after a
    warning on stderr) when the file cannot be opened, so a bad log path
    never prevents the tool from running.
    """
    try:
        parent = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(parent, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    tag_handler(fh)
    return fh
