from __future__ import annotations

"""
Logging Lifecycle.

Idempotent configuration of the root logger. Records are pushed through
a QueueHandler and written by a QueueListener thread, so file I/O never
runs on the caller's thread during a large traversal.
"""

import atexit
import logging
import os
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from pathtree.domain.constants import LOG_FILENAME
from pathtree.infra.fs import get_user_data_dir
from pathtree.infra.logging.config import LoggingConfig
from pathtree.infra.logging.handlers import (
    create_console_handler,
    create_rotating_file_handler,
    is_our_handler,
    tag_handler,
)

CONFIGURED_FLAG_ATTR: str = "_pathtree_configured"
QUEUE_LISTENER_ATTR: str = "_pathtree_queue_listener"

# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = LOG_FILENAME) -> str:
    """Standard log file location inside the user data directory."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once.

    Later calls are no-ops unless ``force`` is set, in which case the
    handlers and listener installed previously are torn down first.

    Args:
        cfg: Logging settings.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    shutdown_logging()

    level_int = cfg.level_int
    root.setLevel(level_int)

    handlers: List[logging.Handler] = []
    if cfg.console:
        handlers.append(create_console_handler(level_int, logging.Formatter(cfg.console_fmt)))
    if cfg.log_file:
        fh = create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers.append(fh)

    setattr(root, CONFIGURED_FLAG_ATTR, True)
    if not handlers:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    listener.start()

    root.addHandler(tag_handler(QueueHandler(log_queue)))
    setattr(root, QUEUE_LISTENER_ATTR, listener)
    atexit.register(_stop_listener, listener)

    return root


def shutdown_logging() -> None:
    """
    Flush and detach everything ``configure_logging`` installed.

    Stops the queue listener (which closes its handlers), drops its
    exit hook and removes the tagged handlers from the root logger.
    """
    root = logging.getLogger()

    listener = getattr(root, QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _stop_listener(listener)
        atexit.unregister(_stop_listener)
        for h in listener.handlers:
            h.close()
        setattr(root, QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if is_our_handler(h):
            root.removeHandler(h)
            h.close()

    setattr(root, CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    """Named logger (usually ``__name__``)."""
    return logging.getLogger(name)


def get_recent_logs(log_path: Optional[str] = None, n_lines: int = 100) -> str:
    """
    Return the last ``n_lines`` of a log file.

    Args:
        log_path: Log file; defaults to ``get_default_log_path()``.
        n_lines: Maximum number of trailing lines.

    Returns:
        str: The log tail, or a short notice when the file is missing.
    """
    path = log_path or get_default_log_path()
    if not os.path.exists(path):
        return "Log file not found."

    with open(path, "r", encoding="utf-8", errors="replace") as f:
        lines = f.readlines()
    return "".join(lines[-n_lines:])

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _stop_listener(listener: QueueListener) -> None:
    """Stop ``listener`` if its thread is still running."""
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
