from __future__ import annotations

from .config import LoggingConfig
from .core import (
    configure_logging,
    get_default_log_path,
    get_logger,
    get_recent_logs,
    shutdown_logging,
)
from .handlers import HANDLER_TAG_ATTR

__all__ = [
    "HANDLER_TAG_ATTR",
    "LoggingConfig",
    "configure_logging",
    "get_default_log_path",
    "get_logger",
    "get_recent_logs",
    "shutdown_logging",
]
