from __future__ import annotations

"""
Logging Configuration Model.

Immutable settings for the logging subsystem plus the mapping from
level names to numeric logging constants.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Attributes:
        level: Minimum severity name ("DEBUG", "INFO", ...).
        console: Emit records on stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Size threshold for rotation.
        backup_count: Rotated segments to keep.
        console_fmt: Format for stderr records.
        file_fmt: Format for file records.
        datefmt: Timestamp format for file records.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @property
    def level_int(self) -> int:
        """Numeric level; unknown names fall back to INFO."""
        if not self.level:
            return logging.INFO
        return LEVEL_MAP.get(str(self.level).strip().upper(), logging.INFO)
