from __future__ import annotations

"""
Configuration Domain.

Dict-based settings for the command line front end, persisted as JSON
in the user data directory. Loading always yields a complete dictionary:
missing keys come from the defaults and unreadable files fall back to
the defaults entirely.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from pathtree.domain.constants import CONFIG_FILENAME, CURRENT_CONFIG_VERSION
from pathtree.infra.fs import get_user_data_dir, safe_mkdir

logger = logging.getLogger(__name__)


def get_default_config_path() -> str:
    """Location of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILENAME)


def get_default_config() -> Dict[str, Any]:
    """
    Default runtime configuration.

    Returns:
        Dict[str, Any]: Fresh dictionary of default values.
    """
    return {
        # Traversal limits
        "max_depth": None,
        "guard_cycles": False,

        # Output
        "json_output": False,

        # Diagnostics
        "log_level": "INFO",
        "log_file": None,
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration merged over the defaults.

    Args:
        path: Config file; defaults to ``get_default_config_path()``.

    Returns:
        Dict[str, Any]: Complete configuration dictionary.
    """
    config = get_default_config()
    target = path or get_default_config_path()

    if not os.path.exists(target):
        logger.debug(f"Config file not found at {target}. Using defaults.")
        return config

    try:
        with open(target, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to read config '{target}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{target}'. Using defaults.")
        return config

    data.pop("version", None)
    config.update(data)
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist ``config`` as JSON.

    Returns:
        bool: True when the file was written.
    """
    target = path or get_default_config_path()
    ok, err = safe_mkdir(os.path.dirname(os.path.abspath(target)))
    if not ok:
        logger.error(f"Cannot create config directory for '{target}': {err}")
        return False

    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        with open(target, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

    logger.debug(f"Configuration saved to {target}")
    return True
