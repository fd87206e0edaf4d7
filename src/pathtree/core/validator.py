from __future__ import annotations

"""
Configuration Validation.

Normalizes an untrusted configuration dictionary (from the JSON file or
CLI overrides) into typed values, filling gaps with defaults and
collecting human readable warnings for everything that was corrected.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from pathtree.domain.config import get_default_config
from pathtree.infra.logging.config import LEVEL_MAP

logger = logging.getLogger(__name__)

_BOOL_FIELDS = ("guard_cycles", "json_output")
_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off", ""}


def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: Raise instead of coercing invalid values.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized config and warnings.

    Raises:
        TypeError: Strict mode and ``config`` (or a field) has a wrong type.
        ValueError: Strict mode and a field has an invalid value.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for key in sorted(set(config) - set(defaults)):
        warnings.append(f"Unknown config key '{key}' ignored.")
        merged.pop(key)

    # max_depth: None or non-negative int
    try:
        merged["max_depth"] = _coerce_depth(merged["max_depth"])
    except (TypeError, ValueError) as e:
        if strict:
            raise
        warnings.append(f"{e} Using no depth limit.")
        merged["max_depth"] = defaults["max_depth"]

    for key in _BOOL_FIELDS:
        try:
            merged[key] = _coerce_bool(key, merged[key])
        except TypeError:
            if strict:
                raise
            warnings.append(f"Invalid boolean for '{key}': {merged[key]!r}. Using default.")
            merged[key] = defaults[key]

    level = str(merged.get("log_level") or "").strip().upper()
    if level not in LEVEL_MAP:
        msg = f"Unknown log level {merged.get('log_level')!r}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using INFO.")
        level = "INFO"
    merged["log_level"] = level

    log_file = merged.get("log_file")
    merged["log_file"] = str(log_file) if log_file else None

    for w in warnings:
        logger.debug(f"Config validation: {w}")
    return merged, warnings

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _coerce_depth(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise TypeError(f"Invalid max_depth: {value!r}.")
    depth = int(value)
    if depth < 0:
        raise ValueError(f"Invalid max_depth: {value!r} is negative.")
    return depth


def _coerce_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise TypeError(f"Invalid boolean for '{key}': {value!r}.")
