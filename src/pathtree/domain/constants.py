from __future__ import annotations

"""
Domain Constants.

Centralized values shared by the path algebra, the traversal services
and the configuration layer.
"""

from typing import FrozenSet

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# PATH ALGEBRA
# -----------------------------------------------------------------------------

# Characters stripped by the trim family (forward and back slash)
SLASHES = "/\\"
SEPARATOR = "/"
DOT_ENTRIES: FrozenSet[str] = frozenset({".", ".."})

# Suffix that marks a directory key in the mapping view of a tree
DIR_MARKER = "/"

# -----------------------------------------------------------------------------
# APPLICATION STORAGE
# -----------------------------------------------------------------------------

APP_DIR_NAME = "pathtree"
UNIX_APP_DIR_NAME = ".pathtree"
CONFIG_FILENAME = "config.json"
LOG_FILENAME = "pathtree.log"

# -----------------------------------------------------------------------------
# URI FORMATTING
# -----------------------------------------------------------------------------

HTTPS_PORT = 443
HTTPS_OFF_VALUE = "off"
