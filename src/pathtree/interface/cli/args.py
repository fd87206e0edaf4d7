from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (sub-commands plus shared options) and
translates the parsed namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def _common_options() -> argparse.ArgumentParser:
    """Options accepted both before and after the sub-command."""
    # SUPPRESS keeps a sub-command parser from resetting values given
    # before the sub-command name.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Emit machine readable JSON instead of text.",
    )
    common.add_argument(
        "--max-depth",
        dest="max_depth",
        type=int,
        default=argparse.SUPPRESS,
        help="Read at most this many directory levels below the root.",
    )
    common.add_argument(
        "--guard-cycles",
        dest="guard_cycles",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Do not descend into directories already visited on the branch (symlink loops).",
    )
    common.add_argument(
        "--config",
        dest="config_path",
        default=argparse.SUPPRESS,
        help="Path of the JSON configuration file.",
    )
    common.add_argument(
        "--use-defaults",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Ignore the persisted configuration file.",
    )
    common.add_argument(
        "--log-file",
        dest="log_file",
        default=argparse.SUPPRESS,
        help="Also write diagnostics to this rotating log file.",
    )
    common.add_argument(
        "--debug",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Elevate logging verbosity to DEBUG.",
    )
    return common


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the pathtree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    common = _common_options()
    p = argparse.ArgumentParser(
        prog="pathtree",
        description="List, flatten and depth-sort directory trees.",
        parents=[common],
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )

    sub = p.add_subparsers(dest="command", metavar="COMMAND")

    # --- Traversal ---
    sp = sub.add_parser("tree", parents=[common], help="Render the nested directory structure.")
    sp.add_argument("path", help="Traversal root.")

    sp = sub.add_parser("files", parents=[common], help="List every file below PATH, deepest first.")
    sp.add_argument("path", help="Traversal root.")

    sp = sub.add_parser("paths", parents=[common], help="List the immediate entries of PATH.")
    sp.add_argument("path", help="Directory to list.")

    sp = sub.add_parser("dirs", parents=[common], help="List the immediate subdirectories of PATH.")
    sp.add_argument("path", help="Directory to list.")

    # --- Search ---
    sp = sub.add_parser("search", parents=[common], help="Entries of PATH containing NEEDLE.")
    sp.add_argument("path", help="Directory to search.")
    sp.add_argument("needle", help="Substring to look for.")
    sp.add_argument(
        "-r", "--recursive",
        action="store_true",
        help="Search every file below PATH instead of the immediate entries.",
    )

    # --- Pure list operations ---
    sp = sub.add_parser("sort", parents=[common], help="Order paths deepest first (stdin if none given).")
    sp.add_argument("items", nargs="*", metavar="PATH")

    sp = sub.add_parser("group", parents=[common], help="Bucket paths by depth (stdin if none given).")
    sp.add_argument("items", nargs="*", metavar="PATH")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options the user actually passed appear in the result.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if getattr(args, "max_depth", None) is not None:
        overrides["max_depth"] = args.max_depth
    if getattr(args, "guard_cycles", False):
        overrides["guard_cycles"] = True
    if getattr(args, "json_output", False):
        overrides["json_output"] = True
    if getattr(args, "log_file", None):
        overrides["log_file"] = args.log_file
    if getattr(args, "debug", False):
        overrides["log_level"] = "DEBUG"

    return overrides
