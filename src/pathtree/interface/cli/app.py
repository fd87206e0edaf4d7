from __future__ import annotations

"""
Command Line Interface Application Controller.

Orchestrates one CLI invocation: argument parsing, configuration
resolution (defaults, persisted file, command-line overrides), logging
bootstrap, command dispatch and result rendering.
"""

import argparse
import json
import os
import sys
from typing import Any, Callable, Dict, List, Optional

from pathtree.core.depth import group, sort
from pathtree.core.flattener import list_files
from pathtree.core.listing import list_dirs, list_paths
from pathtree.core.search import search
from pathtree.core.tree_builder import tree
from pathtree.core.tree_renderer import render_tree
from pathtree.core.validator import validate_config
from pathtree.domain.config import get_default_config, load_config
from pathtree.infra.logging import LoggingConfig, configure_logging, get_logger
from pathtree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_PATH = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Configuration hierarchy: defaults < persisted file < CLI flags
    if getattr(args, "use_defaults", False):
        base_conf = get_default_config()
    else:
        base_conf = load_config(getattr(args, "config_path", None))
    base_conf.update(cli_args.args_to_overrides(args))
    conf, warnings = validate_config(base_conf, strict=False)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(
        LoggingConfig(level=conf["log_level"], console=True, log_file=conf["log_file"]),
        force=True,
    )
    for w in warnings:
        logger.warning(f"Configuration constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if not args.command:
        parser.print_help(sys.stderr)
        return EXIT_BAD_PATH

    # 3. Pre-flight check for directory commands
    path = getattr(args, "path", None)
    if path is not None and not os.path.isdir(path):
        reason = "does not exist" if not os.path.exists(path) else "is not a directory"
        logger.error(f"Input path {reason}: {path}")
        print(f"ERROR: '{path}' {reason}.", file=sys.stderr)
        return EXIT_BAD_PATH

    # 4. Dispatch
    try:
        result = _COMMANDS[args.command](args, conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except OSError as e:
        logger.error(f"Traversal failed: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 5. Rendering
    _emit(result, as_json=conf["json_output"])
    return EXIT_OK

# -----------------------------------------------------------------------------
# COMMAND HANDLERS
# -----------------------------------------------------------------------------

def _run_tree(args: argparse.Namespace, conf: Dict[str, Any]) -> Any:
    node = tree(args.path, max_depth=conf["max_depth"], guard_cycles=conf["guard_cycles"])
    if conf["json_output"]:
        return node.to_mapping()
    return render_tree(node, header=args.path)


def _run_files(args: argparse.Namespace, conf: Dict[str, Any]) -> Any:
    return list_files(args.path, max_depth=conf["max_depth"], guard_cycles=conf["guard_cycles"])


def _run_paths(args: argparse.Namespace, conf: Dict[str, Any]) -> Any:
    return list_paths(args.path)


def _run_dirs(args: argparse.Namespace, conf: Dict[str, Any]) -> Any:
    return list_dirs(args.path)


def _run_search(args: argparse.Namespace, conf: Dict[str, Any]) -> Any:
    if args.recursive:
        haystack = list_files(args.path, max_depth=conf["max_depth"], guard_cycles=conf["guard_cycles"])
        return search(haystack, args.needle)
    return search(args.path, args.needle)


def _run_sort(args: argparse.Namespace, conf: Dict[str, Any]) -> Any:
    return sort(_read_items(args))


def _run_group(args: argparse.Namespace, conf: Dict[str, Any]) -> Any:
    buckets = group(_read_items(args))
    if conf["json_output"]:
        return buckets
    return [f"{level}: {p}" for level, bucket in enumerate(buckets) for p in bucket]


_COMMANDS: Dict[str, Callable[[argparse.Namespace, Dict[str, Any]], Any]] = {
    "tree": _run_tree,
    "files": _run_files,
    "paths": _run_paths,
    "dirs": _run_dirs,
    "search": _run_search,
    "sort": _run_sort,
    "group": _run_group,
}

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _read_items(args: argparse.Namespace) -> List[str]:
    """Paths from the command line, or one per non-empty stdin line."""
    if args.items:
        return list(args.items)
    return [line.rstrip("\r\n") for line in sys.stdin if line.strip()]


def _emit(result: Any, as_json: bool) -> None:
    """Print a command result as JSON or as one line per item."""
    if as_json:
        print(json.dumps(result, ensure_ascii=False, indent=2))
        return
    for line in result:
        print(line)
