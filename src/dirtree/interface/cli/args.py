from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the `tree` command and translates the
parsed namespace into raw configuration overrides for the validator.
"""

import argparse
from typing import Any, Dict

from dirtree.domain.constants import APP_NAME, APP_VERSION

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the tree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="List the contents of directories in a tree-like format.",
    )

    p.add_argument(
        "dirs",
        nargs="*",
        metavar="dir",
        help="Directories to list (default: current directory).",
    )

    # --- Listing Options ---
    p.add_argument(
        "-a",
        dest="show_hidden",
        action="store_true",
        help="All files are listed.",
    )
    p.add_argument(
        "-d",
        dest="directories_only",
        action="store_true",
        help="List directories only.",
    )
    p.add_argument(
        "-l",
        dest="follow_links",
        action="store_true",
        help="Follow symbolic links like directories.",
    )
    # Kept as a string: the validator owns the positive-integer rule
    p.add_argument(
        "-L",
        dest="level",
        metavar="level",
        default=None,
        help="Descend only level directories deep.",
    )

    # --- Output Options ---
    p.add_argument(
        "-n", "--nocolor",
        dest="no_color",
        action="store_true",
        help="Turn colorization off.",
    )
    p.add_argument(
        "-o", "--output",
        dest="output_file",
        metavar="filename",
        default=None,
        help="Also write the tree to filename.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Write diagnostics to a rotating log file.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into raw configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Overrides to merge onto the default configuration.
    """
    overrides: Dict[str, Any] = {}

    if args.show_hidden:
        overrides["show_hidden"] = True
    if args.directories_only:
        overrides["directories_only"] = True
    if args.follow_links:
        overrides["follow_links"] = True
    if args.level is not None:
        overrides["max_depth"] = args.level

    return overrides
