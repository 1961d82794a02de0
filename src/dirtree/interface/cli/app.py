from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of flag
overrides onto the default configuration, validation, traversal of every
root argument and the closing summary line.
"""

import os
import sys
from typing import Any, Dict, List, Optional

from dirtree.core.analysis.tree_generator import generate_directory_tree
from dirtree.core.services.validator import validate_config
from dirtree.domain.config import InvalidConfigurationError, get_default_config
from dirtree.domain.constants import APP_NAME
from dirtree.domain.tree_models import TreeReport
from dirtree.infra.logging import LoggingConfig, configure_logging, get_logger
from dirtree.interface.cli import args as cli_args
from dirtree.interface.cli.console import ConsoleSink, make_console

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the tree command.

    An invalid configuration prints `tree: <reason>.` and returns 0
    without traversing anything.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if hasattr(sys.stdout, "reconfigure"):
        if sys.platform == "win32":
            sys.stdout.reconfigure(encoding="utf-8")
        # Undecodable file names print back as their original bytes
        sys.stdout.reconfigure(errors="surrogateescape")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_intermixed_args(argv)

    # 2. Logging bootstrap (diagnostics on stderr, tree on stdout)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    # 3. Configuration resolution and validation
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))
    try:
        config, _ = validate_config(raw_conf, strict=False)
    except InvalidConfigurationError as e:
        logger.debug(f"Configuration rejected: {e.reason}")
        print(f"{APP_NAME}: {e.reason}.")
        return 0

    logger.debug(f"Resolved configuration: {config}")

    # 4. Traversal and streaming output
    console = make_console(no_color=args.no_color)
    sink = ConsoleSink(console)
    try:
        report = generate_directory_tree(args.dirs, config, sink=sink)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    sink.print_summary(report.result.summary())

    # 5. Optional persistence
    if args.output_file:
        _save_tree_to_disk(args.output_file, report)

    return 0

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of known override keys onto the base configuration."""
    out = dict(base)
    for k in ("show_hidden", "directories_only", "follow_links", "max_depth"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


def _save_tree_to_disk(save_path: str, report: TreeReport) -> None:
    """Persist the plain-text tree; failures are logged, never fatal."""
    try:
        out_dir = os.path.dirname(os.path.abspath(save_path))
        os.makedirs(out_dir, exist_ok=True)
        with open(save_path, "w", encoding="utf-8", errors="surrogateescape") as f:
            f.write(report.to_text())
        logger.info(f"Tree saved to file: {save_path}")
    except (OSError, UnicodeError) as e:
        logger.error(f"Failed to save tree to '{save_path}': {e}")


if __name__ == "__main__":
    sys.exit(main())
