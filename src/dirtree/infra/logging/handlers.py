from __future__ import annotations

"""
Logging Handler Factories.

Builds the console and rotating file handlers attached behind the queue,
tagging each one so that re-configuration only removes handlers this
package installed.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, TextIO

_HANDLER_TAG_ATTR: str = "_dirtree_handler"


# ==============================================================================
# TAGGING
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> logging.Handler:
    """Mark a handler as owned by dirtree and return it."""
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


# ==============================================================================
# FACTORIES
# ==============================================================================

def _create_console_handler(
        level_int: int,
        formatter: logging.Formatter,
        stream: Optional[TextIO] = None,
) -> logging.StreamHandler:
    """
    Build a stderr handler for diagnostics.

    Tree output goes to stdout, so diagnostics never interleave with it
    when stdout is redirected.
    """
    sh = logging.StreamHandler(stream or sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(formatter)
    return _tag_handler(sh)


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Initialize a RotatingFileHandler, creating the parent directory if needed.

    Args:
        log_file: Target path for the log file.
        level_int: Numeric logging level.
        formatter: Pre-configured logging formatter.
        max_bytes: Rollover threshold in bytes.
        backup_count: Number of archived files to keep.

    Returns:
        Optional[RotatingFileHandler]: Configured handler or None if the file
        cannot be opened.
    """
    try:
        parent = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(parent, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    _tag_handler(fh)
    return fh
