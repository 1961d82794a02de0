from __future__ import annotations

"""
Logging Core Orchestrator.

Maintains the idempotent lifecycle of the logging subsystem. Records are
pushed through a QueueHandler and written by a QueueListener thread, so
file rotation never stalls the traversal.
"""

import atexit
import logging
import queue
import sys
from dataclasses import dataclass
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from dirtree.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_dirtree_configured"
_QUEUE_LISTENER_ATTR: str = "_dirtree_queue_listener"

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings the CLI passes to configure_logging().

    Attributes:
        level: Level name; unknown names fall back to WARNING.
        console: Write records to stderr.
        log_file: Optional rotating log file.
        max_bytes: Rollover threshold of the log file.
        backup_count: Rotated files kept next to it.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 3


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once, behind a queue.

    Repeated calls are no-ops unless `force` is set, in which case the
    handlers and listener installed by a previous call are replaced.

    Args:
        cfg: Structural configuration for the logging system.
        force: If True, re-initialize even when already configured.

    Returns:
        logging.Logger: The configured root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    try:
        level_int = _parse_level(cfg.level)
        root.setLevel(level_int)

        _remove_our_handlers(root)
        _stop_existing_listener(root)

        handlers_list: List[logging.Handler] = []
        if cfg.console:
            handlers_list.append(
                _create_console_handler(level_int, logging.Formatter(CONSOLE_FORMAT))
            )
        if cfg.log_file:
            fh = _create_rotating_file_handler(
                cfg.log_file,
                level_int,
                logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT),
                cfg.max_bytes,
                cfg.backup_count,
            )
            if fh:
                handlers_list.append(fh)

        if not handlers_list:
            return root

        log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
        queue_handler = _tag_handler(QueueHandler(log_queue))

        listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
        listener.start()
        root.addHandler(queue_handler)

        setattr(root, _QUEUE_LISTENER_ATTR, listener)
        setattr(root, _CONFIGURED_FLAG_ATTR, True)

        # Flush pending records on interpreter shutdown
        atexit.register(_safe_stop_listener, listener)
        return root

    except Exception as e:
        # Emergency console so diagnostics are never lost entirely
        _remove_our_handlers(root)
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(logging.Formatter("FALLBACK | %(levelname)s | %(message)s"))
        root.addHandler(_tag_handler(sh))
        root.warning(f"Logging setup failed ({e}); using emergency console.")
        return root


def get_logger(name: str) -> logging.Logger:
    """Acquire a named logger (usually __name__)."""
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a level name to its numeric constant, defaulting to WARNING."""
    name = str(level or "").strip().upper()
    if name == "WARN":
        name = "WARNING"
    if name not in _LEVEL_NAMES:
        return logging.WARNING
    return getattr(logging, name)


def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a listener, tolerating one that was already stopped."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
