from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration
and log file rotation.
"""

import logging
import time
from logging.handlers import QueueListener
from pathlib import Path

import pytest

from dirtree.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
)


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Clean up root logger handlers before and after each test."""
    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if isinstance(listener, QueueListener) and getattr(listener, "_thread", None):
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)
        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()
        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()


def test_logging_idempotency() -> None:
    """Repeated configuration must not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial_handler_count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == initial_handler_count, "Handlers were duplicated."


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="WARNING"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG


def test_log_rotation(tmp_path: Path) -> None:
    """File rotation happens when the size limit is exceeded."""
    log_file = tmp_path / "logs" / "tree.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("dirtree.test_rotate")
    for _ in range(10):
        logger.debug("Long diagnostic message to trigger rotation. " * 5)

    # Give the QueueListener time to drain
    time.sleep(0.5)

    assert log_file.exists()
    assert (tmp_path / "logs" / "tree.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """The root logger holds a tagged QueueHandler and a running listener."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    ours = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]

    assert len(ours) == 1
    assert isinstance(getattr(root, _QUEUE_LISTENER_ATTR), QueueListener)


def test_unknown_level_defaults_to_warning() -> None:
    configure_logging(LoggingConfig(level="chatty"))
    assert logging.getLogger().level == logging.WARNING


def test_level_names_are_case_insensitive() -> None:
    configure_logging(LoggingConfig(level=" warn "))
    assert logging.getLogger().level == logging.WARNING

    configure_logging(LoggingConfig(level="debug"), force=True)
    assert logging.getLogger().level == logging.DEBUG
