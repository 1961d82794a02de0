from __future__ import annotations

from .core import (
    LoggingConfig,
    _CONFIGURED_FLAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    get_logger,
)
from .handlers import _HANDLER_TAG_ATTR

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "_CONFIGURED_FLAG_ATTR",
    "_HANDLER_TAG_ATTR",
    "_QUEUE_LISTENER_ATTR",
]
