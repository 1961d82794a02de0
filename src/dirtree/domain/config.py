from __future__ import annotations

"""
Configuration Domain Model.

Defines the immutable traversal configuration consumed by the engine,
the raw dictionary defaults it is built from, and the error raised when
a configuration cannot be accepted.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# ERRORS
# -----------------------------------------------------------------------------

class InvalidConfigurationError(ValueError):
    """Raised when the configuration is rejected before any traversal."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeConfig:
    """
    Resolved traversal policy.

    Attributes:
        show_hidden: Include dot-prefixed entries.
        directories_only: List directories (and links to directories) only.
        follow_links: Descend into symlinked directories, guarded against cycles.
        max_depth: Deepest level rendered; None means unlimited.
    """
    show_hidden: bool = False
    directories_only: bool = False
    follow_links: bool = False
    max_depth: Optional[int] = None

    def allows_depth(self, depth: int) -> bool:
        return self.max_depth is None or depth <= self.max_depth


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default raw configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "show_hidden": False,
        "directories_only": False,
        "follow_links": False,
        "max_depth": None,
    }
