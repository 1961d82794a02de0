from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper in front of the traversal engine. Converts a raw
configuration dictionary (from the CLI or a caller) into an immutable
TreeConfig, coercing loosely typed flags and rejecting depth limits that
are not positive integers.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from dirtree.domain.config import InvalidConfigurationError, TreeConfig, get_default_config

logger = logging.getLogger(__name__)

INVALID_LEVEL_REASON = "invalid level, must be greater than 0"

_BOOL_FIELDS = ("show_hidden", "directories_only", "follow_links")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[TreeConfig, List[str]]:
    """
    Validate and normalize a raw configuration dictionary.

    Missing keys fall back to domain defaults. The depth limit is always
    checked strictly: anything other than a positive integer (or its
    decimal string form) aborts the run.

    Args:
        config: Raw configuration data (usually a dictionary or None).
        strict: If True, raise on type mismatches instead of coercing.

    Returns:
        Tuple[TreeConfig, List[str]]: The resolved configuration and a list of warnings.

    Raises:
        InvalidConfigurationError: If the depth limit is rejected, or on any
            type mismatch in strict mode.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if config is None:
        config = {}
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise InvalidConfigurationError(msg)
        warnings.append(f"{msg} Using defaults.")
        config = {}

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    flags = {
        field: _as_bool(merged.get(field), defaults[field], field, warnings, strict)
        for field in _BOOL_FIELDS
    }
    max_depth = _as_depth(merged.get("max_depth"))

    for w in warnings:
        logger.warning(f"Configuration constraint: {w}")

    return TreeConfig(max_depth=max_depth, **flags), warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_depth(value: Any) -> Optional[int]:
    """Parse the depth limit; None or empty means unlimited."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            value = int(value)
        except ValueError:
            raise InvalidConfigurationError(INVALID_LEVEL_REASON) from None

    # bool is an int subclass; True must not read as depth 1
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidConfigurationError(INVALID_LEVEL_REASON)
    return value


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, int) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise InvalidConfigurationError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
