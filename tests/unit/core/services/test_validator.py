from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.

Verifies defaults, boolean coercion, strict mode and the positive-integer
rule for the depth limit.
"""

import pytest

from dirtree.core.services.validator import INVALID_LEVEL_REASON, validate_config
from dirtree.domain.config import InvalidConfigurationError, TreeConfig


# -----------------------------------------------------------------------------
# 1. Base Structure & Defaults
# -----------------------------------------------------------------------------

def test_validate_none_returns_defaults():
    cfg, warnings = validate_config(None)

    assert cfg == TreeConfig()
    assert cfg.max_depth is None
    assert warnings == []


def test_validate_wrong_type_uses_defaults_with_warning():
    cfg, warnings = validate_config(["not", "a", "dict"])

    assert cfg == TreeConfig()
    assert len(warnings) == 1


def test_validate_wrong_type_strict_raises():
    with pytest.raises(InvalidConfigurationError):
        validate_config("show_hidden", strict=True)


# -----------------------------------------------------------------------------
# 2. Boolean Coercion
# -----------------------------------------------------------------------------

def test_validate_converts_strings_to_bools():
    raw = {"show_hidden": "true", "directories_only": "0", "follow_links": "yes"}
    cfg, warnings = validate_config(raw)

    assert cfg.show_hidden is True
    assert cfg.directories_only is False
    assert cfg.follow_links is True
    assert len(warnings) == 3


def test_validate_unparseable_bool_falls_back():
    cfg, warnings = validate_config({"show_hidden": "maybe"})

    assert cfg.show_hidden is False
    assert "expected bool" in warnings[0]


def test_validate_strict_rejects_coercion():
    with pytest.raises(InvalidConfigurationError):
        validate_config({"follow_links": "true"}, strict=True)


# -----------------------------------------------------------------------------
# 3. Depth Limit
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("value, expected", [
    (1, 1),
    (7, 7),
    ("3", 3),
    (" 12 ", 12),
    (None, None),
    ("", None),
])
def test_validate_accepts_depth(value, expected):
    cfg, _ = validate_config({"max_depth": value})
    assert cfg.max_depth == expected


@pytest.mark.parametrize("value", [0, -1, "0", "-4", "abc", "2.5", 2.5, True])
def test_validate_rejects_depth(value):
    with pytest.raises(InvalidConfigurationError) as exc_info:
        validate_config({"max_depth": value})

    assert exc_info.value.reason == INVALID_LEVEL_REASON
    assert str(exc_info.value) == "invalid level, must be greater than 0"
