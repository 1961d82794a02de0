from __future__ import annotations

"""
Unit tests for the Branch Prefix Calculator.

Verifies glyph selection by sibling position, trail inheritance and the
trail-length/depth invariant.
"""

import os

from dirtree.core.analysis.branch_prefix import (
    compute_child_prefix,
    make_child_node,
    make_root_node,
)
from dirtree.domain.constants import ANGLE_GLYPH, BLANK_FRAGMENT, PIPE_FRAGMENT, TEE_GLYPH


def test_root_node_is_bare():
    root = make_root_node("/data")
    assert root.depth == 0
    assert root.prefix == ""
    assert root.ancestor_trail == ()


def test_compute_child_prefix_by_position():
    root = make_root_node("/data")
    assert compute_child_prefix(root, 0, 2) == (TEE_GLYPH, PIPE_FRAGMENT)
    assert compute_child_prefix(root, 1, 2) == (TEE_GLYPH, PIPE_FRAGMENT)
    assert compute_child_prefix(root, 2, 2) == (ANGLE_GLYPH, BLANK_FRAGMENT)
    # Only child is also the last one
    assert compute_child_prefix(root, 0, 0) == (ANGLE_GLYPH, BLANK_FRAGMENT)


def test_compute_child_prefix_is_pure():
    root = make_root_node("/data")
    assert compute_child_prefix(root, 0, 1) == compute_child_prefix(root, 0, 1)


def test_child_nodes_inherit_parent_continuation():
    root = make_root_node("/data")
    first = make_child_node(root, 0, 1, "src")
    last = make_child_node(root, 1, 1, "tests")

    assert first.path == os.path.join("/data", "src")
    assert first.lead == "├── "
    assert last.lead == "└── "

    under_first = make_child_node(first, 0, 0, "main.py")
    under_last = make_child_node(last, 0, 0, "test_main.py")

    assert under_first.lead == "│   └── "
    assert under_last.lead == "    └── "


def test_trail_length_equals_depth():
    node = make_root_node("/data")
    for depth in range(1, 6):
        node = make_child_node(node, depth % 2, 1, f"level{depth}")
        assert node.depth == depth
        assert len(node.ancestor_trail) == depth
        assert node.prefix in (TEE_GLYPH, ANGLE_GLYPH)
