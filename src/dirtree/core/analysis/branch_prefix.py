from __future__ import annotations

"""
Branch Prefix Calculator.

Pure helpers that derive a child's branch glyph and indentation trail
from its parent node and its position among the listed siblings. No
filesystem access happens here.
"""

import os
from typing import Tuple

from dirtree.domain.constants import (
    ANGLE_GLYPH,
    BLANK_FRAGMENT,
    PIPE_FRAGMENT,
    TEE_GLYPH,
)
from dirtree.domain.tree_models import Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def make_root_node(path: str) -> Node:
    """Build the depth-0 node for a traversal root (no trail, no prefix)."""
    return Node(depth=0, name="", path=path)


def compute_child_prefix(parent: Node, child_index: int, last_index: int) -> Tuple[str, str]:
    """
    Compute the branch glyph of a child and the fragment it hands down.

    Args:
        parent: Node whose listing contains the child.
        child_index: Position of the child in the filtered listing.
        last_index: Position of the last child in that listing.

    Returns:
        Tuple[str, str]: (prefix glyph, fragment inherited by the child's own children).
    """
    if child_index != last_index:
        return TEE_GLYPH, PIPE_FRAGMENT
    return ANGLE_GLYPH, BLANK_FRAGMENT


def make_child_node(parent: Node, child_index: int, last_index: int, name: str) -> Node:
    """
    Construct the node for one listed child.

    The child's trail is the parent's trail plus the fragment the parent
    hands down, so its length always equals the child's depth.

    Args:
        parent: Node being expanded.
        child_index: Position of the child in the filtered listing.
        last_index: Position of the last child in that listing.
        name: Entry name as read from the listing.

    Returns:
        Node: Immutable child node.
    """
    prefix, _ = compute_child_prefix(parent, child_index, last_index)
    return Node(
        depth=parent.depth + 1,
        name=name,
        path=os.path.join(parent.path, name),
        prefix=prefix,
        ancestor_trail=parent.ancestor_trail + (parent.continuation,),
        has_following_sibling=child_index != last_index,
    )
