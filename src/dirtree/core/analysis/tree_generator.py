from __future__ import annotations

"""
Directory Tree Generator.

Depth-first traversal engine. Visits each root's descendants in listing
order, hands every node to the visitor, classifies it through the
filesystem provider and accumulates directory/file counts. Symlinked
directories are followed only on request and never into a directory
already open on the current path.
"""

import logging
import os
from typing import Iterable, Optional, Set

from dirtree.core.analysis.branch_prefix import make_child_node, make_root_node
from dirtree.core.analysis.tree_renderer import LineSink, TreeVisitor
from dirtree.core.services.listing import Listing, list_children
from dirtree.domain.config import TreeConfig
from dirtree.domain.constants import DEFAULT_ROOT
from dirtree.domain.tree_models import (
    EntryKind,
    Node,
    NodeIdentity,
    TraversalError,
    TraversalResult,
    TreeReport,
    VisitSignal,
)
from dirtree.infra.fs import LocalFileSystem

logger = logging.getLogger(__name__)

VisitedSet = Set[NodeIdentity]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_directory_tree(
        roots: Optional[Iterable[str]],
        config: TreeConfig,
        fs: Optional[LocalFileSystem] = None,
        sink: Optional[LineSink] = None,
        cwd: Optional[str] = None,
) -> TreeReport:
    """
    Render the trees of one or more root directories.

    Roots are resolved against `cwd` (the process working directory by
    default) and printed with the label given. A root that is missing,
    not a directory or unreadable is reported on its own line and
    skipped; the remaining roots are still processed. Counts are summed
    over all roots.

    Args:
        roots: Root arguments; empty or None means the current directory.
        config: Validated traversal policy.
        fs: Filesystem provider, LocalFileSystem by default.
        sink: Optional callback receiving each line as it is produced.
        cwd: Base directory for relative roots.

    Returns:
        TreeReport: All lines in output order plus the combined counts.
    """
    fs = fs or LocalFileSystem()
    base = cwd or os.getcwd()
    labels = list(roots or []) or [DEFAULT_ROOT]

    visitor = TreeVisitor(config, sink)
    result = TraversalResult()

    for label in labels:
        root_path = os.path.join(base, label)
        walk_root(root_path, label, config, result, visitor, fs)

    logger.debug(f"Traversal finished: {result.summary()}, {len(result.errors)} contained errors")
    return TreeReport(lines=visitor.lines, result=result)


def walk_root(
        root_path: str,
        label: str,
        config: TreeConfig,
        result: TraversalResult,
        visitor: TreeVisitor,
        fs: LocalFileSystem,
) -> TraversalResult:
    """
    Render a single root with a fresh cycle-detection set.

    The root itself is printed bare and is not counted.
    """
    logger.info(f"Generating directory tree for: {root_path}")

    if not fs.is_dir(root_path):
        logger.debug(f"Root '{label}' is missing or not a directory")
        visitor.emit_root_error(label)
        return result

    listing = list_children(root_path, config, fs)
    if listing.error:
        result.errors.append(listing.error)
        visitor.emit_root_error(label)
        return result

    visitor.emit_root(label)

    root = make_root_node(root_path)
    visited: VisitedSet = set()
    identity = fs.identity(root_path)
    if identity is not None:
        visited.add(identity)

    return _walk_listing(root, listing, config, visited, result, visitor, fs)


def walk(
        node: Node,
        config: TreeConfig,
        visited: VisitedSet,
        result: TraversalResult,
        visitor: TreeVisitor,
        fs: LocalFileSystem,
) -> TraversalResult:
    """
    Visit one node and, for directories, its whole subtree.

    Nodes beyond the depth limit or stopped by the visitor are neither
    printed nor counted. A directory is counted after its subtree has been
    walked. Filesystem failures are recorded and contained to this node.

    Args:
        node: Node to visit.
        config: Traversal policy.
        visited: Identities of the directories open on the current path.
        result: Accumulator updated in place.
        visitor: Renderer deciding what is printed.
        fs: Filesystem provider.

    Returns:
        TraversalResult: The same accumulator.
    """
    if not config.allows_depth(node.depth):
        return result

    try:
        entry = fs.classify(node.path)
    except OSError as e:
        logger.debug(f"Entry vanished or unreadable '{node.path}': {e}")
        result.errors.append(TraversalError(path=node.path, reason=e.strerror or str(e)))
        return result

    # Links to directories are only entered with follow_links and never
    # into a directory already open on the current path.
    follow = False
    recursive = False
    if entry.is_link and entry.target_kind is EntryKind.DIRECTORY and config.follow_links:
        identity = fs.identity(node.path)
        if identity is not None and identity in visited:
            logger.debug(f"Recursive link not followed: {node.path}")
            recursive = True
        else:
            follow = True

    if visitor.visit(node, entry, recursive=recursive) is VisitSignal.STOP:
        return result

    if entry.kind is EntryKind.DIRECTORY or follow:
        walk_dir(node, config, visited, result, visitor, fs)
        result.directory_count += 1
    elif entry.is_directory_like:
        result.directory_count += 1
    else:
        # Regular files, links to files and broken links
        result.file_count += 1

    return result


def walk_dir(
        node: Node,
        config: TreeConfig,
        visited: VisitedSet,
        result: TraversalResult,
        visitor: TreeVisitor,
        fs: LocalFileSystem,
) -> TraversalResult:
    """
    Walk the children of a directory node (or a followed link to one).

    The directory's identity stays in `visited` while its subtree is
    walked. A listing failure leaves the directory empty.
    """
    if not config.allows_depth(node.depth + 1):
        return result

    identity = fs.identity(node.path)
    entered = identity is not None and identity not in visited
    if entered:
        visited.add(identity)

    try:
        listing = list_children(node.path, config, fs)
        if listing.error:
            result.errors.append(listing.error)
        return _walk_listing(node, listing, config, visited, result, visitor, fs)
    finally:
        if entered:
            visited.discard(identity)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _walk_listing(
        parent: Node,
        listing: Listing,
        config: TreeConfig,
        visited: VisitedSet,
        result: TraversalResult,
        visitor: TreeVisitor,
        fs: LocalFileSystem,
) -> TraversalResult:
    """Build each child node in listing order and walk it to completion."""
    last_index = len(listing.names) - 1
    for i, name in enumerate(listing.names):
        child = make_child_node(parent, i, last_index, name)
        walk(child, config, visited, result, visitor, fs)
    return result
