from __future__ import annotations

"""
Child Enumeration Service.

Lists the children of a directory and applies the hidden-entry and
directories-only filters before branch prefixes are computed, so that
filtered entries never affect which sibling is drawn as the last one.
"""

import logging
import os
from typing import List, NamedTuple, Optional

from dirtree.domain.config import TreeConfig
from dirtree.domain.tree_models import TraversalError
from dirtree.infra.fs import LocalFileSystem

logger = logging.getLogger(__name__)


class Listing(NamedTuple):
    """Filtered child names plus the failure that emptied the listing, if any."""
    names: List[str]
    error: Optional[TraversalError] = None


# ==============================================================================
# PUBLIC API
# ==============================================================================

def is_hidden(name: str) -> bool:
    """True for dot-prefixed names."""
    return name.startswith(".")


def list_children(path: str, config: TreeConfig, fs: LocalFileSystem) -> Listing:
    """
    Enumerate and filter the entries of a directory.

    A listing failure (permission denied, directory vanished) yields an
    empty listing with the error attached instead of raising.

    Args:
        path: Directory to enumerate.
        config: Traversal policy supplying the filters.
        fs: Filesystem provider.

    Returns:
        Listing: Names in provider order after filtering.
    """
    try:
        names = fs.list_dir(path)
    except OSError as e:
        logger.debug(f"Cannot list '{path}': {e}")
        return Listing([], TraversalError(path=path, reason=_describe(e)))

    if not config.show_hidden:
        names = [n for n in names if not is_hidden(n)]

    if config.directories_only:
        names = [n for n in names if fs.is_dir(os.path.join(path, n))]

    return Listing(names)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _describe(error: OSError) -> str:
    return error.strerror or str(error)
