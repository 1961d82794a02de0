from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the filesystem provider used by the traversal engine: directory
listing, entry classification, symlink chain resolution and stable
directory identities. Acts as the only place that talks to 'os' directly
so the engine can be exercised against substitute providers.
"""

import logging
import os
import stat
from typing import List, Optional, Tuple

from dirtree.domain.constants import MAX_SYMLINK_HOPS, UNREADABLE_LINK_TARGET
from dirtree.domain.tree_models import Entry, EntryKind, NodeIdentity

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PROVIDER
# -----------------------------------------------------------------------------

class LocalFileSystem:
    """
    Filesystem provider backed by the local operating system.

    Every query raises OSError on failure; containment is the caller's job.
    """

    def __init__(self, max_symlink_hops: int = MAX_SYMLINK_HOPS) -> None:
        self.max_symlink_hops = max_symlink_hops

    def list_dir(self, path: str) -> List[str]:
        """
        Return the names inside a directory, sorted by name.

        Args:
            path: Directory to list.

        Returns:
            List[str]: Entry names without any directory prefix.
        """
        return sorted(os.listdir(path))

    def is_dir(self, path: str) -> bool:
        """True for directories and links resolving to directories."""
        return os.path.isdir(path)

    def classify(self, path: str) -> Entry:
        """
        Classify an entry without following it, resolving links to their final type.

        Args:
            path: Entry to inspect.

        Returns:
            Entry: Classification; broken links carry target_kind=None.
        """
        mode = os.lstat(path).st_mode

        if stat.S_ISLNK(mode):
            try:
                link_target, target_kind = self.resolve_link(path)
            except OSError as e:
                logger.debug(f"Unreadable link '{path}': {e}")
                return Entry(EntryKind.SYMLINK, link_target=UNREADABLE_LINK_TARGET)
            return Entry(EntryKind.SYMLINK, link_target=link_target, target_kind=target_kind)

        if stat.S_ISDIR(mode):
            return Entry(EntryKind.DIRECTORY)
        return Entry(EntryKind.FILE)

    def resolve_link(self, path: str) -> Tuple[str, Optional[EntryKind]]:
        """
        Follow a symlink chain until a non-link is reached.

        Relative targets are resolved against the directory holding the link.
        The walk gives up after `max_symlink_hops` links.

        Args:
            path: Path of the symlink itself.

        Returns:
            Tuple[str, Optional[EntryKind]]: Raw text of the first link and the
            final kind, or None if the chain is broken or too long.
        """
        first_target = os.readlink(path)
        current = path

        for _ in range(self.max_symlink_hops):
            try:
                target = os.readlink(current)
                current = os.path.join(os.path.dirname(current), target)
                mode = os.lstat(current).st_mode
            except OSError as e:
                logger.debug(f"Broken link chain at '{current}': {e}")
                return first_target, None

            if not stat.S_ISLNK(mode):
                if stat.S_ISDIR(mode):
                    return first_target, EntryKind.DIRECTORY
                return first_target, EntryKind.FILE

        logger.debug(f"Link chain from '{path}' exceeds {self.max_symlink_hops} hops")
        return first_target, None

    def identity(self, path: str) -> Optional[NodeIdentity]:
        """
        Resolve the identity of the directory a path ultimately points at.

        Uses (inode, device) where the platform reports inode numbers and
        falls back to the canonical path otherwise, which is weaker across
        bind mounts and hard-linked directories.

        Args:
            path: Directory or link to a directory.

        Returns:
            Optional[NodeIdentity]: Identity, or None if the path cannot be stat'ed.
        """
        try:
            st = os.stat(path)
        except OSError as e:
            logger.debug(f"Cannot stat '{path}' for identity: {e}")
            return None

        if st.st_ino:
            return NodeIdentity(inode=st.st_ino, device=st.st_dev)
        return NodeIdentity(inode=0, device=0, canonical_path=os.path.realpath(path))
