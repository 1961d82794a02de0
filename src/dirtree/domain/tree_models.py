from __future__ import annotations

"""
Directory Tree Traversal Data Models.

Provides the value objects exchanged between the filesystem provider,
the traversal engine and the renderer: traversal nodes, classified
entries, rendered lines and the mutable count accumulator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from dirtree.domain.constants import (
    BLANK_FRAGMENT,
    BROKEN_LINK_MARKER,
    ERROR_OPENING_DIR_MARKER,
    LINK_ARROW,
    PIPE_FRAGMENT,
    RECURSIVE_MARKER,
)

# -----------------------------------------------------------------------------
# CLASSIFICATION
# -----------------------------------------------------------------------------

class EntryKind(Enum):
    """Filesystem classification of a single entry (symlinks not followed)."""
    DIRECTORY = "dir"
    FILE = "file"
    SYMLINK = "symlink"


class VisitSignal(Enum):
    """Continuation signal returned by the visitor for each node."""
    CONTINUE = "continue"
    STOP = "stop"


@dataclass(frozen=True)
class Entry:
    """
    Classification of a filesystem entry as reported by the provider.

    Attributes:
        kind: Type of the entry itself.
        link_target: Raw link text for symlinks, empty otherwise.
        target_kind: Final type reached by following the link chain.
                     None when the link is broken.
    """
    kind: EntryKind
    link_target: str = ""
    target_kind: Optional[EntryKind] = None

    @property
    def is_link(self) -> bool:
        return self.kind is EntryKind.SYMLINK

    @property
    def is_broken_link(self) -> bool:
        return self.kind is EntryKind.SYMLINK and self.target_kind is None

    @property
    def is_directory_like(self) -> bool:
        """True for directories and symlinks resolving to directories."""
        if self.kind is EntryKind.SYMLINK:
            return self.target_kind is EntryKind.DIRECTORY
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class NodeIdentity:
    """
    Stable identity of a directory used for cycle detection.

    Providers without inode numbers leave inode/device at zero and key on
    the canonical path instead.
    """
    inode: int
    device: int
    canonical_path: str = ""

# -----------------------------------------------------------------------------
# TRAVERSAL NODE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Node:
    """
    One filesystem entry as seen during traversal.

    Attributes:
        depth: Distance from the traversal root (root = 0).
        name: Own name component of the entry.
        path: Fully joined path used for filesystem queries.
        prefix: Branch glyph printed right before the name.
        ancestor_trail: One indentation fragment per ancestor, root first.
        has_following_sibling: False when this node is the last child.
    """
    depth: int
    name: str
    path: str
    prefix: str = ""
    ancestor_trail: Tuple[str, ...] = ()
    has_following_sibling: bool = False

    @property
    def lead(self) -> str:
        """Full leading string of the printed line."""
        return "".join(self.ancestor_trail) + self.prefix

    @property
    def continuation(self) -> str:
        """Fragment this node contributes to the trail of its children."""
        if self.depth == 0:
            return ""
        return PIPE_FRAGMENT if self.has_following_sibling else BLANK_FRAGMENT

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeLine:
    """
    One printable line of the tree with its classification.

    The renderer decides the text; sinks decide how to style it.
    Root labels have depth 0 and an empty lead; `error` marks a root
    argument that could not be opened.
    """
    depth: int
    lead: str
    name: str
    kind: EntryKind
    link_target: str = ""
    target_kind: Optional[EntryKind] = None
    recursive: bool = False
    error: bool = False

    @property
    def is_broken_link(self) -> bool:
        return self.kind is EntryKind.SYMLINK and self.target_kind is None

    def render(self) -> str:
        """Plain-text rendition of the line."""
        if self.error:
            return f"{self.name}{ERROR_OPENING_DIR_MARKER}"
        if self.kind is not EntryKind.SYMLINK:
            return f"{self.lead}{self.name}"

        text = f"{self.lead}{self.name}{LINK_ARROW}{self.link_target}"
        if self.is_broken_link:
            return text + BROKEN_LINK_MARKER
        if self.recursive:
            return text + RECURSIVE_MARKER
        return text

# -----------------------------------------------------------------------------
# RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TraversalError:
    """A contained filesystem failure; never counted as file or directory."""
    path: str
    reason: str


@dataclass
class TraversalResult:
    """
    Running totals threaded through a traversal.

    Attributes:
        directory_count: Directories rendered so far (links to dirs included).
        file_count: Files rendered so far (links to files and broken links included).
        errors: Filesystem failures contained during the walk.
    """
    directory_count: int = 0
    file_count: int = 0
    errors: List[TraversalError] = field(default_factory=list)

    def summary(self) -> str:
        return f"{self.directory_count} directories, {self.file_count} files"


@dataclass(frozen=True)
class TreeReport:
    """Outcome of rendering one or more roots, lines in output order."""
    lines: List[TreeLine]
    result: TraversalResult

    def text_lines(self) -> List[str]:
        return [line.render() for line in self.lines]

    def to_text(self) -> str:
        """Plain-text tree followed by the blank line and summary."""
        return "\n".join(self.text_lines()) + "\n\n" + self.result.summary() + "\n"
