from __future__ import annotations

"""
Tree Renderer.

Implements the visitor handed every node by the traversal engine. It
decides whether a node is shown, turns it into a classified TreeLine and
passes it to a sink; styling is left to the sink.
"""

from typing import Callable, List, Optional

from dirtree.core.services.listing import is_hidden
from dirtree.domain.config import TreeConfig
from dirtree.domain.tree_models import Entry, EntryKind, Node, TreeLine, VisitSignal

LineSink = Callable[[TreeLine], None]

# -----------------------------------------------------------------------------
# VISITOR
# -----------------------------------------------------------------------------

class TreeVisitor:
    """
    Render nodes into TreeLines.

    Lines are appended to `lines` and, when given, forwarded to `sink`
    as they are produced, so callers can stream output in listing order.
    """

    def __init__(self, config: TreeConfig, sink: Optional[LineSink] = None) -> None:
        self.config = config
        self.sink = sink
        self.lines: List[TreeLine] = []

    def visit(self, node: Node, entry: Entry, *, recursive: bool = False) -> VisitSignal:
        """
        Render one node.

        Args:
            node: Node being visited.
            entry: Its classification from the filesystem provider.
            recursive: The node is a link back into the current path and
                will not be followed.

        Returns:
            VisitSignal: STOP for hidden names when hidden entries are off,
            CONTINUE otherwise.
        """
        if not self.config.show_hidden and is_hidden(node.name):
            return VisitSignal.STOP

        self.emit(
            TreeLine(
                depth=node.depth,
                lead=node.lead,
                name=node.name,
                kind=entry.kind,
                link_target=entry.link_target,
                target_kind=entry.target_kind,
                recursive=recursive,
            )
        )
        return VisitSignal.CONTINUE

    def emit_root(self, label: str) -> None:
        """Emit the bare label line opening a root's tree."""
        self.emit(TreeLine(depth=0, lead="", name=label, kind=EntryKind.DIRECTORY))

    def emit_root_error(self, label: str) -> None:
        """Emit the line reporting a root argument that cannot be opened."""
        self.emit(TreeLine(depth=0, lead="", name=label, kind=EntryKind.DIRECTORY, error=True))

    def emit(self, line: TreeLine) -> None:
        self.lines.append(line)
        if self.sink is not None:
            self.sink(line)
