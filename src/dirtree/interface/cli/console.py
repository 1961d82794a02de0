from __future__ import annotations

"""
Terminal Rendering Sink.

Prints TreeLines to the terminal with rich, coloring them by
classification. Text is built from rich.text.Text segments, never from
markup, so bracketed file names print verbatim.
"""

import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.text import Text

from dirtree.domain.constants import (
    BROKEN_LINK_MARKER,
    ERROR_OPENING_DIR_MARKER,
    LINK_ARROW,
    RECURSIVE_MARKER,
)
from dirtree.domain.tree_models import EntryKind, TreeLine

DIRECTORY_STYLE = "green"
SYMLINK_STYLE = "magenta"
BROKEN_STYLE = "red"
MARKER_STYLE = "dim"


def make_console(no_color: bool = False, file: Optional[TextIO] = None) -> Console:
    """
    Build the stdout console.

    Styling is dropped when requested or when the stream is not a terminal.
    """
    return Console(
        file=file or sys.stdout,
        color_system=None if no_color else "auto",
        no_color=no_color,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


class ConsoleSink:
    """Callable sink printing each line as soon as the engine produces it."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def __call__(self, line: TreeLine) -> None:
        self.console.print(style_line(line))

    def print_summary(self, summary: str) -> None:
        self.console.print()
        self.console.print(summary)


def style_line(line: TreeLine) -> Text:
    """Convert a TreeLine to styled text with the same characters as render()."""
    if line.error:
        return Text.assemble(line.name, (ERROR_OPENING_DIR_MARKER, BROKEN_STYLE))

    text = Text(line.lead)

    # Root labels print bare
    if line.depth == 0:
        text.append(line.name)
        return text

    if line.kind is EntryKind.DIRECTORY:
        text.append(line.name, style=DIRECTORY_STYLE)
    elif line.kind is EntryKind.FILE:
        text.append(line.name)
    elif line.is_broken_link:
        text.append(line.name, style=BROKEN_STYLE)
        text.append(LINK_ARROW)
        text.append(line.link_target, style=BROKEN_STYLE)
        text.append(BROKEN_LINK_MARKER, style=MARKER_STYLE)
    else:
        text.append(line.name, style=SYMLINK_STYLE)
        text.append(LINK_ARROW)
        target_style = DIRECTORY_STYLE if line.target_kind is EntryKind.DIRECTORY else ""
        text.append(line.link_target, style=target_style)
        if line.recursive:
            text.append(RECURSIVE_MARKER, style=MARKER_STYLE)

    return text
