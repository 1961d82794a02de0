from __future__ import annotations

"""
Domain Constants.

Provides the box-drawing glyphs used to draw tree branches, the textual
markers appended to special entries, and application-wide limits.
"""

APP_NAME = "tree"
APP_VERSION = "0.1.1"

# -----------------------------------------------------------------------------
# BRANCH GLYPHS
# -----------------------------------------------------------------------------

TEE_GLYPH = "├── "
ANGLE_GLYPH = "└── "
PIPE_FRAGMENT = "│   "
BLANK_FRAGMENT = "    "

# -----------------------------------------------------------------------------
# ENTRY MARKERS
# -----------------------------------------------------------------------------

LINK_ARROW = " -> "
RECURSIVE_MARKER = "  [recursive, not followed]"
BROKEN_LINK_MARKER = "  [broken link]"
UNREADABLE_LINK_TARGET = "?"
ERROR_OPENING_DIR_MARKER = " [error opening dir]"

# -----------------------------------------------------------------------------
# LIMITS
# -----------------------------------------------------------------------------

# Same bound the Linux kernel applies before failing with ELOOP
MAX_SYMLINK_HOPS = 40

DEFAULT_ROOT = "."
