from __future__ import annotations

"""
Tree Renderer.

Converts a virtual subtree into the visual diagram printed by the 'tree'
command. Pre-order, depth-first, children in insertion order.
"""

from typing import List, Optional

from cmdchallenge.domain.constants import (
    CONNECTOR_LAST,
    CONNECTOR_MIDDLE,
    DEFAULT_MARKER_STYLE,
    MARKER_STYLES,
    PREFIX_BLANK,
    PREFIX_PIPE,
    ROOT_NAME,
)
from cmdchallenge.domain.fs_models import FsNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree_structure(
        node: FsNode,
        lines: List[str],
        prefix: str = "",
        is_last: bool = True,
        marker_style: str = DEFAULT_MARKER_STYLE,
) -> None:
    """
    Recursively append the diagram lines of a subtree to an accumulator.

    Each line is prefix + connector + marker + name. Children extend the
    prefix with blanks under a last sibling and with a pipe otherwise.

    Args:
        node: Subtree root to render.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
        is_last: Whether the node is the last of its siblings.
        marker_style: Key of MARKER_STYLES used for kind markers.
    """
    dir_marker, file_marker = MARKER_STYLES.get(marker_style, MARKER_STYLES[DEFAULT_MARKER_STYLE])
    connector = CONNECTOR_LAST if is_last else CONNECTOR_MIDDLE
    marker = dir_marker if node.is_directory else file_marker
    name = ROOT_NAME if node.is_directory and node.parent is None else node.name

    lines.append(f"{prefix}{connector}{marker} {name}")

    if not node.is_directory:
        return

    children = list(node.children.values())
    child_prefix = prefix + (PREFIX_BLANK if is_last else PREFIX_PIPE)
    for i, child in enumerate(children):
        render_tree_structure(
            child,
            lines,
            prefix=child_prefix,
            is_last=(i == len(children) - 1),
            marker_style=marker_style,
        )


def render_tree_lines(node: FsNode, marker_style: str = DEFAULT_MARKER_STYLE) -> List[str]:
    lines: List[str] = []
    render_tree_structure(node, lines, marker_style=marker_style)
    return lines


def render_tree(node: FsNode, marker_style: Optional[str] = None) -> str:
    """Render a subtree as a newline-joined diagram."""
    return "\n".join(render_tree_lines(node, marker_style or DEFAULT_MARKER_STYLE))
