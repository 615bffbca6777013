from __future__ import annotations

"""
Virtual Filesystem Node Models.

Provides the tagged node variants that make up the in-memory tree. A
directory owns its children through an insertion-ordered mapping; every
node keeps a non-owning back-reference to its parent for upward traversal.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union

# -----------------------------------------------------------------------------
# NODE KIND
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Discriminator exposed by every node variant."""
    DIRECTORY = "directory"
    FILE = "file"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class DirectoryNode:
    """
    Represents a container entry in the virtual tree.

    Attributes:
        name: Identifier, unique among siblings.
        children: Owned child nodes keyed by name (insertion-ordered).
        parent: Owning directory, or None for the root.
    """
    name: str
    children: Dict[str, "FsNode"] = field(default_factory=dict)
    parent: Optional["DirectoryNode"] = field(default=None, repr=False, compare=False)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.DIRECTORY

    @property
    def is_directory(self) -> bool:
        return True

    @property
    def is_file(self) -> bool:
        return False


@dataclass(eq=False)
class FileNode:
    """
    Represents a leaf entry (file) in the virtual tree.

    Attributes:
        name: Identifier, unique among siblings.
        content: Text payload of the file.
        parent: Owning directory.
    """
    name: str
    content: str = ""
    parent: Optional[DirectoryNode] = field(default=None, repr=False, compare=False)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.FILE

    @property
    def is_directory(self) -> bool:
        return False

    @property
    def is_file(self) -> bool:
        return True


FsNode = Union[DirectoryNode, FileNode]
