from __future__ import annotations

"""
In-Memory Virtual Filesystem.

Owns the root directory and the current-directory cursor, and implements
every tree operation exposed to the shell: path resolution, navigation,
listing, creation, removal, copy/move and diagram rendering.

Operations driven by user input never raise. They return a CommandResult
that carries either the output or a tagged error. Only malformed seed
structures raise (SeedStructureError), since they are construction errors.
"""

import logging
from typing import Any, List, Mapping, Optional, Tuple, Union

from cmdchallenge.core.filesystem.paths import (
    CURRENT_SEGMENT,
    PARENT_SEGMENT,
    is_absolute,
    is_valid_name,
    join_path,
    split_parent,
    split_segments,
)
from cmdchallenge.core.filesystem.renderer import render_tree
from cmdchallenge.core.filesystem.seeding import validate_structure
from cmdchallenge.domain.command_models import (
    CommandResult,
    ErrorKind,
    create_error_result,
    create_success_result,
)
from cmdchallenge.domain.constants import DEFAULT_MARKER_STYLE, PATH_SEPARATOR, ROOT_NAME
from cmdchallenge.domain.fs_models import DirectoryNode, FileNode, FsNode

logger = logging.getLogger(__name__)


class VirtualFileSystem:
    """
    Hierarchical tree of directories and files with a single cursor.

    Attributes:
        root: Parentless directory that owns the whole structure.
        current_directory: Directory relative to which paths resolve.
        marker_style: Marker style used by the tree diagram.
    """

    def __init__(
            self,
            structure: Optional[Mapping[str, Any]] = None,
            *,
            marker_style: str = DEFAULT_MARKER_STYLE,
    ) -> None:
        self.root = DirectoryNode(ROOT_NAME)
        self.current_directory: DirectoryNode = self.root
        self.marker_style = marker_style
        if structure is not None:
            self.seed(structure)

    # -------------------------------------------------------------------------
    # SEEDING
    # -------------------------------------------------------------------------

    def seed(self, structure: Mapping[str, Any], parent: Optional[DirectoryNode] = None) -> None:
        """
        Populate the tree from a nested mapping.

        Mappings become directories, strings become files with that content.
        Existing directories are merged into; any other existing node with
        the same name is replaced.

        Raises:
            SeedStructureError: If the structure is not a valid tree.
        """
        validate_structure(structure)
        target = parent or self.root
        self._build(target, structure)
        logger.debug(f"Seeded {self.path_of(target)} with {len(structure)} top-level entries")

    def _build(self, parent: DirectoryNode, structure: Mapping[str, Any]) -> None:
        for name, value in structure.items():
            existing = parent.children.get(name)
            if isinstance(value, Mapping):
                if existing is not None and existing.is_directory:
                    node = existing
                else:
                    node = DirectoryNode(name)
                    self._replace_or_attach(parent, node)
                self._build(node, value)
            else:
                self._replace_or_attach(parent, FileNode(name, content=value))

    # -------------------------------------------------------------------------
    # PATH RESOLUTION
    # -------------------------------------------------------------------------

    def resolve(self, path: Optional[str]) -> Optional[FsNode]:
        """
        Translate a path into a node, or None when it does not exist.

        An empty path is the current directory. A leading '/' starts at the
        root, anything else at the current directory. '.' stays, '..' climbs
        (a no-op at the root). Any segment after a file is unresolvable.
        """
        if not path:
            return self.current_directory

        current: FsNode = self.root if is_absolute(path) else self.current_directory
        for part in split_segments(path):
            if not current.is_directory:
                return None
            if part == CURRENT_SEGMENT:
                continue
            if part == PARENT_SEGMENT:
                if current.parent is not None:
                    current = current.parent
                continue
            child = current.children.get(part)
            if child is None:
                return None
            current = child
        return current

    def path_of(self, node: FsNode) -> str:
        """Absolute path of an attached node, '/' for the root."""
        parts: List[str] = []
        current: Optional[FsNode] = node
        while current is not None and current is not self.root:
            parts.append(current.name)
            current = current.parent
        return PATH_SEPARATOR + PATH_SEPARATOR.join(reversed(parts))

    # -------------------------------------------------------------------------
    # NAVIGATION
    # -------------------------------------------------------------------------

    def change_directory(self, path: Optional[str]) -> CommandResult:
        """
        Move the cursor. '/' always reaches the root; an empty path resolves
        to the current directory and leaves the cursor where it is.
        """
        if path == PATH_SEPARATOR:
            self.current_directory = self.root
            return create_success_result()

        target = self.resolve(path)
        if target is None:
            return create_error_result(ErrorKind.NOT_FOUND, f"cd: {path}: No such directory")
        if not target.is_directory:
            return create_error_result(ErrorKind.NOT_A_DIRECTORY, f"cd: {path}: Not a directory")

        self.current_directory = target
        return create_success_result()

    def print_working_directory(self) -> str:
        return self.path_of(self.current_directory)

    # -------------------------------------------------------------------------
    # LISTING
    # -------------------------------------------------------------------------

    def list_directory(self, path: Optional[str] = None, *, show_hidden: bool = True) -> CommandResult:
        """
        List a directory's children in insertion order.

        A file target lists just its own name. With show_hidden=False, names
        starting with '.' are skipped.
        """
        target = self.resolve(path)
        if target is None:
            return create_error_result(ErrorKind.NOT_FOUND, f"ls: {path}: No such file or directory")

        if target.is_file:
            names = [target.name]
        else:
            names = self._visible_names(target, show_hidden)
        return create_success_result("\n".join(names), names)

    def list_recursive(self, path: Optional[str] = None, *, show_hidden: bool = True) -> CommandResult:
        """
        List a target and then every descendant directory in pre-order.

        Each nested block is introduced by a blank line and a 'relative/path:'
        header. The entries payload carries relative paths of every listed node.
        """
        target = self.resolve(path)
        if target is None:
            return create_error_result(ErrorKind.NOT_FOUND, f"ls: {path}: No such file or directory")
        if target.is_file:
            return create_success_result(target.name, [target.name])

        lines: List[str] = []
        entries: List[str] = []
        self._collect_listing(target, "", show_hidden, lines, entries)
        return create_success_result("\n".join(lines), entries)

    def _collect_listing(
            self,
            directory: DirectoryNode,
            rel: str,
            show_hidden: bool,
            lines: List[str],
            entries: List[str],
    ) -> None:
        names = self._visible_names(directory, show_hidden)
        if rel:
            lines.extend(["", f"{rel}:"])
        lines.extend(names)
        entries.extend(join_path(rel, name) for name in names)

        for name in names:
            child = directory.children[name]
            if child.is_directory:
                self._collect_listing(child, join_path(rel, name), show_hidden, lines, entries)

    @staticmethod
    def _visible_names(directory: DirectoryNode, show_hidden: bool) -> List[str]:
        return [name for name in directory.children if show_hidden or not name.startswith(".")]

    # -------------------------------------------------------------------------
    # CREATION
    # -------------------------------------------------------------------------

    def make_directory(self, name: str) -> CommandResult:
        if not is_valid_name(name):
            return create_error_result(ErrorKind.INVALID_ARGUMENT, "mkdir: Invalid directory name")
        if name in self.current_directory.children:
            return create_error_result(ErrorKind.ALREADY_EXISTS, f"mkdir: {name}: Directory already exists")

        self._attach(self.current_directory, DirectoryNode(name))
        logger.debug(f"mkdir {self.path_of(self.current_directory.children[name])}")
        return create_success_result()

    def create_file(self, name: str) -> CommandResult:
        if not is_valid_name(name):
            return create_error_result(ErrorKind.INVALID_ARGUMENT, "touch: Invalid file name")
        if name in self.current_directory.children:
            return create_error_result(ErrorKind.ALREADY_EXISTS, f"touch: {name}: File already exists")

        self._attach(self.current_directory, FileNode(name))
        logger.debug(f"touch {self.path_of(self.current_directory.children[name])}")
        return create_success_result()

    def make_directory_path(self, path: str) -> CommandResult:
        """
        Create every missing directory along a path (mkdir -p).

        Segments are always walked from the current directory, so a leading
        '/' adds nothing. Existing directories are reused. Walking through an
        existing file is rejected and any directory created by this call is
        rolled back.
        """
        current: DirectoryNode = self.current_directory
        created: List[DirectoryNode] = []

        for part in split_segments(path):
            if part == CURRENT_SEGMENT:
                continue
            if part == PARENT_SEGMENT:
                if current.parent is not None:
                    current = current.parent
                continue

            existing = current.children.get(part)
            if existing is None:
                existing = DirectoryNode(part)
                self._attach(current, existing)
                created.append(existing)
            elif not existing.is_directory:
                for node in reversed(created):
                    self._detach(node)
                return create_error_result(ErrorKind.NOT_A_DIRECTORY, f"mkdir: {path}: Not a directory")
            current = existing

        if created:
            logger.debug(f"mkdir -p created {len(created)} directories ending at {self.path_of(current)}")
        return create_success_result()

    # -------------------------------------------------------------------------
    # REMOVAL
    # -------------------------------------------------------------------------

    def remove_file(self, path: str) -> CommandResult:
        located = self._locate_for_removal("rm", path)
        if isinstance(located, CommandResult):
            return located

        _, node = located
        if node.is_directory:
            return create_error_result(ErrorKind.IS_A_DIRECTORY, f"rm: {path}: Is a directory")

        logger.debug(f"rm {self.path_of(node)}")
        self._detach(node)
        return create_success_result()

    def remove_directory(self, path: str) -> CommandResult:
        """
        Remove a directory together with its subtree.

        When the removed directory holds the cursor, the cursor falls back to
        the removed directory's parent.
        """
        located = self._locate_for_removal("rmdir", path)
        if isinstance(located, CommandResult):
            return located

        parent, node = located
        if not node.is_directory:
            return create_error_result(ErrorKind.NOT_A_DIRECTORY, f"rmdir: {path}: Not a directory")

        if self._is_ancestor(node, self.current_directory):
            self.current_directory = parent
            logger.debug(f"Cursor moved to {self.path_of(parent)} after removal of its ancestor")

        logger.debug(f"rmdir {self.path_of(node)}")
        self._detach(node)
        return create_success_result()

    def _locate_for_removal(
            self,
            command: str,
            path: Optional[str],
    ) -> Union[Tuple[DirectoryNode, FsNode], CommandResult]:
        """Resolve the parent directory and the named child of a removal target."""
        if not path:
            return create_error_result(ErrorKind.MISSING_OPERAND, f"{command}: missing operand")

        parent_path, name = split_parent(path)
        if not name:
            return create_error_result(ErrorKind.INVALID_ARGUMENT, f"{command}: cannot remove root directory")
        if name in (CURRENT_SEGMENT, PARENT_SEGMENT):
            return create_error_result(ErrorKind.INVALID_ARGUMENT, f"{command}: refusing to remove '.' or '..'")

        parent = self.resolve(parent_path) if parent_path else self.current_directory
        if parent is None or not parent.is_directory or name not in parent.children:
            return create_error_result(ErrorKind.NOT_FOUND, f"{command}: {path}: No such file or directory")
        return parent, parent.children[name]

    # -------------------------------------------------------------------------
    # CONTENT, COPY AND MOVE
    # -------------------------------------------------------------------------

    def read_file(self, path: str) -> CommandResult:
        if not path:
            return create_error_result(ErrorKind.MISSING_OPERAND, "cat: missing operand")

        target = self.resolve(path)
        if target is None:
            return create_error_result(ErrorKind.NOT_FOUND, f"cat: {path}: No such file or directory")
        if target.is_directory:
            return create_error_result(ErrorKind.IS_A_DIRECTORY, f"cat: {path}: Is a directory")
        return create_success_result(target.content)

    def copy(self, src: str, dest: str) -> CommandResult:
        """Copy a file into a directory or onto a new/existing file path."""
        source = self.resolve(src)
        if source is None:
            return create_error_result(ErrorKind.NOT_FOUND, f"cp: {src}: No such file or directory")
        if source.is_directory:
            return create_error_result(ErrorKind.IS_A_DIRECTORY, f"cp: {src}: Is a directory")

        destination = self._destination(dest, source.name)
        if destination is None:
            return create_error_result(
                ErrorKind.NOT_FOUND, f"cp: cannot create regular file '{dest}': No such file or directory"
            )

        parent, name = destination
        existing = parent.children.get(name)
        if existing is source:
            return create_error_result(
                ErrorKind.INVALID_ARGUMENT, f"cp: '{src}' and '{dest}' are the same file"
            )
        if existing is not None and existing.is_directory:
            return create_error_result(
                ErrorKind.IS_A_DIRECTORY, f"cp: cannot overwrite directory '{dest}' with non-directory"
            )

        self._replace_or_attach(parent, FileNode(name, content=source.content))
        logger.debug(f"cp {self.path_of(source)} -> {self.path_of(parent.children[name])}")
        return create_success_result()

    def move(self, src: str, dest: str) -> CommandResult:
        """Move or rename a node; directories move with their subtree."""
        source = self.resolve(src)
        if source is None:
            return create_error_result(ErrorKind.NOT_FOUND, f"mv: {src}: No such file or directory")
        if source is self.root:
            return create_error_result(ErrorKind.INVALID_ARGUMENT, "mv: cannot move root directory")

        destination = self._destination(dest, source.name)
        if destination is None:
            return create_error_result(
                ErrorKind.NOT_FOUND, f"mv: cannot move '{src}' to '{dest}': No such file or directory"
            )

        parent, name = destination
        if source.is_directory and self._is_ancestor(source, parent):
            return create_error_result(
                ErrorKind.INVALID_ARGUMENT, f"mv: cannot move '{src}' to a subdirectory of itself, '{dest}'"
            )

        existing = parent.children.get(name)
        if existing is source:
            return create_success_result()
        if existing is not None:
            if existing.is_directory:
                return create_error_result(ErrorKind.IS_A_DIRECTORY, f"mv: cannot overwrite directory '{dest}'")
            if source.is_directory:
                return create_error_result(
                    ErrorKind.NOT_A_DIRECTORY,
                    f"mv: cannot overwrite non-directory '{dest}' with directory '{src}'",
                )

        old_path = self.path_of(source)
        self._detach(source)
        source.name = name
        self._replace_or_attach(parent, source)
        logger.debug(f"mv {old_path} -> {self.path_of(source)}")
        return create_success_result()

    def _destination(self, dest: str, default_name: str) -> Optional[Tuple[DirectoryNode, str]]:
        """
        Work out (parent, name) for a copy/move target.

        An existing directory receives the node under its current name;
        otherwise dest names the new entry inside its parent.
        """
        if not dest:
            return None
        target = self.resolve(dest)
        if target is not None and target.is_directory:
            return target, default_name

        parent_path, name = split_parent(dest)
        parent = self.resolve(parent_path) if parent_path else self.current_directory
        if parent is None or not parent.is_directory or not is_valid_name(name):
            return None
        return parent, name

    # -------------------------------------------------------------------------
    # VISUALIZATION
    # -------------------------------------------------------------------------

    def render_tree(self, node: Optional[FsNode] = None) -> str:
        target = node if node is not None else self.current_directory
        return render_tree(target, self.marker_style)

    def show_tree(self, path: Optional[str] = None) -> CommandResult:
        target = self.resolve(path)
        if target is None:
            return create_error_result(ErrorKind.NOT_FOUND, f"tree: {path}: No such file or directory")
        return create_success_result(self.render_tree(target))

    # -------------------------------------------------------------------------
    # STRUCTURAL HELPERS
    # -------------------------------------------------------------------------

    @staticmethod
    def _attach(parent: DirectoryNode, node: FsNode) -> None:
        node.parent = parent
        parent.children[node.name] = node

    @staticmethod
    def _detach(node: FsNode) -> None:
        if node.parent is not None:
            del node.parent.children[node.name]
        node.parent = None

    @staticmethod
    def _replace_or_attach(parent: DirectoryNode, node: FsNode) -> None:
        """Attach a node, taking over an existing sibling's slot in place."""
        existing = parent.children.get(node.name)
        if existing is not None:
            existing.parent = None
        node.parent = parent
        parent.children[node.name] = node

    @staticmethod
    def _is_ancestor(ancestor: FsNode, node: Optional[FsNode]) -> bool:
        """True if ancestor is node itself or one of its parents."""
        while node is not None:
            if node is ancestor:
                return True
            node = node.parent
        return False
