from __future__ import annotations

"""
Virtual Path Helpers.

Pure string utilities shared by resolution, creation and removal. They never
look at the tree; interpretation of '.' and '..' is left to the caller.
"""

from typing import List, Tuple

from cmdchallenge.domain.constants import PATH_SEPARATOR

CURRENT_SEGMENT = "."
PARENT_SEGMENT = ".."


def is_absolute(path: str) -> bool:
    return path.startswith(PATH_SEPARATOR)


def split_segments(path: str) -> List[str]:
    """
    Split a path into its non-empty segments.

    'a//b/' and '/a/b' both yield ['a', 'b'].
    """
    return [part for part in path.split(PATH_SEPARATOR) if part]


def split_parent(path: str) -> Tuple[str, str]:
    """
    Split a path into (parent_path, name) after dropping trailing separators.

    Examples::

        "a/b/c"  -> ("a/b", "c")
        "c"      -> ("", "c")
        "/c"     -> ("/", "c")
        "a/b/"   -> ("a", "b")
        "/"      -> ("/", "")
    """
    trimmed = path.rstrip(PATH_SEPARATOR)
    if not trimmed:
        return (PATH_SEPARATOR if path else "", "")

    head, sep, name = trimmed.rpartition(PATH_SEPARATOR)
    if not sep:
        return ("", name)
    return (head or PATH_SEPARATOR, name)


def is_valid_name(name: str) -> bool:
    """A node name is non-empty, not '.'/'..' and free of separators."""
    return bool(name) and name not in (CURRENT_SEGMENT, PARENT_SEGMENT) and PATH_SEPARATOR not in name


def join_path(parent: str, name: str) -> str:
    if not parent:
        return name
    if parent.endswith(PATH_SEPARATOR):
        return parent + name
    return parent + PATH_SEPARATOR + name
