from __future__ import annotations

"""
Unit tests for file content, copy and move operations.
"""

from cmdchallenge.core.filesystem.tree import VirtualFileSystem
from cmdchallenge.domain.command_models import ErrorKind

# -----------------------------------------------------------------------------
# cat
# -----------------------------------------------------------------------------

def test_cat_reads_content(fs: VirtualFileSystem) -> None:
    assert fs.read_file("a/f.txt").text == "hi"


def test_cat_errors(fs: VirtualFileSystem) -> None:
    assert fs.read_file("").kind is ErrorKind.MISSING_OPERAND
    assert fs.read_file("nope").text == "cat: nope: No such file or directory"
    assert fs.read_file("a").text == "cat: a: Is a directory"

# -----------------------------------------------------------------------------
# cp
# -----------------------------------------------------------------------------

def test_cp_into_directory_keeps_name(fs: VirtualFileSystem) -> None:
    assert fs.copy("a/f.txt", "a/b").ok

    copy = fs.resolve("a/b/f.txt")
    assert copy.content == "hi"
    assert copy is not fs.resolve("a/f.txt")
    assert copy.parent is fs.resolve("a/b")


def test_cp_to_new_name(fs: VirtualFileSystem) -> None:
    assert fs.copy("a/f.txt", "g.txt").ok
    assert fs.resolve("/g.txt").content == "hi"


def test_cp_overwrites_file_in_place(fs: VirtualFileSystem) -> None:
    fs.seed({"a": {"z.txt": "old"}})
    fs.copy("a/f.txt", "a/z.txt")

    assert fs.resolve("a/z.txt").content == "hi"
    assert fs.list_directory("a").entries == ["f.txt", "b", "z.txt"]


def test_cp_rejections(fs: VirtualFileSystem) -> None:
    assert fs.copy("nope", "x").kind is ErrorKind.NOT_FOUND
    assert fs.copy("a", "x").text == "cp: a: Is a directory"
    assert fs.copy("a/f.txt", "a/f.txt").text == "cp: 'a/f.txt' and 'a/f.txt' are the same file"
    assert fs.copy("a/f.txt", "ghost/x").kind is ErrorKind.NOT_FOUND


def test_cp_cannot_overwrite_directory() -> None:
    fs = VirtualFileSystem({"f": "x", "d": {"f": {}}})
    result = fs.copy("f", "d")

    assert result.kind is ErrorKind.IS_A_DIRECTORY
    assert result.text == "cp: cannot overwrite directory 'd' with non-directory"
    assert fs.resolve("d/f").is_directory

# -----------------------------------------------------------------------------
# mv
# -----------------------------------------------------------------------------

def test_mv_rename_file(fs: VirtualFileSystem) -> None:
    node = fs.resolve("a/f.txt")

    assert fs.move("a/f.txt", "a/g.txt").ok
    assert fs.resolve("a/g.txt") is node
    assert node.name == "g.txt"
    assert fs.resolve("a/f.txt") is None


def test_mv_directory_into_directory(fs: VirtualFileSystem) -> None:
    fs.make_directory("x")
    b = fs.resolve("a/b")

    assert fs.move("a/b", "x").ok
    assert fs.resolve("/x/b") is b
    assert b.parent is fs.resolve("/x")
    assert "b" not in fs.resolve("a").children


def test_mv_into_own_subtree_is_rejected(fs: VirtualFileSystem) -> None:
    result = fs.move("a", "a/b")

    assert result.kind is ErrorKind.INVALID_ARGUMENT
    assert "subdirectory of itself" in result.text
    assert fs.resolve("a/b") is not None


def test_mv_root_is_rejected(fs: VirtualFileSystem) -> None:
    assert fs.move("/", "a").text == "mv: cannot move root directory"


def test_mv_onto_itself_is_a_no_op(fs: VirtualFileSystem) -> None:
    assert fs.move("a/f.txt", "a").ok
    assert fs.resolve("a/f.txt").content == "hi"


def test_mv_overwrite_rules() -> None:
    fs = VirtualFileSystem({"f": "new", "g": "old", "d": {}, "e": {"d": {}}})

    assert fs.move("f", "g").ok
    assert fs.resolve("g").content == "new"
    assert fs.move("d", "g").kind is ErrorKind.NOT_A_DIRECTORY
    assert fs.move("g", "e/d").ok
    assert fs.resolve("e/d/g").content == "new"


def test_mv_keeps_cursor_valid(fs: VirtualFileSystem) -> None:
    fs.change_directory("a/b")
    fs.move("/a", "/renamed")

    assert fs.print_working_directory() == "/renamed/b"
