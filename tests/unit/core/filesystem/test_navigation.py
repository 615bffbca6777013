from __future__ import annotations

"""
Unit tests for navigation (cd/pwd) and listing (ls, ls -R).
"""

import pytest

from cmdchallenge.core.filesystem.tree import VirtualFileSystem
from cmdchallenge.domain.command_models import ErrorKind

# -----------------------------------------------------------------------------
# cd / pwd
# -----------------------------------------------------------------------------

def test_walkthrough_scenario(fs: VirtualFileSystem) -> None:
    """cd down, list in insertion order, climb back to the root."""
    assert fs.change_directory("a").ok
    assert fs.print_working_directory() == "/a"
    assert fs.list_directory().entries == ["f.txt", "b"]

    fs.change_directory("b")
    fs.change_directory("..")
    fs.change_directory("..")
    assert fs.print_working_directory() == "/"


@pytest.mark.parametrize("path", ["/", "/a", "/a/b"])
def test_cd_then_pwd_returns_absolute_path(fs: VirtualFileSystem, path: str) -> None:
    fs.change_directory("a/b")
    assert fs.change_directory(path).ok
    assert fs.print_working_directory() == path


def test_cd_root_goes_home(fs: VirtualFileSystem) -> None:
    fs.change_directory("a/b")
    fs.change_directory("/")
    assert fs.current_directory is fs.root


@pytest.mark.parametrize("path", ["", None])
def test_cd_empty_path_stays_put(fs: VirtualFileSystem, path) -> None:
    fs.change_directory("a/b")

    assert fs.change_directory(path).ok
    assert fs.print_working_directory() == "/a/b"


def test_cd_into_new_directory_and_back_keeps_identity(fs: VirtualFileSystem) -> None:
    start = fs.current_directory
    fs.make_directory("x")
    fs.change_directory("x")
    fs.change_directory("..")

    assert fs.current_directory is start


def test_cd_missing_directory(fs: VirtualFileSystem) -> None:
    result = fs.change_directory("nope")

    assert result.kind is ErrorKind.NOT_FOUND
    assert result.text == "cd: nope: No such directory"
    assert fs.current_directory is fs.root


def test_cd_into_file(fs: VirtualFileSystem) -> None:
    result = fs.change_directory("a/f.txt")

    assert result.kind is ErrorKind.NOT_A_DIRECTORY
    assert result.text == "cd: a/f.txt: Not a directory"
    assert fs.current_directory is fs.root

# -----------------------------------------------------------------------------
# ls
# -----------------------------------------------------------------------------

def test_ls_empty_directory(fs: VirtualFileSystem) -> None:
    result = fs.list_directory("a/b")

    assert result.ok
    assert result.entries == []
    assert result.text == ""


def test_ls_file_names_itself(fs: VirtualFileSystem) -> None:
    assert fs.list_directory("a/f.txt").entries == ["f.txt"]


def test_ls_missing_path(fs: VirtualFileSystem) -> None:
    result = fs.list_directory("ghost")

    assert result.kind is ErrorKind.NOT_FOUND
    assert result.text == "ls: ghost: No such file or directory"


def test_ls_hidden_entries() -> None:
    fs = VirtualFileSystem({".secret": "", "visible": ""})

    assert fs.list_directory().entries == [".secret", "visible"]
    assert fs.list_directory(show_hidden=False).entries == ["visible"]


def test_ls_recursive(fs: VirtualFileSystem) -> None:
    fs.create_file("top.txt")
    result = fs.list_recursive()

    assert result.output.splitlines() == [
        "a",
        "top.txt",
        "",
        "a:",
        "f.txt",
        "b",
        "",
        "a/b:",
    ]
    assert result.entries == ["a", "top.txt", "a/f.txt", "a/b"]


def test_ls_recursive_on_file(fs: VirtualFileSystem) -> None:
    assert fs.list_recursive("a/f.txt").entries == ["f.txt"]
