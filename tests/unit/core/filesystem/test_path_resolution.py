from __future__ import annotations

"""
Unit tests for VirtualFileSystem path resolution.

Covers absolute/relative starts, '.' and '..' handling, repeated
separators and the rule that nothing resolves beneath a file.
"""

import pytest

from cmdchallenge.core.filesystem.tree import VirtualFileSystem


def test_empty_path_is_current_directory(fs: VirtualFileSystem) -> None:
    assert fs.resolve("") is fs.current_directory
    assert fs.resolve(None) is fs.current_directory


def test_absolute_and_relative_paths(fs: VirtualFileSystem) -> None:
    a = fs.root.children["a"]

    assert fs.resolve("/a") is a
    assert fs.resolve("a/b") is a.children["b"]
    assert fs.resolve("/a/f.txt") is a.children["f.txt"]


def test_relative_paths_start_at_cursor(fs: VirtualFileSystem) -> None:
    fs.change_directory("a")

    assert fs.resolve("b") is fs.root.children["a"].children["b"]
    assert fs.resolve("a") is None


def test_dot_segments(fs: VirtualFileSystem) -> None:
    a = fs.root.children["a"]

    assert fs.resolve(".") is fs.root
    assert fs.resolve("./a/./b/..") is a
    assert fs.resolve("a/b/../../a") is a


def test_parent_of_root_is_root(fs: VirtualFileSystem) -> None:
    assert fs.resolve("..") is fs.root
    assert fs.resolve("/../../..") is fs.root
    assert fs.resolve("/..") is fs.root


def test_repeated_and_trailing_separators(fs: VirtualFileSystem) -> None:
    assert fs.resolve("//a///b/") is fs.root.children["a"].children["b"]


@pytest.mark.parametrize("path", ["missing", "/a/missing", "a/b/c", "/nope/.."])
def test_missing_segments_do_not_resolve(fs: VirtualFileSystem, path: str) -> None:
    assert fs.resolve(path) is None


@pytest.mark.parametrize("path", ["a/f.txt/x", "a/f.txt/.", "a/f.txt/.."])
def test_nothing_resolves_beneath_a_file(fs: VirtualFileSystem, path: str) -> None:
    assert fs.resolve(path) is None


def test_path_of_builds_absolute_paths(fs: VirtualFileSystem) -> None:
    b = fs.root.children["a"].children["b"]

    assert fs.path_of(fs.root) == "/"
    assert fs.path_of(b) == "/a/b"
