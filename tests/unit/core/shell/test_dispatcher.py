from __future__ import annotations

"""
Unit tests for the ShellSession dispatcher.

Verifies:
1. Routing of command lines onto filesystem operations.
2. Flag parsing and operand-count errors.
3. History recording and the never-raise guarantee.
"""

import pytest

from cmdchallenge.core.filesystem.tree import VirtualFileSystem
from cmdchallenge.core.shell.dispatcher import ShellSession
from cmdchallenge.domain.command_models import ErrorKind

# -----------------------------------------------------------------------------
# Routing
# -----------------------------------------------------------------------------

def test_session_walkthrough(session: ShellSession) -> None:
    assert session.execute("cd a").ok
    assert session.execute("pwd").text == "/a"
    assert session.execute("ls").entries == ["f.txt", "b"]
    assert session.execute("cat f.txt").text == "hi"
    assert session.execute("cd").ok
    assert session.execute("pwd").text == "/"


def test_bare_cd_returns_to_root_from_depth(session: ShellSession) -> None:
    session.execute("cd a/b")

    assert session.execute("cd").ok
    assert session.fs.current_directory is session.fs.root
    assert session.execute("pwd").text == "/"


def test_default_session_uses_challenge_tree() -> None:
    session = ShellSession()
    assert session.execute("ls").entries == ["thecmdchallenge"]


def test_unknown_command(session: ShellSession) -> None:
    result = session.execute("frobnicate now")

    assert result.kind is ErrorKind.UNKNOWN_COMMAND
    assert result.text == "frobnicate: command not found"


def test_blank_line_is_silent_and_not_recorded(session: ShellSession) -> None:
    result = session.execute("   ")

    assert result.ok
    assert result.text == ""
    assert list(session.history) == []


def test_quoted_arguments(session: ShellSession) -> None:
    assert session.execute('mkdir "my dir"').ok
    assert session.execute("cd 'my dir'").ok
    assert session.execute("pwd").text == "/my dir"


def test_syntax_error_is_reported(session: ShellSession) -> None:
    result = session.execute('echo "unterminated')

    assert result.kind is ErrorKind.INVALID_ARGUMENT
    assert result.text.startswith("syntax error:")


def test_run_accepts_pre_tokenized_input(session: ShellSession) -> None:
    assert session.run("mkdir", ["x"]).ok
    assert session.run("ls", []).entries == ["a", "x"]
    assert session.run("", []).ok

# -----------------------------------------------------------------------------
# Flags and operands
# -----------------------------------------------------------------------------

def test_ls_flags() -> None:
    session = ShellSession(VirtualFileSystem({".hidden": "", "d": {"x": ""}}))

    assert session.execute("ls").entries == ["d"]
    assert session.execute("ls -a").entries == [".hidden", "d"]
    assert session.execute("ls -R").entries == ["d", "d/x"]
    assert session.execute("ls -aR").entries == [".hidden", "d", "d/x"]


def test_ls_multiple_paths(session: ShellSession) -> None:
    session.execute("touch top")
    result = session.execute("ls a a/b")

    assert result.text == "a:\nf.txt\nb\n\na/b:"
    assert result.entries == ["f.txt", "b"]


def test_invalid_option(session: ShellSession) -> None:
    result = session.execute("ls -z")

    assert result.kind is ErrorKind.INVALID_ARGUMENT
    assert result.text == "ls: invalid option -- 'z'"


def test_double_dash_ends_flags(session: ShellSession) -> None:
    assert session.execute("touch -- -weird").ok
    assert "-weird" in session.execute("ls").entries


def test_mkdir_p_via_dispatcher(session: ShellSession) -> None:
    assert session.execute("mkdir -p x/y/z").ok
    assert session.execute("cd x/y/z").ok


def test_multiple_operands_stop_at_first_failure(session: ShellSession) -> None:
    result = session.execute("touch one a two")

    assert result.kind is ErrorKind.ALREADY_EXISTS
    entries = session.execute("ls").entries
    assert "one" in entries
    assert "two" not in entries


@pytest.mark.parametrize(
    "line, message",
    [
        ("rm", "rm: missing operand"),
        ("rmdir", "rmdir: missing operand"),
        ("touch", "touch: missing operand"),
        ("mkdir", "mkdir: missing operand"),
        ("cat", "cat: missing operand"),
        ("cp", "cp: missing file operand"),
        ("mv a", "mv: missing destination file operand after 'a'"),
        ("cp a b c", "cp: extra operand 'c'"),
        ("cd a b", "cd: too many arguments"),
        ("tree a b", "tree: too many arguments"),
    ],
)
def test_operand_errors(session: ShellSession, line: str, message: str) -> None:
    assert session.execute(line).text == message


def test_rm_directory_through_dispatcher(session: ShellSession) -> None:
    result = session.execute("rm a")

    assert result.kind is ErrorKind.IS_A_DIRECTORY
    assert session.execute("ls").entries == ["a"]


def test_cp_and_mv(session: ShellSession) -> None:
    assert session.execute("cp a/f.txt copy.txt").ok
    assert session.execute("mv copy.txt a/b").ok
    assert session.execute("cat a/b/copy.txt").text == "hi"


def test_cat_multiple_files(session: ShellSession) -> None:
    session.execute("cp a/f.txt g.txt")
    assert session.execute("cat a/f.txt g.txt").text == "hi\nhi"


def test_tree_command(session: ShellSession) -> None:
    assert session.execute("tree a/b").text == "└── 📁 b"

# -----------------------------------------------------------------------------
# Session commands
# -----------------------------------------------------------------------------

def test_echo(session: ShellSession) -> None:
    assert session.execute("echo hello   'big world'").text == "hello big world"


def test_help_lists_every_command(session: ShellSession) -> None:
    text = session.execute("help").text

    for name in session.commands:
        assert name in text
    assert "clear" in text
    assert "exit" in text


def test_history_is_bounded() -> None:
    session = ShellSession(VirtualFileSystem(), history_limit=2)
    session.execute("pwd")
    session.execute("echo one")
    result = session.execute("history")

    assert result.entries == ["echo one", "history"]
    assert result.text == "   1  echo one\n   2  history"


def test_prompt_template(session: ShellSession) -> None:
    session.execute("cd a")
    assert session.prompt("[{cwd}]> ") == "[/a]> "


def test_marker_style_override(fs: VirtualFileSystem) -> None:
    session = ShellSession(fs, marker_style="ascii")
    assert session.execute("tree a/b").text == "└── [d] b"


@pytest.mark.parametrize(
    "line",
    ["cd ..", "rm /", "rmdir /", "rmdir .", "mv / x", "ls -", "cat a", "mkdir -p a/f.txt/x", "cd a/f.txt", "'"],
)
def test_dispatcher_never_raises(session: ShellSession, line: str) -> None:
    result = session.execute(line)
    assert isinstance(result.text, str)
