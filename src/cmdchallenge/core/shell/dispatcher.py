from __future__ import annotations

"""
Shell Command Dispatcher.

Bridges tokenized terminal input and the virtual filesystem. A ShellSession
owns one VirtualFileSystem, maps command names onto tree operations, parses
the few supported flags, keeps a bounded history and turns every outcome
into a CommandResult. User input never makes it raise.
"""

import logging
from collections import deque
from typing import Callable, Deque, Dict, List, Optional, Set, Tuple, Union

from cmdchallenge.core.filesystem.tree import VirtualFileSystem
from cmdchallenge.core.shell.tokenizer import tokenize
from cmdchallenge.domain.command_models import (
    CommandResult,
    ErrorKind,
    create_error_result,
    create_success_result,
)
from cmdchallenge.domain.config import DEFAULT_HISTORY_LIMIT, DEFAULT_PROMPT_TEMPLATE
from cmdchallenge.domain.constants import DEFAULT_STRUCTURE, ROOT_NAME

logger = logging.getLogger(__name__)

# Commands handled by the front end (REPL or window) rather than the session
FRONTEND_COMMANDS: Dict[str, str] = {
    "clear": "Clear the screen",
    "exit": "Leave the challenge",
}

COMMAND_HELP: Dict[str, Tuple[str, str]] = {
    "cat": ("cat <file>...", "Print file contents"),
    "cd": ("cd [path]", "Change the current directory"),
    "cp": ("cp <src> <dest>", "Copy a file"),
    "echo": ("echo [text]...", "Print the arguments"),
    "help": ("help", "List available commands"),
    "history": ("history", "Show previously entered commands"),
    "ls": ("ls [-a] [-R] [path]...", "List directory contents"),
    "mkdir": ("mkdir [-p] <name>...", "Create directories"),
    "mv": ("mv <src> <dest>", "Move or rename a file or directory"),
    "pwd": ("pwd", "Print the current directory"),
    "rm": ("rm <path>...", "Remove files"),
    "rmdir": ("rmdir <path>...", "Remove directories and their contents"),
    "touch": ("touch <name>...", "Create empty files"),
    "tree": ("tree [path]", "Draw the directory tree"),
}

Handler = Callable[[List[str]], CommandResult]


class ShellSession:
    """
    One interactive session: a filesystem, a command table and a history.

    Attributes:
        fs: The virtual filesystem this session operates on.
        history: Most recent raw lines, oldest first.
    """

    def __init__(
            self,
            fs: Optional[VirtualFileSystem] = None,
            *,
            marker_style: Optional[str] = None,
            history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self.fs = fs if fs is not None else VirtualFileSystem(DEFAULT_STRUCTURE)
        if marker_style:
            self.fs.marker_style = marker_style
        self.history: Deque[str] = deque(maxlen=history_limit)

        self._commands: Dict[str, Handler] = {
            "cat": self._cmd_cat,
            "cd": self._cmd_cd,
            "cp": self._cmd_cp,
            "echo": self._cmd_echo,
            "help": self._cmd_help,
            "history": self._cmd_history,
            "ls": self._cmd_ls,
            "mkdir": self._cmd_mkdir,
            "mv": self._cmd_mv,
            "pwd": self._cmd_pwd,
            "rm": self._cmd_rm,
            "rmdir": self._cmd_rmdir,
            "touch": self._cmd_touch,
            "tree": self._cmd_tree,
        }

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    @property
    def commands(self) -> List[str]:
        return sorted(self._commands)

    def prompt(self, template: str = DEFAULT_PROMPT_TEMPLATE) -> str:
        return template.format(cwd=self.fs.print_working_directory())

    def execute(self, line: str) -> CommandResult:
        """
        Tokenize, record and run one raw terminal line.

        Blank lines are an empty success and are not recorded.
        """
        stripped = line.strip()
        if not stripped:
            return create_success_result()

        self.history.append(stripped)
        try:
            command, args = tokenize(stripped)
        except ValueError as e:
            return create_error_result(ErrorKind.INVALID_ARGUMENT, f"syntax error: {e}")

        return self.run(command, args)

    def run(self, command: str, args: List[str]) -> CommandResult:
        """
        Dispatch an already-tokenized command.

        Args:
            command: Command name, e.g. 'ls'.
            args: Arguments, flags included.

        Returns:
            CommandResult: The outcome, never an exception.
        """
        if not command:
            return create_success_result()

        handler = self._commands.get(command)
        if handler is None:
            return create_error_result(ErrorKind.UNKNOWN_COMMAND, f"{command}: command not found")

        result = handler(list(args))
        if not result.ok:
            logger.debug(f"Command failed: {command} {args} -> {result.error}")
        return result

    # -------------------------------------------------------------------------
    # NAVIGATION AND LISTING
    # -------------------------------------------------------------------------

    def _cmd_cd(self, args: List[str]) -> CommandResult:
        parsed = _parse_flags("cd", args, "")
        if isinstance(parsed, CommandResult):
            return parsed
        _, operands = parsed
        if len(operands) > 1:
            return create_error_result(ErrorKind.INVALID_ARGUMENT, "cd: too many arguments")
        # A bare 'cd' goes home, which is the root here
        return self.fs.change_directory(operands[0] if operands else ROOT_NAME)

    def _cmd_pwd(self, args: List[str]) -> CommandResult:
        return create_success_result(self.fs.print_working_directory())

    def _cmd_ls(self, args: List[str]) -> CommandResult:
        parsed = _parse_flags("ls", args, "aR")
        if isinstance(parsed, CommandResult):
            return parsed
        flags, operands = parsed

        show_hidden = "a" in flags
        lister = self.fs.list_recursive if "R" in flags else self.fs.list_directory
        if len(operands) <= 1:
            return lister(operands[0] if operands else None, show_hidden=show_hidden)

        blocks: List[str] = []
        entries: List[str] = []
        for path in operands:
            result = lister(path, show_hidden=show_hidden)
            if not result.ok:
                return result
            blocks.append(f"{path}:\n{result.output}" if result.output else f"{path}:")
            entries.extend(result.entries)
        return create_success_result("\n\n".join(blocks), entries)

    def _cmd_tree(self, args: List[str]) -> CommandResult:
        parsed = _parse_flags("tree", args, "")
        if isinstance(parsed, CommandResult):
            return parsed
        _, operands = parsed
        if len(operands) > 1:
            return create_error_result(ErrorKind.INVALID_ARGUMENT, "tree: too many arguments")
        return self.fs.show_tree(operands[0] if operands else None)

    # -------------------------------------------------------------------------
    # MUTATION
    # -------------------------------------------------------------------------

    def _cmd_mkdir(self, args: List[str]) -> CommandResult:
        parsed = _parse_flags("mkdir", args, "p")
        if isinstance(parsed, CommandResult):
            return parsed
        flags, operands = parsed
        op = self.fs.make_directory_path if "p" in flags else self.fs.make_directory
        return _apply_each("mkdir", operands, op)

    def _cmd_touch(self, args: List[str]) -> CommandResult:
        parsed = _parse_flags("touch", args, "")
        if isinstance(parsed, CommandResult):
            return parsed
        return _apply_each("touch", parsed[1], self.fs.create_file)

    def _cmd_rm(self, args: List[str]) -> CommandResult:
        parsed = _parse_flags("rm", args, "")
        if isinstance(parsed, CommandResult):
            return parsed
        return _apply_each("rm", parsed[1], self.fs.remove_file)

    def _cmd_rmdir(self, args: List[str]) -> CommandResult:
        parsed = _parse_flags("rmdir", args, "")
        if isinstance(parsed, CommandResult):
            return parsed
        return _apply_each("rmdir", parsed[1], self.fs.remove_directory)

    def _cmd_cp(self, args: List[str]) -> CommandResult:
        return self._two_operands("cp", args, self.fs.copy)

    def _cmd_mv(self, args: List[str]) -> CommandResult:
        return self._two_operands("mv", args, self.fs.move)

    @staticmethod
    def _two_operands(
            command: str,
            args: List[str],
            op: Callable[[str, str], CommandResult],
    ) -> CommandResult:
        parsed = _parse_flags(command, args, "")
        if isinstance(parsed, CommandResult):
            return parsed
        _, operands = parsed
        if not operands:
            return create_error_result(ErrorKind.MISSING_OPERAND, f"{command}: missing file operand")
        if len(operands) == 1:
            return create_error_result(
                ErrorKind.MISSING_OPERAND,
                f"{command}: missing destination file operand after '{operands[0]}'",
            )
        if len(operands) > 2:
            return create_error_result(ErrorKind.INVALID_ARGUMENT, f"{command}: extra operand '{operands[2]}'")
        return op(operands[0], operands[1])

    # -------------------------------------------------------------------------
    # CONTENT AND SESSION
    # -------------------------------------------------------------------------

    def _cmd_cat(self, args: List[str]) -> CommandResult:
        parsed = _parse_flags("cat", args, "")
        if isinstance(parsed, CommandResult):
            return parsed
        _, operands = parsed
        if not operands:
            return create_error_result(ErrorKind.MISSING_OPERAND, "cat: missing operand")

        contents: List[str] = []
        for path in operands:
            result = self.fs.read_file(path)
            if not result.ok:
                return result
            contents.append(result.output)
        return create_success_result("\n".join(contents))

    def _cmd_echo(self, args: List[str]) -> CommandResult:
        return create_success_result(" ".join(args))

    def _cmd_help(self, args: List[str]) -> CommandResult:
        rows = [COMMAND_HELP[name] for name in self.commands if name in COMMAND_HELP]
        rows.extend((name, summary) for name, summary in FRONTEND_COMMANDS.items())
        width = max(len(usage) for usage, _ in rows) + 2
        return create_success_result("\n".join(f"{usage:<{width}}{summary}" for usage, summary in rows))

    def _cmd_history(self, args: List[str]) -> CommandResult:
        lines = [f"{i:>4}  {entry}" for i, entry in enumerate(self.history, start=1)]
        return create_success_result("\n".join(lines), list(self.history))


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_flags(
        command: str,
        args: List[str],
        allowed: str,
) -> Union[Tuple[Set[str], List[str]], CommandResult]:
    """
    Separate single-letter flags from operands.

    Flags may be combined ('-aR'). '--' ends flag parsing and a lone '-'
    is an operand.
    """
    flags: Set[str] = set()
    operands: List[str] = []
    parsing = True
    for arg in args:
        if parsing and arg == "--":
            parsing = False
            continue
        if parsing and arg.startswith("-") and len(arg) > 1:
            for letter in arg[1:]:
                if letter not in allowed:
                    return create_error_result(
                        ErrorKind.INVALID_ARGUMENT, f"{command}: invalid option -- '{letter}'"
                    )
                flags.add(letter)
            continue
        operands.append(arg)
    return flags, operands


def _apply_each(
        command: str,
        operands: List[str],
        op: Callable[[str], CommandResult],
) -> CommandResult:
    """Apply a single-operand operation in order, stopping at the first failure."""
    if not operands:
        return create_error_result(ErrorKind.MISSING_OPERAND, f"{command}: missing operand")
    for operand in operands:
        result = op(operand)
        if not result.ok:
            return result
    return create_success_result()
