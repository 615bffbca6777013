from __future__ import annotations

"""
Command Result Domain Models.

Defines the explicit result type returned by every filesystem operation and
shell command, together with the error taxonomy and the factory functions
used to build success and failure instances.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# -----------------------------------------------------------------------------
# ERROR TAXONOMY
# -----------------------------------------------------------------------------

class ErrorKind(str, Enum):
    """Conceptual failure categories reported by the filesystem and the shell."""
    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"
    ALREADY_EXISTS = "already_exists"
    MISSING_OPERAND = "missing_operand"
    INVALID_ARGUMENT = "invalid_argument"
    UNKNOWN_COMMAND = "unknown_command"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a single filesystem operation or shell command.

    Attributes:
        ok: Flag indicating success or failure.
        kind: Error category when ok is False, otherwise None.
        error: Human-readable failure message (empty on success).
        output: Text payload to display (empty for silent success).
        entries: Structured listing payload (ls), empty otherwise.
    """
    ok: bool
    kind: Optional[ErrorKind] = None
    error: str = ""
    output: str = ""
    entries: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Status string forwarded verbatim to the UI layer."""
        return self.output if self.ok else self.error

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(
        output: str = "",
        entries: Optional[List[str]] = None,
) -> CommandResult:
    """
    Create a successful command result.

    Args:
        output: Text to show to the user.
        entries: Optional ordered listing payload.

    Returns:
        CommandResult: An immutable success result object.
    """
    return CommandResult(ok=True, output=output, entries=list(entries or []))


def create_error_result(kind: ErrorKind, error: str) -> CommandResult:
    """
    Create a failed command result.

    Args:
        kind: Conceptual failure category.
        error: Detailed message shown to the user.

    Returns:
        CommandResult: An immutable error result object.
    """
    return CommandResult(ok=False, kind=kind, error=error)
