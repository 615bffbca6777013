from __future__ import annotations

"""
Terminal Window Controller.

Bridges the terminal view (output buffer, prompt label and input entry)
and a ShellSession. Handles line submission, the window-only commands
('clear', 'exit', 'quit') and Up/Down history recall. The view is duck
typed so the controller runs against mocks without a display.
"""

import logging
from typing import Any, Callable, List, Optional

from cmdchallenge.core.shell.dispatcher import ShellSession
from cmdchallenge.domain.config import DEFAULT_PROMPT_TEMPLATE

logger = logging.getLogger(__name__)

# Tk handlers returning this stop further processing of the key event
BREAK = "break"

# ==============================================================================
# TERMINAL CONTROLLER
# ==============================================================================

class TerminalController:
    """
    Event handler set for the terminal window.

    The registered view must expose:
        entry: widget with get(), delete(first, last) and insert(index, text).
        prompt_label: widget with configure(text=...).
        append_output(text) and clear_output().
    """

    def __init__(
            self,
            session: ShellSession,
            prompt_template: str = DEFAULT_PROMPT_TEMPLATE,
            on_exit: Optional[Callable[[], None]] = None,
    ):
        """
        Initialize the controller.

        Args:
            session: Shell session receiving the submitted lines.
            prompt_template: Prompt format string with a '{cwd}' field.
            on_exit: Called when the user types 'exit' or 'quit'.
        """
        self.session = session
        self.prompt_template = prompt_template
        self._on_exit = on_exit

        self.view: Any = None
        self._history_index: Optional[int] = None

    def register_view(self, view: Any) -> None:
        self.view = view
        self.refresh_prompt()

    def refresh_prompt(self) -> None:
        self.view.prompt_label.configure(text=self.current_prompt())

    def current_prompt(self) -> str:
        return self.session.prompt(self.prompt_template)

    # -----------------------------------------------------------------------------
    # EVENT HANDLERS
    # -----------------------------------------------------------------------------

    def submit(self, event: Any = None) -> str:
        """
        Run the line currently held by the entry and echo it with its result.

        Args:
            event: Tk event object (unused).

        Returns:
            str: 'break' so Tk does not propagate the key press.
        """
        line = self.view.entry.get()
        self._set_entry("")
        self._history_index = None

        word = line.split(maxsplit=1)[0] if line.strip() else ""
        if word in ("exit", "quit"):
            logger.info("Terminal window closed by user command")
            if self._on_exit is not None:
                self._on_exit()
            return BREAK
        if word == "clear":
            self.view.clear_output()
            return BREAK

        self.view.append_output(f"{self.current_prompt()}{line}")
        result = self.session.execute(line)
        if result.text:
            self.view.append_output(result.text)

        self.refresh_prompt()
        return BREAK

    def history_prev(self, event: Any = None) -> str:
        """Recall the previous history entry into the entry widget."""
        entries = self._history()
        if not entries:
            return BREAK

        if self._history_index is None:
            self._history_index = len(entries) - 1
        else:
            self._history_index = max(self._history_index - 1, 0)

        self._set_entry(entries[self._history_index])
        return BREAK

    def history_next(self, event: Any = None) -> str:
        """Move forward in history; past the newest entry the line is cleared."""
        if self._history_index is None:
            return BREAK

        entries = self._history()
        self._history_index += 1
        if self._history_index >= len(entries):
            self._history_index = None
            self._set_entry("")
        else:
            self._set_entry(entries[self._history_index])
        return BREAK

    # -----------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -----------------------------------------------------------------------------

    def _history(self) -> List[str]:
        return list(self.session.history)

    def _set_entry(self, text: str) -> None:
        self.view.entry.delete(0, "end")
        if text:
            self.view.entry.insert(0, text)
