from __future__ import annotations

"""
Terminal View.

Read-only monospaced output buffer above a prompt label and an input
entry. All behavior lives in the TerminalController; this frame only
owns the widgets and the buffer write operations.
"""

from typing import Any

import customtkinter as ctk

TERMINAL_FONT = ("Consolas", 13)

# -----------------------------------------------------------------------------
# TERMINAL VIEW CLASS
# -----------------------------------------------------------------------------

class TerminalFrame(ctk.CTkFrame):
    """Terminal-like frame: output buffer plus a single input line."""

    def __init__(self, master: Any, **kwargs: Any):
        """
        Build the terminal widgets.

        Args:
            master: Parent UI container.
        """
        super().__init__(master, corner_radius=10, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self.textbox = ctk.CTkTextbox(self, state="disabled", font=TERMINAL_FONT, wrap="none")
        self.textbox.grid(row=0, column=0, columnspan=2, sticky="nsew")

        self.prompt_label = ctk.CTkLabel(self, text="", font=TERMINAL_FONT)
        self.prompt_label.grid(row=1, column=0, pady=(8, 0), sticky="w")

        self.entry = ctk.CTkEntry(self, font=TERMINAL_FONT)
        self.entry.grid(row=1, column=1, pady=(8, 0), sticky="ew")

    def append_output(self, text: str) -> None:
        """
        Append text to the buffer and scroll to the end.

        Args:
            text: One or more lines, without the trailing newline.
        """
        self.textbox.configure(state="normal")
        self.textbox.insert("end", text + "\n")
        self.textbox.see("end")
        self.textbox.configure(state="disabled")

    def clear_output(self) -> None:
        self.textbox.configure(state="normal")
        self.textbox.delete("1.0", "end")
        self.textbox.configure(state="disabled")
