from __future__ import annotations

"""
GUI Entrypoint and Window Lifecycle.

Initializes the CustomTkinter environment, builds the terminal view,
binds it to a TerminalController and enters the Tk main loop.
"""

import logging
from typing import Any, Dict, Optional

import customtkinter as ctk

from cmdchallenge.core.shell.dispatcher import ShellSession
from cmdchallenge.core.validator import validate_config
from cmdchallenge.domain import config as cfg
from cmdchallenge.domain import constants as const
from cmdchallenge.interface.gui.components.terminal_frame import TerminalFrame
from cmdchallenge.interface.gui.controllers.terminal_controller import TerminalController

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# ROOT WINDOW CONSTRUCTION
# -----------------------------------------------------------------------------

def create_main_window() -> ctk.CTk:
    """
    Instantiate and configure the application window.

    Returns:
        ctk.CTk: The configured root application instance.
    """
    ctk.set_appearance_mode("Dark")
    ctk.set_default_color_theme("green")

    app = ctk.CTk()
    app.title(f"{const.APP_NAME} - v{const.CURRENT_CONFIG_VERSION}")
    app.geometry("900x600")

    app.grid_columnconfigure(0, weight=1)
    app.grid_rowconfigure(0, weight=1)

    return app

# -----------------------------------------------------------------------------
# MAIN APPLICATION LOOP
# -----------------------------------------------------------------------------

def main(session: Optional[ShellSession] = None, config: Optional[Dict[str, Any]] = None) -> None:
    """
    Launch the terminal window.

    Args:
        session: Session to drive. A fresh challenge session when omitted.
        config: Validated configuration. Loaded from disk when omitted.
    """
    if config is None:
        config, warnings = validate_config(cfg.load_config())
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")

    if session is None:
        session = ShellSession(marker_style=config["marker_style"], history_limit=config["history_limit"])

    logger.info(f"GUI Lifecycle: Initializing v{const.CURRENT_CONFIG_VERSION}")

    app = create_main_window()
    terminal = TerminalFrame(app)
    terminal.grid(row=0, column=0, sticky="nsew", padx=20, pady=20)

    controller = TerminalController(session, config["prompt_template"], on_exit=app.destroy)
    controller.register_view(terminal)

    terminal.entry.bind("<Return>", controller.submit)
    terminal.entry.bind("<Up>", controller.history_prev)
    terminal.entry.bind("<Down>", controller.history_next)

    terminal.append_output(const.WELCOME_BANNER)
    terminal.entry.focus_set()

    logger.info("GUI Lifecycle: Entering main loop")
    app.mainloop()
