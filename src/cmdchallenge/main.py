from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Delegates to the CLI controller, which also launches the terminal window
on '--gui', and installs a global exception hook so fatal crashes are
logged and reported in the interface that was running.
"""

import logging
import os
import sys
import traceback
from typing import Any, List, Optional

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

# Allow running this file directly from a source checkout
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if not getattr(sys, 'frozen', False):
    SRC_DIR = os.path.dirname(BASE_DIR)
    if SRC_DIR not in sys.path:
        sys.path.insert(0, SRC_DIR)


# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def format_crash_report(error_msg: str, stack_trace: str, log_lines: int = 20) -> str:
    """
    Assemble the text shown to the user after a fatal crash.

    The tail of the log file is appended when one exists.

    Args:
        error_msg: Short description of the exception.
        stack_trace: Formatted traceback.
        log_lines: How many trailing log lines to include.

    Returns:
        str: The report, banner first.
    """
    from cmdchallenge.infra.logging import get_default_log_path, get_recent_logs

    parts = [
        "=" * 80,
        "CRITICAL ERROR (CMDCHALLENGE)",
        "=" * 80,
        f"{error_msg}\n",
        stack_trace.rstrip("\n"),
    ]

    log_path = get_default_log_path()
    if os.path.exists(log_path):
        parts.append(f"\n--- Last {log_lines} log lines ({log_path}) ---")
        parts.append(get_recent_logs(log_lines, log_path).rstrip("\n"))

    return "\n".join(parts)


def global_exception_handler(exctype: type, value: BaseException, tb: Any) -> None:
    """
    Trap unhandled exceptions and report them through the active interface.

    The trace is always logged at CRITICAL. In GUI mode a native error box
    is shown as well; the full report always goes to stderr.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))
    error_msg = str(value)

    logger = logging.getLogger("cmdchallenge.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {error_msg}\n{stack_trace}")

    report = format_crash_report(error_msg, stack_trace)

    if "--gui" in sys.argv:
        try:
            import tkinter.messagebox as mb
            from tkinter import Tk
            root = Tk()
            root.withdraw()
            mb.showerror("CmdChallenge - Fatal Error", report)
            root.destroy()
        except Exception as e:
            logger.error(f"System alert failed: {e}")

    print("\n" + report, file=sys.stderr)
    sys.exit(1)


# Hook into the Python interpreter exception flow
sys.excepthook = global_exception_handler


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the application and return its exit code.

    Args:
        argv: Command line arguments without the program name.

    Returns:
        int: Standard process exit code.
    """
    try:
        from cmdchallenge.interface.cli.app import main as cli_main
        return cli_main(argv)
    except Exception as e:
        global_exception_handler(type(e), e, sys.exc_info()[2])
        return 1


if __name__ == "__main__":
    sys.exit(main())
