from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates raw argparse
namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict

from cmdchallenge.domain.constants import CURRENT_CONFIG_VERSION

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the cmdchallenge CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="cmdchallenge",
        description="Explore an in-memory directory tree with shell-like commands.",
    )

    # --- Tree Seeding ---
    p.add_argument(
        "--seed",
        dest="seed_path",
        default=None,
        help="JSON file describing the initial tree (mapping = directory, string = file).",
    )
    p.add_argument(
        "--empty",
        action="store_true",
        help="Start with an empty root instead of the challenge tree.",
    )

    # --- Execution Modes ---
    p.add_argument(
        "-c", "--command",
        dest="commands",
        action="append",
        default=None,
        metavar="LINE",
        help="Run a command line and exit (repeatable, runs in order).",
    )
    p.add_argument(
        "--tree",
        action="store_true",
        help="Print the whole tree and exit.",
    )
    p.add_argument(
        "--gui",
        action="store_true",
        help="Open the terminal window instead of the console REPL.",
    )

    # --- Output Format ---
    p.add_argument(
        "--ascii",
        action="store_true",
        help="Use [d]/[f] markers in tree diagrams instead of emoji.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit -c results as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the stored configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Store the effective configuration (flags included) as the new defaults and exit.",
    )
    p.add_argument(
        "--log-file",
        action="store_true",
        help="Also write diagnostics to the log file in the user data directory.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {CURRENT_CONFIG_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary subset.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides.
    """
    overrides: Dict[str, Any] = {}

    overrides["seed_path"] = args.seed_path

    if args.ascii:
        overrides["marker_style"] = "ascii"
    if args.debug:
        overrides["log_level"] = "DEBUG"
    if args.log_file:
        overrides["log_to_file"] = True

    return overrides
