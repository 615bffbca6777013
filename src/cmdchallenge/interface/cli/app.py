from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration resolution (defaults, stored
preferences and CLI overrides), logging bootstrap, seeding of the session
tree and execution in one of three modes: one-shot commands, tree dump or
the interactive REPL. The terminal window is launched from here as well so
that both front ends share the same configuration and seeding path.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Callable, Dict, List, Optional

from cmdchallenge.core.filesystem.seeding import SeedStructureError, load_seed_file
from cmdchallenge.core.filesystem.tree import VirtualFileSystem
from cmdchallenge.core.shell.dispatcher import ShellSession
from cmdchallenge.core.validator import validate_config
from cmdchallenge.domain.command_models import CommandResult
from cmdchallenge.domain.config import get_default_config, load_config, save_config
from cmdchallenge.domain.constants import DEFAULT_STRUCTURE, WELCOME_BANNER
from cmdchallenge.infra.fs import normalize_path
from cmdchallenge.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from cmdchallenge.interface.cli import args as cli_args

logger = get_logger(__name__)

CLEAR_SEQUENCE = "\033[2J\033[H"
EXIT_WORDS = ("exit", "quit")

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failed command or save, 2 bad seed,
             130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Resolve configuration (defaults vs stored state) and merge overrides
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig.from_settings(clean_conf, log_file=get_default_log_path()))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        return 0 if store_config(clean_conf) else 1

    # 4. Session construction
    try:
        session = build_session(clean_conf, empty=args.empty)
    except SeedStructureError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    # 5. Mode routing
    if args.gui:
        from cmdchallenge.interface.gui.app import main as gui_main
        gui_main(session, clean_conf)
        return 0

    if args.tree:
        print(session.fs.render_tree(session.fs.root))
        return 0

    try:
        if args.commands:
            return run_commands(session, args.commands, json_output=args.json_output)
        return run_repl(session, clean_conf["prompt_template"])
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130


def store_config(config: Dict[str, Any]) -> bool:
    """
    Persist a validated configuration as the stored defaults.

    A relative seed path is made absolute first so later runs find the same
    file from any working directory.

    Returns:
        bool: True when the configuration was written.
    """
    to_save = dict(config)
    if to_save.get("seed_path"):
        to_save["seed_path"] = normalize_path(to_save["seed_path"])

    if not save_config(to_save):
        print("ERROR: could not save the configuration.", file=sys.stderr)
        return False
    logger.info("Configuration stored as the new defaults.")
    return True

# -----------------------------------------------------------------------------
# SESSION CONSTRUCTION
# -----------------------------------------------------------------------------

def build_session(config: Dict[str, Any], *, empty: bool = False) -> ShellSession:
    """
    Build a ShellSession from a validated configuration.

    Raises:
        SeedStructureError: When the configured seed file is unusable.
    """
    if empty:
        structure: Optional[Dict[str, Any]] = None
    elif config.get("seed_path"):
        seed_path = normalize_path(config["seed_path"])
        logger.info(f"Loading seed structure from: {seed_path}")
        structure = load_seed_file(seed_path)
    else:
        structure = DEFAULT_STRUCTURE

    fs = VirtualFileSystem(structure, marker_style=config["marker_style"])
    return ShellSession(fs, history_limit=config["history_limit"])

# -----------------------------------------------------------------------------
# EXECUTION MODES
# -----------------------------------------------------------------------------

def run_commands(session: ShellSession, lines: List[str], *, json_output: bool = False) -> int:
    """
    Run command lines in order and report each outcome.

    Returns:
        int: 0 if the last command succeeded, 1 otherwise.
    """
    results: List[CommandResult] = [session.execute(line) for line in lines]

    if json_output:
        payload = [dict(asdict(r), line=line) for line, r in zip(lines, results)]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for result in results:
            _print_result(result)

    return 0 if not results or results[-1].ok else 1


def run_repl(
        session: ShellSession,
        prompt_template: str,
        *,
        read_line: Callable[[str], str] = input,
) -> int:
    """
    Interactive read-eval-print loop.

    'exit'/'quit' or end of input leave the loop, 'clear' wipes the screen
    and Ctrl+C abandons the current line.
    """
    print(WELCOME_BANNER)
    while True:
        try:
            line = read_line(session.prompt(prompt_template))
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("^C")
            continue

        word = line.split(maxsplit=1)[0] if line.strip() else ""
        if word in EXIT_WORDS:
            break
        if word == "clear":
            print(CLEAR_SEQUENCE, end="")
            continue

        _print_result(session.execute(line))

    logger.debug(f"REPL closed after {len(session.history)} commands")
    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of known override values into the base configuration.

    None values mean "not provided" and leave the base untouched.
    """
    out = dict(base)
    for k in ("seed_path", "marker_style", "log_level", "log_to_file"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_result(result: CommandResult) -> None:
    if not result.ok:
        print(result.error, file=sys.stderr)
    elif result.output:
        print(result.output)


if __name__ == "__main__":
    sys.exit(main())
