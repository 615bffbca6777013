from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to application-wide constants, including the
default challenge structure, tree diagram glyphs and system versioning.
"""

from typing import Any, Dict, Tuple

CURRENT_CONFIG_VERSION = "1.0.0"
APP_NAME = "CmdChallenge"

ROOT_NAME = "/"
PATH_SEPARATOR = "/"

# -----------------------------------------------------------------------------
# TREE DIAGRAM GLYPHS
# -----------------------------------------------------------------------------
CONNECTOR_MIDDLE = "├── "
CONNECTOR_LAST = "└── "
PREFIX_PIPE = "│   "
PREFIX_BLANK = "    "

# (directory marker, file marker) per style
MARKER_STYLES: Dict[str, Tuple[str, str]] = {
    "emoji": ("📁", "📄"),
    "ascii": ("[d]", "[f]"),
}
DEFAULT_MARKER_STYLE = "emoji"

# -----------------------------------------------------------------------------
# DEFAULT CHALLENGE STRUCTURE
# -----------------------------------------------------------------------------
DEFAULT_STRUCTURE: Dict[str, Any] = {
    "thecmdchallenge": {
        "the-ultimate-joke.txt": "",
        "small-name": {
            "level1": {
                "level2": {
                    "level3": {
                        "level4": {
                            "level5": {
                                "level6": {
                                    "trophy.txt": "You found the trophy!",
                                },
                            },
                        },
                    },
                },
            },
        },
        "funcode": {
            "kids.jpg": "",
            "the-most-funny": {},
            "images": {
                "hello": {},
            },
        },
        "boringfolder": {
            "child": {
                "the-mostboring-text.txt": "",
            },
        },
        "kamehameha": {
            "dragon-ball-jokes.md": "",
        },
    },
}

WELCOME_BANNER = (
    "Welcome to the command challenge!\n"
    "Explore the tree and find trophy.txt. Type 'help' to list commands."
)
