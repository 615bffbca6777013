from __future__ import annotations

"""
Seed Structure Loading.

Validates the nested mapping used to populate a virtual tree and loads it
from JSON files on the host. Seed problems are construction errors and are
raised, unlike command failures which are reported as results.
"""

import json
import logging
from typing import Any, Dict, Mapping

from cmdchallenge.core.filesystem.paths import is_valid_name

logger = logging.getLogger(__name__)


class SeedStructureError(ValueError):
    """Raised when a seed structure cannot be turned into a tree."""


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_structure(structure: Any, _trail: str = "") -> None:
    """
    Walk a seed structure and reject anything that is not a tree.

    Directories are mappings, files are strings, names follow node naming
    rules.

    Raises:
        SeedStructureError: On the first offending entry.
    """
    if not isinstance(structure, Mapping):
        raise SeedStructureError(
            f"Seed at '{_trail or '/'}' must be a mapping, got {type(structure).__name__}."
        )

    for name, value in structure.items():
        where = f"{_trail}/{name}"
        if not isinstance(name, str) or not is_valid_name(name):
            raise SeedStructureError(f"Invalid node name in seed: {where!r}.")
        if isinstance(value, Mapping):
            validate_structure(value, where)
        elif not isinstance(value, str):
            raise SeedStructureError(
                f"Seed entry '{where}' must be a mapping or a string, got {type(value).__name__}."
            )


def load_seed_file(path: str) -> Dict[str, Any]:
    """
    Read a JSON seed file from the host filesystem.

    Args:
        path: Host path of the UTF-8 JSON document.

    Returns:
        Dict[str, Any]: The validated seed structure.

    Raises:
        SeedStructureError: When the file is unreadable, malformed or not a tree.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SeedStructureError(f"Cannot read seed file '{path}': {e}") from e
    except ValueError as e:
        raise SeedStructureError(f"Malformed JSON in seed file '{path}': {e}") from e

    validate_structure(data)
    logger.debug(f"Seed structure loaded from {path} ({len(data)} top-level entries)")
    return data
