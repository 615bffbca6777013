from __future__ import annotations

"""
Configuration Validation Service.

Ensures that configuration dictionaries coming from disk, the CLI or the
GUI conform to the expected schema. Handles type coercion, default value
injection and domain-specific normalization (marker styles, log levels,
prompt templates).
"""

import logging
from typing import Any, Dict, List, Tuple

from cmdchallenge.domain.config import get_default_config
from cmdchallenge.domain.constants import MARKER_STYLES
from cmdchallenge.infra.logging.config import LOG_LEVELS

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Converts untrusted inputs into strictly typed parameters and fills
    missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
                                          list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    # Declarative schema
    string_fields = ["seed_path", "prompt_template", "marker_style", "log_level"]
    bool_fields = ["log_to_file"]
    positive_int_fields = ["history_limit"]

    for field in string_fields:
        merged[field] = _as_str(
            merged.get(field), defaults.get(field, ""), field, warnings, strict
        )

    for field in bool_fields:
        merged[field] = _as_bool(
            merged.get(field), defaults.get(field, False), field, warnings, strict
        )

    for field in positive_int_fields:
        merged[field] = _as_positive_int(
            merged.get(field), defaults[field], field, warnings, strict
        )

    merged["marker_style"] = _normalize_choice(
        merged["marker_style"], list(MARKER_STYLES), defaults["marker_style"],
        "marker_style", warnings, strict,
    )
    merged["log_level"] = _normalize_choice(
        merged["log_level"].upper(), list(LOG_LEVELS), defaults["log_level"],
        "log_level", warnings, strict,
    )
    merged["prompt_template"] = _normalize_prompt(
        merged["prompt_template"], defaults["prompt_template"], warnings, strict
    )

    # Unknown keys are dropped to keep the persisted schema clean
    for key in list(merged):
        if key not in defaults:
            warnings.append(f"Unknown field '{key}' ignored.")
            del merged[key]

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate string inputs; blank values keep the untouched fallback."""
    if value is None:
        return fallback
    if isinstance(value, str):
        return value if value.strip() else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_positive_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce numeric strings and integers into a positive int."""
    if value is None:
        return fallback

    candidate: Any = value
    if isinstance(value, str) and not strict:
        try:
            candidate = int(value.strip())
            warnings.append(f"Field '{field}' converted from '{value}' to int.")
        except ValueError:
            candidate = None

    if isinstance(candidate, int) and not isinstance(candidate, bool) and candidate > 0:
        return candidate

    msg = f"Invalid field '{field}': expected positive int, received {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_choice(
        value: str,
        choices: List[str],
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    """Restrict a string field to a closed set of values."""
    v = value.strip()
    if v in choices:
        return v
    msg = f"Invalid field '{field}': '{value}' not in {choices}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _normalize_prompt(template: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Ensure the prompt template only references the {cwd} placeholder."""
    try:
        template.format(cwd="/")
        return template
    except (KeyError, IndexError, ValueError) as e:
        msg = f"Invalid field 'prompt_template': {e!r}."
        if strict:
            raise ValueError(msg) from e
        warnings.append(f"{msg} Using fallback.")
        return fallback
