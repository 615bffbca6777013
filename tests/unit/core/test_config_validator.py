from __future__ import annotations

"""
Unit tests for the configuration validator.

Verifies:
1. Default injection for missing keys.
2. Coercion of string booleans and integers in lenient mode.
3. Domain restrictions (marker styles, log levels, prompt templates).
4. Exceptions in strict mode.
"""

import pytest

from cmdchallenge.core.validator import validate_config
from cmdchallenge.domain.config import DEFAULT_PROMPT_TEMPLATE, get_default_config


def test_empty_dict_gets_defaults() -> None:
    conf, warnings = validate_config({})

    assert conf == get_default_config()
    assert warnings == []


def test_non_dict_input() -> None:
    conf, warnings = validate_config(["nope"])

    assert conf == get_default_config()
    assert any("Invalid config type" in w for w in warnings)

    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


def test_lenient_coercion() -> None:
    conf, warnings = validate_config({"log_to_file": "yes", "history_limit": "25"})

    assert conf["log_to_file"] is True
    assert conf["history_limit"] == 25
    assert len(warnings) == 2


@pytest.mark.parametrize("value", [0, -3, "abc", True, 2.5])
def test_invalid_history_limit_falls_back(value) -> None:
    conf, warnings = validate_config({"history_limit": value})

    assert conf["history_limit"] == 100
    assert warnings


def test_choices_are_enforced() -> None:
    conf, warnings = validate_config({"marker_style": "fancy", "log_level": "debug"})

    assert conf["marker_style"] == "emoji"
    assert conf["log_level"] == "DEBUG"
    assert len(warnings) == 1


def test_blank_strings_keep_defaults() -> None:
    conf, _ = validate_config({"prompt_template": "   "})
    assert conf["prompt_template"] == DEFAULT_PROMPT_TEMPLATE


def test_prompt_template_with_unknown_placeholder() -> None:
    conf, warnings = validate_config({"prompt_template": "{user}@{cwd} "})

    assert conf["prompt_template"] == DEFAULT_PROMPT_TEMPLATE
    assert any("prompt_template" in w for w in warnings)


def test_unknown_keys_are_dropped() -> None:
    conf, warnings = validate_config({"legacy_option": 1})

    assert "legacy_option" not in conf
    assert "Unknown field 'legacy_option' ignored." in warnings


@pytest.mark.parametrize(
    "raw, exc",
    [
        ({"log_to_file": "yes"}, TypeError),
        ({"history_limit": "10"}, ValueError),
        ({"marker_style": "fancy"}, ValueError),
        ({"seed_path": 42}, TypeError),
        ({"prompt_template": "{0}"}, ValueError),
    ],
)
def test_strict_mode_raises(raw, exc) -> None:
    with pytest.raises(exc):
        validate_config(raw, strict=True)
