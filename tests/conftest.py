from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for seed structures, seeded filesystems and sessions.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from cmdchallenge.core.filesystem.tree import VirtualFileSystem  # noqa: E402
from cmdchallenge.core.shell.dispatcher import ShellSession  # noqa: E402


def pytest_configure(config: Any) -> None:
    config.addinivalue_line("markers", "gui: tests for the terminal window controller")


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_structure() -> Dict[str, Any]:
    """
    Small seed used across filesystem tests.

    Structure:
    /
    └── a
        ├── f.txt ("hi")
        └── b
    """
    return {"a": {"f.txt": "hi", "b": {}}}


@pytest.fixture
def fs(sample_structure: Dict[str, Any]) -> VirtualFileSystem:
    """Filesystem seeded with the sample structure, cursor at root."""
    return VirtualFileSystem(sample_structure)


@pytest.fixture
def session(fs: VirtualFileSystem) -> ShellSession:
    """Shell session wrapping the sample filesystem."""
    return ShellSession(fs)
