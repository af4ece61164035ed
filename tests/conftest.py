"""Pytest configuration and fixtures for Isonorm tests."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add the parent directory to sys.path so isonorm can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from isonorm.options import NormalizeOptions  # noqa: E402

FIXED_NOW = datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def options() -> NormalizeOptions:
    """Options with the clock pinned to 2024-06-15 (latest valid year 2025)."""
    return NormalizeOptions(clock=lambda: FIXED_NOW)
