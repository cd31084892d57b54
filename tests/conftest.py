"""Shared fixtures: provider XML samples under ``tests/fixtures``."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def load_fixture():
    """Return a loader for a named XML fixture."""
    return read_fixture
