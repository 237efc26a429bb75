"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _default_settings(monkeypatch):
    """Ignore any ROMAN_* settings from the developer's shell or .env file."""
    monkeypatch.delenv("ROMAN_NOTATION", raising=False)
    monkeypatch.delenv("ROMAN_LOG_LEVEL", raising=False)
