"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_bytes() -> bytes:
    """Sample byte payload for testing."""
    return bytes(range(10))


@pytest.fixture
def sample_text() -> str:
    """Sample text for testing."""
    return "hello cpp-love!"
