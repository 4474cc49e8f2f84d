"""
Pytest configuration and shared fixtures for roots tests.

Provides:
- The reference key pair and signed event used across the suite
- A small corpus of unsigned events for filter matching
- A YAML writer for validator configuration tests
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from roots.models import Event
from tests.fixtures.events import (
    EVENT_CORPUS,
    TEST_PRIVATE_KEY,
    TEST_PUBLIC_KEY,
    make_event,
)


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Event Fixtures
# ============================================================================


@pytest.fixture
def private_key() -> str:
    return TEST_PRIVATE_KEY


@pytest.fixture
def public_key() -> str:
    return TEST_PUBLIC_KEY


@pytest.fixture
def signed_event() -> Event:
    """The reference "hello world" text note with a valid id and signature."""
    return make_event()


@pytest.fixture
def unsigned_event() -> Event:
    """The reference event with empty ``id`` and ``sig``."""
    return make_event(id="", sig="")


@pytest.fixture
def event_corpus() -> list[Event]:
    """Ten unsigned events with distinct ids, authors, kinds, times and tags."""
    return list(EVENT_CORPUS)


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing YAML text to a temporary file."""

    def _write(content: str, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
