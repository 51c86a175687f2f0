"""Shared fixtures for view helper tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from view_helpers.config import settings
from view_helpers.filters import create_environment


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Pin settings to their defaults regardless of the host environment."""
    monkeypatch.setattr(settings, "short_format", None)
    monkeypatch.setattr(settings, "long_format", None)
    monkeypatch.setattr(settings, "stripe", True)
    monkeypatch.setattr(settings, "list_separator", "\n")
    return settings


@pytest.fixture
def now():
    """A fixed reference instant: 2024-06-15 12:00."""
    return datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def env():
    """Jinja2 environment with the helper filters, autoescape on."""
    return create_environment()
