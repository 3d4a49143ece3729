"""Shared fixtures for unit tests."""

from __future__ import annotations

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Pin the locale before anything reads Settings() so output is stable
os.environ["GAINS_LOCALE"] = "en_US"

from gains import settings as settings_module  # noqa: E402
from gains.settings import Settings  # noqa: E402


@pytest.fixture
def settings(monkeypatch):
    """Fresh Settings installed as the cached singleton for one test."""
    s = Settings()
    monkeypatch.setattr(settings_module, "_settings", s)
    return s
