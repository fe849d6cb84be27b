"""
Shared pytest fixtures for focus_sessions tests.

This module provides common fixtures including:
- A clean configuration singleton per test
- SessionManager instances with known settings
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from focus_sessions.modules.config import reset_config
from focus_sessions.modules.session import SessionManager, Source

CONFIG_ENV_VARS = ("LOG_LEVEL", "DEBUG", "BLOCKING_ENABLED")


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Start every test from default configuration."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def manager():
    """SessionManager with tracking protection on."""
    return SessionManager(default_blocking_enabled=True)


@pytest.fixture
def populated_manager(manager):
    """SessionManager holding three sessions, the last one current."""
    manager.create_session(Source.VIEW, "https://www.mozilla.org")
    manager.create_session(Source.USER_ENTERED, "https://example.com")
    manager.create_session(Source.CUSTOM_TAB, "https://example.org/page")
    return manager
