"""
Shared test fixtures for tagspec tests.
Patches config module so tests never read the real .env or CI environment.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state."""
    from tagspec import config

    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "TRACE_ENABLED", True)
    monkeypatch.setattr(config, "TRACE_STYLE", "plain")
    monkeypatch.setattr(config, "INPUT_TAGS", "")
    monkeypatch.setattr(config, "RUNTIME_QUIET", False)
