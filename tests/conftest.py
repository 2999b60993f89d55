"""
Shared pytest fixtures and configuration for coldflow tests.
"""

import pytest

from coldflow.config import reset_config
from tests.utils import DeferredQueue, Recorder


@pytest.fixture(autouse=True)
def reset_flow_config(monkeypatch):
    """Start every test from the default configuration."""
    monkeypatch.delenv("COLDFLOW_ERROR_POLICY", raising=False)
    monkeypatch.delenv("COLDFLOW_DAEMON_TIMERS", raising=False)
    reset_config()
    yield
    monkeypatch.undo()
    reset_config()


@pytest.fixture
def recorder():
    """Provide a fresh recording observer."""
    return Recorder()


@pytest.fixture
def deferred():
    """Provide a manually drained queue of deferred callbacks."""
    return DeferredQueue()
