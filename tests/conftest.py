"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Every test starts with fresh configuration caches and no RECLAW_*
environment overrides, so results do not depend on the developer's shell.
"""

import logging
from collections.abc import Callable, Generator

import pytest

from reclaw_cli.core.config import get_client_config, get_settings
from reclaw_cli.gateway.client import GatewayClient
from tests.helpers import TEST_BASE_URL, RecordingTransport


# =============================================================================
# Configuration Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear lru_cache and env overrides between tests."""
    monkeypatch.delenv("RECLAW_SERVER", raising=False)
    monkeypatch.delenv("RECLAW_TIMEOUT", raising=False)
    get_settings.cache_clear()
    get_client_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_client_config.cache_clear()


@pytest.fixture(autouse=True)
def _release_log_handlers() -> Generator[None, None, None]:
    """Close handlers installed by setup_logging during a test."""
    root = logging.getLogger()
    before = set(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


# =============================================================================
# Gateway Fixtures
# =============================================================================


@pytest.fixture
def make_client() -> Callable[[RecordingTransport], GatewayClient]:
    """
    Build a GatewayClient bound to a mock transport.

    Usage:
        async def test_x(make_client):
            transport = RecordingTransport(json_response({"ok": True}))
            client = make_client(transport)
    """

    def _make(transport: RecordingTransport) -> GatewayClient:
        return GatewayClient(TEST_BASE_URL, timeout=5.0, transport=transport)

    return _make
