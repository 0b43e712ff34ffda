"""
Root Pytest Fixtures.

Shared fixtures available to all tests.

HTTP is never sent over the network. Clients are built on an
httpx.MockTransport that records every request and answers from a
per-test handler.
"""

from collections.abc import Callable, Generator

import httpx
import pytest

from mezasi.cli.client import EndpointClient
from mezasi.core.config import get_app_config, get_settings
from mezasi.core.logging import setup_logging

BASE_URL = "http://vm-service.test/api/"


# =============================================================================
# Configuration isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Generator[None, None, None]:
    """
    Drop MEZASI_* variables and cached config so each test starts clean.

    Logging is configured up front so no logger falls back to printing
    on stdout, where it would mix with response bodies.
    """
    for name in ("MEZASI_ENDPOINT", "MEZASI_PROFILE", "MEZASI_SETTINGS_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("MEZASI_PIT_DIR", str(tmp_path / "pit"))
    setup_logging(level="WARNING", enable_file_logging=False)
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


# =============================================================================
# HTTP fixtures
# =============================================================================


class RecordingTransport(httpx.MockTransport):
    """
    MockTransport that keeps every request it receives.

    Request bodies are read before the handler runs so tests can inspect
    multipart content after the fact.
    """

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response] | None = None) -> None:
        self.requests: list[httpx.Request] = []
        super().__init__(handler or (lambda request: httpx.Response(200, json={})))

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def transport() -> RecordingTransport:
    """Recording transport answering 200 {} by default."""
    return RecordingTransport()


@pytest.fixture
def client(transport: RecordingTransport) -> Generator[EndpointClient, None, None]:
    """EndpointClient bound to BASE_URL over the recording transport."""
    with EndpointClient(BASE_URL, transport=transport) as endpoint_client:
        yield endpoint_client

