"""Shared pytest configuration and fixtures for all tests."""

import pytest
import requests

from linky.api.link.Targets import Targets
from linky.utils import logger as linky_logger


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without network access")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch):
    """Keep linky from installing stderr handlers; records reach caplog instead."""
    monkeypatch.setattr(linky_logger, "_CONFIGURED", True)
    monkeypatch.delenv("LINKY_CONFIG", raising=False)
    monkeypatch.delenv("LINKY_LOG", raising=False)


# =============================================================================
# HTTP Fakes
# =============================================================================


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, content=b"", headers=None, reason="OK"):
        self.status_code = status_code
        self.content = content
        self.headers = headers or {}
        self.reason = reason


class FakeSession:
    """Records GET calls and replays canned responses keyed by URL."""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls: list[tuple[str, bool, float | None]] = []

    def get(self, url, allow_redirects=True, timeout=None):
        self.calls.append((url, allow_redirects, timeout))
        response = self.responses.get(url)
        if response is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        pass


class CountingFetcher:
    """Fetcher double returning canned Targets and counting retrievals."""

    def __init__(self, targets=None):
        self.targets = targets or {}
        self.calls: list[str] = []

    def fetch(self, base):
        self.calls.append(base)
        return self.targets.get(base, Targets.found(()))


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def counting_fetcher():
    return CountingFetcher
