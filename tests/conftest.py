"""Pytest configuration and shared fixtures."""

import json
import shutil
import tempfile
from pathlib import Path

import httpx
import pytest

from journy_cli.core.config import CLIConfig, Settings

TEST_BASE_URL = "https://api.journy.test"
TEST_API_KEY = "jk_live_0123456789abcdef"


class RecordingAPI:
    """Stand-in for the remote API that records every request it receives."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: object = {"meta": {"requestId": "req-1", "status": 200}}
        self.text: str | None = None
        self.exception: Exception | None = None

    def respond(self, status_code: int = 200, payload: object = None, text: str | None = None) -> None:
        self.status_code = status_code
        self.payload = payload
        self.text = text

    def fail_with(self, exception: Exception) -> None:
        self.exception = exception

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exception is not None:
            raise self.exception
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep JOURNY_* variables from the developer's shell out of tests."""
    for name in ("JOURNY_API_KEY", "JOURNY_BASE_URL", "JOURNY_TIMEOUT", "JOURNY_CONFIG_DIR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for tests that need filesystem access.
    Automatically cleaned up after test completes.
    """
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture
def api():
    """A recording stand-in for the journy.io API."""
    return RecordingAPI()


@pytest.fixture
def config(temp_directory):
    """CLI config pointing at a temporary config dir with no API key."""
    return CLIConfig(settings=Settings(base_url=TEST_BASE_URL, config_dir=temp_directory))


@pytest.fixture
def configured(config):
    """CLI config with an API key stored on disk."""
    config.store.set("apiKey", TEST_API_KEY)
    return config
