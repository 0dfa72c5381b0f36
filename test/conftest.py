import pytest
import requests

from utils.config import AmadeusConfig


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise requests.exceptions.JSONDecodeError("Expecting value", self.text, 0)
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class RecordingTransport:
    """Stands in for requests.get / requests.post and remembers every call."""

    def __init__(self, response):
        self.response = response
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture
def config():
    return AmadeusConfig(
        client_id="test-client-id",
        client_secret="test-client-secret",
        base_url="https://api.example.test",
        timeout=5,
    )


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def transport():
    return RecordingTransport
