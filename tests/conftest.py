import pytest
import requests


class FakeResponse:
    def __init__(self, text="", status_code=200, url=""):
        self.text = text
        self.status_code = status_code
        self.url = url

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}")


class FakeWeb:
    """
    In-memory stand-in for the network.

    Values in `routes` are HTML strings, FakeResponse objects or exception
    instances (raised on request). Unknown URLs raise ConnectionError.
    """

    def __init__(self):
        self.routes = {}
        self.requested = []

    def get(self, url, timeout=None, **kwargs):
        self.requested.append(url)
        if url not in self.routes:
            raise requests.ConnectionError(f"No route to {url}")
        val = self.routes[url]
        if isinstance(val, Exception):
            raise val
        if isinstance(val, FakeResponse):
            return val
        return FakeResponse(text=val, url=url)


class FakeScorer:
    """Returns preset scores by headline, 0.0 for anything else."""

    def __init__(self, scores=None):
        self.scores = scores or {}
        self.calls = []

    def score(self, text):
        self.calls.append(text)
        return self.scores.get(text, 0.0)


@pytest.fixture
def web(monkeypatch):
    fake = FakeWeb()
    monkeypatch.setattr(requests, "get", fake.get)
    return fake


@pytest.fixture
def fake_scorer():
    return FakeScorer()
