import copy

import pytest
import requests


ALICE = {
    "id": "1",
    "name": "Alice",
    "profilePicture": "https://cdn.scoresaber.com/avatars/1.jpg",
    "country": "NL",
    "pp": 12345.678,
    "rank": 5,
    "countryRank": 2,
    "histories": "10,9,8,7,6,5",
    "banned": False,
    "inactive": False,
    "scoreStats": {
        "totalScore": 1000,
        "totalRankedScore": 800,
        "averageRankedAccuracy": 94.5678,
        "totalPlayCount": 50,
        "rankedPlayCount": 40,
        "replaysWatched": 3,
    },
    "firstSeen": "2024-01-02T00:00:00Z",
}


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=""):
        self.status_code = status_code
        self._body = body
        self.text = text

    def json(self):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class FakeSession:
    """Records requests and answers with queued responses (or raises them)."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def _next(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        resp = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(resp, Exception):
            raise resp
        return resp

    def get(self, url, **kwargs):
        return self._next("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._next("POST", url, **kwargs)


@pytest.fixture
def player_payload():
    return copy.deepcopy(ALICE)


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "WEBHOOK_URL",
        "SABRESTATS_PLAYER_IDS",
        "SABRESTATS_API_BASE_URL",
        "SABRESTATS_DB_PATH",
        "SABRESTATS_POLL_INTERVAL",
        "SABRESTATS_REQUEST_TIMEOUT",
        "SABRESTATS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_response():
    return FakeResponse
