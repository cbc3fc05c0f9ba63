import pytest
import requests

from core.errors import FetchError
from core.models import ShoeItem
from fetchers import fetch_matches, search_api


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self._payload = payload
        self.status_code = status_code
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self._json_error:
            raise self._json_error
        return self._payload


class FakeSession:
    instances = []

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.headers = {}
        self.calls = []
        self.closed = False
        FakeSession.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.exc:
            raise self.exc
        return self.response


@pytest.fixture
def fake_get(monkeypatch):
    FakeSession.instances = []

    def install(response=None, exc=None):
        monkeypatch.setattr(
            search_api.requests, "Session", lambda: FakeSession(response, exc)
        )
        return FakeSession.instances

    return install


ENVELOPE = {
    "response": {
        "numFound": 2,
        "docs": [
            {"parent_name": "Hoka Challenger", "pcode": "Blah", "price_high": 160.99, "price_low": 50},
            {"parent_name": "Altra Lone Peak", "pcode": "", "price_high": 120.99, "price_low": 45.99, "sizes": [9, 10]},
        ],
    },
    "responseHeader": {"status": 0},
}


def test_fetch_returns_docs_in_order(fake_get):
    sessions = fake_get(FakeResponse(ENVELOPE))

    shoes = fetch_matches("https://api.example.com/q", timeout=12.5)

    assert shoes == [
        ShoeItem("Hoka Challenger", "Blah", 160.99, 50.0),
        ShoeItem("Altra Lone Peak", "", 120.99, 45.99),
    ]
    [session] = sessions
    assert session.calls == [("https://api.example.com/q", 12.5)]
    assert session.headers["Accept"] == "application/json"


def test_each_fetch_uses_its_own_closed_connection(fake_get):
    sessions = fake_get(FakeResponse(ENVELOPE))

    fetch_matches("https://api.example.com/q?trail")
    fetch_matches("https://api.example.com/q?road")

    assert len(sessions) == 2
    assert [s.calls[0][0] for s in sessions] == [
        "https://api.example.com/q?trail",
        "https://api.example.com/q?road",
    ]
    assert all(s.closed for s in sessions)


def test_fetch_has_no_timeout_by_default(fake_get):
    sessions = fake_get(FakeResponse(ENVELOPE))
    fetch_matches("https://api.example.com/q")
    assert sessions[0].calls[0][1] is None


@pytest.mark.parametrize("payload", [{}, {"response": {}}, {"response": {"numFound": 0, "docs": []}}])
def test_missing_docs_decode_to_no_items(fake_get, payload):
    fake_get(FakeResponse(payload))
    assert fetch_matches("https://api.example.com/q") == []


def test_http_error_is_fatal(fake_get):
    fake_get(FakeResponse(ENVELOPE, status_code=503))
    with pytest.raises(FetchError):
        fetch_matches("https://api.example.com/q")


def test_transport_error_is_fatal(fake_get):
    fake_get(exc=requests.ConnectionError("connection refused"))
    with pytest.raises(FetchError) as excinfo:
        fetch_matches("https://api.example.com/q")
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_malformed_url_is_fatal():
    with pytest.raises(FetchError):
        fetch_matches("")


def test_undecodable_body_is_fatal(fake_get):
    fake_get(FakeResponse(json_error=ValueError("Expecting value")))
    with pytest.raises(FetchError):
        fetch_matches("https://api.example.com/q")


@pytest.mark.parametrize(
    "payload",
    [
        [1, 2],
        {"response": []},
        {"response": {"docs": {"a": 1}}},
        {"response": {"docs": [{"price_low": "n/a"}]}},
        {"response": {"docs": [{"price_low": "45.99"}]}},
    ],
)
def test_unexpected_shapes_are_fatal(fake_get, payload):
    fake_get(FakeResponse(payload))
    with pytest.raises(FetchError):
        fetch_matches("https://api.example.com/q")
