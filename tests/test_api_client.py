import pytest

from footyhub.client.api_client import HubApiClient
from footyhub.errors import FetchError

from http_fakes import FakeResponse, FakeSession

BASE_URL = "http://localhost:3000/api/"


def _client(routes):
    return HubApiClient(BASE_URL, session=FakeSession(routes))


def test_fetch_returns_payload():
    client = _client({"/api/standings/PL": FakeResponse(payload={"standings": []})})
    assert client.fetch("standings/PL") == {"standings": []}
    assert client.session.requested[0][0] == "http://localhost:3000/api/standings/PL"


def test_error_envelope_raises_fetch_error():
    envelope = {"error": "Failed to fetch standings", "message": "API returned 403"}
    client = _client({"/api/standings/PL": FakeResponse(status_code=500, payload=envelope)})

    with pytest.raises(FetchError, match="API returned 403"):
        client.fetch("standings/PL")


def test_network_failure_raises_fetch_error():
    with pytest.raises(FetchError):
        _client({}).fetch("matches/today")


def test_non_json_or_non_object_raises_fetch_error():
    client = _client(
        {
            "/api/matches/today": FakeResponse(invalid_json=True),
            "/api/competitions": FakeResponse(payload=[1, 2, 3]),
        }
    )
    with pytest.raises(FetchError):
        client.fetch("matches/today")
    with pytest.raises(FetchError):
        client.fetch("competitions")
