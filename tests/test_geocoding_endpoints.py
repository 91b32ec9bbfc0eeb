import pytest
from fastapi.testclient import TestClient

from mapservice.api.endpoints import geocoding as geocoding_endpoints
from mapservice.main import app


@pytest.fixture
def api(monkeypatch, make_service, payload):
    def _api(**kwargs):
        kwargs.setdefault("body", payload)
        service, transport = make_service(**kwargs)
        monkeypatch.setattr(geocoding_endpoints, "geocoding_service", service)
        return TestClient(app), transport

    return _api


def test_geocode_endpoint_returns_results(api):
    client, transport = api()

    r = client.get("/geocoding/geocode", params={"address": "1600 Amphitheatre Parkway"})

    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "OK"
    assert [res["formatted_address"] for res in body["results"]] == [
        "1600 Amphitheatre Parkway, Mountain View, CA 94043, USA",
        "Mountain View, CA, USA",
    ]
    assert body["results"][0]["geometry"]["bounds"] is None
    assert body["results"][0]["geometry"]["location"] == {
        "latitude": 37.4224764,
        "longitude": -122.0842499,
    }
    assert transport.requests[0].url.params["address"] == "1600 Amphitheatre Parkway"


def test_reverse_endpoint_sends_latlng(api):
    client, transport = api()

    r = client.get("/geocoding/reverse", params={"lat": 37.422, "lng": -122.084})

    assert r.status_code == 200
    assert transport.requests[0].url.params["latlng"] == "37.422,-122.084"


def test_query_endpoint_accepts_provider_coordinate_keys(api):
    client, transport = api()

    r = client.post(
        "/geocoding/query",
        json={"coordinate": {"lat": 40.714, "lng": -73.998}, "language": "en"},
    )

    assert r.status_code == 200
    params = transport.requests[0].url.params
    assert params["latlng"] == "40.714,-73.998"
    assert params["language"] == "en"


def test_query_without_address_or_coordinate_is_bad_request(api):
    client, transport = api()

    r = client.post("/geocoding/query", json={"region": "us"})

    assert r.status_code == 400
    assert transport.requests == []


def test_upstream_failure_is_bad_gateway(api):
    client, _ = api(status_code=500, body="oops")

    r = client.get("/geocoding/geocode", params={"address": "Paris"})

    assert r.status_code == 502


def test_malformed_upstream_payload_is_bad_gateway(api):
    client, _ = api(body={"status": "OK"})

    r = client.get("/geocoding/geocode", params={"address": "Paris"})

    assert r.status_code == 502
