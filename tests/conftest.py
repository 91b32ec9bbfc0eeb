import copy
import json

import httpx
import pytest

from mapservice.core.config import GeocoderConfig
from mapservice.services.geocoding import GeocodingService

BASE_URL = "https://maps.example.com/maps/api/geocode"

GOOGLEPLEX = {
    "address_components": [
        {"long_name": "1600", "short_name": "1600", "types": ["street_number"]},
        {
            "long_name": "Amphitheatre Parkway",
            "short_name": "Amphitheatre Pkwy",
            "types": ["route"],
        },
        {
            "long_name": "Mountain View",
            "short_name": "Mountain View",
            "types": ["locality", "political"],
        },
        {
            "long_name": "California",
            "short_name": "CA",
            "types": ["administrative_area_level_1", "political"],
        },
        {
            "long_name": "United States",
            "short_name": "US",
            "types": ["country", "political"],
        },
    ],
    "formatted_address": "1600 Amphitheatre Parkway, Mountain View, CA 94043, USA",
    "geometry": {
        "location": {"lat": 37.4224764, "lng": -122.0842499},
        "location_type": "ROOFTOP",
        "viewport": {
            "northeast": {"lat": 37.4238253802915, "lng": -122.0829009197085},
            "southwest": {"lat": 37.4211274197085, "lng": -122.0855988802915},
        },
    },
    "place_id": "ChIJ2eUgeAK6j4ARbn5u_wAGqWA",
    "types": ["street_address"],
}

MOUNTAIN_VIEW = {
    "address_components": [
        {
            "long_name": "Mountain View",
            "short_name": "Mountain View",
            "types": ["locality", "political"],
        },
    ],
    "formatted_address": "Mountain View, CA, USA",
    "geometry": {
        "bounds": {
            "northeast": {"lat": 37.4698870, "lng": -122.0446720},
            "southwest": {"lat": 37.3565410, "lng": -122.1178620},
        },
        "location": {"lat": 37.3860517, "lng": -122.0838511},
        "location_type": "APPROXIMATE",
        "viewport": {
            "northeast": {"lat": 37.4698870, "lng": -122.0446720},
            "southwest": {"lat": 37.3565410, "lng": -122.1178620},
        },
    },
    "partial_match": True,
    "types": ["locality", "political"],
}


@pytest.fixture
def payload():
    return {"status": "OK", "results": [copy.deepcopy(GOOGLEPLEX), copy.deepcopy(MOUNTAIN_VIEW)]}


@pytest.fixture
def config():
    return GeocoderConfig(base_url=BASE_URL)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, status_code=200, body=None, exc=None):
        self.requests = []
        self.status_code = status_code
        self.body = body
        self.exc = exc
        super().__init__(self._handle)

    def _handle(self, request):
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        content = self.body if isinstance(self.body, (str, bytes)) else json.dumps(self.body)
        return httpx.Response(self.status_code, content=content)


@pytest.fixture
def make_service(config):
    def _make(status_code=200, body=None, exc=None, service_config=None):
        transport = RecordingTransport(status_code=status_code, body=body, exc=exc)
        client = httpx.AsyncClient(transport=transport)
        service = GeocodingService(config=service_config or config, client=client)
        return service, transport

    return _make
