"""Shared fixtures: stub geocoders and an API test client around them."""
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.geocoding.base import Geocoder
from src.models.location import Address


class StubGeocoder(Geocoder):
    """Geocoder that answers from a canned list instead of calling a provider."""

    name = "Stub"
    attribution = "Powered by Stub."

    def __init__(self, results=None, error=None):
        super().__init__("test-key", session=MagicMock())
        self.results = results or []
        self.error = error
        self.calls = []

    def reverse(self, latitude, longitude):
        self.calls.append((latitude, longitude))
        if self.error is not None:
            raise self.error
        if not self.results:
            return None
        return self.results[0]


SAMPLE_ADDRESS = Address(
    formatted_address="10 Downing Street, London SW1A 2AA, United Kingdom",
    street="Downing Street",
    city="London",
    state="England",
    postcode="SW1A 2AA",
    country="United Kingdom",
)


@pytest.fixture
def stub_geocoder():
    return StubGeocoder(results=[SAMPLE_ADDRESS])


@pytest.fixture
def client(stub_geocoder):
    """API test client wired to the stub geocoder."""
    with TestClient(create_app(stub_geocoder)) as c:
        yield c


def make_response(status_code=200, payload=None, text=""):
    """A requests.Response stand-in for session.get."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response
