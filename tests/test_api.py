"""API tests: link generation, location page and geocode endpoints."""
import uuid

import pytest
from fastapi.testclient import TestClient

from src.api.app import create_app
from src.geocoding.base import GeocodingError
from tests.conftest import SAMPLE_ADDRESS, StubGeocoder

pytestmark = pytest.mark.api


def test_root_returns_welcome(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "message" in r.json()


def test_generate_link_embeds_host_and_uuid(client):
    """GET /api/generate-link returns https://<host>/location/<uuid>."""
    r = client.get("/api/generate-link")
    assert r.status_code == 200
    link = r.json()["link"]
    assert link.startswith("https://testserver/location/")
    link_id = link.rsplit("/", 1)[1]
    assert str(uuid.UUID(link_id)) == link_id


def test_generate_link_uses_request_host_header(client):
    r = client.get("/api/generate-link", headers={"Host": "share.example.com"})
    assert r.json()["link"].startswith("https://share.example.com/location/")


def test_generate_link_twice_gives_different_ids(client):
    first = client.get("/api/generate-link").json()["link"]
    second = client.get("/api/generate-link").json()["link"]
    assert first != second


def test_generate_link_respects_configured_scheme(stub_geocoder):
    with TestClient(create_app(stub_geocoder, link_scheme="http")) as c:
        r = c.get("/api/generate-link")
    assert r.json()["link"].startswith("http://testserver/location/")


@pytest.mark.parametrize("link_id", ["abc", str(uuid.uuid4()), "not-a-uuid-at-all", "123"])
def test_location_page_returns_html_for_any_id(client, link_id):
    """GET /location/{id} never validates the id."""
    r = client.get(f"/location/{link_id}")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "<!DOCTYPE html>" in r.text
    assert f"/api/geocode/{link_id}" in r.text
    assert "Powered by Stub." in r.text


def test_location_page_escapes_id(client):
    r = client.get("/location/%3Cimg%20src%3Dx%3E")
    assert r.status_code == 200
    assert "<small>Link: &lt;img src=x&gt;</small>" in r.text
    assert "/api/geocode/%3Cimg%20src%3Dx%3E" in r.text


def test_location_page_render_failure_returns_500(client, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("template broken")

    monkeypatch.setattr("src.api.app.render_location_page", boom)
    r = client.get("/location/abc")
    assert r.status_code == 500
    assert r.text == "Internal Server Error"


def test_geocode_returns_first_result_fields(client, stub_geocoder):
    """Response fields match the provider's first result exactly."""
    r = client.post("/api/geocode/abc", json={"latitude": 51.5034, "longitude": -0.1276})
    assert r.status_code == 200
    assert r.json() == {
        "latitude": 51.5034,
        "longitude": -0.1276,
        "formattedAddress": SAMPLE_ADDRESS.formatted_address,
        "street": SAMPLE_ADDRESS.street,
        "city": SAMPLE_ADDRESS.city,
        "state": SAMPLE_ADDRESS.state,
        "postcode": SAMPLE_ADDRESS.postcode,
        "country": SAMPLE_ADDRESS.country,
    }
    assert stub_geocoder.calls == [(51.5034, -0.1276)]


def test_geocode_accepts_numeric_strings_and_zero(client, stub_geocoder):
    r = client.post("/api/geocode/abc", json={"latitude": "0", "longitude": 12})
    assert r.status_code == 200
    assert r.json()["latitude"] == 0.0
    assert stub_geocoder.calls == [(0.0, 12.0)]


@pytest.mark.parametrize(
    "body",
    [
        {"latitude": "abc", "longitude": 1.0},
        {"latitude": 1.0},
        {"longitude": 1.0},
        {"latitude": None, "longitude": 1.0},
        {"latitude": True, "longitude": 1.0},
        {"latitude": "nan", "longitude": 1.0},
        {"latitude": [1], "longitude": 1.0},
        [51.5, -0.1],
    ],
)
def test_geocode_rejects_invalid_coordinates(client, stub_geocoder, body):
    r = client.post("/api/geocode/abc", json=body)
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid or missing coordinates"}
    assert stub_geocoder.calls == []


def test_geocode_rejects_non_json_body(client):
    r = client.post("/api/geocode/abc", content=b"latitude=1", headers={"Content-Type": "text/plain"})
    assert r.status_code == 400


def test_geocode_no_results_returns_404():
    with TestClient(create_app(StubGeocoder(results=[]))) as c:
        r = c.post("/api/geocode/abc", json={"latitude": 1.0, "longitude": 2.0})
    assert r.status_code == 404
    assert r.json() == {"error": "Address not found"}


def test_geocode_provider_failure_returns_500_with_details():
    geocoder = StubGeocoder(error=GeocodingError("Geoapify returned HTTP 401: Invalid apiKey"))
    with TestClient(create_app(geocoder)) as c:
        r = c.post("/api/geocode/abc", json={"latitude": 1.0, "longitude": 2.0})
    assert r.status_code == 500
    assert r.json() == {
        "error": "Failed to geocode location",
        "details": "Geoapify returned HTTP 401: Invalid apiKey",
    }


def test_geocode_unexpected_error_returns_500():
    with TestClient(create_app(StubGeocoder(error=KeyError("formatted")))) as c:
        r = c.post("/api/geocode/abc", json={"latitude": 1.0, "longitude": 2.0})
    assert r.status_code == 500
    assert r.json()["error"] == "Failed to geocode location"


def test_unhandled_error_returns_generic_500(stub_geocoder):
    """Errors no route catches are answered by the app-wide handler."""
    app = create_app(stub_geocoder)

    @app.get("/explode")
    def explode():
        raise RuntimeError("unexpected")

    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/explode")
    assert r.status_code == 500
    assert r.json() == {"error": "Internal Server Error"}
