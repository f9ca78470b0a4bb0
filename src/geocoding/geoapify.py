"""
Geoapify Reverse Geocoding
------------------------
Resolves coordinates with the Geoapify reverse geocoding API and reshapes
the first result into an Address.
"""
import logging
from typing import Optional

from src.geocoding.base import Geocoder, GeocodingError, text_field
from src.models.location import ADDRESS_NOT_FOUND, Address

GEOAPIFY_REVERSE_URL = "https://api.geoapify.com/v1/geocode/reverse"

logger = logging.getLogger(__name__)


class GeoapifyGeocoder(Geocoder):
    name = "Geoapify"
    attribution = (
        'Powered by Geoapify. Data &copy; OpenStreetMap contributors, ODbL 1.0. '
        '<a href="http://osm.org/copyright">Learn more</a>.'
    )

    def reverse(self, latitude: float, longitude: float) -> Optional[Address]:
        params = {
            "lat": latitude,
            "lon": longitude,
            "format": "json",
            "apiKey": self.api_key,
        }
        data = self._get_json(GEOAPIFY_REVERSE_URL, params)

        results = data.get("results")
        if not isinstance(results, list):
            raise GeocodingError("Geoapify response has no results list")
        logger.debug(f"Geoapify returned {len(results)} results for ({latitude}, {longitude})")
        if not results:
            return None

        first = results[0]
        if not isinstance(first, dict):
            raise GeocodingError("Geoapify result is not an object")

        return Address(
            formatted_address=text_field(first, "formatted") or ADDRESS_NOT_FOUND,
            street=text_field(first, "street"),
            city=text_field(first, "city"),
            state=text_field(first, "state"),
            postcode=text_field(first, "postcode"),
            country=text_field(first, "country"),
        )
