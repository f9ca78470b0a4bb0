"""
Google Reverse Geocoding
----------------------
Resolves coordinates with the Google Geocoding API. The structured fields
come from the first result's address components.
"""
import logging
from typing import Optional

from src.geocoding.base import Geocoder, GeocodingError, text_field
from src.geocoding.components import parse_address_components
from src.models.location import ADDRESS_NOT_FOUND, Address

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"

logger = logging.getLogger(__name__)


class GoogleGeocoder(Geocoder):
    name = "Google Geocoding"
    attribution = "Powered by Google."

    def reverse(self, latitude: float, longitude: float) -> Optional[Address]:
        params = {"latlng": f"{latitude},{longitude}", "key": self.api_key}
        data = self._get_json(GOOGLE_GEOCODE_URL, params)

        status = data.get("status")
        if status == "ZERO_RESULTS":
            return None
        if status != "OK":
            message = f"Google Geocoding status {status}"
            if text_field(data, "error_message"):
                message += f": {data['error_message']}"
            raise GeocodingError(message)

        results = data.get("results")
        if not isinstance(results, list):
            raise GeocodingError("Google Geocoding response has no results list")
        if not results:
            return None

        first = results[0]
        if not isinstance(first, dict):
            raise GeocodingError("Google Geocoding result is not an object")

        fields = parse_address_components(first.get("address_components"))
        return Address(
            formatted_address=text_field(first, "formatted_address") or ADDRESS_NOT_FOUND,
            **fields,
        )
