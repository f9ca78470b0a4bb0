"""
Geocoder Base
-------------
Shared HTTP plumbing for reverse-geocoding providers.
Provider payloads are treated as untyped dicts and never leave this package.
"""
from abc import ABC, abstractmethod
from http.cookiejar import DefaultCookiePolicy
from typing import Optional

import requests

from src.models.location import Address

# Constants
REQUEST_TIMEOUT = 10
USER_AGENT = "LocationAPI/1.0"


class GeocodingError(Exception):
    """The provider could not be reached or answered with something unusable."""


def text_field(record, key):
    """Read one provider field as a string, '' when missing or of an unexpected type."""
    value = record.get(key)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    # Some providers send numeric postcodes
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return ""


class Geocoder(ABC):
    name = "geocoder"
    attribution = ""

    def __init__(self, api_key, timeout=REQUEST_TIMEOUT, user_agent=USER_AGENT, session=None):
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()
        # The session is shared by worker threads; refuse cookies so its jar is never written
        self.session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
        self.session.headers.update({"User-Agent": user_agent})

    @abstractmethod
    def reverse(self, latitude: float, longitude: float) -> Optional[Address]:
        """Resolve coordinates to an Address, or None if the provider has no result.

        Raises:
            GeocodingError: On network errors, HTTP errors or malformed payloads.
        """

    def _get_json(self, url, params) -> dict:
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise GeocodingError(f"Could not reach {self.name}: {e}") from e

        if response.status_code != 200:
            raise GeocodingError(
                f"{self.name} returned HTTP {response.status_code}: {response.text[:200]}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise GeocodingError(f"{self.name} returned invalid JSON") from e

        if not isinstance(data, dict):
            raise GeocodingError(f"{self.name} returned an unexpected payload")
        return data

    def close(self):
        self.session.close()
