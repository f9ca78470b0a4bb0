"""Builds the geocoder named by the settings."""
from src.config.settings import PROVIDER_GEOAPIFY, PROVIDER_GOOGLE, ConfigurationError
from src.geocoding.geoapify import GeoapifyGeocoder
from src.geocoding.google import GoogleGeocoder

PROVIDERS = {
    PROVIDER_GEOAPIFY: GeoapifyGeocoder,
    PROVIDER_GOOGLE: GoogleGeocoder,
}


def create_geocoder(settings):
    try:
        geocoder_class = PROVIDERS[settings.provider]
    except KeyError:
        raise ConfigurationError(f"No geocoder for provider {settings.provider!r}")
    return geocoder_class(
        settings.api_key,
        timeout=settings.timeout,
        user_agent=settings.user_agent,
    )
