"""
Main entrypoint for the location link service.

Usage:
    GEOAPIFY_API_KEY=... python main.py

Set GEOCODER_PROVIDER=google and GOOGLE_MAPS_API_KEY to use Google instead.
The process exits with status 1 before binding if the provider key is missing.
"""
import logging
import os
import sys

import uvicorn

from src.api.app import create_app
from src.config.settings import ConfigurationError, load_settings
from src.geocoding.providers import create_geocoder

logger = logging.getLogger(__name__)


def main(environ=None):
    """
    Validate configuration, build the geocoder and serve the API.
    """
    if environ is None:
        environ = os.environ

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )

    try:
        settings = load_settings(environ)
        logging.getLogger().setLevel(settings.log_level)
        logger.info(f"Initializing geocoder with {settings.provider} provider")
        geocoder = create_geocoder(settings)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    app = create_app(geocoder, link_scheme=settings.link_scheme)
    logger.info(f"Starting server at http://{settings.host}:{settings.port}")
    try:
        uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    finally:
        geocoder.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
