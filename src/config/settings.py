"""
Settings
--------
Environment-driven configuration for the location link service.
"""
import math
import os
from dataclasses import dataclass

PROVIDER_GEOAPIFY = "geoapify"
PROVIDER_GOOGLE = "google"

# Environment variable holding the API key for each provider
PROVIDER_KEY_VARS = {
    PROVIDER_GEOAPIFY: "GEOAPIFY_API_KEY",
    PROVIDER_GOOGLE: "GOOGLE_MAPS_API_KEY",
}

DEFAULT_TIMEOUT = 10
DEFAULT_USER_AGENT = "LocationAPI/1.0"
DEFAULT_PORT = 3000
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigurationError(Exception):
    """Raised when the environment does not describe a runnable service."""


@dataclass(frozen=True)
class Settings:
    provider: str
    api_key: str
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    link_scheme: str = "https"
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"


def _number(environ, name, default, cast, valid, expected):
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")
    if not valid(value):
        raise ConfigurationError(f"{name} must be {expected}, got {raw!r}")
    return value


def _positive_timeout(value):
    return math.isfinite(value) and value > 0


def _tcp_port(value):
    return 1 <= value <= 65535


def load_settings(environ=None):
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read from, defaults to os.environ

    Raises:
        ConfigurationError: Unknown provider, missing API key or malformed number
    """
    if environ is None:
        environ = os.environ

    provider = environ.get("GEOCODER_PROVIDER", PROVIDER_GEOAPIFY).strip().lower()
    if provider not in PROVIDER_KEY_VARS:
        raise ConfigurationError(
            f"Unknown GEOCODER_PROVIDER {provider!r}. Choose from: {', '.join(PROVIDER_KEY_VARS)}"
        )

    log_level = (environ.get("LOG_LEVEL") or "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ConfigurationError(f"LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")

    key_var = PROVIDER_KEY_VARS[provider]
    api_key = environ.get(key_var, "").strip()
    if not api_key:
        raise ConfigurationError(f"{key_var} environment variable is not set")

    return Settings(
        provider=provider,
        api_key=api_key,
        timeout=_number(
            environ, "GEOCODER_TIMEOUT", DEFAULT_TIMEOUT, float, _positive_timeout, "a positive number of seconds"
        ),
        user_agent=environ.get("GEOCODER_USER_AGENT") or DEFAULT_USER_AGENT,
        link_scheme=environ.get("LINK_SCHEME") or "https",
        host=environ.get("HOST") or "0.0.0.0",
        port=_number(environ, "PORT", DEFAULT_PORT, int, _tcp_port, "between 1 and 65535"),
        log_level=log_level,
    )
