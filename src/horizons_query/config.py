"""Configuration: Horizons endpoint, time policy and leap seconds from environment."""

from __future__ import annotations

import os

# Env var overrides with sensible defaults.
DEFAULT_API_URL = 'https://ssd.jpl.nasa.gov/api/horizons.api'

_TRUTHY = ('1', 'true', 'yes', 'on')


def get_api_url() -> str:
    """Return the Horizons API endpoint (HORIZONS_API_URL env var or default).

    Returns:
        URL string without a trailing query.
    """
    return os.environ.get('HORIZONS_API_URL', '').strip() or DEFAULT_API_URL


def get_strict_time_spec() -> bool:
    """Return whether time specifications are validated strictly.

    Strict mode rejects bounded ranges whose stop time is not after the start
    time and empty time lists. Controlled by HORIZONS_STRICT_TIME_SPEC.

    Returns:
        True if the env var holds a truthy value (1, true, yes, on).
    """
    return os.environ.get('HORIZONS_STRICT_TIME_SPEC', '').strip().lower() in _TRUTHY


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian.

    Returns:
        JULIAN_LEAPSECS value, or None to use rms-julian's bundled LSK.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    return path or None
