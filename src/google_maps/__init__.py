"""
Google Maps web service client.

This module provides functionality for:
- Building request URLs for the Google Maps web services
- Authenticating with an API key or a signed premier client id
- Validating JSON responses against the service status codes
- Convenience helpers for geocoding, directions and places

Main classes:
- MapsAPI: Issues queries against a configured endpoint
- MapsConfig: Immutable endpoint, credential and default settings
- MapsResult: Parsed response body

Errors:
- ConfigurationError: Missing or invalid configuration
- InvalidPremierConfigurationError: Premier signing without a private key
- InvalidResponseError: Transport failures and error statuses
- ZeroResultsError: The service found nothing
"""

from .maps_api import MapsAPI
from .maps_config import MapsConfig, Service
from .maps_errors import (
    ConfigurationError,
    InvalidPremierConfigurationError,
    InvalidResponseError,
    MapsError,
    ZeroResultsError,
)
from .maps_result import MapsResult
from .maps_services import (
    Location,
    Place,
    PlaceDetails,
    Route,
    directions,
    distance,
    duration,
    geocode,
    place_details,
    places,
    route,
)
from .maps_signing import sign_url

__all__ = [
    # Main classes
    "MapsAPI",
    "MapsConfig",
    "MapsResult",
    "Service",
    "sign_url",

    # Convenience services
    "Location",
    "Place",
    "PlaceDetails",
    "Route",
    "directions",
    "distance",
    "duration",
    "geocode",
    "place_details",
    "places",
    "route",

    # Errors
    "MapsError",
    "ConfigurationError",
    "InvalidPremierConfigurationError",
    "InvalidResponseError",
    "ZeroResultsError",
]

__version__ = "1.0.0"
