"""
Configuration for the Google Maps client.

Holds everything a request needs besides the caller's arguments: where to
send it, how to authenticate it and which defaults to apply per service.
The object is frozen and built once, then handed to MapsAPI.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from ..config.config_module import get_config
from .maps_errors import ConfigurationError


DEFAULT_END_POINT = "https://maps.googleapis.com/maps/api/"
DEFAULT_FORMAT = "json"


class Service(str, Enum):
    """Web services known to the client."""
    DIRECTIONS = "directions"
    PLACES = "places"
    PLACE_DETAILS = "place_details"
    GEOCODE = "geocode"
    DISTANCE_MATRIX = "distance_matrix"


DEFAULT_SERVICE_PATHS = {
    Service.DIRECTIONS.value: "directions",
    Service.PLACES.value: "place/autocomplete",
    Service.PLACE_DETAILS.value: "place/details",
    Service.GEOCODE.value: "geocode",
    Service.DISTANCE_MATRIX.value: "distancematrix",
}

ServiceId = Union[Service, str]


def service_name(service: ServiceId) -> str:
    """Normalize a Service member or plain string to its lookup key."""
    if isinstance(service, Service):
        return service.value
    return str(service)


@dataclass(frozen=True)
class MapsConfig:
    """Immutable settings shared by every request of a MapsAPI instance."""

    # API-key authentication
    api_key: Optional[str] = field(default=None, repr=False)

    # Premier (signed URL) authentication, used whenever a client id is set
    premier_client_id: Optional[str] = None
    premier_key: Optional[str] = field(default=None, repr=False)

    end_point: str = DEFAULT_END_POINT
    format: str = DEFAULT_FORMAT

    # Service name -> extra query parameters sent with every call
    default_params: Mapping[ServiceId, Mapping[str, Any]] = field(default_factory=dict, hash=False)

    # Service name -> path segment; merged over DEFAULT_SERVICE_PATHS
    service_paths: Mapping[ServiceId, str] = field(default_factory=dict, hash=False)

    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("src.google_maps"),
        repr=False,
        compare=False
    )

    # Seconds; None keeps the HTTP library's own default
    request_timeout: Optional[float] = None

    def __post_init__(self):
        """Normalize and validate configuration values."""
        for name in ("api_key", "premier_client_id", "premier_key"):
            value = getattr(self, name)
            if value is not None and not str(value).strip():
                object.__setattr__(self, name, None)

        if not self.end_point or not self.end_point.strip():
            raise ConfigurationError("end_point cannot be empty")

        if not self.format or not self.format.strip():
            raise ConfigurationError("format cannot be empty")

        if self.api_key is None and self.premier_client_id is None:
            raise ConfigurationError(
                "No credentials configured: set api_key or premier_client_id"
            )

        if self.request_timeout is not None and self.request_timeout <= 0:
            raise ConfigurationError(
                f"request_timeout must be positive, got {self.request_timeout}"
            )

        paths = dict(DEFAULT_SERVICE_PATHS)
        paths.update(
            {service_name(key): path for key, path in self.service_paths.items()}
        )
        object.__setattr__(self, "service_paths", MappingProxyType(paths))

        defaults = {
            service_name(key): MappingProxyType(dict(params))
            for key, params in self.default_params.items()
        }
        object.__setattr__(self, "default_params", MappingProxyType(defaults))

    @property
    def use_premier_signing(self) -> bool:
        """True when requests are authenticated with a signed client id."""
        return self.premier_client_id is not None

    def service_path(self, service: ServiceId) -> str:
        """
        Look up the URL path segment of a service.

        Raises:
            ConfigurationError: If the service is unknown
        """
        name = service_name(service)
        try:
            return self.service_paths[name]
        except KeyError:
            raise ConfigurationError(f"Unknown service: {name}") from None

    def service_defaults(self, service: ServiceId) -> Optional[Mapping[str, Any]]:
        """Default query parameters for a service, or None if it has none."""
        return self.default_params.get(service_name(service))

    @classmethod
    def from_env(cls, **overrides) -> "MapsConfig":
        """
        Build a configuration from environment variables.

        Reads GOOGLE_MAPS_API_KEY, GOOGLE_MAPS_CLIENT_ID, GOOGLE_MAPS_PRIVATE_KEY,
        GOOGLE_MAPS_END_POINT, GOOGLE_MAPS_FORMAT and GOOGLE_MAPS_REQUEST_TIMEOUT.
        Call load_config() first to pick up a .env file.

        Args:
            **overrides: Field values that take precedence over the environment

        Raises:
            ConfigurationError: If the resulting configuration is invalid
        """
        values = {
            "api_key": get_config("GOOGLE_MAPS_API_KEY"),
            "premier_client_id": get_config("GOOGLE_MAPS_CLIENT_ID"),
            "premier_key": get_config("GOOGLE_MAPS_PRIVATE_KEY"),
            "end_point": get_config("GOOGLE_MAPS_END_POINT", DEFAULT_END_POINT),
            "format": get_config("GOOGLE_MAPS_FORMAT", DEFAULT_FORMAT),
            "request_timeout": _parse_timeout(get_config("GOOGLE_MAPS_REQUEST_TIMEOUT")),
        }
        values.update(overrides)
        return cls(**values)


def _parse_timeout(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(
            f"Invalid GOOGLE_MAPS_REQUEST_TIMEOUT: {value!r}"
        ) from None
