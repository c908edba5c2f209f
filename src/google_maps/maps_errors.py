"""
Custom exceptions for the Google Maps client.

Configuration problems and bad service responses are kept in separate
branches so callers can tell "fix your setup" apart from "the service said no".
"""


class MapsError(Exception):
    """Base exception for the Google Maps client."""
    pass


class ConfigurationError(MapsError):
    """Raised when the client configuration is missing or invalid."""
    pass


class InvalidPremierConfigurationError(ConfigurationError):
    """Raised when premier signing is requested without a private key."""
    pass


class InvalidResponseError(MapsError):
    """Raised on transport failures, unparseable bodies or non-OK statuses."""
    pass


class ZeroResultsError(InvalidResponseError):
    """Raised when the service answered ZERO_RESULTS."""
    pass
