"""
Google Maps web service client.

Builds request URLs for a named service, authenticates them with either an
API key or a signed premier client id, and validates the JSON response.
"""

from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import requests
from pydantic import ValidationError

from .maps_config import MapsConfig, ServiceId
from .maps_errors import InvalidResponseError, ZeroResultsError
from .maps_result import MapsResult
from .maps_signing import sign_url


USE_PREMIER_SIGNING = "use_premier_signing"


class MapsAPI:
    """
    Stateless client for the Google Maps web services.

    Every call reads the injected MapsConfig and nothing else, so one instance
    can be shared between callers.
    """

    STATUS_OK = "OK"
    STATUS_ZERO_RESULTS = "ZERO_RESULTS"

    def __init__(self, config: MapsConfig):
        """
        Initialize the client.

        Args:
            config: Endpoint, credentials and per-service defaults
        """
        self.config = config

        mode = "premier signing" if config.use_premier_signing else "api key"
        config.logger.info(f"MapsAPI initialized (end_point={config.end_point}, auth={mode})")

    def query(self, service: ServiceId, args: Optional[Mapping[str, Any]] = None) -> MapsResult:
        """
        Call a web service and return its validated response.

        Args:
            service: Service to call, e.g. Service.GEOCODE or "geocode"
            args: Query parameters; they override the service defaults

        Returns:
            The parsed response, whose status is OK

        Raises:
            ConfigurationError: Unknown service or missing premier key
            ZeroResultsError: The service found nothing
            InvalidResponseError: Transport failure or error status
        """
        params = self.merge_params(self.config.service_defaults(service), args)
        use_premier_signing = params.pop(USE_PREMIER_SIGNING)

        if use_premier_signing:
            params["client"] = self.config.premier_client_id
        else:
            params["key"] = self.config.api_key

        url = self.build_url(service, params)
        if use_premier_signing:
            url = sign_url(url, self.config.premier_key)

        return self.fetch(url)

    def merge_params(self,
                     service_defaults: Optional[Mapping[str, Any]],
                     args: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Merge base defaults, service defaults and caller arguments.

        Later sources win. The use_premier_signing flag always comes from the
        configuration; attempts to override it are dropped.

        Returns:
            New parameter dict, including the use_premier_signing flag
        """
        params: Dict[str, Any] = {USE_PREMIER_SIGNING: self.config.use_premier_signing}

        for source in (service_defaults, args):
            if not source:
                continue
            for key, value in source.items():
                if key == USE_PREMIER_SIGNING:
                    self.config.logger.warning(f"Ignoring {USE_PREMIER_SIGNING} override, it follows the configuration")
                    continue
                params[key] = value

        return params

    def build_url(self, service: ServiceId, params: Mapping[str, Any]) -> str:
        """
        Build the unsigned request URL for a service.

        Raises:
            ConfigurationError: If the service has no known path
        """
        path = self.config.service_path(service)
        url = f"{self.config.end_point}{path}/{self.config.format}"
        if params:
            url += "?" + urlencode(params, doseq=True)

        self.config.logger.debug(f"url before possible signing: {url}")
        return url

    def fetch(self, url: str) -> MapsResult:
        """
        GET a request URL and validate the response status.

        Raises:
            ZeroResultsError: Status ZERO_RESULTS
            InvalidResponseError: Any other failure or non-OK status
        """
        try:
            response = requests.get(url, timeout=self.config.request_timeout)
            response.raise_for_status()
            result = MapsResult.model_validate(response.json())
        except (requests.exceptions.RequestException, ValueError, ValidationError) as e:
            self.config.logger.error(str(e))
            raise InvalidResponseError(f"unknown error: {e}") from e

        self._check_status(result)
        return result

    def _check_status(self, result: MapsResult) -> None:
        status = result.status
        if status == self.STATUS_ZERO_RESULTS:
            raise ZeroResultsError(f"Google did not return any results: {status}")
        if status != self.STATUS_OK:
            message = f"Google returned an error status: {status}"
            if result.error_message:
                message += f" ({result.error_message})"
            raise InvalidResponseError(message)

    def __repr__(self) -> str:
        return f"MapsAPI(config={self.config!r})"
