"""
Convenience wrappers around MapsAPI.query for the common services.

Each function issues one request and reduces the raw response to a small
pydantic model. Empty result sets come back as empty lists where a list is
the natural answer.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from .maps_api import MapsAPI
from .maps_config import Service
from .maps_errors import InvalidResponseError, ZeroResultsError
from .maps_result import MapsResult


class Location(BaseModel):
    """A geocoded address."""
    address: str
    latitude: float
    longitude: float


class Route(BaseModel):
    """First leg of the first route returned by the directions service."""
    start_address: str
    end_address: str
    distance_text: str
    distance_meters: int
    duration_text: str
    duration_seconds: int


class Place(BaseModel):
    """An autocomplete prediction."""
    text: str
    place_id: str


class PlaceDetails(BaseModel):
    """Details of a single place."""
    place_id: str
    name: str
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    url: Optional[str] = None
    data: Dict[str, Any] = {}


def _with_language(args: Dict[str, Any], language: Optional[str]) -> Dict[str, Any]:
    if language:
        args["language"] = language
    return args


def _unexpected_body(service: Service, error: Exception) -> InvalidResponseError:
    return InvalidResponseError(
        f"Unexpected {service.value} response, missing {error}"
    )


def geocode(api: MapsAPI, address: str, language: Optional[str] = None) -> List[Location]:
    """
    Geocode an address.

    Args:
        api: Configured client
        address: Free-form address
        language: Optional response language, e.g. "nl"

    Returns:
        Matching locations, empty if the service found none
    """
    try:
        result = api.query(Service.GEOCODE, _with_language({"address": address}, language))
    except ZeroResultsError:
        api.config.logger.info(f"No geocoding results for '{address}'")
        return []

    try:
        return [
            Location(
                address=item["formatted_address"],
                latitude=item["geometry"]["location"]["lat"],
                longitude=item["geometry"]["location"]["lng"],
            )
            for item in result["results"]
        ]
    except (KeyError, TypeError) as e:
        raise _unexpected_body(Service.GEOCODE, e) from e


def directions(api: MapsAPI,
               origin: str,
               destination: str,
               language: Optional[str] = None,
               **options: Any) -> MapsResult:
    """
    Query the directions service.

    Extra keyword arguments (mode, waypoints, avoid, ...) are sent as-is.
    """
    args = {"origin": origin, "destination": destination}
    args.update(options)
    return api.query(Service.DIRECTIONS, _with_language(args, language))


def route(api: MapsAPI,
          origin: str,
          destination: str,
          language: Optional[str] = None,
          **options: Any) -> Route:
    """
    Summarize the first leg of the best route between two places.

    Raises:
        ZeroResultsError: If no route exists
        InvalidResponseError: On service errors or an unexpected body
    """
    result = directions(api, origin, destination, language, **options)

    try:
        leg = result["routes"][0]["legs"][0]
        return Route(
            start_address=leg["start_address"],
            end_address=leg["end_address"],
            distance_text=leg["distance"]["text"],
            distance_meters=leg["distance"]["value"],
            duration_text=leg["duration"]["text"],
            duration_seconds=leg["duration"]["value"],
        )
    except (KeyError, IndexError, TypeError) as e:
        raise _unexpected_body(Service.DIRECTIONS, e) from e


def distance(api: MapsAPI, origin: str, destination: str, language: Optional[str] = None, **options: Any) -> str:
    """Human readable distance, e.g. "57.4 km"."""
    return route(api, origin, destination, language, **options).distance_text


def duration(api: MapsAPI, origin: str, destination: str, language: Optional[str] = None, **options: Any) -> str:
    """Human readable travel time, e.g. "42 mins"."""
    return route(api, origin, destination, language, **options).duration_text


def places(api: MapsAPI, keyword: str, language: Optional[str] = None) -> List[Place]:
    """
    Autocomplete a search keyword into place predictions.

    Returns:
        Predictions in service order, empty if there are none
    """
    try:
        result = api.query(Service.PLACES, _with_language({"input": keyword}, language))
    except ZeroResultsError:
        api.config.logger.info(f"No place predictions for '{keyword}'")
        return []

    try:
        return [
            Place(text=item["description"], place_id=item["place_id"])
            for item in result["predictions"]
        ]
    except (KeyError, TypeError) as e:
        raise _unexpected_body(Service.PLACES, e) from e


def place_details(api: MapsAPI, place_id: str, language: Optional[str] = None) -> PlaceDetails:
    """
    Fetch the details of a place by id.

    Raises:
        ZeroResultsError: If the place no longer exists
        InvalidResponseError: On service errors or an unexpected body
    """
    result = api.query(Service.PLACE_DETAILS, _with_language({"place_id": place_id}, language))

    try:
        data = result["result"]
        location = data.get("geometry", {}).get("location", {})
        return PlaceDetails(
            place_id=data.get("place_id", place_id),
            name=data["name"],
            address=data.get("formatted_address"),
            latitude=location.get("lat"),
            longitude=location.get("lng"),
            url=data.get("url"),
            data=data,
        )
    except (KeyError, AttributeError, TypeError) as e:
        raise _unexpected_body(Service.PLACE_DETAILS, e) from e
