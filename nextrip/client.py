from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union
from urllib.parse import quote

import httpx

from .config import NexTripConfig
from .errors import (
    InvalidRequestError,
    TransitDecodeError,
    TransitTransportError,
    TransitUpstreamError,
)
from .models import (
    Departure,
    Direction,
    DirectionValue,
    Provider,
    Route,
    Stop,
    TextValuePair,
    VehicleLocation,
)


LOGGER = logging.getLogger("nextrip-client")

ALL_ROUTES = "0"

RecordT = TypeVar("RecordT")


class NexTripClient:
    """Client wrapper around the Metro Transit NexTrip API."""

    def __init__(
        self,
        config: Optional[NexTripConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or NexTripConfig()
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self.config.base_url

    async def get_providers(self) -> List[Provider]:
        """Return the area transit providers referenced by the route listing."""
        return await self._get_records("/Providers", TextValuePair.from_json)

    async def get_routes(self) -> List[Route]:
        """Return the routes in service on the current day."""
        return await self._get_records("/Routes", Route.from_json)

    async def get_route_directions(self, route: str) -> List[Direction]:
        """Return the two directions valid for a route (North/South or East/West)."""
        path = _build_path("Directions", _require("route", route))
        return await self._get_records(path, TextValuePair.from_json)

    async def get_route_stops(
        self, route: str, direction: Union[DirectionValue, str]
    ) -> List[Stop]:
        """Return the timepoint stops for a route and direction."""
        path = _build_path(
            "Stops",
            _require("route", route),
            self._direction_code(direction),
        )
        return await self._get_records(path, TextValuePair.from_json)

    async def get_stop_departures(self, stop_id: str) -> List[Departure]:
        """Return the departures scheduled for a numeric stop identifier."""
        path = _build_path(_require("stop_id", stop_id))
        return await self._get_records(path, Departure.from_json)

    async def get_route_timepoint_departures(
        self,
        route: str,
        direction: Union[DirectionValue, str],
        stop_id: str,
    ) -> List[Departure]:
        """Return the departures for a route, direction and timepoint stop."""
        path = _build_path(
            _require("route", route),
            self._direction_code(direction),
            _require("stop_id", stop_id),
        )
        return await self._get_records(path, Departure.from_json)

    async def get_vehicle_locations(self, route: str = ALL_ROUTES) -> List[VehicleLocation]:
        """
        Return the last known position of every in-service vehicle on a route.
        The route "0" asks for vehicles on all routes.
        """
        path = _build_path("VehicleLocations", _require("route", route))
        return await self._get_records(path, VehicleLocation.from_json)

    def _direction_code(self, direction: Union[DirectionValue, str]) -> str:
        if isinstance(direction, DirectionValue):
            return self.config.direction_code(direction)
        return _require("direction", direction)

    async def _get_records(
        self, path: str, factory: Callable[[Dict[str, Any]], RecordT]
    ) -> List[RecordT]:
        response = await self._get(path)
        return _parse_records(_decode_json(response, path), factory, response)

    async def _get(self, path: str) -> httpx.Response:
        """Issue a single GET against the configured host."""
        url = f"{self.config.base_url}{path}"
        LOGGER.debug("GET %s", url)

        try:
            async with httpx.AsyncClient(
                headers=self.config.headers,
                timeout=httpx.Timeout(self.config.timeout_seconds),
                transport=self._transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            body = exc.response.text
            LOGGER.warning("NexTrip returned HTTP %s for %s", status_code, path)
            raise TransitUpstreamError(
                body or f"HTTP {status_code}",
                status_code=status_code,
                body=body,
            ) from exc
        except httpx.HTTPError as exc:
            LOGGER.error("Unable to reach NexTrip for %s: %s", path, exc)
            raise TransitTransportError(str(exc) or type(exc).__name__) from exc

        return response


def _decode_json(response: httpx.Response, path: str) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        LOGGER.error("NexTrip response was not valid JSON for %s", path)
        raise TransitDecodeError(
            response.text or f"HTTP {response.status_code}: empty body",
            status_code=response.status_code,
            body=response.text,
        ) from exc


def _parse_records(
    payload: Any,
    factory: Callable[[Dict[str, Any]], RecordT],
    response: httpx.Response,
) -> List[RecordT]:
    def _shape_error(message: str) -> TransitDecodeError:
        return TransitDecodeError(
            message, status_code=response.status_code, body=response.text)

    if not isinstance(payload, list):
        raise _shape_error(
            f"Expected a JSON array from NexTrip, got {type(payload).__name__}.")

    records: List[RecordT] = []
    for entry in payload:
        if not isinstance(entry, dict):
            raise _shape_error(
                f"Expected JSON objects in NexTrip array, got {type(entry).__name__}.")
        try:
            records.append(factory(entry))
        except KeyError as exc:
            LOGGER.debug("Unexpected NexTrip record %s: missing %s", entry, exc)
            raise _shape_error(
                f"NexTrip record is missing required field {exc.args[0]!r}.") from exc
    return records


def _require(name: str, value: str) -> str:
    if not value:
        raise InvalidRequestError(f"{name} must be provided.")
    return str(value)


def _build_path(*segments: str) -> str:
    return "".join(f"/{quote(segment, safe='')}" for segment in segments)
