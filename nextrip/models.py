"""Value records returned by the NexTrip service, kept exactly as received."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class DirectionValue(str, Enum):
    """
    Symbolic route directions.

    Members carry no upstream code; the client looks the code up in
    ``NexTripConfig.direction_codes``. Callers holding a code returned by
    ``get_route_directions`` can pass that string instead of a member.
    """

    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"
    NORTH = "NORTH"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class TextValuePair:
    text: str
    value: str
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "TextValuePair":
        return cls(text=payload["Text"], value=payload["Value"], raw=payload)


Provider = TextValuePair
Direction = TextValuePair
Stop = TextValuePair


@dataclass(frozen=True, slots=True)
class Route:
    """A route in service today. ``provider_id`` refers to a Provider value."""

    route: str
    description: Optional[str] = None
    provider_id: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "Route":
        return cls(
            route=payload["Route"],
            description=payload.get("Description"),
            provider_id=payload.get("ProviderID"),
            raw=payload,
        )


@dataclass(frozen=True, slots=True)
class Departure:
    """
    One scheduled (``actual`` false) or real-time (``actual`` true) departure.

    ``departure_text`` is a clock time such as ``11:32`` for scheduled trips and
    a countdown such as ``15 Min`` for real-time ones. ``departure_time`` is the
    service's serialized date string, e.g. ``/Date(1634094780000-0500)/``.
    Vehicle coordinates are only sent for real-time departures.
    """

    route: str
    actual: Optional[bool] = None
    block_number: Optional[Any] = None
    departure_text: Optional[str] = None
    departure_time: Optional[str] = None
    description: Optional[str] = None
    gate: Optional[str] = None
    route_direction: Optional[str] = None
    terminal: Optional[str] = None
    vehicle_heading: Optional[Any] = None
    vehicle_latitude: Optional[Any] = None
    vehicle_longitude: Optional[Any] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "Departure":
        return cls(
            route=payload["Route"],
            actual=payload.get("Actual"),
            block_number=payload.get("BlockNumber"),
            departure_text=payload.get("DepartureText"),
            departure_time=payload.get("DepartureTime"),
            description=payload.get("Description"),
            gate=payload.get("Gate"),
            route_direction=payload.get("RouteDirection"),
            terminal=payload.get("Terminal"),
            vehicle_heading=payload.get("VehicleHeading"),
            vehicle_latitude=payload.get("VehicleLatitude"),
            vehicle_longitude=payload.get("VehicleLongitude"),
            raw=payload,
        )


@dataclass(frozen=True, slots=True)
class VehicleLocation:
    # bearing, odometer and speed are reserved upstream and currently report 0
    route: str
    block_number: Optional[Any] = None
    direction: Optional[Any] = None
    location_time: Optional[str] = None
    terminal: Optional[str] = None
    vehicle_latitude: Optional[Any] = None
    vehicle_longitude: Optional[Any] = None
    bearing: Optional[Any] = None
    odometer: Optional[Any] = None
    speed: Optional[Any] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "VehicleLocation":
        return cls(
            route=payload["Route"],
            block_number=payload.get("BlockNumber"),
            direction=payload.get("Direction"),
            location_time=payload.get("LocationTime"),
            terminal=payload.get("Terminal"),
            vehicle_latitude=payload.get("VehicleLatitude"),
            vehicle_longitude=payload.get("VehicleLongitude"),
            bearing=payload.get("Bearing"),
            odometer=payload.get("Odometer"),
            speed=payload.get("Speed"),
            raw=payload,
        )
