"""Async client for the Metro Transit NexTrip real-time departure service."""

from .client import ALL_ROUTES, NexTripClient  # noqa: F401
from .config import NEXTRIP_BASE_URL, NexTripConfig  # noqa: F401
from .errors import (  # noqa: F401
    InvalidRequestError,
    TransitDecodeError,
    TransitServiceError,
    TransitTransportError,
    TransitUpstreamError,
)
from .models import (  # noqa: F401
    Departure,
    Direction,
    DirectionValue,
    Provider,
    Route,
    Stop,
    TextValuePair,
    VehicleLocation,
)
