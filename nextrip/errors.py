from __future__ import annotations

from typing import Optional


class TransitServiceError(Exception):
    """Base error for issues communicating with the NexTrip service."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class TransitTransportError(TransitServiceError):
    """Raised when the NexTrip host cannot be reached."""


class TransitUpstreamError(TransitServiceError):
    """Raised when NexTrip answers with a non-success status."""


class TransitDecodeError(TransitServiceError):
    """Raised when NexTrip returns a payload that is not the expected JSON."""


class InvalidRequestError(ValueError):
    """Raised before any request when an identifier is missing or empty."""
