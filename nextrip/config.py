from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .models import DirectionValue


NEXTRIP_BASE_URL = "http://svc.metrotransit.org/nextrip"
DEFAULT_TIMEOUT_SECONDS = 15.0


def _default_headers() -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def _default_direction_codes() -> Dict[DirectionValue, str]:
    # Published NexTrip table; the live service has been seen answering with
    # North/East = "0" and South/West = "1", so keep this overridable.
    return {
        DirectionValue.SOUTH: "1",
        DirectionValue.EAST: "2",
        DirectionValue.WEST: "3",
        DirectionValue.NORTH: "4",
    }


def parse_direction_codes(text: str) -> Dict[DirectionValue, str]:
    """
    Parse ``NORTH=0,SOUTH=1`` style overrides into a direction code mapping.
    Names are case-insensitive; directions not listed are left out.
    """
    codes: Dict[DirectionValue, str] = {}
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        name, sep, code = item.partition("=")
        name, code = name.strip().upper(), code.strip()
        if not sep or not code:
            raise ValueError(f"Direction code override {item!r} must look like NAME=CODE.")
        try:
            codes[DirectionValue[name]] = code
        except KeyError as exc:
            raise ValueError(f"Unknown direction {name!r} in direction code overrides.") from exc
    return codes


@dataclass(frozen=True, slots=True)
class NexTripConfig:
    """Read-only settings shared by every request a client makes."""

    base_url: str = NEXTRIP_BASE_URL
    headers: Dict[str, str] = field(default_factory=_default_headers)
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    direction_codes: Mapping[DirectionValue, str] = field(default_factory=_default_direction_codes)

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must be provided.")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive.")
        missing = [d.name for d in DirectionValue if not self.direction_codes.get(d)]
        if missing:
            raise ValueError(f"direction_codes has no code for {', '.join(missing)}.")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(self, "direction_codes", dict(self.direction_codes))

    def direction_code(self, direction: DirectionValue) -> str:
        return self.direction_codes[direction]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "NexTripConfig":
        """
        Build a config from NEXTRIP_BASE_URL, NEXTRIP_TIMEOUT_SECONDS and
        NEXTRIP_DIRECTION_CODES, falling back to the compiled-in defaults.
        """
        env = os.environ if environ is None else environ

        raw_timeout = env.get("NEXTRIP_TIMEOUT_SECONDS")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT_SECONDS
        except ValueError as exc:
            raise ValueError(
                f"NEXTRIP_TIMEOUT_SECONDS must be a number, got {raw_timeout!r}") from exc

        direction_codes = _default_direction_codes()
        direction_codes.update(parse_direction_codes(env.get("NEXTRIP_DIRECTION_CODES") or ""))

        return cls(
            base_url=env.get("NEXTRIP_BASE_URL") or NEXTRIP_BASE_URL,
            timeout_seconds=timeout,
            direction_codes=direction_codes,
        )
