"""Tests for the FastAPI relay in main.py."""

import httpx
import pytest
from fastapi.testclient import TestClient

import main
from nextrip import NexTripClient, NexTripConfig

from .conftest import TEST_BASE_URL, RecordingTransport


STOPS = [{"Text": "Target Field Station Platform 2", "Value": "TF22"}]


@pytest.fixture
def upstream():
    responses = {}

    def _handler(request: httpx.Request) -> httpx.Response:
        status, payload = responses.get(request.url.path, (404, None))
        if payload is None:
            return httpx.Response(status, text="not found")
        if isinstance(payload, bytes):
            return httpx.Response(status, content=payload)
        if isinstance(payload, str):
            return httpx.Response(status, text=payload)
        return httpx.Response(status, json=payload)

    transport = RecordingTransport(_handler)
    transport.responses = responses
    return transport


@pytest.fixture
def api(upstream):
    client = NexTripClient(NexTripConfig(base_url=TEST_BASE_URL), transport=upstream)
    main.app.dependency_overrides[main.get_nextrip_client] = lambda: client
    yield TestClient(main.app)
    main.app.dependency_overrides.clear()


def test_healthcheck(api):
    response = api.get("/healthz")

    assert response.status_code == 200
    assert response.text == "ok"


def test_stops_are_relayed_verbatim(api, upstream):
    upstream.responses["/nextrip/Stops/901/1"] = (200, STOPS)

    response = api.get("/stops/901/1")

    assert response.status_code == 200
    assert response.json() == STOPS


def test_timepoint_departures_route(api, upstream):
    departure = {"Actual": False, "DepartureText": "11:32", "Route": "901", "RouteDirection": "SB"}
    upstream.responses["/nextrip/901/1/TF22"] = (200, [departure])

    response = api.get("/departures/901/1/TF22")

    assert response.status_code == 200
    assert response.json() == [departure]


def test_vehicles_without_route_asks_for_all_routes(api, upstream):
    upstream.responses["/nextrip/VehicleLocations/0"] = (200, [])

    response = api.get("/vehicles")

    assert response.status_code == 200
    assert response.json() == []
    assert upstream.requests[-1].url.path == "/nextrip/VehicleLocations/0"


def test_upstream_failure_maps_to_bad_gateway(api, upstream):
    upstream.responses["/nextrip/Routes"] = (500, "service unavailable")

    response = api.get("/routes")

    assert response.status_code == 502
    assert response.json() == {"detail": "service unavailable"}


def test_providers_are_relayed_verbatim(api, upstream):
    providers = [{"Text": "Metro Transit", "Value": "8"}]
    upstream.responses["/nextrip/Providers"] = (200, providers)

    response = api.get("/providers")

    assert response.status_code == 200
    assert response.json() == providers


def test_route_directions_are_relayed_verbatim(api, upstream):
    directions = [{"Text": "NORTHBOUND", "Value": "4"}, {"Text": "SOUTHBOUND", "Value": "1"}]
    upstream.responses["/nextrip/Directions/901"] = (200, directions)

    response = api.get("/directions/901")

    assert response.status_code == 200
    assert response.json() == directions


def test_stop_departures_are_relayed_verbatim(api, upstream):
    departure = {
        "Actual": True,
        "DepartureText": "4 Min",
        "Route": "Blue",
        "VehicleLatitude": 44.9778,
        "VehicleLongitude": -93.265,
    }
    upstream.responses["/nextrip/17940"] = (200, [departure])

    response = api.get("/departures/17940")

    assert response.status_code == 200
    assert response.json() == [departure]


def test_empty_route_is_rejected_without_upstream_call(api, upstream):
    response = api.get("/vehicles", params={"route": ""})

    assert response.status_code == 422
    assert response.json() == {"detail": "route must be provided."}
    assert upstream.requests == []


def test_empty_upstream_body_keeps_a_detail(api, upstream):
    upstream.responses["/nextrip/Routes"] = (204, b"")

    response = api.get("/routes")

    assert response.status_code == 502
    assert response.json() == {"detail": "HTTP 204: empty body"}


def test_other_value_errors_are_not_turned_into_422():
    class BrokenClient:
        async def get_routes(self):
            raise ValueError("bug")

    main.app.dependency_overrides[main.get_nextrip_client] = lambda: BrokenClient()
    try:
        with pytest.raises(ValueError, match="bug"):
            TestClient(main.app).get("/routes")
    finally:
        main.app.dependency_overrides.clear()
