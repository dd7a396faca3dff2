import logging
from typing import Any, Dict, List

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from nextrip import InvalidRequestError, NexTripClient, NexTripConfig, TransitServiceError
from nextrip.client import ALL_ROUTES


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("nextrip-relay")

app = FastAPI(title="NexTrip Relay", version="0.1.0")
_nextrip_client = NexTripClient(NexTripConfig.from_env())


def get_nextrip_client() -> NexTripClient:
    return _nextrip_client


@app.exception_handler(TransitServiceError)
async def transit_service_error_handler(request: Request, exc: TransitServiceError) -> JSONResponse:
    logger.warning("NexTrip call for %s failed: %s", request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": exc.message})


@app.exception_handler(InvalidRequestError)
async def invalid_request_handler(request: Request, exc: InvalidRequestError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/healthz", response_class=PlainTextResponse)
async def healthcheck() -> str:
    """Simple healthcheck endpoint for deployment monitoring."""
    return "ok"


@app.get("/providers")
async def providers(client: NexTripClient = Depends(get_nextrip_client)) -> List[Dict[str, Any]]:
    return _as_raw(await client.get_providers())


@app.get("/routes")
async def routes(client: NexTripClient = Depends(get_nextrip_client)) -> List[Dict[str, Any]]:
    return _as_raw(await client.get_routes())


@app.get("/directions/{route}")
async def route_directions(
    route: str, client: NexTripClient = Depends(get_nextrip_client)
) -> List[Dict[str, Any]]:
    return _as_raw(await client.get_route_directions(route))


@app.get("/stops/{route}/{direction}")
async def route_stops(
    route: str, direction: str, client: NexTripClient = Depends(get_nextrip_client)
) -> List[Dict[str, Any]]:
    return _as_raw(await client.get_route_stops(route, direction))


@app.get("/departures/{stop_id}")
async def stop_departures(
    stop_id: str, client: NexTripClient = Depends(get_nextrip_client)
) -> List[Dict[str, Any]]:
    return _as_raw(await client.get_stop_departures(stop_id))


@app.get("/departures/{route}/{direction}/{stop_id}")
async def route_timepoint_departures(
    route: str,
    direction: str,
    stop_id: str,
    client: NexTripClient = Depends(get_nextrip_client),
) -> List[Dict[str, Any]]:
    return _as_raw(await client.get_route_timepoint_departures(route, direction, stop_id))


@app.get("/vehicles")
@app.get("/vehicles/{route}")
async def vehicle_locations(
    route: str = ALL_ROUTES, client: NexTripClient = Depends(get_nextrip_client)
) -> List[Dict[str, Any]]:
    """Vehicles on one route, or on every route when none is given."""
    return _as_raw(await client.get_vehicle_locations(route))


def _as_raw(records: List[Any]) -> List[Dict[str, Any]]:
    return [record.raw for record in records]
