from typing import Callable, List

import httpx
import pytest

from nextrip import NexTripClient, NexTripConfig


TEST_BASE_URL = "http://nextrip.test/nextrip"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def json_transport(payload, status_code: int = 200) -> RecordingTransport:
    return RecordingTransport(lambda request: httpx.Response(status_code, json=payload))


@pytest.fixture
def make_client() -> Callable[[httpx.AsyncBaseTransport], NexTripClient]:
    def _make(transport: httpx.AsyncBaseTransport) -> NexTripClient:
        return NexTripClient(NexTripConfig(base_url=TEST_BASE_URL), transport=transport)

    return _make
