"""
Unit Test Fixtures.

The network is never touched: the transport client is wired to an
httpx.MockTransport that records every request and answers with a
configurable response.
"""

import json
from collections.abc import Callable

import httpx
import pytest

from tsshell.cli.client import TransportClient

EMPTY_RESULT = json.dumps({"results": [{"statement_id": 0}]}).encode()


class RecordingHandler:
    """
    MockTransport handler that stores requests and replays a response.

    Set `response` to change what the server returns, or `error` to an
    exception factory taking the request to simulate a transport failure.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, content=EMPTY_RESULT)
        self.error: Callable[[httpx.Request], Exception] | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def handler() -> RecordingHandler:
    """Recording handler for the mock transport."""
    return RecordingHandler()


@pytest.fixture
def client(handler: RecordingHandler) -> TransportClient:
    """
    Transport client bound to the recording handler.

    Usage:
        def test_query(client, handler):
            client.query("db", "", "show databases", "")
            assert handler.last.url.path == "/query"
    """
    transport_client = TransportClient(
        "db.test", 8086, transport=httpx.MockTransport(handler)
    )
    yield transport_client
    transport_client.close()
