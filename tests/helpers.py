"""Mock gateway transports shared by unit and CLI tests."""

import json
from collections.abc import Callable
from typing import Any

import httpx

TEST_BASE_URL = "http://gateway.test:18789"

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def bodies(self) -> list[Any]:
        return [json.loads(r.content) if r.content else None for r in self.requests]


def json_response(payload: Any, status_code: int = 200) -> Handler:
    """Handler answering every request with the given JSON payload."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return _handler


def text_response(body: str, status_code: int = 200) -> Handler:
    """Handler answering every request with a raw text body."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=body.encode())

    return _handler


def raising(exc: Exception) -> Handler:
    """Handler that fails every request at the transport level."""

    def _handler(request: httpx.Request) -> httpx.Response:
        raise exc

    return _handler
