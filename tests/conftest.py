"""Shared test fixtures for event-notifier."""

import json
from pathlib import Path

import httpx
import pytest

from event_notifier.loader import load_event

FIXTURES = Path(__file__).parent / "fixtures"


class RecordingTransport:
    """Fake HTTP boundary that records every request in call order.

    ``responder`` maps (index, request) to an httpx.Response; the default
    echoes the decoded request body back as JSON.
    """

    def __init__(self, responder=None):
        self.requests: list[httpx.Request] = []
        self._responder = responder or self._echo

    @staticmethod
    def _echo(index: int, request: httpx.Request) -> httpx.Response:
        try:
            received = json.loads(request.content)
        except ValueError:
            received = request.content.decode()
        return httpx.Response(200, json={"seq": index, "received": received})

    def handler(self, request: httpx.Request) -> httpx.Response:
        index = len(self.requests)
        self.requests.append(request)
        return self._responder(index, request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def bodies(self) -> list:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def event():
    return load_event(FIXTURES / "event-basic.json")


@pytest.fixture
def transport():
    return RecordingTransport()
