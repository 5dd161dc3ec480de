"""Shared fixtures: SDK clients wired to a recording httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Dict, List, Optional

import httpx
import pytest
import pytest_asyncio

from eventhook_sdk import AsyncEventWebhookClient, EventWebhookClient

BASE_URL = "https://api.test/v3"


class StubServer:
    """Answers every request with a canned response and records what it saw."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body = "{}"
        self.headers: Dict[str, str] = {}
        self.error: Optional[Exception] = None

    def respond(self, status_code: int, body: str = "", headers: Optional[Dict[str, str]] = None) -> None:
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}

    def respond_json(self, status_code: int, data: object) -> None:
        self.respond(status_code, json.dumps(data))

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, headers=self.headers, content=self.body.encode())

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content)


@pytest.fixture(autouse=True)
def _clear_sendgrid_env(monkeypatch):
    """Keep developer credentials out of the tests."""
    for name in (
        "SENDGRID_API_KEY",
        "SENDGRID_BASE_URL",
        "SENDGRID_TIMEOUT",
        "SENDGRID_ON_BEHALF_OF",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def stub() -> StubServer:
    return StubServer()


@pytest.fixture()
def sync_client(stub: StubServer):
    client = EventWebhookClient(
        api_key="SG.test",
        base_url=BASE_URL,
        transport=httpx.MockTransport(stub),
    )
    yield client
    client.close()


@pytest_asyncio.fixture()
async def async_client(stub: StubServer):
    client = AsyncEventWebhookClient(
        api_key="SG.test",
        base_url=BASE_URL,
        transport=httpx.MockTransport(stub),
    )
    yield client
    await client.close()
