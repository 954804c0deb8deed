"""Pytest fixtures for testing"""

import json
from typing import Any, AsyncGenerator, Dict, List, Optional

import httpx
import pytest

from rozetkapay.client import RozetkaPayClient
from rozetkapay.config import RozetkaPayConfiguration

TEST_BASE_URL = "https://api.example.test"


class RecordingTransport(httpx.AsyncBaseTransport):
    """Answers every request with one canned response and remembers what was sent"""

    def __init__(self, status_code: int = 200, body: Any = "", headers: Optional[Dict[str, str]] = None):
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}
        self.requests: List[httpx.Request] = []

    def respond_with(self, status_code: int = 200, body: Any = "", headers: Optional[Dict[str, str]] = None) -> None:
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def last_body(self) -> Any:
        content = self.last_request.content
        return json.loads(content) if content else None

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        await request.aread()
        self.requests.append(request)
        if isinstance(self.body, (str, bytes)):
            return httpx.Response(self.status_code, content=self.body, headers=self.headers, request=request)
        return httpx.Response(self.status_code, json=self.body, headers=self.headers, request=request)


@pytest.fixture
def configuration() -> RozetkaPayConfiguration:
    """Minimal valid configuration pointing at a test host"""
    return RozetkaPayConfiguration(base_url=TEST_BASE_URL, login="L", password="P")


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
async def http_client(transport: RecordingTransport) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(transport=transport) as client:
        yield client


@pytest.fixture
async def client(
    configuration: RozetkaPayConfiguration,
    http_client: httpx.AsyncClient,
) -> AsyncGenerator[RozetkaPayClient, None]:
    """Client borrowing the recording transport"""
    async with RozetkaPayClient(configuration, http_client=http_client) as rozetkapay:
        yield rozetkapay


@pytest.fixture
def banks_payload() -> Dict[str, Any]:
    """Banks answer with one bank that has no upper limit"""
    return {
        "banks": [
            {
                "name": "BankA",
                "available_periods": [3, 6],
                "limits": {"min_amount": 100.0},
            }
        ],
        "status": "success",
        "total_count": 1,
    }
