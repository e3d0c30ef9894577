"""
Shared fixtures: a fake BOT API behind httpx.MockTransport and gateways wired to it.
"""

import asyncio
from typing import Any, Callable, Optional

import httpx
import pytest

from core.config import Settings
from core.gateway import RateGateway

TEST_API_KEY = "test-api-key"

SAMPLE_PAYLOAD = {
    "result": {
        "timestamp": "2024-01-31 18:00:00",
        "api": "Daily Weighted-average Interbank Exchange Rate - THB / USD",
        "data": {
            "data_header": {"report_name_th": "อัตราแลกเปลี่ยนถัวเฉลี่ยถ่วงน้ำหนักระหว่างธนาคาร"},
            "data_detail": [
                {"period": "2024-01-02", "rate": "34.2715"},
                {"period": "2024-01-03", "rate": "34.3941"},
            ],
        },
    }
}


class FakeUpstream:
    """Records every request; answers with respond(request) after an optional delay."""

    def __init__(
        self,
        respond: Optional[Callable[[httpx.Request], httpx.Response]] = None,
        delay: Optional[float] = None,
    ) -> None:
        self.requests: list[httpx.Request] = []
        self.respond = respond or (lambda request: httpx.Response(200, json=SAMPLE_PAYLOAD))
        self.delay = delay
        self.cancelled = False

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay is not None:
            try:
                await asyncio.sleep(self.delay)
            except asyncio.CancelledError:
                self.cancelled = True
                raise
        return self.respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def make_gateway(
    upstream: FakeUpstream,
    api_key: Any = TEST_API_KEY,
    timeout_seconds: float = 30.0,
) -> RateGateway:
    return RateGateway(
        Settings(timeout_seconds=timeout_seconds),
        credential=lambda: api_key,
        transport=httpx.MockTransport(upstream),
    )


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def gateway(upstream):
    return make_gateway(upstream)


@pytest.fixture
def deadlines(monkeypatch):
    """Timeouts handed to asyncio.wait_for around RateGateway._get, in call order."""
    seen: list[float] = []
    real_wait_for = asyncio.wait_for

    async def recording_wait_for(awaitable, timeout):
        if getattr(awaitable, "__qualname__", "") == "RateGateway._get":
            seen.append(timeout)
        return await real_wait_for(awaitable, timeout)

    monkeypatch.setattr(asyncio, "wait_for", recording_wait_for)
    return seen
