# =============================================================================
# core/gateway.py  —  Upstream Request Gateway (Bank of Thailand API)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Issues one authenticated GET against a BOT endpoint and returns a
#   FetchResult: either the parsed JSON body or a classified failure.
#   It never raises for the failures it knows about.
#
# FAILURE CLASSES (core.models.ErrorKind):
#   CONFIGURATION  credential missing        → no network call is made
#   TIMEOUT        deadline exceeded         → in-flight request cancelled
#   UPSTREAM       non-2xx HTTP status       → status code only, no body
#   NETWORK        DNS / connect / TLS error, or a body that is not JSON
#
# DEADLINE:
#   One wall-clock budget for the whole call (connect + send + read + parse),
#   enforced with asyncio.wait_for.  httpx's own per-phase timeouts are
#   disabled so there is exactly one clock.  On expiry wait_for cancels the
#   request task, and the AsyncClient context manager closes the connection.
#   A timed-out call has an unknown outcome upstream.
#
# CONNECTIONS:
#   A fresh httpx.AsyncClient per call.  Nothing is pooled across calls.
#   Redirects are followed; only the final status is classified.
# =============================================================================

import asyncio
import json
import logging
from typing import Any, Callable, Mapping, Optional

import httpx

from core.config import Settings
from core.models import ErrorKind, FetchResult, UpstreamCallSpec

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = "API request timed out"


class RateGateway:
    """Authenticated, time-bounded GETs against the BOT API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        credential: Optional[Callable[[], Optional[str]]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Args:
            settings: Base URLs and deadline.  Defaults to Settings().
            credential: Returns the API key, called on every fetch.
                Defaults to settings.api_key (reads BOT_API_KEY).
            transport: Optional httpx transport; tests pass an
                httpx.MockTransport here.
        """
        self.settings = settings or Settings()
        self._credential = credential or self.settings.api_key
        self._transport = transport

    async def fetch(
        self, base_url: str, endpoint: str, params: Mapping[str, Optional[str]]
    ) -> FetchResult:
        return await self.fetch_spec(UpstreamCallSpec(base_url, endpoint, dict(params)))

    async def fetch_spec(self, spec: UpstreamCallSpec) -> FetchResult:
        api_key = self._credential()
        if not api_key:
            logger.warning("Refusing %s: %s is not set", spec.endpoint, self.settings.api_key_env)
            return FetchResult.fail(ErrorKind.CONFIGURATION, self.settings.missing_key_message)

        headers = {"Authorization": api_key, "Accept": "application/json"}

        try:
            response = await asyncio.wait_for(
                self._get(spec.url, spec.query, headers),
                timeout=self.settings.timeout_seconds,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning("Timed out after %.1fs: %s", self.settings.timeout_seconds, spec.endpoint)
            return FetchResult.fail(ErrorKind.TIMEOUT, TIMEOUT_MESSAGE)
        except httpx.HTTPError as e:
            logger.warning("Network error on %s: %s", spec.endpoint, e)
            return FetchResult.fail(ErrorKind.NETWORK, str(e) or type(e).__name__)

        if not response.is_success:
            # The body may carry upstream internals; only the status leaves here.
            logger.warning("Upstream returned %d for %s", response.status_code, spec.endpoint)
            return FetchResult.fail(
                ErrorKind.UPSTREAM,
                f"API request failed with status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Invalid JSON from %s: %s", spec.endpoint, e)
            return FetchResult.fail(ErrorKind.NETWORK, f"Invalid JSON in API response: {e}")

        return FetchResult.success(data)

    async def _get(self, url: str, query: dict[str, str], headers: dict[str, str]) -> httpx.Response:
        async with httpx.AsyncClient(
            timeout=None, follow_redirects=True, transport=self._transport
        ) as client:
            # Non-streaming: the body is fully read before this returns.
            return await client.get(url, params=query, headers=headers)
