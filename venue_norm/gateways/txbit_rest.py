"""Txbit public REST client.

Fetches raw response envelopes from the unauthenticated endpoints and
returns them undecoded beyond JSON. Normalization happens in the engine.
No retries, no rate limiting, no signing.
"""
from typing import Any

import httpx

from ..config.venue_config import VenueConfig
from ..core.errors import VenueError
from ..utils.logging import get_logger

logger = get_logger(__name__)

PUBLIC_ENDPOINTS = (
    "getmarkets",
    "getcurrencies",
    "getorderbook",
    "getmarketsummary",
    "getmarketsummaries",
    "getmarkethistory",
)


class TxbitPublicClient:
    """REST client for Txbit public market data."""

    def __init__(self, config: VenueConfig | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config or VenueConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self.config.base_url.rstrip("/")

    async def connect(self) -> None:
        """Initialize HTTP client."""
        self._client = httpx.AsyncClient(
            timeout=self.config.request_timeout_sec,
            transport=self._transport,
        )

    async def disconnect(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch_raw(self, endpoint: str, params: dict[str, Any] | None = None) -> dict:
        """
        GET a public endpoint and return the decoded envelope.

        Raises:
            ConnectionError: client not connected
            httpx.HTTPStatusError: non-2xx response
            VenueError: the venue answered success=false
        """
        if not self._client:
            raise ConnectionError("Client not connected. Call connect() first.")
        if endpoint not in PUBLIC_ENDPOINTS:
            raise ValueError(f"Unknown public endpoint: {endpoint}")

        url = f"{self.base_url}/public/{endpoint}"
        response = await self._client.get(url, params=params or None)
        response.raise_for_status()
        data = response.json()

        if isinstance(data, dict) and data.get(self.config.success_key) is False:
            message = data.get(self.config.message_key) or "request failed"
            raise VenueError(str(message), venue=self.config.venue_id, context={"endpoint": endpoint})

        logger.debug(f"GET {endpoint} {params or ''} -> {response.status_code}")
        return data

    async def fetch_markets(self) -> dict:
        return await self.fetch_raw("getmarkets")

    async def fetch_currencies(self) -> dict:
        return await self.fetch_raw("getcurrencies")

    async def fetch_order_book(self, market_id: str, depth: int | None = None) -> dict:
        params: dict[str, Any] = {"market": market_id, "type": "both"}
        if depth is not None:
            params["depth"] = depth
        return await self.fetch_raw("getorderbook", params)

    async def fetch_ticker(self, market_id: str) -> dict:
        return await self.fetch_raw("getmarketsummary", {"market": market_id})

    async def fetch_tickers(self) -> dict:
        return await self.fetch_raw("getmarketsummaries")

    async def fetch_trades(self, market_id: str) -> dict:
        return await self.fetch_raw("getmarkethistory", {"market": market_id})

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()
