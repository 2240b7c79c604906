"""Remote price feed client with bounded exponential backoff."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any

import httpx

from wallet.config import Settings
from wallet.exceptions import InvalidInputError, PriceFetchError
from wallet.prices.table import build_price_table, parse_price_entries

logger = logging.getLogger(__name__)

MAX_RETRIES = 3
INITIAL_BACKOFF = 1.0
MAX_BACKOFF = 8.0
DEFAULT_TIMEOUT = 10.0

RETRYABLE_STATUS = {429, 500, 502, 503, 504}


def backoff_delay(attempt: int, initial: float = INITIAL_BACKOFF, maximum: float = MAX_BACKOFF) -> float:
    """Delay before retry number `attempt + 1`: doubles each time, capped at `maximum`."""
    return min(initial * (2**attempt), maximum)


class PriceFetcher:
    """Fetches the price feed and collapses it into a price table."""

    def __init__(
        self,
        url: str,
        max_retries: int = MAX_RETRIES,
        initial_backoff: float = INITIAL_BACKOFF,
        max_backoff: float = MAX_BACKOFF,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self.url = url
        self.max_retries = max_retries
        self.initial_backoff = initial_backoff
        self.max_backoff = max_backoff
        self.timeout = timeout
        self._client = client
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: Settings, client: httpx.AsyncClient | None = None) -> "PriceFetcher":
        return cls(
            url=settings.prices_url,
            max_retries=settings.fetch_max_retries,
            initial_backoff=settings.fetch_initial_backoff,
            max_backoff=settings.fetch_max_backoff,
            timeout=settings.fetch_timeout,
            client=client,
        )

    async def _get(self, client: httpx.AsyncClient) -> Any:
        response = await client.get(self.url)
        response.raise_for_status()
        return response.json()

    async def _request(self) -> Any:
        if self._client is not None:
            return await self._get(self._client)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._get(client)

    async def fetch(
        self,
        as_of: datetime | None = None,
        max_age: timedelta | None = None,
    ) -> dict[str, Decimal]:
        """Download the feed and return one price per currency.

        Transport errors, 429 and 5xx responses are retried; other HTTP
        errors and malformed payloads fail immediately.

        Raises:
            PriceFetchError: The feed could not be read.
        """
        last_error: Exception | None = None
        for attempt in range(self.max_retries):
            try:
                payload = await self._request()
            except httpx.HTTPStatusError as exc:
                if exc.response.status_code not in RETRYABLE_STATUS:
                    raise PriceFetchError(self.url, f"HTTP {exc.response.status_code}") from exc
                last_error = exc
            except httpx.TransportError as exc:
                last_error = exc
            except httpx.RequestError as exc:
                raise PriceFetchError(self.url, str(exc)) from exc
            except ValueError as exc:
                raise PriceFetchError(self.url, f"response is not valid JSON: {exc}") from exc
            else:
                try:
                    table = build_price_table(parse_price_entries(payload), as_of=as_of, max_age=max_age)
                except InvalidInputError as exc:
                    raise PriceFetchError(self.url, str(exc)) from exc
                logger.info("Fetched %d prices from %s", len(table), self.url)
                return table

            if attempt < self.max_retries - 1:
                delay = backoff_delay(attempt, self.initial_backoff, self.max_backoff)
                logger.warning(
                    "Price fetch failed (attempt %d/%d): %s. Retrying in %.1fs...",
                    attempt + 1,
                    self.max_retries,
                    last_error,
                    delay,
                )
                await self._sleep(delay)

        raise PriceFetchError(self.url, f"failed after {self.max_retries} attempts: {last_error}")

    async def fetch_or_empty(
        self,
        as_of: datetime | None = None,
        max_age: timedelta | None = None,
    ) -> dict[str, Decimal]:
        """Like fetch, but an unavailable feed yields an empty table."""
        try:
            return await self.fetch(as_of=as_of, max_age=max_age)
        except PriceFetchError as exc:
            logger.error("%s; continuing with an empty price table", exc)
            return {}
