"""Morpho GraphQL API client for the markets query."""

import asyncio
import json
import logging
from typing import Any, List, Optional

import aiohttp
from aiolimiter import AsyncLimiter

from config.settings import Settings, get_settings
from src.core.errors import HttpError, SchemaMismatch, TransportError
from src.core.models import MarketRecord
from src.data.cache.raw_response_store import RawResponseStore
from src.protocols.morpho.config import (
    MORPHO_API_RATE_LIMIT,
    MORPHO_API_RATE_WINDOW,
)
from src.protocols.morpho.queries import FetchVariables, build_markets_payload

logger = logging.getLogger(__name__)


class MorphoClient:
    """GraphQL client for the Morpho API markets query.

    The aiohttp session is owned by the caller and may be shared across
    concurrent requests.
    """

    HEADERS = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    def __init__(
        self,
        session: aiohttp.ClientSession,
        settings: Optional[Settings] = None,
        response_store: Optional[RawResponseStore] = None,
    ):
        self.settings = settings or get_settings()
        self._session = session
        self._response_store = response_store or RawResponseStore(self.settings)
        self._rate_limiter = AsyncLimiter(
            MORPHO_API_RATE_LIMIT, MORPHO_API_RATE_WINDOW
        )

    async def _post(self, payload: dict) -> tuple:
        """POST the payload and return (status, body text).

        Undecodable bytes are replaced so the body is always available for
        diagnostics and error reporting.
        """
        async with self._rate_limiter:
            async with self._session.post(
                self.settings.morpho_api_url,
                json=payload,
                headers=self.HEADERS,
            ) as response:
                return response.status, await response.text(errors="replace")

    @staticmethod
    def _http_error(status: int, body: str) -> HttpError:
        """Build an HttpError, keeping the parsed body when it is JSON."""
        try:
            return HttpError(status, details=json.loads(body))
        except ValueError:
            return HttpError(status, raw_body=body)

    @staticmethod
    def _extract_items(result: Any) -> Optional[List[MarketRecord]]:
        """Return `data.markets.items` or None when the path is missing."""
        if not isinstance(result, dict):
            return None
        data = result.get("data")
        if not isinstance(data, dict):
            return None
        markets = data.get("markets")
        if not isinstance(markets, dict):
            return None
        items = markets.get("items")
        if not isinstance(items, list):
            return None
        return items

    async def fetch_markets(
        self,
        variables: Optional[FetchVariables] = None,
    ) -> List[MarketRecord]:
        """Fetch market records from the Morpho API.

        Args:
            variables: Query variables (filters, page size, ordering)

        Returns:
            The `data.markets.items` list, verbatim

        Raises:
            HttpError: Non-2xx response
            SchemaMismatch: 2xx response without `data.markets.items`
            TransportError: Connection failure or non-JSON 2xx body
        """
        payload = build_markets_payload(variables)
        logger.debug(f"Fetching markets with variables: {payload['variables']}")

        try:
            status, body = await self._post(payload)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Failed to reach Morpho API at {self.settings.morpho_api_url}: {e!r}")
            raise TransportError(str(e) or repr(e)) from e

        self._response_store.save(body)

        if not 200 <= status < 300:
            logger.error(f"HTTP error! status: {status} {body}")
            raise self._http_error(status, body)

        try:
            result = json.loads(body)
        except ValueError as e:
            logger.error(f"Morpho API returned a non-JSON body: {e}")
            raise TransportError(str(e)) from e

        items = self._extract_items(result)
        if items is None:
            logger.error(
                f"GraphQL query successful but did not return the expected data structure: {result}"
            )
            raise SchemaMismatch(result)

        logger.info(f"Fetched {len(items)} markets from Morpho API")
        return items
