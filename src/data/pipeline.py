"""Fetch, enrich and transform pipeline for Morpho markets."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from config.settings import Settings, get_settings
from src.core.models import MarketRecord, TransformedMarket
from src.data.clients.morpho.client import MorphoClient
from src.data.clients.morpho.parser import MorphoParser
from src.data.sources.irm_rate_provider import IrmRateProvider
from src.protocols.morpho.queries import FetchVariables

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Transformed markets in fetch order, plus the keys whose rate lookup failed."""

    markets: List[TransformedMarket] = field(default_factory=list)
    failed_rate_lookups: List[str] = field(default_factory=list)


class MarketsPipeline:
    """Orchestrates the markets fetch and per-market rate enrichment.

    Every fetched market is enriched and transformed concurrently through a
    fixed-size worker group. Output order matches fetch order.
    """

    def __init__(
        self,
        client: MorphoClient,
        rate_provider: IrmRateProvider,
        settings: Optional[Settings] = None,
        parser: Optional[MorphoParser] = None,
    ):
        """Initialize the pipeline.

        Args:
            client: Morpho GraphQL client
            rate_provider: On-chain borrow rate reader
            settings: Application settings
            parser: Market parser (defaults to MorphoParser)
        """
        self.settings = settings or get_settings()
        self.client = client
        self.rate_provider = rate_provider
        self._parser = parser or MorphoParser()

    async def run(self, variables: FetchVariables) -> PipelineResult:
        """Fetch markets and enrich each with its on-chain borrow rate.

        Fetch errors propagate; rate lookup failures degrade the affected
        market's rate to the default.
        """
        markets = await self.client.fetch_markets(variables)

        semaphore = asyncio.Semaphore(self.settings.enrich_max_concurrency)

        async def enrich_with_semaphore(market: MarketRecord) -> tuple:
            async with semaphore:
                rate = await self.rate_provider.get_borrow_rate(market)
            return self._parser.transform_market(market, rate), rate is None

        completed = await asyncio.gather(*(enrich_with_semaphore(m) for m in markets))

        result = PipelineResult()
        for transformed, rate_failed in completed:
            result.markets.append(transformed)
            if rate_failed:
                result.failed_rate_lookups.append(transformed.id)

        if result.failed_rate_lookups:
            logger.warning(
                f"Rate lookup failed for {len(result.failed_rate_lookups)}/{len(markets)} markets, "
                f"defaulted to 0: {result.failed_rate_lookups}"
            )
        return result
