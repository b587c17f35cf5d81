"""aiohttp application for the Morpho markets relay."""

import logging
from typing import AsyncIterator, Optional

import aiohttp
from aiohttp import web

from config.settings import Settings, get_settings
from src.api.markets import PIPELINE_KEY, get_markets, healthcheck
from src.data.cache.raw_response_store import RawResponseStore
from src.data.clients.morpho.client import MorphoClient
from src.data.pipeline import MarketsPipeline
from src.data.sources.irm_rate_provider import IrmRateProvider, create_web3

logger = logging.getLogger(__name__)


def _pipeline_context(settings: Settings):
    """cleanup_ctx that owns the shared HTTP session and web3 handle."""

    async def pipeline_context(app: web.Application) -> AsyncIterator[None]:
        session = aiohttp.ClientSession()
        web3 = create_web3(settings)
        app[PIPELINE_KEY] = MarketsPipeline(
            client=MorphoClient(session, settings, RawResponseStore(settings)),
            rate_provider=IrmRateProvider(web3, settings),
            settings=settings,
        )
        logger.info(f"Using Morpho API at {settings.morpho_api_url}")
        try:
            yield
        finally:
            await session.close()
            await web3.provider.disconnect()
            logger.info("Closed outbound connections")

    return pipeline_context


def create_app(
    settings: Optional[Settings] = None,
    pipeline: Optional[MarketsPipeline] = None,
) -> web.Application:
    """Create the web application.

    Args:
        settings: Application settings
        pipeline: Prebuilt pipeline. When omitted, one is built at startup
            with its own HTTP session and web3 handle.
    """
    settings = settings or get_settings()
    app = web.Application()

    if pipeline is not None:
        app[PIPELINE_KEY] = pipeline
    else:
        app.cleanup_ctx.append(_pipeline_context(settings))

    app.router.add_get("/markets", get_markets)
    app.router.add_get("/health", healthcheck)
    return app
