"""GET /markets handler."""

import logging
from typing import Mapping, Optional

from aiohttp import web

from src.core.errors import FetchError
from src.data.pipeline import MarketsPipeline
from src.protocols.morpho.config import DEFAULT_PAGE_SIZE
from src.protocols.morpho.queries import FetchVariables, MarketFilters

logger = logging.getLogger(__name__)

PIPELINE_KEY = web.AppKey("pipeline", MarketsPipeline)

MISSING_LOAN_ASSET_MESSAGE = "Missing or invalid required query parameter: loanAssetAddress"
RATE_FAILURES_HEADER = "X-Rate-Lookup-Failures"


class InvalidParameter(ValueError):
    """A required query parameter is missing or malformed."""


def parse_page_size(value: Optional[str], default: int = DEFAULT_PAGE_SIZE) -> int:
    """Parse `first`. Anything but plain ASCII digits for a positive integer falls back to the default."""
    if value is None:
        return default
    stripped = value.strip()
    if not (stripped.isascii() and stripped.isdigit()):
        return default
    first = int(stripped)
    return first if first > 0 else default


def parse_markets_query(query: Mapping[str, str], default_page_size: int = DEFAULT_PAGE_SIZE) -> FetchVariables:
    """Build fetch variables from the request's query parameters.

    Raises:
        InvalidParameter: If loanAssetAddress is missing or empty
    """
    loan_asset_address = query.get("loanAssetAddress")
    if not isinstance(loan_asset_address, str) or not loan_asset_address.strip():
        raise InvalidParameter(MISSING_LOAN_ASSET_MESSAGE)

    order_by = query.get("orderBy") or None

    return FetchVariables(
        where=MarketFilters(
            loan_asset_address_in=loan_asset_address.strip(),
            whitelisted=True,
        ),
        first=parse_page_size(query.get("first"), default_page_size),
        order_by=order_by,
    )


async def get_markets(request: web.Request) -> web.Response:
    """Serve transformed markets for a loan asset."""
    pipeline = request.app[PIPELINE_KEY]

    try:
        variables = parse_markets_query(
            request.query,
            default_page_size=pipeline.settings.default_page_size,
        )
    except InvalidParameter as e:
        return web.json_response({"error": str(e)}, status=400)

    try:
        result = await pipeline.run(variables)
    except FetchError as e:
        logger.error(f"Error in /markets endpoint: {e.message} {e.response_details() or ''}")
        return web.json_response(e.to_response_body(), status=e.status or 500)
    except Exception as e:
        logger.error(f"Unexpected error in /markets endpoint: {e}", exc_info=True)
        return web.json_response(
            {"error": "An internal server error occurred", "details": None},
            status=500,
        )

    return web.json_response(
        [market.to_dict() for market in result.markets],
        headers={RATE_FAILURES_HEADER: str(len(result.failed_rate_lookups))},
    )


async def healthcheck(request: web.Request) -> web.Response:
    """Simple healthcheck endpoint"""
    return web.Response(text="OK")
