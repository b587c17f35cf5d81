"""Entry point for the Morpho markets relay server."""

import logging

from aiohttp import web

from config.settings import get_settings
from src.api.app import create_app
from src.protocols.morpho.config import USDC_ADDRESS

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging and quiet noisy libraries."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)
    logging.getLogger("web3.providers").setLevel(logging.WARNING)
    logging.getLogger("web3.manager").setLevel(logging.WARNING)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = create_app(settings)

    logger.info(f"API server listening at http://localhost:{settings.port}/markets")
    logger.info(
        f"Example usage: http://localhost:{settings.port}/markets"
        f"?loanAssetAddress={USDC_ADDRESS}&first=10&orderBy=SupplyApy"
    )
    web.run_app(app, host=settings.host, port=settings.port, print=None)


if __name__ == "__main__":
    main()
