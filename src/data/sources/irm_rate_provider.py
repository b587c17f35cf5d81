"""On-chain borrow rate reads from the Morpho interest rate model."""

import logging
from dataclasses import replace
from typing import Optional

from web3 import AsyncWeb3, AsyncHTTPProvider

from config.settings import Settings, get_settings
from src.core.errors import ChainCallFailure
from src.core.models import MarketRecord
from src.data.clients.morpho.parser import MorphoParser
from src.protocols.morpho.abis import INTEREST_RATE_MODEL_ABI

logger = logging.getLogger(__name__)


def create_web3(settings: Optional[Settings] = None) -> AsyncWeb3:
    """Create the AsyncWeb3 handle for the configured RPC endpoint."""
    settings = settings or get_settings()
    return AsyncWeb3(AsyncHTTPProvider(settings.rpc_url))


class IrmRateProvider:
    """Reads current per-second borrow rates via `borrowRateView`.

    The web3 handle is passed in so callers control its lifetime and tests
    can substitute a double. Lookups never raise: any failure is logged and
    reported as None.
    """

    def __init__(
        self,
        web3: AsyncWeb3,
        settings: Optional[Settings] = None,
        irm_address: Optional[str] = None,
    ):
        self.settings = settings or get_settings()
        self._web3 = web3
        self.irm_address = AsyncWeb3.to_checksum_address(irm_address or self.settings.irm_address)
        self._contract = web3.eth.contract(
            address=self.irm_address,
            abi=INTEREST_RATE_MODEL_ABI,
        )
        self._parser = MorphoParser()

    def _market_params_tuple(self, market: MarketRecord) -> tuple:
        params = self._parser.build_market_params(market)
        return replace(
            params,
            loan_token=AsyncWeb3.to_checksum_address(params.loan_token),
            collateral_token=AsyncWeb3.to_checksum_address(params.collateral_token),
            oracle=AsyncWeb3.to_checksum_address(params.oracle),
            irm=AsyncWeb3.to_checksum_address(params.irm),
        ).as_tuple()

    async def get_borrow_rate(self, market: MarketRecord) -> Optional[str]:
        """Fetch the current borrow rate per second for a market.

        Args:
            market: Raw market record from the Morpho API

        Returns:
            WAD-scaled rate per second as a decimal string, or None on failure
        """
        market_key = market.get("uniqueKey", "<unknown>") if isinstance(market, dict) else "<unknown>"
        try:
            market_params = self._market_params_tuple(market)
            market_struct = self._parser.build_market_struct(market).as_tuple()

            rate = await self._contract.functions.borrowRateView(
                market_params,
                market_struct,
            ).call()
            rate = int(rate)
        except Exception as e:
            failure = ChainCallFailure(market_key, e)
            logger.warning(str(failure))
            return None

        logger.debug(
            f"Borrow rate for market {market_key}: "
            f"rate={rate} "
            f"rateInEther={self._parser.format_units(rate, 18)} "
            f"ratePerYear={self._parser.annualize_rate(rate)}"
        )
        return str(rate)
