"""Morpho API response parser.

Converts raw Morpho GraphQL market records into the on-chain structs used
for rate reads and into the flat output records served by the relay.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from src.core.constants import DEFAULT_TOKEN_DECIMALS, SECONDS_PER_YEAR, WAD, ZERO_ADDRESS
from src.core.models import MarketParams, MarketRecord, MarketStruct, TransformedMarket
from src.protocols.morpho.config import PROTOCOL_NAME, TARGET_UTILIZATION

DEFAULT_RATE_PER_SECOND = "0"


class MorphoParser:
    """Parser for Morpho GraphQL API market records."""

    @staticmethod
    def parse_decimal(value: Any) -> Decimal:
        """Safely parse a value to Decimal. Missing or invalid values become 0."""
        if value is None:
            return Decimal("0")
        if isinstance(value, Decimal):
            return value
        try:
            return Decimal(str(value))
        except InvalidOperation:
            return Decimal("0")

    @staticmethod
    def parse_uint(value: Any) -> int:
        """Parse a decimal-string integer for ABI encoding.

        Raises:
            ValueError: If the value is missing, fractional or negative
        """
        if value is None:
            raise ValueError("missing integer value")
        try:
            number = Decimal(str(value))
        except InvalidOperation:
            raise ValueError(f"not a number: {value!r}")
        if number != number.to_integral_value() or number < 0:
            raise ValueError(f"not an unsigned integer: {value!r}")
        return int(number)

    @classmethod
    def parse_fee_wad(cls, value: Any) -> int:
        """Convert the API fee into the WAD-scaled fee stored on-chain.

        The API reports the fee as a fraction (e.g. 0.1 = 10%). Values of 1 or
        more are taken as already WAD-scaled.
        """
        fee = cls.parse_decimal(value)
        if fee >= 1:
            return cls.parse_uint(fee)
        return int(fee * WAD)

    @staticmethod
    def annualize_rate(rate_per_second: Any) -> Decimal:
        """Simple annual rate (as a fraction) from a WAD per-second rate."""
        raw = MorphoParser.parse_decimal(rate_per_second)
        return raw * SECONDS_PER_YEAR / Decimal(WAD)

    @staticmethod
    def format_units(value: Any, decimals: int) -> Decimal:
        """Scale a raw integer amount down by 10**decimals."""
        return MorphoParser.parse_decimal(value) / (Decimal(10) ** decimals)

    # ========== ON-CHAIN STRUCTS ==========

    @classmethod
    def build_market_params(cls, market: MarketRecord) -> MarketParams:
        """Build the `MarketParams` struct from a market record."""
        loan_asset = market.get("loanAsset") or {}
        collateral_asset = market.get("collateralAsset") or {}

        return MarketParams(
            loan_token=loan_asset["address"],
            collateral_token=collateral_asset.get("address") or ZERO_ADDRESS,
            oracle=market["oracleAddress"],
            irm=market["irmAddress"],
            lltv=cls.parse_uint(market.get("lltv")),
        )

    @classmethod
    def build_market_struct(cls, market: MarketRecord) -> MarketStruct:
        """Build the `Market` struct from a market record's state."""
        state = market.get("state") or {}

        return MarketStruct(
            total_supply_assets=cls.parse_uint(state.get("supplyAssets")),
            total_supply_shares=cls.parse_uint(state.get("supplyShares")),
            total_borrow_assets=cls.parse_uint(state.get("borrowAssets")),
            total_borrow_shares=cls.parse_uint(state.get("borrowShares")),
            last_update=cls.parse_uint(state.get("timestamp")),
            fee=cls.parse_fee_wad(state.get("fee")),
        )

    # ========== OUTPUT ==========

    @staticmethod
    def market_name(loan_asset: Dict[str, Any], collateral_asset: Optional[Dict[str, Any]]) -> str:
        """Human-readable market name."""
        loan_symbol = loan_asset.get("symbol") or "???"
        if collateral_asset:
            return f"{collateral_asset.get('symbol') or '???'}/{loan_symbol} Market"
        return f"{loan_symbol} Market"

    @classmethod
    def transform_market(
        cls,
        market: MarketRecord,
        rate_per_second: Optional[str] = None,
    ) -> TransformedMarket:
        """Flatten a market record and its on-chain borrow rate.

        Raw supply and borrow amounts are converted to USD with the loan
        asset's decimals and price. Arithmetic stays in Decimal; floats are
        produced only for the output record.
        """
        loan_asset = market.get("loanAsset") or {}
        collateral_asset = market.get("collateralAsset")
        state = market.get("state") or {}
        network = (loan_asset.get("chain") or {}).get("network") or "Unknown"

        rewards = state.get("rewards") or []
        reward = rewards[0] if rewards else None
        reward_asset = (reward.get("asset") or {}) if reward else {}

        decimals = loan_asset.get("decimals")
        if decimals is None:
            decimals = DEFAULT_TOKEN_DECIMALS
        loan_asset_price = cls.parse_decimal(loan_asset.get("priceUsd"))
        supply_assets_usd = cls.format_units(state.get("supplyAssets"), int(decimals)) * loan_asset_price
        borrow_assets_usd = cls.format_units(state.get("borrowAssets"), int(decimals)) * loan_asset_price

        return TransformedMarket(
            id=market.get("uniqueKey", ""),
            name=cls.market_name(loan_asset, collateral_asset),
            network=network,
            protocol=PROTOCOL_NAME,
            source=f"{PROTOCOL_NAME} {network}",
            token_price=float(loan_asset_price),
            total_supplied=float(supply_assets_usd),
            total_borrowed=float(borrow_assets_usd),
            fee_percentage=state.get("fee"),
            optimal_usage_ratio=float(TARGET_UTILIZATION),
            reserve_factor=0,
            yearlySupplyTokens=str(reward.get("yearlySupplyTokens") or "0") if reward else "0",
            rewardTokenDecimals=reward_asset.get("decimals", DEFAULT_TOKEN_DECIMALS) if reward else DEFAULT_TOKEN_DECIMALS,
            rewardTokenPriceUsd=str(reward_asset.get("priceUsd") or "0") if reward else "0",
            rate_per_second=rate_per_second if rate_per_second is not None else DEFAULT_RATE_PER_SECOND,
        )
