"""Market data models."""

from dataclasses import asdict, astuple, dataclass
from typing import Any, Dict

# Raw market item as returned by the Morpho API, passed through unvalidated:
# {
#     "uniqueKey": str,
#     "loanAsset": {"address", "decimals", "symbol", "priceUsd", "chain": {"network"}},
#     "collateralAsset": {"address", "symbol"} | None,
#     "oracleAddress": str,
#     "irmAddress": str,
#     "lltv": str,  # WAD-scaled
#     "state": {
#         "price", "fee", "supplyAssets", "borrowAssets", "supplyShares",
#         "borrowShares", "timestamp",
#         "rewards": [{"yearlySupplyTokens", "asset": {"decimals", "priceUsd"}}] | None,
#     },
# }
MarketRecord = Dict[str, Any]


@dataclass(frozen=True)
class MarketParams:
    """Morpho Blue `MarketParams` struct."""

    loan_token: str
    collateral_token: str
    oracle: str
    irm: str
    lltv: int

    def as_tuple(self) -> tuple:
        return astuple(self)


@dataclass(frozen=True)
class MarketStruct:
    """Morpho Blue `Market` struct (the market's accounting state)."""

    total_supply_assets: int
    total_supply_shares: int
    total_borrow_assets: int
    total_borrow_shares: int
    last_update: int
    fee: int  # WAD-scaled

    def as_tuple(self) -> tuple:
        return astuple(self)


@dataclass
class TransformedMarket:
    """Flat market record served by the relay."""

    id: str
    name: str
    network: str
    protocol: str
    source: str
    token_price: float
    total_supplied: float  # USD
    total_borrowed: float  # USD
    fee_percentage: Any
    optimal_usage_ratio: float
    reserve_factor: float
    yearlySupplyTokens: str
    rewardTokenDecimals: int
    rewardTokenPriceUsd: str
    rate_per_second: str  # WAD-scaled borrow rate per second

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
