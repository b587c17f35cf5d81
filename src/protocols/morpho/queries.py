"""GraphQL queries for the Morpho API."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from gql import gql
from graphql import print_ast

from src.protocols.morpho.config import USDC_ADDRESS


class MorphoQueries:
    """GraphQL query definitions for the Morpho API."""

    # Whitelisted markets for a loan asset, with the state needed for rate reads
    MARKETS_QUERY = """
    query Query(
        $where: MarketFilters = { loanAssetAddress_in: "%s", whitelisted: true }
        $first: Int = 4
        $orderBy: MarketOrderBy
    ) {
        markets(where: $where, first: $first, orderBy: $orderBy) {
            items {
                loanAsset {
                    address
                    decimals
                    symbol
                    priceUsd
                    chain {
                        network
                    }
                }
                uniqueKey
                state {
                    price
                    fee
                    supplyAssets
                    borrowAssets
                    supplyShares
                    borrowShares
                    timestamp
                    rewards {
                        yearlySupplyTokens
                        asset {
                            decimals
                            priceUsd
                        }
                    }
                }
                collateralAsset {
                    address
                    symbol
                }
                irmAddress
                lltv
                oracleAddress
            }
        }
    }
    """ % USDC_ADDRESS


# Parsed once so a malformed document fails at import rather than per request
MARKETS_DOCUMENT = gql(MorphoQueries.MARKETS_QUERY)


@dataclass
class MarketFilters:
    """`where` argument of the markets query."""

    loan_asset_address_in: Optional[str] = None
    whitelisted: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        filters: Dict[str, Any] = {}
        if self.loan_asset_address_in is not None:
            filters["loanAssetAddress_in"] = self.loan_asset_address_in
        if self.whitelisted is not None:
            filters["whitelisted"] = self.whitelisted
        return filters


@dataclass
class FetchVariables:
    """Variables for the markets query. Unset fields are left to the query defaults."""

    where: Optional[MarketFilters] = None
    first: Optional[int] = None
    order_by: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        variables: Dict[str, Any] = {}
        if self.where is not None:
            variables["where"] = self.where.to_dict()
        if self.first is not None:
            variables["first"] = self.first
        if self.order_by is not None:
            variables["orderBy"] = self.order_by
        return variables


def build_markets_payload(variables: Optional[FetchVariables] = None) -> Dict[str, Any]:
    """Build the JSON request body for the markets query."""
    return {
        "query": print_ast(MARKETS_DOCUMENT),
        "variables": variables.to_dict() if variables else {},
    }
