"""Contract ABIs for Morpho Blue interest rate models."""

_MARKET_PARAMS_COMPONENTS = [
    {"internalType": "address", "name": "loanToken", "type": "address"},
    {"internalType": "address", "name": "collateralToken", "type": "address"},
    {"internalType": "address", "name": "oracle", "type": "address"},
    {"internalType": "address", "name": "irm", "type": "address"},
    {"internalType": "uint256", "name": "lltv", "type": "uint256"},
]

_MARKET_COMPONENTS = [
    {"internalType": "uint128", "name": "totalSupplyAssets", "type": "uint128"},
    {"internalType": "uint128", "name": "totalSupplyShares", "type": "uint128"},
    {"internalType": "uint128", "name": "totalBorrowAssets", "type": "uint128"},
    {"internalType": "uint128", "name": "totalBorrowShares", "type": "uint128"},
    {"internalType": "uint128", "name": "lastUpdate", "type": "uint128"},
    {"internalType": "uint128", "name": "fee", "type": "uint128"},
]

# IIrm.borrowRateView: per-second borrow rate (WAD) without mutating IRM state
INTEREST_RATE_MODEL_ABI = [
    {
        "inputs": [
            {
                "components": _MARKET_PARAMS_COMPONENTS,
                "internalType": "struct MarketParams",
                "name": "marketParams",
                "type": "tuple",
            },
            {
                "components": _MARKET_COMPONENTS,
                "internalType": "struct Market",
                "name": "market",
                "type": "tuple",
            },
        ],
        "name": "borrowRateView",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]
