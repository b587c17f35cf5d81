"""Morpho Blue protocol-specific configuration and constants."""

from decimal import Decimal

# AdaptiveCurveIRM target utilization (90%), reported as the optimal usage ratio
TARGET_UTILIZATION = Decimal("0.9")

# GraphQL API rate limits
MORPHO_API_RATE_LIMIT = 5000  # requests per 5 minutes
MORPHO_API_RATE_WINDOW = 300  # seconds

# Morpho Blue contract addresses (Ethereum Mainnet)
ADAPTIVE_CURVE_IRM_ADDRESS = "0x870aC11D48B15DB9a138Cf899d20F13F79Ba00BC"

# Default API URL
MORPHO_API_URL = "https://api.morpho.org/graphql"

# Default page size for the markets query
DEFAULT_PAGE_SIZE = 10

# USDC on Ethereum mainnet, used in example queries
USDC_ADDRESS = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"

PROTOCOL_NAME = "Morpho"
