"""Morpho protocol-specific definitions.

Configuration: src.protocols.morpho.config
Contract ABIs: src.protocols.morpho.abis
GraphQL Queries: src.protocols.morpho.queries
"""

# Export config constants directly (no circular import issues)
from .config import (
    TARGET_UTILIZATION,
    MORPHO_API_RATE_LIMIT,
    MORPHO_API_RATE_WINDOW,
    ADAPTIVE_CURVE_IRM_ADDRESS,
    MORPHO_API_URL,
    DEFAULT_PAGE_SIZE,
    PROTOCOL_NAME,
)
from .abis import INTEREST_RATE_MODEL_ABI

# Use: from src.protocols.morpho.queries import MorphoQueries, FetchVariables

__all__ = [
    "TARGET_UTILIZATION",
    "MORPHO_API_RATE_LIMIT",
    "MORPHO_API_RATE_WINDOW",
    "ADAPTIVE_CURVE_IRM_ADDRESS",
    "MORPHO_API_URL",
    "DEFAULT_PAGE_SIZE",
    "PROTOCOL_NAME",
    "INTEREST_RATE_MODEL_ABI",
]
