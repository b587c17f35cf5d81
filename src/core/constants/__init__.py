"""Core constants module.

Re-exports all constants for convenience.
"""

from src.core.constants.generic import (
    SECONDS_PER_YEAR,
    WAD,
    DEFAULT_TOKEN_DECIMALS,
    ZERO_ADDRESS,
)

# Re-export Morpho-specific constants
# These live in src.protocols.morpho.config
from src.protocols.morpho.config import (
    MORPHO_API_RATE_LIMIT,
    MORPHO_API_RATE_WINDOW,
    ADAPTIVE_CURVE_IRM_ADDRESS,
)

__all__ = [
    # Generic
    "SECONDS_PER_YEAR",
    "WAD",
    "DEFAULT_TOKEN_DECIMALS",
    "ZERO_ADDRESS",
    # Morpho-specific
    "MORPHO_API_RATE_LIMIT",
    "MORPHO_API_RATE_WINDOW",
    "ADAPTIVE_CURVE_IRM_ADDRESS",
]
