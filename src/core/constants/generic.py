"""Generic constants for DeFi protocol calculations.

These constants are protocol-agnostic and can be used across different protocols.
"""

# Time constants
SECONDS_PER_YEAR = 365 * 24 * 60 * 60  # 31,536,000 (simple, non-leap)

# Precision constants
WAD = 10**18  # Standard 18 decimal precision (used in Morpho, Aave, etc.)

# Default decimals for ERC-20 tokens when the API omits them
DEFAULT_TOKEN_DECIMALS = 18

# Placeholder for "no address configured" in on-chain structs
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
