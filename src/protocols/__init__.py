"""Protocol-specific definitions.

This module contains protocol-specific configuration, contract ABIs
and GraphQL queries.

Currently supported:
- Morpho Blue (src.protocols.morpho)
"""

# Note: We don't import morpho here to avoid circular imports
# Import specific modules as needed:
#   from src.protocols.morpho.config import ADAPTIVE_CURVE_IRM_ADDRESS
#   from src.protocols.morpho.queries import MorphoQueries
