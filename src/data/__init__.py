"""Data layer for the Morpho markets relay."""

from .pipeline import MarketsPipeline, PipelineResult
from .cache.raw_response_store import RawResponseStore
from .clients.morpho import MorphoClient, MorphoParser
from .sources.irm_rate_provider import IrmRateProvider, create_web3

__all__ = [
    "MarketsPipeline",
    "PipelineResult",
    "RawResponseStore",
    "MorphoClient",
    "MorphoParser",
    "IrmRateProvider",
    "create_web3",
]
