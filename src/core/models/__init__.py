"""Core data models for the Morpho markets relay."""

from .market import MarketRecord, MarketParams, MarketStruct, TransformedMarket

__all__ = [
    "MarketRecord",
    "MarketParams",
    "MarketStruct",
    "TransformedMarket",
]
