"""Core module - models, errors and constants."""

from .models import MarketRecord, MarketParams, MarketStruct, TransformedMarket
from .errors import (
    ErrorKind,
    RelayError,
    FetchError,
    HttpError,
    SchemaMismatch,
    TransportError,
    ChainCallFailure,
)

__all__ = [
    "MarketRecord",
    "MarketParams",
    "MarketStruct",
    "TransformedMarket",
    "ErrorKind",
    "RelayError",
    "FetchError",
    "HttpError",
    "SchemaMismatch",
    "TransportError",
    "ChainCallFailure",
]
