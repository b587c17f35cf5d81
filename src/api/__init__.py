"""HTTP API for the Morpho markets relay."""

from .app import create_app
from .markets import PIPELINE_KEY, parse_markets_query, parse_page_size

__all__ = [
    "create_app",
    "PIPELINE_KEY",
    "parse_markets_query",
    "parse_page_size",
]
