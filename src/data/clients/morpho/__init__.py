"""Morpho protocol client module."""

from src.data.clients.morpho.client import MorphoClient
from src.data.clients.morpho.parser import MorphoParser

__all__ = [
    "MorphoClient",
    "MorphoParser",
]
