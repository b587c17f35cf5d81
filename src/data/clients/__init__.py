"""Protocol clients module."""

from src.data.clients.morpho import MorphoClient, MorphoParser

__all__ = [
    "MorphoClient",
    "MorphoParser",
]
