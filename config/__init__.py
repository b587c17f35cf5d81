"""Configuration module for the Morpho markets relay."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
