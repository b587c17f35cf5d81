"""Pydantic settings for the Morpho markets relay."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.protocols.morpho.config import ADAPTIVE_CURVE_IRM_ADDRESS, DEFAULT_PAGE_SIZE, MORPHO_API_URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Morpho API
    morpho_api_url: str = Field(default=MORPHO_API_URL, description="Morpho GraphQL API URL")

    # Ethereum RPC
    eth_rpc_url: str = Field(default="https://eth.llamarpc.com", description="Public Ethereum JSON-RPC URL")
    eth_alchemy_api_key: Optional[str] = Field(default=None, description="Alchemy API key, overrides eth_rpc_url")
    irm_address: str = Field(default=ADAPTIVE_CURVE_IRM_ADDRESS, description="Interest rate model contract")

    # Diagnostics
    raw_response_path: Path = Field(
        default=Path("raw_graphql_response.json"),
        description="Where the last raw GraphQL response body is written",
    )

    # Pipeline
    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=1000, description="Default `first` value")
    enrich_max_concurrency: int = Field(default=8, ge=1, le=64, description="Concurrent on-chain rate reads")

    # HTTP server
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3000, ge=1, le=65535, description="Listen port")
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator("raw_response_path", mode="before")
    @classmethod
    def parse_raw_response_path(cls, v):
        """Convert string to Path."""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v):
        """Normalize and validate the log level name."""
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def rpc_url(self) -> str:
        """Get the Ethereum RPC URL, preferring Alchemy when a key is set."""
        if self.eth_alchemy_api_key:
            return f"https://eth-mainnet.g.alchemy.com/v2/{self.eth_alchemy_api_key}"
        return self.eth_rpc_url


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
