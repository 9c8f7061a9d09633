"""
Configuration management for the Sui transaction client.

Supports configuration via environment variables and .env files.
"""

from enum import Enum
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkType(str, Enum):
    """Sui networks with well-known endpoints."""
    DEVNET = "devnet"
    TESTNET = "testnet"
    LOCAL = "local"


_FULLNODE_URLS = {
    NetworkType.DEVNET: "https://fullnode.devnet.sui.io:443",
    NetworkType.TESTNET: "https://fullnode.testnet.sui.io:443",
    NetworkType.LOCAL: "http://127.0.0.1:9000",
}

_FAUCET_URLS = {
    NetworkType.DEVNET: "https://faucet.devnet.sui.io/gas",
    NetworkType.TESTNET: "https://faucet.testnet.sui.io/gas",
    NetworkType.LOCAL: "http://127.0.0.1:9123/gas",
}


class SuiConfig(BaseSettings):
    """
    Configuration settings for the Sui transaction client.

    All settings can be configured via environment variables with the SUI_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="SUI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Network settings
    network: NetworkType = Field(
        default=NetworkType.DEVNET,
        description="Sui network to connect to"
    )
    fullnode_url: Optional[str] = Field(
        default=None,
        description="Custom full node JSON-RPC URL (optional)"
    )
    faucet_url: Optional[str] = Field(
        default=None,
        description="Custom faucet URL (optional)"
    )
    skip_data_validation: bool = Field(
        default=False,
        description="Skip validation of RPC responses"
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout for node and faucet requests"
    )

    # Signing key settings
    signing_key_seed: Optional[str] = Field(
        default=None,
        description="32-byte Ed25519 seed, base64 or hex encoded"
    )
    signing_key_path: Optional[str] = Field(
        default=None,
        description="Path to a file holding the encoded seed"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format"
    )

    @property
    def fullnode_endpoint(self) -> str:
        """Get the full node URL based on network."""
        if self.fullnode_url:
            return self.fullnode_url
        return _FULLNODE_URLS[self.network]

    @property
    def faucet_endpoint(self) -> str:
        """Get the faucet URL based on network."""
        if self.faucet_url:
            return self.faucet_url
        return _FAUCET_URLS[self.network]


# Global config instance
_config: Optional[SuiConfig] = None


def get_config() -> SuiConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = SuiConfig()
    return _config


def set_config(config: SuiConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
