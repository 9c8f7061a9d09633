"""
Network Provider Layer.

Provides transaction submission and faucet funding against a Sui node.
"""

from suitx.provider.interface import (
    FaucetRequestError,
    Provider,
    ProviderError,
    SerializerHints,
)
from suitx.provider.json_rpc import JsonRpcProvider
from suitx.provider.void import VoidProvider

__all__ = [
    "Provider",
    "ProviderError",
    "FaucetRequestError",
    "SerializerHints",
    "JsonRpcProvider",
    "VoidProvider",
]
