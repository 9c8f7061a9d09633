"""
JSON-RPC transport shared by the provider and serializer.
"""

from suitx.rpc.client import JsonRpcClient, ProviderError, RpcError

__all__ = [
    "JsonRpcClient",
    "ProviderError",
    "RpcError",
]
