"""
Sui Transaction Client

Signs transaction intents with a local key and submits them to a Sui full
node, building transaction bytes through the node's JSON-RPC API.
"""

__version__ = "0.1.0"

from suitx.crypto.keypair import Ed25519Keypair
from suitx.provider import JsonRpcProvider, Provider, VoidProvider
from suitx.serializer import RpcTxnDataSerializer, SignableTransaction, TxnDataSerializer
from suitx.signers import RawSigner, SignerWithProvider
from suitx.types import Base64DataBuffer, ExecuteTransactionRequestType

__all__ = [
    "Base64DataBuffer",
    "Ed25519Keypair",
    "ExecuteTransactionRequestType",
    "JsonRpcProvider",
    "Provider",
    "RawSigner",
    "RpcTxnDataSerializer",
    "SignableTransaction",
    "SignerWithProvider",
    "TxnDataSerializer",
    "VoidProvider",
]
