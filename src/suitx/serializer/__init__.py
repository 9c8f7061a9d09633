"""
Transaction serialization.

Transaction intents and the serializers that turn them into bytes.
"""

from suitx.serializer.interface import SerializationError, TxnDataSerializer
from suitx.serializer.rpc import RpcTxnDataSerializer
from suitx.serializer.transactions import (
    MergeCoinTransaction,
    MoveCallTransaction,
    PayAllSuiTransaction,
    PaySuiTransaction,
    PayTransaction,
    PublishTransaction,
    SignableTransaction,
    SplitCoinTransaction,
    TransactionKind,
    TransferObjectTransaction,
    TransferSuiTransaction,
)

__all__ = [
    "TxnDataSerializer",
    "RpcTxnDataSerializer",
    "SerializationError",
    "SignableTransaction",
    "TransactionKind",
    "MergeCoinTransaction",
    "MoveCallTransaction",
    "PayAllSuiTransaction",
    "PaySuiTransaction",
    "PayTransaction",
    "PublishTransaction",
    "SplitCoinTransaction",
    "TransferObjectTransaction",
    "TransferSuiTransaction",
]
