"""
Shared value types for the Sui transaction client.
"""

import base64
import binascii
from enum import Enum
from typing import Any, Dict, Union


# Hex-encoded, 0x-prefixed account address
SuiAddress = str

# Raw node responses are passed through to callers untouched
SuiExecuteTransactionResponse = Dict[str, Any]
FaucetResponse = Dict[str, Any]

HttpHeaders = Dict[str, str]


class ExecuteTransactionRequestType(str, Enum):
    """Confirmation mode requested from the full node on submission."""
    IMMEDIATE_RETURN = "ImmediateReturn"
    WAIT_FOR_TX_CERT = "WaitForTxCert"
    WAIT_FOR_EFFECTS_CERT = "WaitForEffectsCert"      # Certified effects, not necessarily executed locally
    WAIT_FOR_LOCAL_EXECUTION = "WaitForLocalExecution"  # Executed and indexed by the submitting node


DEFAULT_REQUEST_TYPE = ExecuteTransactionRequestType.WAIT_FOR_LOCAL_EXECUTION


class SignatureScheme(str, Enum):
    """Signature schemes understood by the network."""
    ED25519 = "ED25519"
    SECP256K1 = "Secp256k1"

    @property
    def flag(self) -> int:
        """Single-byte scheme flag prefixed to public keys when deriving addresses."""
        return 0x00 if self is SignatureScheme.ED25519 else 0x01


class Base64DataBuffer:
    """
    Immutable byte buffer that renders as base64.

    Transaction bytes, signatures and public keys all travel over JSON-RPC
    as base64 strings; this keeps the raw bytes and the wire form together.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Union[bytes, bytearray, memoryview, str, "Base64DataBuffer"]):
        if isinstance(data, Base64DataBuffer):
            self._data = data._data
        elif isinstance(data, str):
            self._data = _decode_base64(data)
        else:
            self._data = bytes(data)

    @classmethod
    def from_base64(cls, encoded: str) -> "Base64DataBuffer":
        return cls(_decode_base64(encoded))

    def get_data(self) -> bytes:
        return self._data

    def get_length(self) -> int:
        return len(self._data)

    def to_base64(self) -> str:
        return base64.b64encode(self._data).decode("ascii")

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return self.to_base64()

    def __repr__(self) -> str:
        return f"Base64DataBuffer({self.to_base64()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Base64DataBuffer):
            return self._data == other._data
        if isinstance(other, (bytes, bytearray)):
            return self._data == bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)


def _decode_base64(encoded: str) -> bytes:
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 data: {e}") from e
