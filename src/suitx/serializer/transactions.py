"""
Transaction intents.

Typed descriptions of the transactions the client can build, prior to
serialization. Field names follow the node's JSON-RPC parameter order.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Sequence, Union

from suitx.types import Base64DataBuffer, SuiAddress

ObjectId = str


class TransactionKind(str, Enum):
    """Tags accepted by ``sign_and_execute_transaction``."""
    BYTES = "bytes"
    MOVE_CALL = "moveCall"
    TRANSFER_SUI = "transferSui"
    TRANSFER_OBJECT = "transferObject"
    MERGE_COIN = "mergeCoin"
    SPLIT_COIN = "splitCoin"
    PAY = "pay"
    PAY_SUI = "paySui"
    PAY_ALL_SUI = "payAllSui"
    PUBLISH = "publish"


@dataclass(frozen=True)
class TransferObjectTransaction:
    object_id: ObjectId
    gas_budget: int
    recipient: SuiAddress
    gas_payment: Optional[ObjectId] = None


@dataclass(frozen=True)
class TransferSuiTransaction:
    sui_object_id: ObjectId
    gas_budget: int
    recipient: SuiAddress
    amount: Optional[int] = None  # Whole coin when omitted


@dataclass(frozen=True)
class PayTransaction:
    """Send amounts of any coin type to recipients, paying gas separately."""
    input_coins: List[ObjectId]
    recipients: List[SuiAddress]
    amounts: List[int]
    gas_budget: int
    gas_payment: Optional[ObjectId] = None


@dataclass(frozen=True)
class PaySuiTransaction:
    """Send SUI amounts to recipients; gas is taken from the first input coin."""
    input_coins: List[ObjectId]
    recipients: List[SuiAddress]
    amounts: List[int]
    gas_budget: int


@dataclass(frozen=True)
class PayAllSuiTransaction:
    """Send the full balance of the input coins, less gas, to one recipient."""
    input_coins: List[ObjectId]
    recipient: SuiAddress
    gas_budget: int


@dataclass(frozen=True)
class MergeCoinTransaction:
    primary_coin: ObjectId
    coin_to_merge: ObjectId
    gas_budget: int
    gas_payment: Optional[ObjectId] = None


@dataclass(frozen=True)
class SplitCoinTransaction:
    coin_object_id: ObjectId
    split_amounts: List[int]
    gas_budget: int
    gas_payment: Optional[ObjectId] = None


@dataclass(frozen=True)
class MoveCallTransaction:
    package_object_id: ObjectId
    module: str
    function: str
    type_arguments: List[str]
    arguments: List[Any]
    gas_budget: int
    gas_payment: Optional[ObjectId] = None


@dataclass(frozen=True)
class PublishTransaction:
    """
    Publish a Move package.

    ``compiled_modules`` holds each module's bytecode, either raw or
    already base64 encoded.
    """
    compiled_modules: Sequence[Union[bytes, str]]
    gas_budget: int
    gas_payment: Optional[ObjectId] = None


@dataclass(frozen=True)
class SignableTransaction:
    """
    A tagged transaction intent.

    ``kind`` selects the serializer operation; ``data`` is the matching
    payload, or the transaction bytes themselves for kind ``"bytes"``.
    """
    kind: Union[TransactionKind, str]
    data: Any = field(default=None)

    @property
    def kind_value(self) -> str:
        return self.kind.value if isinstance(self.kind, TransactionKind) else str(self.kind)


RawTransaction = Union[bytes, bytearray, Base64DataBuffer]
