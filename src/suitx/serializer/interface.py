"""
Abstract interface for transaction serialization.

A serializer turns a transaction intent into the canonical bytes that get
signed and submitted.
"""

from abc import ABC, abstractmethod

from suitx.serializer.transactions import (
    MergeCoinTransaction,
    MoveCallTransaction,
    PayAllSuiTransaction,
    PaySuiTransaction,
    PayTransaction,
    PublishTransaction,
    SplitCoinTransaction,
    TransferObjectTransaction,
    TransferSuiTransaction,
)
from suitx.types import Base64DataBuffer, SuiAddress


class TxnDataSerializer(ABC):
    """
    Abstract transaction serializer.

    One operation per transaction kind, each taking the signer's address
    and the kind's payload.
    """

    @abstractmethod
    async def new_transfer_object(
        self, signer_address: SuiAddress, txn: TransferObjectTransaction
    ) -> Base64DataBuffer:
        pass

    @abstractmethod
    async def new_transfer_sui(
        self, signer_address: SuiAddress, txn: TransferSuiTransaction
    ) -> Base64DataBuffer:
        pass

    @abstractmethod
    async def new_pay(
        self, signer_address: SuiAddress, txn: PayTransaction
    ) -> Base64DataBuffer:
        pass

    @abstractmethod
    async def new_pay_sui(
        self, signer_address: SuiAddress, txn: PaySuiTransaction
    ) -> Base64DataBuffer:
        pass

    @abstractmethod
    async def new_pay_all_sui(
        self, signer_address: SuiAddress, txn: PayAllSuiTransaction
    ) -> Base64DataBuffer:
        pass

    @abstractmethod
    async def new_merge_coin(
        self, signer_address: SuiAddress, txn: MergeCoinTransaction
    ) -> Base64DataBuffer:
        pass

    @abstractmethod
    async def new_split_coin(
        self, signer_address: SuiAddress, txn: SplitCoinTransaction
    ) -> Base64DataBuffer:
        pass

    @abstractmethod
    async def new_move_call(
        self, signer_address: SuiAddress, txn: MoveCallTransaction
    ) -> Base64DataBuffer:
        pass

    @abstractmethod
    async def new_publish(
        self, signer_address: SuiAddress, txn: PublishTransaction
    ) -> Base64DataBuffer:
        pass


class SerializationError(Exception):
    """Raised when transaction bytes cannot be produced."""
    pass
