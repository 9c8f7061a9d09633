"""
RPC-backed transaction serializer.

Asks the full node to build transaction bytes through the ``sui_*``
transaction builder JSON-RPC methods.
"""

import base64
from typing import Any, List, Optional

import httpx
import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from suitx.rpc.client import JsonRpcClient, ProviderError
from suitx.serializer.interface import SerializationError, TxnDataSerializer
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

logger = structlog.get_logger(__name__)


class TransactionBytes(BaseModel):
    """Result of the node's transaction builder methods."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    tx_bytes: str = Field(alias="txBytes")
    gas: Optional[Any] = None
    input_objects: Optional[List[Any]] = Field(default=None, alias="inputObjects")

    @field_validator("tx_bytes")
    @classmethod
    def _must_be_base64(cls, value: str) -> str:
        Base64DataBuffer.from_base64(value)
        return value


class RpcTxnDataSerializer(TxnDataSerializer):
    """
    Serializer that delegates transaction building to a full node.

    Args:
        endpoint: Full node JSON-RPC URL
        skip_data_validation: Read ``txBytes`` without validating the response
        timeout: HTTP timeout in seconds
        transport: Optional httpx transport
    """

    def __init__(
        self,
        endpoint: str,
        skip_data_validation: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ):
        self.endpoint = endpoint
        self.skip_data_validation = skip_data_validation
        self.client = JsonRpcClient(endpoint, timeout=timeout, transport=transport)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "RpcTxnDataSerializer":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def _build(self, method: str, params: List[Any]) -> Base64DataBuffer:
        try:
            result = await self.client.request(method, params)
        except ProviderError as e:
            raise SerializationError(f"Error serializing {method} transaction: {e}") from e

        if self.skip_data_validation:
            try:
                return Base64DataBuffer.from_base64(result["txBytes"])
            except (KeyError, TypeError, ValueError) as e:
                raise SerializationError(f"Malformed {method} response: {e}") from e

        try:
            tx = TransactionBytes.model_validate(result)
        except ValidationError as e:
            raise SerializationError(f"Invalid {method} response: {e}") from e

        logger.debug("tx_bytes_built", method=method, size=len(tx.tx_bytes))
        return Base64DataBuffer.from_base64(tx.tx_bytes)

    async def new_transfer_object(
        self, signer_address: SuiAddress, txn: TransferObjectTransaction
    ) -> Base64DataBuffer:
        return await self._build(
            "sui_transferObject",
            [signer_address, txn.object_id, txn.gas_payment, txn.gas_budget, txn.recipient],
        )

    async def new_transfer_sui(
        self, signer_address: SuiAddress, txn: TransferSuiTransaction
    ) -> Base64DataBuffer:
        return await self._build(
            "sui_transferSui",
            [signer_address, txn.sui_object_id, txn.gas_budget, txn.recipient, txn.amount],
        )

    async def new_pay(
        self, signer_address: SuiAddress, txn: PayTransaction
    ) -> Base64DataBuffer:
        return await self._build(
            "sui_pay",
            [
                signer_address,
                list(txn.input_coins),
                list(txn.recipients),
                list(txn.amounts),
                txn.gas_payment,
                txn.gas_budget,
            ],
        )

    async def new_pay_sui(
        self, signer_address: SuiAddress, txn: PaySuiTransaction
    ) -> Base64DataBuffer:
        return await self._build(
            "sui_paySui",
            [
                signer_address,
                list(txn.input_coins),
                list(txn.recipients),
                list(txn.amounts),
                txn.gas_budget,
            ],
        )

    async def new_pay_all_sui(
        self, signer_address: SuiAddress, txn: PayAllSuiTransaction
    ) -> Base64DataBuffer:
        return await self._build(
            "sui_payAllSui",
            [signer_address, list(txn.input_coins), txn.recipient, txn.gas_budget],
        )

    async def new_merge_coin(
        self, signer_address: SuiAddress, txn: MergeCoinTransaction
    ) -> Base64DataBuffer:
        return await self._build(
            "sui_mergeCoins",
            [signer_address, txn.primary_coin, txn.coin_to_merge, txn.gas_payment, txn.gas_budget],
        )

    async def new_split_coin(
        self, signer_address: SuiAddress, txn: SplitCoinTransaction
    ) -> Base64DataBuffer:
        return await self._build(
            "sui_splitCoin",
            [
                signer_address,
                txn.coin_object_id,
                list(txn.split_amounts),
                txn.gas_payment,
                txn.gas_budget,
            ],
        )

    async def new_move_call(
        self, signer_address: SuiAddress, txn: MoveCallTransaction
    ) -> Base64DataBuffer:
        return await self._build(
            "sui_moveCall",
            [
                signer_address,
                txn.package_object_id,
                txn.module,
                txn.function,
                list(txn.type_arguments),
                list(txn.arguments),
                txn.gas_payment,
                txn.gas_budget,
            ],
        )

    async def new_publish(
        self, signer_address: SuiAddress, txn: PublishTransaction
    ) -> Base64DataBuffer:
        # The node expects each module as a base64 string
        modules = [
            m if isinstance(m, str) else base64.b64encode(bytes(m)).decode("ascii")
            for m in txn.compiled_modules
        ]
        return await self._build(
            "sui_publish",
            [signer_address, modules, txn.gas_payment, txn.gas_budget],
        )
