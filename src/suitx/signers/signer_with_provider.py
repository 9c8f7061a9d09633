"""
Signer bound to a provider and serializer.

Turns transaction intents into signed, submitted transactions. Concrete
signers supply the key material; everything else is implemented here once.
"""

from abc import abstractmethod
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

import structlog

from suitx.provider.interface import Provider
from suitx.provider.void import VoidProvider
from suitx.serializer.interface import TxnDataSerializer
from suitx.serializer.rpc import RpcTxnDataSerializer
from suitx.serializer.transactions import (
    MergeCoinTransaction,
    MoveCallTransaction,
    PayAllSuiTransaction,
    PaySuiTransaction,
    PayTransaction,
    PublishTransaction,
    RawTransaction,
    SignableTransaction,
    SplitCoinTransaction,
    TransactionKind,
    TransferObjectTransaction,
    TransferSuiTransaction,
)
from suitx.signers.signer import SignaturePubkeyPair, Signer
from suitx.types import (
    DEFAULT_REQUEST_TYPE,
    Base64DataBuffer,
    ExecuteTransactionRequestType,
    FaucetResponse,
    HttpHeaders,
    SuiAddress,
    SuiExecuteTransactionResponse,
)

logger = structlog.get_logger(__name__)

RequestType = Union[ExecuteTransactionRequestType, str]

# Transaction kind -> method that serializes and executes it
_KIND_HANDLERS: Dict[str, str] = {
    TransactionKind.MOVE_CALL.value: "execute_move_call",
    TransactionKind.TRANSFER_SUI.value: "transfer_sui",
    TransactionKind.TRANSFER_OBJECT.value: "transfer_object",
    TransactionKind.MERGE_COIN.value: "merge_coin",
    TransactionKind.SPLIT_COIN.value: "split_coin",
    TransactionKind.PAY.value: "pay",
    TransactionKind.PAY_SUI.value: "pay_sui",
    TransactionKind.PAY_ALL_SUI.value: "pay_all_sui",
    TransactionKind.PUBLISH.value: "publish",
}


class UnknownTransactionKindError(ValueError):
    """Raised when a transaction intent carries an unrecognized kind."""

    def __init__(self, kind: Any):
        super().__init__(f'Unknown transaction kind: "{kind}"')
        self.kind = kind


class SignerWithProvider(Signer):
    """
    Base class for signers that submit transactions through a provider.

    Sub-classes MUST implement ``get_address``, ``sign_data`` and ``connect``.
    They MAY override the remaining operations.

    Usage:
        ```python
        signer = RawSigner(keypair, JsonRpcProvider())
        response = await signer.transfer_sui(
            TransferSuiTransaction(sui_object_id="0x5", gas_budget=1000, recipient="0x2")
        )
        ```
    """

    def __init__(
        self,
        provider: Optional[Provider] = None,
        serializer: Optional[TxnDataSerializer] = None,
    ):
        """
        Initialize the signer.

        Args:
            provider: Network provider. A VoidProvider is used if not provided.
            serializer: Transaction serializer. Built from the provider's
                serializer hints if not provided.
        """
        self.provider = provider or VoidProvider()
        # A serializer built here is closed by aclose(); one passed in belongs to the caller
        self._owns_serializer = serializer is None
        self.serializer = serializer or self._default_serializer(self.provider)

    @staticmethod
    def _default_serializer(provider: Provider) -> RpcTxnDataSerializer:
        hints = provider.serializer_hints()
        if hints is None:
            return RpcTxnDataSerializer("", skip_data_validation=False)
        return RpcTxnDataSerializer(
            hints.endpoint,
            skip_data_validation=hints.skip_data_validation,
            transport=hints.transport,
            timeout=hints.timeout,
        )

    async def aclose(self) -> None:
        """Release the serializer this signer built for itself."""
        if self._owns_serializer and isinstance(self.serializer, RpcTxnDataSerializer):
            await self.serializer.aclose()

    async def __aenter__(self) -> "SignerWithProvider":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @abstractmethod
    def connect(self, provider: Provider) -> "SignerWithProvider":
        """
        Return a new signer with the same identity bound to ``provider``.

        Raises:
            UnsupportedOperationError: If the signer cannot change providers
        """
        pass

    async def request_sui_from_faucet(
        self,
        http_headers: Optional[HttpHeaders] = None,
    ) -> FaucetResponse:
        """
        Request gas coins from the faucet for this signer's address.

        Args:
            http_headers: Optional request headers
        """
        return await self.provider.request_sui_from_faucet(
            await self.get_address(),
            http_headers,
        )

    async def sign_and_execute_transaction(
        self,
        transaction: Union[RawTransaction, SignableTransaction],
        request_type: RequestType = DEFAULT_REQUEST_TYPE,
    ) -> SuiExecuteTransactionResponse:
        """
        Sign a transaction and submit it to the full node for execution.

        Args:
            transaction: Serialized transaction bytes, or a transaction intent
            request_type: Confirmation mode requested from the node

        Returns:
            The provider's execution response

        Raises:
            UnknownTransactionKindError: If the intent's kind is not recognized
        """
        request_type = ExecuteTransactionRequestType(request_type)

        if isinstance(transaction, (bytes, bytearray, Base64DataBuffer)):
            return await self._sign_and_submit(Base64DataBuffer(transaction), request_type)

        if isinstance(transaction, SignableTransaction):
            kind, data = transaction.kind_value, transaction.data
        elif isinstance(transaction, Mapping):
            kind, data = transaction.get("kind"), transaction.get("data")
            if isinstance(kind, TransactionKind):
                kind = kind.value
        else:
            raise TypeError(
                f"Expected transaction bytes or SignableTransaction, got {type(transaction).__name__}"
            )

        if kind == TransactionKind.BYTES.value:
            return await self._sign_and_submit(Base64DataBuffer(data), request_type)

        handler_name = _KIND_HANDLERS.get(kind) if isinstance(kind, str) else None
        if handler_name is None:
            raise UnknownTransactionKindError(kind)

        return await getattr(self, handler_name)(data, request_type)

    async def _sign_and_submit(
        self,
        tx_bytes: Base64DataBuffer,
        request_type: ExecuteTransactionRequestType,
    ) -> SuiExecuteTransactionResponse:
        sig: SignaturePubkeyPair = await self.sign_data(tx_bytes)
        logger.debug(
            "transaction_signed",
            scheme=sig.signature_scheme.value,
            size=len(tx_bytes),
        )

        response = await self.provider.execute_transaction(
            tx_bytes.to_base64(),
            sig.signature_scheme,
            str(sig.signature),
            str(sig.pub_key),
            request_type,
        )
        logger.info("transaction_submitted", request_type=request_type.value)
        return response

    async def _serialize_and_execute(
        self,
        serialize: Callable[[SuiAddress, Any], Awaitable[Base64DataBuffer]],
        transaction: Any,
        request_type: RequestType,
    ) -> SuiExecuteTransactionResponse:
        signer_address = await self.get_address()
        tx_bytes = await serialize(signer_address, transaction)
        return await self.sign_and_execute_transaction(tx_bytes, request_type)

    async def transfer_object(
        self,
        transaction: TransferObjectTransaction,
        request_type: RequestType = DEFAULT_REQUEST_TYPE,
    ) -> SuiExecuteTransactionResponse:
        """Serialize and sign a ``TransferObject`` transaction and submit it for execution."""
        return await self._serialize_and_execute(
            self.serializer.new_transfer_object, transaction, request_type
        )

    async def transfer_sui(
        self,
        transaction: TransferSuiTransaction,
        request_type: RequestType = DEFAULT_REQUEST_TYPE,
    ) -> SuiExecuteTransactionResponse:
        """Serialize and sign a ``TransferSui`` transaction and submit it for execution."""
        return await self._serialize_and_execute(
            self.serializer.new_transfer_sui, transaction, request_type
        )

    async def pay(
        self,
        transaction: PayTransaction,
        request_type: RequestType = DEFAULT_REQUEST_TYPE,
    ) -> SuiExecuteTransactionResponse:
        """Serialize and sign a ``Pay`` transaction and submit it for execution."""
        return await self._serialize_and_execute(
            self.serializer.new_pay, transaction, request_type
        )

    async def pay_sui(
        self,
        transaction: PaySuiTransaction,
        request_type: RequestType = DEFAULT_REQUEST_TYPE,
    ) -> SuiExecuteTransactionResponse:
        """Serialize and sign a ``PaySui`` transaction and submit it for execution."""
        return await self._serialize_and_execute(
            self.serializer.new_pay_sui, transaction, request_type
        )

    async def pay_all_sui(
        self,
        transaction: PayAllSuiTransaction,
        request_type: RequestType = DEFAULT_REQUEST_TYPE,
    ) -> SuiExecuteTransactionResponse:
        """Serialize and sign a ``PayAllSui`` transaction and submit it for execution."""
        return await self._serialize_and_execute(
            self.serializer.new_pay_all_sui, transaction, request_type
        )

    async def merge_coin(
        self,
        transaction: MergeCoinTransaction,
        request_type: RequestType = DEFAULT_REQUEST_TYPE,
    ) -> SuiExecuteTransactionResponse:
        """Serialize and sign a ``MergeCoin`` transaction and submit it for execution."""
        return await self._serialize_and_execute(
            self.serializer.new_merge_coin, transaction, request_type
        )

    async def split_coin(
        self,
        transaction: SplitCoinTransaction,
        request_type: RequestType = DEFAULT_REQUEST_TYPE,
    ) -> SuiExecuteTransactionResponse:
        """Serialize and sign a ``SplitCoin`` transaction and submit it for execution."""
        return await self._serialize_and_execute(
            self.serializer.new_split_coin, transaction, request_type
        )

    async def execute_move_call(
        self,
        transaction: MoveCallTransaction,
        request_type: RequestType = DEFAULT_REQUEST_TYPE,
    ) -> SuiExecuteTransactionResponse:
        """Serialize and sign a ``MoveCall`` transaction and submit it for execution."""
        return await self._serialize_and_execute(
            self.serializer.new_move_call, transaction, request_type
        )

    async def publish(
        self,
        transaction: PublishTransaction,
        request_type: RequestType = DEFAULT_REQUEST_TYPE,
    ) -> SuiExecuteTransactionResponse:
        """Serialize and sign a ``Publish`` transaction and submit it for execution."""
        return await self._serialize_and_execute(
            self.serializer.new_publish, transaction, request_type
        )
