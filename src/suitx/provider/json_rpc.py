"""
Full node JSON-RPC provider.

Submits signed transactions through the Sui JSON-RPC API and requests
gas from the network faucet.
"""

from typing import Optional

import httpx
import structlog

from suitx.config import SuiConfig, get_config
from suitx.provider.interface import (
    FaucetRequestError,
    Provider,
    ProviderError,
    SerializerHints,
)
from suitx.rpc.client import JsonRpcClient
from suitx.types import (
    ExecuteTransactionRequestType,
    FaucetResponse,
    HttpHeaders,
    SignatureScheme,
    SuiAddress,
    SuiExecuteTransactionResponse,
)

logger = structlog.get_logger(__name__)


class JsonRpcProvider(Provider):
    """
    JSON-RPC provider.

    Implements the Provider interface against a full node and faucet.
    """

    def __init__(
        self,
        config: Optional[SuiConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the provider.

        Args:
            config: Client configuration. Uses global config if not provided.
            transport: Optional httpx transport, shared by node and faucet requests
        """
        self.config = config or get_config()
        self.fullnode_url = self.config.fullnode_endpoint
        self.faucet_url = self.config.faucet_endpoint
        self._transport = transport
        self.client = JsonRpcClient(
            self.fullnode_url,
            timeout=self.config.request_timeout_seconds,
            transport=transport,
        )
        self._faucet_client: Optional[httpx.AsyncClient] = None

    def serializer_hints(self) -> SerializerHints:
        return SerializerHints(
            endpoint=self.fullnode_url,
            skip_data_validation=self.config.skip_data_validation,
            timeout=self.config.request_timeout_seconds,
            transport=self._transport,
        )

    async def aclose(self) -> None:
        """Close the HTTP clients."""
        await self.client.aclose()
        if self._faucet_client:
            await self._faucet_client.aclose()
            self._faucet_client = None

    async def execute_transaction(
        self,
        tx_bytes: str,
        signature_scheme: SignatureScheme,
        signature: str,
        pub_key: str,
        request_type: ExecuteTransactionRequestType,
    ) -> SuiExecuteTransactionResponse:
        """Submit a signed transaction through ``sui_executeTransaction``."""
        result = await self.client.request(
            "sui_executeTransaction",
            [
                tx_bytes,
                SignatureScheme(signature_scheme).value,
                signature,
                pub_key,
                ExecuteTransactionRequestType(request_type).value,
            ],
        )
        logger.info("tx_executed_rpc", request_type=ExecuteTransactionRequestType(request_type).value)
        return result

    async def request_sui_from_faucet(
        self,
        recipient: SuiAddress,
        http_headers: Optional[HttpHeaders] = None,
    ) -> FaucetResponse:
        """Request gas coins from the configured faucet."""
        if self._faucet_client is None:
            self._faucet_client = httpx.AsyncClient(
                headers={"Content-Type": "application/json"},
                timeout=self.config.request_timeout_seconds,
                transport=self._transport,
            )

        try:
            response = await self._faucet_client.post(
                self.faucet_url,
                json={"FixedAmountRequest": {"recipient": recipient}},
                headers=http_headers,
            )
        except httpx.RequestError as e:
            logger.error("faucet_request_error", recipient=recipient, error=str(e))
            raise ProviderError(f"Faucet request failed: {e}") from e

        if response.status_code >= 400:
            logger.error(
                "faucet_request_failed",
                recipient=recipient,
                status=response.status_code,
                error=response.text,
            )
            raise FaucetRequestError(f"Faucet HTTP error {response.status_code}: {response.text}")

        try:
            data = response.json()
        except ValueError as e:
            raise FaucetRequestError(f"Invalid faucet response: {e}") from e
        if not isinstance(data, dict):
            raise FaucetRequestError(f"Invalid faucet response: {data!r}")

        if data.get("error"):
            raise FaucetRequestError(f"Faucet request failed: {data['error']}")

        logger.info(
            "faucet_funded",
            recipient=recipient,
            coins=len(data.get("transferred_gas_objects") or []),
        )
        return data
