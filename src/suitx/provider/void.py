"""
Provider placeholder used when no network access is configured.
"""

from typing import Optional

from suitx.provider.interface import Provider, ProviderError
from suitx.types import (
    ExecuteTransactionRequestType,
    FaucetResponse,
    HttpHeaders,
    SignatureScheme,
    SuiAddress,
    SuiExecuteTransactionResponse,
)


class VoidProvider(Provider):
    """Provider with no network behind it. Every operation fails."""

    async def execute_transaction(
        self,
        tx_bytes: str,
        signature_scheme: SignatureScheme,
        signature: str,
        pub_key: str,
        request_type: ExecuteTransactionRequestType,
    ) -> SuiExecuteTransactionResponse:
        raise self._unsupported("execute_transaction")

    async def request_sui_from_faucet(
        self,
        recipient: SuiAddress,
        http_headers: Optional[HttpHeaders] = None,
    ) -> FaucetResponse:
        raise self._unsupported("request_sui_from_faucet")

    @staticmethod
    def _unsupported(operation: str) -> ProviderError:
        return ProviderError(f"Operation not supported by VoidProvider: {operation}")
