"""
Abstract interface for Sui network access.

Defines the contract for transaction submission and faucet funding that
all providers must implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

import httpx

from suitx.rpc.client import ProviderError
from suitx.types import (
    ExecuteTransactionRequestType,
    FaucetResponse,
    HttpHeaders,
    SignatureScheme,
    SuiAddress,
    SuiExecuteTransactionResponse,
)


@dataclass(frozen=True)
class SerializerHints:
    """Settings a provider offers for building a default serializer."""
    endpoint: str
    skip_data_validation: bool = False
    timeout: float = 30.0
    transport: Optional[httpx.AsyncBaseTransport] = field(default=None, compare=False)


class Provider(ABC):
    """
    Abstract interface for Sui node access.

    Only the operations the signing layer needs are abstract:
    - Signed transaction submission
    - Faucet funding
    """

    @abstractmethod
    async def execute_transaction(
        self,
        tx_bytes: str,
        signature_scheme: SignatureScheme,
        signature: str,
        pub_key: str,
        request_type: ExecuteTransactionRequestType,
    ) -> SuiExecuteTransactionResponse:
        """
        Submit a signed transaction for execution.

        Args:
            tx_bytes: Base64 transaction bytes
            signature_scheme: Scheme the signature was produced with
            signature: Base64 signature over ``tx_bytes``
            pub_key: Base64 public key of the signer
            request_type: Confirmation mode requested from the node

        Returns:
            Raw execution response from the node

        Raises:
            ProviderError: If submission fails
        """
        pass

    @abstractmethod
    async def request_sui_from_faucet(
        self,
        recipient: SuiAddress,
        http_headers: Optional[HttpHeaders] = None,
    ) -> FaucetResponse:
        """
        Request gas coins from the faucet for ``recipient``.

        Raises:
            ProviderError: If the faucet request fails
        """
        pass

    def serializer_hints(self) -> Optional[SerializerHints]:
        """Hints for building a default serializer, or None if the provider has none."""
        return None

    async def aclose(self) -> None:
        """Release any network resources."""
        pass

    async def __aenter__(self) -> "Provider":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


class FaucetRequestError(ProviderError):
    """Raised when the faucet rejects a funding request."""
    pass
