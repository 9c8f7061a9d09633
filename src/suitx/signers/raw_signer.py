"""
Raw Signer - signs with a locally held keypair.
"""

from typing import Optional

import structlog

from suitx.crypto.keypair import Keypair
from suitx.provider.interface import Provider
from suitx.serializer.interface import TxnDataSerializer
from suitx.signers.signer import SignaturePubkeyPair
from suitx.signers.signer_with_provider import SignerWithProvider
from suitx.types import Base64DataBuffer, SuiAddress

logger = structlog.get_logger(__name__)


class RawSigner(SignerWithProvider):
    """
    Signer backed by an in-process keypair.

    Security note: the private key lives in process memory. Prefer a
    hardware or remote signer for production funds.
    """

    def __init__(
        self,
        keypair: Keypair,
        provider: Optional[Provider] = None,
        serializer: Optional[TxnDataSerializer] = None,
    ):
        super().__init__(provider, serializer)
        self.keypair = keypair

    async def get_address(self) -> SuiAddress:
        return self.keypair.get_public_key().to_sui_address()

    async def sign_data(self, data: Base64DataBuffer) -> SignaturePubkeyPair:
        signature = self.keypair.sign_data(data.get_data())
        return SignaturePubkeyPair(
            signature_scheme=self.keypair.get_key_scheme(),
            signature=Base64DataBuffer(signature),
            pub_key=self.keypair.get_public_key(),
        )

    def connect(self, provider: Provider) -> "RawSigner":
        logger.debug("signer_reconnected", provider=type(provider).__name__)
        # A caller-supplied serializer survives connect(); a derived one is rebuilt
        serializer = None if self._owns_serializer else self.serializer
        return RawSigner(self.keypair, provider, serializer)
