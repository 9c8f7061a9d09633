"""
Signing identity contract.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from suitx.crypto.keypair import PublicKey
from suitx.types import Base64DataBuffer, SignatureScheme, SuiAddress


@dataclass(frozen=True)
class SignaturePubkeyPair:
    """A signature together with the key and scheme that produced it."""
    signature_scheme: SignatureScheme
    signature: Base64DataBuffer
    pub_key: PublicKey


class Signer(ABC):
    """Anything that can name its address and sign bytes."""

    @abstractmethod
    async def get_address(self) -> SuiAddress:
        """Return the address derived from the signer's key material."""
        pass

    @abstractmethod
    async def sign_data(self, data: Base64DataBuffer) -> SignaturePubkeyPair:
        """Return the signature over ``data`` and the signer's public key."""
        pass


class UnsupportedOperationError(Exception):
    """Raised when a signer cannot perform the requested operation, e.g. switching providers."""
    pass
