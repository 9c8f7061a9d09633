"""
Signers.

Handles transaction signing and submission.
"""

from suitx.signers.raw_signer import RawSigner
from suitx.signers.signer import SignaturePubkeyPair, Signer, UnsupportedOperationError
from suitx.signers.signer_with_provider import SignerWithProvider, UnknownTransactionKindError

__all__ = [
    "Signer",
    "SignerWithProvider",
    "RawSigner",
    "SignaturePubkeyPair",
    "UnsupportedOperationError",
    "UnknownTransactionKindError",
]
