"""
Key material and address derivation.
"""

from suitx.crypto.keypair import (
    Ed25519Keypair,
    Ed25519PublicKey,
    Keypair,
    PublicKey,
    load_keypair_from_config,
    load_keypair_from_file,
)

__all__ = [
    "Keypair",
    "PublicKey",
    "Ed25519Keypair",
    "Ed25519PublicKey",
    "load_keypair_from_config",
    "load_keypair_from_file",
]
