"""
Key material for transaction signing.

Ed25519 keys are backed by PyNaCl. Addresses are derived from the
scheme flag and the public key.
"""

import base64
import binascii
import hashlib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import structlog
from nacl.signing import SigningKey

from suitx.config import SuiConfig, get_config
from suitx.types import SignatureScheme, SuiAddress

logger = structlog.get_logger(__name__)

SUI_ADDRESS_LENGTH = 20


class PublicKey(ABC):
    """Public half of a keypair."""

    scheme: SignatureScheme

    @abstractmethod
    def to_bytes(self) -> bytes:
        pass

    def to_base64(self) -> str:
        return base64.b64encode(self.to_bytes()).decode("ascii")

    def to_sui_address(self) -> SuiAddress:
        """``0x`` + hex of the first 20 bytes of sha3-256(flag || pubkey)."""
        digest = hashlib.sha3_256(bytes([self.scheme.flag]) + self.to_bytes()).digest()
        return "0x" + digest[:SUI_ADDRESS_LENGTH].hex()

    def __str__(self) -> str:
        return self.to_base64()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.scheme == other.scheme and self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash((self.scheme, self.to_bytes()))


class Ed25519PublicKey(PublicKey):
    scheme = SignatureScheme.ED25519

    def __init__(self, data: bytes):
        if len(data) != 32:
            raise ValueError(f"Ed25519 public key must be 32 bytes, got {len(data)}")
        self._data = bytes(data)

    def to_bytes(self) -> bytes:
        return self._data

    def __repr__(self) -> str:
        return f"Ed25519PublicKey({self.to_base64()!r})"


class Keypair(ABC):
    """Signing key capable of producing raw signatures."""

    @abstractmethod
    def get_public_key(self) -> PublicKey:
        pass

    @abstractmethod
    def sign_data(self, data: bytes) -> bytes:
        pass

    @abstractmethod
    def get_key_scheme(self) -> SignatureScheme:
        pass


class Ed25519Keypair(Keypair):
    """Ed25519 keypair."""

    def __init__(self, signing_key: Optional[SigningKey] = None):
        self._signing_key = signing_key or SigningKey.generate()
        self._public_key = Ed25519PublicKey(self._signing_key.verify_key.encode())

    @classmethod
    def generate(cls) -> "Ed25519Keypair":
        return cls(SigningKey.generate())

    @classmethod
    def from_seed(cls, seed: bytes) -> "Ed25519Keypair":
        if len(seed) != 32:
            raise ValueError(f"Ed25519 seed must be 32 bytes, got {len(seed)}")
        return cls(SigningKey(bytes(seed)))

    @classmethod
    def from_secret_key(cls, secret_key: bytes) -> "Ed25519Keypair":
        """
        Load from a 64-byte secret key (seed followed by public key).

        Raises:
            ValueError: If the key has the wrong length or its public half
                does not match the seed
        """
        if len(secret_key) != 64:
            raise ValueError(f"Ed25519 secret key must be 64 bytes, got {len(secret_key)}")
        keypair = cls.from_seed(secret_key[:32])
        if keypair.get_public_key().to_bytes() != bytes(secret_key[32:]):
            raise ValueError("Provided secret key is invalid")
        return keypair

    def export_seed(self) -> bytes:
        """Return the 32-byte seed. Treat the result as secret."""
        return self._signing_key.encode()

    def get_public_key(self) -> Ed25519PublicKey:
        return self._public_key

    def sign_data(self, data: bytes) -> bytes:
        return self._signing_key.sign(bytes(data)).signature

    def get_key_scheme(self) -> SignatureScheme:
        return SignatureScheme.ED25519


def decode_seed(encoded: str) -> bytes:
    """Decode a seed given as hex (optionally 0x-prefixed) or base64."""
    text = encoded.strip()
    hex_text = text[2:] if text.startswith("0x") else text
    try:
        return bytes.fromhex(hex_text)
    except ValueError:
        pass
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError("Signing key seed is neither hex nor base64") from e


def load_keypair_from_file(key_path: str) -> Ed25519Keypair:
    """Load a keypair from a file holding an encoded seed or secret key."""
    path = Path(key_path)
    if not path.exists():
        raise FileNotFoundError(f"Signing key file not found: {key_path}")

    keypair = _keypair_from_bytes(decode_seed(path.read_text()))
    logger.info("signing_key_loaded", path=key_path, address=keypair.get_public_key().to_sui_address())
    return keypair


def load_keypair_from_config(config: Optional[SuiConfig] = None) -> Ed25519Keypair:
    """Load the signing keypair from configuration."""
    config = config or get_config()
    if config.signing_key_path:
        return load_keypair_from_file(config.signing_key_path)
    if config.signing_key_seed:
        keypair = _keypair_from_bytes(decode_seed(config.signing_key_seed))
        logger.info("signing_key_loaded_from_seed", address=keypair.get_public_key().to_sui_address())
        return keypair
    raise ValueError("No signing key configured")


def _keypair_from_bytes(key_bytes: bytes) -> Ed25519Keypair:
    if len(key_bytes) == 64:
        return Ed25519Keypair.from_secret_key(key_bytes)
    return Ed25519Keypair.from_seed(key_bytes)
