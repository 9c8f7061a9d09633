"""
Pytest configuration and shared fixtures for the test suite.
"""

from typing import Any, Dict, List, Optional, Tuple

import pytest

from suitx.config import NetworkType, SuiConfig
from suitx.crypto.keypair import Ed25519Keypair
from suitx.provider.interface import Provider, SerializerHints
from suitx.serializer.interface import TxnDataSerializer
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
from suitx.signers.raw_signer import RawSigner
from suitx.types import Base64DataBuffer


TEST_SEED = bytes(range(32))


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def test_config() -> SuiConfig:
    """Create a test configuration."""
    return SuiConfig(
        network=NetworkType.LOCAL,
        fullnode_url="http://fullnode.test:9000",
        faucet_url="http://faucet.test:9123/gas",
        skip_data_validation=False,
        signing_key_seed=TEST_SEED.hex(),
        log_level="DEBUG",
    )


# ============================================================================
# Mock Provider
# ============================================================================

class MockProvider(Provider):
    """Mock provider for testing."""

    def __init__(self, hints: Optional[SerializerHints] = None):
        self.executed: List[Dict[str, Any]] = []
        self.funding_requests: List[Tuple[str, Optional[dict]]] = []
        self._hints = hints

    async def execute_transaction(
        self,
        tx_bytes,
        signature_scheme,
        signature,
        pub_key,
        request_type,
    ):
        self.executed.append({
            "tx_bytes": tx_bytes,
            "signature_scheme": signature_scheme,
            "signature": signature,
            "pub_key": pub_key,
            "request_type": request_type,
        })
        return {
            "certificate": {"transactionDigest": f"digest{len(self.executed)}"},
            "effects": {"status": {"status": "success"}},
        }

    async def request_sui_from_faucet(self, recipient, http_headers=None):
        self.funding_requests.append((recipient, http_headers))
        return {"transferred_gas_objects": [{"id": "0xgas"}], "error": None}

    def serializer_hints(self) -> Optional[SerializerHints]:
        return self._hints


# ============================================================================
# Mock Serializer
# ============================================================================

class MockSerializer(TxnDataSerializer):
    """Serializer that records calls and returns bytes naming the operation."""

    def __init__(self):
        self.calls: List[Tuple[str, str, Any]] = []

    def _record(self, operation: str, signer_address: str, txn: Any) -> Base64DataBuffer:
        self.calls.append((operation, signer_address, txn))
        return Base64DataBuffer(f"{operation}:{txn!r}".encode())

    async def new_transfer_object(self, signer_address, txn):
        return self._record("new_transfer_object", signer_address, txn)

    async def new_transfer_sui(self, signer_address, txn):
        return self._record("new_transfer_sui", signer_address, txn)

    async def new_pay(self, signer_address, txn):
        return self._record("new_pay", signer_address, txn)

    async def new_pay_sui(self, signer_address, txn):
        return self._record("new_pay_sui", signer_address, txn)

    async def new_pay_all_sui(self, signer_address, txn):
        return self._record("new_pay_all_sui", signer_address, txn)

    async def new_merge_coin(self, signer_address, txn):
        return self._record("new_merge_coin", signer_address, txn)

    async def new_split_coin(self, signer_address, txn):
        return self._record("new_split_coin", signer_address, txn)

    async def new_move_call(self, signer_address, txn):
        return self._record("new_move_call", signer_address, txn)

    async def new_publish(self, signer_address, txn):
        return self._record("new_publish", signer_address, txn)


# ============================================================================
# Test Signer
# ============================================================================

class CountingSigner(RawSigner):
    """RawSigner that counts how often it is asked to sign."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sign_calls: List[bytes] = []

    async def sign_data(self, data):
        self.sign_calls.append(data.get_data())
        return await super().sign_data(data)


@pytest.fixture
def keypair() -> Ed25519Keypair:
    """Deterministic keypair."""
    return Ed25519Keypair.from_seed(TEST_SEED)


@pytest.fixture
def mock_provider() -> MockProvider:
    return MockProvider()


@pytest.fixture
def mock_serializer() -> MockSerializer:
    return MockSerializer()


@pytest.fixture
def signer(keypair, mock_provider, mock_serializer) -> CountingSigner:
    return CountingSigner(keypair, mock_provider, mock_serializer)


# ============================================================================
# Sample Transactions
# ============================================================================

# kind -> (helper method, serializer operation, payload)
SAMPLE_TRANSACTIONS: Dict[str, Tuple[str, str, Any]] = {
    "transferObject": (
        "transfer_object",
        "new_transfer_object",
        TransferObjectTransaction(object_id="0xa1", gas_budget=1000, recipient="0xb2"),
    ),
    "transferSui": (
        "transfer_sui",
        "new_transfer_sui",
        TransferSuiTransaction(sui_object_id="0x1", gas_budget=1000, recipient="0x2", amount=100),
    ),
    "pay": (
        "pay",
        "new_pay",
        PayTransaction(
            input_coins=["0xc1", "0xc2"],
            recipients=["0xd1"],
            amounts=[50],
            gas_budget=1000,
            gas_payment="0xe1",
        ),
    ),
    "paySui": (
        "pay_sui",
        "new_pay_sui",
        PaySuiTransaction(input_coins=["0xc1"], recipients=["0xd1", "0xd2"], amounts=[10, 20], gas_budget=1000),
    ),
    "payAllSui": (
        "pay_all_sui",
        "new_pay_all_sui",
        PayAllSuiTransaction(input_coins=["0xc1", "0xc2"], recipient="0xd1", gas_budget=1000),
    ),
    "mergeCoin": (
        "merge_coin",
        "new_merge_coin",
        MergeCoinTransaction(primary_coin="0xc1", coin_to_merge="0xc2", gas_budget=1000),
    ),
    "splitCoin": (
        "split_coin",
        "new_split_coin",
        SplitCoinTransaction(coin_object_id="0xc1", split_amounts=[1, 2, 3], gas_budget=1000),
    ),
    "moveCall": (
        "execute_move_call",
        "new_move_call",
        MoveCallTransaction(
            package_object_id="0x2",
            module="devnet_nft",
            function="mint",
            type_arguments=[],
            arguments=["Example NFT", "An example", "ipfs://example"],
            gas_budget=10000,
        ),
    ),
    "publish": (
        "publish",
        "new_publish",
        PublishTransaction(compiled_modules=[b"\xa1\x1c\xeb\x0b"], gas_budget=10000),
    ),
}


@pytest.fixture
def sample_transactions() -> Dict[str, Tuple[str, str, Any]]:
    return SAMPLE_TRANSACTIONS
