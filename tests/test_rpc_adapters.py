"""
Test suite for the HTTP adapters.

Exercises the JSON-RPC provider and serializer against httpx mock transports.
"""

import base64
import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from suitx.provider.interface import FaucetRequestError, ProviderError, SerializerHints
from suitx.provider.json_rpc import JsonRpcProvider
from suitx.rpc.client import JsonRpcClient, RpcError
from suitx.serializer.interface import SerializationError
from suitx.serializer.rpc import RpcTxnDataSerializer
from suitx.serializer.transactions import PublishTransaction
from suitx.signers.raw_signer import RawSigner
from suitx.types import ExecuteTransactionRequestType, SignatureScheme

from conftest import CountingSigner


TX_BYTES = base64.b64encode(b"built-transaction").decode()


def rpc_transport(
    requests: List[httpx.Request],
    respond: Callable[[Dict[str, Any]], Dict[str, Any]],
) -> httpx.MockTransport:
    """Mock transport answering JSON-RPC calls with ``respond(body)``."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        body = json.loads(request.content)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], **respond(body)})

    return httpx.MockTransport(handler)


# ============================================================================
# Test JSON-RPC Client
# ============================================================================

class TestJsonRpcClient:

    @pytest.mark.asyncio
    async def test_request_result(self):
        seen: List[httpx.Request] = []
        client = JsonRpcClient(
            "http://node.test",
            transport=rpc_transport(seen, lambda body: {"result": {"ok": body["params"]}}),
        )

        result = await client.request("sui_test", [1, "a"], http_headers={"X-Trace": "1"})
        await client.aclose()

        assert result == {"ok": [1, "a"]}
        body = json.loads(seen[0].content)
        assert body["method"] == "sui_test"
        assert body["jsonrpc"] == "2.0"
        assert seen[0].headers["X-Trace"] == "1"

    @pytest.mark.asyncio
    async def test_rpc_error(self):
        client = JsonRpcClient(
            "http://node.test",
            transport=rpc_transport([], lambda body: {"error": {"code": -32602, "message": "Invalid params"}}),
        )

        with pytest.raises(RpcError, match="Invalid params") as excinfo:
            await client.request("sui_test", [])

        assert excinfo.value.code == -32602
        assert isinstance(excinfo.value, ProviderError)

    @pytest.mark.asyncio
    async def test_rpc_error_plain_string(self):
        client = JsonRpcClient(
            "http://node.test",
            transport=rpc_transport([], lambda body: {"error": "server overloaded"}),
        )

        with pytest.raises(RpcError, match="server overloaded") as excinfo:
            await client.request("sui_test", [])

        assert excinfo.value.code is None

    @pytest.mark.asyncio
    async def test_http_error(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(503, text="unavailable"))
        client = JsonRpcClient("http://node.test", transport=transport)

        with pytest.raises(ProviderError, match="503"):
            await client.request("sui_test", [])

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = JsonRpcClient("http://node.test", transport=httpx.MockTransport(handler))

        with pytest.raises(ProviderError, match="connection refused"):
            await client.request("sui_test", [])

    @pytest.mark.asyncio
    async def test_missing_endpoint(self):
        with pytest.raises(ProviderError, match="No JSON-RPC endpoint"):
            await JsonRpcClient("").request("sui_test", [])


# ============================================================================
# Test Provider
# ============================================================================

class TestJsonRpcProvider:

    def test_serializer_hints(self, test_config):
        provider = JsonRpcProvider(test_config)

        hints = provider.serializer_hints()

        assert hints == SerializerHints(
            endpoint="http://fullnode.test:9000",
            skip_data_validation=False,
            timeout=test_config.request_timeout_seconds,
        )
        assert hints.transport is None

    @pytest.mark.asyncio
    async def test_execute_transaction(self, test_config):
        seen: List[httpx.Request] = []
        effects = {"EffectsCert": {"effects": {"status": {"status": "success"}}}}
        provider = JsonRpcProvider(test_config, transport=rpc_transport(seen, lambda body: {"result": effects}))

        async with provider:
            response = await provider.execute_transaction(
                TX_BYTES,
                SignatureScheme.ED25519,
                "c2ln",
                "cHVi",
                ExecuteTransactionRequestType.WAIT_FOR_EFFECTS_CERT,
            )

        assert response == effects
        assert (seen[0].url.host, seen[0].url.port) == ("fullnode.test", 9000)
        body = json.loads(seen[0].content)
        assert body["method"] == "sui_executeTransaction"
        assert body["params"] == [TX_BYTES, "ED25519", "c2ln", "cHVi", "WaitForEffectsCert"]

    @pytest.mark.asyncio
    async def test_faucet(self, test_config):
        seen: List[httpx.Request] = []
        funded = {"transferred_gas_objects": [{"amount": 10000, "id": "0xgas"}], "error": None}

        def handler(request):
            seen.append(request)
            return httpx.Response(201, json=funded)

        provider = JsonRpcProvider(test_config, transport=httpx.MockTransport(handler))

        response = await provider.request_sui_from_faucet("0xabc", {"X-Client": "tests"})
        await provider.aclose()

        assert response == funded
        assert (seen[0].url.host, seen[0].url.path) == ("faucet.test", "/gas")
        assert json.loads(seen[0].content) == {"FixedAmountRequest": {"recipient": "0xabc"}}
        assert seen[0].headers["X-Client"] == "tests"

    @pytest.mark.asyncio
    async def test_faucet_error_field(self, test_config):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json={"transferred_gas_objects": [], "error": "rate limited"})
        )
        provider = JsonRpcProvider(test_config, transport=transport)

        with pytest.raises(FaucetRequestError, match="rate limited"):
            await provider.request_sui_from_faucet("0xabc")

    @pytest.mark.asyncio
    async def test_faucet_http_error(self, test_config):
        transport = httpx.MockTransport(lambda request: httpx.Response(429, text="Too Many Requests"))
        provider = JsonRpcProvider(test_config, transport=transport)

        with pytest.raises(FaucetRequestError, match="429"):
            await provider.request_sui_from_faucet("0xabc")


# ============================================================================
# Test Serializer
# ============================================================================

class TestRpcTxnDataSerializer:

    @pytest.mark.asyncio
    async def test_transfer_sui_params(self, sample_transactions):
        seen: List[httpx.Request] = []
        serializer = RpcTxnDataSerializer(
            "http://node.test",
            transport=rpc_transport(seen, lambda body: {"result": {"txBytes": TX_BYTES, "gas": {}}}),
        )
        _, _, payload = sample_transactions["transferSui"]

        tx_bytes = await serializer.new_transfer_sui("0xsigner", payload)

        assert tx_bytes.get_data() == b"built-transaction"
        body = json.loads(seen[0].content)
        assert body["method"] == "sui_transferSui"
        assert body["params"] == ["0xsigner", "0x1", 1000, "0x2", 100]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("kind, method, params", [
        ("transferObject", "sui_transferObject", ["0xsigner", "0xa1", None, 1000, "0xb2"]),
        ("pay", "sui_pay", ["0xsigner", ["0xc1", "0xc2"], ["0xd1"], [50], "0xe1", 1000]),
        ("paySui", "sui_paySui", ["0xsigner", ["0xc1"], ["0xd1", "0xd2"], [10, 20], 1000]),
        ("payAllSui", "sui_payAllSui", ["0xsigner", ["0xc1", "0xc2"], "0xd1", 1000]),
        ("mergeCoin", "sui_mergeCoins", ["0xsigner", "0xc1", "0xc2", None, 1000]),
        ("splitCoin", "sui_splitCoin", ["0xsigner", "0xc1", [1, 2, 3], None, 1000]),
        ("moveCall", "sui_moveCall", [
            "0xsigner", "0x2", "devnet_nft", "mint", [],
            ["Example NFT", "An example", "ipfs://example"], None, 10000,
        ]),
        ("publish", "sui_publish", ["0xsigner", ["oRzrCw=="], None, 10000]),
    ])
    async def test_method_params(self, sample_transactions, kind, method, params):
        seen: List[httpx.Request] = []
        serializer = RpcTxnDataSerializer(
            "http://node.test",
            transport=rpc_transport(seen, lambda body: {"result": {"txBytes": TX_BYTES}}),
        )
        _, operation, payload = sample_transactions[kind]

        await getattr(serializer, operation)("0xsigner", payload)

        body = json.loads(seen[0].content)
        assert body["method"] == method
        assert body["params"] == params

    @pytest.mark.asyncio
    async def test_publish_keeps_encoded_modules(self):
        seen: List[httpx.Request] = []
        serializer = RpcTxnDataSerializer(
            "http://node.test",
            transport=rpc_transport(seen, lambda body: {"result": {"txBytes": TX_BYTES}}),
        )

        await serializer.new_publish("0xsigner", PublishTransaction(compiled_modules=["AQID"], gas_budget=5))

        assert json.loads(seen[0].content)["params"][1] == ["AQID"]

    @pytest.mark.asyncio
    async def test_invalid_response_rejected(self, sample_transactions):
        serializer = RpcTxnDataSerializer(
            "http://node.test",
            transport=rpc_transport([], lambda body: {"result": {"txBytes": "***not base64***"}}),
        )
        _, _, payload = sample_transactions["pay"]

        with pytest.raises(SerializationError, match="sui_pay"):
            await serializer.new_pay("0xsigner", payload)

    @pytest.mark.asyncio
    async def test_missing_tx_bytes_rejected(self, sample_transactions):
        serializer = RpcTxnDataSerializer(
            "http://node.test",
            skip_data_validation=True,
            transport=rpc_transport([], lambda body: {"result": {"gas": {}}}),
        )
        _, _, payload = sample_transactions["pay"]

        with pytest.raises(SerializationError, match="Malformed"):
            await serializer.new_pay("0xsigner", payload)

    @pytest.mark.asyncio
    async def test_rpc_error_chained(self, sample_transactions):
        serializer = RpcTxnDataSerializer(
            "http://node.test",
            transport=rpc_transport([], lambda body: {"error": {"code": -32000, "message": "Object not found"}}),
        )
        _, _, payload = sample_transactions["mergeCoin"]

        with pytest.raises(SerializationError, match="Object not found") as excinfo:
            await serializer.new_merge_coin("0xsigner", payload)

        assert isinstance(excinfo.value.__cause__, RpcError)

    @pytest.mark.asyncio
    async def test_rpc_error_string_wrapped(self, sample_transactions):
        serializer = RpcTxnDataSerializer(
            "http://node.test",
            transport=rpc_transport([], lambda body: {"error": "node is syncing"}),
        )
        _, _, payload = sample_transactions["splitCoin"]

        with pytest.raises(SerializationError, match="node is syncing") as excinfo:
            await serializer.new_split_coin("0xsigner", payload)

        assert isinstance(excinfo.value.__cause__, RpcError)

    @pytest.mark.asyncio
    async def test_context_manager_closes_client(self, sample_transactions):
        transport = rpc_transport([], lambda body: {"result": {"txBytes": TX_BYTES}})
        _, _, payload = sample_transactions["transferSui"]

        async with RpcTxnDataSerializer("http://node.test", transport=transport) as serializer:
            await serializer.new_transfer_sui("0xsigner", payload)
            assert serializer.client._client is not None

        assert serializer.client._client is None


# ============================================================================
# Integration Test: Full Flow Over HTTP
# ============================================================================

class TestEndToEnd:

    @pytest.mark.asyncio
    async def test_transfer_sui_over_rpc(self, keypair, test_config, sample_transactions):
        """Test build -> sign -> execute against one mocked full node."""
        seen: List[httpx.Request] = []

        def respond(body):
            if body["method"] == "sui_transferSui":
                return {"result": {"txBytes": TX_BYTES}}
            return {"result": {"EffectsCert": {"certificate": {"transactionDigest": "D1GEST"}}}}

        provider = JsonRpcProvider(test_config, transport=rpc_transport(seen, respond))
        signer = CountingSigner(keypair, provider)
        _, _, payload = sample_transactions["transferSui"]

        response = await signer.transfer_sui(payload)

        assert response["EffectsCert"]["certificate"]["transactionDigest"] == "D1GEST"
        methods = [json.loads(r.content)["method"] for r in seen]
        assert methods == ["sui_transferSui", "sui_executeTransaction"]

        params = json.loads(seen[1].content)["params"]
        assert params[0] == TX_BYTES
        assert params[4] == "WaitForLocalExecution"
        assert signer.sign_calls == [b"built-transaction"]

    def test_default_serializer_uses_provider_settings(self, keypair, test_config):
        config = test_config.model_copy(update={"request_timeout_seconds": 5.0})
        signer = RawSigner(keypair, JsonRpcProvider(config))

        assert signer.serializer.endpoint == "http://fullnode.test:9000"
        assert signer.serializer.client.timeout == 5.0

    @pytest.mark.asyncio
    async def test_signer_closes_derived_serializer(self, keypair, test_config, sample_transactions):
        def respond(body):
            if body["method"] == "sui_transferSui":
                return {"result": {"txBytes": TX_BYTES}}
            return {"result": {"EffectsCert": {}}}

        async with JsonRpcProvider(test_config, transport=rpc_transport([], respond)) as provider:
            async with RawSigner(keypair, provider) as signer:
                await signer.transfer_sui(sample_transactions["transferSui"][2])
                assert signer.serializer.client._client is not None

            assert signer.serializer.client._client is None
            assert provider.client._client is not None

    @pytest.mark.asyncio
    async def test_signer_leaves_supplied_serializer_open(self, keypair, test_config):
        serializer = RpcTxnDataSerializer("http://node.test")
        serializer.client._get_client()
        signer = RawSigner(keypair, JsonRpcProvider(test_config), serializer)

        await signer.aclose()

        assert serializer.client._client is not None
        await serializer.aclose()
