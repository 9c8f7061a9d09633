"""
JSON-RPC 2.0 client over HTTP.

Shared by the full node provider and the RPC transaction serializer.
"""

import uuid
from typing import Any, List, Optional

import httpx
import structlog

from suitx.types import HttpHeaders

logger = structlog.get_logger(__name__)


class ProviderError(Exception):
    """Raised when a node or faucet request fails."""
    pass


class RpcError(ProviderError):
    """Raised when the node answers with a JSON-RPC error object."""

    def __init__(self, message: str, code: Optional[int] = None, data: Any = None):
        super().__init__(message)
        self.code = code
        self.data = data


class JsonRpcClient:
    """
    Minimal async JSON-RPC client.

    The underlying ``httpx.AsyncClient`` is created on first use and
    released with ``aclose()``.
    """

    def __init__(
        self,
        endpoint: str,
        headers: Optional[HttpHeaders] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint = endpoint
        self.headers = {"Content-Type": "application/json", **(headers or {})}
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers=self.headers,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        params: List[Any],
        http_headers: Optional[HttpHeaders] = None,
    ) -> Any:
        """
        Call ``method`` with positional ``params`` and return its result.

        Raises:
            RpcError: If the node returns an error object
            ProviderError: On transport failure or a non-200 response
        """
        if not self.endpoint:
            raise ProviderError(f"No JSON-RPC endpoint configured for {method}")

        payload = {
            "jsonrpc": "2.0",
            "id": str(uuid.uuid4()),
            "method": method,
            "params": params,
        }

        try:
            response = await self._get_client().post(
                self.endpoint,
                json=payload,
                headers=http_headers,
            )
        except httpx.RequestError as e:
            logger.error("rpc_request_error", method=method, error=str(e))
            raise ProviderError(f"JSON-RPC request failed: {e}") from e

        if response.status_code != 200:
            logger.error(
                "rpc_request_failed",
                method=method,
                status=response.status_code,
                error=response.text,
            )
            raise ProviderError(f"JSON-RPC HTTP error {response.status_code}: {response.text}")

        try:
            body = response.json()
        except ValueError as e:
            raise ProviderError(f"Invalid JSON-RPC response for {method}: {e}") from e
        if not isinstance(body, dict):
            raise ProviderError(f"Invalid JSON-RPC response for {method}: {body!r}")

        error = body.get("error")
        if error:
            if not isinstance(error, dict):
                raise RpcError(str(error))
            raise RpcError(
                error.get("message", "Unknown error"),
                code=error.get("code"),
                data=error.get("data"),
            )

        return body.get("result")
