"""
JSON-RPC Client for NEAR.

Lightweight async provider: httpx for HTTP, plain JSON for payloads.
Supports read-only contract calls, account queries, transaction broadcast
and status lookups. Signing is not done here.

The HTTP layer sits behind an injectable transport (JsonRpcTransport)
so tests can swap in canned responses.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Any, Optional, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_FINALITY = "final"


class RpcError(RuntimeError):
    """Raised when the node answers with an error instead of a result."""

    def __init__(self, message: str, data: Any = None) -> None:
        super().__init__(message)
        self.data = data


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------


@runtime_checkable
class JsonRpcTransport(Protocol):
    """Async transport for JSON-RPC POST requests."""

    async def post_json(self, url: str, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Send a JSON-RPC request and return the parsed response.

        Raises:
            Exception: On transport-level failures (connection refused,
                timeout, TLS error, etc.). Propagated unchanged.
        """
        ...


class HttpxTransport:
    """Default transport using httpx.AsyncClient."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._timeout = timeout

    async def post_json(self, url: str, payload: dict[str, Any]) -> dict[str, Any]:
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.post(url, json=payload)
            response.raise_for_status()
            result: dict[str, Any] = response.json()
            return result


# ---------------------------------------------------------------------------
# Provider
# ---------------------------------------------------------------------------


def _error_message(error: Any) -> str:
    if isinstance(error, dict):
        cause = error.get("cause")
        if isinstance(cause, dict) and cause.get("name"):
            return f"{cause['name']}: {error.get('data') or error.get('message', '')}"
        return str(error.get("data") or error.get("message") or error)
    return str(error)


class JsonRpcProvider:
    """
    NEAR JSON-RPC provider.

    Args:
        node_url: RPC endpoint URL (e.g. "https://rpc.testnet.near.org")
        transport: Injectable transport. Defaults to HttpxTransport.
    """

    def __init__(self, node_url: str, transport: Optional[JsonRpcTransport] = None) -> None:
        self._node_url = node_url
        self._transport = transport or HttpxTransport()

    @property
    def node_url(self) -> str:
        return self._node_url

    async def _rpc_call(self, method: str, params: Any) -> Any:
        """
        Make a JSON-RPC call.

        Args:
            method: RPC method name (e.g., "query")
            params: RPC parameters

        Returns:
            Result field from the RPC response

        Raises:
            RpcError: If the response carries an error member
        """
        payload = {
            "jsonrpc": "2.0",
            "id": "dontcare",
            "method": method,
            "params": params,
        }
        logger.debug("rpc %s -> %s", method, self._node_url)
        data = await self._transport.post_json(self._node_url, payload)

        if "error" in data:
            raise RpcError(f"RPC error: {_error_message(data['error'])}", data["error"])

        return data.get("result")

    async def query(self, params: dict[str, Any]) -> dict[str, Any]:
        """Run a ``query`` request, defaulting to final finality."""
        if "finality" not in params and "block_id" not in params:
            params = {**params, "finality": DEFAULT_FINALITY}
        result = await self._rpc_call("query", params)
        # Contract panics come back inside the result, not as a JSON-RPC error
        if isinstance(result, dict) and "error" in result:
            raise RpcError(f"Query error: {result['error']}", result)
        return result

    async def call_function(
        self,
        contract_id: str,
        method_name: str,
        args: Optional[dict[str, Any]] = None,
    ) -> Any:
        """
        Call a view method on a contract (read-only).

        Args:
            contract_id: Contract account id
            method_name: View method to call
            args: JSON args (default: {})

        Returns:
            Decoded JSON return value
        """
        args_json = json.dumps(args or {}, separators=(",", ":")).encode("utf-8")
        result = await self.query(
            {
                "request_type": "call_function",
                "account_id": contract_id,
                "method_name": method_name,
                "args_base64": base64.b64encode(args_json).decode("ascii"),
            }
        )
        raw = bytes(result.get("result", []))
        if not raw:
            return None
        return json.loads(raw.decode("utf-8"))

    async def view_account(self, account_id: str) -> dict[str, Any]:
        """Get account state: amount, locked, storage_usage, code_hash."""
        return await self.query({"request_type": "view_account", "account_id": account_id})

    async def broadcast_tx_commit(self, signed_tx_base64: str) -> dict[str, Any]:
        """
        Send a signed transaction and wait until it is executed.

        Args:
            signed_tx_base64: Borsh-serialized signed transaction, base64 encoded

        Returns:
            FinalExecutionOutcome dict
        """
        return await self._rpc_call("broadcast_tx_commit", [signed_tx_base64])

    async def tx_status(self, tx_hash: str, sender_id: str) -> dict[str, Any]:
        """Get the FinalExecutionOutcome of a known transaction."""
        return await self._rpc_call("tx", [tx_hash, sender_id])
