"""
JSON-RPC client for EVM nodes.

Lightweight alternative to web3.py: uses httpx for HTTP + eth-abi for encoding.
Read-only: block number, chain ID, bytecode and eth_call.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import httpx

from ..errors import ConfigError, RpcError
from ..utils import hex_to_int, is_empty_hex, mask_url
from .abi import decode_function_result, encode_function_call

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def get_timeout() -> float:
    """Get the request timeout (seconds) from environment or default."""
    raw = os.environ.get("CHAINRIG_RPC_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"CHAINRIG_RPC_TIMEOUT must be a number of seconds, got {raw!r}") from None


def rpc_call(
    method: str,
    params: list,
    rpc_url: str,
    timeout: Optional[float] = None,
) -> Any:
    """
    Make a JSON-RPC call.

    Args:
        method: RPC method name (e.g., "eth_call")
        params: RPC parameters
        rpc_url: RPC endpoint URL
        timeout: Request timeout in seconds

    Returns:
        Result field from the RPC response

    Raises:
        RpcError: On transport failure, HTTP error status or JSON-RPC error
    """
    if not rpc_url:
        raise RpcError("RPC URL is empty")

    payload = {
        "jsonrpc": "2.0",
        "method": method,
        "params": params,
        "id": 1,
    }
    logger.debug("-> %s %s %s", mask_url(rpc_url), method, params)
    timeout = timeout or get_timeout()

    try:
        with httpx.Client(timeout=timeout) as client:
            response = client.post(rpc_url, json=payload)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPStatusError as exc:
        raise RpcError(f"{method}: HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise RpcError(f"{method}: {exc.__class__.__name__}: {exc}") from exc
    except httpx.InvalidURL as exc:
        raise RpcError(f"{method}: invalid RPC URL: {exc}") from exc
    except ValueError as exc:
        raise RpcError(f"{method}: invalid JSON response") from exc

    if not isinstance(data, dict):
        raise RpcError(f"{method}: unexpected JSON-RPC response (non-object)")

    error = data.get("error")
    if error is not None:
        if isinstance(error, dict):
            code = error.get("code")
            message = error.get("message") or "unknown error"
            raise RpcError(f"{method}: RPC error {code}: {message}", code=code)
        raise RpcError(f"{method}: RPC error: {error}")

    result = data.get("result")
    logger.debug("<- %s %r", method, result)
    return result


def _quantity(method: str, rpc_url: str) -> int:
    result = rpc_call(method, [], rpc_url)
    try:
        return hex_to_int(result)
    except ValueError:
        raise RpcError(f"{method}: malformed quantity {result!r}") from None


def _hex_data(method: str, result: Any) -> Optional[str]:
    if result is not None and not isinstance(result, str):
        raise RpcError(f"{method}: unexpected result {result!r}")
    return result


def get_block_number(rpc_url: str) -> int:
    return _quantity("eth_blockNumber", rpc_url)


def get_chain_id(rpc_url: str) -> int:
    return _quantity("eth_chainId", rpc_url)


def get_code(address: str, rpc_url: str, block: str = "latest") -> str:
    """Deployed bytecode at address ("0x" for accounts without code)."""
    return _hex_data("eth_getCode", rpc_call("eth_getCode", [address, block], rpc_url)) or "0x"


def eth_call(address: str, calldata: str, rpc_url: str, block: str = "latest") -> Optional[str]:
    """Raw eth_call; returns the hex result exactly as the node sent it."""
    result = rpc_call("eth_call", [{"to": address, "data": calldata}, block], rpc_url)
    return _hex_data("eth_call", result)


def read_contract(
    contract_address: str,
    function_name: str,
    args: Optional[list] = None,
    abi: Optional[list] = None,
    rpc_url: str = "",
) -> Any:
    """
    Read from a smart contract (eth_call).

    Args:
        contract_address: 0x-prefixed contract address
        function_name: Function to call
        args: Function arguments (default: [])
        abi: Contract ABI
        rpc_url: RPC endpoint URL

    Returns:
        Decoded return value(s), or None for an empty result
    """
    if abi is None:
        raise ValueError("abi must be provided")

    calldata = encode_function_call(abi, function_name, args or [])
    result = eth_call(contract_address, calldata, rpc_url)

    if is_empty_hex(result):
        return None

    return decode_function_result(abi, function_name, result)
