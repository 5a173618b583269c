"""
ABI helpers - function lookup, calldata encoding and result decoding.

Encoding is delegated to eth-abi; selectors use Keccak-256 from eth-hash.
ABIs are taken inline or loaded from Hardhat compilation artifacts
(artifacts/contracts/<Name>.sol/<Name>.json).
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from eth_abi import decode, encode
from eth_hash.auto import keccak

from ..utils import strip_0x

# Minimal ABI for the ERC-20 / ERC-721 name() getter
NAME_ABI: list[dict[str, Any]] = [
    {
        "inputs": [],
        "name": "name",
        "outputs": [{"internalType": "string", "name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    }
]


def _canonical_type(param: dict[str, Any]) -> str:
    """Expand tuple components into the canonical signature form."""
    typ = param["type"]
    if typ.startswith("tuple"):
        inner = ",".join(_canonical_type(c) for c in param.get("components", []))
        return f"({inner}){typ[len('tuple'):]}"
    return typ


def find_function(abi: list[dict[str, Any]], function_name: str) -> dict[str, Any]:
    for entry in abi:
        if entry.get("type") == "function" and entry.get("name") == function_name:
            return entry
    raise ValueError(f"Function {function_name} not found in ABI")


def function_signature(entry: dict[str, Any]) -> str:
    input_types = [_canonical_type(inp) for inp in entry.get("inputs", [])]
    return f"{entry['name']}({','.join(input_types)})"


def function_selector(signature: str) -> bytes:
    """First 4 bytes of keccak256(signature). Not NIST SHA3-256."""
    return keccak(signature.encode("utf-8"))[:4]


def encode_function_call(
    abi: list[dict[str, Any]],
    function_name: str,
    args: Optional[list] = None,
) -> str:
    """
    ABI-encode a function call.

    Args:
        abi: Contract ABI
        function_name: Function name to call
        args: Function arguments

    Returns:
        0x-prefixed hex encoded calldata
    """
    func = find_function(abi, function_name)
    input_types = [_canonical_type(inp) for inp in func.get("inputs", [])]
    args = list(args or [])
    if len(args) != len(input_types):
        raise ValueError(
            f"{function_name} expects {len(input_types)} argument(s), got {len(args)}"
        )

    selector = function_selector(function_signature(func))
    encoded_args = encode(input_types, args) if input_types else b""
    return "0x" + selector.hex() + encoded_args.hex()


def decode_function_result(abi: list[dict[str, Any]], function_name: str, data: str) -> Any:
    """
    ABI-decode a function call result.

    Returns:
        Decoded result (single value or tuple), None for functions without outputs
    """
    func = find_function(abi, function_name)
    output_types = [_canonical_type(out) for out in func.get("outputs", [])]
    if not output_types:
        return None

    decoded = decode(output_types, bytes.fromhex(strip_0x(data)))
    if len(decoded) == 1:
        return decoded[0]
    return decoded


def _find_artifacts_dir(start: Optional[Path] = None) -> Path:
    """Walk up from start (default: cwd) to the Hardhat artifacts/contracts dir."""
    current = (start or Path.cwd()).resolve()
    for parent in [current, *current.parents]:
        candidate = parent / "artifacts" / "contracts"
        if candidate.is_dir():
            return candidate
    raise FileNotFoundError(
        "Cannot find artifacts/contracts/. Run 'npx hardhat compile' in the project root."
    )


def load_abi_file(path: Path) -> list[dict[str, Any]]:
    """Load an ABI from a bare ABI JSON list or a compilation artifact."""
    with path.open("r", encoding="utf-8") as f:
        payload = json.load(f)

    if isinstance(payload, dict):
        payload = payload.get("abi")
    if not isinstance(payload, list):
        raise ValueError(f"No ABI list found in {path}")
    return payload


@lru_cache(maxsize=16)
def load_abi(contract_name: str, root: Optional[Path] = None) -> list[dict[str, Any]]:
    """
    Load the ABI for a contract from Hardhat artifacts.

    Raises:
        FileNotFoundError: If the artifact is missing
    """
    artifact = _find_artifacts_dir(root) / f"{contract_name}.sol" / f"{contract_name}.json"
    if not artifact.exists():
        raise FileNotFoundError(
            f"ABI not found: {artifact}. Run 'npx hardhat compile' first."
        )
    return load_abi_file(artifact)
