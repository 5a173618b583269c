"""
Provider probe - a read-only smoke test against a JSON-RPC endpoint.

Steps, in order: eth_blockNumber, encode name(), eth_call, decode.
An empty eth_call result is followed by eth_getCode so the report can tell
"no contract at this address" apart from "contract returned nothing".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from eth_abi.exceptions import DecodingError

from ..errors import ChainrigError, EmptyResultError, NoBytecodeError, RpcError
from ..utils import is_empty_hex, mask_url
from . import rpc
from .abi import NAME_ABI, decode_function_result, encode_function_call

logger = logging.getLogger(__name__)

FAILURE_RPC = "rpc"
FAILURE_EMPTY_RESULT = "empty-result"
FAILURE_NO_BYTECODE = "no-bytecode"

Echo = Callable[[str, bool], None]


def _silent(message: str, err: bool = False) -> None:
    pass


@dataclass
class ProbeReport:
    rpc_url: str
    chain_id: int
    address: str
    function_name: str = "name"
    block_number: Optional[int] = None
    remote_chain_id: Optional[int] = None
    calldata: Optional[str] = None
    raw_result: Optional[str] = None
    value: Any = None
    has_code: Optional[bool] = None
    failure: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def chain_mismatch(self) -> bool:
        return self.remote_chain_id is not None and self.remote_chain_id != self.chain_id

    def raise_for_failure(self) -> None:
        """Raise the error matching the failure classification, if any."""
        if self.failure == FAILURE_NO_BYTECODE:
            raise NoBytecodeError(self.error or "no bytecode")
        if self.failure == FAILURE_EMPTY_RESULT:
            raise EmptyResultError(self.error or "empty result")
        if self.failure == FAILURE_RPC:
            raise RpcError(self.error or "RPC failure")


def probe_contract(
    rpc_url: str,
    address: str,
    chain_id: int,
    abi: Optional[list] = None,
    function_name: str = "name",
    verify_chain: bool = False,
    echo: Optional[Echo] = None,
) -> ProbeReport:
    """
    Fetch the latest block number and call a zero-argument view function.

    Args:
        rpc_url: Provider URL
        address: Target contract address
        chain_id: Chain ID the provider is expected to serve
        abi: ABI containing function_name (default: NAME_ABI)
        function_name: Zero-argument function to call (default: name)
        verify_chain: Also compare eth_chainId with chain_id
        echo: Callback receiving (message, is_error) for each step

    Returns:
        ProbeReport; network failures are recorded, not raised
    """
    say = echo or _silent
    abi = abi or NAME_ABI
    report = ProbeReport(
        rpc_url=rpc_url, chain_id=chain_id, address=address, function_name=function_name
    )
    say(f"Using RPC URL: {mask_url(rpc_url)} (chain ID {chain_id})", False)

    say("Attempting to call eth_blockNumber...", False)
    try:
        report.block_number = rpc.get_block_number(rpc_url)
    except (ChainrigError, ValueError) as exc:
        report.failure = FAILURE_RPC
        report.error = f"eth_blockNumber failed: {exc}"
        logger.debug("eth_blockNumber failed", exc_info=True)
        say(f"ERROR: {report.error}", True)
        return report
    say(f"Current block number: {report.block_number}", False)

    if verify_chain:
        try:
            report.remote_chain_id = rpc.get_chain_id(rpc_url)
        except (ChainrigError, ValueError) as exc:
            say(f"WARNING: eth_chainId failed: {exc}", True)
        else:
            if report.chain_mismatch:
                say(
                    f"WARNING: configured chain ID {chain_id} but the node serves "
                    f"{report.remote_chain_id}",
                    True,
                )

    report.calldata = encode_function_call(abi, function_name, [])
    say(f"Attempting to read {function_name}() with eth_call... Calldata: {report.calldata}", False)

    try:
        report.raw_result = rpc.eth_call(address, report.calldata, rpc_url)
    except (ChainrigError, ValueError) as exc:
        report.failure = FAILURE_RPC
        report.error = f"eth_call failed: {exc}"
        logger.debug("eth_call failed", exc_info=True)
        say(f"ERROR: {report.error}", True)
        return report
    say(f"Raw result from eth_call: {report.raw_result}", False)

    if is_empty_hex(report.raw_result):
        report.failure = FAILURE_EMPTY_RESULT
        report.error = f"eth_call returned an empty or null result ({report.raw_result}), cannot decode"
        say(f"ERROR: {report.error}.", True)
        _check_bytecode(report, say)
        return report

    try:
        report.value = decode_function_result(abi, function_name, report.raw_result)
    except (DecodingError, ValueError) as exc:
        report.failure = FAILURE_RPC
        report.error = f"could not decode {function_name}() result: {exc}"
        say(f"ERROR: {report.error}", True)
        return report

    say(f"Contract {function_name}: {report.value}", False)
    say("Probe completed successfully.", False)
    return report


def _check_bytecode(report: ProbeReport, say: Echo) -> None:
    try:
        code = rpc.get_code(report.address, report.rpc_url)
    except (ChainrigError, ValueError) as exc:
        say(f"WARNING: eth_getCode failed: {exc}", True)
        return

    report.has_code = not is_empty_hex(code)
    if not report.has_code:
        report.failure = FAILURE_NO_BYTECODE
        report.error = (
            f"The address {report.address} has no deployed bytecode. "
            "Verify the address and network."
        )
        say(f"ERROR: {report.error}", True)
