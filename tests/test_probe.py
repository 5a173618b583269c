"""Tests for the provider probe and its failure classification."""

from __future__ import annotations

import pytest
from eth_abi import encode

from chainrig.chain.probe import (
    FAILURE_EMPTY_RESULT,
    FAILURE_NO_BYTECODE,
    FAILURE_RPC,
    probe_contract,
)
from chainrig.errors import EmptyResultError, NoBytecodeError, RpcError

RPC_URL = "https://aged-tiniest-frost.matic.quiknode.pro/token/"
TOKEN = "0x" + "cd" * 20
NAME_RESULT = "0x" + encode(["string"], ["Wrapped Matic"]).hex()


@pytest.fixture()
def steps() -> list[tuple[str, bool]]:
    return []


def _recorder(steps: list[tuple[str, bool]]):
    def echo(message: str, err: bool = False) -> None:
        steps.append((message, err))

    return echo


class TestProbeSuccess:
    def test_reads_block_and_name(self, fake_node, steps) -> None:
        fake_node.results["eth_blockNumber"] = "0x3b9aca0"
        fake_node.results["eth_call"] = NAME_RESULT

        report = probe_contract(RPC_URL, TOKEN, 137, echo=_recorder(steps))

        assert report.ok
        assert report.block_number == 62_500_000
        assert report.calldata == "0x06fdde03"
        assert report.raw_result == NAME_RESULT
        assert report.value == "Wrapped Matic"
        assert fake_node.methods == ["eth_blockNumber", "eth_call"]
        report.raise_for_failure()

    def test_steps_in_order(self, fake_node, steps) -> None:
        fake_node.results["eth_blockNumber"] = "0x1"
        fake_node.results["eth_call"] = NAME_RESULT

        probe_contract(RPC_URL, TOKEN, 137, echo=_recorder(steps))

        messages = [m for m, _ in steps]
        assert messages[0].startswith("Using RPC URL: https://aged-tiniest-frost.matic.quiknode.pro/***")
        assert "token" not in messages[0]
        assert messages[1] == "Attempting to call eth_blockNumber..."
        assert messages[2] == "Current block number: 1"
        assert "Calldata: 0x06fdde03" in messages[3]
        assert messages[4] == f"Raw result from eth_call: {NAME_RESULT}"
        assert messages[5] == "Contract name: Wrapped Matic"
        assert messages[6] == "Probe completed successfully."
        assert not any(err for _, err in steps)

    def test_runs_without_echo(self, fake_node) -> None:
        fake_node.results["eth_blockNumber"] = "0x1"
        fake_node.results["eth_call"] = NAME_RESULT
        assert probe_contract(RPC_URL, TOKEN, 137).value == "Wrapped Matic"


class TestProbeFailures:
    def test_block_number_failure_stops_early(self, fake_node, steps) -> None:
        fake_node.errors["eth_blockNumber"] = "connect"

        report = probe_contract(RPC_URL, TOKEN, 137, echo=_recorder(steps))

        assert report.failure == FAILURE_RPC
        assert "eth_blockNumber failed" in report.error
        assert fake_node.methods == ["eth_blockNumber"]
        assert steps[-1][1] is True
        with pytest.raises(RpcError):
            report.raise_for_failure()

    def test_call_error(self, fake_node) -> None:
        fake_node.results["eth_blockNumber"] = "0x1"
        fake_node.errors["eth_call"] = {"code": -32000, "message": "execution reverted"}

        report = probe_contract(RPC_URL, TOKEN, 137)

        assert report.failure == FAILURE_RPC
        assert "execution reverted" in report.error
        assert fake_node.methods == ["eth_blockNumber", "eth_call"]

    @pytest.mark.parametrize("empty", [None, "0x"])
    def test_empty_result_with_code(self, fake_node, empty) -> None:
        fake_node.results["eth_blockNumber"] = "0x1"
        fake_node.results["eth_call"] = empty
        fake_node.results["eth_getCode"] = "0x6080604052"

        report = probe_contract(RPC_URL, TOKEN, 137)

        assert report.failure == FAILURE_EMPTY_RESULT
        assert report.has_code is True
        assert "empty or null result" in report.error
        assert fake_node.methods == ["eth_blockNumber", "eth_call", "eth_getCode"]
        with pytest.raises(EmptyResultError):
            report.raise_for_failure()

    def test_no_bytecode(self, fake_node, steps) -> None:
        fake_node.results["eth_blockNumber"] = "0x1"
        fake_node.results["eth_call"] = "0x"
        fake_node.results["eth_getCode"] = "0x"

        report = probe_contract(RPC_URL, TOKEN, 137, echo=_recorder(steps))

        assert report.failure == FAILURE_NO_BYTECODE
        assert report.has_code is False
        assert f"The address {TOKEN} has no deployed bytecode" in report.error
        assert steps[-1] == (f"ERROR: {report.error}", True)
        with pytest.raises(NoBytecodeError):
            report.raise_for_failure()

    def test_get_code_failure_keeps_empty_result(self, fake_node) -> None:
        fake_node.results["eth_blockNumber"] = "0x1"
        fake_node.results["eth_call"] = "0x"
        fake_node.errors["eth_getCode"] = {"code": -32601, "message": "method not found"}

        report = probe_contract(RPC_URL, TOKEN, 137)

        assert report.failure == FAILURE_EMPTY_RESULT
        assert report.has_code is None

    def test_undecodable_result(self, fake_node) -> None:
        fake_node.results["eth_blockNumber"] = "0x1"
        fake_node.results["eth_call"] = "0x" + "00" * 31 + "20"

        report = probe_contract(RPC_URL, TOKEN, 137)

        assert report.failure == FAILURE_RPC
        assert "could not decode" in report.error

    def test_non_string_call_result(self, fake_node) -> None:
        fake_node.results["eth_blockNumber"] = "0x1"
        fake_node.results["eth_call"] = 1

        report = probe_contract(RPC_URL, TOKEN, 137)

        assert report.failure == FAILURE_RPC
        assert "unexpected result 1" in report.error
        assert fake_node.methods == ["eth_blockNumber", "eth_call"]

    def test_null_block_number(self, fake_node) -> None:
        fake_node.results["eth_blockNumber"] = None

        report = probe_contract(RPC_URL, TOKEN, 137)

        assert report.failure == FAILURE_RPC
        assert "malformed quantity" in report.error
        assert fake_node.methods == ["eth_blockNumber"]


class TestChainVerification:
    def test_match(self, fake_node) -> None:
        fake_node.results.update(eth_blockNumber="0x1", eth_chainId="0x89", eth_call=NAME_RESULT)

        report = probe_contract(RPC_URL, TOKEN, 137, verify_chain=True)

        assert report.ok
        assert report.remote_chain_id == 137
        assert not report.chain_mismatch

    def test_mismatch_is_reported_but_probe_continues(self, fake_node, steps) -> None:
        fake_node.results.update(eth_blockNumber="0x1", eth_chainId="0x13882", eth_call=NAME_RESULT)

        report = probe_contract(RPC_URL, TOKEN, 137, verify_chain=True, echo=_recorder(steps))

        assert report.ok
        assert report.remote_chain_id == 80002
        assert report.chain_mismatch
        assert any("node serves 80002" in m and err for m, err in steps)

    def test_not_checked_by_default(self, fake_node) -> None:
        fake_node.results.update(eth_blockNumber="0x1", eth_call=NAME_RESULT)
        probe_contract(RPC_URL, TOKEN, 137)
        assert "eth_chainId" not in fake_node.methods
