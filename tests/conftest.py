"""Shared fixtures: an in-process JSON-RPC node behind httpx.MockTransport."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

_RealClient = httpx.Client


class FakeNode:
    """Answers JSON-RPC requests from canned results, recording every call."""

    def __init__(self) -> None:
        self.results: dict[str, Any] = {}
        self.errors: dict[str, Any] = {}
        self.status_code = 200
        self.calls: list[tuple[str, list]] = []

    @property
    def methods(self) -> list[str]:
        return [method for method, _ in self.calls]

    def handler(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        method = payload["method"]
        self.calls.append((method, payload["params"]))

        if self.status_code != 200:
            return httpx.Response(self.status_code, text="upstream unavailable")

        error = self.errors.get(method)
        if error == "connect":
            raise httpx.ConnectError("connection refused", request=request)
        if error is not None:
            return httpx.Response(200, json={"jsonrpc": "2.0", "id": payload["id"], "error": error})

        return httpx.Response(
            200,
            json={"jsonrpc": "2.0", "id": payload["id"], "result": self.results.get(method)},
        )


@pytest.fixture()
def fake_node(monkeypatch: pytest.MonkeyPatch) -> FakeNode:
    node = FakeNode()
    transport = httpx.MockTransport(node.handler)

    def client_factory(*args: Any, **kwargs: Any) -> httpx.Client:
        kwargs["transport"] = transport
        return _RealClient(*args, **kwargs)

    monkeypatch.setattr(httpx, "Client", client_factory)
    return node


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every variable the toolchain reads so defaults apply."""
    for name in (
        "PRIVATE_KEY",
        "QUICKNODE_MATIC_URL",
        "POLYGON_RPC_URL",
        "AMOY_RPC_URL",
        "BASE_RPC_URL",
        "BASE_SEPOLIA_RPC_URL",
        "SEPOLIA_RPC_URL",
        "ETHEREUM_RPC_URL",
        "POLYGONSCAN_API_KEY",
        "BASESCAN_API_KEY",
        "ETHERSCAN_API_KEY",
        "CHAINRIG_PROBE_ADDRESS",
        "CHAINRIG_RPC_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
