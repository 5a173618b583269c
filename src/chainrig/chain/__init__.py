"""
Chain - On-chain read layer.

Provides the JSON-RPC client, ABI helpers and the provider probe.

Uses httpx + eth-abi + eth-hash instead of the heavyweight web3.py.
"""
