"""
Commands - CLI command implementations.

Each module corresponds to a top-level CLI command:
- probe:    Smoke-test an RPC endpoint with eth_blockNumber + name()
- networks: List and inspect network profiles
- explorer: Show block explorer keys and URLs
- chain:    block-number, check-chain and read-only call
"""
