"""
Probe - Smoke-test a JSON-RPC provider.

Connects to the provider, reads the latest block number, then calls name()
on a contract and decodes the string. Failures are classified as:
- RPC / network failure
- empty eth_call result (contract returned nothing)
- no bytecode at the address (wrong address or wrong network)
"""

from __future__ import annotations

import sys
from typing import Optional

import click
from click.core import ParameterSource

from ..chain.abi import NAME_ABI
from ..chain.probe import probe_contract
from ..config.networks import get_network
from ..errors import ChainrigError, ConfigError
from ..utils import is_hex_address

DEFAULT_CHAIN_ID = 137  # Polygon PoS, served by QUICKNODE_MATIC_URL


def _echo_step(message: str, err: bool = False) -> None:
    if err:
        click.secho(message, fg="red" if message.startswith("ERROR") else "yellow", err=True)
    else:
        click.echo(f"  {message}")


@click.command()
@click.option(
    "--address",
    envvar="CHAINRIG_PROBE_ADDRESS",
    required=True,
    help="Contract address to call name() on",
)
@click.option("--network", "network_name", default=None, help="Use a configured network profile")
@click.option(
    "--rpc-url",
    envvar="QUICKNODE_MATIC_URL",
    default=None,
    help="Provider URL (default: QUICKNODE_MATIC_URL)",
)
@click.option("--chain-id", type=int, default=None, help="Expected chain ID (default: 137)")
@click.option(
    "--verify-chain",
    is_flag=True,
    help="Compare eth_chainId with the expected chain ID",
)
def probe(
    address: str,
    network_name: Optional[str],
    rpc_url: Optional[str],
    chain_id: Optional[int],
    verify_chain: bool,
) -> None:
    """
    Read the block number and a contract's name() through a provider.

    Uses the URL directly from the environment unless --network is given.
    """
    click.echo("=== Chainrig Probe ===")
    click.echo("")

    try:
        ctx = click.get_current_context()
        if network_name and ctx.get_parameter_source("rpc_url") is ParameterSource.COMMANDLINE:
            raise ConfigError("--network and --rpc-url are mutually exclusive")

        if network_name:
            profile = get_network(network_name)
            if not profile.is_remote:
                raise ConfigError(f"Network '{network_name}' has no RPC URL configured")
            rpc_url = profile.url
            if chain_id is None:
                chain_id = profile.chain_id
        elif not rpc_url:
            raise ConfigError("QUICKNODE_MATIC_URL not defined in .env")

        if not is_hex_address(address):
            raise ConfigError(f"Invalid contract address: {address}")
    except ChainrigError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)

    report = probe_contract(
        rpc_url,
        address,
        chain_id if chain_id is not None else DEFAULT_CHAIN_ID,
        abi=NAME_ABI,
        verify_chain=verify_chain,
        echo=_echo_step,
    )

    click.echo("")
    if report.ok:
        click.secho(f"SUCCESS: {report.function_name}() = {report.value}", fg="green")
        return

    try:
        report.raise_for_failure()
    except ChainrigError as exc:
        click.secho(f"FAILED ({report.failure}): {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)
