"""
Chain - Direct read-only queries against a network.

Commands:
- block-number: Latest block number
- check-chain:  Compare eth_chainId with the configured chain ID
- call:         Read-only contract call with ABI decoding
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import click
from eth_abi.exceptions import DecodingError, EncodingError

from ..chain.abi import NAME_ABI, load_abi, load_abi_file
from ..chain.rpc import get_block_number, get_chain_id, read_contract
from ..config.networks import NetworkProfile, get_network
from ..errors import ChainrigError, ConfigError
from ..utils import is_hex_address

network_option = click.option(
    "--network",
    "network_name",
    default="polygon",
    show_default=True,
    help="Network profile to query",
)


def _remote_profile(network_name: str) -> NetworkProfile:
    profile = get_network(network_name)
    if not profile.is_remote:
        raise ConfigError(f"Network '{network_name}' has no RPC URL configured")
    return profile


@click.command("block-number")
@network_option
def block_number(network_name: str) -> None:
    """Print the latest block number."""
    try:
        profile = _remote_profile(network_name)
        number = get_block_number(profile.url)
    except ChainrigError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)
    click.echo(number)


@click.command("check-chain")
@network_option
def check_chain(network_name: str) -> None:
    """Verify the node behind a network serves the configured chain ID."""
    try:
        profile = _remote_profile(network_name)
        remote = get_chain_id(profile.url)
    except ChainrigError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)

    if remote == profile.chain_id:
        click.secho(f"OK: {network_name} serves chain ID {remote}", fg="green")
        return

    click.secho(
        f"MISMATCH: {network_name} is configured for chain ID {profile.chain_id} "
        f"but the node serves {remote}",
        fg="red",
        err=True,
    )
    sys.exit(ConfigError.exit_code)


@click.command()
@click.option("--contract", required=True, help="Target contract address")
@click.option("--function", "func_name", default="name", show_default=True, help="View function to call")
@click.option("--args", "args_json", default="[]", help="Function args as JSON array")
@click.option(
    "--abi-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="ABI JSON file or compilation artifact",
)
@click.option("--artifact", "artifact_name", default=None, help="Contract name in Hardhat artifacts")
@network_option
def call(
    contract: str,
    func_name: str,
    args_json: str,
    abi_file: Optional[Path],
    artifact_name: Optional[str],
    network_name: str,
) -> None:
    """
    Execute a read-only contract call and decode the result.

    Without --abi-file or --artifact only name() is available.
    """
    try:
        args = json.loads(args_json)
        if not isinstance(args, list):
            raise ValueError("Args must be a JSON array")
    except (json.JSONDecodeError, ValueError) as exc:
        click.secho(f"ERROR: Invalid args: {exc}", fg="red", err=True)
        sys.exit(ConfigError.exit_code)

    try:
        if not is_hex_address(contract):
            raise ConfigError(f"Invalid contract address: {contract}")
        if abi_file is not None:
            abi = load_abi_file(abi_file)
        elif artifact_name:
            abi = load_abi(artifact_name)
        else:
            abi = NAME_ABI
        profile = _remote_profile(network_name)
        result = read_contract(contract, func_name, args, abi=abi, rpc_url=profile.url)
    except ChainrigError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)
    except (FileNotFoundError, ValueError, DecodingError, EncodingError) as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(ConfigError.exit_code)

    if result is None:
        click.secho("Empty result (no return data).", fg="yellow")
        return
    click.echo(result)
