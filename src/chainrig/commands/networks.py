"""Networks - list and inspect configured network profiles."""

from __future__ import annotations

import sys

import click

from ..config.explorer import load_explorer_config
from ..config.networks import DEFAULT_NETWORK, get_network, load_networks
from ..errors import ConfigError
from ..utils import mask_url


@click.group()
def networks() -> None:
    """List and inspect network profiles."""
    pass


@networks.command("list")
@click.option("--show-secrets", is_flag=True, help="Print full RPC URLs")
def networks_list(show_secrets: bool) -> None:
    """List every network with its chain ID and resolved URL."""
    for name, profile in load_networks().items():
        marker = "*" if name == DEFAULT_NETWORK else " "
        url = profile.url if show_secrets else mask_url(profile.url)
        url_text = url or click.style("(not configured)", fg="yellow")
        click.echo(
            f" {marker} "
            + click.style(f"{name:<12}", fg="bright_white", bold=True)
            + click.style(f" {profile.chain_id:>9}  ", dim=True)
            + url_text
        )


@networks.command("show")
@click.argument("name")
@click.option("--show-secrets", is_flag=True, help="Print the full RPC URL")
def networks_show(name: str, show_secrets: bool) -> None:
    """Show one network profile."""
    try:
        profile = get_network(name)
    except ConfigError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(exc.exit_code)

    explorer = load_explorer_config()
    chain = explorer.custom_chain(name)

    click.echo(f"  Network:   {profile.name}")
    click.echo(f"  Chain ID:  {profile.chain_id}")
    if profile.is_remote:
        click.echo(f"  RPC URL:   {profile.url if show_secrets else mask_url(profile.url)}")
    else:
        click.echo("  RPC URL:   (in-process / not configured)")
    click.echo(f"  Signer:    {'configured' if profile.has_signer else 'none'}")
    if chain is not None:
        click.echo(f"  Explorer:  {chain.browser_url}")
