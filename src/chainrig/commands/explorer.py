"""Explorer - block explorer API keys and verification endpoints."""

from __future__ import annotations

from typing import Optional

import click

from ..config.explorer import API_KEY_SOURCES, load_explorer_config


@click.command()
@click.argument("network", required=False)
def explorer(network: Optional[str]) -> None:
    """Show which explorer API keys are set and where they point."""
    config = load_explorer_config()
    names = [network] if network else list(API_KEY_SOURCES)

    for name in names:
        key = config.api_key_for(name)
        status = click.style("set", fg="green") if key else click.style("missing", fg="yellow")
        source = API_KEY_SOURCES.get(name, "-")
        click.echo(f"  {name:<12} {source:<20} {status}")

    click.echo("")
    for chain in config.custom_chains:
        if network and chain.network != network:
            continue
        click.echo(f"  {chain.network:<12} {chain.chain_id:>9}  {chain.api_url}")
        click.echo(click.style(f"  {'':<12} {'':>9}  {chain.browser_url}", dim=True))

    if not network:
        click.echo("")
        click.echo(f"  Sourcify: {'enabled' if config.sourcify_enabled else 'disabled'}")
