"""
Chainrig CLI

Command-line interface for the contract toolchain network configuration.

Network URLs, chain IDs, the deployer key and explorer API keys are read
from the environment (seeded from .env). Nothing is ever written back.

Commands:
  probe         - Smoke-test a provider: block number + contract name()
  networks      - List / show network profiles
  explorer      - Show explorer API keys and verification endpoints
  config        - Print the full toolchain configuration
  accounts      - Show the signer address derived from PRIVATE_KEY
  info          - Show configuration status at a glance
  block-number  - Latest block on a network
  check-chain   - Verify a network's node serves the configured chain ID
  call          - Read-only contract call
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .config.env import env_value, load_env, signer_address
from .config.toolchain import load_toolchain_config
from .utils import mask_url


# ============ Banner ============


def _print_banner() -> None:
    border = click.style("  ◆ ═══════════════════════════════════════ ◆", fg="cyan")
    click.echo()
    click.echo(border)
    click.echo()
    click.echo(
        click.style("        C H A I N R I G", fg="bright_white", bold=True)
        + click.style(f"        v{__version__}", dim=True)
    )
    click.secho("        ─── Contract Toolchain Networks ───", fg="cyan")
    click.echo()
    click.echo(border)
    click.echo()


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="chainrig")
@click.option("--verbose", "-v", is_flag=True, help="Log RPC traffic to stderr")
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=".env file to load (default: nearest .env from the working directory)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, env_file: Optional[Path]) -> None:
    """Chainrig: network wiring and RPC diagnostics for contract tooling."""
    # Without --verbose, warnings reach stderr through logging's last-resort handler.
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    load_env(env_file)

    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Top-level Commands ============

from .commands.chain import block_number, call, check_chain
from .commands.explorer import explorer
from .commands.networks import networks
from .commands.probe import probe

cli.add_command(probe)
cli.add_command(networks)
cli.add_command(explorer)
cli.add_command(block_number)
cli.add_command(check_chain)
cli.add_command(call)


# ============ Config ============


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Print machine-readable JSON")
@click.option("--show-secrets", is_flag=True, help="Do not mask URLs and keys")
def config(as_json: bool, show_secrets: bool) -> None:
    """Print the full toolchain configuration."""
    toolchain = load_toolchain_config(warn=not as_json)
    payload = toolchain.to_dict(mask=not show_secrets)

    if as_json:
        click.echo(json.dumps(payload, indent=2))
        return

    solidity = toolchain.solidity
    click.secho("  Compiler ───────────────────────────────", fg="cyan")
    click.echo(f"  Solidity:    {solidity.version}")
    optimizer = f"enabled, {solidity.optimizer_runs} runs" if solidity.optimizer_enabled else "disabled"
    click.echo(f"  Optimizer:   {optimizer}")
    click.echo(f"  Default:     {toolchain.default_network}")
    click.echo()

    click.secho("  Networks ───────────────────────────────", fg="cyan")
    for name, entry in payload["networks"].items():
        url = entry["url"] or "-"
        click.echo(f"  {name:<12} {entry['chainId']:>9}  {url}")
    click.echo()

    click.secho("  Explorer ───────────────────────────────", fg="cyan")
    for name, key in payload["etherscan"]["apiKey"].items():
        click.echo(f"  {name:<12} {key or click.style('missing', fg='yellow')}")
    click.echo()


# ============ Identity ============


@cli.command()
def accounts() -> None:
    """Show the signer address used by remote networks."""
    private_key = env_value("PRIVATE_KEY")
    if not private_key:
        click.echo("No signer configured.")
        click.echo("Set PRIVATE_KEY in .env to enable deployments.")
        sys.exit(1)

    try:
        address = signer_address(private_key)
    except ValueError as exc:
        click.secho(f"ERROR: Invalid PRIVATE_KEY: {exc}", fg="red", err=True)
        sys.exit(2)
    click.echo(f"Address: {address}")


# ============ Info ============


@cli.command()
def info() -> None:
    """Show configuration status at a glance."""
    _print_banner()
    toolchain = load_toolchain_config(warn=False)

    click.secho("  Status ─────────────────────────────────", fg="cyan")
    click.echo()

    signer = toolchain.networks["polygon"].has_signer
    click.echo(
        click.style("  Signer:      ", dim=True)
        + (click.style("configured", fg="green") if signer else click.style("missing", fg="yellow"))
    )

    remote = [p for p in toolchain.networks.values() if p.is_remote]
    click.echo(
        click.style("  Networks:    ", dim=True)
        + click.style(f"{len(remote)}/{len(toolchain.networks)} with RPC URL", fg="bright_white")
    )

    quicknode = env_value("QUICKNODE_MATIC_URL")
    click.echo(
        click.style("  QuickNode:   ", dim=True)
        + (mask_url(quicknode) if quicknode else click.style("not set", fg="yellow"))
    )
    click.echo()


# ============ Entry Points ============


def main() -> None:
    """Chainrig CLI entry point."""
    # Ensure UTF-8 output on Windows (for Unicode box-drawing / symbols)
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass  # Fallback: old Python or non-tty
    cli()


if __name__ == "__main__":
    main()
