"""
Network profiles for the contract toolchain.

Each profile maps a network name to an RPC URL, chain ID and signer list.
URLs are resolved once from environment variables, in priority order, with
a literal fallback at the end of the chain.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from ..errors import ConfigError
from ..utils import mask_secret, mask_url
from .env import env_value, signer_accounts

DEFAULT_NETWORK = "hardhat"

HARDHAT_CHAIN_ID = 31337
LOCALHOST_URL = "http://127.0.0.1:8545"
QUICKNODE_POLYGON_URL = (
    "https://aged-tiniest-frost.matic.quiknode.pro/b50bb4625032afb94b57bf5efd6082700059e0da8/"
)
POLYGON_PUBLIC_URL = "https://polygon-rpc.com"
AMOY_PUBLIC_URL = "https://rpc-amoy.polygon.technology/"


@dataclass(frozen=True)
class NetworkProfile:
    name: str
    url: str
    chain_id: int
    accounts: tuple[str, ...] = field(default=(), repr=False)

    @property
    def is_remote(self) -> bool:
        return bool(self.url)

    @property
    def has_signer(self) -> bool:
        return bool(self.accounts)

    def to_dict(self, mask: bool = True) -> dict[str, Any]:
        return {
            "name": self.name,
            "url": mask_url(self.url) if mask else self.url,
            "chainId": self.chain_id,
            "accounts": [mask_secret(a) if mask else a for a in self.accounts],
        }


@dataclass(frozen=True)
class _NetworkSpec:
    name: str
    chain_id: int
    env_sources: tuple[str, ...] = ()
    fallback: str = ""
    uses_signer: bool = True


# Order matters: it is the order profiles are listed in.
_NETWORK_SPECS: tuple[_NetworkSpec, ...] = (
    _NetworkSpec("hardhat", HARDHAT_CHAIN_ID, uses_signer=False),
    _NetworkSpec("localhost", HARDHAT_CHAIN_ID, fallback=LOCALHOST_URL, uses_signer=False),
    _NetworkSpec("myQuickNode", 137, fallback=QUICKNODE_POLYGON_URL),
    _NetworkSpec(
        "polygon",
        137,
        env_sources=("POLYGON_RPC_URL", "QUICKNODE_MATIC_URL"),
        fallback=POLYGON_PUBLIC_URL,
    ),
    _NetworkSpec("amoy", 80002, env_sources=("AMOY_RPC_URL",), fallback=AMOY_PUBLIC_URL),
    _NetworkSpec("base", 8453, env_sources=("BASE_RPC_URL",)),
    _NetworkSpec("baseSepolia", 84532, env_sources=("BASE_SEPOLIA_RPC_URL",)),
    _NetworkSpec("sepolia", 11155111, env_sources=("SEPOLIA_RPC_URL",)),
    _NetworkSpec("ethereum", 1, env_sources=("ETHEREUM_RPC_URL",)),
)

NETWORK_NAMES: tuple[str, ...] = tuple(spec.name for spec in _NETWORK_SPECS)


def resolve_url(
    sources: Sequence[str],
    fallback: str = "",
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Return the first non-empty env var among sources, else the fallback."""
    for name in sources:
        value = env_value(name, environ)
        if value:
            return value
    return fallback


def load_networks(
    environ: Optional[Mapping[str, str]] = None,
    warn: bool = True,
) -> dict[str, NetworkProfile]:
    """Build every network profile from the environment."""
    accounts = tuple(signer_accounts(environ, warn=warn))
    profiles: dict[str, NetworkProfile] = {}
    for spec in _NETWORK_SPECS:
        profiles[spec.name] = NetworkProfile(
            name=spec.name,
            url=resolve_url(spec.env_sources, spec.fallback, environ),
            chain_id=spec.chain_id,
            accounts=accounts if spec.uses_signer else (),
        )
    return profiles


def get_network(
    name: str,
    environ: Optional[Mapping[str, str]] = None,
    warn: bool = False,
) -> NetworkProfile:
    """
    Look up a single network profile by name.

    Raises:
        ConfigError: If the name is not a known network
    """
    profiles = load_networks(environ, warn=warn)
    try:
        return profiles[name]
    except KeyError:
        known = ", ".join(NETWORK_NAMES)
        raise ConfigError(f"Unknown network '{name}'. Known networks: {known}") from None
