from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .explorer import ExplorerConfig, load_explorer_config
from .networks import DEFAULT_NETWORK, NetworkProfile, load_networks

SOLIDITY_VERSION = "0.8.26"
OPTIMIZER_RUNS = 200


@dataclass(frozen=True)
class SolidityConfig:
    version: str = SOLIDITY_VERSION
    optimizer_enabled: bool = True
    optimizer_runs: int = OPTIMIZER_RUNS

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "settings": {
                "optimizer": {"enabled": self.optimizer_enabled, "runs": self.optimizer_runs},
            },
        }


@dataclass(frozen=True)
class ToolchainConfig:
    networks: dict[str, NetworkProfile]
    explorer: ExplorerConfig
    solidity: SolidityConfig = field(default_factory=SolidityConfig)
    default_network: str = DEFAULT_NETWORK

    def to_dict(self, mask: bool = True) -> dict[str, Any]:
        networks = {}
        for name, profile in self.networks.items():
            entry = profile.to_dict(mask=mask)
            entry.pop("name")
            networks[name] = entry
        return {
            "defaultNetwork": self.default_network,
            "solidity": self.solidity.to_dict(),
            "networks": networks,
            "etherscan": self.explorer.to_dict(mask=mask),
        }


def load_toolchain_config(
    environ: Optional[Mapping[str, str]] = None,
    warn: bool = True,
) -> ToolchainConfig:
    """Assemble the full toolchain configuration from the environment."""
    return ToolchainConfig(
        networks=load_networks(environ, warn=warn),
        explorer=load_explorer_config(environ),
    )
