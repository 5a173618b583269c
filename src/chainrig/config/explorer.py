"""Block explorer API keys and custom chain endpoints used for verification."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..utils import mask_secret
from .env import env_value

# explorer network -> env var holding its API key
API_KEY_SOURCES: dict[str, str] = {
    "polygon": "POLYGONSCAN_API_KEY",
    # Amoy shares the Polygonscan key
    "polygonAmoy": "POLYGONSCAN_API_KEY",
    "base": "BASESCAN_API_KEY",
    "sepolia": "ETHERSCAN_API_KEY",
}


@dataclass(frozen=True)
class CustomChain:
    network: str
    chain_id: int
    api_url: str
    browser_url: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "network": self.network,
            "chainId": self.chain_id,
            "urls": {"apiURL": self.api_url, "browserURL": self.browser_url},
        }


CUSTOM_CHAINS: tuple[CustomChain, ...] = (
    CustomChain("base", 8453, "https://api.basescan.org/api", "https://basescan.org"),
    CustomChain(
        "baseSepolia", 84532, "https://api-sepolia.basescan.org/api", "https://sepolia.basescan.org"
    ),
    CustomChain(
        "sepolia", 11155111, "https://api-sepolia.etherscan.io/api", "https://sepolia.etherscan.io"
    ),
    CustomChain("amoy", 80002, "https://api-amoy.polygonscan.com/api", "https://amoy.polygonscan.com/"),
)


@dataclass(frozen=True)
class ExplorerConfig:
    api_keys: dict[str, Optional[str]] = field(default_factory=dict)
    custom_chains: tuple[CustomChain, ...] = CUSTOM_CHAINS
    sourcify_enabled: bool = False

    def api_key_for(self, network: str) -> Optional[str]:
        return self.api_keys.get(network)

    def custom_chain(self, network: str) -> Optional[CustomChain]:
        for chain in self.custom_chains:
            if chain.network == network:
                return chain
        return None

    def address_url(self, network: str, address: str) -> Optional[str]:
        chain = self.custom_chain(network)
        if chain is None:
            return None
        return f"{chain.browser_url.rstrip('/')}/address/{address}"

    def tx_url(self, network: str, tx_hash: str) -> Optional[str]:
        chain = self.custom_chain(network)
        if chain is None:
            return None
        return f"{chain.browser_url.rstrip('/')}/tx/{tx_hash}"

    def to_dict(self, mask: bool = True) -> dict[str, Any]:
        keys = {
            network: (mask_secret(key) if mask else key) if key else None
            for network, key in self.api_keys.items()
        }
        return {
            "apiKey": keys,
            "customChains": [chain.to_dict() for chain in self.custom_chains],
            "sourcify": {"enabled": self.sourcify_enabled},
        }


def load_explorer_config(environ: Optional[Mapping[str, str]] = None) -> ExplorerConfig:
    api_keys = {network: env_value(var, environ) for network, var in API_KEY_SOURCES.items()}
    return ExplorerConfig(api_keys=api_keys)
