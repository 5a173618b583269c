"""
Environment loading and signer key handling.

Network URLs, explorer keys and the deployer key are read from the process
environment, optionally seeded from a .env file in the working directory.
A variable that is already set always wins over the .env file.

Dependencies: python-dotenv, eth-account (no full web3.py needed)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from eth_account import Account

from ..utils import strip_0x

logger = logging.getLogger(__name__)

MISSING_KEY_WARNING = (
    "WARNING: The PRIVATE_KEY environment variable is not defined in the .env file. "
    "Operations requiring a signer will fail."
)


def load_env(env_path: Optional[Path] = None) -> Optional[Path]:
    """
    Load a .env file into os.environ without overriding existing values.

    Args:
        env_path: Explicit .env path. If None, searches upward from the
                  current working directory.

    Returns:
        Path of the loaded file, or None if no file was found
    """
    if env_path is None:
        found = find_dotenv(usecwd=True)
        if not found:
            logger.debug("No .env file found from %s", os.getcwd())
            return None
        env_path = Path(found)

    if not env_path.exists():
        logger.debug(".env file %s does not exist", env_path)
        return None

    load_dotenv(env_path, override=False)
    logger.debug("Loaded environment from %s", env_path)
    return env_path


def env_value(name: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Read an env var, treating empty strings as unset."""
    source = os.environ if environ is None else environ
    value = source.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def normalize_private_key(private_key: str) -> str:
    """Ensure a hex private key carries the 0x prefix."""
    return "0x" + strip_0x(private_key.strip())


def signer_accounts(
    environ: Optional[Mapping[str, str]] = None,
    warn: bool = True,
) -> list[str]:
    """
    Build the signer key list shared by every remote network.

    Args:
        environ: Environment mapping (default: os.environ)
        warn: Log a warning when PRIVATE_KEY is missing

    Returns:
        [private_key] with a 0x prefix, or [] when PRIVATE_KEY is unset
    """
    private_key = env_value("PRIVATE_KEY", environ)
    if not private_key:
        if warn:
            logger.warning(MISSING_KEY_WARNING)
        return []
    return [normalize_private_key(private_key)]


def signer_address(private_key: str) -> str:
    """
    Derive the checksummed address for a private key.

    Raises:
        ValueError: If the key is not a valid secp256k1 private key
    """
    return Account.from_key(normalize_private_key(private_key)).address
