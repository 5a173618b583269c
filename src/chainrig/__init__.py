__version__ = "1.0.0"

__all__ = [
    # Errors
    "ChainrigError",
    "ConfigError",
    "RpcError",
    "EmptyResultError",
    "NoBytecodeError",
    # Config
    "NetworkProfile",
    "ExplorerConfig",
    "ToolchainConfig",
    "get_network",
    "load_networks",
    "load_explorer_config",
    "load_toolchain_config",
    # Chain
    "ProbeReport",
    "probe_contract",
    "encode_function_call",
    "decode_function_result",
    "read_contract",
]

from .errors import ChainrigError, ConfigError, EmptyResultError, NoBytecodeError, RpcError
from .config.networks import NetworkProfile, get_network, load_networks
from .config.explorer import ExplorerConfig, load_explorer_config
from .config.toolchain import ToolchainConfig, load_toolchain_config
from .chain.abi import decode_function_result, encode_function_call
from .chain.rpc import read_contract
from .chain.probe import ProbeReport, probe_contract
