from __future__ import annotations


class ChainrigError(RuntimeError):
    exit_code: int = 1


class ConfigError(ChainrigError):
    exit_code = 2


class RpcError(ChainrigError):
    exit_code = 3

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class EmptyResultError(ChainrigError):
    exit_code = 4


class NoBytecodeError(ChainrigError):
    exit_code = 5
