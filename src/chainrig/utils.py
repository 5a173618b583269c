from __future__ import annotations

import re
from urllib.parse import urlsplit, urlunsplit

_HEX_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_hex_address(value: str) -> bool:
    return bool(_HEX_ADDRESS_RE.match(value or ""))


def strip_0x(value: str) -> str:
    return value[2:] if value.startswith(("0x", "0X")) else value


def hex_to_int(value: str) -> int:
    if not isinstance(value, str) or not value.startswith("0x"):
        raise ValueError(f"Expected 0x-prefixed hex quantity, got {value!r}")
    return int(value, 16)


def is_empty_hex(value: str | None) -> bool:
    """True for results an RPC node returns when there is nothing to decode."""
    return not isinstance(value, str) or len(value) <= 2


def mask_secret(value: str | None, keep: int = 4) -> str:
    if not value:
        return ""
    if len(value) <= keep * 2:
        return "*" * len(value)
    return f"{value[:keep]}...{value[-keep:]}"


def mask_url(url: str | None) -> str:
    """Hide credentials, path and query of an RPC URL; hosted endpoints embed API keys there."""
    if not url:
        return ""
    parts = urlsplit(url)
    if not parts.netloc:
        return mask_secret(url)
    # Keep only host[:port]; userinfo is replaced wholesale.
    netloc = parts.netloc.rpartition("@")[2]
    if "@" in parts.netloc:
        netloc = "***@" + netloc
    path = "/***" if parts.path.strip("/") else parts.path
    query = "***" if parts.query else ""
    return urlunsplit((parts.scheme, netloc, path, query, ""))
