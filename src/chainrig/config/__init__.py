"""
Config - Network, explorer and compiler settings for the contract toolchain.

Everything is read from environment variables (optionally seeded from .env)
with literal defaults; nothing is written back.
"""
