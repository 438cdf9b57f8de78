"""Constant-product AMM curve math, public keys and derived addresses, and validation rules."""

__version__ = "0.1.0"

__all__ = [
    "admin",
    "constants",
    "curve",
    "errors",
    "pda",
    "pool_keys",
    "pubkey",
    "quote_tokens",
    "vesting",
]