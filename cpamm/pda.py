"""Program-derived addresses of the pool program's accounts."""

from __future__ import annotations

from cpamm.constants import (
    CONFIG_PREFIX,
    POOL_AUTHORITY_PREFIX,
    POOL_PREFIX,
    PROGRAM_ID,
    REWARD_VAULT_PREFIX,
    TOKEN_BADGE_PREFIX,
    TOKEN_VAULT_PREFIX,
    U64_MAX,
)
from cpamm.pubkey import find_program_address

EVENT_AUTHORITY_SEED = b"__event_authority"


def _address(*seeds):
    return find_program_address(list(seeds), PROGRAM_ID)[0]


def _le_bytes(value, size):
    limit = (1 << (8 * size)) - 1
    if not 0 <= value <= limit:
        raise ValueError(f"{value} does not fit in {size} unsigned byte(s)")
    return value.to_bytes(size, "little")


def derive_config_pda(index):
    """Address of the config account with this u64 index."""
    if index > U64_MAX:
        raise ValueError(f"config index {index} exceeds u64")
    return _address(CONFIG_PREFIX, _le_bytes(index, 8))


def derive_pool_pda(token_a_mint, token_b_mint, config):
    """Address of the pool for two mints under a config, independent of mint order."""
    high = max(token_a_mint, token_b_mint)
    low = min(token_a_mint, token_b_mint)
    return _address(POOL_PREFIX, bytes(config), bytes(high), bytes(low))


def derive_token_vault_pda(token_mint, pool):
    """Address of the pool's vault for a token mint."""
    return _address(TOKEN_VAULT_PREFIX, bytes(token_mint), bytes(pool))


def derive_pool_authority():
    """Address of the authority that owns every pool vault."""
    return _address(POOL_AUTHORITY_PREFIX)


def derive_token_badge_pda(token_mint):
    """Address of the token badge for a mint."""
    return _address(TOKEN_BADGE_PREFIX, bytes(token_mint))


def derive_event_authority_pda():
    """Address of the program's event authority."""
    return _address(EVENT_AUTHORITY_SEED)


def derive_reward_vault_pda(index, pool):
    """Address of a pool's reward vault for a u8 reward index."""
    return _address(REWARD_VAULT_PREFIX, bytes(pool), _le_bytes(index, 1))