"""Administrator checks and validation of admin-only operations."""

from __future__ import annotations

from cpamm.constants import (
    MAX_REWARD_DURATION,
    MAX_SQRT_PRICE,
    MIN_REWARD_DURATION,
    MIN_SQRT_PRICE,
    NUM_REWARDS,
    U64_MAX,
)
from cpamm.errors import ErrorCode, PoolError
from cpamm.pubkey import Pubkey

ADMINS = (
    Pubkey.from_base58("5unTfT2kssBuNvHPY6LbJfJpLqEcdMxGYLWHwShaeTLi"),
    Pubkey.from_base58("DHLXnJdACTY83yKwnUkeoDjqi4QBbsYGa1v8tJL76ViX"),
)


def assert_eq_admin(admin, local):
    """Whether the key may act as admin; local deployments accept anyone."""
    return local or admin in ADMINS


def validate_config_price_range(sqrt_min_price, sqrt_max_price):
    """Raise unless the price range lies within bounds and is non-empty."""
    if not (sqrt_min_price >= MIN_SQRT_PRICE and sqrt_max_price <= MAX_SQRT_PRICE):
        raise PoolError(ErrorCode.INVALID_PRICE_RANGE)
    if not sqrt_min_price < sqrt_max_price:
        raise PoolError(ErrorCode.INVALID_PRICE_RANGE)


def _check_reward_index(reward_index):
    if not 0 <= reward_index < NUM_REWARDS:
        raise PoolError(ErrorCode.INVALID_REWARD_INDEX)


def validate_reward_duration_update(
    reward_index, new_duration, initialized, current_duration, duration_end, current_time
):
    """Raise unless a finished, initialized reward may take the new duration."""
    _check_reward_index(reward_index)
    if not MIN_REWARD_DURATION <= new_duration <= MAX_REWARD_DURATION:
        raise PoolError(ErrorCode.INVALID_REWARD_DURATION)
    if not initialized:
        raise PoolError(ErrorCode.REWARD_INITIALIZED)
    if current_duration == new_duration:
        raise PoolError(ErrorCode.IDENTICAL_REWARD_DURATION)
    # the timestamp is signed; it is compared as an unsigned 64-bit value
    if not duration_end < (current_time & U64_MAX):
        raise PoolError(ErrorCode.REWARD_CAMPAIGN_IN_PROGRESS)


def validate_reward_funder_update(reward_index, initialized, current_funder, new_funder):
    """Raise unless an initialized reward may switch to a different funder."""
    _check_reward_index(reward_index)
    if not initialized:
        raise PoolError(ErrorCode.REWARD_UNINITIALIZED)
    if current_funder == new_funder:
        raise PoolError(ErrorCode.IDENTICAL_FUNDER)