"""Ordering of mint keys for pool seeds and checks made when a pool is created."""

from __future__ import annotations

from cpamm.curve import get_initialize_amounts
from cpamm.errors import ErrorCode, PoolError
from cpamm.pubkey import Pubkey


def max_key(left, right):
    """Bytes of the greater of two keys, compared byte by byte."""
    return bytes(max(left, right))


def min_key(left, right):
    """Bytes of the lesser of two keys, compared byte by byte."""
    return bytes(min(left, right))


def validate_pool_creation(
    liquidity, sqrt_price, sqrt_min_price, sqrt_max_price, pool_creator_authority, payer
):
    """Check a pool-creation request against its config.

    Returns the (token_a_amount, token_b_amount) the payer must deposit.
    Raises PoolError if the request is not allowed.
    """
    if not liquidity > 0:
        raise PoolError(ErrorCode.INVALID_MINIMUM_LIQUIDITY)

    if pool_creator_authority not in (Pubkey.default(), payer):
        raise PoolError(ErrorCode.INVALID_AUTHORITY_TO_CREATE_THE_POOL)

    if not sqrt_min_price <= sqrt_price <= sqrt_max_price:
        raise PoolError(ErrorCode.INVALID_PRICE_RANGE)

    token_a_amount, token_b_amount = get_initialize_amounts(
        sqrt_min_price, sqrt_max_price, sqrt_price, liquidity
    )
    if not (token_a_amount > 0 or token_b_amount > 0):
        raise PoolError(ErrorCode.AMOUNT_IS_ZERO)
    return token_a_amount, token_b_amount