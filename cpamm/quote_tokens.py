"""Quote-token rules and price checks for customizable pools."""

from __future__ import annotations

from cpamm.constants import DEFAULT_QUOTE_MINTS, MAX_SQRT_PRICE, MIN_SQRT_PRICE
from cpamm.errors import ErrorCode, PoolError


def is_whitelisted_quote_token(mint):
    """Whether the mint is one of the supported quote mints."""
    return mint in DEFAULT_QUOTE_MINTS


def validate_quote_token(token_mint_a, token_mint_b, has_alpha_vault):
    """Raise unless token a is a base token and token b suits the alpha-vault setting.

    Token a may never be a whitelisted quote mint. Token b is always treated
    as the quote token; if it is not whitelisted, the pool may not be linked
    with an alpha vault.
    """
    if is_whitelisted_quote_token(token_mint_a):
        raise PoolError(ErrorCode.INVALID_QUOTE_MINT)
    if not is_whitelisted_quote_token(token_mint_b) and has_alpha_vault:
        raise PoolError(ErrorCode.INVALID_QUOTE_MINT)


def validate_customizable_price_range(sqrt_min_price, sqrt_max_price, sqrt_price, liquidity):
    """Raise unless the price range, initial price and liquidity are acceptable."""
    if not (sqrt_min_price >= MIN_SQRT_PRICE and sqrt_max_price <= MAX_SQRT_PRICE):
        raise PoolError(ErrorCode.INVALID_PRICE_RANGE)
    if not sqrt_min_price <= sqrt_price <= sqrt_max_price:
        raise PoolError(ErrorCode.INVALID_PRICE_RANGE)
    if not sqrt_min_price < sqrt_max_price:
        raise PoolError(ErrorCode.INVALID_PRICE_RANGE)
    if not liquidity > 0:
        raise PoolError(ErrorCode.INVALID_MINIMUM_LIQUIDITY)