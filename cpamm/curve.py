"""Concentrated-liquidity price curve arithmetic on Q64.64 square-root prices."""

from __future__ import annotations

from enum import Enum

from cpamm.constants import U64_MAX, U128_MAX, U256_MAX
from cpamm.errors import ErrorCode, PoolError

RESOLUTION = 64


class Rounding(Enum):
    UP = "up"
    DOWN = "down"


def _check_u256(value):
    if value > U256_MAX:
        raise PoolError(ErrorCode.MATH_OVERFLOW)
    return value


def _mul_div_u256(x, y, denominator, rounding):
    if denominator == 0:
        return None
    quotient, remainder = divmod(x * y, denominator)
    if rounding is Rounding.UP and remainder:
        quotient += 1
    return quotient if quotient <= U256_MAX else None


def _price_delta(lower_sqrt_price, upper_sqrt_price):
    if upper_sqrt_price < lower_sqrt_price:
        raise ValueError("upper sqrt price is below lower sqrt price")
    return upper_sqrt_price - lower_sqrt_price


def _to_u64(value):
    if value > U64_MAX:
        raise PoolError(ErrorCode.MATH_OVERFLOW)
    return value


def get_initialize_amounts(sqrt_min_price, sqrt_max_price, sqrt_price, liquidity):
    """Token amounts (a, b) needed to seed a pool with this liquidity at this price."""
    amount_a = get_delta_amount_a_unsigned(sqrt_price, sqrt_max_price, liquidity, Rounding.UP)
    amount_b = get_delta_amount_b_unsigned(sqrt_min_price, sqrt_price, liquidity, Rounding.UP)
    return amount_a, amount_b


def get_delta_amount_a_unsigned(lower_sqrt_price, upper_sqrt_price, liquidity, round):
    """Δa = L * (√P_upper - √P_lower) / (√P_upper * √P_lower), as a u64."""
    return _to_u64(
        get_delta_amount_a_unsigned_unchecked(
            lower_sqrt_price, upper_sqrt_price, liquidity, round
        )
    )


def get_delta_amount_a_unsigned_unchecked(lower_sqrt_price, upper_sqrt_price, liquidity, round):
    """Δa without the u64 bound."""
    delta = _price_delta(lower_sqrt_price, upper_sqrt_price)
    denominator = _check_u256(lower_sqrt_price * upper_sqrt_price)
    if denominator <= 0:
        raise ValueError("sqrt prices must be positive")
    result = _mul_div_u256(liquidity, delta, denominator, round)
    if result is None:
        raise PoolError(ErrorCode.MATH_OVERFLOW)
    return result


def get_delta_amount_b_unsigned(lower_sqrt_price, upper_sqrt_price, liquidity, round):
    """Δb = L * (√P_upper - √P_lower), as a u64."""
    return _to_u64(
        get_delta_amount_b_unsigned_unchecked(
            lower_sqrt_price, upper_sqrt_price, liquidity, round
        )
    )


def get_delta_amount_b_unsigned_unchecked(lower_sqrt_price, upper_sqrt_price, liquidity, round):
    """Δb without the u64 bound."""
    delta = _price_delta(lower_sqrt_price, upper_sqrt_price)
    product = _check_u256(liquidity * delta)
    shift = RESOLUTION * 2
    if round is Rounding.UP:
        return -(-product // (1 << shift))
    return product >> shift


def get_next_sqrt_price_from_input(sqrt_price, liquidity, amount_in, a_for_b):
    """Next sqrt price after swapping amount_in of token a (a_for_b) or token b."""
    if sqrt_price <= 0:
        raise ValueError("sqrt price must be positive")
    if liquidity <= 0:
        raise ValueError("liquidity must be positive")
    if a_for_b:
        return get_next_sqrt_price_from_amount_a_rounding_up(sqrt_price, liquidity, amount_in)
    return get_next_sqrt_price_from_amount_b_rounding_down(sqrt_price, liquidity, amount_in)


def get_next_sqrt_price_from_amount_a_rounding_up(sqrt_price, liquidity, amount):
    """√P' = √P * L / (L + Δx * √P), rounded up."""
    if amount == 0:
        return sqrt_price
    product = _check_u256(amount * sqrt_price)
    denominator = _check_u256(liquidity + product)
    result = _mul_div_u256(liquidity, sqrt_price, denominator, Rounding.UP)
    if result is None:
        raise PoolError(ErrorCode.MATH_OVERFLOW)
    if result > U128_MAX:
        raise PoolError(ErrorCode.TYPE_CAST_FAILED)
    return result


def get_next_sqrt_price_from_amount_b_rounding_down(sqrt_price, liquidity, amount):
    """√P' = √P + Δy / L, rounded down."""
    shifted = _check_u256(amount << (RESOLUTION * 2))
    if liquidity == 0:
        raise PoolError(ErrorCode.MATH_OVERFLOW)
    result = _check_u256(sqrt_price + shifted // liquidity)
    if result > U128_MAX:
        raise PoolError(ErrorCode.TYPE_CAST_FAILED)
    return result