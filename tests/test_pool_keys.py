import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpamm.constants import MAX_SQRT_PRICE, MIN_SQRT_PRICE, ONE_Q64
from cpamm.curve import get_initialize_amounts
from cpamm.errors import ErrorCode, PoolError
from cpamm.pool_keys import max_key, min_key, validate_pool_creation
from cpamm.pubkey import Pubkey

LOW = Pubkey(bytes([1]) * 32)
HIGH = Pubkey(bytes([2]) * 32)
PAYER = Pubkey(bytes([7]) * 32)
OTHER = Pubkey(bytes([9]) * 32)

keys = st.binary(min_size=32, max_size=32).map(Pubkey)


def test_max_and_min_key_pick_by_bytes():
    assert max_key(LOW, HIGH) == bytes([2]) * 32
    assert min_key(LOW, HIGH) == bytes([1]) * 32


def test_first_differing_byte_decides_order():
    a = Pubkey(bytes([0]) + bytes([255]) * 31)
    b = Pubkey(bytes([1]) + bytes(31))
    assert max_key(a, b) == bytes(b)
    assert min_key(a, b) == bytes(a)


@given(keys, keys)
def test_order_independent(left, right):
    assert max_key(left, right) == max_key(right, left)
    assert min_key(left, right) == min_key(right, left)
    assert {max_key(left, right), min_key(left, right)} == {bytes(left), bytes(right)}
    assert min_key(left, right) <= max_key(left, right)


def test_valid_creation_returns_initial_amounts():
    result = validate_pool_creation(
        10**12, ONE_Q64, MIN_SQRT_PRICE, MAX_SQRT_PRICE, Pubkey.default(), PAYER
    )
    assert result == get_initialize_amounts(MIN_SQRT_PRICE, MAX_SQRT_PRICE, ONE_Q64, 10**12)
    assert result[0] > 0 and result[1] > 0


def test_creator_authority_may_be_payer():
    result = validate_pool_creation(
        10**12, ONE_Q64, MIN_SQRT_PRICE, MAX_SQRT_PRICE, PAYER, PAYER
    )
    assert result[0] > 0


def test_other_creator_authority_rejected():
    with pytest.raises(PoolError) as info:
        validate_pool_creation(
            10**12, ONE_Q64, MIN_SQRT_PRICE, MAX_SQRT_PRICE, OTHER, PAYER
        )
    assert info.value.code is ErrorCode.INVALID_AUTHORITY_TO_CREATE_THE_POOL


def test_zero_liquidity_rejected():
    with pytest.raises(PoolError) as info:
        validate_pool_creation(
            0, ONE_Q64, MIN_SQRT_PRICE, MAX_SQRT_PRICE, Pubkey.default(), PAYER
        )
    assert info.value.code is ErrorCode.INVALID_MINIMUM_LIQUIDITY


@pytest.mark.parametrize("sqrt_price", [MIN_SQRT_PRICE - 1, MAX_SQRT_PRICE + 1])
def test_price_outside_range_rejected(sqrt_price):
    with pytest.raises(PoolError) as info:
        validate_pool_creation(
            10**12, sqrt_price, MIN_SQRT_PRICE, MAX_SQRT_PRICE, Pubkey.default(), PAYER
        )
    assert info.value.code is ErrorCode.INVALID_PRICE_RANGE


def test_empty_range_gives_zero_amounts():
    with pytest.raises(PoolError) as info:
        validate_pool_creation(10**12, ONE_Q64, ONE_Q64, ONE_Q64, Pubkey.default(), PAYER)
    assert info.value.code is ErrorCode.AMOUNT_IS_ZERO


def test_price_at_lower_bound_needs_only_token_a():
    amount_a, amount_b = validate_pool_creation(
        10**12, MIN_SQRT_PRICE, MIN_SQRT_PRICE, MAX_SQRT_PRICE, Pubkey.default(), PAYER
    )
    assert amount_b == 0
    assert amount_a > 0


def test_liquidity_checked_before_authority():
    with pytest.raises(PoolError) as info:
        validate_pool_creation(0, ONE_Q64, MIN_SQRT_PRICE, MAX_SQRT_PRICE, OTHER, PAYER)
    assert info.value.code is ErrorCode.INVALID_MINIMUM_LIQUIDITY