import pytest

from cpamm.admin import (
    ADMINS,
    assert_eq_admin,
    validate_config_price_range,
    validate_reward_duration_update,
    validate_reward_funder_update,
)
from cpamm.constants import MAX_REWARD_DURATION, MAX_SQRT_PRICE, MIN_SQRT_PRICE
from cpamm.errors import ErrorCode, PoolError
from cpamm.pubkey import Pubkey

STRANGER = Pubkey(bytes([7] * 32))
FUNDER = Pubkey(bytes([8] * 32))
OTHER_FUNDER = Pubkey(bytes([9] * 32))


def test_known_admins_accepted():
    assert all(assert_eq_admin(admin, False) for admin in ADMINS)


def test_stranger_rejected_unless_local():
    assert assert_eq_admin(STRANGER, False) is False
    assert assert_eq_admin(STRANGER, True) is True


def test_price_range_bounds():
    assert validate_config_price_range(MIN_SQRT_PRICE, MAX_SQRT_PRICE) is None
    with pytest.raises(PoolError) as info:
        validate_config_price_range(MIN_SQRT_PRICE - 1, MAX_SQRT_PRICE)
    assert info.value.code is ErrorCode.INVALID_PRICE_RANGE
    with pytest.raises(PoolError) as info:
        validate_config_price_range(MIN_SQRT_PRICE, MAX_SQRT_PRICE + 1)
    assert info.value.code is ErrorCode.INVALID_PRICE_RANGE


def test_price_range_must_be_non_empty():
    with pytest.raises(PoolError) as info:
        validate_config_price_range(MIN_SQRT_PRICE, MIN_SQRT_PRICE)
    assert info.value.code is ErrorCode.INVALID_PRICE_RANGE


def test_duration_update_index():
    with pytest.raises(PoolError) as info:
        validate_reward_duration_update(2, 100, True, 50, 0, 1000)
    assert info.value.code is ErrorCode.INVALID_REWARD_INDEX


@pytest.mark.parametrize("duration", [0, MAX_REWARD_DURATION + 1])
def test_duration_update_out_of_range(duration):
    with pytest.raises(PoolError) as info:
        validate_reward_duration_update(0, duration, True, 50, 0, 1000)
    assert info.value.code is ErrorCode.INVALID_REWARD_DURATION


def test_duration_update_uninitialized():
    with pytest.raises(PoolError) as info:
        validate_reward_duration_update(0, 100, False, 50, 0, 1000)
    assert info.value.code is ErrorCode.REWARD_INITIALIZED


def test_duration_update_identical():
    with pytest.raises(PoolError) as info:
        validate_reward_duration_update(1, 100, True, 100, 0, 1000)
    assert info.value.code is ErrorCode.IDENTICAL_REWARD_DURATION


def test_duration_update_campaign_in_progress():
    with pytest.raises(PoolError) as info:
        validate_reward_duration_update(0, 100, True, 50, 1000, 1000)
    assert info.value.code is ErrorCode.REWARD_CAMPAIGN_IN_PROGRESS
    assert validate_reward_duration_update(0, 100, True, 50, 999, 1000) is None


def test_funder_update_errors():
    with pytest.raises(PoolError) as info:
        validate_reward_funder_update(5, True, FUNDER, OTHER_FUNDER)
    assert info.value.code is ErrorCode.INVALID_REWARD_INDEX
    with pytest.raises(PoolError) as info:
        validate_reward_funder_update(0, False, FUNDER, OTHER_FUNDER)
    assert info.value.code is ErrorCode.REWARD_UNINITIALIZED
    with pytest.raises(PoolError) as info:
        validate_reward_funder_update(0, True, FUNDER, FUNDER)
    assert info.value.code is ErrorCode.IDENTICAL_FUNDER


def test_funder_update_allowed():
    assert validate_reward_funder_update(1, True, FUNDER, OTHER_FUNDER) is None
    with pytest.raises(PoolError) as info:
        validate_reward_funder_update(1, True, OTHER_FUNDER, OTHER_FUNDER)
    assert info.value.code is ErrorCode.IDENTICAL_FUNDER