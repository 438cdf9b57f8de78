"""Vesting schedules for locked position liquidity."""

from __future__ import annotations

from dataclasses import dataclass

from cpamm.constants import U64_MAX, U128_MAX
from cpamm.errors import ErrorCode, PoolError


def _bounded(value, limit):
    if value < 0 or value > limit:
        raise PoolError(ErrorCode.MATH_OVERFLOW)
    return value


@dataclass(frozen=True)
class VestingParameters:
    """A cliff release followed by equal periodic releases of liquidity."""

    cliff_point: int | None
    period_frequency: int
    cliff_unlock_liquidity: int
    liquidity_per_period: int
    number_of_period: int

    def get_cliff_point(self, current_point):
        """The cliff point, or the current point when vesting starts immediately."""
        return current_point if self.cliff_point is None else self.cliff_point

    def get_total_lock_amount(self):
        """Liquidity locked in total: cliff release plus every period's release."""
        periodic = _bounded(self.liquidity_per_period * self.number_of_period, U128_MAX)
        return _bounded(self.cliff_unlock_liquidity + periodic, U128_MAX)

    def validate(self, current_point, max_vesting_duration):
        """Raise PoolError unless the schedule is well formed and short enough."""
        cliff_point = self.get_cliff_point(current_point)
        if cliff_point < current_point:
            raise PoolError(ErrorCode.INVALID_VESTING_INFO)
        if self.number_of_period > 0 and not (
            self.period_frequency > 0 and self.liquidity_per_period > 0
        ):
            raise PoolError(ErrorCode.INVALID_VESTING_INFO)

        periods = _bounded(self.period_frequency * self.number_of_period, U64_MAX)
        duration = _bounded(_bounded(cliff_point - current_point, U64_MAX) + periods, U64_MAX)
        if duration > max_vesting_duration:
            raise PoolError(ErrorCode.INVALID_VESTING_INFO)
        if self.get_total_lock_amount() <= 0:
            raise PoolError(ErrorCode.INVALID_VESTING_INFO)