# cpamm

Pure-Python building blocks for a constant-product automated market maker
with a concentrated price range: curve math on Q64.64 square-root prices,
32-byte public keys with base58 text and program-derived addresses, and the
validation rules that apply to configs, pools, vesting locks and reward
campaigns. It has no dependencies outside the standard library.

## Install

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Curve math

```python
from cpamm.curve import Rounding, get_initialize_amounts, get_delta_amount_b_unsigned
from cpamm.constants import MIN_SQRT_PRICE, MAX_SQRT_PRICE

amount_a, amount_b = get_initialize_amounts(
    MIN_SQRT_PRICE, MAX_SQRT_PRICE, 1 << 64, 10**20
)
delta_b = get_delta_amount_b_unsigned(MIN_SQRT_PRICE, 1 << 64, 10**20, Rounding.DOWN)
```

`cpamm.curve` provides:

- `get_initialize_amounts` – the token a and token b amounts (rounded up)
  needed to seed a pool with a given liquidity at a given price.
- `get_delta_amount_a_unsigned` / `get_delta_amount_b_unsigned` – token
  deltas over a price range, bounded to an unsigned 64-bit value; the
  `_unchecked` variants return the result without that bound.
- `get_next_sqrt_price_from_input` – the next square-root price after
  swapping an input amount of token a (`a_for_b=True`) or token b, built on
  `get_next_sqrt_price_from_amount_a_rounding_up` and
  `get_next_sqrt_price_from_amount_b_rounding_down`.

Rounding direction is chosen with `Rounding.UP` or `Rounding.DOWN`.

When a result overflows its integer width, these functions raise
`cpamm.errors.PoolError` with code `ErrorCode.MATH_OVERFLOW` or
`ErrorCode.TYPE_CAST_FAILED`. Malformed input – an upper price below the
lower one, or a price or liquidity that is not positive where one is
required – raises `ValueError`.

## Errors

`cpamm.errors.ErrorCode` is an `IntEnum` of numbered codes starting at 6000.
`PoolError(code)` carries the member as `.code` and its text as `.message`:

```python
from cpamm.errors import ErrorCode, PoolError

err = PoolError(ErrorCode.INVALID_PRICE_RANGE)
err.code      # ErrorCode.INVALID_PRICE_RANGE (6014)
err.message   # "Invalid Price Range"
```

## Keys and program-derived addresses

```python
from cpamm.pubkey import Pubkey, find_program_address
from cpamm.pda import derive_config_pda, derive_pool_authority, derive_pool_pda

config = derive_config_pda(0)
print(config)                   # base58 text
authority = derive_pool_authority()
```

`cpamm.pubkey` has:

- `Pubkey` – a frozen, byte-ordered 32-byte key. `Pubkey.from_base58`
  parses text, `Pubkey.default()` is the all-zero key, `str()` gives base58
  and `bytes()` the raw bytes.
- `b58encode` / `b58decode` – base58 text conversion.
- `is_on_curve` – whether 32 bytes decode to an ed25519 point.
- `create_program_address` – the address for an exact list of seeds;
  raises `ValueError` if it lies on the curve or the seeds are too many or
  too long.
- `find_program_address` – returns `(address, bump)` for the highest bump
  from 255 downward that gives an off-curve address.

`cpamm.pda` derives the program's account addresses under
`cpamm.constants.PROGRAM_ID`: `derive_config_pda(index)`,
`derive_pool_pda(token_a_mint, token_b_mint, config)` (the same address
whichever order the mints are given in), `derive_token_vault_pda`,
`derive_pool_authority`, `derive_token_badge_pda`,
`derive_event_authority_pda` and `derive_reward_vault_pda(index, pool)`.
Indexes that do not fit their unsigned width raise `ValueError`.

## Constants

`cpamm.constants` holds the square-root price bounds, fee and reward
limits, activation and vesting windows (with `LOCAL_` variants for local
deployments), account seed prefixes, the program ids and the supported
quote mints `SOL_MINT` and `USDC_MINT` in `DEFAULT_QUOTE_MINTS`.

## Validation

All checks raise `PoolError` with the matching code when a rule is broken.

- `cpamm.vesting.VestingParameters(cliff_point, period_frequency,
  cliff_unlock_liquidity, liquidity_per_period, number_of_period)` –
  `get_cliff_point`, `get_total_lock_amount` and
  `validate(current_point, max_vesting_duration)` for a position lock. A
  `cliff_point` of `None` starts vesting at the current point.
- `cpamm.admin` – `assert_eq_admin(admin, local)` returns whether a key is
  one of `ADMINS` (always true when `local` is set);
  `validate_config_price_range`, `validate_reward_duration_update` and
  `validate_reward_funder_update` check config and reward changes.
- `cpamm.pool_keys` – `max_key` / `min_key` give the bytes of the greater
  or lesser key; `validate_pool_creation` checks liquidity, creator
  authority and price range, and returns the `(token_a_amount,
  token_b_amount)` to deposit.
- `cpamm.quote_tokens` – `is_whitelisted_quote_token`,
  `validate_quote_token(token_mint_a, token_mint_b, has_alpha_vault)` and
  `validate_customizable_price_range`.

## What this package does not do

It is a library of calculations and checks only. It has no command-line
tool, does not connect to a cluster, does not build, sign or send
transactions, and does not read or store account state. Callers supply the
values (current time, reward state, config fields) that the checks need.