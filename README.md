# vaulttax

Exact tax arithmetic for transfers of a native stable coin whose tax has a
rate and a per-transfer cap.

Amounts are unsigned integers. Rates are `Decimal256` values: fixed-point
numbers with 18 decimal places and a 256-bit range, built without floating
point.

## Installing

    pip install .

With the test tools:

    pip install ".[test]"

## Using it

```python
from vaulttax.decimal import Decimal256
from vaulttax.tax import TaxInfo

info = TaxInfo(
    rate=Decimal256.from_str("0.003191811080725897"),
    cap=1_411_603,
)

info.get_tax_for(1_000_000)     # 3182: tax contained in an amount when it is sent
info.subtract_tax(1_000_000)    # what arrives after sending 1_000_000
info.get_revert_tax(1_000_000)  # tax charged on top of an amount
info.append_tax(1_000_000)      # amount to send so that 1_000_000 arrives
```

`get_tax_for` works with the rate part `1 - 1 / (1 + rate)`;
`get_revert_tax` works with the rate itself. Both round the tax up, never
return more than the cap, and never return less than 1, with one
difference at zero: `get_revert_tax(0)` is 0, while `get_tax_for(0)` is 1.
`subtract_tax(0)` is 0.

`ceiled_mul(amount, rate)` is the rounding step on its own: it multiplies a
whole amount by a `Decimal256` and rounds any remainder up.

Amounts must be integers (`TypeError` otherwise) between 0 and 2**256 - 1
(`OverflowError` otherwise). `subtract_tax` raises `OverflowError` if the
tax is larger than the amount, and `append_tax` if the sum goes out of range.

### Rate and cap from a querier

`get_tax_info(querier, denom)` builds a `TaxInfo` from any object with two
methods: `query_tax_rate()`, returning a `Decimal256`, and
`query_tax_cap(denom)`, returning an integer cap.

`TaxQuerier` is a ready-made in-memory one. It holds a `rate` (zero by
default) and a `caps` mapping from denomination to cap; a denomination that
is not in `caps` has a cap of 0.

```python
from vaulttax.decimal import Decimal256
from vaulttax.tax import TaxQuerier, get_tax_info

querier = TaxQuerier(rate=Decimal256.from_str("0.001"), caps={"uusd": 1_000_000})
info = get_tax_info(querier, "uusd")
```

### Decimal256

`Decimal256.from_str("1.25")`, `Decimal256.from_int(3)`, `Decimal256.one()`
and `Decimal256.zero()` build values; `Decimal256(atomics)` builds one from a
count of 10**-18 units. `from_str` takes plain digits with at most one dot
and at most 18 fractional digits, and raises `ValueError` for anything else.

Values support `+`, `-`, `*`, `/` and comparison. Multiplication and
division round down to 18 places. A result below zero or above the 256-bit
range raises `OverflowError`; dividing by zero raises `ZeroDivisionError`.
`floor()` returns the integer part, `is_zero()` tests for zero, and `str()`
gives the shortest decimal form, such as `"1.25"` or `"3"`.

## What it does not do

The package does not talk to a chain or any network service. Rates and caps
come from whatever object is passed to `get_tax_info`; `TaxQuerier` only
returns the values it was given. Nothing is stored, and there is no command.

## Running the tests

    pytest