"""Stable-coin transfer tax: rate plus per-denomination cap."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from .decimal import MAX_ATOMICS, Decimal256


def _amount(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("amount must be an integer")
    if value < 0 or value > MAX_ATOMICS:
        raise OverflowError("amount out of range")
    return value


def ceiled_mul(amount: int, rate: Decimal256) -> int:
    """Multiply a whole amount by a decimal, rounding any remainder up."""
    product = Decimal256.from_int(_amount(amount)) * rate
    floored = product.floor()
    if product != Decimal256.from_int(floored):
        return floored + 1
    return floored


class _SupportsTaxQueries(Protocol):
    def query_tax_rate(self) -> Decimal256: ...

    def query_tax_cap(self, denom: str) -> int: ...


@dataclass
class TaxQuerier:
    """In-memory source of the chain's tax rate and per-denomination caps."""

    rate: Decimal256 = field(default_factory=Decimal256.zero)
    caps: Mapping[str, int] = field(default_factory=dict)

    def query_tax_rate(self) -> Decimal256:
        return self.rate

    def query_tax_cap(self, denom: str) -> int:
        """Return the cap for ``denom``; unknown denominations have a cap of zero."""
        return self.caps.get(denom, 0)


@dataclass(frozen=True)
class TaxInfo:
    """Tax rate and cap applying to one coin denomination."""

    rate: Decimal256
    cap: int

    def get_tax_for(self, amount: int) -> int:
        """Tax already contained in ``amount`` when it is sent; never below one."""
        if _amount(amount) == 0:
            tax_amount = 0
        else:
            one = Decimal256.one()
            rate_part = one - one / (one + self.rate)
            tax_amount = ceiled_mul(amount, rate_part)
        return max(min(tax_amount, self.cap), 1)

    def get_revert_tax(self, amount: int) -> int:
        """Tax to add on top of ``amount`` so that ``amount`` arrives; never below one."""
        if _amount(amount) == 0:
            return 0
        tax_amount = ceiled_mul(amount, self.rate)
        return max(min(tax_amount, self.cap), 1)

    def subtract_tax(self, coin_amount: int) -> int:
        """Amount that arrives after sending ``coin_amount``."""
        if _amount(coin_amount) == 0:
            return 0
        remaining = coin_amount - self.get_tax_for(coin_amount)
        if remaining < 0:
            raise OverflowError("attempt to subtract with overflow")
        return remaining

    def append_tax(self, coin_amount: int) -> int:
        """Amount to send so that ``coin_amount`` arrives."""
        return _amount(coin_amount + self.get_revert_tax(coin_amount))


def get_tax_info(querier: _SupportsTaxQueries, coin_denom: str) -> TaxInfo:
    """Build the tax info for ``coin_denom`` from the querier's rate and cap."""
    rate = querier.query_tax_rate()
    cap = _amount(querier.query_tax_cap(coin_denom))
    return TaxInfo(rate=rate, cap=cap)