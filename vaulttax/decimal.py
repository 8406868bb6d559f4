"""Fixed-point unsigned decimal with 18 fractional digits and a 256-bit range."""

from __future__ import annotations

from dataclasses import dataclass

DECIMAL_PLACES = 18
DECIMAL_FRACTIONAL = 10**DECIMAL_PLACES
MAX_ATOMICS = 2**256 - 1

_DIGITS = frozenset("0123456789")


def _checked(value: int, operation: str) -> int:
    if value < 0 or value > MAX_ATOMICS:
        raise OverflowError(f"attempt to {operation} with overflow")
    return value


@dataclass(frozen=True, order=True)
class Decimal256:
    """An unsigned decimal stored as an integer count of 10**-18 units."""

    atomics: int

    def __post_init__(self) -> None:
        if isinstance(self.atomics, bool) or not isinstance(self.atomics, int):
            raise TypeError("atomics must be an integer")
        _checked(self.atomics, "construct a decimal")

    @classmethod
    def from_str(cls, text: str) -> Decimal256:
        """Parse a plain decimal such as ``"1.25"``; at most 18 fractional digits."""
        parts = text.split(".")
        if len(parts) > 2:
            raise ValueError("Unexpected number of dots")
        whole_text = parts[0]
        if not whole_text or not set(whole_text) <= _DIGITS:
            raise ValueError(f"Error parsing whole: {text!r}")
        atomics = int(whole_text) * DECIMAL_FRACTIONAL
        if len(parts) == 2:
            fraction_text = parts[1]
            if not fraction_text or not set(fraction_text) <= _DIGITS:
                raise ValueError(f"Error parsing fractional: {text!r}")
            if len(fraction_text) > DECIMAL_PLACES:
                raise ValueError(
                    f"Cannot parse more than {DECIMAL_PLACES} fractional digits"
                )
            atomics += int(fraction_text.ljust(DECIMAL_PLACES, "0"))
        return cls(_checked(atomics, "parse a decimal"))

    @classmethod
    def from_int(cls, value: int) -> Decimal256:
        """Return the decimal equal to the whole number ``value``."""
        if value < 0:
            raise ValueError("value must not be negative")
        return cls(_checked(value * DECIMAL_FRACTIONAL, "multiply"))

    @classmethod
    def one(cls) -> Decimal256:
        return cls(DECIMAL_FRACTIONAL)

    @classmethod
    def zero(cls) -> Decimal256:
        return cls(0)

    def is_zero(self) -> bool:
        return self.atomics == 0

    def floor(self) -> int:
        """Return the whole part, rounding down."""
        return self.atomics // DECIMAL_FRACTIONAL

    def __add__(self, other: object) -> Decimal256:
        if not isinstance(other, Decimal256):
            return NotImplemented
        return Decimal256(_checked(self.atomics + other.atomics, "add"))

    def __sub__(self, other: object) -> Decimal256:
        if not isinstance(other, Decimal256):
            return NotImplemented
        return Decimal256(_checked(self.atomics - other.atomics, "subtract"))

    def __mul__(self, other: object) -> Decimal256:
        if not isinstance(other, Decimal256):
            return NotImplemented
        product = _checked(self.atomics * other.atomics, "multiply")
        return Decimal256(product // DECIMAL_FRACTIONAL)

    def __truediv__(self, other: object) -> Decimal256:
        if not isinstance(other, Decimal256):
            return NotImplemented
        if other.is_zero():
            raise ZeroDivisionError("decimal division by zero")
        scaled = _checked(self.atomics * DECIMAL_FRACTIONAL, "multiply")
        return Decimal256(scaled // other.atomics)

    def __str__(self) -> str:
        whole, fraction = divmod(self.atomics, DECIMAL_FRACTIONAL)
        if fraction == 0:
            return str(whole)
        digits = f"{fraction:0{DECIMAL_PLACES}d}".rstrip("0")
        return f"{whole}.{digits}"