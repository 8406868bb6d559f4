import pytest
from hypothesis import given
from hypothesis import strategies as st

from vaulttax.decimal import DECIMAL_FRACTIONAL, MAX_ATOMICS, Decimal256

atomics = st.integers(min_value=0, max_value=10**40)


def test_one_and_zero():
    assert Decimal256.one().atomics == DECIMAL_FRACTIONAL
    assert Decimal256.zero().is_zero()
    assert not Decimal256.one().is_zero()


def test_from_str_rate_from_source():
    rate = Decimal256.from_str("0.003191811080725897")
    assert str(rate) == "0.003191811080725897"
    assert rate.floor() == 0


def test_from_str_whole_number():
    assert Decimal256.from_str("2") == Decimal256.from_int(2)
    assert str(Decimal256.from_str("2")) == "2"


def test_str_trims_trailing_zeros():
    assert str(Decimal256.from_str("1.500")) == "1.5"
    assert str(Decimal256.from_str("1.88")) == "1.88"


@pytest.mark.parametrize(
    "text",
    ["", "1.2.3", "abc", "1.", ".5", "-1", "+1", "1.1234567890123456789", " 1"],
)
def test_from_str_rejects_bad_input(text):
    with pytest.raises(ValueError):
        Decimal256.from_str(text)


def test_from_int_rejects_negative():
    with pytest.raises(ValueError):
        Decimal256.from_int(-1)


def test_constructor_rejects_out_of_range():
    with pytest.raises(OverflowError):
        Decimal256(MAX_ATOMICS + 1)
    with pytest.raises(OverflowError):
        Decimal256(-1)


def test_subtraction_underflow_raises():
    with pytest.raises(OverflowError):
        Decimal256.zero() - Decimal256.one()


def test_multiplication_overflow_raises():
    assert Decimal256.from_int(2) * Decimal256.from_int(3) == Decimal256.from_int(6)
    big = Decimal256(MAX_ATOMICS)
    with pytest.raises(OverflowError):
        big * big


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Decimal256.one() / Decimal256.zero()


def test_division_of_equal_values_is_one():
    value = Decimal256.from_str("1.88")
    assert value / value == Decimal256.one()


@given(atomics)
def test_str_round_trip(value):
    decimal = Decimal256(value)
    assert Decimal256.from_str(str(decimal)) == decimal


@given(atomics, atomics)
def test_add_then_sub_round_trip(a, b):
    x, y = Decimal256(a), Decimal256(b)
    assert (x + y) - y == x


@given(atomics)
def test_multiply_by_one_is_identity(value):
    decimal = Decimal256(value)
    assert decimal * Decimal256.one() == decimal
    assert decimal / Decimal256.one() == decimal


@given(st.integers(min_value=0, max_value=10**30))
def test_from_int_floor_round_trip(value):
    assert Decimal256.from_int(value).floor() == value


@given(atomics, atomics)
def test_ordering_follows_atomics(a, b):
    assert (Decimal256(a) < Decimal256(b)) == (a < b)