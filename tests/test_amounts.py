"""Tests for on-wire amount parsing."""

from decimal import Decimal

import pytest

from helium_api.core.amounts import Dc, Hnt, Hst, parse_dc, parse_hnt, parse_hst
from helium_api.core.exceptions import DecodeError


def test_hnt_is_stored_in_bones():
    amount = parse_hnt(123_456_789)

    assert amount.bones == 123_456_789
    assert amount.to_decimal() == Decimal("1.23456789")
    assert str(amount) == "1.23456789"
    assert int(amount) == 123_456_789


def test_hst_uses_hnt_precision():
    assert str(parse_hst(1)) == "0.00000001"


def test_dc_is_indivisible():
    amount = parse_dc(2500)

    assert amount == Dc(2500)
    assert str(amount) == "2500"


def test_integer_strings_are_accepted():
    assert parse_hnt("100000000") == Hnt(100_000_000)


def test_integral_floats_are_accepted():
    assert parse_dc(10.0) == Dc(10)


@pytest.mark.parametrize("value", [-1, 1.5, "abc", None, True, [], "-5"])
def test_invalid_amounts_raise_decode_error(value):
    with pytest.raises(DecodeError):
        parse_hnt(value)


def test_amount_types_are_distinct():
    assert Hnt(5) != Hst(5)
    assert Hnt(1) < Hnt(2)
