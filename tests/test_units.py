"""Unit tests for yocto/NEAR conversions and gas conversion."""

from __future__ import annotations

from decimal import Decimal

import pytest

from metapool.units import ONE_NEAR, ntoy, tgas, yton, yton_full


class TestYtonFull:
    """Tests for yton_full (keeps all 24 decimals)."""

    def test_one_near(self) -> None:
        assert yton_full(str(ONE_NEAR)) == "1.000000000000000000000000"

    def test_small_amount_is_padded(self) -> None:
        assert yton_full("5") == "0.000000000000000000000005"

    def test_zero(self) -> None:
        assert yton_full("0") == "0.000000000000000000000000"

    def test_accepts_int(self) -> None:
        assert yton_full(1_500_000_000_000_000_000_000_000) == "1.500000000000000000000000"

    def test_negative(self) -> None:
        assert yton_full("-5") == "-0.000000000000000000000005"

    def test_rejects_decimal_point(self) -> None:
        with pytest.raises(ValueError, match="decimal point"):
            yton_full("1.5")

    def test_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            yton_full("12ab")


class TestYton:
    """Tests for yton (truncates to 4 decimals)."""

    def test_truncates_not_rounds(self) -> None:
        assert yton("1999999999999999999999999") == "1.9999"

    def test_one_near(self) -> None:
        assert yton(str(ONE_NEAR)) == "1.0000"

    def test_below_display_precision(self) -> None:
        assert yton("99999999999999999999") == "0.0000"

    def test_large_amount(self) -> None:
        assert yton(str(123_456_789 * ONE_NEAR + 4_321 * 10**20)) == "123456789.4321"

    def test_rejects_decimal_point(self) -> None:
        with pytest.raises(ValueError):
            yton("100.0")


class TestNtoy:
    """Tests for ntoy (NEAR -> yocto)."""

    def test_integer(self) -> None:
        assert ntoy(1) == str(ONE_NEAR)

    def test_string_fraction(self) -> None:
        assert ntoy("0.002") == "2000000000000000000000"

    def test_decimal(self) -> None:
        assert ntoy(Decimal("2.5")) == "2500000000000000000000000"

    def test_float(self) -> None:
        assert ntoy(0.1) == "100000000000000000000000"

    def test_full_precision_kept(self) -> None:
        # 31 significant digits: more than the default decimal context
        text = "1234567.123456789012345678901234"
        assert ntoy(text) == "1234567123456789012345678901234"

    def test_too_many_decimals(self) -> None:
        with pytest.raises(ValueError, match="more than 24 decimals"):
            ntoy("0.0000000000000000000000001")

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            ntoy("abc")

    def test_round_trip_full(self) -> None:
        for text in ["0.000000000000000000000001", "42.5", "7.123456789012345678901234"]:
            assert Decimal(yton_full(ntoy(text))) == Decimal(text)

    def test_round_trip_yocto(self) -> None:
        for yoctos in ["0", "1", "340282366920938463463374607431768211455"]:
            assert ntoy(yton_full(yoctos)) == yoctos

    def test_round_trip_truncated(self) -> None:
        assert yton(ntoy("3.14159265")) == "3.1415"


class TestTgas:
    """Tests for tera-gas conversion."""

    def test_default(self) -> None:
        assert tgas() == 200 * 10**12

    def test_range_is_exact(self) -> None:
        for g in range(5, 301):
            assert tgas(g) == g * 10**12

    def test_large_value_no_drift(self) -> None:
        assert tgas(10**20) == 10**32

    def test_fraction_rounds_half_up(self) -> None:
        assert tgas(7.5) == 8 * 10**12
        assert tgas(7.4) == 7 * 10**12
        assert tgas("6.5") == 7 * 10**12
        assert tgas(Decimal("299.5")) == 300 * 10**12
