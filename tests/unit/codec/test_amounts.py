"""Unit tests for amount conversion and display formatting."""

from decimal import Decimal

import pytest

from pixcode.codec.amounts import (
    cents_to_amount,
    format_amount,
    format_wire_amount,
)


class TestCentsToAmount:
    """Test cents_to_amount function."""

    def test_converts_to_two_places(self) -> None:
        assert cents_to_amount(15050) == Decimal("150.50")
        assert str(cents_to_amount(15000)) == "150.00"

    def test_zero(self) -> None:
        assert str(cents_to_amount(0)) == "0.00"

    def test_negative(self) -> None:
        assert cents_to_amount(-5) == Decimal("-0.05")

    def test_beyond_decimal_context_precision(self) -> None:
        assert cents_to_amount(10**30 + 7) == Decimal("1" + "0" * 28 + ".07")


class TestFormatWireAmount:
    """Test format_wire_amount function."""

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (Decimal("150.5"), "150.50"),
            (Decimal("1"), "1.00"),
            (Decimal("0.01"), "0.01"),
            (Decimal("1E+3"), "1000.00"),
            (Decimal("2.005"), "2.01"),
        ],
    )
    def test_fixed_point_two_places(self, amount: Decimal, expected: str) -> None:
        assert format_wire_amount(amount) == expected


class TestFormatAmount:
    """Test format_amount function."""

    def test_formats_cents(self) -> None:
        assert format_amount(15000) == "R$ 150,00"

    def test_decimal_cents(self) -> None:
        assert format_amount(15050) == "R$ 150,50"

    def test_zero(self) -> None:
        assert format_amount(0) == "R$ 0,00"

    def test_thousands_separator(self) -> None:
        assert format_amount(150000) == "R$ 1.500,00"
        assert format_amount(123456789) == "R$ 1.234.567,89"

    def test_negative(self) -> None:
        assert format_amount(-500) == "-R$ 5,00"

    def test_very_large_amount(self) -> None:
        assert format_amount(10**28) == "R$ 100." + ".".join(["000"] * 8) + ",00"
