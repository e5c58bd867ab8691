"""Amount helpers: minor-unit conversion and pt-BR display formatting."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Final

CENTS_PER_REAL: Final[int] = 100
CURRENCY_SYMBOL: Final[str] = "R$"

_TWO_PLACES = Decimal("0.01")


def quantize_amount(amount: Decimal) -> Decimal:
    """Round to exactly two fraction digits."""
    return amount.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)


def _split_cents(cents: int) -> tuple[str, int, int]:
    whole, fraction = divmod(abs(cents), CENTS_PER_REAL)
    return ("-" if cents < 0 else ""), whole, fraction


def cents_to_amount(cents: int) -> Decimal:
    """Convert minor units (centavos) to a two-place decimal amount.

    Built from text, so it is exact for any integer.
    """
    sign, whole, fraction = _split_cents(cents)
    return Decimal(f"{sign}{whole}.{fraction:02d}")


def format_wire_amount(amount: Decimal) -> str:
    """Fixed-point text used in the transaction amount field, e.g. "150.50"."""
    return f"{quantize_amount(amount):.2f}"


def format_amount(cents: int) -> str:
    """Format minor units for display: 150050 -> "R$ 1.500,50".

    Presentation only; the payload never carries this string.
    """
    sign, whole, fraction = _split_cents(cents)
    grouped = f"{whole:,}".replace(",", ".")
    return f"{sign}{CURRENCY_SYMBOL} {grouped},{fraction:02d}"
