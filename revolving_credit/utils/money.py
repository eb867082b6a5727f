"""Output-boundary rounding for currency values"""

from decimal import Context, Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")
DEFAULT_PRECISION = 28


def round_money(value: Decimal) -> Decimal:
    """Quantize to 2 decimal places, half away from zero"""
    # Widen precision so integer digits plus cents always fit
    context = Context(prec=max(DEFAULT_PRECISION, value.adjusted() + 3))
    return value.quantize(CENT, rounding=ROUND_HALF_UP, context=context)


def to_money_float(value: Decimal) -> float:
    """Rounded currency value as a JSON-friendly float"""
    return float(round_money(value))
