"""
Rounding helpers.

Calculators keep full floating-point precision internally and round only the
values they return. Halves round away from zero.
"""

from decimal import Context, Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")


def round_to(value: float, places: int = 2) -> float:
    """Round value to the given decimal places, halves away from zero."""
    exponent = CENTS if places == 2 else Decimal(1).scaleb(-places)
    amount = Decimal(repr(value))
    # Quantizing needs every integer digit plus the kept decimals
    context = Context(prec=max(28, amount.adjusted() + places + 2))
    return float(amount.quantize(exponent, rounding=ROUND_HALF_UP, context=context))


def round_money(value: float) -> float:
    """Round a monetary amount to 2 decimal places."""
    return round_to(value, 2)
