# utils/money.py
from decimal import Decimal, ROUND_HALF_UP, localcontext

# Prices are Decimal everywhere so 549.99 - 499.99 is exactly 50.00.
CENT = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value) -> Decimal:
    # Go through str() so floats keep the digits they were written with,
    # e.g. 109.5 -> Decimal("109.5") and not the binary expansion.
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("A price cannot be a boolean.")
    return Decimal(str(value))


def round_money(amount: Decimal) -> Decimal:
    # Final rounding to 2 decimal places, half-up.
    # quantize needs every integer digit plus the cents to fit the context.
    amount = to_decimal(amount)
    with localcontext() as ctx:
        ctx.prec = max(28, amount.adjusted() + 3)
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def sum_prices(items) -> Decimal:
    return sum((item.price for item in items), ZERO)
