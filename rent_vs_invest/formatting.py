"""
Display formatting for currency and percentages.
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext


def format_currency(value: float, minimum_fraction_digits: int = 0) -> str:
    """
    Format as US dollars with thousands grouping.

    No fraction digits unless minimum_fraction_digits asks for them.
    Rounds half away from zero, e.g. 1234.5 -> "$1,235", -80 -> "-$80".
    """
    digits = max(0, minimum_fraction_digits)
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # Enough digits for any finite float
        ctx.prec = 400
        amount = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP)
        sign = "-" if amount < 0 else ""
        return f"{sign}${abs(amount):,.{digits}f}"


def format_percent(value: float) -> str:
    """Format a whole-number percentage with two decimals, e.g. "3.25%"."""
    return f"{value:.2f}%"
