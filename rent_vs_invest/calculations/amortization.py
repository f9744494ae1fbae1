"""
Loan Amortization Calculations

Implements the fixed-rate payment formula and its inverse,
matching Excel's PMT() and PV() functions.

Compounding is done in log space so that no finite rate and term can
overflow or turn complex.
"""

import math
import sys
from typing import Tuple

# Largest x for which math.exp(x) is a finite float
_MAX_EXP = math.log(sys.float_info.max)


def _discount_factor(monthly_rate: float, months: float) -> float:
    """
    (1 + r) ** -n for 1 + r > 0.

    Underflows to 0 for long terms and saturates at the largest float
    instead of overflowing.
    """
    exponent = -months * math.log1p(monthly_rate)
    if exponent > _MAX_EXP:
        return sys.float_info.max
    return math.exp(exponent)


def _clamp(value: float) -> float:
    return max(-sys.float_info.max, min(sys.float_info.max, value))


def calculate_payment(
    principal: float, annual_rate: float, amortization_months: float
) -> float:
    """
    Calculate monthly loan payment.

    Matches Excel's PMT() function.

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate as decimal (e.g., 0.05 for 5%)
        amortization_months: Total amortization period in months

    Returns:
        Monthly payment amount (same sign as principal)
    """
    if amortization_months <= 0:
        return 0.0

    monthly_rate = annual_rate / 12

    if monthly_rate == 0:
        return principal / amortization_months

    if monthly_rate <= -1:
        # No compounding base left; the loan only ever pays its interest
        return principal * monthly_rate

    denominator = 1 - _discount_factor(monthly_rate, amortization_months)
    if denominator == 0:
        return principal / amortization_months

    return principal * (monthly_rate / denominator)


def calculate_affordable_principal(
    payment: float, annual_rate: float, amortization_months: float
) -> float:
    """
    Calculate the loan a monthly payment can carry.

    Inverse of calculate_payment(); matches Excel's PV() function.
    """
    if amortization_months <= 0:
        return 0.0

    monthly_rate = annual_rate / 12

    if monthly_rate == 0:
        return payment * amortization_months

    if monthly_rate <= -1:
        return payment / monthly_rate

    numerator = 1 - _discount_factor(monthly_rate, amortization_months)
    if numerator == 0:
        return payment * amortization_months

    return _clamp(payment / monthly_rate * numerator)


def calculate_first_period_split(
    principal: float, annual_rate: float, payment: float
) -> Tuple[float, float]:
    """
    Split the first payment into (interest, principal).

    Only the first month is modelled; the balance is not rolled forward.
    """
    interest = principal * (annual_rate / 12)
    return interest, payment - interest
