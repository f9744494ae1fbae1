"""
Rate Lock Value

What the existing loan's rate is worth compared with borrowing the same
amount at today's market rate, and the reset risk when the loan is an ARM.

These figures sit beside the main comparison; they do not feed evaluate().
"""

from dataclasses import dataclass
from typing import Optional

from rent_vs_invest.calculations.amortization import (
    calculate_payment,
    calculate_affordable_principal,
)
from rent_vs_invest.calculations.assumptions import Assumptions

DEFAULT_MARKET_RATE = 7.12  # Benchmark 30yr fixed, whole-number percent
COMPARISON_TERM_YEARS = 30


@dataclass(frozen=True)
class RateLockValue:
    """Payment savings and purchasing power of the locked-in rate."""

    loan_amount: float
    market_rate: float
    my_monthly_pi: float
    market_monthly_pi: float
    monthly_savings: float
    annual_savings: float
    ten_year_value: float
    affordable_loan_today: float  # Loan the current payment buys at market_rate
    purchasing_power_loss: float
    purchasing_power_ratio: float


@dataclass(frozen=True)
class ArmWarning:
    """Rate reset exposure of an adjustable-rate mortgage."""

    fixed_period_years: float
    current_rate: float
    fully_indexed_rate: float
    first_adjustment_ceiling: float
    lifetime_ceiling: float


def calculate_rate_lock_value(
    assumptions: Assumptions,
    market_rate: float = DEFAULT_MARKET_RATE,
    term_years: int = COMPARISON_TERM_YEARS,
) -> RateLockValue:
    """
    Compare the loan at the user's rate with the same loan at market_rate.

    Both payments use the same fixed term so the comparison is like for like,
    regardless of the loan's actual term.
    """
    a = assumptions
    months = term_years * 12
    loan_amount = a.purchase_price * (1 - a.down_payment_percent / 100)

    my_pi = calculate_payment(loan_amount, a.interest_rate / 100, months)
    market_pi = calculate_payment(loan_amount, market_rate / 100, months)
    monthly_savings = market_pi - my_pi
    annual_savings = monthly_savings * 12

    affordable = calculate_affordable_principal(my_pi, market_rate / 100, months)

    return RateLockValue(
        loan_amount=loan_amount,
        market_rate=market_rate,
        my_monthly_pi=my_pi,
        market_monthly_pi=market_pi,
        monthly_savings=monthly_savings,
        annual_savings=annual_savings,
        ten_year_value=annual_savings * 10,
        affordable_loan_today=affordable,
        purchasing_power_loss=loan_amount - affordable,
        purchasing_power_ratio=affordable / loan_amount if loan_amount else 0.0,
    )


def arm_warning(assumptions: Assumptions) -> Optional[ArmWarning]:
    """
    Describe the rate the loan is likely to reset to.

    Returns None for fixed-rate loans. Only the reset rate and the cap
    ceilings are reported; the post-reset payment path is not modelled.
    """
    a = assumptions
    if not a.is_arm:
        return None

    return ArmWarning(
        fixed_period_years=a.arm_fixed_period,
        current_rate=a.interest_rate,
        fully_indexed_rate=a.arm_index + a.arm_margin,
        first_adjustment_ceiling=a.interest_rate + a.arm_periodic_cap,
        lifetime_ceiling=a.interest_rate + a.arm_lifetime_cap,
    )
