"""
Financial Engine

Converts a set of assumptions into a single-year snapshot of the rental's
cash flow, tax position and equity growth, and compares its return on
equity with selling and reinvesting the net proceeds in stocks or bonds.

evaluate() is pure: it never mutates its input, holds no state and never
raises for finite inputs.
"""

import logging
from dataclasses import dataclass, asdict
from functools import lru_cache
from typing import Dict

from rent_vs_invest.calculations.amortization import (
    calculate_payment,
    calculate_first_period_split,
)
from rent_vs_invest.calculations.assumptions import Assumptions

logger = logging.getLogger(__name__)

# Residential rental property recovery period (years)
DEPRECIATION_YEARS = 27.5


@dataclass(frozen=True)
class FinancialResult:
    """Derived figures for one set of assumptions. Monthly unless noted."""

    # Loan mechanics
    loan_amount: float
    monthly_pi: float
    interest_payment: float  # First month
    principal_payment: float  # First month

    # Operating
    total_operating_expenses: float
    monthly_cash_flow: float  # Pre-tax
    monthly_depreciation: float
    annual_depreciation: float
    taxable_income: float
    monthly_tax_liability: float
    after_tax_cash_flow: float

    # Equity growth
    monthly_appreciation: float
    total_monthly_return: float

    # Liquidation basis
    selling_costs: float
    gross_equity: float
    net_proceeds: float

    # Comparative returns (ROE values are percentages)
    rental_roe: float
    monthly_stock_return: float
    stock_roe: float
    monthly_bond_return: float
    bond_roe: float
    leverage_ratio: float
    tax_shield_percentage: float

    # True when net_proceeds was zero and 1 was used as the denominator.
    # rental_roe is then an annual dollar figure, not a percentage.
    roe_denominator_guarded: bool = False

    @property
    def annual_total_return(self) -> float:
        return self.total_monthly_return * 12

    @property
    def annual_stock_return(self) -> float:
        return self.monthly_stock_return * 12

    @property
    def annual_bond_return(self) -> float:
        return self.monthly_bond_return * 12

    def to_dict(self) -> Dict:
        return asdict(self)


def evaluate(assumptions: Assumptions) -> FinancialResult:
    """
    Calculate the full keep-vs-sell breakdown.

    Args:
        assumptions: Inputs, percentages as whole numbers

    Returns:
        FinancialResult recomputed from scratch
    """
    a = assumptions

    # === LOAN ===
    loan_amount = a.purchase_price * (1 - a.down_payment_percent / 100)
    annual_rate = a.interest_rate / 100
    num_payments = a.loan_term_years * 12

    monthly_pi = calculate_payment(loan_amount, annual_rate, num_payments)

    # === OPERATING EXPENSES ===
    vacancy_cost = a.monthly_rent * (a.vacancy_rate / 100)
    management_cost = a.monthly_rent * (a.management_fee / 100)
    property_tax = (a.market_value * (a.property_tax_rate / 100)) / 12
    insurance = (a.market_value * (a.insurance_rate / 100)) / 12
    maintenance = (a.market_value * (a.maintenance_rate / 100)) / 12

    total_operating_expenses = (
        vacancy_cost + management_cost + property_tax + insurance + maintenance
    )

    # === CASH FLOW ===
    interest_payment, principal_payment = calculate_first_period_split(
        loan_amount, annual_rate, monthly_pi
    )
    monthly_cash_flow = a.monthly_rent - total_operating_expenses - monthly_pi

    monthly_appreciation = (a.market_value * (a.appreciation_rate / 100)) / 12

    # === TAX (paper P&L) ===
    depreciation_basis = a.purchase_price * (a.building_value_percent / 100)
    annual_depreciation = depreciation_basis / DEPRECIATION_YEARS
    monthly_depreciation = annual_depreciation / 12

    taxable_income = (
        a.monthly_rent
        - total_operating_expenses
        - interest_payment
        - monthly_depreciation
    )

    # Losses are not carried forward or offset against other income
    if taxable_income > 0:
        monthly_tax_liability = taxable_income * (a.marginal_tax_rate / 100)
    else:
        monthly_tax_liability = 0.0

    after_tax_cash_flow = monthly_cash_flow - monthly_tax_liability

    total_monthly_return = (
        after_tax_cash_flow + principal_payment + monthly_appreciation
    )

    # === SALE ===
    selling_costs = a.market_value * (a.selling_cost_percent / 100)
    gross_equity = a.market_value - loan_amount
    net_proceeds = max(0.0, gross_equity - selling_costs)

    guarded = net_proceeds == 0
    equity_base = net_proceeds or 1
    if guarded:
        logger.warning(
            "Sale nets nothing after debt and selling costs "
            f"(gross equity {gross_equity:.2f}, selling costs {selling_costs:.2f}); "
            "ROE and leverage use a denominator of 1"
        )

    # === RETURNS ===
    rental_roe = (total_monthly_return * 12) / equity_base * 100

    monthly_stock_return = (net_proceeds * (a.stock_return_rate / 100)) / 12
    stock_roe = a.stock_return_rate

    monthly_bond_return = (net_proceeds * (a.bond_yield_rate / 100)) / 12
    bond_roe = a.bond_yield_rate

    leverage_ratio = a.market_value / equity_base

    # Share of positive cash flow sheltered by depreciation
    if monthly_cash_flow > 0:
        shield = (monthly_depreciation / monthly_cash_flow) * 100
        tax_shield_percentage = max(0.0, min(100.0, shield))
    else:
        tax_shield_percentage = 0.0

    logger.debug(
        f"Evaluated: cash flow {monthly_cash_flow:.2f}/mo, "
        f"rental ROE {rental_roe:.2f}, net proceeds {net_proceeds:.2f}"
    )

    return FinancialResult(
        loan_amount=loan_amount,
        monthly_pi=monthly_pi,
        interest_payment=interest_payment,
        principal_payment=principal_payment,
        total_operating_expenses=total_operating_expenses,
        monthly_cash_flow=monthly_cash_flow,
        monthly_depreciation=monthly_depreciation,
        annual_depreciation=annual_depreciation,
        taxable_income=taxable_income,
        monthly_tax_liability=monthly_tax_liability,
        after_tax_cash_flow=after_tax_cash_flow,
        monthly_appreciation=monthly_appreciation,
        total_monthly_return=total_monthly_return,
        selling_costs=selling_costs,
        gross_equity=gross_equity,
        net_proceeds=net_proceeds,
        rental_roe=rental_roe,
        monthly_stock_return=monthly_stock_return,
        stock_roe=stock_roe,
        monthly_bond_return=monthly_bond_return,
        bond_roe=bond_roe,
        leverage_ratio=leverage_ratio,
        tax_shield_percentage=tax_shield_percentage,
        roe_denominator_guarded=guarded,
    )


@lru_cache(maxsize=128)
def evaluate_cached(assumptions: Assumptions) -> FinancialResult:
    """evaluate() memoized on the full assumptions value."""
    return evaluate(assumptions)
