"""
Keep vs Sell Comparison

Breaks each path's annual return into cash income and growth, and ranks
the three paths by return on equity.
"""

import enum
from dataclasses import dataclass
from typing import List

from rent_vs_invest.calculations.financials import FinancialResult

# Share of net proceeds paid out as dividends when invested in stocks
DEFAULT_DIVIDEND_YIELD = 0.015


class ViewMode(str, enum.Enum):
    """Investment path being compared."""

    RENT = "rent"
    STOCK = "stock"
    BOND = "bond"


@dataclass(frozen=True)
class PortfolioBreakdown:
    """Where one path's annual return comes from."""

    mode: ViewMode
    annual_return: float
    cash_income: float
    growth: float
    roe: float


def mode_roe(result: FinancialResult, mode: ViewMode) -> float:
    if mode is ViewMode.RENT:
        return result.rental_roe
    if mode is ViewMode.STOCK:
        return result.stock_roe
    return result.bond_roe


def passive_breakdown(
    result: FinancialResult,
    mode: ViewMode,
    dividend_yield: float = DEFAULT_DIVIDEND_YIELD,
) -> PortfolioBreakdown:
    """
    Split a path's annual return into cash and growth.

    Stocks pay dividend_yield on the proceeds in cash, the rest is price
    growth. Bonds are all interest. The rental's cash is its after-tax cash
    flow and its growth is principal paydown plus appreciation.
    """
    if mode is ViewMode.STOCK:
        annual = result.annual_stock_return
        cash = result.net_proceeds * dividend_yield
        growth = annual - cash
    elif mode is ViewMode.BOND:
        annual = result.annual_bond_return
        cash = annual
        growth = 0.0
    else:
        annual = result.annual_total_return
        cash = result.after_tax_cash_flow * 12
        growth = (result.principal_payment + result.monthly_appreciation) * 12

    return PortfolioBreakdown(
        mode=mode,
        annual_return=annual,
        cash_income=cash,
        growth=growth,
        roe=mode_roe(result, mode),
    )


def rank_modes(result: FinancialResult) -> List[ViewMode]:
    """Paths ordered by ROE, best first. Ties keep rent, stock, bond order."""
    return sorted(ViewMode, key=lambda mode: -mode_roe(result, mode))


def rental_wins(result: FinancialResult, mode: ViewMode) -> bool:
    """Whether keeping the rental beats the given alternative on ROE."""
    return result.rental_roe > mode_roe(result, mode)
