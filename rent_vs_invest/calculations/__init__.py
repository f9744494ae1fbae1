"""
Financial Calculation Engine

Core calculation modules for the keep-vs-sell comparison.
All percentages are whole numbers (3.25 means 3.25%).
"""

from rent_vs_invest.calculations import (
    amortization,
    assumptions,
    comparison,
    financials,
    rate_lock,
)

__all__ = ["amortization", "assumptions", "comparison", "financials", "rate_lock"]
