"""
Print the keep-vs-sell breakdown for the default assumptions.

Usage:
    python scripts/print_default_scenario.py [--mode stock|bond]
"""
import argparse
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rent_vs_invest.calculations.assumptions import DEFAULT_ASSUMPTIONS
from rent_vs_invest.calculations.comparison import ViewMode, passive_breakdown
from rent_vs_invest.calculations.financials import evaluate
from rent_vs_invest.calculations.rate_lock import calculate_rate_lock_value
from rent_vs_invest.formatting import format_currency, format_percent


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--mode", choices=["stock", "bond"], default="stock")
    args = parser.parse_args()

    mode = ViewMode(args.mode)
    result = evaluate(DEFAULT_ASSUMPTIONS)

    print("Keep the house")
    print(f"  Cash flow (pre-tax):   {format_currency(result.monthly_cash_flow)}/mo")
    print(f"  Tax:                  -{format_currency(result.monthly_tax_liability)}/mo")
    print(f"  After-tax cash flow:   {format_currency(result.after_tax_cash_flow)}/mo")
    print(f"  Principal paydown:     {format_currency(result.principal_payment)}/mo")
    print(f"  Appreciation:          {format_currency(result.monthly_appreciation)}/mo")
    print(f"  Total return:          {format_currency(result.annual_total_return)}/yr")
    print(f"  ROE:                   {format_percent(result.rental_roe)}")
    print(f"  Leverage:              {result.leverage_ratio:.1f}x")

    print()
    print(f"Sell and buy {'stocks' if mode is ViewMode.STOCK else 'bonds'}")
    print(f"  Gross equity:          {format_currency(result.gross_equity)}")
    print(f"  Selling costs:        -{format_currency(result.selling_costs)}")
    print(f"  Net proceeds:          {format_currency(result.net_proceeds)}")
    breakdown = passive_breakdown(result, mode)
    print(f"  Cash income:           {format_currency(breakdown.cash_income)}/yr")
    print(f"  Growth:                {format_currency(breakdown.growth)}/yr")
    print(f"  ROE:                   {format_percent(breakdown.roe)}")

    lock = calculate_rate_lock_value(DEFAULT_ASSUMPTIONS)
    print()
    print(f"Rate lock vs {format_percent(lock.market_rate)} market")
    print(f"  Monthly savings:       {format_currency(lock.monthly_savings)}")
    print(f"  10-year value:         {format_currency(lock.ten_year_value)}")


if __name__ == "__main__":
    main()
