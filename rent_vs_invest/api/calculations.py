"""
Financial calculation API endpoints.

These endpoints accept assumptions and return calculated results.
Called by the front end on every assumption change.
"""

import logging
from typing import Dict, List, Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from rent_vs_invest.calculations.assumptions import (
    Assumptions,
    DEFAULT_ASSUMPTIONS,
    InvalidAssumption,
    ensure_valid,
    validate_assumptions,
)
from rent_vs_invest.calculations.comparison import (
    ViewMode,
    passive_breakdown,
    rank_modes,
    rental_wins,
)
from rent_vs_invest.calculations.financials import FinancialResult, evaluate_cached
from rent_vs_invest.calculations.rate_lock import (
    arm_warning,
    calculate_rate_lock_value,
)
from rent_vs_invest.config import Settings, get_settings
from rent_vs_invest.formatting import format_currency, format_percent

logger = logging.getLogger(__name__)

router = APIRouter()

D = DEFAULT_ASSUMPTIONS


class AssumptionsInput(BaseModel):
    """Input assumptions. Accepts snake_case or camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    # Property
    purchase_price: float = D.purchase_price
    market_value: float = D.market_value
    down_payment_percent: float = D.down_payment_percent
    interest_rate: float = D.interest_rate
    loan_term_years: int = D.loan_term_years
    monthly_rent: float = D.monthly_rent

    # Expenses
    vacancy_rate: float = D.vacancy_rate
    management_fee: float = D.management_fee
    maintenance_rate: float = D.maintenance_rate
    property_tax_rate: float = D.property_tax_rate
    insurance_rate: float = D.insurance_rate

    # Tax & growth
    appreciation_rate: float = D.appreciation_rate
    building_value_percent: float = D.building_value_percent
    marginal_tax_rate: float = D.marginal_tax_rate
    capital_gains_rate: float = D.capital_gains_rate

    # Alternatives
    stock_return_rate: float = D.stock_return_rate
    bond_yield_rate: float = D.bond_yield_rate
    selling_cost_percent: float = D.selling_cost_percent

    # ARM
    is_arm: bool = Field(D.is_arm, alias="isARM")
    arm_fixed_period: float = D.arm_fixed_period
    arm_index: float = D.arm_index
    arm_margin: float = D.arm_margin
    arm_periodic_cap: float = D.arm_periodic_cap
    arm_lifetime_cap: float = D.arm_lifetime_cap

    def to_assumptions(self) -> Assumptions:
        return Assumptions(**self.model_dump())


class FinancialResultSchema(BaseModel):
    """Calculated keep-vs-sell figures (monthly unless noted)."""

    loan_amount: float
    monthly_pi: float
    interest_payment: float
    principal_payment: float
    total_operating_expenses: float
    monthly_cash_flow: float
    monthly_depreciation: float
    annual_depreciation: float
    taxable_income: float
    monthly_tax_liability: float
    after_tax_cash_flow: float
    monthly_appreciation: float
    total_monthly_return: float
    selling_costs: float
    gross_equity: float
    net_proceeds: float
    rental_roe: float
    monthly_stock_return: float
    stock_roe: float
    monthly_bond_return: float
    bond_roe: float
    leverage_ratio: float
    tax_shield_percentage: float
    roe_denominator_guarded: bool


class FinancialsResponse(BaseModel):
    """Response with results and display strings."""

    results: FinancialResultSchema
    formatted: Dict[str, str]
    warnings: List[str] = []


class BreakdownSchema(BaseModel):
    """Where a path's annual return comes from."""

    mode: ViewMode
    annual_return: float
    cash_income: float
    growth: float
    roe: float


class CompareResponse(BaseModel):
    """Rental vs one passive alternative."""

    mode: ViewMode
    results: FinancialResultSchema
    rental: BreakdownSchema
    alternative: BreakdownSchema
    rental_wins: bool
    ranking: List[ViewMode]
    warnings: List[str] = []


class RateLockSchema(BaseModel):
    loan_amount: float
    market_rate: float
    my_monthly_pi: float
    market_monthly_pi: float
    monthly_savings: float
    annual_savings: float
    ten_year_value: float
    affordable_loan_today: float
    purchasing_power_loss: float
    purchasing_power_ratio: float


class ArmWarningSchema(BaseModel):
    fixed_period_years: float
    current_rate: float
    fully_indexed_rate: float
    first_adjustment_ceiling: float
    lifetime_ceiling: float


class RateLockResponse(BaseModel):
    """Value of the locked-in rate and ARM reset exposure."""

    rate_lock: RateLockSchema
    arm_warning: Optional[ArmWarningSchema] = None
    warnings: List[str] = []


def _check_assumptions(
    inputs: AssumptionsInput, settings: Settings
) -> Tuple[Assumptions, List[str]]:
    """Convert and validate inputs. Returns (assumptions, warnings)."""
    assumptions = inputs.to_assumptions()

    if settings.strict_validation:
        try:
            ensure_valid(assumptions)
        except InvalidAssumption as e:
            raise HTTPException(status_code=422, detail={"problems": e.problems})
        return assumptions, []

    warnings = validate_assumptions(assumptions)
    if warnings:
        logger.warning(f"Computing with questionable assumptions: {warnings}")
    return assumptions, warnings


def _format_result(result: FinancialResult) -> Dict[str, str]:
    formatted = {
        "monthly_pi": format_currency(result.monthly_pi),
        "monthly_cash_flow": format_currency(result.monthly_cash_flow),
        "monthly_tax_liability": format_currency(result.monthly_tax_liability),
        "after_tax_cash_flow": format_currency(result.after_tax_cash_flow),
        "principal_payment": format_currency(result.principal_payment),
        "monthly_appreciation": format_currency(result.monthly_appreciation),
        "annual_total_return": format_currency(result.annual_total_return),
        "annual_stock_return": format_currency(result.annual_stock_return),
        "annual_bond_return": format_currency(result.annual_bond_return),
        "gross_equity": format_currency(result.gross_equity),
        "selling_costs": format_currency(result.selling_costs),
        "net_proceeds": format_currency(result.net_proceeds),
        "rental_roe": format_percent(result.rental_roe),
        "stock_roe": format_percent(result.stock_roe),
        "bond_roe": format_percent(result.bond_roe),
        "tax_shield_percentage": format_percent(result.tax_shield_percentage),
        "leverage_ratio": f"{result.leverage_ratio:.1f}x",
    }
    return formatted


@router.get("/defaults", response_model=AssumptionsInput)
async def get_defaults():
    """Default assumptions used before any user input."""
    return AssumptionsInput()


@router.post("/financials", response_model=FinancialsResponse)
async def calculate_financials(
    inputs: AssumptionsInput, settings: Settings = Depends(get_settings)
):
    """Calculate the full keep-vs-sell breakdown."""
    assumptions, warnings = _check_assumptions(inputs, settings)
    result = evaluate_cached(assumptions)

    if result.roe_denominator_guarded:
        warnings.append(
            "Net proceeds are zero; rental ROE is an annual dollar amount, not a percentage"
        )

    return FinancialsResponse(
        results=FinancialResultSchema(**result.to_dict()),
        formatted=_format_result(result),
        warnings=warnings,
    )


@router.post("/compare", response_model=CompareResponse)
async def compare(
    inputs: AssumptionsInput,
    mode: ViewMode = ViewMode.STOCK,
    settings: Settings = Depends(get_settings),
):
    """Compare keeping the rental with selling into stocks or bonds."""
    if mode is ViewMode.RENT:
        raise HTTPException(status_code=400, detail="Compare mode must be stock or bond")

    assumptions, warnings = _check_assumptions(inputs, settings)
    result = evaluate_cached(assumptions)

    rental = passive_breakdown(result, ViewMode.RENT)
    alternative = passive_breakdown(result, mode, settings.dividend_yield)

    return CompareResponse(
        mode=mode,
        results=FinancialResultSchema(**result.to_dict()),
        rental=BreakdownSchema(**vars(rental)),
        alternative=BreakdownSchema(**vars(alternative)),
        rental_wins=rental_wins(result, mode),
        ranking=rank_modes(result),
        warnings=warnings,
    )


@router.post("/rate-lock", response_model=RateLockResponse)
async def calculate_rate_lock(
    inputs: AssumptionsInput,
    market_rate: Optional[float] = None,
    settings: Settings = Depends(get_settings),
):
    """Value of the current loan rate against today's market rate."""
    assumptions, warnings = _check_assumptions(inputs, settings)

    if market_rate is None:
        market_rate = settings.market_rate

    value = calculate_rate_lock_value(
        assumptions,
        market_rate=market_rate,
        term_years=settings.rate_lock_term_years,
    )
    warning = arm_warning(assumptions)

    return RateLockResponse(
        rate_lock=RateLockSchema(**vars(value)),
        arm_warning=ArmWarningSchema(**vars(warning)) if warning else None,
        warnings=warnings,
    )
