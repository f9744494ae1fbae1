"""
Assumption Model

The closed set of inputs describing the property, the loan, operating
expenses, tax treatment and the alternative investments.

All rate fields are whole-number percentages (3.25 means 3.25%).
The model does not validate; see validate_assumptions() for opt-in checks.
"""

import math
import re
from dataclasses import dataclass, fields, asdict, replace
from typing import Any, Dict, List, Mapping


class InvalidAssumption(ValueError):
    """Raised in strict mode when assumptions are out of range."""

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__("; ".join(problems))


@dataclass(frozen=True)
class Assumptions:
    """Inputs for a single-year keep-vs-sell snapshot."""

    # Property
    purchase_price: float = 450000
    market_value: float = 520000  # Current value if different from purchase
    down_payment_percent: float = 20
    interest_rate: float = 3.25
    loan_term_years: int = 30
    monthly_rent: float = 3200

    # Expenses
    vacancy_rate: float = 5  # % of rent
    management_fee: float = 8  # % of rent
    maintenance_rate: float = 1  # % of market value per year
    property_tax_rate: float = 1.2  # % of market value per year
    insurance_rate: float = 0.5  # % of market value per year

    # Tax & growth
    appreciation_rate: float = 2.0
    building_value_percent: float = 80  # Depreciable share of purchase price
    marginal_tax_rate: float = 32
    capital_gains_rate: float = 15

    # Alternatives
    stock_return_rate: float = 8
    bond_yield_rate: float = 4.5
    selling_cost_percent: float = 6  # Agent fees + transfer tax

    # ARM specifics
    is_arm: bool = False
    arm_fixed_period: float = 5  # Years
    arm_index: float = 4.5
    arm_margin: float = 2.25
    arm_periodic_cap: float = 2
    arm_lifetime_cap: float = 5

    def update(self, **changes: Any) -> "Assumptions":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_camel_dict(self) -> Dict[str, Any]:
        """Same as to_dict() but with camelCase keys (isARM, armIndex, ...)."""
        return {_to_camel(key): value for key, value in asdict(self).items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Assumptions":
        """
        Build assumptions from a mapping.

        Accepts snake_case or camelCase keys. Missing keys keep their
        defaults, unknown keys raise TypeError.
        """
        return cls(**{_to_snake(key): value for key, value in data.items()})


DEFAULT_ASSUMPTIONS = Assumptions()

FIELD_NAMES = tuple(f.name for f in fields(Assumptions))

# Percentages that only make sense between 0 and 100
BOUNDED_PERCENT_FIELDS = (
    "down_payment_percent",
    "vacancy_rate",
    "management_fee",
    "building_value_percent",
    "marginal_tax_rate",
    "capital_gains_rate",
    "selling_cost_percent",
)

NON_NEGATIVE_FIELDS = (
    "purchase_price",
    "market_value",
    "monthly_rent",
    "interest_rate",
    "maintenance_rate",
    "property_tax_rate",
    "insurance_rate",
    "arm_fixed_period",
    "arm_index",
    "arm_margin",
    "arm_periodic_cap",
    "arm_lifetime_cap",
)


def _to_snake(key: str) -> str:
    if key == "isARM":
        return "is_arm"
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def _to_camel(key: str) -> str:
    if key == "is_arm":
        return "isARM"
    head, *rest = key.split("_")
    return head + "".join(part.title() for part in rest)


def validate_assumptions(assumptions: Assumptions) -> List[str]:
    """
    Check assumptions for values that produce meaningless results.

    Values of the wrong type are reported as problems too, so any
    Assumptions instance can be checked.

    Returns:
        List of problems (empty if none). Never raises.
    """
    problems = []
    numbers = {}

    for name, value in assumptions.to_dict().items():
        if name == "is_arm":
            if not isinstance(value, bool):
                problems.append(f"{name} must be true or false")
        elif isinstance(value, bool) or not isinstance(value, (int, float)):
            problems.append(f"{name} must be a number")
        elif not math.isfinite(value):
            problems.append(f"{name} must be a finite number")
        else:
            numbers[name] = value

    # Range checks only apply to finite numbers
    for name in NON_NEGATIVE_FIELDS:
        if name in numbers and numbers[name] < 0:
            problems.append(f"{name} must not be negative")

    for name in BOUNDED_PERCENT_FIELDS:
        if name in numbers and not 0 <= numbers[name] <= 100:
            problems.append(f"{name} must be between 0 and 100")

    if "loan_term_years" in numbers and numbers["loan_term_years"] <= 0:
        problems.append("loan_term_years must be positive")

    return problems


def ensure_valid(assumptions: Assumptions) -> Assumptions:
    """Raise InvalidAssumption if any problem is found."""
    problems = validate_assumptions(assumptions)
    if problems:
        raise InvalidAssumption(problems)
    return assumptions
