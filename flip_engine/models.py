"""
Domain Models for the Fix-and-Flip Deal Engine

These dataclasses provide type-safe representations of deal inputs,
recurring expenses and derived metrics.
All monetary values are floats; rounding only happens at the output boundary.
"""

from dataclasses import dataclass, field, fields

from .parsing import parse_amount, parse_count

# =============================================================================
# CONSTANTS
# =============================================================================

EXPENSE_CATEGORIES = (
    "Taxes",
    "Insurance",
    "Trash",
    "Gas/Electric",
    "Internet",
    "HOA",
    "Water/Sewer",
    "Heat",
    "Lawn/Snow",
    "Phone Bill",
    "Extra",
)

# Fields parsed as whole numbers; everything else is money or a rate
COUNT_FIELDS = ("months_until_flip", "loan_term")

# Original camelCase form names accepted by from_dict
CAMEL_CASE_ALIASES = {
    "purchasePrice": "purchase_price",
    "downPaymentPercent": "down_payment_percent",
    "closingCostsPercent": "closing_costs_percent",
    "estimateRepairs": "estimate_repairs",
    "afterRepairValue": "after_repair_value",
    "monthsUntilFlip": "months_until_flip",
    "interestRate": "interest_rate",
    "loanTerm": "loan_term",
}


def parse_field(name: str, raw) -> float | int:
    """Parse a raw value with the parser that matches the input field."""
    if name in COUNT_FIELDS:
        return parse_count(raw)
    return parse_amount(raw)


# =============================================================================
# INPUT MODELS
# =============================================================================


@dataclass(frozen=True)
class DealInputs:
    """The numbers a user enters for a single deal."""

    purchase_price: float = 150000.0
    down_payment_percent: float = 20.0
    closing_costs_percent: float = 2.0
    estimate_repairs: float = 20000.0
    after_repair_value: float = 200000.0
    months_until_flip: int = 3
    interest_rate: float = 6.0  # annual, percent
    loan_term: int = 30  # years

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: dict) -> "DealInputs":
        """Build inputs from raw form/API data.

        Missing keys keep their default. Present keys are parsed, so a
        non-numeric value becomes 0 rather than an error.
        """
        values = {}
        for key, raw in data.items():
            name = CAMEL_CASE_ALIASES.get(key, key)
            if name not in cls.field_names():
                continue
            values[name] = parse_field(name, raw)
        return cls(**values)

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.field_names()}


@dataclass
class ExpenseSet:
    """Monthly recurring expenses keyed by category, in selection order."""

    amounts: dict[str, float] = field(default_factory=dict)

    def __post_init__(self):
        for category in self.amounts:
            self._check_category(category)

    @staticmethod
    def _check_category(category: str) -> None:
        if category not in EXPENSE_CATEGORIES:
            raise ValueError(
                f"Unknown expense category: {category!r}. "
                f"Must be one of: {', '.join(EXPENSE_CATEGORIES)}"
            )

    def select(self, category: str) -> None:
        """Add a category at 0. Selecting an existing category is a no-op."""
        self._check_category(category)
        if category not in self.amounts:
            self.amounts[category] = 0.0

    def set_amount(self, category: str, amount: float) -> None:
        self.select(category)
        self.amounts[category] = amount

    @property
    def categories(self) -> list[str]:
        return list(self.amounts)

    @property
    def total(self) -> float:
        return sum(self.amounts.values(), 0.0)

    def copy(self) -> "ExpenseSet":
        return ExpenseSet(amounts=dict(self.amounts))

    def __len__(self) -> int:
        return len(self.amounts)

    def __contains__(self, category) -> bool:
        return category in self.amounts

    @classmethod
    def from_dict(cls, data: dict | None) -> "ExpenseSet":
        expenses = cls()
        for category, raw in (data or {}).items():
            expenses.set_amount(category, parse_amount(raw))
        return expenses


# =============================================================================
# OUTPUT / RESULT MODELS
# =============================================================================


@dataclass(frozen=True)
class AcquisitionCosts:
    """Cash and financing needed to buy and rehab the property."""

    down_payment: float = 0.0
    mortgage_amount: float = 0.0
    closing_costs: float = 0.0
    total_capital_needed: float = 0.0


@dataclass(frozen=True)
class HoldingCosts:
    """Carrying costs while the property is being flipped."""

    monthly_mortgage_payment: float = 0.0
    total_monthly_expenses: float = 0.0
    expenses_during_holding: float = 0.0


@dataclass(frozen=True)
class ProfitAnalysis:
    """Profit and return on the capital committed.

    return_on_investment_percent is None when no capital is required,
    which makes the ratio undefined.
    """

    anticipated_profit: float = 0.0
    return_on_investment_percent: float | None = None

    @property
    def roi_defined(self) -> bool:
        return self.return_on_investment_percent is not None


@dataclass(frozen=True)
class OfferAnalysis:
    """70% rule maximum offer."""

    seventy_percent_arv: float = 0.0
    max_offer: float = 0.0


@dataclass(frozen=True)
class DealOutputs:
    """Every metric derived from a DealInputs/ExpenseSet pair."""

    down_payment: float
    mortgage_amount: float
    closing_costs: float
    total_capital_needed: float
    monthly_mortgage_payment: float
    total_monthly_expenses: float
    expenses_during_holding: float
    anticipated_profit: float
    seventy_percent_arv: float
    max_offer: float
    return_on_investment_percent: float | None

    @property
    def roi_defined(self) -> bool:
        return self.return_on_investment_percent is not None


@dataclass
class ProcessingContext:
    """
    Holds all intermediate state during deal processing.
    This is the "bag" that flows through the pipeline.
    """

    # Input (immutable during processing)
    inputs: DealInputs
    expenses: ExpenseSet

    # Step results (populated as we go)
    acquisition: AcquisitionCosts = field(default_factory=AcquisitionCosts)
    holding: HoldingCosts = field(default_factory=HoldingCosts)
    profit: ProfitAnalysis = field(default_factory=ProfitAnalysis)
    offer: OfferAnalysis = field(default_factory=OfferAnalysis)

    # Final outputs
    classification: str = "unfavorable"

    def to_outputs(self) -> DealOutputs:
        return DealOutputs(
            down_payment=self.acquisition.down_payment,
            mortgage_amount=self.acquisition.mortgage_amount,
            closing_costs=self.acquisition.closing_costs,
            total_capital_needed=self.acquisition.total_capital_needed,
            monthly_mortgage_payment=self.holding.monthly_mortgage_payment,
            total_monthly_expenses=self.holding.total_monthly_expenses,
            expenses_during_holding=self.holding.expenses_during_holding,
            anticipated_profit=self.profit.anticipated_profit,
            seventy_percent_arv=self.offer.seventy_percent_arv,
            max_offer=self.offer.max_offer,
            return_on_investment_percent=self.profit.return_on_investment_percent,
        )


@dataclass
class DealResult:
    """Final output of deal processing."""

    outputs: DealOutputs
    classification: str
    deal_summary: dict
    headline: dict
    acquisition: dict
    rehab: dict
    verdict: dict

    def to_dict(self) -> dict:
        return {
            "deal_summary": self.deal_summary,
            "headline": self.headline,
            "acquisition": self.acquisition,
            "rehab": self.rehab,
            "verdict": self.verdict,
        }
