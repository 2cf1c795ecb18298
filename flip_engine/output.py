"""
Output Builder

Constructs the final API response from processing context.
"""

from .calculators import FAVORABLE, FAVORABLE_ROI_THRESHOLD
from .calculators.offer import OfferCalculator
from .models import DealResult, ProcessingContext

FAVORABLE_MESSAGE = (
    f"Great deal! The ROI is above {FAVORABLE_ROI_THRESHOLD}%, "
    "which is considered excellent for a fix and flip."
)
UNFAVORABLE_MESSAGE = (
    f"Not a great deal. The ROI is below {FAVORABLE_ROI_THRESHOLD}%, "
    "which is considered risky for a fix and flip."
)
UNDEFINED_ROI_MESSAGE = "ROI is undefined because no capital is required for this deal."


def to_money(value: float | None) -> float | None:
    """Round to 2 decimal places for the response payload."""
    if value is None:
        return None
    return round(float(value), 2)


def format_currency(value: float) -> str:
    """Format a number as US dollars: 1234.5 -> "$1,234.50"."""
    amount = round(float(value), 2)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_percent(value: float | None) -> str:
    """Format a percent number (not a fraction): 46.87 -> "46.87%"."""
    if value is None:
        return "N/A"
    return f"{value:,.2f}%"


def _metric(value: float | None, description: str, percent: bool = False) -> dict:
    display = format_percent(value) if percent else format_currency(value)
    return {
        "value": to_money(value),
        "display": display,
        "description": description,
    }


class OutputBuilder:
    """Builds the final output response."""

    def build(self, ctx: ProcessingContext) -> DealResult:
        """Construct the complete deal result from processing context."""
        return DealResult(
            outputs=ctx.to_outputs(),
            classification=ctx.classification,
            deal_summary=self._build_deal_summary(ctx),
            headline=self._build_headline(ctx),
            acquisition=self._build_acquisition(ctx),
            rehab=self._build_rehab(ctx),
            verdict=self._build_verdict(ctx),
        )

    def _build_deal_summary(self, ctx: ProcessingContext) -> dict:
        """Echo the inputs the metrics were computed from."""
        summary = ctx.inputs.to_dict()
        summary["expenses"] = {
            category: to_money(amount)
            for category, amount in ctx.expenses.amounts.items()
        }
        return summary

    def _build_headline(self, ctx: ProcessingContext) -> dict:
        inputs = ctx.inputs
        offer = ctx.offer
        acquisition = ctx.acquisition
        factor = round(OfferCalculator.ARV_FACTOR * 100)

        return {
            "max_offer": _metric(
                offer.max_offer,
                f"{factor}% × ARV ({format_currency(inputs.after_repair_value)}) "
                f"- repairs ({format_currency(inputs.estimate_repairs)}) = {format_currency(offer.max_offer)}",
            ),
            "seventy_percent_arv": _metric(
                offer.seventy_percent_arv,
                f"{factor}% of after repair value {format_currency(inputs.after_repair_value)}",
            ),
            "total_capital_needed": _metric(
                acquisition.total_capital_needed,
                f"down_payment ({format_currency(acquisition.down_payment)}) "
                f"+ closing_costs ({format_currency(acquisition.closing_costs)}) "
                f"+ repairs ({format_currency(inputs.estimate_repairs)})",
            ),
        }

    def _build_acquisition(self, ctx: ProcessingContext) -> dict:
        inputs = ctx.inputs
        acquisition = ctx.acquisition
        holding = ctx.holding
        price = format_currency(inputs.purchase_price)

        return {
            "closing_costs": _metric(
                acquisition.closing_costs,
                f"{format_percent(inputs.closing_costs_percent)} × {price}",
            ),
            "down_payment": _metric(
                acquisition.down_payment,
                f"{format_percent(inputs.down_payment_percent)} × {price}",
            ),
            "mortgage_amount": _metric(
                acquisition.mortgage_amount,
                f"purchase_price ({price}) - down_payment ({format_currency(acquisition.down_payment)})",
            ),
            "monthly_mortgage_payment": _metric(
                holding.monthly_mortgage_payment,
                f"{inputs.loan_term}-year loan at {format_percent(inputs.interest_rate)} "
                f"on {format_currency(acquisition.mortgage_amount)}"
                if acquisition.mortgage_amount > 0 else "No mortgage financing for this deal",
            ),
        }

    def _build_rehab(self, ctx: ProcessingContext) -> dict:
        inputs = ctx.inputs
        holding = ctx.holding
        profit = ctx.profit

        if profit.roi_defined:
            roi_desc = (
                f"anticipated_profit ({format_currency(profit.anticipated_profit)}) "
                f"/ total_capital_needed ({format_currency(ctx.acquisition.total_capital_needed)})"
            )
        else:
            roi_desc = "Undefined: total capital needed is zero"

        return {
            "expenses_during_holding": _metric(
                holding.expenses_during_holding,
                f"monthly expenses ({format_currency(ctx.expenses.total)}) "
                f"+ mortgage ({format_currency(holding.monthly_mortgage_payment)}) "
                f"× {inputs.months_until_flip} months",
            ),
            "anticipated_profit": _metric(
                profit.anticipated_profit,
                f"ARV ({format_currency(inputs.after_repair_value)}) "
                f"- purchase ({format_currency(inputs.purchase_price)}) "
                f"- repairs ({format_currency(inputs.estimate_repairs)}) "
                f"- closing ({format_currency(ctx.acquisition.closing_costs)}) "
                f"- holding ({format_currency(holding.expenses_during_holding)})",
            ),
            "return_on_investment": _metric(
                profit.return_on_investment_percent, roi_desc, percent=True
            ),
        }

    def _build_verdict(self, ctx: ProcessingContext) -> dict:
        if not ctx.profit.roi_defined:
            message = UNDEFINED_ROI_MESSAGE
        elif ctx.classification == FAVORABLE:
            message = FAVORABLE_MESSAGE
        else:
            message = UNFAVORABLE_MESSAGE

        return {
            "classification": ctx.classification,
            "roi_defined": ctx.profit.roi_defined,
            "threshold_percent": FAVORABLE_ROI_THRESHOLD,
            "message": message,
        }
