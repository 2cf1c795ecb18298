"""
Holding Cost Calculator

Carrying costs accrue monthly from purchase until the flip sells.
"""

from ..models import HoldingCosts, ProcessingContext
from .mortgage import MortgageCalculator


class HoldingCostCalculator:
    """Calculates monthly and total carrying costs."""

    def __init__(self, mortgage_calculator: MortgageCalculator | None = None):
        self.mortgage_calculator = mortgage_calculator or MortgageCalculator()

    def calculate(self, ctx: ProcessingContext) -> HoldingCosts:
        """
        Expenses During Holding = (Selected Monthly Expenses
                                   + Monthly Mortgage Payment)
                                  * Months Until Flip
        """
        monthly_mortgage = self.mortgage_calculator.calculate(ctx)
        total_monthly = ctx.expenses.total + monthly_mortgage

        return HoldingCosts(
            monthly_mortgage_payment=monthly_mortgage,
            total_monthly_expenses=total_monthly,
            expenses_during_holding=total_monthly * ctx.inputs.months_until_flip,
        )
