"""
Profit Calculator

Calculates anticipated profit and return on the capital committed.
"""

from ..models import ProcessingContext, ProfitAnalysis


class ProfitCalculator:
    """Calculates anticipated profit and ROI."""

    def calculate(self, ctx: ProcessingContext) -> ProfitAnalysis:
        """
        Anticipated Profit = ARV
                           - Purchase Price
                           - Estimated Repairs
                           - Closing Costs
                           - Expenses During Holding

        ROI % = Anticipated Profit / Total Capital Needed * 100
        """
        inputs = ctx.inputs
        acquisition = ctx.acquisition

        profit = inputs.after_repair_value
        profit -= inputs.purchase_price
        profit -= inputs.estimate_repairs
        profit -= acquisition.closing_costs
        profit -= ctx.holding.expenses_during_holding

        return ProfitAnalysis(
            anticipated_profit=profit,
            return_on_investment_percent=self._calculate_roi(profit, acquisition.total_capital_needed),
        )

    def _calculate_roi(self, profit: float, capital: float) -> float | None:
        # No capital committed: the ratio is undefined, not infinite
        if capital == 0:
            return None
        return (profit / capital) * 100
