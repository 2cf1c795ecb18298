"""
Acquisition Calculator

Computes the cash and financing needed to close and rehab the deal.
"""

from ..models import AcquisitionCosts, ProcessingContext


class AcquisitionCalculator:
    """Calculates down payment, mortgage, closing costs and capital needed."""

    def calculate(self, ctx: ProcessingContext) -> AcquisitionCosts:
        """
        Total Capital Needed = Down Payment
                             + Closing Costs
                             + Estimated Repairs
        """
        inputs = ctx.inputs
        price = inputs.purchase_price

        down_payment = price * (inputs.down_payment_percent / 100)
        mortgage_amount = price - down_payment
        closing_costs = price * (inputs.closing_costs_percent / 100)

        return AcquisitionCosts(
            down_payment=down_payment,
            mortgage_amount=mortgage_amount,
            closing_costs=closing_costs,
            total_capital_needed=down_payment + closing_costs + inputs.estimate_repairs,
        )
