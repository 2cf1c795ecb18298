"""
Offer Calculator

Applies the 70% rule: never pay more than 70% of ARV minus repairs.
"""

from ..models import OfferAnalysis, ProcessingContext


class OfferCalculator:
    """Calculates the 70% rule maximum offer."""

    ARV_FACTOR = 0.70

    def calculate(self, ctx: ProcessingContext) -> OfferAnalysis:
        inputs = ctx.inputs
        seventy_percent_arv = inputs.after_repair_value * self.ARV_FACTOR
        return OfferAnalysis(
            seventy_percent_arv=seventy_percent_arv,
            max_offer=seventy_percent_arv - inputs.estimate_repairs,
        )
