"""
Deal Classifier

Labels a deal favorable or unfavorable from its ROI.
"""

from ..models import ProcessingContext

FAVORABLE_ROI_THRESHOLD = 20

FAVORABLE = "favorable"
UNFAVORABLE = "unfavorable"


def classify(return_on_investment_percent: float | None) -> str:
    """ROI strictly above the threshold is favorable; exactly 20 is not."""
    if return_on_investment_percent is None:
        return UNFAVORABLE
    if return_on_investment_percent > FAVORABLE_ROI_THRESHOLD:
        return FAVORABLE
    return UNFAVORABLE


class DealClassifier:
    """Classifies a processed deal."""

    def classify(self, ctx: ProcessingContext) -> str:
        return classify(ctx.profit.return_on_investment_percent)
