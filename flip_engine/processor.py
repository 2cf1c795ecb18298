"""
Deal Processor - Main Orchestrator

Coordinates the deal analysis pipeline through discrete, testable steps.
"""

import logging
import math
from typing import Any, Dict

from .calculators import (
    AcquisitionCalculator,
    DealClassifier,
    HoldingCostCalculator,
    OfferCalculator,
    ProfitCalculator,
)
from .models import DealInputs, DealOutputs, DealResult, ExpenseSet, ProcessingContext
from .output import OutputBuilder
from .validators import InputValidator

logger = logging.getLogger(__name__)


class DealProcessor:
    """
    Main orchestrator for deal analysis.

    Implements a clear pipeline pattern:
    1. Validate Input
    2. Build Context
    3. Calculate Acquisition Costs
    4. Calculate Holding Costs (incl. mortgage payment)
    5. Calculate Profit and ROI
    6. Apply 70% Rule
    7. Classify
    8. Build Output
    """

    def __init__(self):
        # Initialize all calculators
        self.validator = InputValidator()
        self.acquisition_calculator = AcquisitionCalculator()
        self.holding_calculator = HoldingCostCalculator()
        self.profit_calculator = ProfitCalculator()
        self.offer_calculator = OfferCalculator()
        self.classifier = DealClassifier()
        self.output_builder = OutputBuilder()

    def run(self, inputs: DealInputs, expenses: ExpenseSet) -> ProcessingContext:
        """Run every calculation step and return the populated context."""
        # Step 1: Validate
        self.validator.validate(inputs, expenses)

        # Step 2: Build initial context
        ctx = ProcessingContext(inputs=inputs, expenses=expenses.copy())

        # Step 3: Down payment, mortgage, closing costs, capital needed
        ctx.acquisition = self.acquisition_calculator.calculate(ctx)

        # Step 4: Monthly mortgage payment and carrying costs
        ctx.holding = self.holding_calculator.calculate(ctx)

        # Step 5: Profit and ROI
        ctx.profit = self.profit_calculator.calculate(ctx)

        # Step 6: 70% rule
        ctx.offer = self.offer_calculator.calculate(ctx)

        # Step 7: Favorable / unfavorable
        ctx.classification = self.classifier.classify(ctx)

        self._check_finite(ctx)
        return ctx

    def _check_finite(self, ctx: ProcessingContext) -> None:
        """Finite inputs can still be large enough to overflow a metric."""
        for name, value in vars(ctx.to_outputs()).items():
            if value is not None and not math.isfinite(value):
                raise ValueError(f"Deal values are too large to analyze: {name} overflowed")

    def process(self, inputs: DealInputs, expenses: ExpenseSet | None = None) -> DealResult:
        """
        Analyze a deal through the complete pipeline.

        Args:
            inputs: Parsed DealInputs
            expenses: Selected monthly expenses (empty when omitted)

        Returns:
            DealResult with all metrics and display sections
        """
        ctx = self.run(inputs, expenses if expenses is not None else ExpenseSet())
        logger.debug(
            "Deal analyzed: profit=%.2f roi=%s classification=%s",
            ctx.profit.anticipated_profit,
            ctx.profit.return_on_investment_percent,
            ctx.classification,
        )
        # Step 8: Build output
        return self.output_builder.build(ctx)

    def process_from_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Analyze a deal from raw dictionary input.

        Convenience method for API usage. Expects
        {"inputs": {...}, "expenses": {...}}; both keys are optional.
        """
        if not isinstance(data, dict):
            raise ValueError("Deal data must be a JSON object")
        for key in ("inputs", "expenses"):
            if data.get(key) is not None and not isinstance(data[key], dict):
                raise ValueError(f"{key} must be a JSON object")

        inputs = DealInputs.from_dict(data.get("inputs") or {})
        expenses = ExpenseSet.from_dict(data.get("expenses"))
        return self.process(inputs, expenses).to_dict()


def compute(inputs: DealInputs, expenses: ExpenseSet) -> DealOutputs:
    """
    Derive every deal metric from inputs and expenses.

    Pure: neither argument is modified and identical arguments always
    produce identical outputs.
    """
    return DealProcessor().run(inputs, expenses).to_outputs()


def process_deal_from_dict(input_data: Dict[str, Any]) -> Dict[str, Any]:
    """Analyze a deal from a Python dict and return a Python dict."""
    return DealProcessor().process_from_dict(input_data)
