"""
Deal Calculator Session

Holds the editable state of one deal form. Inputs and expenses can change
at any time; results only change when calculate() is called.
"""

import logging
from dataclasses import replace

from .models import DealInputs, DealResult, ExpenseSet, parse_field
from .parsing import parse_amount
from .processor import DealProcessor

logger = logging.getLogger(__name__)


class DealCalculator:
    """Mutable form state around the stateless DealProcessor."""

    def __init__(self, inputs: DealInputs | None = None, processor: DealProcessor | None = None):
        self.inputs = inputs or DealInputs()
        self.expenses = ExpenseSet()
        self.processor = processor or DealProcessor()
        self.result: DealResult | None = None
        self._calculated_from: tuple[DealInputs, dict] | None = None

    @property
    def show_result(self) -> bool:
        """Whether the results panel is visible."""
        return self.result is not None

    @property
    def is_stale(self) -> bool:
        """True when inputs or expenses changed since the last calculate()."""
        if self._calculated_from is None:
            return False
        return self._calculated_from != (self.inputs, dict(self.expenses.amounts))

    def set_input(self, name: str, raw) -> None:
        if name not in DealInputs.field_names():
            raise ValueError(f"Unknown input field: {name}")
        self.inputs = replace(self.inputs, **{name: parse_field(name, raw)})

    def select_expense(self, category: str) -> None:
        self.expenses.select(category)

    def set_expense(self, category: str, raw) -> None:
        self.expenses.set_amount(category, parse_amount(raw))

    def calculate(self) -> DealResult:
        """Analyze the current inputs and keep the result for display."""
        self.result = self.processor.process(self.inputs, self.expenses)
        self._calculated_from = (self.inputs, dict(self.expenses.amounts))
        logger.info("Deal calculated: %s", self.result.classification)
        return self.result
