"""
Input Validation for the Fix-and-Flip Deal Engine

Validates parsed input data before processing begins.
Raises ValueError with clear messages for any constraint violations.
Parsing already coerced non-numeric text to 0; values built in code are
still checked for NaN and infinity.
"""

import math

from .models import EXPENSE_CATEGORIES, DealInputs, ExpenseSet


def _is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large to convert to float
        return False


class InputValidator:
    """Validates deal input according to business rules."""

    NON_NEGATIVE_FIELDS = (
        "purchase_price",
        "estimate_repairs",
        "after_repair_value",
        "interest_rate",
        "months_until_flip",
        "loan_term",
    )
    PERCENT_FIELDS = ("down_payment_percent", "closing_costs_percent")

    def validate(self, inputs: DealInputs, expenses: ExpenseSet) -> None:
        """
        Run all validations. Raises ValueError if any check fails.
        """
        self._validate_inputs(inputs)
        self._validate_financing(inputs)
        self._validate_expenses(expenses)

    def _validate_inputs(self, inputs: DealInputs) -> None:
        """Validate field-level constraints."""
        for name in DealInputs.field_names():
            value = getattr(inputs, name)
            if not _is_finite(value):
                raise ValueError(f"{name} must be a finite number, got: {value}")

        for name in self.NON_NEGATIVE_FIELDS:
            value = getattr(inputs, name)
            if value < 0:
                raise ValueError(f"{name} cannot be negative, got: {value}")

        for name in self.PERCENT_FIELDS:
            value = getattr(inputs, name)
            if not (0 <= value <= 100):
                raise ValueError(f"{name} must be between 0 and 100, got: {value}")

    def _validate_financing(self, inputs: DealInputs) -> None:
        """A mortgage can only be amortized over a positive term."""
        price = inputs.purchase_price
        financed = price - price * (inputs.down_payment_percent / 100)
        if financed > 0 and inputs.loan_term <= 0:
            raise ValueError(
                f"loan_term must be positive when financing {financed:,.2f}, got: {inputs.loan_term}"
            )

    def _validate_expenses(self, expenses: ExpenseSet) -> None:
        for category, amount in expenses.amounts.items():
            if category not in EXPENSE_CATEGORIES:
                raise ValueError(f"Unknown expense category: {category!r}")
            if not _is_finite(amount):
                raise ValueError(f"Expense {category!r} must be a finite number, got: {amount}")
            if amount < 0:
                raise ValueError(f"Expense {category!r} cannot be negative, got: {amount}")
