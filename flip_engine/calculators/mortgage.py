"""
Mortgage Calculator

Standard fixed-rate amortization:
    M = P * r(1+r)^n / ((1+r)^n - 1)
where r = annual_rate / 12 and n = years * 12.
"""

import math

from ..models import ProcessingContext


def amortized_payment(principal: float, annual_rate_pct: float, term_years: int) -> float:
    """Monthly payment that fully repays principal over term_years."""
    if principal <= 0:
        return 0.0
    n = term_years * 12
    if n <= 0:
        raise ValueError(f"term_years must be positive to amortize {principal}, got: {term_years}")
    r = (annual_rate_pct / 100) / 12
    if 1 + r == 1:
        # Interest-free, or too small to register: straight-line repayment
        return principal / n
    try:
        growth = (1 + r) ** n
    except OverflowError:
        # Interest dominates: the payment tends to the monthly interest alone
        return principal * r
    payment = (principal * r * growth) / (growth - 1)
    if math.isinf(payment):
        return principal * r * (growth / (growth - 1))
    return payment


class MortgageCalculator:
    """Calculates the monthly mortgage payment for the financed amount."""

    def calculate(self, ctx: ProcessingContext) -> float:
        inputs = ctx.inputs
        return amortized_payment(
            ctx.acquisition.mortgage_amount,
            inputs.interest_rate,
            inputs.loan_term,
        )
