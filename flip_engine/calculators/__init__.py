"""
Calculators Package

Provides all calculation components for deal processing.
"""

from .acquisition import AcquisitionCalculator
from .classification import FAVORABLE, FAVORABLE_ROI_THRESHOLD, UNFAVORABLE, DealClassifier, classify
from .holding import HoldingCostCalculator
from .mortgage import MortgageCalculator, amortized_payment
from .offer import OfferCalculator
from .profit import ProfitCalculator

__all__ = [
    "AcquisitionCalculator",
    "MortgageCalculator",
    "HoldingCostCalculator",
    "ProfitCalculator",
    "OfferCalculator",
    "DealClassifier",
    "amortized_payment",
    "classify",
    "FAVORABLE",
    "UNFAVORABLE",
    "FAVORABLE_ROI_THRESHOLD",
]
