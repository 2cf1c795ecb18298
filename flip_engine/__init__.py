"""
FIX-AND-FLIP DEAL ENGINE
Version 1.0
"""

from .calculators import FAVORABLE_ROI_THRESHOLD, classify
from .models import EXPENSE_CATEGORIES, DealInputs, DealOutputs, DealResult, ExpenseSet
from .processor import DealProcessor, compute
from .session import DealCalculator

__all__ = [
    'DealProcessor',
    'DealCalculator',
    'DealInputs',
    'DealOutputs',
    'DealResult',
    'ExpenseSet',
    'EXPENSE_CATEGORIES',
    'FAVORABLE_ROI_THRESHOLD',
    'compute',
    'classify',
]
