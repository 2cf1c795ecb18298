"""Shared fixtures for flip engine tests."""

import pytest

from flip_engine.models import DealInputs, ExpenseSet, ProcessingContext


@pytest.fixture
def make_context():
    """Factory for a processing context built from default inputs with overrides."""

    def _make_context(expenses: dict | None = None, **overrides) -> ProcessingContext:
        return ProcessingContext(
            inputs=DealInputs(**overrides),
            expenses=ExpenseSet(amounts=dict(expenses or {})),
        )

    return _make_context


@pytest.fixture
def default_inputs():
    """The worked example: the new deal form's starting values."""
    return DealInputs()


@pytest.fixture
def no_expenses():
    return ExpenseSet()
