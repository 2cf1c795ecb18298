"""
Tests for the Fix-and-Flip Deal Engine

Run with: python -m pytest tests/ -v
"""

import math

import pytest

from flip_engine import DealInputs, DealProcessor, ExpenseSet, compute


class TestCompute:
    """Test the pure compute() function."""

    def test_worked_example(self, default_inputs, no_expenses):
        out = compute(default_inputs, no_expenses)

        assert out.down_payment == 30000
        assert out.mortgage_amount == 120000
        assert out.closing_costs == 3000
        assert out.total_capital_needed == 53000
        assert out.monthly_mortgage_payment == pytest.approx(719.46, abs=0.005)
        assert out.expenses_during_holding == pytest.approx(2158.38, abs=0.005)
        assert out.anticipated_profit == pytest.approx(24841.62, abs=0.005)
        assert out.seventy_percent_arv == pytest.approx(140000)
        assert out.max_offer == pytest.approx(120000)
        assert out.return_on_investment_percent == pytest.approx(46.87, abs=0.005)

    def test_is_deterministic(self, default_inputs):
        expenses = ExpenseSet.from_dict({"Taxes": 180.25, "Insurance": 95})

        assert compute(default_inputs, expenses) == compute(default_inputs, expenses)

    def test_does_not_mutate_arguments(self, default_inputs):
        expenses = ExpenseSet.from_dict({"Taxes": 180.25})
        compute(default_inputs, expenses)

        assert expenses.amounts == {"Taxes": 180.25}
        assert default_inputs == DealInputs()

    def test_zero_expense_category_changes_nothing(self, default_inputs, no_expenses):
        with_zero = ExpenseSet()
        with_zero.select("Lawn/Snow")

        assert compute(default_inputs, with_zero) == compute(default_inputs, no_expenses)

    def test_zero_interest_rate_is_finite(self, no_expenses):
        out = compute(DealInputs(interest_rate=0), no_expenses)

        assert math.isfinite(out.monthly_mortgage_payment)
        assert out.monthly_mortgage_payment == pytest.approx(120000 / 360)

    def test_zero_capital_signals_undefined_roi(self, no_expenses):
        inputs = DealInputs(down_payment_percent=0, closing_costs_percent=0, estimate_repairs=0)
        out = compute(inputs, no_expenses)

        assert out.total_capital_needed == 0
        assert out.return_on_investment_percent is None
        assert not out.roi_defined

    def test_invalid_input_raises(self, no_expenses):
        with pytest.raises(ValueError):
            compute(DealInputs(purchase_price=-1), no_expenses)

    @pytest.mark.parametrize("overrides", [{"interest_rate": 10000}, {"loan_term": 100000}])
    def test_extreme_financing_terms_stay_finite(self, overrides, no_expenses):
        out = compute(DealInputs(**overrides), no_expenses)

        for value in vars(out).values():
            assert math.isfinite(value)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_input_rejected(self, value, no_expenses):
        with pytest.raises(ValueError, match="purchase_price must be a finite number"):
            compute(DealInputs(purchase_price=value), no_expenses)

    def test_non_finite_expense_rejected(self, default_inputs):
        expenses = ExpenseSet(amounts={"Taxes": float("nan")})

        with pytest.raises(ValueError, match="must be a finite number"):
            compute(default_inputs, expenses)

    def test_overflowing_metric_rejected(self, no_expenses):
        expenses = ExpenseSet(amounts={"Extra": 1e308})

        with pytest.raises(ValueError, match="too large to analyze"):
            compute(DealInputs(months_until_flip=12), expenses)


class TestDealProcessor:
    """Test the main deal processor."""

    @pytest.fixture
    def processor(self):
        return DealProcessor()

    @pytest.fixture
    def sample_input(self):
        return {
            "inputs": {
                "purchase_price": 150000,
                "down_payment_percent": 20,
                "closing_costs_percent": 2,
                "estimate_repairs": 20000,
                "after_repair_value": 200000,
                "months_until_flip": 3,
                "interest_rate": 6,
                "loan_term": 30,
            },
            "expenses": {},
        }

    def test_basic_processing(self, processor, sample_input):
        result = processor.process_from_dict(sample_input)

        assert result["headline"]["max_offer"]["value"] == 120000.0
        assert result["headline"]["total_capital_needed"]["value"] == 53000.0
        assert result["rehab"]["anticipated_profit"]["value"] == 24841.62
        assert result["rehab"]["return_on_investment"]["value"] == 46.87
        assert result["verdict"]["classification"] == "favorable"

    def test_expenses_reduce_profit(self, processor, sample_input):
        sample_input["expenses"] = {"Taxes": 250, "Insurance": 150}
        result = processor.process_from_dict(sample_input)

        # 400/month more over 3 months
        assert result["rehab"]["expenses_during_holding"]["value"] == 3358.38
        assert result["rehab"]["anticipated_profit"]["value"] == 23641.62

    def test_empty_payload_uses_defaults(self, processor):
        result = processor.process_from_dict({})

        assert result["deal_summary"]["purchase_price"] == 150000
        assert result["rehab"]["anticipated_profit"]["value"] == 24841.62

    def test_non_numeric_fields_become_zero(self, processor, sample_input):
        sample_input["inputs"]["estimate_repairs"] = "call contractor"
        result = processor.process_from_dict(sample_input)

        assert result["deal_summary"]["estimate_repairs"] == 0.0
        assert result["headline"]["max_offer"]["value"] == 140000.0

    def test_unknown_expense_category_rejected(self, processor, sample_input):
        sample_input["expenses"] = {"Pool": 100}
        with pytest.raises(ValueError, match="Unknown expense category"):
            processor.process_from_dict(sample_input)

    def test_non_object_payload_rejected(self, processor):
        with pytest.raises(ValueError, match="must be a JSON object"):
            processor.process_from_dict([1, 2, 3])

    def test_non_object_inputs_rejected(self, processor):
        with pytest.raises(ValueError, match="inputs must be a JSON object"):
            processor.process_from_dict({"inputs": "150000"})

    def test_result_carries_raw_outputs(self, processor):
        result = processor.process(DealInputs())

        assert result.outputs.monthly_mortgage_payment == pytest.approx(719.4606, abs=1e-4)
        assert result.classification == "favorable"
