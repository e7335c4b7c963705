"""
Tests for the Premium Calculator.
"""

import pytest

from underwriting.core.constants import PaymentFrequency
from underwriting.pricing import calculator


class TestFrequencyMultiplier:

    @pytest.mark.parametrize("frequency,expected", [
        (PaymentFrequency.MONTHLY, 1),
        ("quarterly", 3),
        ("annually", 12),
        (None, 1),
    ])
    def test_multiplier(self, frequency, expected):
        assert calculator.frequency_multiplier(frequency) == expected


class TestAddStandalone:
    """Tests for the age-rated AD&D formula."""

    def test_floor_boundary_case(self):
        premium = calculator.add_standalone_premium(5000, 18, PaymentFrequency.MONTHLY)
        assert premium == pytest.approx(2.50)

    def test_rate_loads_after_forty_and_fifty(self):
        assert calculator.add_standalone_rate(40) == pytest.approx(0.0005)
        assert calculator.add_standalone_rate(45) == pytest.approx(0.00055)
        assert calculator.add_standalone_rate(55) == pytest.approx(0.0005 + 15 * 0.00001 + 5 * 0.00002)

    def test_quarterly(self):
        premium = calculator.add_standalone_premium(10000, 30, "quarterly")
        assert premium == pytest.approx(15.0)


class TestLifeBasic:

    def test_annual_premium(self):
        assert calculator.life_basic_premium(10000, PaymentFrequency.ANNUALLY) == pytest.approx(120.00)

    def test_monthly_premium(self):
        assert calculator.life_basic_premium(25000, "monthly") == pytest.approx(25.0)


class TestHealthIntermediate:
    """Tests for the add-on formula and its clamp."""

    SURCHARGES = {1000.0: 20.0, 1500.0: 10.0, 2500.0: 0.0}

    def _premium(self, **overrides):
        params = dict(
            base_premium=150,
            max_premium=400,
            deductible=2500,
            surcharges=self.SURCHARGES,
            wants_dental_premium=False,
            wants_vision=False,
            dependent_relationships=[],
        )
        params.update(overrides)
        return calculator.health_intermediate_premium(**params)

    def test_clamped_to_maximum(self):
        premium = self._premium(
            base_premium=300,
            deductible=1000,
            wants_dental_premium=True,
            dependent_relationships=["spouse"],
        )
        assert premium == 400

    def test_add_ons(self):
        premium = self._premium(
            deductible=1500,
            wants_dental_premium=True,
            wants_vision=True,
            dependent_relationships=["spouse", "child", "child"],
        )
        assert premium == 150 + 10 + 25 + 10 + 60 + 40 + 40

    def test_unlisted_tier_has_no_surcharge(self):
        assert self._premium(deductible=2000) == 150

    def test_never_below_base(self):
        assert self._premium(surcharges={2500.0: -50.0}) == 150


class TestHealthPremier:

    @pytest.mark.parametrize("dependents,expected", [
        (0, 400),
        (3, 700),
        (11, 1500),
    ])
    def test_per_dependent(self, dependents, expected):
        assert calculator.health_premier_premium(dependents) == expected
