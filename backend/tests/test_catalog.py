"""
Tests for the Product Catalog and ProductConfig records.
"""

import pytest

from underwriting.catalog import REQUIRED_BOUNDS, ProductCatalog, ProductConfig, missing_bounds
from underwriting.core.constants import PaymentFrequency, ProductFamily
from underwriting.errors import ConfigurationError


class TestLookup:
    """Tests for ProductCatalog.lookup."""

    def test_returns_seed_product(self, catalog):
        config = catalog.lookup("prod-add-standalone")
        assert config.family == ProductFamily.ADD_STANDALONE
        assert config.min_premium == 5

    def test_unknown_product_raises(self, catalog):
        with pytest.raises(ConfigurationError) as exc_info:
            catalog.lookup("prod-does-not-exist")
        assert exc_info.value.product_id == "prod-does-not-exist"

    def test_inactive_product_raises(self, products):
        inactive = products["prod-life-basic"].model_copy(update={"is_active": False})
        catalog = ProductCatalog([inactive])
        with pytest.raises(ConfigurationError, match="not active"):
            catalog.lookup("prod-life-basic")

    def test_missing_required_bound_raises(self, products):
        broken = products["prod-health-basic"].model_copy(update={"coinsurance_percentage": None})
        catalog = ProductCatalog([broken])
        with pytest.raises(ConfigurationError) as exc_info:
            catalog.lookup("prod-health-basic")
        assert exc_info.value.missing == ["coinsurance_percentage"]
        assert exc_info.value.family == ProductFamily.HEALTH_BASIC

    def test_every_seed_product_is_complete(self, catalog):
        for config in catalog.products():
            assert missing_bounds(config) == []

    def test_every_family_has_required_bounds(self):
        assert set(REQUIRED_BOUNDS) == set(ProductFamily)


class TestFromRecord:
    """Tests for building configs from product store records."""

    def test_flattens_coverage_details(self):
        config = ProductConfig.from_record({
            "id": "p-1",
            "name": "Seguro AD&D",
            "family": "ADD_STANDALONE",
            "duration_months": 12,
            "fixed_payment_frequency": "monthly",
            "coverage_details": {
                "min_age_for_inscription": 18,
                "max_age_for_inscription": 65,
                "min_coverage_amount": 5000,
                "max_coverage_amount": 100000,
                "max_beneficiaries": 3,
            },
        })
        assert config.min_age == 18
        assert config.max_coverage == 100000
        assert config.max_beneficiaries == 3
        assert config.payment_frequency == PaymentFrequency.MONTHLY

    def test_single_deductible_sets_both_bounds(self):
        config = ProductConfig.from_record({
            "id": "p-2",
            "family": "HEALTH_BASIC",
            "coverage_details": {"deductible": 2500},
        })
        assert config.min_deductible == config.max_deductible == 2500

    def test_surcharge_keys_from_json_strings(self):
        config = ProductConfig.from_record({
            "id": "p-3",
            "family": "HEALTH_INTERMEDIATE",
            "coverage_details": {"deductible_surcharges": {"1000": 20, "1500.0": 10}},
        })
        assert config.deductible_surcharges == {1000.0: 20.0, 1500.0: 10.0}

    def test_coverage_details_round_trip(self, products):
        original = products["prod-health-intermediate"]
        record = {
            "id": original.id,
            "name": original.name,
            "family": original.family,
            "duration_months": original.duration_months,
            "base_premium": original.base_premium,
            "currency": original.currency,
            "is_active": original.is_active,
            "fixed_payment_frequency": original.payment_frequency,
            "coverage_details": original.coverage_details(),
        }
        assert ProductConfig.from_record(record) == original
