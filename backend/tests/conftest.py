"""
Pytest configuration and fixtures.
"""

from datetime import date

import pytest

from underwriting.catalog import ProductCatalog, seed_products
from underwriting.service import UnderwritingService

AS_OF = date(2024, 6, 1)
START = "2024-06-02"

REFS = {"client_id": "client-001", "agent_id": "agent-001", "start_date": START}

# One clean draft per seed product; each evaluates with zero violations on AS_OF.
VALID_DRAFTS = {
    "prod-life-basic": {
        **REFS,
        "coverage_amount": 10000,
        "payment_frequency": "annually",
        "beneficiaries": [
            {"name": "Ana Pérez", "relationship": "spouse", "percentage": 60},
            {"name": "Luis Pérez", "relationship": "child", "percentage": 40},
        ],
    },
    "prod-life-supplementary": {
        **REFS,
        "coverage_amount": 20000,
        "age_at_inscription": 35,
        "premium_amount": 45,
        "payment_frequency": "monthly",
        "ad_d_included": True,
        "ad_d_coverage": 30000,
        "beneficiaries": [{"name": "Ana Pérez", "relationship": "spouse", "percentage": 100}],
    },
    "prod-life-dependents": {
        **REFS,
        "coverage_amount": 20000,
        "payment_frequency": "monthly",
        "dependents": [
            {"name": "Ana Pérez", "relationship": "spouse", "birth_date": "1990-05-01"},
            {"name": "Leo Pérez", "relationship": "child", "birth_date": "2015-03-02"},
        ],
    },
    "prod-add-standalone": {
        **REFS,
        "coverage_amount": 50000,
        "age_at_inscription": 45,
        "payment_frequency": "monthly",
        "beneficiaries": [{"name": "Ana Pérez", "relationship": "spouse", "percentage": 100}],
    },
    "prod-health-basic": {
        **REFS,
        "deductible": 3000,
        "premium_amount": 100,
        "payment_frequency": "monthly",
        "dependents": [{"name": "Leo Pérez", "relationship": "child", "birth_date": "2015-03-02"}],
    },
    "prod-health-intermediate": {
        **REFS,
        "deductible": 1500,
        "payment_frequency": "monthly",
        "wants_vision": True,
        "dependents": [{"name": "Leo Pérez", "relationship": "child", "birth_date": "2015-03-02"}],
    },
    "prod-health-familiar": {
        **REFS,
        "deductible": 2000,
        "premium_amount": 500,
        "payment_frequency": "quarterly",
        "dependents": [
            {"name": "Ana Pérez", "relationship": "spouse", "birth_date": "1990-05-01"},
            {"name": "Leo Pérez", "relationship": "child", "birth_date": "2015-03-02"},
        ],
    },
    "prod-health-premier": {
        **REFS,
        "deductible": 750,
        "payment_frequency": "monthly",
        "dependents": [{"name": "Ana Pérez", "relationship": "spouse", "birth_date": "1990-05-01"}],
    },
}


@pytest.fixture
def as_of():
    """Fixed evaluation date."""
    return AS_OF


@pytest.fixture
def products():
    """Seed products keyed by id."""
    return {p.id: p for p in seed_products()}


@pytest.fixture
def catalog():
    """Catalog over the seed products."""
    return ProductCatalog(seed_products())


@pytest.fixture
def service(catalog):
    """Underwriting service over the seed catalog."""
    return UnderwritingService(catalog)


@pytest.fixture
def valid_drafts():
    """Fresh copies of the clean drafts."""
    return {pid: dict(draft) for pid, draft in VALID_DRAFTS.items()}


def rules_of(violations):
    """(field, rule) pairs, for compact assertions."""
    return [(v.field, str(v.rule)) for v in violations]
