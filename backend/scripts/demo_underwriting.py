#!/usr/bin/env python3
"""
Demo script — evaluate and build drafts against the seed catalog.

No database needed: the catalog is built from the bundled seed
products.  Shows derived pricing, an accumulated violation list and a
finished payload.

Usage:
    cd backend
    python -m scripts.demo_underwriting
"""

import json
from datetime import date, timedelta

from underwriting.catalog import ProductCatalog, seed_products
from underwriting.core.logging import setup_logging
from underwriting.service import UnderwritingService

TODAY = date.today()
START = (TODAY + timedelta(days=1)).isoformat()

REFS = {"client_id": "client-001", "agent_id": "agent-001", "start_date": START}


def _print(title: str, data: dict) -> None:
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)
    print(json.dumps(data, indent=2, default=str))


def main() -> None:
    setup_logging("WARNING")
    service = UnderwritingService(ProductCatalog(seed_products()))

    # ── DEMO 1: AD&D below the premium floor ──────
    evaluation = service.evaluate("prod-add-standalone", {
        **REFS,
        "coverage_amount": 5000,
        "age_at_inscription": 18,
        "payment_frequency": "monthly",
        "beneficiaries": [{"name": "Ana", "relationship": "spouse", "percentage": 100}],
    })
    _print("AD&D 5000 / age 18 / monthly", evaluation.to_dict())

    # ── DEMO 2: Life basic, annual billing ────────
    outcome = service.build("prod-life-basic", {
        **REFS,
        "coverage_amount": 10000,
        "payment_frequency": "annually",
        "beneficiaries": [
            {"name": "Ana", "relationship": "spouse", "percentage": 60},
            {"name": "Luis", "relationship": "child", "percentage": 40},
        ],
    })
    _print("Life basic payload", outcome.payload or {"violations": [v.to_dict() for v in outcome.violations]})

    # ── DEMO 3: Life with dependents, every problem at once ──
    evaluation = service.evaluate("prod-life-dependents", {
        **REFS,
        "coverage_amount": 20000,
        "payment_frequency": "monthly",
        "dependents": [
            {"name": "Ana", "relationship": "spouse", "birth_date": "1990-05-01"},
            {"name": "Eva", "relationship": "spouse", "birth_date": "1991-02-11"},
            {"name": "Leo", "relationship": "child", "birth_date": "1995-01-01"},
        ],
    })
    _print("Life with dependents — accumulated violations", evaluation.to_dict())

    # ── DEMO 4: Health premier priced per dependent ──
    evaluation = service.evaluate("prod-health-premier", {
        **REFS,
        "deductible": 500,
        "payment_frequency": "monthly",
        "dependents": [
            {"name": "Ana", "relationship": "spouse", "birth_date": "1990-05-01"},
            {"name": "Leo", "relationship": "child", "birth_date": "2015-03-02"},
            {"name": "Mia", "relationship": "child", "birth_date": "2018-07-09"},
        ],
    })
    _print("Health premier with 3 dependents", evaluation.to_dict())


if __name__ == "__main__":
    main()
