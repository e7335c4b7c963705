"""
Tests for the validation pipeline engine, steps and family resolution.
"""

import pytest

from underwriting.core.constants import EvaluationStatus, PremiumMode, ProductFamily, StepStatus
from underwriting.errors import FamilyResolutionError
from underwriting.pipeline.families import FAMILY_REGISTRY, FamilyRules
from underwriting.pipeline.families.life import LifeBasicRules
from underwriting.pipeline.family_resolver import FamilyResolver
from underwriting.policy.draft import parse_draft

from conftest import AS_OF, VALID_DRAFTS, rules_of


def _context(products, product_id, fields):
    product = products[product_id]
    rules = FamilyResolver().resolve(product)
    draft, parse_violations = parse_draft({"product_id": product_id, **fields})
    return rules, rules.new_context(draft, product, as_of=AS_OF, violations=parse_violations)


class TestFamilyResolver:
    """Tests for FamilyResolver."""

    def test_every_family_registered(self):
        assert set(FAMILY_REGISTRY) == set(ProductFamily)

    def test_resolves_to_family_rules(self, products):
        for product in products.values():
            rules = FamilyResolver().resolve(product)
            assert isinstance(rules, FamilyRules)
            assert rules.family == product.family

    def test_unregistered_family_raises(self, products):
        resolver = FamilyResolver(registry={ProductFamily.LIFE_BASIC: LifeBasicRules})
        with pytest.raises(FamilyResolutionError) as exc_info:
            resolver.resolve(products["prod-health-basic"])
        assert exc_info.value.details == {"available": ["LIFE_BASIC"]}

    def test_premium_modes(self):
        modes = {family: cls.premium_mode for family, cls in FAMILY_REGISTRY.items()}
        assert modes[ProductFamily.ADD_STANDALONE] == PremiumMode.DERIVED
        assert modes[ProductFamily.LIFE_BASIC] == PremiumMode.DERIVED
        assert modes[ProductFamily.HEALTH_INTERMEDIATE] == PremiumMode.DERIVED
        assert modes[ProductFamily.HEALTH_PREMIER] == PremiumMode.DERIVED
        assert modes[ProductFamily.LIFE_SUPPLEMENTARY] == PremiumMode.BOUNDED
        assert modes[ProductFamily.HEALTH_BASIC] == PremiumMode.BOUNDED
        assert modes[ProductFamily.HEALTH_FAMILIAR] == PremiumMode.BOUNDED
        assert modes[ProductFamily.LIFE_DEPENDENTS] == PremiumMode.EXTERNAL


class TestValidationPipeline:
    """Tests for the full run."""

    def test_clean_draft_passes(self, products):
        rules, ctx = _context(products, "prod-life-basic", VALID_DRAFTS["prod-life-basic"])
        result = rules.validate(ctx)
        assert result.status == EvaluationStatus.PASSED
        assert result.violations == []
        assert result.premium == 120.0

    def test_missing_reference_halts(self, products):
        fields = {**VALID_DRAFTS["prod-life-basic"], "agent_id": None, "coverage_amount": -1}
        rules, ctx = _context(products, "prod-life-basic", fields)
        result = rules.validate(ctx)

        assert result.status == EvaluationStatus.HALTED
        assert result.premium is None
        # The parse violation was recorded before the run; nothing after references ran
        assert rules_of(result.violations) == [
            ("coverage_amount", "invalid_value"),
            ("agent_id", "missing_reference"),
        ]
        assert [r["step_name"] for r in result.step_results] == ["references"]

    def test_violations_accumulate_across_steps(self, products):
        fields = {
            **VALID_DRAFTS["prod-add-standalone"],
            "coverage_amount": 200000,
            "age_at_inscription": 70,
            "beneficiaries": [
                {"name": "Ana", "relationship": "spouse", "percentage": 50},
                {"name": "", "relationship": "child", "percentage": 30},
            ],
        }
        rules, ctx = _context(products, "prod-add-standalone", fields)
        result = rules.validate(ctx)

        assert result.status == EvaluationStatus.FAILED
        assert rules_of(result.violations) == [
            ("age_at_inscription", "out_of_range"),
            ("coverage_amount", "out_of_range"),
            ("beneficiaries[1].name", "incomplete_entry"),
            ("beneficiaries", "percentage_sum_invalid"),
        ]

    def test_summary_reflects_outcome(self, products):
        fields = {**VALID_DRAFTS["prod-life-basic"], "premium_amount": 1}
        rules, ctx = _context(products, "prod-life-basic", fields)
        rules.validate(ctx)
        summary = ctx.to_summary_dict()
        assert summary["premium"] == 120.0
        assert summary["violations"] == 1
        assert summary["steps_run"] == len(rules.steps())
        assert summary["as_of"] == "2024-06-01"

    def test_inapplicable_steps_are_skipped(self, products):
        rules, ctx = _context(products, "prod-life-basic", VALID_DRAFTS["prod-life-basic"])
        result = rules.validate(ctx)
        statuses = {r["step_name"]: r["status"] for r in result.step_results}
        assert statuses["dependents"] == StepStatus.SKIPPED
        assert statuses["beneficiaries"] == StepStatus.PASSED

    def test_rider_step_only_for_supplementary(self):
        names = [s.name for s in FAMILY_REGISTRY[ProductFamily.LIFE_SUPPLEMENTARY]().steps()]
        assert "add_rider" in names
        assert "add_rider" not in [s.name for s in LifeBasicRules().steps()]


class TestSingleFieldRun:
    """Tests for run_field."""

    def test_reports_only_the_requested_field(self, products):
        fields = {
            **VALID_DRAFTS["prod-add-standalone"],
            "coverage_amount": 200000,
            "beneficiaries": [{"name": "Ana", "relationship": "spouse", "percentage": 90}],
        }
        rules, ctx = _context(products, "prod-add-standalone", fields)
        result = rules.validate_field(ctx, "beneficiaries")
        assert rules_of(result.violations) == [("beneficiaries", "percentage_sum_invalid")]

    def test_same_rules_as_full_run(self, products):
        fields = {**VALID_DRAFTS["prod-health-basic"], "deductible": 100}
        rules, ctx = _context(products, "prod-health-basic", fields)
        single = rules.validate_field(ctx, "deductible")

        _, full_ctx = _context(products, "prod-health-basic", fields)
        full = rules.validate(full_ctx)
        assert single.violations == [v for v in full.violations if v.field == "deductible"]

    def test_entry_field_selects_list_step(self, products):
        fields = {
            **VALID_DRAFTS["prod-life-basic"],
            "beneficiaries": [{"name": "", "relationship": "spouse", "percentage": 100}],
        }
        rules, ctx = _context(products, "prod-life-basic", fields)
        result = rules.validate_field(ctx, "beneficiaries[0].name")
        assert rules_of(result.violations) == [("beneficiaries[0].name", "incomplete_entry")]
