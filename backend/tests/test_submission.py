"""
Tests for the Submission Gate — payload building and field applicability.
"""

import pytest

from underwriting.core.constants import ProductFamily, ViolationRule
from underwriting.errors import SubmissionError
from underwriting.pipeline.engine import EvaluationResult
from underwriting.pipeline.family_resolver import FamilyResolver
from underwriting.policy.draft import parse_draft
from underwriting.submission.applicability import PAYLOAD_FIELDS, applicable_fields
from underwriting.submission.payload_builder import build_payload
from underwriting.validation.violations import Violation

from conftest import AS_OF, VALID_DRAFTS


def _build(service, product_id, **overrides):
    outcome = service.build(product_id, {**VALID_DRAFTS[product_id], **overrides}, as_of=AS_OF)
    assert outcome.ok, [v.to_dict() for v in outcome.violations]
    return outcome.payload


class TestApplicability:
    """Tests for the family/field matrix."""

    def test_every_family_has_an_entry(self):
        for family in ProductFamily:
            assert applicable_fields(family) <= set(PAYLOAD_FIELDS)

    def test_life_and_health_are_disjoint_on_lists(self):
        assert "beneficiaries" not in applicable_fields(ProductFamily.HEALTH_PREMIER)
        assert "dependents_details" not in applicable_fields(ProductFamily.LIFE_BASIC)

    def test_premier_options(self):
        assert "has_dental_premium" in applicable_fields(ProductFamily.HEALTH_PREMIER)
        assert "wants_dental_premium" not in applicable_fields(ProductFamily.HEALTH_PREMIER)


class TestPayload:
    """Tests for build_payload through the service."""

    def test_every_key_present(self, service):
        payload = _build(service, "prod-health-basic")
        assert set(payload) == set(PAYLOAD_FIELDS)

    def test_status_forced_pending(self, service):
        payload = _build(service, "prod-life-basic", status="active")
        assert payload["status"] == "pending"

    def test_life_fields_nulled_for_health(self, service):
        payload = _build(service, "prod-health-basic", coverage_amount=5000)
        assert payload["coverage_amount"] is None
        assert payload["beneficiaries"] is None
        assert payload["ad_d_included"] is None
        assert payload["wellness_rebate"] is None

    def test_health_fields_nulled_for_life(self, service):
        payload = _build(service, "prod-life-basic", deductible=1000, wants_vision=True)
        assert payload["deductible"] is None
        assert payload["dependents_details"] is None
        assert payload["coinsurance"] is None
        assert payload["has_vision"] is None

    def test_product_fixed_values_filled(self, service):
        payload = _build(service, "prod-health-basic")
        assert payload["coinsurance"] == 30
        assert payload["max_annual"] == 20000
        assert payload["payment_frequency"] == "monthly"

    def test_fixed_frequency_filled_when_omitted(self, service):
        draft = {k: v for k, v in VALID_DRAFTS["prod-health-basic"].items() if k != "payment_frequency"}
        outcome = service.build("prod-health-basic", draft, as_of=AS_OF)
        assert outcome.payload["payment_frequency"] == "monthly"

    def test_dependents_as_dicts(self, service):
        payload = _build(service, "prod-health-familiar")
        assert payload["num_dependents"] == 2
        assert payload["dependents_details"][1] == {
            "name": "Leo Pérez",
            "birth_date": "2015-03-02",
            "relationship": "child",
            "custom_relation": None,
        }

    def test_beneficiary_count(self, service):
        payload = _build(service, "prod-life-basic")
        assert payload["num_beneficiaries"] == 2
        assert payload["beneficiaries"][0]["percentage"] == 60

    def test_included_dental_sets_composite(self, service):
        payload = _build(service, "prod-health-intermediate")
        assert payload["has_dental_basic"] is True
        assert payload["has_dental"] is True
        assert payload["has_vision"] is True

    def test_basic_plan_without_options(self, service):
        payload = _build(service, "prod-health-basic")
        assert payload["has_dental"] is False
        assert payload["has_vision"] is False
        assert payload["wants_vision"] is None

    def test_premier_always_includes_premium_options(self, service):
        payload = _build(service, "prod-health-premier")
        assert payload["has_dental_premium"] is True
        assert payload["has_vision_full"] is True
        assert payload["has_dental"] is True
        assert payload["premium_amount"] == 500.0

    def test_supplementary_rider_dropped_when_not_included(self, service):
        payload = _build(service, "prod-life-supplementary", ad_d_included=False)
        assert payload["ad_d_included"] is False
        assert payload["ad_d_coverage"] is None

    def test_externally_priced_uses_draft_premium(self, service):
        assert _build(service, "prod-life-dependents")["premium_amount"] == 0.0
        assert _build(service, "prod-life-dependents", premium_amount=85.5)["premium_amount"] == 85.5


class TestGate:
    """build_payload refuses drafts with violations."""

    def test_violations_raise(self, products):
        product = products["prod-life-basic"]
        rules = FamilyResolver().resolve(product)
        draft, _ = parse_draft(VALID_DRAFTS["prod-life-basic"])
        evaluation = EvaluationResult(
            evaluation_id="e-1",
            status="failed",
            violations=[Violation("beneficiaries", ViolationRule.PERCENTAGE_SUM_INVALID, "Bad sum")],
        )
        with pytest.raises(SubmissionError) as exc_info:
            build_payload(evaluation, draft, product, rules, as_of=AS_OF)
        assert len(exc_info.value.violations) == 1
        assert exc_info.value.product_id == "prod-life-basic"
