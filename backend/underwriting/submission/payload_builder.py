"""
Build the storage-ready policy payload from a validated draft.

No I/O: the caller hands the payload to the Policy Repository.  Dates
are ISO strings and list entries plain dicts, so the payload is JSON
ready and can be fed back through ``parse_draft``.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from underwriting.catalog.product import ProductConfig
from underwriting.core.constants import PolicyStatus
from underwriting.core.logging import get_logger
from underwriting.errors import SubmissionError
from underwriting.pipeline.engine import EvaluationResult
from underwriting.pipeline.families.base import FamilyRules
from underwriting.policy.draft import PolicyDraft
from underwriting.submission.applicability import PAYLOAD_FIELDS, applicable_fields
from underwriting.validation.dates import term_end_date

logger = get_logger(__name__)


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _beneficiary_dicts(draft: PolicyDraft) -> list[dict[str, Any]]:
    return [
        {
            "name": b.name,
            "relationship": b.relationship,
            "percentage": b.percentage,
            "custom_relation": b.custom_relation,
        }
        for b in draft.beneficiaries
    ]


def _dependent_dicts(draft: PolicyDraft) -> list[dict[str, Any]]:
    return [
        {
            "name": d.name,
            "birth_date": _iso(d.birth_date),
            "relationship": d.relationship,
            "custom_relation": d.custom_relation,
        }
        for d in draft.dependents
    ]


def build_payload(
    evaluation: EvaluationResult,
    draft: PolicyDraft,
    product: ProductConfig,
    rules: FamilyRules,
    *,
    as_of: date,
) -> dict[str, Any]:
    """
    Turn a zero-violation draft into the canonical policy payload.

    Forces ``status = pending``, fills product-fixed and derived values,
    derives the composite dental/vision flags and list counts, then nulls
    every key not applicable to the product's family.

    Raises:
        SubmissionError: If the evaluation still carries violations.
    """
    if evaluation.violations:
        raise SubmissionError(
            f"Draft has {len(evaluation.violations)} unresolved violation(s)",
            product_id=product.id,
            family=product.family,
            violations=list(evaluation.violations),
        )

    premium = evaluation.premium
    if premium is None:
        premium = draft.premium_amount if draft.premium_amount is not None else 0.0

    end_date = (
        term_end_date(draft.start_date, product.duration_months)
        if draft.start_date is not None and product.duration_months is not None
        else draft.end_date
    )

    values: dict[str, Any] = {
        "product_id": product.id,
        "client_id": draft.client_id,
        "agent_id": draft.agent_id,
        "start_date": _iso(draft.start_date),
        "end_date": _iso(end_date),
        "premium_amount": round(premium, 2),
        "payment_frequency": product.payment_frequency or draft.payment_frequency,
        "status": PolicyStatus.PENDING,
        "contract_details": draft.contract_details,
        # Life
        "coverage_amount": draft.coverage_amount,
        "ad_d_included": draft.ad_d_included,
        "ad_d_coverage": draft.ad_d_coverage,
        "beneficiaries": _beneficiary_dicts(draft),
        "num_beneficiaries": len(draft.beneficiaries),
        "age_at_inscription": draft.insured_age(as_of),
        "max_age_inscription": product.max_age,
        "wellness_rebate": product.wellness_rebate_percentage,
        # Health
        "deductible": draft.deductible,
        "coinsurance": product.coinsurance_percentage,
        "max_annual": product.max_annual_out_of_pocket,
        "has_dental_basic": draft.has_dental_basic,
        "wants_dental_premium": draft.wants_dental_premium,
        "has_dental_premium": draft.has_dental_premium,
        "has_vision_basic": draft.has_vision_basic,
        "wants_vision": draft.wants_vision,
        "has_vision_full": draft.has_vision_full,
        "dependents_details": _dependent_dicts(draft),
        "num_dependents": len(draft.dependents),
    }
    values.update(rules.payload_overrides(draft, product))

    values["has_dental"] = bool(
        values["has_dental_basic"] or values["wants_dental_premium"] or values["has_dental_premium"]
    )
    values["has_vision"] = bool(
        values["has_vision_basic"] or values["wants_vision"] or values["has_vision_full"]
    )

    applicable = applicable_fields(product.family)
    payload = {key: (values[key] if key in applicable else None) for key in PAYLOAD_FIELDS}

    logger.debug(
        "Payload built",
        product_id=product.id,
        family=product.family,
        nulled=sorted(k for k in PAYLOAD_FIELDS if k not in applicable),
    )
    return payload
