"""
PolicyDraft — the transient, immutable snapshot of an application.

Intake flows hand over raw field values (form strings, JSON numbers,
dicts for list entries).  ``parse_draft`` normalises them into a typed
PolicyDraft and reports every value it could not interpret as an
``invalid_value`` violation on the offending field instead of raising.
"""

from __future__ import annotations

import math
from datetime import date
from typing import Annotated, Any, Mapping

from pydantic import BaseModel, BeforeValidator, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from underwriting.core.constants import PaymentFrequency, PolicyStatus, Relationship, ViolationRule
from underwriting.validation.dates import age_on
from underwriting.validation.violations import Violation, entry_field


def _normalise_relationship(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().lower()
    return value


# Intake forms send "Spouse", "CHILD", ...
RelationshipValue = Annotated[Relationship, BeforeValidator(_normalise_relationship)]


class Beneficiary(BaseModel):
    """Person entitled to a share of a life policy's payout."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    relationship: RelationshipValue | None = None
    percentage: float | None = None
    custom_relation: str | None = None


class Dependent(BaseModel):
    """Person covered in addition to the primary insured."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    birth_date: date | None = None
    relationship: RelationshipValue | None = None
    custom_relation: str | None = None


class PolicyDraft(BaseModel):
    """Typed draft.  Fields not supplied by the intake flow stay ``None``."""

    model_config = ConfigDict(frozen=True)

    # ── References ──────────────────────────────
    product_id: str | None = None
    client_id: str | None = None
    agent_id: str | None = None

    # ── Term & premium ──────────────────────────
    start_date: date | None = None
    end_date: date | None = None
    premium_amount: float | None = None
    payment_frequency: PaymentFrequency | None = None
    status: PolicyStatus | None = None

    # ── Life ────────────────────────────────────
    coverage_amount: float | None = None
    ad_d_included: bool | None = None
    ad_d_coverage: float | None = None
    age_at_inscription: int | None = None
    insured_birth_date: date | None = None

    # ── Health ──────────────────────────────────
    deductible: float | None = None
    coinsurance: float | None = None
    max_annual: float | None = None
    has_dental_basic: bool | None = None
    wants_dental_premium: bool | None = None
    has_dental_premium: bool | None = None
    has_vision_basic: bool | None = None
    wants_vision: bool | None = None
    has_vision_full: bool | None = None

    # ── Lists ───────────────────────────────────
    beneficiaries: tuple[Beneficiary, ...] = ()
    dependents: tuple[Dependent, ...] = ()

    # ── Free-form ───────────────────────────────
    contract_details: str | None = None
    policy_number: str | None = None

    def insured_age(self, as_of: date) -> int | None:
        """Age at inscription, derived from the insured's birth date at the start date if not given."""
        if self.age_at_inscription is not None:
            return self.age_at_inscription
        if self.insured_birth_date is not None:
            return age_on(self.insured_birth_date, self.start_date or as_of)
        return None


NON_NEGATIVE_FIELDS = frozenset({
    "premium_amount",
    "coverage_amount",
    "ad_d_coverage",
    "age_at_inscription",
    "deductible",
    "coinsurance",
    "max_annual",
})

# Store payloads name the dependent list differently
LIST_ALIASES = {"dependents_details": "dependents"}

_LIST_MODELS: dict[str, type[BaseModel]] = {
    "beneficiaries": Beneficiary,
    "dependents": Dependent,
}

_SCALAR_ADAPTERS: dict[str, TypeAdapter] = {
    name: TypeAdapter(info.annotation)
    for name, info in PolicyDraft.model_fields.items()
    if name not in _LIST_MODELS
}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _invalid(field: str, raw: Any) -> Violation:
    return Violation(field, ViolationRule.INVALID_VALUE, f"Invalid value: {raw!r}")


def _parse_scalar(
    adapter: TypeAdapter,
    field: str,
    raw: Any,
    *,
    non_negative: bool = False,
) -> tuple[Any, Violation | None]:
    if _is_blank(raw):
        return None, None
    if isinstance(raw, str):
        raw = raw.strip()
    try:
        value = adapter.validate_python(raw)
    except PydanticValidationError:
        return None, _invalid(field, raw)
    if isinstance(value, float) and not math.isfinite(value):
        return None, _invalid(field, raw)
    if non_negative and value is not None and value < 0:
        return None, Violation(field, ViolationRule.INVALID_VALUE, f"Must not be negative, got {value}")
    return value, None


def _parse_entries(
    list_name: str,
    raw: Any,
) -> tuple[tuple[BaseModel, ...], list[Violation]]:
    model = _LIST_MODELS[list_name]
    if raw is None:
        return (), []
    if isinstance(raw, (str, bytes, Mapping)) or not hasattr(raw, "__iter__"):
        return (), [_invalid(list_name, raw)]

    entries: list[BaseModel] = []
    violations: list[Violation] = []
    for index, item in enumerate(raw):
        if isinstance(item, model):
            entries.append(item)
            continue
        if isinstance(item, BaseModel):
            item = item.model_dump()
        if not isinstance(item, Mapping):
            violations.append(_invalid(entry_field(list_name, index), item))
            continue

        values: dict[str, Any] = {}
        for attr, info in model.model_fields.items():
            raw_value = item.get(attr)
            if info.annotation is str:
                values[attr] = "" if raw_value is None else str(raw_value).strip()
                continue
            value, violation = _parse_scalar(
                TypeAdapter(info.annotation),
                entry_field(list_name, index, attr),
                raw_value,
                non_negative=attr == "percentage",
            )
            if violation:
                violations.append(violation)
            values[attr] = value
        entries.append(model(**values))

    return tuple(entries), violations


def parse_draft(fields: Mapping[str, Any] | PolicyDraft) -> tuple[PolicyDraft, list[Violation]]:
    """
    Normalise raw draft fields.

    Returns the typed draft plus one ``invalid_value`` violation per
    field that could not be parsed (that field is left as ``None``).
    Unknown keys are ignored so stored payloads can be fed back in.
    """
    if isinstance(fields, PolicyDraft):
        return fields, []

    values: dict[str, Any] = {}
    violations: list[Violation] = []

    for name, adapter in _SCALAR_ADAPTERS.items():
        value, violation = _parse_scalar(
            adapter, name, fields.get(name), non_negative=name in NON_NEGATIVE_FIELDS,
        )
        if violation:
            violations.append(violation)
        values[name] = value

    for list_name in _LIST_MODELS:
        raw = fields.get(list_name)
        if raw is None:
            for alias, target in LIST_ALIASES.items():
                if target == list_name and fields.get(alias) is not None:
                    raw = fields[alias]
        entries, entry_violations = _parse_entries(list_name, raw)
        values[list_name] = entries
        violations.extend(entry_violations)

    return PolicyDraft(**values), violations
