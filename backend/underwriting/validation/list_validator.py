"""
List Validator — generic checks over ordered beneficiary/dependent lists.

Every function returns a (possibly empty) list of Violations and never
raises.  Entries are addressed by integer index in the violation field.
"""

from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Mapping, Sequence

from underwriting.core.config import settings
from underwriting.core.constants import Relationship, ViolationRule
from underwriting.policy.draft import Beneficiary, Dependent
from underwriting.validation.dates import age_on
from underwriting.validation.violations import Violation, entry_field


def validate_count(
    items: Sequence,
    minimum: int | None,
    maximum: int | None,
    *,
    field: str,
    unlimited_when_zero: bool = False,
) -> list[Violation]:
    """
    Check ``minimum <= len(items) <= maximum``.

    ``maximum == 0`` forbids any entry, unless the caller declares zero
    as unlimited (beneficiary lists).  A missing bound is not checked.
    """
    count = len(items)
    if maximum == 0 and not unlimited_when_zero:
        if count:
            return [Violation(field, ViolationRule.COUNT_OUT_OF_RANGE,
                              f"No entries allowed, got {count}")]
        return []

    if minimum is not None and count < minimum:
        return [Violation(field, ViolationRule.COUNT_OUT_OF_RANGE,
                          f"At least {minimum} required, got {count}")]

    if maximum and count > maximum:
        return [Violation(field, ViolationRule.COUNT_OUT_OF_RANGE,
                          f"At most {maximum} allowed, got {count}")]
    return []


def validate_entry_completeness(
    entry: Beneficiary | Dependent,
    *,
    list_name: str,
    index: int,
) -> list[Violation]:
    """
    Required strings must be non-blank; required numerics must be > 0.

    ``custom_relation`` becomes required when the relationship is ``other``.
    """
    violations: list[Violation] = []

    def incomplete(attr: str, message: str) -> None:
        violations.append(Violation(
            entry_field(list_name, index, attr),
            ViolationRule.INCOMPLETE_ENTRY,
            message,
        ))

    if not (entry.name or "").strip():
        incomplete("name", "Name is required")
    if not (entry.relationship or "").strip():
        incomplete("relationship", "Relationship is required")
    elif entry.relationship == Relationship.OTHER and not (entry.custom_relation or "").strip():
        incomplete("custom_relation", "Specify the relationship")

    if isinstance(entry, Beneficiary):
        if entry.percentage is None or entry.percentage <= 0:
            incomplete("percentage", "Percentage must be greater than 0")
        elif entry.percentage > 100:
            violations.append(Violation(
                entry_field(list_name, index, "percentage"),
                ViolationRule.OUT_OF_RANGE,
                "Percentage cannot exceed 100",
            ))
    elif entry.birth_date is None:
        incomplete("birth_date", "Birth date is required")

    return violations


def validate_percentage_sum(
    beneficiaries: Sequence[Beneficiary],
    *,
    field: str = "beneficiaries",
    tolerance: float | None = None,
) -> list[Violation]:
    """Exactly one violation when a non-empty list does not sum to 100."""
    if not beneficiaries:
        return []
    tolerance = settings.PERCENTAGE_SUM_TOLERANCE if tolerance is None else tolerance
    total = sum(b.percentage or 0 for b in beneficiaries)
    if abs(round(total - 100, 6)) > tolerance:
        return [Violation(
            field,
            ViolationRule.PERCENTAGE_SUM_INVALID,
            f"Percentages must add up to 100, got {round(total, 2)}",
        )]
    return []


def validate_relationship_cardinality(
    items: Sequence[Beneficiary | Dependent],
    rules: Mapping[str, int],
    *,
    field: str = "dependents",
) -> list[Violation]:
    """``rules`` maps relationship → maximum count, e.g. {"spouse": 1, "child": 3}."""
    counts = Counter(str(item.relationship) for item in items if item.relationship)
    violations = []
    for relationship, limit in rules.items():
        relationship = str(relationship)
        if counts[relationship] > limit:
            violations.append(Violation(
                field,
                ViolationRule.RELATIONSHIP_CARDINALITY,
                f"At most {limit} '{relationship}' entries allowed, got {counts[relationship]}",
            ))
    return violations


def validate_dependent_age(
    dependent: Dependent,
    as_of: date,
    *,
    index: int,
    ceiling: int | None = None,
    list_name: str = "dependents",
) -> list[Violation]:
    """A child dependent may not be older than ``ceiling`` on ``as_of``."""
    if dependent.relationship != Relationship.CHILD or dependent.birth_date is None:
        return []
    ceiling = settings.CHILD_AGE_CEILING if ceiling is None else ceiling
    age = age_on(dependent.birth_date, as_of)
    if age > ceiling:
        return [Violation(
            entry_field(list_name, index, "birth_date"),
            ViolationRule.AGE_OUT_OF_RANGE,
            f"Child dependents must be {ceiling} or younger, got {age}",
        )]
    return []


def validate_birth_date_not_future(
    dependent: Dependent,
    as_of: date,
    *,
    index: int,
    list_name: str = "dependents",
) -> list[Violation]:
    if dependent.birth_date is not None and dependent.birth_date > as_of:
        return [Violation(
            entry_field(list_name, index, "birth_date"),
            ViolationRule.INVALID_DATE,
            "Birth date cannot be in the future",
        )]
    return []
