"""Shared constants and enums used across the application."""

from enum import StrEnum


class ProductFamily(StrEnum):
    """Closed set of product families, each with its own pricing and rules."""

    LIFE_BASIC = "LIFE_BASIC"
    LIFE_SUPPLEMENTARY = "LIFE_SUPPLEMENTARY"
    LIFE_DEPENDENTS = "LIFE_DEPENDENTS"
    ADD_STANDALONE = "ADD_STANDALONE"
    HEALTH_BASIC = "HEALTH_BASIC"
    HEALTH_INTERMEDIATE = "HEALTH_INTERMEDIATE"
    HEALTH_FAMILIAR = "HEALTH_FAMILIAR"
    HEALTH_PREMIER = "HEALTH_PREMIER"

    @property
    def is_health(self) -> bool:
        return self.value.startswith("HEALTH_")


class PaymentFrequency(StrEnum):
    """Premium payment frequencies."""

    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"


class PolicyStatus(StrEnum):
    """
    Persisted policy status.

    The transitions (pending → active | rejected | cancelled,
    active → cancelled | expired) are owned by the review flows; this
    package only ever produces PENDING.
    """

    PENDING = "pending"
    ACTIVE = "active"
    REJECTED = "rejected"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class Relationship(StrEnum):
    """Relationship of a beneficiary or dependent to the insured."""

    SPOUSE = "spouse"
    CHILD = "child"
    PARENT = "parent"
    SIBLING = "sibling"
    OTHER = "other"


class ProfileRole(StrEnum):
    """Roles stored on user profiles."""

    CLIENT = "client"
    AGENT = "agent"
    ADMIN = "admin"


class PremiumMode(StrEnum):
    """How a family arrives at its premium."""

    DERIVED = "DERIVED"        # computed by the family formula
    BOUNDED = "BOUNDED"        # user-entered, range-checked
    EXTERNAL = "EXTERNAL"      # priced outside this package


class ViolationRule(StrEnum):
    """Rule identifiers carried by every violation."""

    MISSING_REFERENCE = "missing_reference"
    REQUIRED = "required"
    INVALID_VALUE = "invalid_value"
    INVALID_DATE = "invalid_date"
    DATE_ORDER = "date_order"
    START_IN_PAST = "start_in_past"
    TERM_MISMATCH = "term_mismatch"
    OUT_OF_RANGE = "out_of_range"
    FIXED_VALUE_MISMATCH = "fixed_value_mismatch"
    FREQUENCY_MISMATCH = "frequency_mismatch"
    PREMIUM_FLOOR = "premium_floor"
    PREMIUM_MISMATCH = "premium_mismatch"
    COUNT_OUT_OF_RANGE = "count_out_of_range"
    INCOMPLETE_ENTRY = "incomplete_entry"
    PERCENTAGE_SUM_INVALID = "percentage_sum_invalid"
    RELATIONSHIP_CARDINALITY = "relationship_cardinality"
    AGE_OUT_OF_RANGE = "age_out_of_range"


class StepStatus(StrEnum):
    """Status of an individual rule step."""

    PASSED = "PASSED"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"


class EvaluationStatus(StrEnum):
    """Overall outcome of a pipeline run."""

    PASSED = "PASSED"
    FAILED = "FAILED"
    HALTED = "HALTED"          # a fatal step stopped the run
