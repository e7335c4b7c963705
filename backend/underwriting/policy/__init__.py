"""Policy draft model and raw field parsing."""

from underwriting.policy.draft import Beneficiary, Dependent, PolicyDraft, parse_draft

__all__ = ["Beneficiary", "Dependent", "PolicyDraft", "parse_draft"]
