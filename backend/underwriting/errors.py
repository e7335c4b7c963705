"""
Domain-specific exception hierarchy for the underwriting core.

All exceptions inherit from UnderwritingError so callers can catch
broadly or narrowly as needed.  Each exception carries structured
context (product id, family, etc.) for logging/debugging.

Recoverable rule failures are NOT exceptions: they are collected as
``Violation`` records (see ``underwriting.validation.violations``) and
returned together.  Only fatal conditions are raised.
"""

from __future__ import annotations


class UnderwritingError(Exception):
    """Base exception for all underwriting errors."""

    def __init__(
        self,
        message: str,
        *,
        product_id: str | None = None,
        family: str | None = None,
        details: dict | None = None,
    ) -> None:
        self.product_id = product_id
        self.family = family
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(UnderwritingError):
    """Unknown product, inactive product or a required bound is missing."""

    def __init__(
        self,
        message: str,
        *,
        missing: list[str] | None = None,
        **kwargs,
    ) -> None:
        self.missing = missing or []
        super().__init__(message, **kwargs)


class FamilyResolutionError(ConfigurationError):
    """No rule set is registered for a product family."""
    pass


class SubmissionError(UnderwritingError):
    """A payload was requested for a draft that still has violations."""

    def __init__(
        self,
        message: str,
        *,
        violations: list | None = None,
        **kwargs,
    ) -> None:
        self.violations = violations or []
        super().__init__(message, **kwargs)


class PersistenceError(UnderwritingError):
    """The Policy Repository rejected a payload."""
    pass
