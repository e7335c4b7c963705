"""
RuleStep — abstract base class for all validation steps.

Every check in the validation pipeline inherits from this class.
The engine calls check(), records the step result and logs it.
Steps only need to implement the rule logic and return violations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from underwriting.pipeline.context import EvaluationContext
from underwriting.validation.violations import Violation


class RuleStep(ABC):
    """
    Base class for every rule step.

    Subclasses MUST implement:
        - name (str)          — unique identifier, e.g. "dates"
        - description (str)   — human-readable label for logs
        - fields (tuple)      — draft fields this step reports on
        - check(ctx)          — the rule logic

    Subclasses MAY implement:
        - should_skip(ctx)    — return True to skip this step conditionally

    A ``fatal`` step that reports any violation stops the run.
    """

    name: str = "unnamed_rule"
    description: str = "No description"
    fields: tuple[str, ...] = ()
    fatal: bool = False

    @abstractmethod
    def check(self, ctx: EvaluationContext) -> list[Violation]:
        """Return every violation found; never raise for bad input."""
        ...

    def should_skip(self, ctx: EvaluationContext) -> bool:
        """Return True to skip this step.  Default: never skip."""
        return False

    def concerns(self, field_name: str) -> bool:
        """True if this step reports on ``field_name``."""
        return any(
            field_name == f or field_name.startswith((f"{f}[", f"{f}."))
            for f in self.fields
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
