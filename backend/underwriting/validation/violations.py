"""
Violation — one recoverable rule failure.

Violations are plain records, accumulated by the pipeline and returned
together.  List entries are addressed by integer index inside the
field path, e.g. ``beneficiaries[1].percentage``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Violation:
    """A failed rule against a single field."""

    field: str
    rule: str                       # ViolationRule value
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "rule": str(self.rule), "message": self.message}

    def applies_to(self, field_name: str) -> bool:
        """True if this violation concerns ``field_name`` or one of its entries."""
        return (
            self.field == field_name
            or self.field.startswith(f"{field_name}[")
            or self.field.startswith(f"{field_name}.")
        )


def entry_field(list_name: str, index: int, attr: str | None = None) -> str:
    """Field path of a list entry: ``entry_field("dependents", 0, "name")``."""
    path = f"{list_name}[{index}]"
    return f"{path}.{attr}" if attr else path
