"""
FamilyResolver — maps a product configuration to its family rule set.

Each product family gets exactly one FamilyRules implementation; the
rule steps are shared and the family switches decide which of them
apply.

To add a new family:
    1. Add the tag to ProductFamily
    2. Implement its FamilyRules subclass in families/
    3. Register it in FAMILY_REGISTRY and REQUIRED_BOUNDS
"""

from __future__ import annotations

from underwriting.catalog.product import ProductConfig
from underwriting.core.logging import get_logger
from underwriting.errors import FamilyResolutionError
from underwriting.pipeline.families import FAMILY_REGISTRY, FamilyRules

logger = get_logger(__name__)


class FamilyResolver:
    """Resolves a product to the rule set of its family."""

    def __init__(self, registry: dict[str, type[FamilyRules]] | None = None) -> None:
        self.registry = registry or FAMILY_REGISTRY

    def resolve(self, product: ProductConfig) -> FamilyRules:
        """
        Return the rule set for ``product``.

        Raises:
            FamilyResolutionError: If no rule set is registered for the family.
        """
        rules_cls = self.registry.get(product.family)
        if rules_cls is None:
            logger.error("No rules registered for family", product_id=product.id, family=product.family)
            raise FamilyResolutionError(
                f"No rules registered for family '{product.family}'",
                product_id=product.id,
                family=product.family,
                details={"available": self.list_available_families()},
            )
        return rules_cls()

    def list_available_families(self) -> list[str]:
        """Return all registered family tags."""
        return [str(f) for f in self.registry]
