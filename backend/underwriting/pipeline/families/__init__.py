"""
Family registry.

Maps each ProductFamily to its rule set.  Add new families here.
"""

from underwriting.core.constants import ProductFamily
from underwriting.pipeline.families.base import FamilyRules
from underwriting.pipeline.families.health import (
    HealthBasicRules,
    HealthFamiliarRules,
    HealthIntermediateRules,
    HealthPremierRules,
)
from underwriting.pipeline.families.life import (
    AddStandaloneRules,
    LifeBasicRules,
    LifeDependentsRules,
    LifeSupplementaryRules,
)

FAMILY_REGISTRY: dict[ProductFamily, type[FamilyRules]] = {
    ProductFamily.LIFE_BASIC: LifeBasicRules,
    ProductFamily.LIFE_SUPPLEMENTARY: LifeSupplementaryRules,
    ProductFamily.LIFE_DEPENDENTS: LifeDependentsRules,
    ProductFamily.ADD_STANDALONE: AddStandaloneRules,
    ProductFamily.HEALTH_BASIC: HealthBasicRules,
    ProductFamily.HEALTH_INTERMEDIATE: HealthIntermediateRules,
    ProductFamily.HEALTH_FAMILIAR: HealthFamiliarRules,
    ProductFamily.HEALTH_PREMIER: HealthPremierRules,
}

__all__ = ["FAMILY_REGISTRY", "FamilyRules"]
