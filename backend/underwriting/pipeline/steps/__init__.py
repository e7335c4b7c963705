"""Rule steps, in the order the pipeline runs them."""

from underwriting.pipeline.steps.dates import DatesStep
from underwriting.pipeline.steps.fixed_values import FixedValuesStep
from underwriting.pipeline.steps.lists import BeneficiariesStep, DependentsStep
from underwriting.pipeline.steps.premium import PremiumStep
from underwriting.pipeline.steps.ranges import RangesStep
from underwriting.pipeline.steps.references import ReferencesStep
from underwriting.pipeline.steps.rider import AdDRiderStep

__all__ = [
    "AdDRiderStep",
    "BeneficiariesStep",
    "DatesStep",
    "DependentsStep",
    "FixedValuesStep",
    "PremiumStep",
    "RangesStep",
    "ReferencesStep",
]
